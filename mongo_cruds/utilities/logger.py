"""
Logger module for mongo_cruds.

This module provides a centralized logger that can be imported throughout the package
without causing circular import issues. Handlers are left to the host application.
"""

import logging

# Module-level logger
logger: logging.Logger = logging.getLogger('mongo_cruds')
logger.setLevel(logging.WARNING)  # Default to WARNING level to avoid spam

def get_logger() -> logging.Logger:
    """ Returns the current package logger. Use this instead of importing `logger` directly when the logger may be swapped out at runtime. """
    return logger

def set_logger(custom_logger: logging.Logger) -> None:
    """Allow users to provide their own logger."""
    global logger
    logger = custom_logger

def set_log_level(level: int) -> None:
    """Set the logging level for the package.

    Args:
        level: logging.DEBUG, logging.INFO, logging.WARNING, logging.ERROR, or logging.CRITICAL
    """
    logger.setLevel(level)
