from .logger import get_logger, set_logger, set_log_level
from .setup_error import SetupError
