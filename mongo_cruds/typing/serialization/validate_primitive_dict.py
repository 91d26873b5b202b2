from datetime import datetime
from typing import Any


PRIMITIVE_TYPES = (datetime, str, float, int, bool, type(None))

def validate_is_primitive(value: Any, path: str) -> None:
    if not isinstance(value, PRIMITIVE_TYPES):
        raise TypeError(f"Structure contains non-primitive value of type {type(value).__name__} at '{path}'.")

def validate_primitive_dict(d: dict, path: str = "") -> None:
    """ Validate that a dictionary only holds BSON-safe primitive values, keyed by strings. Nested dicts and lists are checked recursively. """
    for key, value in d.items():
        if not isinstance(key, str):
            raise TypeError(f"Dictionary keys must be str, got {type(key).__name__} at '{path}'.")
        key_path = f"{path}.{key}" if path else key

        if isinstance(value, dict):
            validate_primitive_dict(value, key_path)
        elif isinstance(value, list):
            validate_primitive_list(value, key_path)
        else:
            validate_is_primitive(value, key_path)

def validate_primitive_list(l: list, path: str = "") -> None:
    """ Validate that all elements within a list are primitive values. """
    for idx, value in enumerate(l):
        item_path = f"{path}[{idx}]"
        if isinstance(value, dict):
            validate_primitive_dict(value, item_path)
        elif isinstance(value, list):
            validate_primitive_list(value, item_path)
        else:
            validate_is_primitive(value, item_path)
