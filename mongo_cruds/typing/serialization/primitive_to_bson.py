from datetime import datetime, timezone
from typing import Any

from .validate_primitive_dict import validate_primitive_dict


PRIMITIVES: frozenset[type] = frozenset({dict, list, tuple, datetime, str, float, int, bool})

def datetime_to_bson(obj: datetime) -> datetime:
	""" BSON dates are UTC with millisecond precision. Naive datetimes are taken to be UTC already. """
	if obj.tzinfo is None:
		obj = obj.replace(tzinfo=timezone.utc)
	else:
		obj = obj.astimezone(timezone.utc)
	return obj.replace(microsecond=obj.microsecond // 1000 * 1000)

def primitive_to_bson(obj: Any) -> Any:
	""" Converts a primitive object to its BSON representation. """
	from .obj_to_bson import obj_to_bson

	if type(obj) is dict:
		validate_primitive_dict(obj)
		return {key: obj_to_bson(value) for key, value in obj.items()}
	elif type(obj) in (list, tuple):
		return [obj_to_bson(item) for item in obj]
	elif type(obj) is datetime:
		return datetime_to_bson(obj)
	elif type(obj) in (str, float, int, bool):
		return obj
	else:
		raise TypeError(f"Unable to convert invalid primitive type {type(obj).__name__} to BSON.")
