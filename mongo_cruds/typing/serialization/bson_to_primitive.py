from datetime import datetime, timezone
from typing import Any

from .validate_primitive_dict import validate_primitive_dict
from ..registration.type_info import TypeInfo
from typing import TYPE_CHECKING
if TYPE_CHECKING:
	from ...document.document_context import DocumentContext


def bson_to_primitive(bson: Any, expected_type_info: TypeInfo, document_context: 'DocumentContext | None') -> Any:
	""" Converts a BSON value to a primitive type based on the expected type information. """

	# Deserialize into expected type
	if expected_type_info.type_ is dict:
		if not isinstance(bson, dict):
			raise ValueError(f"{bson!r} not of the expected type dict.\n\n# Document Context:\n{document_context}")
		validate_primitive_dict(bson)
		return bson

	elif expected_type_info.type_ is datetime:
		if not isinstance(bson, datetime):
			raise ValueError(f"{bson!r} not of the expected type datetime.\n\n# Document Context:\n{document_context}")
		# Clients without tz_aware hand back naive UTC dates
		if bson.tzinfo is None:
			return bson.replace(tzinfo=timezone.utc)
		return bson

	elif expected_type_info.type_ is str:
		if not isinstance(bson, str):
			raise ValueError(f"{bson!r} not of the expected type str.\n\n# Document Context:\n{document_context}")
		return str(bson)

	elif expected_type_info.type_ is float:
		# Mongo hands back whole-number doubles as ints when they were written as ints
		if isinstance(bson, bool) or not isinstance(bson, (int, float)):
			raise ValueError(f"{bson!r} not convertible to expected type float.\n\n# Document Context:\n{document_context}")
		return float(bson)

	elif expected_type_info.type_ is bool:
		if not isinstance(bson, bool):
			raise ValueError(f"{bson!r} not of the expected type bool.\n\n# Document Context:\n{document_context}")
		return bool(bson)

	elif expected_type_info.type_ is int:
		if isinstance(bson, bool) or not isinstance(bson, int):
			raise ValueError(f"{bson!r} not of the expected type int.\n\n# Document Context:\n{document_context}")
		return int(bson)

	else:
		raise ValueError(f"Unable to deserialize invalid primitive type {expected_type_info.type_}.\n\n# Document Context:\n{document_context}")
