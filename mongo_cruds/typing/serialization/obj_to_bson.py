import dataclasses
from typing import Any

from .primitive_to_bson import PRIMITIVES, primitive_to_bson


def obj_to_bson(obj: Any) -> Any:
	"""
	Serializes a Python object into Bson. Dataclasses become dicts keyed by field name, recursively.
	"""
	from ...document.document_id import DocumentId

	# Handle types from specific (complex) to general (simple)
	if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
		return {field.name: obj_to_bson(getattr(obj, field.name)) for field in dataclasses.fields(obj)}

	elif isinstance(obj, DocumentId):
		return str(obj)

	# Catch primitives based on an exact type match, so that subclasses of primitives are not silently flattened.
	elif type(obj) in PRIMITIVES:
		return primitive_to_bson(obj)

	elif obj is None:
		return None

	else:
		raise TypeError(f"Type {type(obj).__name__} not serializable.")
