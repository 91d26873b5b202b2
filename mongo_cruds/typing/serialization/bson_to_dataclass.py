import dataclasses
from typing import Any, TypeVar, get_type_hints

from .bson_to_type_expectation import bson_to_type_expectation
from ..registration.get_type_expectation_from_type_annotation import get_type_expectation_from_type_annotation
from ...utilities.logger import get_logger
from typing import TYPE_CHECKING
if TYPE_CHECKING:
	from ...document.document_context import DocumentContext


T = TypeVar('T')

def bson_to_dataclass(bson: Any, cls: type[T], document_context: 'DocumentContext | None') -> T:
	""" Instantiates a dataclass from a bson document, using the dataclass's type annotations to interpret each field.
	If an annotated field has a default value, the default is used when the field is missing from the document. """
	if not isinstance(bson, dict):
		raise ValueError(f"Expected a document for {cls.__name__}, got {type(bson).__name__}.\n\n{document_context}")

	type_hints = get_type_hints(cls)
	obj_dict = {}

	# Look for all expected fields
	for field in dataclasses.fields(cls): # type: ignore[arg-type]
		if not field.init:
			continue

		# Look for this field in the following order:
		# 1. If the field name exists in the document, use that.
		# 2. If the field has a default, leave it out and let the dataclass fill it in.
		# 3. If all else fails, raise an Exception.
		if field.name in bson:
			field_context = document_context.subpath(field.name) if document_context else None
			type_expectation = get_type_expectation_from_type_annotation(type_hints[field.name])
			obj_dict[field.name] = bson_to_type_expectation(bson[field.name], type_expectation, field_context)

		elif field.default is not dataclasses.MISSING or field.default_factory is not dataclasses.MISSING:
			get_logger().debug(f"Using default value for {cls.__name__}.{field.name}.\n\n{document_context}")

		else:
			raise ValueError(f"Error converting document to object of type {cls.__name__}. Document missing a value for field {field.name}.\n\n{document_context}")

	# Fields beyond what the dataclass declares (such as stored timestamps) are left in the database only
	return cls(**obj_dict)
