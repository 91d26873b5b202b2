import dataclasses
from typing import Any

from .bson_to_primitive import bson_to_primitive
from .primitive_to_bson import PRIMITIVES
from ..registration.type_expectation import TypeExpectation
from ..registration.get_type_expectation_from_type_annotation import get_type_expectation_from_type_annotation
from typing import TYPE_CHECKING
if TYPE_CHECKING:
	from ...document.document_context import DocumentContext


def bson_to_type_expectation(bson: Any, type_expectation: TypeExpectation, document_context: 'DocumentContext | None') -> Any:
	""" Deserializes a Bson value into the specified type expectation. """
	from ...document.document_id import DocumentId
	from .bson_to_dataclass import bson_to_dataclass

	# Handle valid null cases
	if bson is None:
		if type_expectation.is_nullable:
			return None
		else:
			raise ValueError(f"Received None for type expectation {type_expectation} which is not nullable.\n{document_context}")

	expected_type = type_expectation.type_info.type_

	# Handle types from specific (complex) to general (simple)
	if dataclasses.is_dataclass(expected_type):
		return bson_to_dataclass(bson, expected_type, document_context)

	elif expected_type is DocumentId:
		if not isinstance(bson, str):
			raise ValueError(f"{bson!r} not of the expected type DocumentId.\n{document_context}")
		return DocumentId(bson)

	elif expected_type in (list, tuple):
		if not isinstance(bson, list):
			raise ValueError(f"{bson!r} not of the expected type {type_expectation}.\n{document_context}")
		item_type_expectation = get_type_expectation_from_type_annotation(type_expectation.type_info.sub_type)
		items = []
		for idx, item in enumerate(bson):
			item_context = document_context.subidx(idx) if document_context else None
			items.append(bson_to_type_expectation(item, item_type_expectation, item_context))
		return items if expected_type is list else tuple(items)

	# Catch primitives based on an exact type match. Subclasses of primitives are not supported.
	elif expected_type in PRIMITIVES:
		return bson_to_primitive(bson, type_expectation.type_info, document_context)

	else:
		raise ValueError(f"Unable to deserialize unsupported expected type {expected_type}.\n{document_context}")
