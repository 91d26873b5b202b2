from typing import Any

from .bson_to_type_expectation import bson_to_type_expectation
from ..registration.get_type_expectation_from_type_annotation import get_type_expectation_from_type_annotation
from typing import TYPE_CHECKING
if TYPE_CHECKING:
	from ...document.document_context import DocumentContext


# Document to obj
def bson_to_type_annotation(bson: Any, type_annotation: Any, document_context: 'DocumentContext | None') -> Any:
	""" Deserializes a Bson document into a Python object.

	Uses the annotation to interpret the Mongo document. """

	# Determine what type we expect from the bson. We must be able to coerce the document into this type.
	annotated_type_expectation = get_type_expectation_from_type_annotation(type_annotation)

	return bson_to_type_expectation(bson, annotated_type_expectation, document_context)
