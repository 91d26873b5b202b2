import dataclasses
from typing import Any, Generic, Protocol, TypeVar

from .registration.validate_type_annotation import validate_dataclass_fields
from .serialization.bson_to_type_annotation import bson_to_type_annotation
from .serialization.obj_to_bson import obj_to_bson
from .serialization.primitive_to_bson import primitive_to_bson
from .serialization.validate_primitive_dict import validate_primitive_dict
from typing import TYPE_CHECKING
if TYPE_CHECKING:
	from ..document.document_context import DocumentContext


T = TypeVar('T')
D = TypeVar('D')

class DocumentCodec(Protocol[T]):
	""" Binds a DocumentStore to a document type.
	decode() must raise ValueError or TypeError when a stored document cannot be turned back into a T. """

	def encode(self, document: T) -> dict[str, Any]:
		...

	def decode(self, bson: dict[str, Any], document_context: 'DocumentContext | None') -> T:
		...


class DataclassCodec(Generic[D]):
	""" Encodes dataclass instances field by field, and decodes by walking the dataclass's type annotations.
	Supported field types: str, int, float, bool, datetime, dict, DocumentId, nested dataclasses, list[X], tuple[X, ...] and X | None.
	Anything else is rejected here, before a document that could not be read back is ever written.

	Datetimes are stored as UTC with millisecond precision and read back timezone-aware (naive values are taken to be UTC). """

	def __init__(self, cls: type[D]) -> None:
		if not dataclasses.is_dataclass(cls) or not isinstance(cls, type):
			raise TypeError(f"DataclassCodec expects a dataclass type, got {cls!r}.")
		validate_dataclass_fields(cls)
		self.cls = cls

	def encode(self, document: D) -> dict[str, Any]:
		if not isinstance(document, self.cls):
			raise TypeError(f"Expected {self.cls.__name__}, but got {type(document).__name__}")
		return obj_to_bson(document)

	def decode(self, bson: dict[str, Any], document_context: 'DocumentContext | None') -> D:
		return bson_to_type_annotation(bson, self.cls, document_context)

	def __repr__(self) -> str:
		return f"DataclassCodec({self.cls.__name__})"


class DictCodec:
	""" Passes plain dicts of primitive values straight through. """

	def encode(self, document: dict[str, Any]) -> dict[str, Any]:
		if not isinstance(document, dict):
			raise TypeError(f"Expected dict, but got {type(document).__name__}")
		return primitive_to_bson(dict(document))

	def decode(self, bson: dict[str, Any], document_context: 'DocumentContext | None') -> dict[str, Any]:
		if not isinstance(bson, dict):
			raise ValueError(f"Expected a document, got {type(bson).__name__}.\n{document_context}")
		validate_primitive_dict(bson)
		return dict(bson)
