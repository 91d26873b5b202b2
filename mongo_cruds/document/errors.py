"""
Error taxonomy for document stores.

Backend conditions that can be recognized (duplicate keys, missing documents, unsupported
query shapes) and deserialization failures are translated into the exceptions below, each
carrying the document context. Every other backend error propagates unchanged so callers
can still inspect pymongo's own detail.
"""
from enum import StrEnum, auto
from typing import ClassVar

from pymongo.errors import DuplicateKeyError, PyMongoError

from .document_context import DocumentContext


class ErrorKind(StrEnum):
	NOT_FOUND = auto()
	CONFLICT = auto()
	CORRUPT = auto()
	BAD_REQUEST = auto()
	SKIPPED = auto()


class DocumentStoreError(Exception):
	""" Base class for normalized document store errors. Compare by class or by .kind. """
	kind: ClassVar[ErrorKind]
	description: ClassVar[str] = "document store error"

	def __init__(self, cause: str, context: DocumentContext | None = None) -> None:
		self.cause = cause
		self.context = context
		self.message = f"{self.description} {cause}"
		super().__init__(self.message)

class DocumentNotFound(DocumentStoreError):
	kind = ErrorKind.NOT_FOUND
	description = "document not found"

class DocumentConflict(DocumentStoreError):
	kind = ErrorKind.CONFLICT
	description = "document already exists"

class DocumentCorrupt(DocumentStoreError):
	kind = ErrorKind.CORRUPT
	description = "document corrupt"

class QueryNotSupported(DocumentStoreError):
	kind = ErrorKind.BAD_REQUEST
	description = "query not supported"

class DocumentSkipped(DocumentStoreError):
	""" Never raised. Handed to a SkipReporter when search() drops a row it cannot deserialize. """
	kind = ErrorKind.SKIPPED
	description = "document skipped because of error"


# region: Normalization
def normalize_insert_error(error: PyMongoError, context: DocumentContext) -> Exception:
	""" Returns the exception to raise for a failed insert. Anything other than a duplicate key is passed through. """
	if isinstance(error, DuplicateKeyError):
		return DocumentConflict(f"(document '{context.document_id}' already exists)", context)
	return error

def not_found(context: DocumentContext) -> DocumentNotFound:
	return DocumentNotFound(f"(ID: {context.document_id})", context)

def corrupt(error: Exception, context: DocumentContext) -> DocumentCorrupt:
	return DocumentCorrupt(f"(deserialization failed: {error})", context)

def skipped(error: Exception, context: DocumentContext) -> DocumentSkipped:
	return DocumentSkipped(f"(deserialization failed: {error})", context)

def unsupported_query(cause: str, context: DocumentContext) -> QueryNotSupported:
	return QueryNotSupported(f"({cause})", context)
# endregion
