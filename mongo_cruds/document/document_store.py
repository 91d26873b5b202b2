import time
from collections.abc import Callable, Sequence
from datetime import datetime, timezone
from typing import Any, TypeVar

from pymongo.client_session import ClientSession
from pymongo.collection import Collection
from pymongo.database import Database
from pymongo.errors import PyMongoError

from .document_api import DocumentAPI
from .document_context import DocumentContext
from .document_id import DocumentId
from .errors import DocumentSkipped, corrupt, normalize_insert_error, not_found, skipped, unsupported_query
from .query import Query, build_filter, find_unsupported_combination
from .update import Updates, timestamp_instructions, to_instructions, to_update_document
from .update_method import UpdateMethod
from ..typing.codec import DataclassCodec, DocumentCodec
from ..utilities.logger import get_logger


T = TypeVar('T')
D = TypeVar('D')

SkipReporter = Callable[[DocumentSkipped], None]
""" Receives one notice per row that search() had to leave out. """

def log_skipped_document(error: DocumentSkipped) -> None:
	""" Default SkipReporter. """
	get_logger().error(f"{error}\n\n{error.context}")

def utc_now() -> datetime:
	return datetime.now(timezone.utc)


class DocumentStore(DocumentAPI[T]):
	""" Create/Read/Update/Delete/Search over the documents stored in one Mongo collection.

	The store holds no state of its own beyond its configuration, so one instance per collection can be shared between threads.
	Every method accepts an optional ClientSession which is forwarded to each database call. Timeouts are left to the caller
	(pymongo.timeout() or the client's timeoutMS).

	With timestamps enabled (the default), create() stamps `created` and `updated` and update() advances `updated`.
	NOTE: The create() stamp is written by a second call after the insert. If that call fails, the document stays stored without timestamps.
	"""

	def __init__(
		self,
		db: Database,
		path: str,
		codec: DocumentCodec[T],
		*,
		timestamps: bool = True,
		skip_reporter: SkipReporter = log_skipped_document,
		clock: Callable[[], datetime] = utc_now,
	) -> None:
		if not path:
			raise ValueError("Collection path must not be empty.")
		self._path = path
		self._collection: Collection = db[path]
		self.codec = codec
		self.timestamps = timestamps
		self.skip_reporter = skip_reporter
		self.clock = clock

	@classmethod
	def for_dataclass(cls, db: Database, path: str, document_cls: type[D], **kwargs: Any) -> 'DocumentStore[D]':
		""" Shortcut for a store of dataclass documents. """
		return cls(db, path, DataclassCodec(document_cls), **kwargs) # type: ignore[arg-type]

	@property
	def path(self) -> str:
		""" The collection this store reads and writes. Fixed for the lifetime of the store. """
		return self._path

	def _context(self, document_id: Any = None) -> DocumentContext:
		return DocumentContext(
			collection_name=self._path,
			document_id=str(document_id) if document_id is not None else None
		)

	def create(self, document_id: str, document: T, *, session: ClientSession | None = None) -> None:
		""" Inserts the document under document_id. Raises DocumentConflict if a document with that id already exists. """
		document_id = DocumentId(document_id)
		context = self._context(document_id)
		now = self.clock()

		encoded = self.codec.encode(document)
		if "_id" in encoded and encoded["_id"] != str(document_id):
			raise ValueError(f"Document carries _id {encoded['_id']!r}, which does not match the document id '{document_id}'.")
		bson_doc = encoded | { "_id": str(document_id) }
		try:
			self._collection.insert_one(bson_doc, session=session)
		except PyMongoError as e:
			normalized = normalize_insert_error(e, context)
			if normalized is e:
				raise
			raise normalized from e

		if not self.timestamps:
			return

		self._collection.update_one(
			{ "_id": str(document_id) },
			to_update_document(timestamp_instructions(UpdateMethod.INSERT, now)),
			session=session
		)

	def read(self, document_id: str, *, session: ClientSession | None = None) -> T:
		""" Returns the document stored under document_id.
		Raises DocumentNotFound if there is none, and DocumentCorrupt if it can't be deserialized. """
		start_time = time.time()

		document_id = DocumentId(document_id)
		context = self._context(document_id)

		bson = self._collection.find_one({ "_id": str(document_id) }, session=session)
		if bson is None:
			raise not_found(context)

		bson.pop("_id", None)
		try:
			document = self.codec.decode(bson, context)
		except (ValueError, TypeError) as e:
			raise corrupt(e, context) from e

		get_logger().debug(f"Database usage: retrieved document '{document_id}' from '{self._path}' in {(time.time() - start_time):.3f} seconds")
		return document

	def update(self, document_id: str, updates: Updates, *, session: ClientSession | None = None) -> None:
		""" Sets each field path in updates to its new value. An empty mapping is a valid update (it only advances `updated`).
		With timestamps enabled, `updated` belongs to the store and passing it raises ValueError.

		NOTE: A missing document raises ValueError, not DocumentNotFound. Only read() normalizes missing documents. """
		start_time = time.time()

		document_id = DocumentId(document_id)
		instructions = to_instructions(updates)
		if self.timestamps:
			stamps = timestamp_instructions(UpdateMethod.UPDATE, self.clock())
			stamped_paths = { stamp.path for stamp in stamps }
			for instruction in instructions:
				if instruction.path in stamped_paths:
					raise ValueError(f"'{instruction.path}' is set by the store on every update and cannot be updated directly.")
			instructions += stamps

		# Mongo rejects an empty $set, and there is nothing to write anyway
		if not instructions:
			return

		result = self._collection.update_one(
			{ "_id": str(document_id) },
			to_update_document(instructions),
			session=session
		)
		if result.acknowledged and result.matched_count != 1:
			raise ValueError(f"Error updating the document. Are you sure a document with _id {document_id} exists in '{self._path}'?")

		get_logger().debug(f"Database usage: updated document '{document_id}' in '{self._path}' in {(time.time() - start_time):.3f} seconds")

	def delete(self, document_id: str, *, session: ClientSession | None = None) -> None:
		""" Deletes the document. Deleting a document that doesn't exist is not an error. """
		document_id = DocumentId(document_id)
		self._collection.delete_one({ "_id": str(document_id) }, session=session)

	def search(self, queries: Sequence[Query] = (), *, session: ClientSession | None = None) -> list[T]:
		""" Returns every document matching all of the queries, or every document in the collection when there are none.

		Rows that can't be deserialized are left out and reported to the skip reporter instead of failing the search.
		Raises QueryNotSupported when the queries combine equality with inequality or range operators. Results come back in database order. """
		start_time = time.time()

		queries = list(queries or ())
		if not queries:
			mongo_filter: dict[str, Any] = {}
		else:
			cause = find_unsupported_combination(queries)
			if cause:
				raise unsupported_query(cause, self._context())
			mongo_filter = build_filter(queries)

		# Fetch everything first, so that a failing query never returns a partial result
		bson_docs = list(self._collection.find(mongo_filter, session=session))

		documents: list[T] = []
		for bson in bson_docs:
			document_context = self._context(bson.pop("_id", None))
			try:
				documents.append(self.codec.decode(bson, document_context))
			except (ValueError, TypeError) as e:
				self.skip_reporter(skipped(e, document_context))
				continue

		get_logger().debug(f"Database usage: retrieved {len(documents)} of {len(bson_docs)} documents from '{self._path}' for filter {mongo_filter} in {(time.time() - start_time):.3f} seconds")
		return documents
