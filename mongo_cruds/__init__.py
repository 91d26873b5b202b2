"""
mongo_cruds

Generic Create/Read/Update/Delete/Search over MongoDB collections, bound to Python document types.
"""

from .document import (
    DocumentAPI,
    DocumentStore,
    DocumentId,
    DocumentContext,
    Query,
    UpdateInstruction,
    ErrorKind,
    DocumentStoreError,
    DocumentNotFound,
    DocumentConflict,
    DocumentCorrupt,
    QueryNotSupported,
    DocumentSkipped,
    MongoSettings,
    create_mongo_client,
    create_mongo_db,
)
from .typing import DocumentCodec, DataclassCodec, DictCodec
from .utilities import SetupError, set_logger, set_log_level
