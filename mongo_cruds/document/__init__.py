"""
Document module for CRUD and search operations over Mongo collections.

This module provides functionality for:
- Document CRUD operations and predicate search (DocumentStore)
- Translating predicates and field updates into Mongo filters and update documents
- Normalizing database errors into a small set of error kinds
- MongoDB connection settings
"""

from .document_id import DocumentId
from .document_context import DocumentContext
from .document_api import DocumentAPI
from .document_store import DocumentStore, SkipReporter, log_skipped_document
from .errors import (
    ErrorKind,
    DocumentStoreError,
    DocumentNotFound,
    DocumentConflict,
    DocumentCorrupt,
    QueryNotSupported,
    DocumentSkipped,
)
from .query import Query, UNKNOWN_OPERATOR, to_mongo_operator, build_filter
from .update import UpdateInstruction, CREATED, UPDATED
from .update_method import UpdateMethod
from .mongo_db import MongoSettings, create_mongo_client, create_mongo_db
