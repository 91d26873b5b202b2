"""
Pytest configuration and shared fixtures

The fake database below implements the part of the pymongo collection API that
DocumentStore uses. It returns real pymongo result objects and raises real pymongo
errors, so the store's error handling is exercised against the driver's own types.
Writes go through a BSON encode/decode, so reads hand back what a tz-aware client would.
"""
import copy
from datetime import datetime, timedelta, timezone
from typing import Any

import bson
import pytest
from bson.codec_options import CodecOptions
from pymongo.errors import DuplicateKeyError, OperationFailure, WriteError
from pymongo.results import DeleteResult, InsertOneResult, UpdateResult

from mongo_cruds import DocumentStore

from tests.documents import StampedUser, User


_MISSING = object()
CODEC_OPTIONS = CodecOptions(tz_aware=True, tzinfo=timezone.utc)


def _through_bson(document: dict) -> dict:
    return bson.decode(bson.encode(document), codec_options=CODEC_OPTIONS)


def _get_path(document: dict, path: str) -> Any:
    value: Any = document
    for part in path.split("."):
        if not isinstance(value, dict) or part not in value:
            return _MISSING
        value = value[part]
    return value


def _set_path(document: dict, path: str, value: Any) -> None:
    parts = path.split(".")
    target = document
    for part in parts[:-1]:
        target = target.setdefault(part, {})
    target[parts[-1]] = value


def _ordered(op):
    def compare(value, arg):
        if value is _MISSING:
            return False
        try:
            return op(value, arg)
        except TypeError:
            return False
    return compare


OPERATORS = {
    "$eq": lambda value, arg: value == arg,
    "$ne": lambda value, arg: value != arg,
    "$lt": _ordered(lambda value, arg: value < arg),
    "$gt": _ordered(lambda value, arg: value > arg),
    "$lte": _ordered(lambda value, arg: value <= arg),
    "$gte": _ordered(lambda value, arg: value >= arg),
}


def matches(document: dict, mongo_filter: dict) -> bool:
    for key, condition in mongo_filter.items():
        if key == "$and":
            if not all(matches(document, clause) for clause in condition):
                return False
            continue

        value = _get_path(document, key)
        if isinstance(condition, dict) and condition and all(op.startswith("$") for op in condition):
            for op, arg in condition.items():
                if op not in OPERATORS:
                    raise OperationFailure(f"unknown operator: {op}", code=2)
                if not OPERATORS[op](value, arg):
                    return False
        elif value != condition:
            return False
    return True


class FakeCollection:
    """Dict-backed stand-in for pymongo.collection.Collection."""

    def __init__(self, name: str):
        self.name = name
        self.documents: dict[Any, dict] = {}
        self.sessions: list[Any] = []

    def insert_one(self, document, session=None):
        self.sessions.append(session)
        _id = document["_id"]
        if _id in self.documents:
            raise DuplicateKeyError(
                f"E11000 duplicate key error collection: test.{self.name} index: _id_ dup key: {{ _id: \"{_id}\" }}",
                code=11000,
            )
        self.documents[_id] = _through_bson(document)
        return InsertOneResult(_id, True)

    def find_one(self, mongo_filter, session=None):
        self.sessions.append(session)
        for document in self.documents.values():
            if matches(document, mongo_filter):
                return copy.deepcopy(document)
        return None

    def find(self, mongo_filter, session=None):
        self.sessions.append(session)
        return [copy.deepcopy(document) for document in self.documents.values() if matches(document, mongo_filter)]

    def update_one(self, mongo_filter, update, session=None):
        self.sessions.append(session)
        if set(update) != {"$set"} or not update["$set"]:
            raise WriteError("'$set' is empty. You must specify a field like so: {$set: {<field>: ...}}", code=9)
        for document in self.documents.values():
            if matches(document, mongo_filter):
                for path, value in _through_bson(update["$set"]).items():
                    _set_path(document, path, value)
                return UpdateResult({"n": 1, "nModified": 1, "ok": 1.0}, True)
        return UpdateResult({"n": 0, "nModified": 0, "ok": 1.0}, True)

    def delete_one(self, mongo_filter, session=None):
        self.sessions.append(session)
        for _id, document in list(self.documents.items()):
            if matches(document, mongo_filter):
                del self.documents[_id]
                return DeleteResult({"n": 1, "ok": 1.0}, True)
        return DeleteResult({"n": 0, "ok": 1.0}, True)


class FakeDatabase:
    def __init__(self):
        self.collections: dict[str, FakeCollection] = {}

    def __getitem__(self, name: str) -> FakeCollection:
        if name not in self.collections:
            self.collections[name] = FakeCollection(name)
        return self.collections[name]


class FakeClock:
    def __init__(self, start: datetime = datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)):
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, seconds: int = 1) -> None:
        self.now += timedelta(seconds=seconds)


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def db():
    return FakeDatabase()


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def skipped():
    """Collects skip notices instead of logging them."""
    return []


@pytest.fixture
def users(db, clock, skipped):
    return DocumentStore.for_dataclass(db, "users", User, clock=clock, skip_reporter=skipped.append)


@pytest.fixture
def stamped_users(db, clock):
    return DocumentStore.for_dataclass(db, "stamped_users", StampedUser, clock=clock)
