import os
from dataclasses import dataclass
from datetime import timezone
from collections.abc import Mapping
from typing import Any

from pymongo import MongoClient
from pymongo.database import Database

from ..utilities.setup_error import SetupError


@dataclass(frozen=True)
class MongoSettings:
    url: str
    db_name: str
    timeout_ms: int | None = None
    """ Client-wide operation timeout. None leaves timeouts to the caller (pymongo.timeout()). """

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> 'MongoSettings':
        """ Reads MONGO_URL, MONGO_DB_NAME and the optional MONGO_TIMEOUT_MS. """
        if environ is None:
            environ = os.environ

        MONGO_URL = environ.get("MONGO_URL")
        if not MONGO_URL: raise SetupError("Please set MONGO_URL in your environment variables.", setting="MONGO_URL")

        MONGO_DB_NAME = environ.get("MONGO_DB_NAME")
        if not MONGO_DB_NAME: raise SetupError("Please set MONGO_DB_NAME in your environment variables.", setting="MONGO_DB_NAME")

        MONGO_TIMEOUT_MS = environ.get("MONGO_TIMEOUT_MS")
        timeout_ms = None
        if MONGO_TIMEOUT_MS:
            try:
                timeout_ms = int(MONGO_TIMEOUT_MS)
            except ValueError:
                raise SetupError(f"MONGO_TIMEOUT_MS must be an integer number of milliseconds, got '{MONGO_TIMEOUT_MS}'.", setting="MONGO_TIMEOUT_MS")

        return cls(url=MONGO_URL, db_name=MONGO_DB_NAME, timeout_ms=timeout_ms)


def create_mongo_client(settings: MongoSettings) -> MongoClient:
    """ The client is thread-safe; create one per process and share it between stores.
    Dates are read back timezone-aware in UTC, matching how they are written. """
    options: dict[str, Any] = { "tz_aware": True, "tzinfo": timezone.utc }
    if settings.timeout_ms is not None:
        options["timeoutMS"] = settings.timeout_ms
    return MongoClient(settings.url, **options)

def create_mongo_db(settings: MongoSettings | None = None) -> Database:
    """ Returns the configured database. Settings are read from the environment when not given. """
    if settings is None:
        settings = MongoSettings.from_env()
    mongo_client = create_mongo_client(settings)
    return mongo_client[settings.db_name]
