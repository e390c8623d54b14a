"""
MongoDB integration.

This module owns the process-wide ``MongoClient`` (``get_client``),
resolves the application database (``get_database``), exposes the
``get_db`` dependency injected into every route, and creates the
indexes the services rely on (``init_db``).

Services never reach for the client themselves; they receive the
``Database`` handle as their first argument.  Tests override ``get_db``
with an in-memory database.
"""

import logging
from functools import lru_cache
from typing import Any, Dict, Iterator, List, Optional, Tuple

from bson import ObjectId
from pymongo import ASCENDING, DESCENDING, MongoClient
from pymongo.database import Database
from pymongo.errors import OperationFailure

from .config import settings


logger = logging.getLogger(__name__)

USERS = "users"
EVENTS = "events"
PRE_REGISTRATIONS = "preregistrations"
TASKS = "tasks"
ADMIN_TASKS = "adminCreatedTasks"


# (collection, keys, options).  Unique indexes close the race window of
# the existence checks done by the services: a concurrent duplicate
# insert fails with ``DuplicateKeyError`` instead of being stored.
INDEXES: List[Tuple[str, List[Tuple[str, int]], Dict[str, Any]]] = [
    (USERS, [("email", ASCENDING)], {"unique": True, "name": "uniq_email"}),
    (
        EVENTS,
        [("name", ASCENDING), ("date", ASCENDING), ("location", ASCENDING)],
        {"unique": True, "name": "uniq_name_date_location"},
    ),
    (EVENTS, [("date", ASCENDING)], {"name": "date_asc"}),
    (
        PRE_REGISTRATIONS,
        [("email", ASCENDING), ("event", ASCENDING)],
        {"unique": True, "name": "uniq_email_event"},
    ),
    (TASKS, [("email", ASCENDING), ("createdAt", DESCENDING)], {"name": "email_created_desc"}),
    (ADMIN_TASKS, [("createdAt", DESCENDING)], {"name": "created_desc"}),
]


@lru_cache(maxsize=1)
def get_client() -> MongoClient:
    """Create the shared client on first use.

    ``MongoClient`` is thread-safe and pools connections internally, so
    one instance serves every request handled by the worker threads.
    """
    logger.info("Connecting to MongoDB")
    return MongoClient(settings.mongo_uri, serverSelectionTimeoutMS=settings.mongo_timeout_ms)


def close_client() -> None:
    """Close the shared client if it was ever created."""
    if get_client.cache_info().currsize:
        get_client().close()
        get_client.cache_clear()


def get_database() -> Database:
    """Return the database named in the URI, or ``settings.mongo_db``."""
    return get_client().get_default_database(default=settings.mongo_db)


def get_db() -> Iterator[Database]:
    """FastAPI dependency yielding the application database."""
    yield get_database()


def init_db(db: Database) -> None:
    """Create the indexes listed in ``INDEXES``.

    ``create_index`` is idempotent, so this runs on every start.  An
    index that cannot be built (for instance because duplicates were
    written before it existed) is logged and skipped; the existence
    checks in the services still apply in that case.
    """
    for collection, keys, options in INDEXES:
        try:
            db[collection].create_index(keys, **options)
        except OperationFailure as exc:
            logger.error("Could not create index %s on %s: %s", options.get("name"), collection, exc)


def parse_object_id(value: str) -> Optional[ObjectId]:
    """Convert a path parameter into an ``ObjectId`` or ``None`` if malformed."""
    if not ObjectId.is_valid(value):
        return None
    return ObjectId(value)


def serialize_document(doc: Dict[str, Any]) -> Dict[str, Any]:
    """Replace Mongo's ``_id`` with a string ``id`` for the API layer."""
    data = dict(doc)
    data["id"] = str(data.pop("_id"))
    return data
