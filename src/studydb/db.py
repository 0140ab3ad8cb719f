"""
Database connection and query utilities.

Provides a simple interface for running find queries with pymongo,
returning results decoded into entity records.

For testing, use set_database_override() to inject a database
that will be used instead of connecting to a server. This enables
running the repositories against an in-memory store.
"""

import logging
import threading
from contextlib import contextmanager
from typing import Any, Iterable, Optional, TypeVar

import pymongo
from bson import ObjectId
from bson.errors import InvalidId
from pymongo import MongoClient
from pymongo.collection import Collection
from pymongo.database import Database

from studydb.config import Config, config
from studydb.errors import InvalidIdError

logger = logging.getLogger(__name__)


T = TypeVar("T")

# =============================================================================
# Database Override (for testing)
# =============================================================================

_database_override: Database | None = None


def set_database_override(database: Database) -> None:
    """
    Set a database to use instead of connecting to a server.

    Used by test fixtures so every repository created without an
    explicit database reads from the same in-memory store.

    Args:
        database: The database to use for all subsequent operations
    """
    global _database_override
    _database_override = database


def clear_database_override() -> None:
    """Clear the database override, restoring normal behavior."""
    global _database_override
    _database_override = None


# =============================================================================
# Connection Management
# =============================================================================

_client: MongoClient | None = None
_client_lock = threading.Lock()


def connect(cfg: Config = config) -> MongoClient:
    """
    Open a client and verify the server is reachable.

    The configured timeout bounds both server selection and the
    initial ping, so an unreachable server fails fast instead of
    hanging on the first query.

    Args:
        cfg: Connection target, database name and timeout

    Returns:
        A connected MongoClient; the caller owns it and must close it
    """
    client = MongoClient(
        cfg.mongo_uri,
        connectTimeoutMS=cfg.timeout_ms,
        serverSelectionTimeoutMS=cfg.timeout_ms,
    )
    try:
        with pymongo.timeout(cfg.timeout):
            client.admin.command("ping")
    except Exception:
        client.close()
        raise
    logger.debug("Connected to %s (database %s)", cfg.mongo_uri, cfg.database_name)
    return client


def get_database() -> Database:
    """
    Return the database used by repositories that were not given one.

    In normal operation a process-wide client is created on first use
    from the module config. With an override set (testing) the override
    is returned and no connection is made.
    """
    global _client
    if _database_override is not None:
        return _database_override

    if _client is None:
        with _client_lock:
            if _client is None:
                _client = connect(config)
    return _client[config.database_name]


def close() -> None:
    """Close the process-wide client, if one was opened."""
    global _client
    with _client_lock:
        if _client is not None:
            _client.close()
            _client = None


@contextmanager
def deadline(seconds: Optional[float] = None):
    """
    Apply a caller-supplied deadline to every store call in the block.

    Expiry surfaces as pymongo's own timeout error. With no deadline
    the block runs under the client's defaults.

    Usage:
        with deadline(2.5):
            repo.find_by_category(category_id)
    """
    if seconds is None:
        yield
        return

    with pymongo.timeout(seconds):
        yield


# =============================================================================
# Identifiers
# =============================================================================


def parse_object_id(value: Any) -> Optional[ObjectId]:
    """Convert a hex string to an ObjectId, or None if it is not one."""
    if isinstance(value, ObjectId):
        return value
    # ObjectId() also accepts 12 raw bytes and generates a fresh id from None
    if not isinstance(value, str):
        return None
    try:
        return ObjectId(value)
    except (InvalidId, TypeError):
        return None


def to_object_id(value: Any) -> ObjectId:
    """
    Convert a caller-supplied identifier to an ObjectId.

    Raises:
        InvalidIdError: If the value is not a 24-character hex string
    """
    object_id = parse_object_id(value)
    if object_id is None:
        raise InvalidIdError(value)
    return object_id


def to_object_ids(values: Iterable[Any]) -> list[ObjectId]:
    """Convert every caller-supplied identifier, failing on the first bad one."""
    return [to_object_id(value) for value in values]


# =============================================================================
# Query Helpers
# =============================================================================


def fetch_one(collection: Collection, query: dict, model: type[T]) -> Optional[T]:
    """
    Run a query and decode the first matching document.

    Args:
        collection: Collection to query
        query: MongoDB filter document
        model: Record type providing from_document()

    Returns:
        The decoded record, or None if no document matched
    """
    document = collection.find_one(query)
    if document is None:
        return None
    return model.from_document(document)


def fetch_all(collection: Collection, query: dict, model: type[T]) -> list[T]:
    """
    Run a query and decode every matching document.

    Args:
        collection: Collection to query
        query: MongoDB filter document
        model: Record type providing from_document()

    Returns:
        List of decoded records, empty list if nothing matched
    """
    return [model.from_document(document) for document in collection.find(query)]
