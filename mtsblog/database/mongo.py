"""MongoDB client lifecycle for the blog server.

A single ``MongoClient`` per (URI, options) is created lazily and shared by
every request; PyMongo pools connections internally. ``connect`` is called
once at startup and ``close_clients`` at shutdown.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Tuple

from pymongo import MongoClient
from pymongo.database import Database

from mtsblog.config import settings

logger = logging.getLogger(__name__)

_clients: Dict[Tuple[str, frozenset], MongoClient] = {}


def get_client(uri: str | None = None, **kwargs: Any) -> MongoClient:
    """
    Return a cached MongoClient keyed by URI and options.
    """
    uri = uri or settings.MONGO_URI
    kwargs.setdefault(
        "serverSelectionTimeoutMS", settings.MONGO_SERVER_SELECTION_TIMEOUT_MS
    )
    key = (uri, frozenset(kwargs.items()))
    if key not in _clients:
        _clients[key] = MongoClient(uri, **kwargs)
    return _clients[key]


def get_database(db_name: str | None = None, **kwargs: Any) -> Database:
    """Return a database handle on the shared client."""
    client = get_client(**kwargs)
    return client[db_name or settings.MONGO_DB_NAME]


def get_db():
    """FastAPI dependency that yields the shared database handle."""
    db = get_database()
    try:
        yield db
    finally:
        # Clients are cached; nothing to release per request.
        pass


def ping(db: Database | None = None) -> bool:
    """Round-trip a ping command to the server. Raises on failure."""
    db = db if db is not None else get_database()
    db.client.admin.command("ping")
    return True


def connect() -> Database:
    """Open the shared client and confirm the server is reachable."""
    db = get_database()
    ping(db)
    logger.info("Connected to MongoDB!", extra={"database": db.name})
    return db


def close_clients() -> None:
    """Close every cached client. Safe to call more than once."""
    while _clients:
        _, client = _clients.popitem()
        client.close()
    logger.info("MongoDB connections closed")
