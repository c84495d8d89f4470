"""The process-wide MongoDB client shared by every model."""

from __future__ import annotations

import threading

from pymongo import MongoClient
from pymongo.errors import PyMongoError

from .errors import (
    DatabaseConnectionError,
    GlobalClientInitError,
    GlobalClientMissingError,
    attach_printables,
)

__all__ = ["set_global_client", "get_global_client"]

_lock = threading.Lock()
_client: MongoClient | None = None


def _connect(mongo_uri: str) -> MongoClient:
    try:
        return MongoClient(mongo_uri)
    except (PyMongoError, ValueError, TypeError) as exc:
        raise DatabaseConnectionError(str(exc)) from exc


def get_global_client() -> MongoClient:
    """Return the client set by :func:`set_global_client`.

    Raises GlobalClientMissingError if no client has been set yet.
    """
    client = _client
    if client is None:
        raise attach_printables(
            GlobalClientMissingError("no global client has been set"),
            "Ensure you call `set_global_client` before using `get_global_client`.",
        )
    return client


def set_global_client(mongo_uri: str) -> None:
    """Create a client for ``mongo_uri`` and install it globally.

    Raises DatabaseConnectionError if the client cannot be created and
    GlobalClientInitError if a global client is already set.
    """
    global _client
    client = _connect(mongo_uri)
    with _lock:
        if _client is None:
            _client = client
            return
    client.close()
    raise attach_printables(
        GlobalClientInitError("CLIENT set method failed."),
        "Ensure `set_global_client` is only called once, or restart the application.",
    )


def _reset_global_client() -> None:
    """Close and forget the global client."""
    global _client
    with _lock:
        client, _client = _client, None
    if client is not None:
        client.close()