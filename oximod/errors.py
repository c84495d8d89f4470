"""Error types raised by oximod and a helper for attaching diagnostics."""

from __future__ import annotations

import sys
import traceback
from typing import TypeVar

__all__ = [
    "OximodError",
    "DatabaseConnectionError",
    "GlobalClientInitError",
    "GlobalClientMissingError",
    "SerializationError",
    "AggregationError",
    "IndexCreationError",
    "ValidationError",
    "attach_printables",
]


class OximodError(Exception):
    """Base class for every error raised during database operations."""

    template = "{detail}"

    def __init__(self, detail: str = "") -> None:
        super().__init__(detail)
        self.detail = detail
        self.suggestion: str | None = None

    def __str__(self) -> str:
        return self.template.format(detail=self.detail)


class DatabaseConnectionError(OximodError, ConnectionError):
    """The database could not be reached or an operation on it failed."""

    template = "Failed to connect to db: {detail}"


class GlobalClientInitError(OximodError):
    """The global client could not be set, usually because it already was."""

    template = "Failed to set CLIENT"


class GlobalClientMissingError(OximodError):
    """The global client was requested before it was set."""

    template = "CLIENT not found: {detail}"


class SerializationError(OximodError):
    """A model could not be converted to or from a document."""

    template = "Serialization error: {detail}"


class AggregationError(OximodError):
    """An aggregation pipeline failed."""

    template = "Aggregation error: {detail}"


class IndexCreationError(OximodError):
    """Creating, dropping or listing indexes failed."""

    template = "Index error: {detail}"


class ValidationError(OximodError):
    """A field violated one of its validation rules."""

    template = "Validation error: {detail}"


_E = TypeVar("_E", bound=BaseException)


def attach_printables(error: _E, suggestion: str | None = None) -> _E:
    """Print the current stack and an optional suggestion to stderr.

    The suggestion is also stored on the error. The error itself is
    returned so the call can sit inside a ``raise`` statement.
    """
    stack = "".join(traceback.format_stack()[:-1])
    print(f"\nBacktrace: {stack}\n", file=sys.stderr)
    if suggestion is not None:
        print(f"\nSuggestion: {suggestion}\n", file=sys.stderr)
        error.suggestion = suggestion
    return error