"""Validation rules attached to model fields."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any

from .errors import ValidationError

__all__ = ["Validate"]


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _length(value: Any) -> int:
    # Lengths of text are measured in UTF-8 bytes.
    if isinstance(value, str):
        return len(value.encode("utf-8"))
    return len(value)


@dataclass(frozen=True)
class Validate:
    """The set of rules one field must satisfy before a model is saved.

    Rules are checked in a fixed order and the first one violated raises
    :class:`~oximod.errors.ValidationError`. Rules that inspect a value
    skip it when it is ``None``, except ``required`` and ``non_empty``.
    """

    min_length: int | None = None
    max_length: int | None = None
    required: bool = False
    email: bool = False
    pattern: str | None = None
    non_empty: bool = False
    positive: bool = False
    negative: bool = False
    non_negative: bool = False
    min: int | None = None
    max: int | None = None

    def __post_init__(self) -> None:
        for key in ("min_length", "max_length"):
            value = getattr(self, key)
            if value is None:
                continue
            if not _is_int(value):
                raise TypeError(f"expected integer literal for `{key}`")
            if value < 0:
                raise ValueError(f"`{key}` must not be negative")
        for key in ("min", "max"):
            value = getattr(self, key)
            if value is not None and not _is_int(value):
                raise TypeError(f"expected integer literal for `{key}`")
        if self.pattern is not None and not isinstance(self.pattern, str):
            raise TypeError("expected string literal for `pattern`")

    def check(self, field_name: str, value: Any) -> Any:
        """Raise ValidationError if ``value`` breaks a rule; otherwise return it."""

        def fail(message: str) -> ValidationError:
            return ValidationError(f"Field '{field_name}' {message}")

        if self.min_length is not None and value is not None:
            if _length(value) < self.min_length:
                raise fail(f"must be at least {self.min_length} characters long")

        if self.max_length is not None and value is not None:
            if _length(value) > self.max_length:
                raise fail(f"must be at most {self.max_length} characters long")

        if self.required and value is None:
            raise fail("is required")

        if self.email and value is not None:
            if "@" not in value or "." not in value:
                raise fail("must be a valid email address")
            parts = value.split("@")
            if len(parts) != 2 or not parts[0] or not parts[1] or "." not in parts[1]:
                raise fail("must be a valid email address")

        if self.pattern is not None and value is not None:
            try:
                regex = re.compile(self.pattern)
            except re.error as exc:
                raise ValidationError(
                    f"Invalid regex pattern in validation for '{field_name}': {exc}"
                ) from exc
            if regex.search(value) is None:
                raise fail("does not match the required pattern")

        if self.non_empty:
            if value is None:
                raise fail("is missing but marked as non-empty")
            if not value.strip():
                raise fail("must be non-empty")

        if value is None:
            return value

        if self.positive and value <= 0:
            raise fail("must be positive")

        if self.negative and value >= 0:
            raise fail("must be negative")

        if self.non_negative and value < 0:
            raise fail("must be non-negative")

        if self.min is not None and value < self.min:
            raise fail(f"must be at least {self.min}")

        if self.max is not None and value > self.max:
            raise fail(f"must be at most {self.max}")

        return value