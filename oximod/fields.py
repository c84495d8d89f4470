"""Declarations of model fields: defaults, indexes and validation rules."""

from __future__ import annotations

import copy
from dataclasses import dataclass
from typing import Any, Callable

from pymongo import IndexModel

from .indexes import Index
from .validation import Validate

__all__ = ["Field", "field"]


class _Missing:
    """Marker for a field that has no declared default."""

    _instance: _Missing | None = None

    def __new__(cls) -> _Missing:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __copy__(self) -> _Missing:
        return self

    def __deepcopy__(self, memo: dict) -> _Missing:
        return self


_MISSING: Any = _Missing()

_MUTABLE_DEFAULTS = (list, dict, set, bytearray)


@dataclass(frozen=True)
class Field:
    """How one attribute of a model is initialised, indexed and validated.

    A field may declare either a ``default`` value or a ``default_factory``
    called for every new instance, but not both. Mutable defaults such as
    lists and dicts must be given through ``default_factory``.
    """

    default: Any = _MISSING
    default_factory: Callable[[], Any] | None = None
    index: Index | None = None
    validate: Validate | None = None

    def __post_init__(self) -> None:
        if self.default is not _MISSING and self.default_factory is not None:
            raise ValueError("cannot specify both default and default_factory")
        if self.default_factory is not None and not callable(self.default_factory):
            raise TypeError("default_factory must be callable")
        if isinstance(self.default, _MUTABLE_DEFAULTS):
            raise ValueError(
                f"mutable default {type(self.default).__name__} is not allowed: "
                "use default_factory"
            )
        if self.index is True:
            object.__setattr__(self, "index", Index())
        elif self.index is False:
            object.__setattr__(self, "index", None)
        elif self.index is not None and not isinstance(self.index, Index):
            raise TypeError("index must be an Index instance")
        if self.validate is not None and not isinstance(self.validate, Validate):
            raise TypeError("validate must be a Validate instance")

    @property
    def has_default(self) -> bool:
        """Whether the field declares a default value or factory."""
        return self.default is not _MISSING or self.default_factory is not None

    def make_default(self) -> Any:
        """Return a fresh default value for a new instance.

        Raises LookupError if the field declares no default.
        """
        if self.default_factory is not None:
            return self.default_factory()
        if self.default is _MISSING:
            raise LookupError("field has no default")
        return copy.copy(self.default)

    def index_model(self, field_name: str) -> IndexModel | None:
        """Return the index model for ``field_name``, or None if not indexed."""
        if self.index is None:
            return None
        return self.index.to_index_model(field_name)

    def check(self, field_name: str, value: Any) -> Any:
        """Validate ``value`` against the field's rules and return it."""
        if self.validate is None:
            return value
        return self.validate.check(field_name, value)


def field(
    *,
    default: Any = _MISSING,
    default_factory: Callable[[], Any] | None = None,
    index: Index | bool | None = None,
    validate: Validate | None = None,
) -> Any:
    """Declare a model attribute with a default, an index or validation rules.

    ``index=True`` is shorthand for an ascending index with default options.
    """
    return Field(
        default=default,
        default_factory=default_factory,
        index=index,
        validate=validate,
    )