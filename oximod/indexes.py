"""Index declarations for model fields."""

from __future__ import annotations

from dataclasses import dataclass

from pymongo import IndexModel

__all__ = ["Index"]


@dataclass(frozen=True)
class Index:
    """How a single field is indexed in its collection.

    ``order`` is 1 for ascending and -1 for descending; it may be given as
    an integer or as a string holding one. ``expire_after_secs`` turns the
    index into a TTL index.
    """

    unique: bool | None = None
    sparse: bool | None = None
    name: str | None = None
    background: bool | None = None
    order: int | str = 1
    expire_after_secs: int | None = None

    def __post_init__(self) -> None:
        order = self.order
        if isinstance(order, str):
            try:
                order = int(order)
            except ValueError as exc:
                raise ValueError(f"could not parse order: {exc}") from exc
        elif isinstance(order, bool) or not isinstance(order, int):
            raise TypeError("expected integer literal or string literal for `order`")
        object.__setattr__(self, "order", order)

        secs = self.expire_after_secs
        if secs is not None and (isinstance(secs, bool) or not isinstance(secs, int)):
            raise TypeError("expected integer literal for `expire_after_secs`")
        if self.name is not None and not isinstance(self.name, str):
            raise TypeError("expected string literal for `name`")

    def to_index_model(self, field_name: str) -> IndexModel:
        """Build the index model for ``field_name``; unset options are omitted."""
        options = {
            key: value
            for key, value in (
                ("unique", self.unique),
                ("sparse", self.sparse),
                ("background", self.background),
                ("name", self.name),
                ("expireAfterSeconds", self.expire_after_secs),
            )
            if value is not None
        }
        return IndexModel([(field_name, self.order)], **options)