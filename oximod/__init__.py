"""A shared MongoDB client, error types, field declarations, validation rules and index definitions."""

__version__ = "0.1.8"

__all__ = ["client", "errors", "fields", "indexes", "validation"]