"""Error types raised by the JSON-LD builders and serializer."""

from .exceptions import (
    SchemaError,
    ValidationError,
    IncompleteOptionsError,
    SerializationError,
)

__all__ = [
    "SchemaError",
    "ValidationError",
    "IncompleteOptionsError",
    "SerializationError",
]
