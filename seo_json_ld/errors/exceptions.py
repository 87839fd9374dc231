"""Exceptions with error codes for JSON-LD builders."""

from typing import Any, Optional


class SchemaError(Exception):
    """Base exception for seo-json-ld."""

    def __init__(
        self,
        message: str,
        code: str = "LD_000",
        category: str = "system",
        details: Optional[dict[str, Any]] = None,
    ):
        self.message = message
        self.code = code
        self.category = category
        self.details = details or {}
        super().__init__(message)


class ValidationError(SchemaError):
    """Option record does not have the expected shape."""

    def __init__(
        self,
        message: str,
        code: str = "LD_400",
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message, code, "permanent", details)


class IncompleteOptionsError(ValidationError):
    """Partial option combination rejected in strict mode."""

    def __init__(
        self,
        message: str,
        field: str,
        code: str = "LD_422",
        details: Optional[dict[str, Any]] = None,
    ):
        d = details or {}
        d["field"] = field
        self.field = field
        super().__init__(message, code, d)


class SerializationError(SchemaError):
    """Value cannot be encoded as JSON text."""

    def __init__(
        self,
        message: str,
        code: str = "LD_500",
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message, code, "system", details)
