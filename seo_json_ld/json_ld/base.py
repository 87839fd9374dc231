"""Base utilities for Schema.org JSON-LD generation."""

import logging
from typing import Any, Dict, Mapping, Optional, Type, TypeVar, Union

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from ..config import settings
from ..errors import IncompleteOptionsError, ValidationError
from ..monitoring.logging import get_logger, log_with_context

logger = get_logger(__name__)

SCHEMA_CONTEXT = "https://schema.org"
SCHEMA_BASE_URL = "https://schema.org/"

M = TypeVar("M", bound=BaseModel)


def schema_base(schema_type: str, **fields: Any) -> Dict[str, Any]:
    """Create a record with the Schema.org context and type tag."""
    out: Dict[str, Any] = {
        "@context": SCHEMA_CONTEXT,
        "@type": schema_type,
    }
    out.update(fields)
    return out


def set_if(out: Dict[str, Any], key: str, value: Any) -> None:
    """Set ``out[key]`` only when ``value`` is set (not None, not empty)."""
    if value is None or value == "" or value == [] or value == {}:
        return
    out[key] = value


def schema_enum_url(value: str) -> str:
    """``InStock`` -> ``https://schema.org/InStock``."""
    return f"{SCHEMA_BASE_URL}{value}"


def coerce(model: Type[M], value: Union[M, Mapping[str, Any]]) -> M:
    """Accept a model instance or a plain mapping shaped like one."""
    if isinstance(value, model):
        return value
    try:
        return model.model_validate(value)
    except PydanticValidationError as e:
        raise ValidationError(
            f"Invalid {model.__name__} options",
            details={"errors": e.errors(include_url=False)},
        ) from e


def coerce_optional(
    model: Type[M],
    value: Union[M, Mapping[str, Any], None],
) -> Optional[M]:
    if value is None:
        return None
    return coerce(model, value)


def drop_partial(field: str, message: str, strict: Optional[bool], **context: Any) -> None:
    """Handle a partial option combination: log and drop, or raise in strict mode."""
    if settings.resolve_strict(strict):
        raise IncompleteOptionsError(message, field=field, details=dict(context) or None)
    log_with_context(logger, logging.DEBUG, message, field=field, **context)
