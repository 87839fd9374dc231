"""Structured logging for seo-json-ld.

The library only emits records; applications call ``configure_logging`` once
if they want the JSON line format on stdout.
"""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any, Optional

from ..config import settings


def configure_logging(
    service_name: str = "seo-json-ld",
    level: Optional[str] = None,
    json_format: Optional[bool] = None,
) -> None:
    """Configure structured logging for the host application.

    Level and format default to SEO_JSON_LD_LOG_LEVEL / SEO_JSON_LD_LOG_JSON.
    """
    level = level or settings.log_level
    if json_format is None:
        json_format = settings.log_json
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper()))

    if root.handlers:
        root.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(getattr(logging, level.upper()))

    if json_format:
        handler.setFormatter(StructuredFormatter(service_name=service_name))
    else:
        handler.setFormatter(
            logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s")
        )

    root.addHandler(handler)


class StructuredFormatter(logging.Formatter):
    """JSON-structured log formatter."""

    def __init__(self, service_name: str = "seo-json-ld", *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.service_name = service_name

    def format(self, record: logging.LogRecord) -> str:
        log_obj = {
            "timestamp": datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.%f")[:-3] + "Z",
            "level": record.levelname,
            "service": self.service_name,
            "logger": record.name,
            "request_id": getattr(record, "request_id", None),
            "message": record.getMessage(),
            "context": getattr(record, "context", {}),
        }
        if record.exc_info:
            log_obj["stack_trace"] = self.formatException(record.exc_info)
        return json.dumps(log_obj, default=str)


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance."""
    return logging.getLogger(name)


def log_with_context(
    logger: logging.Logger,
    level: int,
    message: str,
    request_id: Optional[str] = None,
    **context: Any,
) -> None:
    """Log with structured context."""
    extra = {"request_id": request_id, "context": context}
    logger.log(level, message, extra=extra)
