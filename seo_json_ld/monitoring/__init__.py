"""Logging utilities."""

from .logging import StructuredFormatter, configure_logging, get_logger, log_with_context

__all__ = [
    "StructuredFormatter",
    "configure_logging",
    "get_logger",
    "log_with_context",
]
