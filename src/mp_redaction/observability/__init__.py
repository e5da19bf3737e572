"""Observability – logging."""

from mp_redaction.observability.logging import JsonLoggerFactory, RedactionProcessor, get_logger

__all__ = [
    "JsonLoggerFactory",
    "RedactionProcessor",
    "get_logger",
]
