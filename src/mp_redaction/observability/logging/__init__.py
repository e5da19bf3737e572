"""Observability – structlog configuration and redacting processors."""
from mp_redaction.observability.logging.factory import JsonLoggerFactory
from mp_redaction.observability.logging.processors import RedactionProcessor, get_logger

__all__ = [
    "JsonLoggerFactory",
    "RedactionProcessor",
    "get_logger",
]
