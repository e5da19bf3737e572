"""Application – the redaction engine, its plugins and integrations."""

from mp_redaction.application.masking import (
    RedactionEngine,
    RedactionLogFilter,
    build_plugins,
    redact_event,
)

__all__ = [
    "RedactionEngine",
    "RedactionLogFilter",
    "build_plugins",
    "redact_event",
]
