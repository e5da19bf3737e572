"""Observability – structlog processors and get_logger helper.

``RedactionProcessor`` – runs every log event dict through a redaction engine.
``get_logger(name)`` – returns a bound structlog logger.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Any

import structlog

if TYPE_CHECKING:
    from mp_redaction.application.masking.masker import RedactionEngine


class RedactionProcessor:
    """structlog processor that redacts the event dict before rendering.

    The dict is redacted as a whole under *scope*, so sensitive keys bound
    on the logger (``log.bind(api_key=...)``) are masked as well as
    patterns inside the event message. Audit details are discarded.

    Usage::

        import structlog
        from mp_redaction.observability.logging import RedactionProcessor

        structlog.configure(processors=[RedactionProcessor(engine), ...])
    """

    def __init__(self, engine: RedactionEngine, scope: str = "consoleOutput") -> None:
        self._engine = engine
        self._scope = scope

    def __call__(
        self,
        logger: Any,           # noqa: ARG002
        method_name: str,      # noqa: ARG002
        event_dict: dict[str, Any],
    ) -> dict[str, Any]:
        result = self._engine.redact(event_dict, self._scope)
        if not result.redacted:
            return event_dict
        return result.value


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Return a bound structlog logger.

    Parameters
    ----------
    name:
        Logger name (typically ``__name__`` of the calling module).
    **initial_values:
        Key-value pairs to bind on the returned logger.
    """
    logger = structlog.get_logger(name)
    if initial_values:
        logger = logger.bind(**initial_values)
    return logger


__all__ = ["RedactionProcessor", "get_logger"]
