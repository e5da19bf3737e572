"""Observability – JsonLoggerFactory."""
from __future__ import annotations

import logging
from typing import IO, TYPE_CHECKING, Any

import structlog

from mp_redaction.observability.logging.processors import RedactionProcessor

if TYPE_CHECKING:
    from mp_redaction.application.masking.masker import RedactionEngine


def _pre_chain(engine: RedactionEngine | None, scope: str) -> list[Any]:
    # redact after contextvars are merged, before logger metadata is added
    chain: list[Any] = [structlog.contextvars.merge_contextvars]
    if engine is not None:
        chain.append(RedactionProcessor(engine, scope))
    chain += [
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]
    return chain


class JsonLoggerFactory:
    """Route structlog and stdlib logging through one JSON handler on the root logger."""

    @staticmethod
    def configure(
        level: int = logging.INFO,
        engine: RedactionEngine | None = None,
        scope: str = "consoleOutput",
        stream: IO[str] | None = None,
    ) -> None:
        """Install the JSON handler, replacing any handlers on the root logger.

        Parameters
        ----------
        level:
            Root logger level.
        engine:
            When given, every structlog event dict is redacted under *scope*
            before it is rendered. Plain stdlib records are not touched; attach
            a :class:`~mp_redaction.application.masking.RedactionLogFilter`
            for those.
        stream:
            Output stream; ``sys.stderr`` when omitted.
        """
        structlog.configure(
            processors=[
                *_pre_chain(engine, scope),
                structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
            ],
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )

        handler = logging.StreamHandler(stream)
        handler.setFormatter(
            structlog.stdlib.ProcessorFormatter(
                processors=[
                    structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                    structlog.processors.JSONRenderer(),
                ],
            )
        )
        root = logging.getLogger()
        root.handlers.clear()
        root.addHandler(handler)
        root.setLevel(level)


__all__ = ["JsonLoggerFactory"]
