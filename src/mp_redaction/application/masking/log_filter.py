from __future__ import annotations

import logging
from typing import Any

from mp_redaction.application.masking.masker import RedactionEngine
from mp_redaction.config.settings.base import Scope

__all__ = ["RedactionLogFilter"]


class RedactionLogFilter(logging.Filter):
    """Applies a RedactionEngine to log record msg and args before emission.

    Only the redacted value is kept; audit details never reach a handler.
    """

    def __init__(
        self,
        engine: RedactionEngine,
        scope: str = Scope.CONSOLE_OUTPUT,
        name: str = "",
    ) -> None:
        super().__init__(name)
        self._engine = engine
        self._scope = scope

    def filter(self, record: logging.LogRecord) -> bool:  # noqa: A003
        record.msg = self._redact(record.msg)
        if isinstance(record.args, dict):
            record.args = self._redact(record.args)
        elif isinstance(record.args, (list, tuple)):
            record.args = tuple(self._redact(arg) for arg in record.args)
        return True

    def _redact(self, value: Any) -> Any:
        if isinstance(value, (str, dict, list, tuple)):
            return self._engine.redact(value, self._scope).value
        return value
