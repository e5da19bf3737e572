"""Root error class for the mp-redaction error hierarchy."""

from __future__ import annotations

import json
from typing import Any


class BaseError(Exception):
    """Root of the error hierarchy.

    Errors here describe *configuration* problems, and configuration can
    carry secrets (key terms, custom regex sources). Messages and
    :meth:`to_dict` therefore name the offending setting or file, never its
    value, and the cause is reported by type only.

    Args:
        message: Human-readable description. Must not embed input values.
        code: Machine-readable slug (defaults to ``default_code``).
        detail: Structured, value-free context (setting name, path, reason).
        cause: Original exception that triggered this error.
    """

    default_code: str = "base_error"

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        detail: dict[str, Any] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.detail: dict[str, Any] = detail or {}
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        """Single-line JSON, suitable for structured log fields."""
        return json.dumps(self.to_dict(), ensure_ascii=False, default=str)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "code": self.code,
            "message": self.message,
            "detail": self.detail,
        }
        if self.cause is not None:
            # the cause's repr may quote the offending input
            payload["cause"] = type(self.cause).__name__
        return payload


__all__ = ["BaseError"]
