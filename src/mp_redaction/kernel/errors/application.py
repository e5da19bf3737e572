"""Application-layer errors – problems in how the library is set up or used."""

from __future__ import annotations

from mp_redaction.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Cross-cutting application-layer concern."""

    default_code = "application_error"


__all__ = ["ApplicationError"]
