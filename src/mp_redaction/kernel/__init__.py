"""Kernel – 100% framework-agnostic building blocks."""

from mp_redaction.kernel.errors import ApplicationError, BaseError

__all__ = [
    "ApplicationError",
    "BaseError",
]
