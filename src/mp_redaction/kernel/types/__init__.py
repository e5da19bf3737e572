"""Kernel types – value objects shared across layers."""
from mp_redaction.kernel.types.result import RedactionDetail, RedactionResult

__all__ = ["RedactionDetail", "RedactionResult"]
