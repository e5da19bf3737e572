"""Kernel security – signature catalog and redaction plugin port."""
from mp_redaction.kernel.security.plugin import (
    RedactionContext,
    RedactionPlugin,
)
from mp_redaction.kernel.security.signatures import (
    BUILT_IN_PATTERN_NAMES,
    BUILT_IN_SENSITIVE_KEYS,
    PATTERN_SOURCES,
    PatternSource,
)

__all__ = [
    "BUILT_IN_PATTERN_NAMES",
    "BUILT_IN_SENSITIVE_KEYS",
    "PATTERN_SOURCES",
    "PatternSource",
    "RedactionContext",
    "RedactionPlugin",
]
