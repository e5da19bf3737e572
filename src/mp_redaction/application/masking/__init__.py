"""Application Redaction / Masking."""
from mp_redaction.application.masking.adapter import redact_event
from mp_redaction.application.masking.log_filter import RedactionLogFilter
from mp_redaction.application.masking.masker import DEFAULT_MAX_DEPTH, RedactionEngine
from mp_redaction.application.masking.plugins import (
    BUILT_IN_PATTERN_PLUGINS,
    PatternPlugin,
    SensitiveKeysPlugin,
    build_plugins,
)
from mp_redaction.application.masking.rules import (
    REDACTED,
    TOO_DEEP,
    ReplacementFormat,
    generic_partial_mask,
)

__all__ = [
    "BUILT_IN_PATTERN_PLUGINS",
    "DEFAULT_MAX_DEPTH",
    "PatternPlugin",
    "REDACTED",
    "RedactionEngine",
    "RedactionLogFilter",
    "ReplacementFormat",
    "SensitiveKeysPlugin",
    "TOO_DEEP",
    "build_plugins",
    "generic_partial_mask",
    "redact_event",
]
