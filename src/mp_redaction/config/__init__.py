"""Config – redaction settings, overlay loaders, and validation errors."""

from mp_redaction.config.settings import (
    DEFAULT_CONFIG,
    RedactionConfig,
    RedactionConfigFactory,
    Scope,
    load_redaction_config,
    resolve_redaction_config,
)
from mp_redaction.config.validation import ConfigError, ConfigFileError, InvalidSettingValueError

__all__ = [
    "ConfigError",
    "ConfigFileError",
    "DEFAULT_CONFIG",
    "InvalidSettingValueError",
    "RedactionConfig",
    "RedactionConfigFactory",
    "Scope",
    "load_redaction_config",
    "resolve_redaction_config",
]
