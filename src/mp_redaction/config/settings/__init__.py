"""Config settings – redaction configuration, literal parsing and overlays."""
from mp_redaction.config.settings.base import (
    DEFAULT_CONFIG,
    REPLACEMENT_FORMATS,
    CustomPattern,
    PatternsConfig,
    RedactionConfig,
    RedactionScopes,
    ReplacementFormat,
    Scope,
    SensitiveKeysConfig,
)
from mp_redaction.config.settings.factory import RedactionConfigFactory
from mp_redaction.config.settings.loaders import (
    ConfigInput,
    ConfigLoader,
    EnvConfigLoader,
    JsonFileConfigLoader,
    load_redaction_config,
    merge_config_inputs,
    resolve_redaction_config,
)

__all__ = [
    "ConfigInput",
    "ConfigLoader",
    "CustomPattern",
    "DEFAULT_CONFIG",
    "EnvConfigLoader",
    "JsonFileConfigLoader",
    "PatternsConfig",
    "REPLACEMENT_FORMATS",
    "RedactionConfig",
    "RedactionConfigFactory",
    "RedactionScopes",
    "ReplacementFormat",
    "Scope",
    "SensitiveKeysConfig",
    "load_redaction_config",
    "merge_config_inputs",
    "resolve_redaction_config",
]
