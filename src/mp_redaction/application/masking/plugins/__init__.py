"""Built-in redaction plugins and the plugin-list factory."""
from mp_redaction.application.masking.plugins.factory import build_plugins, compile_custom_pattern
from mp_redaction.application.masking.plugins.patterns import (
    AWS_KEYS_PLUGIN,
    BEARER_PLUGIN,
    BUILT_IN_PATTERN_PLUGINS,
    CREDIT_CARD_PLUGIN,
    EMAIL_PLUGIN,
    GITHUB_TOKENS_PLUGIN,
    HEX_KEYS_PLUGIN,
    IP_ADDRESS_PLUGIN,
    JWT_PLUGIN,
    PatternPlugin,
)
from mp_redaction.application.masking.plugins.sensitive_keys import SensitiveKeysPlugin

__all__ = [
    "AWS_KEYS_PLUGIN",
    "BEARER_PLUGIN",
    "BUILT_IN_PATTERN_PLUGINS",
    "CREDIT_CARD_PLUGIN",
    "EMAIL_PLUGIN",
    "GITHUB_TOKENS_PLUGIN",
    "HEX_KEYS_PLUGIN",
    "IP_ADDRESS_PLUGIN",
    "JWT_PLUGIN",
    "PatternPlugin",
    "SensitiveKeysPlugin",
    "build_plugins",
    "compile_custom_pattern",
]
