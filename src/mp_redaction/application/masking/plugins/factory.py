from __future__ import annotations

import re

from mp_redaction.application.masking.plugins.patterns import BUILT_IN_PATTERN_PLUGINS, PatternPlugin
from mp_redaction.application.masking.plugins.sensitive_keys import SensitiveKeysPlugin
from mp_redaction.config.settings.base import CustomPattern, RedactionConfig
from mp_redaction.kernel.security.plugin import RedactionPlugin
from mp_redaction.observability.logging.processors import get_logger

__all__ = ["build_plugins", "compile_custom_pattern"]

_log = get_logger(__name__)


def compile_custom_pattern(custom: CustomPattern) -> PatternPlugin | None:
    """Return a plugin for *custom*, or ``None`` when its regex does not compile."""
    try:
        pattern = re.compile(custom.regex, re.ASCII)
    except (re.error, TypeError) as exc:
        # name only: the regex itself may embed a secret
        _log.warning("redaction.custom_pattern_dropped", name=custom.name, error=type(exc).__name__)
        return None
    return PatternPlugin(custom.name, pattern)


def build_plugins(config: RedactionConfig) -> list[RedactionPlugin]:
    """Assemble the ordered plugin list for *config*.

    Order: the sensitive-keys plugin, then enabled built-in detectors in
    catalog order, then custom patterns in declaration order. Custom patterns
    that fail to compile are dropped; this never raises.
    """
    plugins: list[RedactionPlugin] = [SensitiveKeysPlugin(config.sensitive_keys)]

    for name, plugin in BUILT_IN_PATTERN_PLUGINS.items():
        if config.patterns.enabled(name):
            plugins.append(plugin)

    for custom in config.patterns.custom:
        compiled = compile_custom_pattern(custom)
        if compiled is not None:
            plugins.append(compiled)

    return plugins
