"""Config settings – RedactionConfigFactory.

Converts between :class:`RedactionConfig` and the camelCase literal that
callers supply from JSON files or plain dicts::

    {
        "scopes": {"requestHeaders": true, ...},
        "sensitiveKeys": {"useBuiltIn": true, "additional": [], "excluded": []},
        "patterns": {"jwt": true, ..., "custom": [{"name": "...", "regex": "..."}]},
        "replacementFormat": "simple"
    }
"""
from __future__ import annotations

import dataclasses
from typing import Any, Mapping

from mp_redaction.config.settings.base import (
    DEFAULT_CONFIG,
    CustomPattern,
    PatternsConfig,
    RedactionConfig,
    RedactionScopes,
    SensitiveKeysConfig,
    _PATTERN_FIELDS,
    _SCOPE_FIELDS,
)
from mp_redaction.config.validation import ConfigError, InvalidSettingValueError


def _section(data: Mapping[str, Any], name: str) -> Mapping[str, Any]:
    value = data.get(name)
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise InvalidSettingValueError(name, value, "expected an object")
    return value


def _bool(section: Mapping[str, Any], key: str, default: bool, setting: str) -> bool:
    value = section.get(key, default)
    if not isinstance(value, bool):
        raise InvalidSettingValueError(setting, value, "expected a boolean")
    return value


def _strings(
    section: Mapping[str, Any], key: str, default: tuple[str, ...], setting: str
) -> tuple[str, ...]:
    value = section.get(key)
    if value is None:
        return default
    if isinstance(value, str) or not isinstance(value, (list, tuple)):
        raise InvalidSettingValueError(setting, value, "expected a list of strings")
    for item in value:
        if not isinstance(item, str):
            raise InvalidSettingValueError(setting, item, "expected a string")
    return tuple(value)


def _custom_patterns(
    section: Mapping[str, Any], default: tuple[CustomPattern, ...]
) -> tuple[CustomPattern, ...]:
    value = section.get("custom")
    if value is None:
        return default
    if not isinstance(value, (list, tuple)):
        raise InvalidSettingValueError("patterns.custom", value, "expected a list")
    patterns: list[CustomPattern] = []
    for entry in value:
        if (
            not isinstance(entry, Mapping)
            or not isinstance(entry.get("name"), str)
            or not isinstance(entry.get("regex"), str)
        ):
            raise InvalidSettingValueError(
                "patterns.custom", entry, "expected {name: str, regex: str}"
            )
        patterns.append(CustomPattern(name=entry["name"], regex=entry["regex"]))
    return tuple(patterns)


class RedactionConfigFactory:
    """Build a :class:`RedactionConfig` from a literal and back.

    Missing sections and keys take their values from *defaults*
    (:data:`DEFAULT_CONFIG` unless given). Unknown keys are ignored.
    """

    @staticmethod
    def from_dict(
        data: Mapping[str, Any],
        defaults: RedactionConfig = DEFAULT_CONFIG,
    ) -> RedactionConfig:
        """
        Raises
        ------
        InvalidSettingValueError
            When a value has the wrong type or the replacement format is unknown.
        ConfigError
            When *data* is not a mapping.
        """
        if not isinstance(data, Mapping):
            raise ConfigError(f"Redaction config must be an object, got {type(data).__name__}")

        scopes_in = _section(data, "scopes")
        scopes = RedactionScopes(**{
            attr: _bool(scopes_in, name, getattr(defaults.scopes, attr), f"scopes.{name}")
            for name, attr in _SCOPE_FIELDS.items()
        })

        keys_in = _section(data, "sensitiveKeys")
        sensitive_keys = SensitiveKeysConfig(
            use_built_in=_bool(
                keys_in,
                "useBuiltIn",
                defaults.sensitive_keys.use_built_in,
                "sensitiveKeys.useBuiltIn",
            ),
            additional=_strings(
                keys_in,
                "additional",
                defaults.sensitive_keys.additional,
                "sensitiveKeys.additional",
            ),
            excluded=_strings(
                keys_in,
                "excluded",
                defaults.sensitive_keys.excluded,
                "sensitiveKeys.excluded",
            ),
        )

        patterns_in = _section(data, "patterns")
        patterns = PatternsConfig(
            **{
                attr: _bool(patterns_in, name, getattr(defaults.patterns, attr), f"patterns.{name}")
                for name, attr in _PATTERN_FIELDS.items()
            },
            custom=_custom_patterns(patterns_in, defaults.patterns.custom),
        )

        replacement_format = data.get("replacementFormat", defaults.replacement_format)
        return RedactionConfig(
            scopes=scopes,
            sensitive_keys=sensitive_keys,
            patterns=patterns,
            replacement_format=replacement_format,
        )

    @staticmethod
    def to_dict(config: RedactionConfig) -> dict[str, Any]:
        """Render *config* as the camelCase literal (JSON-serialisable)."""
        return {
            "scopes": config.scopes.to_dict(),
            "sensitiveKeys": {
                "useBuiltIn": config.sensitive_keys.use_built_in,
                "additional": list(config.sensitive_keys.additional),
                "excluded": list(config.sensitive_keys.excluded),
            },
            "patterns": {
                **config.patterns.flags(),
                "custom": [dataclasses.asdict(p) for p in config.patterns.custom],
            },
            "replacementFormat": config.replacement_format,
        }


__all__ = ["RedactionConfigFactory"]
