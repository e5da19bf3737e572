"""Config settings – overlay loaders and the mandatory-floor resolver.

User configuration never replaces the baseline; it is an *overlay* that may
only add to it. An overlay is a plain dict using the literal's camelCase
keys, restricted to the additive fields::

    {
        "sensitiveKeys": {"additional": [...], "excluded": [...]},
        "patterns": {"custom": [{"name": "...", "regex": "..."}]},
        "replacementFormat": "labeled"
    }

Overlays from several sources are combined with :func:`merge_config_inputs`
and applied on top of the floor with :func:`resolve_redaction_config`.
"""
from __future__ import annotations

import abc
import dataclasses
import json
import os
import pathlib
from typing import Any, Mapping, Sequence

from mp_redaction.config.settings.base import (
    DEFAULT_CONFIG,
    REPLACEMENT_FORMATS,
    CustomPattern,
    RedactionConfig,
    _PATTERN_FIELDS,
)
from mp_redaction.config.validation import ConfigFileError
from mp_redaction.observability.logging.processors import get_logger

_log = get_logger(__name__)

ConfigInput = dict[str, Any]


def _section(source: Mapping[str, Any], name: str) -> Mapping[str, Any]:
    value = source.get(name)
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        _log.warning("redaction.config_section_ignored", field=name, value_type=type(value).__name__)
        return {}
    return value


def _entries(section: Mapping[str, Any], name: str) -> list[Any]:
    value = section.get(name)
    return list(value) if isinstance(value, (list, tuple)) else []


class ConfigLoader(abc.ABC):
    """Port: read a redaction overlay from an external source."""

    @abc.abstractmethod
    def load(self) -> ConfigInput: ...


class JsonFileConfigLoader(ConfigLoader):
    """Read an overlay from a JSON file.

    When the document has a top-level ``"redaction"`` object (a project-wide
    config file), that object is the overlay; otherwise the whole document is.
    """

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self._path = pathlib.Path(path)

    def load(self) -> ConfigInput:
        try:
            parsed = json.loads(self._path.read_text(encoding="utf-8"))
        except OSError as exc:
            raise ConfigFileError(str(self._path), exc.strerror or str(exc), cause=exc) from exc
        except UnicodeDecodeError as exc:
            raise ConfigFileError(str(self._path), "not valid UTF-8", cause=exc) from exc
        except json.JSONDecodeError as exc:
            raise ConfigFileError(str(self._path), f"invalid JSON: {exc.msg}", cause=exc) from exc

        if not isinstance(parsed, dict):
            raise ConfigFileError(str(self._path), "top-level value must be an object")
        section = parsed.get("redaction", parsed)
        if not isinstance(section, dict):
            raise ConfigFileError(str(self._path), "'redaction' must be an object")
        return section


class EnvConfigLoader(ConfigLoader):
    """Build an overlay from environment variables.

    ``<PREFIX>_REPLACEMENT_FORMAT``
        ``simple``, ``labeled`` or ``partial``.
    ``<PREFIX>_ADDITIONAL_KEYS``
        Comma-separated extra sensitive key terms.
    """

    def __init__(self, prefix: str = "REDACTION", environ: Mapping[str, str] | None = None) -> None:
        self._prefix = prefix.upper().rstrip("_")
        self._environ = environ

    def load(self) -> ConfigInput:
        environ = os.environ if self._environ is None else self._environ
        overlay: ConfigInput = {}

        fmt = environ.get(f"{self._prefix}_REPLACEMENT_FORMAT")
        if fmt:
            overlay["replacementFormat"] = fmt.strip().lower()

        raw_keys = environ.get(f"{self._prefix}_ADDITIONAL_KEYS")
        if raw_keys:
            keys = [k.strip() for k in raw_keys.split(",") if k.strip()]
            if keys:
                overlay["sensitiveKeys"] = {"additional": keys}
        return overlay


def merge_config_inputs(base: Mapping[str, Any], overlay: Mapping[str, Any]) -> ConfigInput:
    """Merge two overlays; *overlay* wins for scalars, lists concatenate."""
    merged: ConfigInput = {}

    fmt = overlay.get("replacementFormat", base.get("replacementFormat"))
    if fmt is not None:
        merged["replacementFormat"] = fmt

    base_keys = _section(base, "sensitiveKeys")
    over_keys = _section(overlay, "sensitiveKeys")
    if base_keys or over_keys:
        merged["sensitiveKeys"] = {
            "additional": [*_entries(base_keys, "additional"), *_entries(over_keys, "additional")],
            "excluded": [*_entries(base_keys, "excluded"), *_entries(over_keys, "excluded")],
        }

    base_patterns = _section(base, "patterns")
    over_patterns = _section(overlay, "patterns")
    if base_patterns or over_patterns:
        # built-in flags and scopes are carried only so the resolver can report them
        flags = {
            name: flag
            for name, flag in {**base_patterns, **over_patterns}.items()
            if name in _PATTERN_FIELDS
        }
        merged["patterns"] = {
            **flags,
            "custom": [*_entries(base_patterns, "custom"), *_entries(over_patterns, "custom")],
        }

    scopes = {**_section(base, "scopes"), **_section(overlay, "scopes")}
    if scopes:
        merged["scopes"] = scopes

    return merged


def resolve_redaction_config(
    overlay: Mapping[str, Any] | None = None,
    *,
    floor: RedactionConfig = DEFAULT_CONFIG,
) -> RedactionConfig:
    """Apply *overlay* on top of the mandatory *floor*.

    The overlay may add sensitive keys and custom patterns and pick the
    replacement format. Anything that would weaken the floor (excluded keys,
    scope flags, built-in pattern flags) is ignored and logged. Malformed
    entries are skipped; this function does not raise for overlay content.
    """
    if not overlay:
        return floor

    additional = list(floor.sensitive_keys.additional)
    keys_in = _section(overlay, "sensitiveKeys")
    for key in _entries(keys_in, "additional"):
        if isinstance(key, str) and key not in additional:
            additional.append(key)
    if keys_in.get("excluded"):
        _log.warning("redaction.floor_weakening_ignored", field="sensitiveKeys.excluded")

    if _section(overlay, "scopes"):
        _log.warning("redaction.floor_weakening_ignored", field="scopes")

    custom = list(floor.patterns.custom)
    patterns_in = _section(overlay, "patterns")
    for entry in _entries(patterns_in, "custom"):
        if (
            isinstance(entry, Mapping)
            and isinstance(entry.get("name"), str)
            and isinstance(entry.get("regex"), str)
        ):
            custom.append(CustomPattern(name=entry["name"], regex=entry["regex"]))
    flags = sorted(name for name in patterns_in if name in _PATTERN_FIELDS)
    if flags:
        _log.warning("redaction.floor_weakening_ignored", field="patterns", names=flags)

    replacement_format = floor.replacement_format
    fmt = overlay.get("replacementFormat")
    if fmt in REPLACEMENT_FORMATS:
        replacement_format = fmt
    elif fmt is not None:
        _log.warning("redaction.unknown_replacement_format", value=str(fmt))

    return dataclasses.replace(
        floor,
        sensitive_keys=dataclasses.replace(floor.sensitive_keys, additional=tuple(additional)),
        patterns=dataclasses.replace(floor.patterns, custom=tuple(custom)),
        replacement_format=replacement_format,
    )


def load_redaction_config(
    paths: Sequence[str | os.PathLike[str]] = (),
    *,
    env: bool = True,
    environ: Mapping[str, str] | None = None,
    floor: RedactionConfig = DEFAULT_CONFIG,
) -> RedactionConfig:
    """Merge file overlays left to right, then the environment, then resolve.

    Unreadable files are logged and skipped; a missing config file never
    stops a run.
    """
    accumulated: ConfigInput = {}
    for path in paths:
        try:
            overlay = JsonFileConfigLoader(path).load()
        except ConfigFileError as exc:
            _log.warning("redaction.config_file_skipped", path=exc.path, reason=exc.reason)
            continue
        accumulated = merge_config_inputs(accumulated, overlay)

    if env:
        accumulated = merge_config_inputs(accumulated, EnvConfigLoader(environ=environ).load())

    return resolve_redaction_config(accumulated, floor=floor)


__all__ = [
    "ConfigInput",
    "ConfigLoader",
    "EnvConfigLoader",
    "JsonFileConfigLoader",
    "load_redaction_config",
    "merge_config_inputs",
    "resolve_redaction_config",
]
