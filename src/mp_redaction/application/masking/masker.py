from __future__ import annotations

import re
from enum import Enum
from typing import Any, Callable, Iterable, Mapping, Sequence

from mp_redaction.application.masking.plugins import build_plugins
from mp_redaction.application.masking.rules import (
    REDACTED,
    TOO_DEEP,
    generic_partial_mask,
    labeled,
    stringify,
)
from mp_redaction.config.settings.base import DEFAULT_CONFIG, RedactionConfig
from mp_redaction.kernel.security.plugin import RedactionContext, RedactionPlugin
from mp_redaction.kernel.types.result import RedactionDetail, RedactionResult

__all__ = ["DEFAULT_MAX_DEPTH", "RedactionEngine"]

DEFAULT_MAX_DEPTH = 10

_Walked = tuple[Any, bool]


class RedactionEngine:
    """Recursively masks sensitive data using an ordered list of plugins.

    Key-level plugins are consulted for every mapping key, first ``True``
    wins and the value is replaced without being inspected. Every other
    string is run through each value-level plugin in turn, each one seeing
    the previous plugin's output.

    The engine holds only the frozen config and the plugin tuple, so one
    instance can serve any number of threads. Inputs are never mutated.

    Typical usage::

        engine = RedactionEngine.from_config(DEFAULT_CONFIG)
        engine.redact({"authorization": "Bearer abc"}).value
        # {'authorization': '[REDACTED]'}
    """

    def __init__(
        self,
        config: RedactionConfig,
        plugins: Sequence[RedactionPlugin],
        max_depth: int = DEFAULT_MAX_DEPTH,
    ) -> None:
        self._config = config
        self._plugins = tuple(plugins)
        self._max_depth = max_depth
        self._key_plugins = tuple(
            p for p in self._plugins if callable(getattr(p, "is_key_sensitive", None))
        )
        self._value_plugins = tuple(
            p for p in self._plugins if callable(getattr(p, "match_value", None))
        )

    @classmethod
    def from_config(
        cls,
        config: RedactionConfig = DEFAULT_CONFIG,
        max_depth: int = DEFAULT_MAX_DEPTH,
    ) -> RedactionEngine:
        """Build an engine with the plugin list :func:`build_plugins` derives from *config*."""
        return cls(config, build_plugins(config), max_depth=max_depth)

    @property
    def config(self) -> RedactionConfig:
        return self._config

    @property
    def plugins(self) -> tuple[RedactionPlugin, ...]:
        return self._plugins

    @property
    def max_depth(self) -> int:
        return self._max_depth

    def redact(self, value: Any, scope: str | None = None) -> RedactionResult:
        """Return a redacted copy of *value*.

        When *scope* names a scope that the config disables, *value* is
        returned as-is without being walked. Never raises.
        """
        scope_name = scope.value if isinstance(scope, Enum) else (scope or "")
        if scope_name and self._config.scopes.get(scope_name) is False:
            return RedactionResult(value=value, redacted=False, details=())

        details: list[RedactionDetail] = []
        walked, did_redact = self._walk(value, scope_name, (), details, 0)
        return RedactionResult(value=walked, redacted=did_redact, details=tuple(details))

    # ------------------------------------------------------------------
    # Recursive walker
    # ------------------------------------------------------------------

    def _walk(
        self,
        node: Any,
        scope: str,
        path: tuple[str, ...],
        details: list[RedactionDetail],
        depth: int,
    ) -> _Walked:
        if depth > self._max_depth:
            return TOO_DEEP, True
        if node is None:
            return node, False
        if isinstance(node, str):
            return self._walk_string(node, scope, path, details)
        if isinstance(node, Mapping):
            return self._walk_mapping(node, scope, path, details, depth)
        if isinstance(node, (list, tuple)):
            items, did_redact = self._walk_items(node, scope, path, details, depth)
            return (items if isinstance(node, list) else tuple(items)), did_redact
        if isinstance(node, (set, frozenset)):
            # members get positional paths in iteration order; equal masks collapse
            items, did_redact = self._walk_items(node, scope, path, details, depth)
            return (frozenset(items) if isinstance(node, frozenset) else set(items)), did_redact
        # numbers, booleans, bytes and arbitrary objects
        return node, False

    def _walk_items(
        self,
        node: Iterable[Any],
        scope: str,
        path: tuple[str, ...],
        details: list[RedactionDetail],
        depth: int,
    ) -> tuple[list[Any], bool]:
        did_redact = False
        items: list[Any] = []
        for index, item in enumerate(node):
            value, hit = self._walk(item, scope, (*path, str(index)), details, depth + 1)
            items.append(value)
            did_redact = did_redact or hit
        return items, did_redact

    def _walk_mapping(
        self,
        node: Mapping[Any, Any],
        scope: str,
        path: tuple[str, ...],
        details: list[RedactionDetail],
        depth: int,
    ) -> _Walked:
        did_redact = False
        result: dict[Any, Any] = {}

        for key, value in node.items():
            key_str = str(key)
            key_path = (*path, key_str)
            ctx = RedactionContext(scope=scope, path=key_path, key=key_str)

            plugin_name = self._sensitive_key_plugin(key_str, ctx)
            if plugin_name is not None:
                if self._config.replacement_format == "partial":
                    result[key] = generic_partial_mask(stringify(value))
                else:
                    result[key] = REDACTED
                did_redact = True
                details.append(RedactionDetail(
                    path=".".join(key_path),
                    plugin=plugin_name,
                    original=value if isinstance(value, str) else None,
                ))
                continue

            result[key], hit = self._walk(value, scope, key_path, details, depth + 1)
            did_redact = did_redact or hit

        return result, did_redact

    def _sensitive_key_plugin(self, key: str, ctx: RedactionContext) -> str | None:
        for plugin in self._key_plugins:
            if plugin.is_key_sensitive(key, ctx) is True:  # type: ignore[attr-defined]
                return plugin.name
        return None

    def _walk_string(
        self,
        text: str,
        scope: str,
        path: tuple[str, ...],
        details: list[RedactionDetail],
    ) -> _Walked:
        result = text
        did_redact = False
        ctx = RedactionContext(scope=scope, path=path, key=path[-1] if path else "")

        for plugin in self._value_plugins:
            pattern = plugin.match_value(result, ctx)  # type: ignore[attr-defined]
            if pattern is None or not pattern.search(result):
                continue
            result = pattern.sub(self._replacement_for(plugin), result)
            did_redact = True
            details.append(RedactionDetail(path=".".join(path), plugin=plugin.name, original=text))

        return result, did_redact

    def _replacement_for(self, plugin: RedactionPlugin) -> Callable[[re.Match[str]], str]:
        fmt = self._config.replacement_format
        if fmt == "partial":
            mask = getattr(plugin, "partial_mask", None) or generic_partial_mask
            return lambda m: mask(m.group(0))
        token = labeled(plugin.name) if fmt == "labeled" else REDACTED
        return lambda _m: token
