"""Kernel security – redaction plugin port and the context passed to it."""
from __future__ import annotations

import dataclasses
from typing import Protocol, runtime_checkable


@dataclasses.dataclass(frozen=True)
class RedactionContext:
    """Where in the data tree the engine currently is.

    ``path`` is the root-to-here chain of keys and list indices; ``key`` is
    its last segment, or ``""`` for a root value.
    """

    scope: str
    path: tuple[str, ...] = ()
    key: str = ""


@runtime_checkable
class RedactionPlugin(Protocol):
    """Port: one self-contained detector of sensitive data.

    Only ``name`` is required. The engine discovers the optional
    capabilities with ``getattr``, so a plugin implements any subset of:

    ``is_key_sensitive(key, ctx) -> bool | None``
        Key-level check. Return ``True`` to redact the whole value under
        *key*; anything else defers to the next plugin.

    ``match_value(value, ctx) -> re.Pattern[str] | None``
        Value-level check. Every match of the returned pattern is replaced.
        ``None`` skips the plugin for this string. The returned object must
        hold no per-call match state; compiled :class:`re.Pattern` objects
        are immutable and safe to share.

    ``partial_mask(match) -> str``
        Mask used for this plugin's matches under the ``partial`` format.
        The engine falls back to the generic mask when absent.
    """

    name: str


__all__ = ["RedactionContext", "RedactionPlugin"]
