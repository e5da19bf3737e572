"""Kernel types – RedactionResult and its audit entries."""
from __future__ import annotations

import dataclasses
from typing import Any


@dataclasses.dataclass(frozen=True)
class RedactionDetail:
    """One audit entry: what was redacted, where, and by which plugin.

    ``original`` may hold the plaintext secret. Entries are for local
    diagnostics only and must never be persisted, logged or sent anywhere.
    """

    path: str
    plugin: str
    original: str | None = dataclasses.field(default=None, repr=False)


@dataclasses.dataclass(frozen=True)
class RedactionResult:
    """Outcome of :meth:`RedactionEngine.redact`.

    ``value`` is a new tree, structurally independent of the input (except
    when the scope gate short-circuits, in which case it *is* the input).
    """

    value: Any
    redacted: bool = False
    details: tuple[RedactionDetail, ...] = ()

    @property
    def plugins(self) -> tuple[str, ...]:
        """Names of the plugins that fired, in first-hit order, without duplicates."""
        return tuple(dict.fromkeys(d.plugin for d in self.details))


__all__ = ["RedactionDetail", "RedactionResult"]
