from __future__ import annotations

from mp_redaction.config.settings.base import SensitiveKeysConfig
from mp_redaction.kernel.security.plugin import RedactionContext

__all__ = ["SensitiveKeysPlugin"]


class SensitiveKeysPlugin:
    """Key-level detector: a key is sensitive when it contains a configured term.

    Matching is case-insensitive substring containment, so
    ``"X-Authorization-Token"`` hits ``"authorization"``.
    """

    name = "sensitive-keys"

    def __init__(self, config: SensitiveKeysConfig | None = None) -> None:
        self._keys = (config or SensitiveKeysConfig()).effective_keys()

    @property
    def keys(self) -> frozenset[str]:
        return self._keys

    def is_key_sensitive(self, key: str, ctx: RedactionContext) -> bool | None:  # noqa: ARG002
        lower = key.lower()
        if lower in self._keys:
            return True
        for term in self._keys:
            if term in lower:
                return True
        return None
