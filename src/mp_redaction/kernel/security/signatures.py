"""Kernel security – built-in sensitive key names and detection pattern sources.

Pure data. Plugins compile patterns from :data:`PATTERN_SOURCES`; the
insertion order of that mapping is the canonical plugin order.
"""
from __future__ import annotations

import dataclasses
import re
from types import MappingProxyType
from typing import Mapping


# Matched case-insensitively as substrings of the candidate key.
BUILT_IN_SENSITIVE_KEYS: tuple[str, ...] = (
    "password",
    "passwd",
    "secret",
    "token",
    "api_key",
    "apikey",
    "api-key",
    "access_token",
    "refresh_token",
    "authorization",
    "auth",
    "credential",
    "credentials",
    "private_key",
    "privatekey",
    "private-key",
    "ssh_key",
    "client_secret",
    "client-secret",
    "bearer",
)


@dataclasses.dataclass(frozen=True)
class PatternSource:
    """Regex source for a built-in value-level detector."""

    source: str
    ignore_case: bool = False

    @property
    def flags(self) -> int:
        # ASCII semantics for \d, \w and \b
        flags = re.ASCII
        if self.ignore_case:
            flags |= re.IGNORECASE
        return flags

    def compile(self) -> re.Pattern[str]:
        return re.compile(self.source, self.flags)


# ASCII whitespace plus the Unicode space separators, which re.ASCII drops from \s
_BEARER_GAP = r"[\s\u00a0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000\ufeff]+"

PATTERN_SOURCES: Mapping[str, PatternSource] = MappingProxyType({
    "jwt": PatternSource(r"\beyJ[a-zA-Z0-9_-]*\.eyJ[a-zA-Z0-9_-]*\.[a-zA-Z0-9_-]*"),
    "bearer": PatternSource(r"\bBearer" + _BEARER_GAP + r"[a-zA-Z0-9._-]+", ignore_case=True),
    "awsKeys": PatternSource(r"\bAKIA[0-9A-Z]{16}\b"),
    "githubTokens": PatternSource(r"\b(ghp_|gho_|ghu_|ghs_|ghr_)[a-zA-Z0-9]{36,}\b"),
    "email": PatternSource(r"\b[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}\b"),
    "ipAddress": PatternSource(r"\b\d{1,3}\.\d{1,3}\.\d{1,3}\.\d{1,3}\b"),
    "creditCard": PatternSource(r"\b\d{4}[- ]?\d{4}[- ]?\d{4}[- ]?\d{4}\b"),
    "hexKeys": PatternSource(r"\b[a-f0-9]{32,}\b", ignore_case=True),
})

BUILT_IN_PATTERN_NAMES: tuple[str, ...] = tuple(PATTERN_SOURCES)


__all__ = [
    "BUILT_IN_PATTERN_NAMES",
    "BUILT_IN_SENSITIVE_KEYS",
    "PATTERN_SOURCES",
    "PatternSource",
]
