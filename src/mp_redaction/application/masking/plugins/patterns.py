"""Value-level detectors built from the signature catalog."""
from __future__ import annotations

import re
from types import MappingProxyType
from typing import Mapping

from mp_redaction.application.masking.rules import (
    PartialMask,
    aws_key_mask,
    bearer_mask,
    credit_card_mask,
    email_mask,
    generic_partial_mask,
    github_token_mask,
    ip_address_mask,
    jwt_mask,
)
from mp_redaction.kernel.security.plugin import RedactionContext
from mp_redaction.kernel.security.signatures import PATTERN_SOURCES, PatternSource

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
]


class PatternPlugin:
    """Regex detector with an optional plugin-specific partial mask.

    The pattern is compiled once up front; :class:`re.Pattern` objects carry
    no match position, so handing the same one to every caller is safe.
    """

    def __init__(self, name: str, pattern: re.Pattern[str], mask: PartialMask | None = None) -> None:
        self.name = name
        self._pattern = pattern
        self._mask = mask or generic_partial_mask

    @classmethod
    def from_source(cls, name: str, source: PatternSource, mask: PartialMask | None = None) -> PatternPlugin:
        return cls(name, source.compile(), mask)

    @property
    def pattern(self) -> re.Pattern[str]:
        return self._pattern

    def match_value(self, value: str, ctx: RedactionContext) -> re.Pattern[str] | None:  # noqa: ARG002
        return self._pattern

    def partial_mask(self, match: str) -> str:
        return self._mask(match)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, pattern={self._pattern.pattern!r})"


JWT_PLUGIN = PatternPlugin.from_source("jwt", PATTERN_SOURCES["jwt"], jwt_mask)
BEARER_PLUGIN = PatternPlugin.from_source("bearer", PATTERN_SOURCES["bearer"], bearer_mask)
AWS_KEYS_PLUGIN = PatternPlugin.from_source("awsKeys", PATTERN_SOURCES["awsKeys"], aws_key_mask)
GITHUB_TOKENS_PLUGIN = PatternPlugin.from_source(
    "githubTokens", PATTERN_SOURCES["githubTokens"], github_token_mask
)
EMAIL_PLUGIN = PatternPlugin.from_source("email", PATTERN_SOURCES["email"], email_mask)
IP_ADDRESS_PLUGIN = PatternPlugin.from_source("ipAddress", PATTERN_SOURCES["ipAddress"], ip_address_mask)
CREDIT_CARD_PLUGIN = PatternPlugin.from_source("creditCard", PATTERN_SOURCES["creditCard"], credit_card_mask)
HEX_KEYS_PLUGIN = PatternPlugin.from_source("hexKeys", PATTERN_SOURCES["hexKeys"])

# Canonical order; decides which mask wins when detectors overlap.
BUILT_IN_PATTERN_PLUGINS: Mapping[str, PatternPlugin] = MappingProxyType({
    p.name: p
    for p in (
        JWT_PLUGIN,
        BEARER_PLUGIN,
        AWS_KEYS_PLUGIN,
        GITHUB_TOKENS_PLUGIN,
        EMAIL_PLUGIN,
        IP_ADDRESS_PLUGIN,
        CREDIT_CARD_PLUGIN,
        HEX_KEYS_PLUGIN,
    )
})
