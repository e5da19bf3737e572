"""Config settings – immutable redaction configuration.

One :class:`RedactionConfig` is built per engine and never changes. Wire
names (scope names, pattern names, literal keys) are camelCase; Python
attributes are snake_case.
"""
from __future__ import annotations

import dataclasses
from enum import Enum
from typing import Literal

from mp_redaction.config.validation import InvalidSettingValueError
from mp_redaction.kernel.security.signatures import BUILT_IN_SENSITIVE_KEYS

ReplacementFormat = Literal["simple", "labeled", "partial"]

REPLACEMENT_FORMATS: tuple[str, ...] = ("simple", "labeled", "partial")


class Scope(str, Enum):
    """Data categories that can be gated independently."""

    REQUEST_HEADERS = "requestHeaders"
    REQUEST_QUERY = "requestQuery"
    REQUEST_BODY = "requestBody"
    RESPONSE_HEADERS = "responseHeaders"
    RESPONSE_BODY = "responseBody"
    CONSOLE_OUTPUT = "consoleOutput"
    ERROR_MESSAGES = "errorMessages"
    RETURN_STATE = "returnState"


_SCOPE_FIELDS: dict[str, str] = {
    Scope.REQUEST_HEADERS.value: "request_headers",
    Scope.REQUEST_QUERY.value: "request_query",
    Scope.REQUEST_BODY.value: "request_body",
    Scope.RESPONSE_HEADERS.value: "response_headers",
    Scope.RESPONSE_BODY.value: "response_body",
    Scope.CONSOLE_OUTPUT.value: "console_output",
    Scope.ERROR_MESSAGES.value: "error_messages",
    Scope.RETURN_STATE.value: "return_state",
}

_PATTERN_FIELDS: dict[str, str] = {
    "jwt": "jwt",
    "bearer": "bearer",
    "awsKeys": "aws_keys",
    "githubTokens": "github_tokens",
    "email": "email",
    "ipAddress": "ip_address",
    "creditCard": "credit_card",
    "hexKeys": "hex_keys",
}


@dataclasses.dataclass(frozen=True)
class RedactionScopes:
    """Per-scope enable flags. All scopes are on by default."""

    request_headers: bool = True
    request_query: bool = True
    request_body: bool = True
    response_headers: bool = True
    response_body: bool = True
    console_output: bool = True
    error_messages: bool = True
    return_state: bool = True

    def get(self, scope: str) -> bool | None:
        """Return the flag for *scope* (wire name), or ``None`` if unknown."""
        field_name = _SCOPE_FIELDS.get(scope)
        if field_name is None:
            return None
        return getattr(self, field_name)

    def to_dict(self) -> dict[str, bool]:
        return {name: getattr(self, attr) for name, attr in _SCOPE_FIELDS.items()}


@dataclasses.dataclass(frozen=True)
class SensitiveKeysConfig:
    """Key-level redaction terms."""

    use_built_in: bool = True
    additional: tuple[str, ...] = ()
    excluded: tuple[str, ...] = ()

    def effective_keys(self) -> frozenset[str]:
        """(built-in if enabled ∪ additional) − excluded, lower-cased."""
        keys: set[str] = set()
        if self.use_built_in:
            keys.update(k.lower() for k in BUILT_IN_SENSITIVE_KEYS)
        keys.update(k.lower() for k in self.additional)
        keys.difference_update(k.lower() for k in self.excluded)
        return frozenset(keys)


@dataclasses.dataclass(frozen=True)
class CustomPattern:
    """A user-defined value-level detector."""

    name: str
    regex: str


@dataclasses.dataclass(frozen=True)
class PatternsConfig:
    """Built-in detector toggles plus user patterns."""

    jwt: bool = True
    bearer: bool = True
    aws_keys: bool = True
    github_tokens: bool = True
    email: bool = True
    ip_address: bool = True
    credit_card: bool = True
    hex_keys: bool = True
    custom: tuple[CustomPattern, ...] = ()

    def enabled(self, name: str) -> bool:
        """Whether the built-in detector *name* (wire name) is switched on."""
        field_name = _PATTERN_FIELDS.get(name)
        return field_name is not None and getattr(self, field_name) is True

    def flags(self) -> dict[str, bool]:
        return {name: getattr(self, attr) for name, attr in _PATTERN_FIELDS.items()}


@dataclasses.dataclass(frozen=True)
class RedactionConfig:
    """Complete redaction configuration for one engine."""

    scopes: RedactionScopes = dataclasses.field(default_factory=RedactionScopes)
    sensitive_keys: SensitiveKeysConfig = dataclasses.field(default_factory=SensitiveKeysConfig)
    patterns: PatternsConfig = dataclasses.field(default_factory=PatternsConfig)
    replacement_format: ReplacementFormat = "simple"

    def __post_init__(self) -> None:
        if self.replacement_format not in REPLACEMENT_FORMATS:
            raise InvalidSettingValueError(
                "replacementFormat",
                self.replacement_format,
                f"expected one of {', '.join(REPLACEMENT_FORMATS)}",
            )


# Mandatory baseline: every scope on, every detector on, built-in keys, simple.
DEFAULT_CONFIG = RedactionConfig()


__all__ = [
    "CustomPattern",
    "DEFAULT_CONFIG",
    "PatternsConfig",
    "REPLACEMENT_FORMATS",
    "RedactionConfig",
    "RedactionScopes",
    "ReplacementFormat",
    "Scope",
    "SensitiveKeysConfig",
]
