from __future__ import annotations

import re
from typing import Any, Callable

from mp_redaction.config.settings.base import REPLACEMENT_FORMATS, ReplacementFormat

__all__ = [
    "PartialMask",
    "REDACTED",
    "REPLACEMENT_FORMATS",
    "ReplacementFormat",
    "TOO_DEEP",
    "aws_key_mask",
    "bearer_mask",
    "credit_card_mask",
    "email_mask",
    "generic_partial_mask",
    "github_token_mask",
    "ip_address_mask",
    "jwt_mask",
    "labeled",
    "stringify",
]

REDACTED = "[REDACTED]"
TOO_DEEP = "[REDACTED: too deep]"

PartialMask = Callable[[str], str]

_NON_DIGIT = re.compile(r"\D", re.ASCII)
# scheme word plus whatever separator run the bearer detector accepted
_BEARER_SCHEME = re.compile(r"bearer[^a-zA-Z0-9._-]+", re.IGNORECASE)


def labeled(plugin_name: str) -> str:
    return f"[REDACTED:{plugin_name}]"


def generic_partial_mask(value: str) -> str:
    """Reveal a bounded prefix/suffix: ``****``, ``ab***z`` or ``abc***xyz``."""
    length = len(value)
    if length <= 4:
        return "****"
    if length <= 8:
        return value[:2] + "***" + value[-1:]
    return value[:3] + "***" + value[-3:]


def stringify(value: Any) -> str:
    """String form used when a sensitive key's whole value is partially masked."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def email_mask(match: str) -> str:
    # u***@***.com
    at = match.find("@")
    if at <= 0:
        return "***@***"
    dot = match.rfind(".")
    suffix = match[dot:] if dot > at else ""
    return match[0] + "***@***" + suffix


def ip_address_mask(match: str) -> str:
    parts = match.split(".")
    if len(parts) == 4:
        return f"{parts[0]}.{parts[1]}.*.*"
    return generic_partial_mask(match)


def credit_card_mask(match: str) -> str:
    # PCI: last four digits only
    digits = _NON_DIGIT.sub("", match)
    return "****-****-****-" + digits[-4:]


def jwt_mask(match: str) -> str:
    return match[:3] + "***" + match[-3:]


def aws_key_mask(match: str) -> str:
    return match[:4] + "***" + match[-2:]


def github_token_mask(match: str) -> str:
    prefix_end = match.find("_")
    if 0 < prefix_end < 4:
        return match[: prefix_end + 1] + "***" + match[-3:]
    return match[:4] + "***" + match[-3:]


def bearer_mask(match: str) -> str:
    scheme = _BEARER_SCHEME.match(match)
    if scheme is None:
        return generic_partial_mask(match)
    return "Bearer " + generic_partial_mask(match[scheme.end():])
