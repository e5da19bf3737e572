"""Unit tests for the signature catalog and plugin port types."""
from __future__ import annotations

import dataclasses
import re

import pytest

from mp_redaction.kernel.security import (
    BUILT_IN_PATTERN_NAMES,
    BUILT_IN_SENSITIVE_KEYS,
    PATTERN_SOURCES,
    PatternSource,
    RedactionContext,
    RedactionPlugin,
)
from mp_redaction.kernel.types import RedactionDetail, RedactionResult


class TestCatalog:
    def test_sensitive_keys_are_lower_case(self) -> None:
        assert all(k == k.lower() for k in BUILT_IN_SENSITIVE_KEYS)
        assert len(set(BUILT_IN_SENSITIVE_KEYS)) == len(BUILT_IN_SENSITIVE_KEYS)

    def test_pattern_names(self) -> None:
        assert BUILT_IN_PATTERN_NAMES == (
            "jwt", "bearer", "awsKeys", "githubTokens", "email", "ipAddress", "creditCard", "hexKeys",
        )

    def test_catalog_is_read_only(self) -> None:
        with pytest.raises(TypeError):
            PATTERN_SOURCES["ssn"] = PatternSource(r"\d{3}-\d{2}-\d{4}")  # type: ignore[index]

    def test_sources_compile_with_ascii(self) -> None:
        for source in PATTERN_SOURCES.values():
            assert source.compile().flags & re.ASCII

    def test_ignore_case_flag(self) -> None:
        assert PatternSource("x", ignore_case=True).flags & re.IGNORECASE
        assert not PatternSource("x").flags & re.IGNORECASE


class TestRedactionContext:
    def test_defaults(self) -> None:
        ctx = RedactionContext(scope="requestBody")
        assert (ctx.path, ctx.key) == ((), "")

    def test_frozen(self) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            RedactionContext(scope="x").scope = "y"  # type: ignore[misc]


class TestRedactionPluginProtocol:
    def test_any_named_object_qualifies(self) -> None:
        class Named:
            name = "n"

        assert isinstance(Named(), RedactionPlugin)

    def test_unnamed_object_does_not(self) -> None:
        assert not isinstance(object(), RedactionPlugin)


class TestRedactionResult:
    def test_plugins_deduplicated_in_order(self) -> None:
        result = RedactionResult(
            value=None,
            redacted=True,
            details=(
                RedactionDetail("a", "email"),
                RedactionDetail("b", "jwt"),
                RedactionDetail("c", "email"),
            ),
        )
        assert result.plugins == ("email", "jwt")

    def test_empty(self) -> None:
        assert RedactionResult(value="x").plugins == ()
