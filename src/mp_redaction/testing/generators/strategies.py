"""Testing generators – Hypothesis property-based testing strategies.

Requires the ``hypothesis`` package:

    pip install hypothesis
    # or
    pip install "mp-redaction[test]"
"""
from __future__ import annotations

import string
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from hypothesis.strategies import SearchStrategy  # type: ignore[import-untyped]


def _require_hypothesis() -> Any:
    """Lazy import guard – raises a clear error when hypothesis is absent."""
    try:
        import hypothesis.strategies as st  # type: ignore[import-untyped]
        return st
    except ImportError as exc:
        raise ImportError(
            "Install 'hypothesis' to use property-based testing strategies: "
            "pip install hypothesis"
        ) from exc


# No vowels, hex letters, digits, "@" or ".": nothing a built-in detector
# can match.
_PLAIN_ALPHABET = "ghjklmnqvwxz "

# Every built-in key term contains a vowel.
_PLAIN_KEY_ALPHABET = "bcdfghjklmnqvwxz_"


def plain_text(max_size: int = 40) -> "SearchStrategy[str]":
    """Strings that no built-in detector matches.

    Example::

        @given(plain_text())
        def test_plain_text_passes_through(text):
            assert engine.redact(text).redacted is False
    """
    st = _require_hypothesis()
    return st.text(alphabet=_PLAIN_ALPHABET, max_size=max_size)


def plain_keys(max_size: int = 12) -> "SearchStrategy[str]":
    """Mapping keys that contain no built-in sensitive key term."""
    st = _require_hypothesis()
    return st.text(alphabet=_PLAIN_KEY_ALPHABET, min_size=1, max_size=max_size)


def json_values(
    leaves: "SearchStrategy[Any] | None" = None,
    *,
    max_leaves: int = 20,
) -> "SearchStrategy[Any]":
    """Arbitrarily nested JSON-like values (dicts, lists, scalars).

    Args:
        leaves: Strategy for string leaves. Defaults to :func:`plain_text`,
            which yields trees with nothing to redact.
        max_leaves: Upper bound on leaf count per drawn tree.

    Example::

        @given(json_values(st.text()))
        def test_input_is_never_mutated(value):
            snapshot = copy.deepcopy(value)
            engine.redact(value)
            assert value == snapshot
    """
    st = _require_hypothesis()
    scalars = st.one_of(
        st.none(),
        st.booleans(),
        st.integers(),
        st.floats(allow_nan=False, allow_infinity=False),
        leaves if leaves is not None else plain_text(),
    )
    return st.recursive(
        scalars,
        lambda children: st.one_of(
            st.lists(children, max_size=5),
            st.dictionaries(plain_keys(), children, max_size=5),
        ),
        max_leaves=max_leaves,
    )


def secret_samples() -> "SearchStrategy[tuple[str, str]]":
    """``(plugin_name, sample)`` pairs that the named built-in detector matches."""
    st = _require_hypothesis()
    alnum = string.ascii_letters + string.digits
    return st.one_of(
        st.builds(
            lambda local, domain: ("email", f"{local}@{domain}.com"),
            st.text(alphabet=string.ascii_lowercase, min_size=1, max_size=8),
            st.text(alphabet=string.ascii_lowercase, min_size=1, max_size=8),
        ),
        st.builds(
            lambda body: ("awsKeys", "AKIA" + body),
            st.text(alphabet=string.ascii_uppercase + string.digits, min_size=16, max_size=16),
        ),
        st.builds(
            lambda body: ("githubTokens", "ghp_" + body),
            st.text(alphabet=alnum, min_size=36, max_size=40),
        ),
        st.builds(
            lambda octets: ("ipAddress", ".".join(str(o) for o in octets)),
            st.lists(st.integers(min_value=0, max_value=255), min_size=4, max_size=4),
        ),
    )


__all__ = ["json_values", "plain_keys", "plain_text", "secret_samples"]
