"""Testing generators – property-based strategies for redaction tests."""
from mp_redaction.testing.generators.strategies import (
    json_values,
    plain_keys,
    plain_text,
    secret_samples,
)

__all__ = ["json_values", "plain_keys", "plain_text", "secret_samples"]
