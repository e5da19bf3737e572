"""Testing support – Hypothesis strategies for redaction property tests."""
