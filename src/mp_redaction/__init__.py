"""
mp_redaction – Plugin-based secret/PII detection and masking for nested data.

Import path convention::

    from mp_redaction.application.masking import RedactionEngine, redact_event
    from mp_redaction.config.settings import DEFAULT_CONFIG, load_redaction_config
    from mp_redaction.observability.logging import JsonLoggerFactory

Quick start::

    engine = RedactionEngine.from_config(DEFAULT_CONFIG)
    engine.redact({"password": "hunter2", "note": "mail me at a@b.io"}).value
    # {'password': '[REDACTED]', 'note': 'mail me at [REDACTED]'}
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
