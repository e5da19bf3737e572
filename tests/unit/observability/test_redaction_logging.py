"""Unit tests for the redacting structlog processor and JsonLoggerFactory."""
from __future__ import annotations

import io
import json
import logging
from collections.abc import Iterator
from typing import Any

import pytest
import structlog
from structlog.testing import capture_logs

from mp_redaction.application.masking import REDACTED, RedactionEngine
from mp_redaction.config.settings import DEFAULT_CONFIG, RedactionConfig, RedactionScopes
from mp_redaction.observability.logging import JsonLoggerFactory, RedactionProcessor, get_logger


@pytest.fixture()
def engine() -> RedactionEngine:
    return RedactionEngine.from_config(DEFAULT_CONFIG)


@pytest.fixture()
def restore_logging() -> Iterator[None]:
    root = logging.getLogger()
    level = root.level
    yield
    structlog.reset_defaults()
    for handler in list(root.handlers):
        if isinstance(handler.formatter, structlog.stdlib.ProcessorFormatter):
            root.removeHandler(handler)
    root.setLevel(level)


# ---------------------------------------------------------------------------
# RedactionProcessor
# ---------------------------------------------------------------------------


class TestRedactionProcessor:
    def test_redacts_bound_sensitive_keys(self, engine: RedactionEngine) -> None:
        processor = RedactionProcessor(engine)
        event = {"event": "login", "api_key": "k-123", "user": "bob"}
        assert processor(None, "info", event) == {"event": "login", "api_key": REDACTED, "user": "bob"}

    def test_redacts_patterns_in_message(self, engine: RedactionEngine) -> None:
        processor = RedactionProcessor(engine)
        result = processor(None, "info", {"event": "mail sent to ops@example.com"})
        assert result["event"] == "mail sent to [REDACTED]"

    def test_clean_event_returned_as_is(self, engine: RedactionEngine) -> None:
        event = {"event": "started", "port": 8080}
        assert RedactionProcessor(engine)(None, "info", event) is event

    def test_input_not_mutated(self, engine: RedactionEngine) -> None:
        event = {"event": "x", "password": "hunter2"}
        RedactionProcessor(engine)(None, "info", event)
        assert event["password"] == "hunter2"

    def test_respects_console_scope(self) -> None:
        engine = RedactionEngine.from_config(
            RedactionConfig(scopes=RedactionScopes(console_output=False))
        )
        event = {"event": "x", "password": "hunter2"}
        assert RedactionProcessor(engine)(None, "info", event) is event

    def test_custom_scope(self) -> None:
        engine = RedactionEngine.from_config(
            RedactionConfig(scopes=RedactionScopes(console_output=False))
        )
        processor = RedactionProcessor(engine, scope="errorMessages")
        assert processor(None, "error", {"event": "x", "token": "t"})["token"] == REDACTED

    def test_in_structlog_chain(self, engine: RedactionEngine) -> None:
        captured: list[dict[str, Any]] = []

        def capture(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
            captured.append(event_dict)
            raise structlog.DropEvent

        log = structlog.wrap_logger(
            structlog.PrintLogger(), processors=[RedactionProcessor(engine), capture]
        )
        log.bind(client_secret="abc").info("hello from 10.0.0.1")
        assert captured == [{"client_secret": REDACTED, "event": "hello from [REDACTED]"}]


# ---------------------------------------------------------------------------
# get_logger
# ---------------------------------------------------------------------------


class TestGetLogger:
    def test_returns_logger(self) -> None:
        assert hasattr(get_logger(__name__), "info")

    def test_initial_values_bound(self) -> None:
        with capture_logs() as logs:
            get_logger("svc", component="redaction").info("ready")
        assert logs == [{"component": "redaction", "event": "ready", "log_level": "info"}]


# ---------------------------------------------------------------------------
# JsonLoggerFactory
# ---------------------------------------------------------------------------


@pytest.mark.usefixtures("restore_logging")
class TestJsonLoggerFactory:
    def test_configure_sets_level(self) -> None:
        JsonLoggerFactory.configure(level=logging.WARNING)
        assert logging.getLogger().level == logging.WARNING

    def test_output_is_redacted_json(self, engine: RedactionEngine) -> None:
        stream = io.StringIO()
        JsonLoggerFactory.configure(level=logging.INFO, engine=engine, stream=stream)
        structlog.get_logger("redaction.test").info("contact ops@example.com", password="hunter2")
        line = stream.getvalue().strip().splitlines()[-1]
        payload = json.loads(line)
        assert payload["event"] == "contact [REDACTED]"
        assert payload["password"] == REDACTED
        assert payload["level"] == "info"
        assert "hunter2" not in line

    def test_contextvars_are_redacted(self, engine: RedactionEngine) -> None:
        stream = io.StringIO()
        JsonLoggerFactory.configure(level=logging.INFO, engine=engine, stream=stream)
        structlog.contextvars.bind_contextvars(session_token="s-123")
        try:
            structlog.get_logger("redaction.test").info("request")
        finally:
            structlog.contextvars.clear_contextvars()
        payload = json.loads(stream.getvalue().strip().splitlines()[-1])
        assert payload["session_token"] == REDACTED

    def test_without_engine_nothing_redacted(self) -> None:
        stream = io.StringIO()
        JsonLoggerFactory.configure(level=logging.INFO, stream=stream)
        structlog.get_logger("redaction.test").info("contact ops@example.com")
        payload = json.loads(stream.getvalue().strip().splitlines()[-1])
        assert payload["event"] == "contact ops@example.com"


class TestPublicReExports:
    def test_all_symbols_importable(self) -> None:
        import importlib

        for module in (
            "mp_redaction.observability.logging",
            "mp_redaction.application.masking",
            "mp_redaction.config.settings",
            "mp_redaction.kernel.security",
        ):
            mod = importlib.import_module(module)
            for name in mod.__all__:
                assert hasattr(mod, name), f"{module}.{name} missing"
