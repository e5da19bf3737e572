"""Execution-event adapter - routes each event's payload fields to their scope.

Events are mappings tagged by a ``"type"`` field. The adapter never mutates
its input: events that carry nothing sensitive come back as the same
object, all others are deep-copied before their fields are redacted.

Scope mapping:

* ``trace`` → requestHeaders, requestQuery (via ``url``), requestBody,
  responseHeaders, responseBody
* ``log`` → consoleOutput
* ``assertion`` / ``error`` / ``status`` / ``warning`` /
  ``schema_validation`` → errorMessages
* ``step_end`` → returnState
* ``metric`` / ``step_start`` / ``start`` / ``summary`` /
  ``timeout_update`` and unknown types → untouched
"""
from __future__ import annotations

import copy
from typing import TYPE_CHECKING, Any, Mapping, MutableMapping

from mp_redaction.config.settings.base import Scope

if TYPE_CHECKING:
    from mp_redaction.application.masking.masker import RedactionEngine

__all__ = ["EVENT_FIELD_SCOPES", "PASSTHROUGH_EVENT_TYPES", "redact_event"]

PASSTHROUGH_EVENT_TYPES: frozenset[str] = frozenset({
    "metric",
    "step_start",
    "start",
    "summary",
    "timeout_update",
})

EVENT_FIELD_SCOPES: Mapping[str, tuple[tuple[str, Scope], ...]] = {
    "log": (("message", Scope.CONSOLE_OUTPUT), ("data", Scope.CONSOLE_OUTPUT)),
    "assertion": (
        ("message", Scope.ERROR_MESSAGES),
        ("actual", Scope.ERROR_MESSAGES),
        ("expected", Scope.ERROR_MESSAGES),
    ),
    "error": (("message", Scope.ERROR_MESSAGES),),
    "status": (("error", Scope.ERROR_MESSAGES), ("stack", Scope.ERROR_MESSAGES)),
    "warning": (("message", Scope.ERROR_MESSAGES),),
    "schema_validation": (("message", Scope.ERROR_MESSAGES),),
}

_TRACE_FIELD_SCOPES: tuple[tuple[str, Scope], ...] = (
    ("requestHeaders", Scope.REQUEST_HEADERS),
    ("requestBody", Scope.REQUEST_BODY),
    ("responseHeaders", Scope.RESPONSE_HEADERS),
    ("responseBody", Scope.RESPONSE_BODY),
)


def _redact_fields(
    engine: RedactionEngine,
    target: MutableMapping[str, Any],
    fields: tuple[tuple[str, Scope], ...],
) -> None:
    for field, scope in fields:
        if target.get(field) is not None:
            target[field] = engine.redact(target[field], scope).value


def _clone(event: Mapping[str, Any]) -> dict[str, Any]:
    # read-only mappings refuse deepcopy, so unfreeze the levels that get written
    thawed = dict(event)
    data = thawed.get("data")
    if isinstance(data, Mapping):
        thawed["data"] = dict(data)
    return copy.deepcopy(thawed)


def redact_event(engine: RedactionEngine, event: Mapping[str, Any]) -> Mapping[str, Any]:
    """Return *event* with its sensitive payload fields redacted.

    Events that get redacted come back as a new ``dict`` even when *event* is
    a read-only mapping such as :class:`types.MappingProxyType`.
    """
    event_type = event.get("type")

    if not isinstance(event_type, str) or event_type in PASSTHROUGH_EVENT_TYPES:
        return event

    if event_type == "step_end":
        if event.get("returnState") is None:
            return event
        clone = _clone(event)
        clone["returnState"] = engine.redact(clone["returnState"], Scope.RETURN_STATE).value
        return clone

    if event_type == "trace":
        clone = _clone(event)
        data = clone.get("data")
        if isinstance(data, MutableMapping):
            _redact_fields(engine, data, _TRACE_FIELD_SCOPES)
            # the URL carries the query string
            if isinstance(data.get("url"), str):
                data["url"] = engine.redact(data["url"], Scope.REQUEST_QUERY).value
        return clone

    fields = EVENT_FIELD_SCOPES.get(event_type)
    if fields is None:
        return event

    clone = _clone(event)
    _redact_fields(engine, clone, fields)
    return clone
