"""Handlers – SensitiveFieldsFilter and RedactingHandler."""
from __future__ import annotations

import dataclasses
from typing import Any, Callable

from mp_log.core.event import LogEvent

DEFAULT_SENSITIVE_FIELDS: frozenset[str] = frozenset({
    "password", "passwd", "secret", "token", "api_key", "apikey",
    "authorization", "credit_card", "card_number", "cvv", "ssn",
})


class SensitiveFieldsFilter:
    """Replace values of sensitive keys with ``[REDACTED]``."""

    REDACTED = "[REDACTED]"

    def __init__(self, sensitive_fields: frozenset[str] | None = None) -> None:
        self._fields = frozenset(f.lower() for f in (sensitive_fields or DEFAULT_SENSITIVE_FIELDS))

    def redact(self, data: dict[str, Any]) -> dict[str, Any]:
        return {k: (self.REDACTED if k.lower() in self._fields else v) for k, v in data.items()}

    def redact_deep(self, data: dict[str, Any]) -> dict[str, Any]:
        """Recursively redact nested dicts."""
        result: dict[str, Any] = {}
        for k, v in data.items():
            if k.lower() in self._fields:
                result[k] = self.REDACTED
            elif isinstance(v, dict):
                result[k] = self.redact_deep(v)
            else:
                result[k] = v
        return result


class RedactingHandler:
    """Wrap a log handler so it only ever sees redacted meta data.

    The wrapped handler receives a copy of the event; the original event,
    which other handlers receive, is left untouched.

    Usage::

        logger.add_log_handler(RedactingHandler(ship_to_file))
    """

    def __init__(
        self,
        handler: Callable[[LogEvent], object],
        sensitive_fields: frozenset[str] | None = None,
    ) -> None:
        self._handler = handler
        self._filter = SensitiveFieldsFilter(sensitive_fields)

    def __call__(self, event: LogEvent) -> None:
        redacted = dataclasses.replace(event, meta=self._filter.redact_deep(dict(event.meta)))
        self._handler(redacted)


__all__ = ["DEFAULT_SENSITIVE_FIELDS", "RedactingHandler", "SensitiveFieldsFilter"]
