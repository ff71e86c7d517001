"""Structured plaintext log formatter.

Each record becomes a block headed ``=== <event> ===`` followed by one
``key: value`` line per non-empty field. Messages emitted by ``log_event``
are JSON objects and contribute their fields; any other message is logged
under the logger name with a ``message`` field.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from typing import Any

from .schema import DEFAULT_EVENT_KEY_ORDER, EVENT_KEY_ORDER


def _one_line(value: Any) -> str:
    return str(value).replace("\n", "\\n")


class StructuredTextFormatter(logging.Formatter):
    """Format log records as human-readable event blocks."""

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._emitted = 0

    def format(self, record: logging.LogRecord) -> str:
        fields = self._fields(record)
        event_name = str(fields.pop("event", record.name))

        lines = [f"=== {event_name} ==="]
        lines += [
            f"{key}: {_one_line(fields[key])}"
            for key in self._key_order(event_name, fields)
        ]
        if record.exc_info:
            lines += ["traceback:", self.formatException(record.exc_info)]

        # Blank line between blocks, none after the last one.
        separator = "\n" if self._emitted else ""
        self._emitted += 1
        return separator + "\n".join(lines)

    @staticmethod
    def _fields(record: logging.LogRecord) -> dict[str, Any]:
        fields: dict[str, Any] = {
            "ts_utc": datetime.now(timezone.utc)
            .isoformat(timespec="microseconds")
            .replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
        }
        message = record.getMessage()
        payload: Any = None
        if message.startswith("{") and message.endswith("}"):
            try:
                payload = json.loads(message)
            except json.JSONDecodeError:
                payload = None
        if isinstance(payload, dict):
            fields.update(payload)
        else:
            fields["message"] = message
        return fields

    @staticmethod
    def _key_order(event_name: str, fields: dict[str, Any]) -> list[str]:
        preferred = EVENT_KEY_ORDER.get(event_name, DEFAULT_EVENT_KEY_ORDER)
        present = {key for key, value in fields.items() if value is not None}
        return [k for k in preferred if k in present] + sorted(present - set(preferred))
