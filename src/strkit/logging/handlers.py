"""JSON log formatting for strkit.

One JSON object per line::

    {"timestamp": "...", "level": "DEBUG", "logger": "strkit.core.transforms",
     "message": "Replaced 2 occurrence(s) of 'ab'",
     "input": {"source": "stdin", "line_no": 3}}

``input`` is present only while a line is being processed (see
InputContextFilter); ``exception`` only when the record carries one.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from typing import Any


def _input_of(record: logging.LogRecord) -> dict[str, Any] | None:
    source = getattr(record, "source", None)
    if source is None:
        return None
    entry: dict[str, Any] = {"source": source}
    line_no = getattr(record, "line_no", None)
    if line_no is not None:
        entry["line_no"] = line_no
    return entry


class JSONFormatter(logging.Formatter):
    """Format log records as single-line JSON objects."""

    def format(self, record: logging.LogRecord) -> str:
        created = datetime.fromtimestamp(record.created, tz=timezone.utc)
        entry: dict[str, Any] = {
            "timestamp": created.isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        input_entry = _input_of(record)
        if input_entry is not None:
            entry["input"] = input_entry

        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(entry, default=str)
