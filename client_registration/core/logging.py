"""Logging setup.

Two output shapes, picked by LOG_JSON:

  _ContainerFormatter  one human-readable line per record, for a terminal
  _JsonFormatter       one JSON object per line, for a log aggregator

Both write to stdout.  Request context (request_id, method, path, ...) is
attached to records by the request context middleware and shows up as
top-level keys in JSON mode.
"""

from __future__ import annotations

import json
import logging
import sys


class _StampFormatter(logging.Formatter):
    """ISO-8601 timestamps with milliseconds."""

    def __init__(self, fmt: str | None = None) -> None:
        super().__init__(fmt, datefmt="%Y-%m-%dT%H:%M:%S%z")

    def formatTime(self, record: logging.LogRecord, datefmt: str | None = None) -> str:
        base = super().formatTime(record, datefmt)
        ms = int(record.msecs)
        # .NNN goes before the +0000 offset
        return f"{base[:-5]}.{ms:03d}{base[-5:]}"


class _ContainerFormatter(logging.Formatter):
    """Single-line formatter for stdout.

    WARNING and above get a [filename:lineno] suffix.  The two layouts are
    separate formatters so nothing is mutated per record.
    """

    _BASE_FMT = "%(asctime)s %(levelname)-8s %(name)s  %(message)s"
    _LOC_SUFFIX = "  [%(filename)s:%(lineno)d]"

    def __init__(self) -> None:
        super().__init__()
        self._plain = _StampFormatter(self._BASE_FMT)
        self._located = _StampFormatter(self._BASE_FMT + self._LOC_SUFFIX)

    def format(self, record: logging.LogRecord) -> str:
        if record.levelno >= logging.WARNING:
            return self._located.format(record)
        return self._plain.format(record)


class _JsonFormatter(_StampFormatter):
    _CONTEXT_FIELDS = (
        "request_id",
        "method",
        "path",
        "status_code",
        "duration_ms",
        "instance",
        "client_name",
    )

    def format(self, record: logging.LogRecord) -> str:
        log_entry: dict[str, object] = {
            "timestamp": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        for key in self._CONTEXT_FIELDS:
            value = getattr(record, key, None)
            if value is not None:
                log_entry[key] = value

        if record.exc_info and record.exc_info[0] is not None:
            log_entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_entry, default=str)


def setup_logging(level_name: str, *, json_format: bool = False) -> None:
    """Configure the root logger to write to stdout.

    Args:
        level_name: debug/info/warning/error
        json_format: emit JSON lines instead of text (LOG_JSON)
    """
    level = getattr(logging, level_name.upper(), logging.INFO)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(_JsonFormatter() if json_format else _ContainerFormatter())

    root = logging.getLogger()
    root.setLevel(level)
    root.handlers.clear()
    root.addHandler(handler)

    # httpx logs every request at INFO; the registration client logs its own
    for name in ("uvicorn", "uvicorn.access", "uvicorn.error", "httpcore", "httpx"):
        logging.getLogger(name).setLevel(max(level, logging.WARNING))
