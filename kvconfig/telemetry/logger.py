"""Structured parse logging utilities.

Responsibilities:
- Emit concise, deterministic diagnostic lines for configuration parsing.
- Route every record through `loguru` so callers choose the sink and level.
"""

from __future__ import annotations

import itertools
import shlex
import sys
import weakref
from typing import TextIO

from loguru import logger as _loguru_logger

_LOGGER_IDS = itertools.count(1)


def _sanitize_context_value(value: object) -> str:
    """Convert context values into stable, shell-safe tokens."""

    raw = str(value).strip()
    if not raw:
        return "none"
    return shlex.quote(raw)


def _format_context(context: dict[str, object]) -> str:
    """Serialize context key/value pairs in deterministic key order."""

    if not context:
        return ""
    tokens = [
        f"{key}={_sanitize_context_value(context[key])}"
        for key in sorted(context.keys())
    ]
    return " " + " ".join(tokens)


class ParseLogger:
    """Emit deterministic diagnostic lines for configuration parsing.

    Records look like ``[parse] level=INFO event=summary source=app.cfg total=4``.
    Debug-only events (per-entry traces, invalid-line listings) are written
    only when the logger is created with ``debug=True``.

    Each instance owns one loguru handler that accepts only its own records,
    so several loggers and any host-configured handlers coexist. The handler is
    removed by `close()` or when the instance is garbage collected.
    """

    def __init__(self, sink: TextIO | None = None, *, debug: bool = False) -> None:
        """Initialize logger sink and configure deterministic formatting."""

        self._sink = sink or sys.stderr
        self._debug = debug
        logger_id = next(_LOGGER_IDS)
        self._logger = _loguru_logger.bind(parse_logger=logger_id)
        handler_id = _loguru_logger.add(
            self._sink,
            format="{message}",
            level="DEBUG" if debug else "INFO",
            colorize=False,
            filter=lambda record: record["extra"].get("parse_logger") == logger_id,
        )
        self._finalizer = weakref.finalize(self, _loguru_logger.remove, handler_id)

    def close(self) -> None:
        """Detach this logger's handler; later records are dropped."""

        self._finalizer()

    def __enter__(self) -> ParseLogger:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def _emit(self, level: str, event: str, **context: object) -> None:
        """Emit one structured diagnostic line."""

        line = f"[parse] level={level} event={event}{_format_context(context)}"
        self._logger.log(level, line)

    def log_open(self, source: object, size_bytes: int) -> None:
        """Emit the file name, parse mode, and file size."""

        self._emit(
            "INFO",
            "open",
            source=source,
            mode="DEBUG" if self._debug else "NON-DEBUG",
            size_bytes=size_bytes,
        )

    def log_entry(self, line_number: int, key: str, value: str) -> None:
        """Emit a key/value trace for one accepted line."""

        self._emit("DEBUG", "entry", line=line_number, key=key, value=value)

    def log_invalid_line(self, line_number: int, text: str) -> None:
        self._emit("DEBUG", "invalid", line=line_number, text=text)

    def log_summary(
        self, source: object, *, total: int, ignored: int, valid: int, invalid: int
    ) -> None:
        """Emit aggregate counters for a completed parse."""

        self._emit(
            "INFO",
            "summary",
            source=source,
            total=total,
            ignored=ignored,
            valid=valid,
            invalid=invalid,
        )

    def log_file_failure(self, event: str, source: object, error_type: str) -> None:
        """Emit an open/read failure without echoing file contents."""

        self._emit("ERROR", event, source=source, error_type=error_type)

    def log_empty_file(self, source: object) -> None:
        self._emit("WARNING", "empty_file", source=source)
