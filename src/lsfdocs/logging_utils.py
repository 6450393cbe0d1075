"""Structured logging for lsfdocs runs."""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from .constants import APP_NAME

LOGGER_NAME = APP_NAME

# Keys rendered first, in this order, for the named events.
EVENT_KEY_ORDER: dict[str, list[str]] = {
    "run_start": ["baseline_file", "docs_dir", "output_file", "suffix"],
    "baseline_loaded": ["baseline_file", "count"],
    "docs_scanned": ["docs_dir", "found", "parsed", "skipped"],
    "document_skipped": ["document", "error"],
    "merge_complete": ["total", "enhanced", "fallback"],
    "output_written": ["output_file", "count"],
    "index_loaded": ["source", "data_file", "count"],
    "index_fallback": ["data_file", "reason"],
    "index_load_failed": ["data_file", "baseline_file", "error"],
}
DEFAULT_EVENT_KEY_ORDER: list[str] = ["ts_utc", "level", "logger"]


class StructuredTextFormatter(logging.Formatter):
    """Format records emitted by log_event as readable key/value blocks.

    In compact mode each record is a single ``LEVEL event key=value`` line,
    which suits a terminal; otherwise a ``=== event ===`` block is written.
    """

    def __init__(self, *args: Any, compact: bool = False, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._compact = compact
        # Blank line between blocks without a trailing one.
        self._first_entry = True

    @staticmethod
    def _format_value(value: Any) -> str:
        return str(value).replace("\n", "\\n")

    @staticmethod
    def _ordered_keys(event_name: str, data: dict[str, Any]) -> list[str]:
        preferred = DEFAULT_EVENT_KEY_ORDER + EVENT_KEY_ORDER.get(event_name, [])
        preferred_present = [k for k in preferred if k in data and data[k] is not None]
        remaining = sorted(
            k for k in data if k not in preferred and data[k] is not None
        )
        return preferred_present + remaining

    def format(self, record: logging.LogRecord) -> str:
        base: dict[str, Any] = {
            "ts_utc": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
        }

        message = record.getMessage()
        parsed = None
        if message.startswith("{") and message.endswith("}"):
            try:
                parsed = json.loads(message)
            except json.JSONDecodeError:
                parsed = None

        if isinstance(parsed, dict):
            base.update(parsed)
        else:
            base["event"] = record.name
            base["message"] = message

        event_name = str(base.pop("event", record.name))

        if self._compact:
            details = " ".join(
                f"{key}={self._format_value(base[key])}"
                for key in self._ordered_keys(event_name, base)
                if key not in DEFAULT_EVENT_KEY_ORDER
            )
            return f"{record.levelname} {event_name} {details}".rstrip()

        lines = [f"=== {event_name} ==="]
        for key in self._ordered_keys(event_name, base):
            lines.append(f"{key}: {self._format_value(base[key])}")

        if record.exc_info:
            lines.append("traceback:")
            lines.append(self.formatException(record.exc_info))

        body = "\n".join(lines)
        if self._first_entry:
            self._first_entry = False
            return body
        return "\n" + body


def _to_log_safe(value: Any) -> Any:
    if value is None or isinstance(value, (str, int, float, bool)):
        return value
    if isinstance(value, Path):
        return str(value)
    if isinstance(value, dict):
        return {str(k): _to_log_safe(v) for k, v in value.items()}
    if isinstance(value, (list, tuple, set)):
        return [_to_log_safe(v) for v in value]
    return str(value)


def log_event(event: str, level: int = logging.INFO, **fields: Any) -> None:
    """Emit a structured log event on the lsfdocs logger."""
    payload: dict[str, Any] = {"event": event}
    for key, value in fields.items():
        payload[key] = _to_log_safe(value)
    logging.getLogger(LOGGER_NAME).log(
        level, json.dumps(payload, ensure_ascii=False, separators=(",", ":"))
    )


def setup_logging(log_file: Path | None = None, *, verbose: bool = False) -> None:
    """Route lsfdocs events to stderr and, optionally, a log file.

    Stderr receives warnings and above unless ``verbose`` is set. The log
    file, when given, receives every INFO event as structured blocks.
    """
    logger = logging.getLogger(LOGGER_NAME)
    reset_logging()
    logger.setLevel(logging.INFO)

    console = logging.StreamHandler()
    console.setLevel(logging.INFO if verbose else logging.WARNING)
    console.setFormatter(StructuredTextFormatter(compact=True))
    logger.addHandler(console)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(str(log_file), encoding="utf-8")
        file_handler.setLevel(logging.INFO)
        file_handler.setFormatter(StructuredTextFormatter())
        logger.addHandler(file_handler)


def reset_logging() -> None:
    """Detach and close every handler installed by setup_logging."""
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
