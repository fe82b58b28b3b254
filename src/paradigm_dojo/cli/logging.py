"""
Logging - Structured logging setup for the CLI.

Two output formats:
- text: human-readable, optionally coloured, for terminals
- json: one JSON object per line, for log aggregation

Usage:
    setup_logging(level=logging.DEBUG, log_format="json")

    logger = get_logger("Transformer", paradigm="functional")
    logger.info("Transformed %s names", 3)
"""

from __future__ import annotations

import json
import logging
import sys
import traceback
from datetime import datetime, timezone
from typing import Any


# Attributes every LogRecord carries; anything else came in through `extra`.
_RESERVED_ATTRS = frozenset(
    {
        "args",
        "asctime",
        "created",
        "exc_info",
        "exc_text",
        "filename",
        "funcName",
        "levelname",
        "levelno",
        "lineno",
        "message",
        "module",
        "msecs",
        "msg",
        "name",
        "pathname",
        "process",
        "processName",
        "relativeCreated",
        "stack_info",
        "taskName",
        "thread",
        "threadName",
    }
)


def _extract_context(record: logging.LogRecord) -> dict[str, Any]:
    return {
        key: value
        for key, value in record.__dict__.items()
        if key not in _RESERVED_ATTRS and not key.startswith("_")
    }


class JSONFormatter(logging.Formatter):
    """
    Format log records as single-line JSON objects.

    Output fields:
        timestamp: ISO8601 UTC with millisecond precision and Z suffix
        level: Level name
        logger: Logger name
        message: Formatted message
        context: Extra fields passed via `extra`
        exception: type/message/traceback when exc_info is set
        location: file/line/function when include_location is set
    """

    def __init__(
        self,
        include_timestamp: bool = True,
        include_level: bool = True,
        include_logger: bool = True,
        include_location: bool = False,
        static_fields: dict[str, Any] | None = None,
    ) -> None:
        super().__init__()
        self.include_timestamp = include_timestamp
        self.include_level = include_level
        self.include_logger = include_logger
        self.include_location = include_location
        self.static_fields = dict(static_fields or {})

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {}

        if self.include_timestamp:
            created = datetime.fromtimestamp(record.created, tz=timezone.utc)
            millis = created.microsecond // 1000
            entry["timestamp"] = created.strftime("%Y-%m-%dT%H:%M:%S") + f".{millis:03d}Z"
        if self.include_level:
            entry["level"] = record.levelname
        if self.include_logger:
            entry["logger"] = record.name

        entry["message"] = record.getMessage()
        entry.update(self.static_fields)

        context = _extract_context(record)
        if context:
            entry["context"] = context

        if self.include_location:
            entry["location"] = {
                "file": record.filename,
                "line": record.lineno,
                "function": record.funcName,
            }

        if record.exc_info and record.exc_info[0] is not None:
            exc_type, exc_value, exc_tb = record.exc_info
            entry["exception"] = {
                "type": exc_type.__name__,
                "message": str(exc_value),
                "traceback": "".join(traceback.format_exception(exc_type, exc_value, exc_tb)),
            }

        return json.dumps(entry, default=str)


class TextFormatter(logging.Formatter):
    """Human-readable formatter with optional colours and context."""

    COLORS = {
        logging.DEBUG: "\033[2m",
        logging.INFO: "\033[36m",
        logging.WARNING: "\033[33m",
        logging.ERROR: "\033[31m",
        logging.CRITICAL: "\033[1m\033[31m",
    }
    RESET = "\033[0m"

    def __init__(self, use_colors: bool = True, include_context: bool = False) -> None:
        super().__init__(fmt="%(asctime)s %(levelname)-8s %(name)s: %(message)s", datefmt="%H:%M:%S")
        self.use_colors = use_colors
        self.include_context = include_context

    def format(self, record: logging.LogRecord) -> str:
        output = super().format(record)

        if self.include_context:
            context = _extract_context(record)
            if context:
                output += " " + " ".join(f"{key}={value}" for key, value in context.items())

        if self.use_colors and record.levelno in self.COLORS:
            output = self.COLORS[record.levelno] + output + self.RESET

        return output


class ContextLogger:
    """
    Logger wrapper that attaches bound context to every record.

    Context is passed through `extra`, so JSONFormatter puts it under
    "context" and TextFormatter can print it as key=value pairs.
    """

    def __init__(self, name: str, context: dict[str, Any] | None = None) -> None:
        self._logger = logging.getLogger(name)
        self._context = dict(context or {})

    def bind(self, **context: Any) -> ContextLogger:
        """Return a new logger with additional context."""
        return ContextLogger(self._logger.name, {**self._context, **context})

    def log(self, level: int, msg: str, *args: Any, **kwargs: Any) -> None:
        extra = {**self._context, **kwargs.pop("extra", {})}
        self._logger.log(level, msg, *args, extra=extra, **kwargs)

    def debug(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self.log(logging.DEBUG, msg, *args, **kwargs)

    def info(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self.log(logging.INFO, msg, *args, **kwargs)

    def warning(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self.log(logging.WARNING, msg, *args, **kwargs)

    def error(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self.log(logging.ERROR, msg, *args, **kwargs)

    def critical(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self.log(logging.CRITICAL, msg, *args, **kwargs)

    def exception(self, msg: str, *args: Any, **kwargs: Any) -> None:
        kwargs.setdefault("exc_info", True)
        self.log(logging.ERROR, msg, *args, **kwargs)


def get_logger(name: str, **context: Any) -> ContextLogger:
    """Get a ContextLogger with optional bound context."""
    return ContextLogger(name, context)


def setup_logging(
    level: int = logging.INFO,
    log_format: str = "text",
    log_file: str | None = None,
    static_fields: dict[str, Any] | None = None,
    stream: Any = None,
) -> None:
    """
    Configure the root logger.

    Replaces any existing root handlers with one console handler and, when
    log_file is given, a file handler using the same formatter. The file is
    opened first, so a bad path leaves the existing handlers in place.

    Args:
        level: Root log level
        log_format: 'text' or 'json'
        log_file: Optional path to also write logs to
        static_fields: Fields added to every JSON record
        stream: Console stream; defaults to stderr

    Raises:
        OSError: If log_file cannot be opened.
    """
    stream = stream or sys.stderr

    formatter: logging.Formatter
    if log_format == "json":
        formatter = JSONFormatter(static_fields=static_fields)
    else:
        use_colors = hasattr(stream, "isatty") and stream.isatty()
        formatter = TextFormatter(use_colors=use_colors, include_context=True)

    file_handler = None
    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        if isinstance(formatter, TextFormatter):
            file_handler.setFormatter(TextFormatter(use_colors=False, include_context=True))
        else:
            file_handler.setFormatter(formatter)

    root = logging.getLogger()
    for handler in root.handlers[:]:
        root.removeHandler(handler)
        handler.close()

    console_handler = logging.StreamHandler(stream)
    console_handler.setFormatter(formatter)
    root.addHandler(console_handler)

    if file_handler is not None:
        root.addHandler(file_handler)

    root.setLevel(level)
