"""Logging setup for the ``dirgrep`` logger hierarchy.

Two output modes, both on stderr at INFO and above:
- text: rich's console handler with the source location, context appended
  to the message as ``key=value`` pairs
- JSON: one object per record with the context keys merged in

Callers attach structured context with ``extra={"context": {...}}`` or use
``report_warning`` for non-fatal problems.
"""

from __future__ import annotations

import json
import logging
import sys
from typing import TextIO

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "dirgrep"


def _record_context(record: logging.LogRecord) -> dict[str, object]:
    context = getattr(record, "context", None)
    return dict(context) if isinstance(context, dict) else {}


class ContextFormatter(logging.Formatter):
    """Message followed by the record's context pairs."""

    def format(self, record: logging.LogRecord) -> str:
        message = record.getMessage()
        pairs = " ".join(f"{key}={value}" for key, value in _record_context(record).items())
        return f"{message} {pairs}" if pairs else message


class JsonFormatter(logging.Formatter):
    """One JSON object per record."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, object] = {
            "time": self.formatTime(record, "%Y-%m-%dT%H:%M:%S%z"),
            "level": record.levelname,
            "source": {"file": record.pathname, "line": record.lineno, "function": record.funcName},
            "msg": record.getMessage(),
        }
        for key, value in _record_context(record).items():
            payload.setdefault(key, value)
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


def _text_handler(stream: TextIO | None) -> logging.Handler:
    console = Console(file=stream) if stream is not None else Console(stderr=True)
    handler = RichHandler(console=console, show_path=True, markup=False, rich_tracebacks=True)
    handler.setFormatter(ContextFormatter())
    return handler


def configure(json_enabled: bool = False, stream: TextIO | None = None, level: int = logging.INFO) -> logging.Logger:
    """Install a single handler on the package logger and return it.

    Calling again replaces the previous handler.
    """
    if json_enabled:
        handler: logging.Handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
        handler.setFormatter(JsonFormatter())
    else:
        handler = _text_handler(stream)

    logger = logging.getLogger(LOGGER_NAME)
    for existing in list(logger.handlers):
        logger.removeHandler(existing)
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False
    return logger


def report_warning(message: str, **context: object) -> None:
    """Log a non-fatal problem with ``context`` as structured key/values."""
    logging.getLogger(LOGGER_NAME).warning(message, extra={"context": context}, stacklevel=2)


__all__ = [
    "LOGGER_NAME",
    "ContextFormatter",
    "JsonFormatter",
    "configure",
    "report_warning",
]
