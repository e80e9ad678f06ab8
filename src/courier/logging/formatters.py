"""
Log formatters for different output formats.

Provides structured JSON formatting for machines and a single-line,
colorized format for humans.
"""

import json
import logging
import traceback
from datetime import datetime, timezone
from typing import Any, Dict, Optional

import click

from courier.constants import DEFAULT_APP_NAME, PRETTY_TIMESTAMP_FORMAT

from .levels import LEVEL_COLORS, level_name


def _record_stack(record: logging.LogRecord) -> Optional[str]:
    """Explicit trace passed by the caller, else the formatted exc_info."""
    trace = getattr(record, "trace", None)
    if trace:
        return trace
    if record.exc_info:
        return "".join(traceback.format_exception(*record.exc_info)).rstrip()
    return None


class StructuredFormatter(logging.Formatter):
    """JSON formatter for structured logging."""

    def __init__(self, app_name: str = DEFAULT_APP_NAME):
        super().__init__()
        self.app_name = app_name

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON."""
        log_entry: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(
                record.created, tz=timezone.utc
            ).isoformat(),
            "level": level_name(record.levelno),
            "message": record.getMessage(),
            "app": self.app_name,
            "logger": record.name,
        }

        context = getattr(record, "context", None)
        if context:
            log_entry["context"] = context

        request_id = getattr(record, "request_id", None)
        if request_id:
            log_entry["request_id"] = request_id

        stack = _record_stack(record)
        if stack:
            log_entry["stack"] = stack

        metadata = getattr(record, "metadata", None)
        if metadata:
            log_entry["metadata"] = metadata

        return json.dumps(log_entry, default=str)


class PrettyFormatter(logging.Formatter):
    """Human-readable single-line formatter.

    Layout: ``timestamp [level] [context] [request-id] message``, followed by
    the stack trace on its own lines and the metadata as trailing JSON.
    """

    def __init__(self, colorize: bool = True):
        super().__init__()
        self.colorize = colorize

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.fromtimestamp(record.created).strftime(
            PRETTY_TIMESTAMP_FORMAT
        )
        level = level_name(record.levelno)
        if self.colorize:
            level = click.style(level, fg=LEVEL_COLORS[level])

        parts = [timestamp, f"[{level}]"]

        context = getattr(record, "context", None)
        if context:
            parts.append(f"[{context}]")

        request_id = getattr(record, "request_id", None)
        if request_id:
            parts.append(f"[{request_id}]")

        parts.append(record.getMessage())
        line = " ".join(parts)

        stack = _record_stack(record)
        if stack:
            line += f"\n{stack}"

        metadata = getattr(record, "metadata", None)
        if metadata:
            line += f" {json.dumps(metadata, default=str)}"

        return line
