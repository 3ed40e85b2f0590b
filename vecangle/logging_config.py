"""Structured logging configuration.

JSON output outside development, human-readable otherwise. Logs go to
stderr by default so stdout carries only the angle report.
"""

import json
import logging
import sys
from datetime import UTC, datetime
from typing import Any, TextIO

from vecangle.config import Environment, get_settings

# LogRecord attributes copied into JSON output when a caller passes them
# through ``extra``.
CONTEXT_FIELDS = ("error_code", "details")


class JSONFormatter(logging.Formatter):
    """JSON log formatter for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON string."""
        log_data: dict[str, Any] = {
            "timestamp": datetime.now(UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "file": f"{record.pathname}:{record.lineno}",
        }

        for field in CONTEXT_FIELDS:
            if hasattr(record, field):
                log_data[field] = getattr(record, field)

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data, default=str, ensure_ascii=False)


class DevFormatter(logging.Formatter):
    """Human-readable formatter for development."""

    FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
    DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

    def __init__(self) -> None:
        super().__init__(fmt=self.FORMAT, datefmt=self.DATE_FORMAT)


def setup_logging(
    level: str | None = None,
    json_output: bool | None = None,
    stream: TextIO | None = None,
) -> logging.Logger:
    """Configure application logging.

    Settings are only consulted for values not given here, so logging can
    still be configured when the environment holds invalid settings.

    Args:
        level: Log level name (default from settings).
        json_output: Force JSON output (default based on environment).
        stream: Destination stream (default stderr).

    Returns:
        Root logger instance.
    """
    if level is None or json_output is None:
        settings = get_settings()
        level = level or settings.log_level
        if json_output is None:
            json_output = settings.environment != Environment.DEVELOPMENT

    numeric_level = getattr(logging, level.upper(), logging.INFO)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setLevel(numeric_level)
    handler.setFormatter(JSONFormatter() if json_output else DevFormatter())

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)
    root_logger.handlers.clear()
    root_logger.addHandler(handler)

    return root_logger


def get_logger(name: str) -> logging.Logger:
    """Get a named logger.

    Args:
        name: Logger name (typically __name__).

    Returns:
        Logger instance.
    """
    return logging.getLogger(name)
