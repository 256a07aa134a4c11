"""Centralized logging configuration for bufrepl.

Supports console (text) and file output, with optional JSON formatting.

Usage:
    from bufrepl.logging_config import configure_logging, get_logger

    # Configure once at application startup
    configure_logging(level="DEBUG")

    # Get loggers in modules
    logger = get_logger(__name__)

Environment Variables:
    BUFREPL_LOG_LEVEL: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    BUFREPL_LOG_FORMAT: Output format ("text" or "json")
    BUFREPL_LOG_FILE: Optional log file path
"""

from __future__ import annotations

import json
import logging
import os
import sys
from datetime import datetime
from typing import Any, Literal

TEXT_FORMAT = "%(asctime)s.%(msecs)03d - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Attributes every LogRecord carries; anything else came from `extra=`
_STANDARD_ATTRS = frozenset(
    {
        "name",
        "msg",
        "args",
        "created",
        "filename",
        "funcName",
        "levelname",
        "levelno",
        "lineno",
        "module",
        "msecs",
        "pathname",
        "process",
        "processName",
        "relativeCreated",
        "stack_info",
        "exc_info",
        "exc_text",
        "thread",
        "threadName",
        "taskName",
        "message",
    }
)

_configured = False


class JsonFormatter(logging.Formatter):
    """JSON log formatter for structured logging.

    Outputs one JSON object per record:
    {
        "timestamp": "2026-10-17T14:30:00.123",
        "level": "DEBUG",
        "logger": "bufrepl.core.evaluator",
        "message": "evaluated: kind=value",
        "extra": {...}
    }
    """

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        extra = {k: v for k, v in record.__dict__.items() if k not in _STANDARD_ATTRS}
        if extra:
            log_data["extra"] = extra

        return json.dumps(log_data, default=str)


def configure_logging(
    level: str | None = None,
    format: Literal["text", "json"] | None = None,
    file_path: str | None = None,
    stream: Any = None,
    force: bool = False,
) -> None:
    """Configure logging for the application.

    Subsequent calls are ignored unless force=True.

    Args:
        level: Log level. Defaults to BUFREPL_LOG_LEVEL or "WARNING".
        format: Output format. Defaults to BUFREPL_LOG_FORMAT or "text".
        file_path: Optional log file. Defaults to BUFREPL_LOG_FILE.
        stream: Console stream (default stderr). Pass False to disable the
            console handler, which the full-screen TUI needs.
        force: Force reconfiguration even if already configured.
    """
    global _configured
    if _configured and not force:
        return

    level = level or os.environ.get("BUFREPL_LOG_LEVEL", "WARNING")
    format = format or os.environ.get("BUFREPL_LOG_FORMAT", "text")  # type: ignore
    file_path = file_path or os.environ.get("BUFREPL_LOG_FILE")

    logger = logging.getLogger("bufrepl")
    logger.setLevel(getattr(logging, level.upper()))
    logger.handlers.clear()

    if format == "json":
        formatter: logging.Formatter = JsonFormatter()
    else:
        formatter = logging.Formatter(TEXT_FORMAT, datefmt=DATE_FORMAT)

    if stream is not False:
        console_handler = logging.StreamHandler(stream or sys.stderr)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    if file_path:
        file_handler = logging.FileHandler(file_path)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    if not logger.handlers:
        logger.addHandler(logging.NullHandler())

    _configured = True


def get_logger(name: str) -> logging.Logger:
    """Get a logger with the given name (typically __name__)."""
    return logging.getLogger(name)
