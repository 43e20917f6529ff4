"""
Structured logging for the store API.
Readable lines in development, single-line JSON when LOG_JSON is set.
"""

import json
import logging
import sys
from typing import Any

from core.config import get_settings

# Attributes every LogRecord carries; anything else came from `extra`.
_RECORD_ATTRS = frozenset(vars(logging.LogRecord("", 0, "", 0, "", (), None))) | {"message", "asctime", "fields"}

_TEXT_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s%(fields)s"


def get_logger(name: str) -> logging.Logger:
    """
    Return a logger with app-level config applied.
    Use logger.info("user_created", extra={"user_id": ...}) for structured fields.
    """
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger
    settings = get_settings()
    logger.setLevel(getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO))
    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(logger.level)
    handler.setFormatter(_JsonFormatter() if settings.LOG_JSON else _TextFormatter(_TEXT_FORMAT))
    logger.addHandler(handler)
    logger.propagate = False
    return logger


def _extra_fields(record: logging.LogRecord) -> dict[str, Any]:
    return {k: v for k, v in record.__dict__.items() if k not in _RECORD_ATTRS}


class _TextFormatter(logging.Formatter):
    """Appends extra fields as key=value pairs after the event name."""

    def format(self, record: logging.LogRecord) -> str:
        fields = _extra_fields(record)
        record.fields = "".join(f" {k}={v}" for k, v in fields.items()) if fields else ""
        return super().format(record)


class _JsonFormatter(logging.Formatter):
    """Format log records as single-line JSON for log aggregators."""

    def format(self, record: logging.LogRecord) -> str:
        log_obj: dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            log_obj["exception"] = self.formatException(record.exc_info)
        log_obj.update(_extra_fields(record))
        return json.dumps(log_obj, default=str)
