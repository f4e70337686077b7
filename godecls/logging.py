"""Logging utilities for godecls commands."""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone

_LOGGER_NAME = "godecls"

LOG_FORMATS = ("text", "json")


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a module-scoped logger under the godecls hierarchy."""
    full_name = f"{_LOGGER_NAME}.{name}" if name else _LOGGER_NAME
    return logging.getLogger(full_name)


def level_for_verbosity(verbosity: int) -> int:
    """Map the number of ``-v`` flags to a logging level."""
    if verbosity <= 0:
        return logging.WARNING
    if verbosity == 1:
        return logging.INFO
    return logging.DEBUG


class JsonFormatter(logging.Formatter):
    """Render each record as a single JSON object."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "time": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)
        return json.dumps(payload, sort_keys=True)


def configure_logging(*, verbosity: int = 0, log_format: str = "text") -> logging.Logger:
    """Configure the godecls logger with a single stderr handler."""
    if log_format not in LOG_FORMATS:
        raise ValueError(f"Unsupported log format: {log_format}")

    level = level_for_verbosity(verbosity)
    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False

    # Reset handlers to avoid duplicate output when the CLI is invoked multiple times.
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    stream_handler = logging.StreamHandler()
    stream_handler.setLevel(level)
    if log_format == "json":
        stream_handler.setFormatter(JsonFormatter())
    else:
        stream_handler.setFormatter(logging.Formatter("[godecls] %(levelname)s %(message)s"))
    logger.addHandler(stream_handler)

    return logger


__all__ = ["LOG_FORMATS", "JsonFormatter", "configure_logging", "get_logger", "level_for_verbosity"]
