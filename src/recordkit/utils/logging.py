"""Logging utilities for recordkit.

The library only emits DEBUG records through module loggers and never
configures handlers on import. Applications call `configure_logging` once,
with a concise console format by default or JSON for structured logs.

Usage:
    from recordkit.utils.logging import configure_logging, get_logger

    configure_logging(level="DEBUG")
    log = get_logger(__name__)
    log.debug("duplicated record", extra={"record_id": 7})
"""

from __future__ import annotations

import json
import logging
import logging.config
from typing import Any

# Attributes every LogRecord carries; anything else came in through `extra=`.
_RESERVED_ATTRS = frozenset(
    logging.LogRecord("", logging.INFO, "", 0, "", (), None).__dict__.keys()
) | {"message", "asctime"}


def _json_formatter(record: logging.LogRecord) -> str:
    """Render a log record as JSON string."""
    payload: dict[str, Any] = {
        "level": record.levelname,
        "logger": record.name,
        "message": record.getMessage(),
    }
    for key, value in record.__dict__.items():
        if key not in _RESERVED_ATTRS:
            payload[key] = value
    if record.exc_info:
        payload["exc_info"] = logging.Formatter().formatException(record.exc_info)
    return json.dumps(payload, default=str)


class JsonFormatter(logging.Formatter):
    """Minimal JSON formatter for structured logs."""

    def format(self, record: logging.LogRecord) -> str:  # type: ignore[override]
        return _json_formatter(record)


def configure_logging(
    level: str = "WARNING",
    json_logs: bool = False,
) -> None:
    """Configure the `recordkit` logger hierarchy.

    Args:
        level: Logging level name (e.g., "DEBUG", "INFO", "WARNING").
        json_logs: Emit JSON lines instead of the console format.
    """
    formatter_name = "json" if json_logs else "console"

    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "console": {
                    "format": "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
                    "datefmt": "%Y-%m-%d %H:%M:%S",
                },
                "json": {
                    "()": JsonFormatter,
                },
            },
            "handlers": {
                "recordkit": {
                    "class": "logging.StreamHandler",
                    "formatter": formatter_name,
                    "level": level,
                }
            },
            "loggers": {
                "recordkit": {
                    "handlers": ["recordkit"],
                    "level": level,
                    "propagate": False,
                }
            },
        }
    )


def configure_from_settings() -> None:
    """Configure logging from `RecordSettings` (RECORDKIT_LOG_LEVEL, RECORDKIT_JSON_LOGS)."""
    # Late import to avoid circular dependency
    from recordkit.config import get_settings

    settings = get_settings()
    configure_logging(level=settings.log_level, json_logs=settings.json_logs)


def get_logger(name: str | None = None) -> logging.Logger:
    """Get a logger with the given name. If name is None, returns the root logger."""
    return logging.getLogger(name)


__all__ = ["configure_logging", "configure_from_settings", "get_logger", "JsonFormatter"]
