"""Shared helpers for cross-cutting concerns. Free of record logic."""

from recordkit.utils.logging import (
    JsonFormatter,
    configure_from_settings,
    configure_logging,
    get_logger,
)

__all__ = [
    "configure_logging",
    "configure_from_settings",
    "get_logger",
    "JsonFormatter",
]
