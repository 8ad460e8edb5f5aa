"""CLI utilities for formatting output."""

from notify_service.cli.utils.formatters import (
    error,
    info,
    section,
    success,
)

__all__ = [
    "error",
    "info",
    "section",
    "success",
]
