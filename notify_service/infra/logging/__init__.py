"""Logging infrastructure.

Basic usage:
    from notify_service.infra.logging import get_lazy_logger, setup_logging

    setup_logging()  # once, at process start

    logger = get_lazy_logger(__name__)
    logger.debug(lambda: f"Loaded {len(config.events)} events")  # Only runs if DEBUG enabled
"""

from notify_service.infra.logging.config import configure_logging, setup_logging
from notify_service.infra.logging.formatters import JSONFormatter
from notify_service.infra.logging.lazy import (
    LazyLoggerAdapter,
    get_lazy_logger,
)

__all__ = [
    "JSONFormatter",
    "LazyLoggerAdapter",
    "configure_logging",
    "get_lazy_logger",
    "setup_logging",
]
