"""Logging configuration for payload offloading."""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from payload_offloading.core.config import Settings

PACKAGE_LOGGER_NAME = "payload_offloading"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class _PackageStreamHandler(logging.StreamHandler):
    """stdout handler installed by setup_logging (at most one per process)."""


def setup_logging(settings: Settings | None = None) -> logging.Logger:
    """Send payload_offloading logs to stdout.

    Level is DEBUG when settings.debug is True, otherwise INFO. Only the
    package logger is configured; the root logger is left to the embedding
    application. Calling again updates the level without adding handlers.

    Args:
        settings: Settings; if None, uses get_settings().

    Returns:
        The package logger.
    """
    from payload_offloading.core.config import get_settings

    settings = settings or get_settings()
    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    package_logger.setLevel(logging.DEBUG if settings.debug else logging.INFO)
    if not any(isinstance(h, _PackageStreamHandler) for h in package_logger.handlers):
        handler = _PackageStreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        package_logger.addHandler(handler)
    return package_logger


def get_logger(name: str) -> logging.Logger:
    """Return a logger for the given module name.

    Args:
        name: Usually __name__ of the calling module.

    Returns:
        Logger instance.
    """
    return logging.getLogger(name)
