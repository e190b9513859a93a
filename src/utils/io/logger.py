"""Thin static facade over :mod:`loguru`.

Every module logs through :class:`Logger` so that sinks and levels are configured in a
single place. The level is read from the ``LOG_LEVEL`` environment variable the first time
a message is emitted, unless :meth:`Logger.configure` was called explicitly before.
"""

import os
import sys
from typing import Optional

from loguru import logger as _logger


class Logger:
    """Static logging helpers used across the project."""

    _FORMAT = (
        "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
        "<level>{message}</level>"
    )
    _configured: bool = False

    @staticmethod
    def configure(level: Optional[str] = None) -> None:
        """Replace the default loguru sink with a stderr sink at the given level."""
        effective_level = (level or os.getenv("LOG_LEVEL", "INFO")).strip().upper()
        _logger.remove()
        _logger.add(sys.stderr, level=effective_level, format=Logger._FORMAT)
        Logger._configured = True

    @staticmethod
    def _ensure_configured() -> None:
        if not Logger._configured:
            Logger.configure()

    @staticmethod
    def debug(message: str) -> None:
        """Log a debug message."""
        Logger._ensure_configured()
        _logger.opt(depth=1).debug(message)

    @staticmethod
    def info(message: str) -> None:
        """Log an informational message."""
        Logger._ensure_configured()
        _logger.opt(depth=1).info(message)

    @staticmethod
    def success(message: str) -> None:
        """Log a success message."""
        Logger._ensure_configured()
        _logger.opt(depth=1).success(message)

    @staticmethod
    def warning(message: str) -> None:
        """Log a warning message."""
        Logger._ensure_configured()
        _logger.opt(depth=1).warning(message)

    @staticmethod
    def error(message: str) -> None:
        """Log an error message."""
        Logger._ensure_configured()
        _logger.opt(depth=1).error(message)
