from __future__ import annotations

from .config import LOGGER_NAMESPACE, LoggingConfig
from .core import configure_logging, get_logger, shutdown_logging

__all__ = [
    "LOGGER_NAMESPACE",
    "LoggingConfig",
    "configure_logging",
    "get_logger",
    "shutdown_logging",
]
