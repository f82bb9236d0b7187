"""
logscribe: embeddable, thread-safe, typed file logger with colored console echo.
"""

import logging

from logscribe.core.services.retention import RetentionSweeper
from logscribe.domain.config import ConfigError, LoggerConfig, load_config
from logscribe.domain.constants import CANONICAL_TYPES, LEVEL_PROFILES
from logscribe.logger import FileLogger

__version__ = "1.0.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "CANONICAL_TYPES",
    "ConfigError",
    "FileLogger",
    "LEVEL_PROFILES",
    "LoggerConfig",
    "RetentionSweeper",
    "load_config",
]
