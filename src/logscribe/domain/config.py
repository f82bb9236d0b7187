from __future__ import annotations

"""
Logger Configuration Domain.

Defines the mutable configuration owned by a logger instance and the
JSON-based loading used by the command line interface. Loaded values are
merged over the defaults; unknown keys are reported and ignored.
"""

import json
import logging
import os
from dataclasses import dataclass
from typing import Any, Dict, Optional

from logscribe.domain.constants import DEFAULT_PROFILE, DEFAULT_TIMESTAMP_FORMAT

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# Constants & Defaults
# -----------------------------------------------------------------------------
DEFAULT_LOG_FILE_NAME = "log_%yyyy%-%MM%-%dd%.txt"
DEFAULT_LOG_DIR_NAME = "logs"

STRING_KEYS = ("log_file_name", "log_file_path", "log_type", "timestamp_format")

CONFIG_KEYS = (
    "log_file_name",
    "log_file_path",
    "log_type",
    "print_to_console",
    "timestamp_format",
)


class ConfigError(ValueError):
    """Raised when a configuration source cannot be read or is malformed."""


# -----------------------------------------------------------------------------
# Configuration Models
# -----------------------------------------------------------------------------

@dataclass
class LoggerConfig:
    """
    Runtime configuration of a single logger instance.

    Attributes:
        file_name: Resolved log file name (tokens already substituted).
        file_path: Absolute directory holding the log file.
        profile: Normalized name of the active level profile.
        print_to_console: Whether admitted entries are echoed to stdout.
        timestamp_format: Pattern used to render entry timestamps.
    """
    file_name: str
    file_path: str
    profile: str = DEFAULT_PROFILE
    print_to_console: bool = True
    timestamp_format: str = DEFAULT_TIMESTAMP_FORMAT

    @property
    def full_path(self) -> str:
        """Absolute path of the log file."""
        return os.path.join(self.file_path, self.file_name)


def get_default_config() -> Dict[str, Any]:
    """
    Generate the default constructor arguments for a logger.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        "log_file_name": DEFAULT_LOG_FILE_NAME,
        "log_file_path": os.path.join(os.getcwd(), DEFAULT_LOG_DIR_NAME),
        "log_type": DEFAULT_PROFILE,
        "print_to_console": True,
        "timestamp_format": DEFAULT_TIMESTAMP_FORMAT,
    }


def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load logger settings from a JSON file, merged over the defaults.

    Args:
        path: JSON file to read. When None, the defaults are returned.

    Returns:
        Dict[str, Any]: Merged configuration.

    Raises:
        ConfigError: If the file cannot be read, does not hold a JSON object
            or holds a value of the wrong type.
    """
    config = get_default_config()
    if not path:
        return config

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except OSError as e:
        raise ConfigError(f"Cannot read configuration file '{path}': {e}") from e
    except json.JSONDecodeError as e:
        raise ConfigError(f"Malformed configuration file '{path}': {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Configuration file '{path}' must contain a JSON object.")

    for key, value in data.items():
        if key not in CONFIG_KEYS:
            logger.warning(f"Ignoring unknown configuration key: {key}")
            continue
        config[key] = value

    if not isinstance(config["print_to_console"], bool):
        raise ConfigError("'print_to_console' must be a boolean.")
    for key in STRING_KEYS:
        if not isinstance(config[key], str):
            raise ConfigError(f"'{key}' must be a string.")

    logger.debug(f"Configuration loaded from {path}")
    return config
