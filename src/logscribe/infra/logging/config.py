from __future__ import annotations

"""
Diagnostics Logging Configuration.

Settings for the stdlib ``logging`` tree used by logscribe to report on
itself (unknown profiles, console failures, sweep details). This is
separate from the log files written by ``FileLogger``.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Optional

# Mapping of string identifiers to native logging constants
_LEVEL_MAP: Dict[str, int] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}

LOGGER_NAMESPACE = "logscribe"


@dataclass(frozen=True)
class LoggingConfig:
    """
    Immutable settings for the diagnostics logger.

    Attributes:
        level: Minimum severity level to capture.
        console: Emit diagnostics on stderr.
        log_file: Optional file receiving diagnostics.
        max_bytes: Size of a diagnostics file segment before rollover.
        backup_count: Number of rolled-over segments to keep.
        console_fmt: Format of stderr lines.
        file_fmt: Format of file lines.
        datefmt: Timestamp format of file lines.
    """
    level: str = "WARNING"
    console: bool = True
    log_file: Optional[str] = None

    max_bytes: int = 1024 * 1024
    backup_count: int = 2

    console_fmt: str = "logscribe %(levelname)s | %(message)s"
    file_fmt: str = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
    datefmt: str = "%Y-%m-%d %H:%M:%S"
