from __future__ import annotations

"""
Public Logger Facade.

``FileLogger`` is the embeddable entry point: it resolves the configured
file name and directory once, owns the configuration and exposes the
generic ``entry`` method, the per-level shortcuts and the retention sweep.
"""

import logging
from typing import Any, Dict, Optional, Tuple

from logscribe.core.dispatcher import EntryDispatcher
from logscribe.core.formatting import replace_filename_tokens
from logscribe.core.services.retention import RetentionSweeper
from logscribe.domain.config import LoggerConfig, load_config
from logscribe.domain.constants import (
    CRITICAL,
    DEBUG,
    DEFAULT_PROFILE,
    DEFAULT_TIMESTAMP_FORMAT,
    ERROR,
    INFO,
    WARNING,
)
from logscribe.infra.console import ConsoleSink
from logscribe.infra.fs import resolve_log_directory

logger = logging.getLogger(__name__)


class FileLogger:
    """
    Timestamped, typed logger writing to one file and optionally the console.

    Example:
        >>> log = FileLogger("app_%yyyy%-%MM%-%dd%.log", "logs", log_type="PROD")
        >>> log.info("service started")
        >>> log.entry("AUDIT", "user 42 signed in")
    """

    def __init__(
            self,
            log_file_name: str,
            log_file_path: str,
            log_type: str = DEFAULT_PROFILE,
            print_to_console: bool = True,
            timestamp_format: str = DEFAULT_TIMESTAMP_FORMAT,
            console: Optional[ConsoleSink] = None,
    ) -> None:
        """
        Args:
            log_file_name: File name, date/time tokens are resolved now.
            log_file_path: Log directory, made absolute and created if absent.
            log_type: Level profile name or abbreviation.
            print_to_console: Echo admitted entries to stdout.
            timestamp_format: Pattern for entry timestamps.
            console: Optional console sink replacing stdout.

        Raises:
            OSError: If the log directory cannot be created.
        """
        self._config = LoggerConfig(
            file_name=replace_filename_tokens(log_file_name),
            file_path=resolve_log_directory(log_file_path),
            profile=log_type,
            print_to_console=print_to_console,
            timestamp_format=timestamp_format,
        )
        self._dispatcher = EntryDispatcher(self._config, console=console)
        logger.debug(f"FileLogger ready: {self.log_file_full_path} ({self.log_type})")

    @classmethod
    def from_config(cls, config: Dict[str, Any], **kwargs: Any) -> FileLogger:
        """Build a logger from a configuration dictionary as returned by ``load_config``."""
        return cls(
            config["log_file_name"],
            config["log_file_path"],
            log_type=config["log_type"],
            print_to_console=config["print_to_console"],
            timestamp_format=config["timestamp_format"],
            **kwargs,
        )

    @classmethod
    def from_file(cls, path: str, **kwargs: Any) -> FileLogger:
        """Build a logger from a JSON configuration file."""
        return cls.from_config(load_config(path), **kwargs)

    # -------------------------------------------------------------------------
    # CONFIGURATION ACCESSORS
    # -------------------------------------------------------------------------

    @property
    def log_file_name(self) -> str:
        return self._config.file_name

    @log_file_name.setter
    def log_file_name(self, value: str) -> None:
        self._config.file_name = value

    @property
    def log_file_path(self) -> str:
        return self._config.file_path

    @log_file_path.setter
    def log_file_path(self, value: str) -> None:
        self._config.file_path = resolve_log_directory(value)

    @property
    def log_type(self) -> str:
        """Active level profile. Setting it re-derives the admitted types."""
        return self._dispatcher.profile

    @log_type.setter
    def log_type(self, value: str) -> None:
        self._dispatcher.profile = value

    @property
    def allowed_types(self) -> Tuple[str, ...]:
        return self._dispatcher.allowed_types

    @property
    def print_to_console(self) -> bool:
        return self._config.print_to_console

    @print_to_console.setter
    def print_to_console(self, value: bool) -> None:
        self._config.print_to_console = value

    @property
    def timestamp_format(self) -> str:
        return self._config.timestamp_format

    @timestamp_format.setter
    def timestamp_format(self, value: str) -> None:
        self._config.timestamp_format = value

    @property
    def log_file_full_path(self) -> str:
        return self._config.full_path

    # -------------------------------------------------------------------------
    # ENTRY API
    # -------------------------------------------------------------------------

    def entry(self, entry_type: str, message: str) -> None:
        """
        Write an entry of any type.

        Canonical types are filtered by the active profile; any other type
        is a custom type and is always written.
        """
        self._dispatcher.submit(entry_type, message)

    def info(self, message: str) -> None:
        self.entry(INFO, message)

    def warn(self, message: str) -> None:
        self.entry(WARNING, message)

    def error(self, message: str) -> None:
        self.entry(ERROR, message)

    def crit(self, message: str) -> None:
        self.entry(CRITICAL, message)

    def debug(self, message: str) -> None:
        self.entry(DEBUG, message)

    # -------------------------------------------------------------------------
    # MAINTENANCE
    # -------------------------------------------------------------------------

    def log_cleanup(self, retention_days: int) -> int:
        """
        Delete files older than ``retention_days`` from the log directory.

        Returns:
            int: Number of deleted files.
        """
        return RetentionSweeper(self, self.log_file_path).sweep(retention_days)
