from __future__ import annotations

"""
Log Retention Service.

Deletes files older than a retention window from a log directory and
reports the outcome through a logger. Designed to fail silently: no
exception escapes a sweep.
"""

import logging
import os
from datetime import datetime, timedelta
from typing import TYPE_CHECKING, Callable

from logscribe.infra.fs import get_modified_time, list_files, resolve_log_directory

if TYPE_CHECKING:
    from logscribe.logger import FileLogger

logger = logging.getLogger(__name__)


class RetentionSweeper:
    """
    Retention-based deletion of old log files.

    Every file directly inside the directory is considered, whatever its
    name. Sub-directories are left untouched.
    """

    def __init__(
            self,
            log: FileLogger,
            log_directory: str,
            clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        """
        Args:
            log: Logger receiving the summary and failure entries.
            log_directory: Directory to sweep, created if absent.
            clock: Source of the current local time.

        Raises:
            TypeError: If no logger is given.
        """
        self.log = log
        self.log_directory = log_directory
        self._clock = clock

    @property
    def log(self) -> FileLogger:
        return self._log

    @log.setter
    def log(self, value: FileLogger) -> None:
        if value is None:
            raise TypeError("RetentionSweeper requires a logger instance.")
        self._log = value

    @property
    def log_directory(self) -> str:
        return self._log_directory

    @log_directory.setter
    def log_directory(self, value: str) -> None:
        self._log_directory = resolve_log_directory(value)

    def sweep(self, retention_days: int) -> int:
        """
        Delete every file last modified before ``now - retention_days``.

        Logs one INFO summary entry, plus one ERROR entry per file that
        could not be deleted.

        Args:
            retention_days: Retention window in days. Values <= 0 disable the sweep.

        Returns:
            int: Number of deleted files.
        """
        if retention_days <= 0:
            return 0

        try:
            threshold = self._clock() - timedelta(days=retention_days)
        except OverflowError:
            # Window reaches past the earliest representable date
            threshold = datetime.min

        try:
            files = list_files(self._log_directory)
        except OSError as e:
            self._log.error(f"Retention sweep failed: cannot list {self._log_directory} -> {e}")
            return 0

        deleted = 0
        for file_path in files:
            name = os.path.basename(file_path)
            try:
                if get_modified_time(file_path) >= threshold:
                    continue
                os.remove(file_path)
                deleted += 1
                logger.debug(f"Retention sweep removed {file_path}")
            except (OSError, OverflowError, ValueError) as e:
                self._log.error(f"Retention sweep failed: {name} -> {e}")

        self._log.info(f"Retention sweep finished. deleted={deleted}")
        return deleted
