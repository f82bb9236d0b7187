from __future__ import annotations

"""
Entry Admission and Dispatch.

Turns a ``(type_label, message)`` pair into zero or one written line.
Three independent locks guard the three shared resources:

1. The admitted-type set. Held across "check admission, then write" so a
   profile change cannot race an entry admitted under the old profile.
2. The log file. Serializes appends so lines never interleave.
3. The console (owned by ``ConsoleSink``). Keeps colored segments together.

Write failures never reach the caller. They are reported by re-entering
``submit`` with an ERROR entry, which is itself subject to admission.
"""

import logging
import threading
from datetime import datetime
from typing import Callable, Optional, Tuple

from logscribe.core.formatting import format_timestamp
from logscribe.core.normalization import is_admitted, normalize_entry_type, normalize_profile
from logscribe.domain.config import LoggerConfig
from logscribe.domain.constants import DEFAULT_PROFILE, ERROR, LEVEL_PROFILES
from logscribe.domain.models import LogEntry
from logscribe.infra.console import ConsoleSink
from logscribe.infra.fs import append_line

logger = logging.getLogger(__name__)


class EntryDispatcher:
    """
    Admission, formatting and synchronized writing of log entries.

    The dispatcher works on a ``LoggerConfig`` it shares with its owner;
    file location, console echo and timestamp format are read at write time.
    """

    def __init__(
            self,
            config: LoggerConfig,
            console: Optional[ConsoleSink] = None,
            clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        """
        Initialize the dispatcher and derive the admitted set from the profile.

        Args:
            config: Mutable logger configuration.
            console: Console sink. A stdout sink is created when omitted.
            clock: Source of entry timestamps (local time).
        """
        self._config = config
        self._console = console if console is not None else ConsoleSink()
        self._clock = clock

        # Re-entrant: failure reports re-enter submit() while it is held
        self._allowed_lock = threading.RLock()
        self._file_lock = threading.Lock()
        self._reporting = threading.local()

        self._allowed_types: Tuple[str, ...] = ()
        self.profile = config.profile

    # -------------------------------------------------------------------------
    # PROFILE MANAGEMENT
    # -------------------------------------------------------------------------

    @property
    def profile(self) -> str:
        """Normalized name of the active level profile."""
        return self._config.profile

    @profile.setter
    def profile(self, name: str) -> None:
        normalized = normalize_profile(name)
        allowed = LEVEL_PROFILES.get(normalized)
        if allowed is None:
            logger.warning(f"Unknown log profile '{name}', falling back to {DEFAULT_PROFILE}")
            normalized = DEFAULT_PROFILE
            allowed = LEVEL_PROFILES[DEFAULT_PROFILE]

        with self._allowed_lock:
            self._config.profile = normalized
            self._allowed_types = allowed

    @property
    def allowed_types(self) -> Tuple[str, ...]:
        """Snapshot of the currently admitted canonical types."""
        with self._allowed_lock:
            return self._allowed_types

    # -------------------------------------------------------------------------
    # SUBMISSION
    # -------------------------------------------------------------------------

    def submit(self, type_label: str, message: str) -> None:
        """
        Admit, format and write one entry.

        Args:
            type_label: Entry type, case-insensitive, abbreviations allowed.
            message: Message text, written as-is.
        """
        entry_type = normalize_entry_type(type_label)

        with self._allowed_lock:
            if not is_admitted(entry_type, self._allowed_types):
                return
            entry = LogEntry(
                raw_type=type_label,
                message=message,
                timestamp=self._clock(),
                entry_type=entry_type,
            )
            self._write(entry)

    def _write(self, entry: LogEntry) -> None:
        """Append the entry to the file, then echo it to the console."""
        timestamp = format_timestamp(entry.timestamp, self._config.timestamp_format)
        failure = self._append(f"[{timestamp}] [{entry.entry_type}] {entry.message}")

        if self._config.print_to_console:
            self._console.write(timestamp, entry.entry_type, entry.message)

        if failure is not None:
            self._report_failure(failure)

    def _append(self, line: str) -> Optional[Exception]:
        """Append a line under the file lock, returning the error on failure."""
        with self._file_lock:
            try:
                append_line(self._config.full_path, line)
            except (OSError, ValueError) as e:
                # ValueError covers text the file encoding cannot represent
                return e
        return None

    def _report_failure(self, error: Exception) -> None:
        """
        Log a file write failure through the regular submission path.

        A failure raised while such a report is written on the same thread
        is dropped instead of reported again.
        """
        if getattr(self._reporting, "active", False):
            logger.debug(f"Dropping nested write failure report: {error}")
            return

        self._reporting.active = True
        try:
            self.submit(ERROR, f"Failed to write log file '{self._config.file_name}': {error}")
        finally:
            self._reporting.active = False
