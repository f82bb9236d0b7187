from __future__ import annotations

"""
Colored Console Sink.

Writes the three segments of an entry (timestamp, type tag, message) to
standard output with independent colors. A dedicated lock keeps the
segments of concurrent entries from interleaving.
"""

import logging
import sys
import threading
from typing import Optional, TextIO

from colorama import Style, just_fix_windows_console

from logscribe.domain.constants import NEUTRAL_COLOR, TYPE_COLORS, UNMAPPED_COLOR

logger = logging.getLogger(__name__)


def color_for_type(entry_type: str) -> str:
    """Return the ANSI color for a normalized entry type."""
    return TYPE_COLORS.get(entry_type, UNMAPPED_COLOR)


class ConsoleSink:
    """
    Serialized, colored writer for standard output.

    The stream is resolved at write time unless one is given explicitly,
    so redirections of ``sys.stdout`` are honored.
    """

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        just_fix_windows_console()
        self._stream = stream
        self._lock = threading.Lock()

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def write(self, timestamp: str, entry_type: str, message: str) -> None:
        """
        Echo one entry as colored segments followed by a color reset.

        Stream failures are reported to the diagnostics logger and dropped.
        """
        with self._lock:
            try:
                out = self.stream
                out.write(f"{NEUTRAL_COLOR}[{timestamp}] ")
                out.write(f"{color_for_type(entry_type)}[{entry_type}] ")
                out.write(f"{NEUTRAL_COLOR}{message}")
                out.write(f"{Style.RESET_ALL}\n")
                out.flush()
            except (OSError, ValueError) as e:
                logger.warning(f"Console echo failed: {e}")
