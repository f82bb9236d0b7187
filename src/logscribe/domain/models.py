from __future__ import annotations

"""
Log Entry Domain Model.

Defines the ephemeral value object created for every submitted entry.
Entries are never persisted as objects; only their rendered line is.
"""

from dataclasses import dataclass
from datetime import datetime

# -----------------------------------------------------------------------------
# CORE DATA MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class LogEntry:
    """
    A single submitted log entry.

    Attributes:
        raw_type: Type label exactly as supplied by the caller.
        message: Message text, written as-is.
        timestamp: Local time at which the entry was written.
        entry_type: Normalized type label used for admission and output.
    """
    raw_type: str
    message: str
    timestamp: datetime
    entry_type: str
