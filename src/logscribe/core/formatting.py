from __future__ import annotations

"""
Timestamp and Filename Token Rendering.

Renders timestamps from the custom date/time patterns used in the logger
configuration (``dd-MM-yyyy HH:mm:ss.fff`` style) and substitutes the
``%token%`` placeholders supported in log file names.
"""

import re
from datetime import datetime
from typing import Callable, Dict, Optional

# -----------------------------------------------------------------------------
# PATTERN TOKENS
# -----------------------------------------------------------------------------

# Longest tokens first so that 'yyyy' wins over 'yy' and 'fff' over 'f'
_PATTERN_TOKEN_RE = re.compile(
    r"'[^']*'|yyyy|yy|MM|M|dd|d|HH|H|hh|h|mm|m|ss|s|fff|ff|f|tt"
)

_TOKEN_RENDERERS: Dict[str, Callable[[datetime], str]] = {
    "yyyy": lambda t: f"{t.year:04d}",
    "yy": lambda t: f"{t.year % 100:02d}",
    "MM": lambda t: f"{t.month:02d}",
    "M": lambda t: str(t.month),
    "dd": lambda t: f"{t.day:02d}",
    "d": lambda t: str(t.day),
    "HH": lambda t: f"{t.hour:02d}",
    "H": lambda t: str(t.hour),
    "hh": lambda t: f"{(t.hour % 12) or 12:02d}",
    "h": lambda t: str((t.hour % 12) or 12),
    "mm": lambda t: f"{t.minute:02d}",
    "m": lambda t: str(t.minute),
    "ss": lambda t: f"{t.second:02d}",
    "s": lambda t: str(t.second),
    "fff": lambda t: f"{t.microsecond // 1000:03d}",
    "ff": lambda t: f"{t.microsecond // 10000:02d}",
    "f": lambda t: str(t.microsecond // 100000),
    "tt": lambda t: "AM" if t.hour < 12 else "PM",
}

# Applied in order, all from the same captured instant
_FILENAME_TOKENS = (
    ("%dd%", "%d"),
    ("%MM%", "%m"),
    ("%yyyy%", "%Y"),
    ("%hh%", "%H"),
    ("%m%", "%M"),
    ("%ss%", "%S"),
)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def format_timestamp(moment: datetime, pattern: str) -> str:
    """
    Render a datetime using a custom date/time pattern.

    Patterns containing ``%`` are handed to ``strftime`` unchanged. Any
    other pattern is scanned for day/month/year/time tokens; unknown
    characters are copied through and text in single quotes is literal.

    Args:
        moment: Instant to render.
        pattern: Custom pattern or strftime directive string.

    Returns:
        str: Rendered timestamp.
    """
    if "%" in pattern:
        return moment.strftime(pattern)

    def _render(match: re.Match) -> str:
        token = match.group(0)
        if token.startswith("'"):
            return token[1:-1]
        return _TOKEN_RENDERERS[token](moment)

    return _PATTERN_TOKEN_RE.sub(_render, pattern)


def replace_filename_tokens(file_name: str, now: Optional[datetime] = None) -> str:
    """
    Substitute the date/time placeholders of a log file name.

    Supported tokens: ``%dd%`` (day), ``%MM%`` (month), ``%yyyy%`` (year),
    ``%hh%`` (24-hour hour), ``%m%`` (minute), ``%ss%`` (second).

    Args:
        file_name: File name template.
        now: Instant to use. Defaults to the current local time.

    Returns:
        str: File name with every known token replaced.
    """
    moment = now or datetime.now()
    resolved = file_name
    for token, directive in _FILENAME_TOKENS:
        resolved = resolved.replace(token, moment.strftime(directive))
    return resolved
