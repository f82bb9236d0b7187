from __future__ import annotations

"""
Domain Constants and Static Lookup Tables.

Provides the process-wide, read-only tables that drive entry admission:
the built-in level profiles, the alias tables used to normalize entry
types and profile names, and the console color palette.
"""

from types import MappingProxyType
from typing import Mapping, Tuple

from colorama import Fore

# -----------------------------------------------------------------------------
# CANONICAL TYPES & PROFILES
# -----------------------------------------------------------------------------

ERROR = "ERROR"
INFO = "INFO"
WARNING = "WARNING"
CRITICAL = "CRITICAL"
DEBUG = "DEBUG"

DEFAULT_PROFILE = "DEFAULT"
DEBUG_PROFILE = "DEBUG"

LEVEL_PROFILES: Mapping[str, Tuple[str, ...]] = MappingProxyType({
    "DEFAULT": (ERROR, INFO, WARNING, CRITICAL),
    "DEBUG": (ERROR, INFO, WARNING, CRITICAL, DEBUG),
    "PRODUCTIVE": (ERROR, INFO, CRITICAL),
    "ERROR": (ERROR,),
    "CRITICAL": (CRITICAL,),
    "NONE": (),
})

# DEBUG admits every canonical type; anything outside it is a custom type
CANONICAL_TYPES: frozenset = frozenset(LEVEL_PROFILES[DEBUG_PROFILE])

if not all(set(types) <= CANONICAL_TYPES for types in LEVEL_PROFILES.values()):
    raise RuntimeError("DEBUG profile must admit every built-in entry type")

# -----------------------------------------------------------------------------
# ALIASES
# -----------------------------------------------------------------------------

ENTRY_TYPE_ALIASES: Mapping[str, str] = MappingProxyType({
    "ERR": ERROR,
    "E": ERROR,
    "INF": INFO,
    "I": INFO,
    "WARN": WARNING,
    "W": WARNING,
    "CRIT": CRITICAL,
    "C": CRITICAL,
    "DBG": DEBUG,
    "D": DEBUG,
})

PROFILE_ALIASES: Mapping[str, str] = MappingProxyType({
    "DEF": "DEFAULT",
    "DBG": "DEBUG",
    "PROD": "PRODUCTIVE",
    "ERR": "ERROR",
    "CRIT": "CRITICAL",
})

# -----------------------------------------------------------------------------
# FORMATTING DEFAULTS
# -----------------------------------------------------------------------------

DEFAULT_TIMESTAMP_FORMAT = "dd-MM-yyyy HH:mm:ss.fff"

# Console palette (segment colors are independent of the active profile)
NEUTRAL_COLOR = Fore.WHITE
UNMAPPED_COLOR = Fore.MAGENTA

TYPE_COLORS: Mapping[str, str] = MappingProxyType({
    INFO: Fore.CYAN,
    ERROR: Fore.LIGHTRED_EX,
    WARNING: Fore.YELLOW,
    CRITICAL: Fore.RED,
    DEBUG: Fore.GREEN,
    DEFAULT_PROFILE: Fore.WHITE,
})
