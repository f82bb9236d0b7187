from __future__ import annotations

"""
Label Normalization and Admission Rules.

Pure functions mapping user-supplied entry types and profile names onto
their canonical spelling, plus the admission rule deciding whether a
normalized entry type is written under a given admitted set.
"""

from typing import Collection

from logscribe.domain.constants import CANONICAL_TYPES, ENTRY_TYPE_ALIASES, PROFILE_ALIASES


def normalize_entry_type(label: str) -> str:
    """
    Map an entry type label to its canonical form.

    Abbreviations (``ERR``, ``E``, ``WARN``, ...) expand to the canonical
    type; any other label is upper-cased and kept as a custom type.
    """
    upper = label.upper()
    return ENTRY_TYPE_ALIASES.get(upper, upper)


def normalize_profile(name: str) -> str:
    """Map a profile name or abbreviation (``PROD``, ``DBG``, ...) to its canonical form."""
    upper = name.upper()
    return PROFILE_ALIASES.get(upper, upper)


def is_custom_type(entry_type: str) -> bool:
    """Return True if a normalized type is not one of the built-in canonical types."""
    return entry_type not in CANONICAL_TYPES


def is_admitted(entry_type: str, allowed_types: Collection[str]) -> bool:
    """
    Decide whether a normalized entry type is written.

    Types admitted by the active profile are written. Custom types bypass
    profile filtering and are always written. Canonical types the profile
    does not list are rejected.

    Args:
        entry_type: Normalized entry type.
        allowed_types: Admitted set of the active profile.

    Returns:
        bool: True if the entry must be written.
    """
    if entry_type in allowed_types:
        return True
    return is_custom_type(entry_type)
