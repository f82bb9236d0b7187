from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Resolves and creates log directories, composes log file paths and
provides the append primitive used by the file sink. Errors from directory
creation propagate to the caller; append errors are left to the sink.
"""

import os
from datetime import datetime
from typing import List

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def resolve_log_directory(path: str) -> str:
    """
    Resolve a directory path to an absolute path and create it if absent.

    User home shortcuts (``~``) and environment variables are expanded.

    Args:
        path: Raw directory path.

    Returns:
        str: Absolute directory path.

    Raises:
        OSError: If the directory hierarchy cannot be created.
    """
    resolved = os.path.abspath(os.path.expandvars(os.path.expanduser(path)))
    os.makedirs(resolved, exist_ok=True)
    return resolved


# -----------------------------------------------------------------------------
# FILE OPERATIONS API
# -----------------------------------------------------------------------------

def append_line(file_path: str, line: str) -> None:
    """
    Append a single line followed by the platform newline.

    Args:
        file_path: Target file, created if missing.
        line: Text without trailing newline.

    Raises:
        OSError: If the file cannot be opened or written.
        ValueError: If the line cannot be encoded as UTF-8.
    """
    with open(file_path, "a", encoding="utf-8", newline="") as f:
        f.write(line + os.linesep)


def list_files(directory: str) -> List[str]:
    """
    List the regular files directly inside a directory.

    Args:
        directory: Directory to inspect.

    Returns:
        List[str]: Absolute paths, sub-directories excluded.
    """
    with os.scandir(directory) as it:
        return sorted(entry.path for entry in it if entry.is_file())


def get_modified_time(file_path: str) -> datetime:
    """Return the local last-modified time of a file."""
    return datetime.fromtimestamp(os.path.getmtime(file_path))
