from __future__ import annotations

"""
Integration tests for FileSystem Infrastructure.

Validates directory resolution, line appends and file listing.
"""

import os
from datetime import datetime
from pathlib import Path
from unittest.mock import patch

import pytest

from logscribe.infra.fs import append_line, get_modified_time, list_files, resolve_log_directory


def test_resolve_creates_nested_directory(tmp_path: Path) -> None:
    """TC-01: Nested directories are created and returned absolute."""
    target = tmp_path / "deep" / "nested"
    resolved = resolve_log_directory(str(target))

    assert resolved == str(target)
    assert target.is_dir()


def test_resolve_expands_environment(tmp_path: Path) -> None:
    """TC-01: Environment variables in the path are expanded."""
    with patch.dict(os.environ, {"LOGSCRIBE_TEST_ROOT": str(tmp_path)}):
        resolved = resolve_log_directory("$LOGSCRIBE_TEST_ROOT/env_logs")

    assert resolved == str(tmp_path / "env_logs")


def test_resolve_propagates_creation_errors() -> None:
    """TC-02: Directory creation errors are fatal for the caller."""
    with patch("os.makedirs", side_effect=PermissionError("Permission Denied")):
        with pytest.raises(PermissionError):
            resolve_log_directory("/forbidden/logs")


def test_append_line_uses_platform_newline(tmp_path: Path) -> None:
    """TC-03: Lines are appended with os.linesep and never truncate the file."""
    target = tmp_path / "a.log"
    append_line(str(target), "one")
    append_line(str(target), "two")

    assert target.read_bytes() == f"one{os.linesep}two{os.linesep}".encode("utf-8")


def test_append_line_keeps_unicode(tmp_path: Path) -> None:
    target = tmp_path / "u.log"
    append_line(str(target), "café ✓")

    assert target.read_text(encoding="utf-8").splitlines() == ["café ✓"]


def test_list_files_skips_directories(tmp_path: Path) -> None:
    """TC-04: Only regular files are listed."""
    (tmp_path / "b.log").write_text("b")
    (tmp_path / "a.log").write_text("a")
    (tmp_path / "sub").mkdir()

    names = [os.path.basename(p) for p in list_files(str(tmp_path))]
    assert names == ["a.log", "b.log"]


def test_get_modified_time(tmp_path: Path) -> None:
    target = tmp_path / "m.log"
    target.write_text("m")
    stamp = datetime(2020, 1, 2, 3, 4, 5).timestamp()
    os.utime(target, (stamp, stamp))

    assert get_modified_time(str(target)) == datetime(2020, 1, 2, 3, 4, 5)
