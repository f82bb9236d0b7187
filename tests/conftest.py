from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared fixtures building loggers inside temporary directories.
"""

import io
import os
import re
import sys
from pathlib import Path
from typing import Any, Callable, Iterator, List

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from logscribe.infra.console import ConsoleSink  # noqa: E402
from logscribe.infra.logging import shutdown_logging  # noqa: E402
from logscribe.logger import FileLogger  # noqa: E402

LINE_RE = re.compile(r"^\[(\d{2}-\d{2}-\d{4} \d{2}:\d{2}:\d{2}\.\d{3})\] \[([^\]]+)\] (.*)$")
ANSI_RE = re.compile(r"\x1b\[[0-9;]*m")


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def log_dir(tmp_path: Path) -> Path:
    """Return a not-yet-existing log directory inside the test sandbox."""
    return tmp_path / "logs"


@pytest.fixture
def make_logger(log_dir: Path) -> Callable[..., FileLogger]:
    """
    Factory for FileLogger instances writing into the sandbox.

    Console echo is disabled unless requested explicitly.
    """
    def _make(log_type: str = "DEFAULT", **kwargs: Any) -> FileLogger:
        kwargs.setdefault("print_to_console", False)
        return FileLogger("test.log", str(log_dir), log_type=log_type, **kwargs)

    return _make


@pytest.fixture
def console_buffer() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def console_sink(console_buffer: io.StringIO) -> ConsoleSink:
    """Console sink capturing colored output into a buffer."""
    return ConsoleSink(stream=console_buffer)


def read_lines(log: FileLogger) -> List[str]:
    """Return the lines of a logger's file, or an empty list if it was never written."""
    path = Path(log.log_file_full_path)
    if not path.exists():
        return []
    return path.read_text(encoding="utf-8").splitlines()


def entry_types(log: FileLogger) -> List[str]:
    """Return the type tag of every line in a logger's file."""
    return [LINE_RE.match(line).group(2) for line in read_lines(log)]


def strip_ansi(text: str) -> str:
    return ANSI_RE.sub("", text)


@pytest.fixture(autouse=True)
def reset_diagnostics_logging() -> Iterator[None]:
    """Release diagnostics handlers installed by CLI runs between tests."""
    yield
    shutdown_logging()
