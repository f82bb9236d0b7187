from __future__ import annotations

"""
Integration tests for the Colored Console Sink.
"""

import io

import pytest
from colorama import Fore, Style

from conftest import strip_ansi
from logscribe.infra.console import ConsoleSink, color_for_type


@pytest.mark.parametrize("entry_type, color", [
    ("INFO", Fore.CYAN),
    ("ERROR", Fore.LIGHTRED_EX),
    ("WARNING", Fore.YELLOW),
    ("CRITICAL", Fore.RED),
    ("DEBUG", Fore.GREEN),
    ("DEFAULT", Fore.WHITE),
    ("AUDIT", Fore.MAGENTA),
])
def test_color_for_type(entry_type: str, color: str) -> None:
    """TC-01: Each canonical type has its own color; custom types are unmapped."""
    assert color_for_type(entry_type) == color


def test_write_emits_colored_segments(console_sink: ConsoleSink, console_buffer: io.StringIO) -> None:
    """TC-02: Timestamp and message are neutral, the tag is type-colored, then reset."""
    console_sink.write("05-03-2024 14:22:01.123", "WARNING", "low disk")

    assert console_buffer.getvalue() == (
        f"{Fore.WHITE}[05-03-2024 14:22:01.123] "
        f"{Fore.YELLOW}[WARNING] "
        f"{Fore.WHITE}low disk"
        f"{Style.RESET_ALL}\n"
    )


def test_write_defaults_to_stdout(capsys: pytest.CaptureFixture) -> None:
    """TC-03: Without an explicit stream, the current sys.stdout is used."""
    ConsoleSink().write("ts", "INFO", "to stdout")

    assert strip_ansi(capsys.readouterr().out) == "[ts] [INFO] to stdout\n"


def test_closed_stream_does_not_raise(caplog: pytest.LogCaptureFixture) -> None:
    """TC-04: A broken stream is reported to diagnostics, never to the caller."""
    stream = io.StringIO()
    stream.close()

    with caplog.at_level("WARNING", logger="logscribe"):
        ConsoleSink(stream=stream).write("ts", "INFO", "lost")

    assert any("Console echo failed" in r.getMessage() for r in caplog.records)
