from __future__ import annotations

"""
Unit tests for the Configuration Domain.

Verifies default injection, JSON loading, unknown-key handling and
error reporting for malformed sources.
"""

import json
import os
from pathlib import Path

import pytest

from logscribe.domain.config import ConfigError, LoggerConfig, get_default_config, load_config


def write_json(path: Path, payload) -> str:
    path.write_text(json.dumps(payload), encoding="utf-8")
    return str(path)


def test_load_none_returns_defaults() -> None:
    """TC-01: Without a file, the defaults are returned."""
    cfg = load_config(None)

    assert cfg == get_default_config()
    assert cfg["log_type"] == "DEFAULT"
    assert cfg["print_to_console"] is True
    assert cfg["timestamp_format"] == "dd-MM-yyyy HH:mm:ss.fff"


def test_load_merges_over_defaults(tmp_path: Path) -> None:
    """TC-02: Values from the file override defaults; missing keys keep defaults."""
    path = write_json(tmp_path / "cfg.json", {"log_type": "prod", "print_to_console": False})
    cfg = load_config(path)

    assert cfg["log_type"] == "prod"
    assert cfg["print_to_console"] is False
    assert cfg["log_file_name"] == get_default_config()["log_file_name"]


def test_unknown_keys_are_ignored(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    """TC-03: Unknown keys are dropped with a warning."""
    path = write_json(tmp_path / "cfg.json", {"rotation": "daily"})

    with caplog.at_level("WARNING", logger="logscribe"):
        cfg = load_config(path)

    assert "rotation" not in cfg
    assert any("rotation" in r.getMessage() for r in caplog.records)


@pytest.mark.parametrize("content", ["{not json", "[1, 2]"])
def test_malformed_file_raises(tmp_path: Path, content: str) -> None:
    """TC-04: Malformed JSON or a non-object document raises ConfigError."""
    path = tmp_path / "cfg.json"
    path.write_text(content, encoding="utf-8")

    with pytest.raises(ConfigError):
        load_config(str(path))


def test_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(ConfigError):
        load_config(str(tmp_path / "absent.json"))


def test_non_boolean_console_flag_raises(tmp_path: Path) -> None:
    path = write_json(tmp_path / "cfg.json", {"print_to_console": "yes"})

    with pytest.raises(ConfigError):
        load_config(path)


def test_full_path_joins_directory_and_name(tmp_path: Path) -> None:
    cfg = LoggerConfig(file_name="a.log", file_path=str(tmp_path))
    assert cfg.full_path == os.path.join(str(tmp_path), "a.log")


@pytest.mark.parametrize("key, value", [
    ("log_type", None),
    ("log_file_name", 42),
    ("log_file_path", ["logs"]),
    ("timestamp_format", {"pattern": "HH:mm"}),
])
def test_non_string_values_raise(tmp_path: Path, key: str, value) -> None:
    """TC-05: String settings of another JSON type raise ConfigError."""
    path = write_json(tmp_path / "cfg.json", {key: value})

    with pytest.raises(ConfigError, match=key):
        load_config(path)
