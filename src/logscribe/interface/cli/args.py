from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema and translates the parsed namespace into
configuration overrides for ``FileLogger``.
"""

import argparse
from typing import Any, Dict

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the logscribe CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="logscribe",
        description="Write typed, timestamped entries to a log file.",
    )

    # --- Configuration Sources ---
    p.add_argument(
        "-c", "--config",
        dest="config_file",
        default=None,
        help="JSON file with logger settings.",
    )
    p.add_argument(
        "-p", "--path",
        dest="log_file_path",
        default=None,
        help="Directory holding the log file.",
    )
    p.add_argument(
        "-n", "--name",
        dest="log_file_name",
        default=None,
        help="Log file name; supports %%dd%% %%MM%% %%yyyy%% %%hh%% %%m%% %%ss%%.",
    )
    p.add_argument(
        "-l", "--level",
        dest="log_type",
        default=None,
        help="Level profile (DEFAULT, DEBUG, PRODUCTIVE, ERROR, CRITICAL, NONE).",
    )
    p.add_argument(
        "--timestamp-format",
        dest="timestamp_format",
        default=None,
        help="Timestamp pattern, e.g. 'dd-MM-yyyy HH:mm:ss.fff'.",
    )
    p.add_argument(
        "--no-console",
        action="store_true",
        help="Do not echo entries to stdout.",
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate diagnostics verbosity to DEBUG.",
    )

    # --- Commands ---
    sub = p.add_subparsers(dest="command", required=True)

    entry = sub.add_parser("entry", help="Write a single entry.")
    entry.add_argument("entry_type", help="Entry type (INFO, W, err, or any custom type).")
    entry.add_argument("message", nargs="?", default="", help="Message text.")

    sweep = sub.add_parser("sweep", help="Delete log files older than DAYS.")
    sweep.add_argument("retention_days", type=int, help="Retention window in days.")

    profiles = sub.add_parser("profiles", help="List level profiles and their admitted types.")
    profiles.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help="Print the profile table as JSON.",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into configuration overrides.

    Options not given on the command line map to None and do not override.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset.
    """
    overrides: Dict[str, Any] = {
        "log_file_name": args.log_file_name,
        "log_file_path": args.log_file_path,
        "log_type": args.log_type,
        "timestamp_format": args.timestamp_format,
    }
    if args.no_console:
        overrides["print_to_console"] = False
    return overrides
