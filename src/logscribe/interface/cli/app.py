from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Bootstraps diagnostics, merges configuration sources (defaults, JSON file
and command-line overrides), builds a ``FileLogger`` and runs the
requested command.
"""

import argparse
import json
import sys
from typing import Any, Dict, List, Optional

from logscribe.domain.config import CONFIG_KEYS, ConfigError, load_config
from logscribe.domain.constants import LEVEL_PROFILES
from logscribe.infra.logging import LoggingConfig, configure_logging, get_logger, shutdown_logging
from logscribe.interface.cli import args as cli_args
from logscribe.logger import FileLogger

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_CONFIG_ERROR = 2

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the CLI workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code.
    """
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    configure_logging(LoggingConfig(level="DEBUG" if args.debug else "WARNING"))
    try:
        return _run(args)
    finally:
        # Drain queued diagnostics before returning
        shutdown_logging()


def _run(args: argparse.Namespace) -> int:
    """Dispatch the parsed command."""
    if args.command == "profiles":
        _print_profiles(bool(args.json_output))
        return EXIT_OK

    try:
        base_conf = load_config(args.config_file)
        conf = _merge_config(base_conf, cli_args.args_to_overrides(args))
        log = FileLogger.from_config(conf)
    except (ConfigError, OSError) as e:
        logger.error(f"Logger configuration failed: {e}")
        print(f"ERROR: {e}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    if args.command == "entry":
        log.entry(args.entry_type, args.message)
    elif args.command == "sweep":
        deleted = log.log_cleanup(args.retention_days)
        logger.debug(f"Sweep removed {deleted} file(s) from {log.log_file_path}")

    return EXIT_OK

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """Shallow-merge non-None overrides of known keys into the base configuration."""
    out = dict(base)
    for k in CONFIG_KEYS:
        if overrides.get(k) is not None:
            out[k] = overrides[k]
    return out

# -----------------------------------------------------------------------------
# VIEW RENDERING
# -----------------------------------------------------------------------------

def _print_profiles(as_json: bool) -> None:
    if as_json:
        print(json.dumps({name: list(types) for name, types in LEVEL_PROFILES.items()}, indent=2))
        return
    width = max(len(name) for name in LEVEL_PROFILES)
    for name, types in LEVEL_PROFILES.items():
        print(f"{name.ljust(width)}  {', '.join(types) or '-'}")


if __name__ == "__main__":
    sys.exit(main())
