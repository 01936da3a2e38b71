"""
Auto-discovery CLI dispatcher for Gleam.

Scans ``gleam/cli/commands/`` and registers every module as a subcommand.
Adding a new command = adding a .py file that defines ``SUMMARY``,
``register_args(parser)`` and ``main(args) -> int``.
"""

from __future__ import annotations

import argparse
import importlib
import logging
import sys
from collections.abc import Callable
from functools import lru_cache
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def discover_commands() -> dict[str, dict[str, Any]]:
    """Discover commands under cli/commands.

    Returns:
        Dict mapping command name to command info dict
    """
    commands_dir = Path(__file__).parent / "commands"
    commands: dict[str, dict[str, Any]] = {}

    for item in sorted(commands_dir.glob("*.py")):
        if item.name.startswith("_"):
            continue

        cmd_name = item.stem
        try:
            module = importlib.import_module(f"gleam.cli.commands.{cmd_name}")
        except ImportError as e:
            print(f"Warning: Could not import command {cmd_name}: {e}", file=sys.stderr)
            continue
        commands[cmd_name] = {
            "module": module,
            "summary": getattr(module, "SUMMARY", cmd_name),
            "register_args": getattr(module, "register_args", None),
            "main": getattr(module, "main", None),
        }

    return commands


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with auto-discovered commands."""
    parser = argparse.ArgumentParser(
        prog="gleam",
        description="Gleam - stage, diff and commit through git",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {_get_version()}",
    )

    subparsers = parser.add_subparsers(
        dest="command",
        title="commands",
        metavar="<command>",
    )

    for cmd_name, cmd_info in sorted(discover_commands().items()):
        primary_name = cmd_name.replace("_", "-")
        aliases = [cmd_name] if primary_name != cmd_name else []
        cmd_parser = subparsers.add_parser(
            primary_name,
            aliases=aliases,
            help=cmd_info["summary"],
        )
        if cmd_info["register_args"]:
            cmd_info["register_args"](cmd_parser)
        if cmd_info["main"]:
            cmd_parser.set_defaults(_func=cmd_info["main"])

    return parser


def _get_version() -> str:
    from gleam import __version__

    return __version__


def _configure_logging(args: argparse.Namespace) -> None:
    """Install the file log handler when ``logging.enabled`` is set."""
    from gleam.core.logging_setup import configure_stdlib_logging, suppress_lastresort

    try:
        from gleam.cli._utils import get_repo_root
        from gleam.core.config.domains import LoggingConfig

        cfg = LoggingConfig(repo_root=get_repo_root(args))
        log_path = cfg.resolve_log_path() if cfg.enabled else None
        if log_path is not None:
            configure_stdlib_logging(log_path=log_path, level=cfg.level)
    except (OSError, ValueError) as exc:
        # Logging setup must never prevent the command itself from running.
        print(f"Warning: logging disabled: {exc}", file=sys.stderr)

    if getattr(args, "json", False):
        suppress_lastresort()


def main(argv: list[str] | None = None) -> int:
    """
    Main entry point for the Gleam CLI.

    Args:
        argv: Command line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    if argv is None:
        argv = sys.argv[1:]

    parser = build_parser()
    args = parser.parse_args(argv)

    func: Callable[[argparse.Namespace], int] | None = getattr(args, "_func", None)
    if not args.command or func is None:
        parser.print_help()
        return 0 if not args.command else 1

    _configure_logging(args)
    logger.debug("Running command %s", args.command)

    try:
        return func(args)
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        return 130


if __name__ == "__main__":
    sys.exit(main())
