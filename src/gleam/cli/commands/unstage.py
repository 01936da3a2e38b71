"""
Gleam unstage command.

SUMMARY: Remove files from the staging area
"""

from __future__ import annotations

import argparse

from gleam.cli import OutputFormatter, add_paths_arg, add_standard_flags, get_runner
from gleam.core.exceptions import GleamError

SUMMARY = "Remove files from the staging area"


def register_args(parser: argparse.ArgumentParser) -> None:
    """Register command-specific arguments."""
    add_paths_arg(parser, "Paths to unstage")
    add_standard_flags(parser)


def main(args: argparse.Namespace) -> int:
    formatter = OutputFormatter(json_mode=getattr(args, "json", False))

    try:
        get_runner(args).unstage(args.paths)
    except GleamError as e:
        formatter.error(e, error_code="git_unstage_error")
        return 1

    formatter.success({"unstaged": list(args.paths)}, f"Unstaged {len(args.paths)} path(s)")
    return 0
