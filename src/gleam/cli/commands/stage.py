"""
Gleam stage command.

SUMMARY: Stage files for the next commit
"""

from __future__ import annotations

import argparse

from gleam.cli import OutputFormatter, add_paths_arg, add_standard_flags, get_runner
from gleam.core.exceptions import GleamError

SUMMARY = "Stage files for the next commit"


def register_args(parser: argparse.ArgumentParser) -> None:
    """Register command-specific arguments."""
    add_paths_arg(parser, "Paths to stage")
    add_standard_flags(parser)


def main(args: argparse.Namespace) -> int:
    formatter = OutputFormatter(json_mode=getattr(args, "json", False))

    try:
        get_runner(args).stage(args.paths)
    except GleamError as e:
        formatter.error(e, error_code="git_stage_error")
        return 1

    formatter.success({"staged": list(args.paths)}, f"Staged {len(args.paths)} path(s)")
    return 0
