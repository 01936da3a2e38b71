"""
Gleam status command.

SUMMARY: Show staged and unstaged files
"""

from __future__ import annotations

import argparse

from gleam.cli import OutputFormatter, add_standard_flags, get_runner
from gleam.core.changes import ChangeList
from gleam.core.exceptions import GleamError

SUMMARY = "Show staged and unstaged files"


def register_args(parser: argparse.ArgumentParser) -> None:
    """Register command-specific arguments."""
    add_standard_flags(parser)


def main(args: argparse.Namespace) -> int:
    formatter = OutputFormatter(json_mode=getattr(args, "json", False))

    try:
        runner = get_runner(args)
        changes = ChangeList()
        changes.refresh(runner)
    except GleamError as e:
        formatter.error(e, error_code="git_status_error")
        return 1

    staged = changes.staged
    unstaged = changes.unstaged
    if formatter.json_mode:
        formatter.json_output(
            {
                "repo_root": str(runner.working_dir),
                "clean": not staged and not unstaged,
                "staged": staged,
                "unstaged": unstaged,
            }
        )
        return 0

    if not staged and not unstaged:
        formatter.text("No changes")
        return 0
    if staged:
        formatter.text(f"Staged ({len(staged)} files):")
        for f in staged:
            formatter.text(f"  + {f}")
    if unstaged:
        if staged:
            formatter.text("")
        formatter.text(f"Unstaged ({len(unstaged)} files):")
        for f in unstaged:
            formatter.text(f"  M {f}")
    return 0
