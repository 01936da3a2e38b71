"""
Gleam diff command.

SUMMARY: Show unstaged changes as a highlighted diff
"""

from __future__ import annotations

import argparse

from gleam.cli import OutputFormatter, add_standard_flags, get_runner
from gleam.core.config.domains import DiffConfig
from gleam.core.diff import parse_diff, render_diff, summarize
from gleam.core.exceptions import GleamError

SUMMARY = "Show unstaged changes as a highlighted diff"


def register_args(parser: argparse.ArgumentParser) -> None:
    """Register command-specific arguments."""
    parser.add_argument(
        "path",
        nargs="?",
        help="Limit the diff to one repository-relative path",
    )
    parser.add_argument(
        "--plain",
        action="store_true",
        help="Print git's diff text without styling or line numbers",
    )
    parser.add_argument(
        "--stat",
        action="store_true",
        help="Print only file and line counts",
    )
    add_standard_flags(parser)


def main(args: argparse.Namespace) -> int:
    formatter = OutputFormatter(json_mode=getattr(args, "json", False))

    try:
        runner = get_runner(args)
        text = runner.get_file_diff(args.path) if args.path else runner.get_diff()
    except GleamError as e:
        formatter.error(e, error_code="git_diff_error")
        return 1

    lines = parse_diff(text)
    stat = summarize(lines)

    if formatter.json_mode:
        formatter.json_output(
            {
                "path": args.path,
                "files": stat.files,
                "added": stat.added,
                "removed": stat.removed,
                "diff": text,
            }
        )
        return 0

    if args.stat:
        formatter.text(f"{stat.files} files changed, {stat.added} insertions(+), {stat.removed} deletions(-)")
        return 0
    if args.plain:
        formatter.text(text.rstrip("\n"))
        return 0

    if not lines:
        return 0
    cfg = DiffConfig(repo_root=runner.working_dir)
    formatter.rich(render_diff(lines, cfg.styles, line_numbers=cfg.line_numbers))
    return 0
