"""
Gleam commit command.

SUMMARY: Commit staged changes with a summary and optional description
"""

from __future__ import annotations

import argparse

from gleam.cli import OutputFormatter, add_standard_flags, get_runner
from gleam.core.commit import CommitDraft, commit_draft
from gleam.core.exceptions import CommitDraftError, GleamError

SUMMARY = "Commit staged changes with a summary and optional description"


def register_args(parser: argparse.ArgumentParser) -> None:
    """Register command-specific arguments."""
    parser.add_argument(
        "--summary",
        "-s",
        default="",
        help="Summary line (required)",
    )
    parser.add_argument(
        "--description",
        "-d",
        default="",
        help="Longer description, separated from the summary by a blank line",
    )
    add_standard_flags(parser)


def main(args: argparse.Namespace) -> int:
    formatter = OutputFormatter(json_mode=getattr(args, "json", False))
    draft = CommitDraft(summary=args.summary, description=args.description)

    try:
        message = commit_draft(get_runner(args), draft)
    except CommitDraftError as e:
        formatter.error(e, error_code="commit_summary_required")
        return 1
    except GleamError as e:
        formatter.error(e, error_code="git_commit_error")
        return 1

    formatter.success({"message": message}, f"Committed: {draft.summary.strip()}")
    return 0
