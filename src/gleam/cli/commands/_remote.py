"""Shared implementation of the push, pull and fetch commands."""
from __future__ import annotations

import argparse

from gleam.cli import OutputFormatter, add_standard_flags, get_runner
from gleam.core.exceptions import GleamError

_PAST_TENSE = {"push": "Pushed", "pull": "Pulled", "fetch": "Fetched"}


def register_args(parser: argparse.ArgumentParser) -> None:
    add_standard_flags(parser)


def run_remote_operation(args: argparse.Namespace, operation: str) -> int:
    """Run ``runner.<operation>()`` and report the outcome."""
    formatter = OutputFormatter(json_mode=getattr(args, "json", False))

    try:
        runner = get_runner(args)
        getattr(runner, operation)()
    except GleamError as e:
        formatter.error(e, error_code=f"git_{operation}_error")
        return 1

    formatter.success({"operation": operation}, _PAST_TENSE[operation])
    return 0
