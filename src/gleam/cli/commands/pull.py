"""
Gleam pull command.

SUMMARY: Fetch and merge changes from the remote
"""

from __future__ import annotations

import argparse

from gleam.cli.commands._remote import register_args, run_remote_operation

SUMMARY = "Fetch and merge changes from the remote"


def main(args: argparse.Namespace) -> int:
    return run_remote_operation(args, "pull")


__all__ = ["SUMMARY", "register_args", "main"]
