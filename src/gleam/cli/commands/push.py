"""
Gleam push command.

SUMMARY: Push local commits to the remote
"""

from __future__ import annotations

import argparse

from gleam.cli.commands._remote import register_args, run_remote_operation

SUMMARY = "Push local commits to the remote"


def main(args: argparse.Namespace) -> int:
    return run_remote_operation(args, "push")


__all__ = ["SUMMARY", "register_args", "main"]
