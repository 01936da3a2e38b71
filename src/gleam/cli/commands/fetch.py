"""
Gleam fetch command.

SUMMARY: Download objects and refs from the remote
"""

from __future__ import annotations

import argparse

from gleam.cli.commands._remote import register_args, run_remote_operation

SUMMARY = "Download objects and refs from the remote"


def main(args: argparse.Namespace) -> int:
    return run_remote_operation(args, "fetch")


__all__ = ["SUMMARY", "register_args", "main"]
