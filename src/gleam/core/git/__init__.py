"""
Git operations package for Gleam core.

Keeps all knowledge of git subcommands and their output format in one
place so higher-level modules never build argv lists themselves.
"""
from __future__ import annotations

from .runner import RepositoryCommandRunner, split_file_list

__all__ = ["RepositoryCommandRunner", "split_file_list"]
