"""Shared CLI utility functions."""
from __future__ import annotations

import argparse
from pathlib import Path

from gleam.core.config import ConfigManager
from gleam.core.git import RepositoryCommandRunner
from gleam.core.utils.paths import resolve_project_root


def get_repo_root(args: argparse.Namespace) -> Path:
    """Get repository root from ``--repo-root`` or auto-detect."""
    if getattr(args, "repo_root", None):
        return Path(args.repo_root).expanduser().resolve()
    return resolve_project_root()


def get_runner(args: argparse.Namespace) -> RepositoryCommandRunner:
    """Build a configured runner for the repository selected by ``args``.

    Raises:
        ConfigValidationError: If the merged configuration is invalid
    """
    root = get_repo_root(args)
    ConfigManager(repo_root=root).load_config(validate=True)
    return RepositoryCommandRunner.from_config(root)


__all__ = ["get_repo_root", "get_runner"]
