"""Shared helpers: process invocation, YAML I/O, dict merging, path resolution."""
from __future__ import annotations

from .io import iter_yaml_files, read_yaml
from .merge import deep_merge
from .paths import get_project_config_dir, get_user_config_dir, resolve_project_root
from .subprocess import run_git_command

__all__ = [
    "deep_merge",
    "get_project_config_dir",
    "get_user_config_dir",
    "iter_yaml_files",
    "read_yaml",
    "resolve_project_root",
    "run_git_command",
]
