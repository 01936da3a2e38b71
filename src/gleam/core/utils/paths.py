"""Path resolution for Gleam.

Resolution follows these principles:
- The repository root is where git commands run and where project config lives
- Project config comes from ``<repo>/.gleam/config/`` (committed) and
  ``<repo>/.gleam/config.local/`` (uncommitted)
- User config comes from ``~/.gleam/config/``
"""
from __future__ import annotations

import os
import subprocess
from pathlib import Path
from typing import Optional

PROJECT_ROOT_ENV = "GLEAM_PROJECT_ROOT"
DEFAULT_PROJECT_CONFIG_DIR = ".gleam"
DEFAULT_USER_CONFIG_DIR = ".gleam"


def resolve_project_root(start: Optional[Path | str] = None) -> Path:
    """Resolve the repository root that git commands should run against.

    Resolution priority:
    1. ``GLEAM_PROJECT_ROOT`` environment variable
    2. ``git rev-parse --show-toplevel`` from ``start`` (default: CWD)
    3. ``start`` itself, made absolute

    The literal ``git`` on PATH is used here, not ``git.binary``: config
    cannot be loaded before the root is known.

    The last step performs no validation: a directory that is not a git
    repository is returned as-is and errors surface on the first git call.
    """
    env_root = os.environ.get(PROJECT_ROOT_ENV)
    if env_root:
        return Path(env_root).expanduser().resolve()

    cwd = Path(start).expanduser().resolve() if start is not None else Path.cwd().resolve()

    # Must not depend on Gleam config: config loading needs the root first.
    try:
        result = subprocess.run(
            ["git", "rev-parse", "--show-toplevel"],
            cwd=str(cwd),
            text=True,
            capture_output=True,
            check=True,
            timeout=5,
        )
    except (OSError, subprocess.CalledProcessError, subprocess.TimeoutExpired):
        return cwd

    root_str = (result.stdout or "").strip()
    if not root_str:
        return cwd
    return Path(root_str).resolve()


def get_project_config_dir(repo_root: Path, create: bool = False) -> Path:
    """Return the project-level config directory (default ``<repo>/.gleam``).

    ``GLEAM_paths__project_config_dir`` overrides the directory name; an
    absolute value is used verbatim.
    """
    name = os.environ.get("GLEAM_paths__project_config_dir") or DEFAULT_PROJECT_CONFIG_DIR
    path = Path(name).expanduser()
    if not path.is_absolute():
        path = Path(repo_root) / path
    if create:
        path.mkdir(parents=True, exist_ok=True)
    return path


def get_user_config_dir(create: bool = False) -> Path:
    """Return the user-level config directory (default ``~/.gleam``)."""
    name = os.environ.get("GLEAM_paths__user_config_dir") or DEFAULT_USER_CONFIG_DIR
    path = Path(name).expanduser()
    if not path.is_absolute():
        path = Path.home() / path
    if create:
        path.mkdir(parents=True, exist_ok=True)
    return path


__all__ = [
    "PROJECT_ROOT_ENV",
    "resolve_project_root",
    "get_project_config_dir",
    "get_user_config_dir",
]
