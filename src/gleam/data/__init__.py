"""
Gleam data resource helpers.

Provides access to bundled configuration defaults and schemas using
importlib.resources.
"""

from __future__ import annotations

from functools import lru_cache
from importlib import resources
from pathlib import Path
from typing import Any

import yaml


def get_data_path(subpackage: str, filename: str = "") -> Path:
    """
    Get absolute path to a data file or directory.

    Args:
        subpackage: Name of the data directory (e.g., "config", "schemas")
        filename: Optional filename within the directory

    Returns:
        Absolute path to the file or directory

    Example:
        >>> get_data_path("config", "git.yaml")
        PosixPath('/path/to/gleam/data/config/git.yaml')
    """
    pkg = resources.files("gleam.data")
    base = Path(str(pkg / subpackage))
    return base / filename if filename else base


@lru_cache(maxsize=16)
def read_yaml(subpackage: str, filename: str) -> dict[str, Any]:
    """Read a bundled YAML file (cached; treat the result as immutable)."""
    path = get_data_path(subpackage, filename)
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)
    return data or {}


__all__ = ["get_data_path", "read_yaml"]
