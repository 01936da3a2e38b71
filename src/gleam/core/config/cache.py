"""Centralized configuration caching.

Provides a single source of truth for loaded configuration across all domain
configs. Domain configs use this module instead of implementing their own
caches.
"""
from __future__ import annotations

import hashlib
import os
from pathlib import Path
from typing import Any, Dict, Optional

from gleam.core.utils.io import iter_yaml_files
from gleam.core.utils.paths import resolve_project_root

_config_cache: Dict[str, Dict[str, Any]] = {}


def _normalize_repo_root(repo_root: Optional[Path]) -> Path:
    if repo_root is None:
        return resolve_project_root()
    return Path(repo_root).expanduser().resolve()


def _cache_key(repo_root: Path) -> str:
    """Build a cache key from the root, GLEAM_* env vars and config file mtimes.

    Tests and long-running processes may change env vars or rewrite config
    files after the first load; both are part of the key so the cache never
    returns stale config.
    """
    from .manager import default_config_dirs

    env_items = sorted(
        (k, os.environ.get(k, ""))
        for k in os.environ.keys()
        if k.startswith("GLEAM_")
    )
    env_fp = hashlib.sha256(repr(env_items).encode("utf-8")).hexdigest()[:12]

    files: list[tuple[str, int, int]] = []
    for directory in default_config_dirs(repo_root):
        for p in iter_yaml_files(directory):
            try:
                st = p.stat()
                files.append((str(p), int(st.st_mtime_ns), int(st.st_size)))
            except OSError:
                files.append((str(p), 0, 0))
    cfg_fp = hashlib.sha256(repr(files).encode("utf-8")).hexdigest()[:12]

    return f"{repo_root}:env={env_fp}:cfg={cfg_fp}"


def get_cached_config(repo_root: Optional[Path] = None) -> Dict[str, Any]:
    """Get merged (unvalidated) configuration with caching.

    Args:
        repo_root: Repository root path. Uses auto-detection if None.

    Returns:
        Configuration dictionary (cached; treat as immutable).
    """
    from .manager import ConfigManager

    normalized_root = _normalize_repo_root(repo_root)
    key = _cache_key(normalized_root)
    if key not in _config_cache:
        manager = ConfigManager(repo_root=normalized_root)
        # Call the uncached loader to avoid recursion.
        _config_cache[key] = manager._load_config_uncached(validate=False)
    return _config_cache[key]


def clear_all_caches() -> None:
    """Clear all configuration caches."""
    _config_cache.clear()


def is_cached(repo_root: Optional[Path] = None) -> bool:
    """Check if config for repo_root is cached."""
    return _cache_key(_normalize_repo_root(repo_root)) in _config_cache


__all__ = [
    "get_cached_config",
    "clear_all_caches",
    "is_cached",
]
