"""
Gleam configuration management (layered YAML).
"""
from __future__ import annotations

import json
import logging
import os
import re
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional, Tuple

import jsonschema
import yaml

from gleam.core.exceptions import ConfigValidationError
from gleam.core.utils.io import iter_yaml_files, read_yaml
from gleam.core.utils.merge import deep_merge
from gleam.core.utils.paths import (
    get_project_config_dir,
    get_user_config_dir,
    resolve_project_root,
)
from gleam.data import get_data_path
from gleam.data import read_yaml as read_bundled_yaml

logger = logging.getLogger(__name__)

ENV_PREFIX = "GLEAM_"
# Environment variables sharing the prefix that are not config overrides.
_RESERVED_ENV_KEYS = {"PROJECT_ROOT"}


def default_config_dirs(repo_root: Path) -> List[Path]:
    """Return the config directories for ``repo_root``, lowest precedence first."""
    project_root_dir = get_project_config_dir(repo_root)
    user_root_dir = get_user_config_dir()
    return [
        get_data_path("config"),
        user_root_dir / "config",
        project_root_dir / "config",
        project_root_dir / "config.local",
    ]


class ConfigManager:
    """Load, merge, and validate Gleam configuration.

    Configuration sources (highest to lowest priority):
    1. Environment variables: GLEAM_<section>__<key>
    2. Project-local config: <repo>/.gleam/config.local/*.yaml (uncommitted)
    3. Project config: <repo>/.gleam/config/*.yaml
    4. User config: ~/.gleam/config/*.yaml
    5. Bundled defaults: gleam.data/config/*.yaml

    Files inside one directory merge in alphabetical order.
    """

    SCHEMA_FILE = "config.schema.yaml"

    def __init__(self, repo_root: Optional[Path] = None) -> None:
        self.repo_root = Path(repo_root) if repo_root is not None else resolve_project_root()
        (
            self.core_config_dir,
            self.user_config_dir,
            self.project_config_dir,
            self.project_local_config_dir,
        ) = default_config_dirs(self.repo_root)

    def config_dirs(self) -> List[Path]:
        """Return config directories in low-to-high precedence order."""
        return [
            self.core_config_dir,
            self.user_config_dir,
            self.project_config_dir,
            self.project_local_config_dir,
        ]

    # ========== Environment overrides ==========

    def _coerce_type(self, value: str) -> Any:
        s = value.strip()
        low = s.lower()
        if low in {"true", "false"}:
            return low == "true"
        if low in {"null", "none", "~"}:
            return None
        if re.fullmatch(r"[-+]?\d+", s):
            return int(s)
        if re.fullmatch(r"[-+]?\d*\.\d+", s) or re.fullmatch(r"[-+]?\d+\.\d*", s):
            return float(s)
        if (s.startswith("{") and s.endswith("}")) or (s.startswith("[") and s.endswith("]")):
            try:
                return json.loads(s)
            except json.JSONDecodeError:
                return s
        return s

    def _parse_env_key(self, raw: str) -> List[str]:
        segs = raw.split("__") if "__" in raw else raw.split("_")
        if any(seg == "" for seg in segs):
            logger.warning("Ignoring malformed %s* key: %s", ENV_PREFIX, raw)
            return []
        return [seg.lower() for seg in segs]

    def iter_env_overrides(self) -> Iterator[Tuple[List[str], Any]]:
        for key in sorted(os.environ.keys()):
            if not key.startswith(ENV_PREFIX):
                continue
            raw = key[len(ENV_PREFIX):]
            if not raw or raw in _RESERVED_ENV_KEYS:
                continue
            path = self._parse_env_key(raw)
            if path:
                yield path, self._coerce_type(os.environ[key])

    def apply_env_overrides(self, cfg: Dict[str, Any]) -> None:
        for path, value in self.iter_env_overrides():
            cur = cfg
            for part in path[:-1]:
                nxt = cur.get(part)
                if not isinstance(nxt, dict):
                    nxt = {}
                    cur[part] = nxt
                cur = nxt
            cur[path[-1]] = value

    # ========== Loading ==========

    def _load_directory(self, directory: Path, cfg: Dict[str, Any]) -> Dict[str, Any]:
        for path in iter_yaml_files(directory):
            # Fail closed: configuration must never silently ignore invalid YAML.
            try:
                data = read_yaml(path, default={}, raise_on_error=True)
            except yaml.YAMLError as exc:
                raise ConfigValidationError(
                    f"Invalid YAML in {path}: {exc}",
                    context={"path": str(path)},
                ) from exc
            if not isinstance(data, dict):
                raise ConfigValidationError(
                    f"Config file must contain a mapping: {path}",
                    context={"path": str(path)},
                )
            cfg = deep_merge(cfg, data)
        return cfg

    def validate_schema(self, config: Dict[str, Any]) -> None:
        schema = read_bundled_yaml("schemas", self.SCHEMA_FILE)
        validator = jsonschema.Draft202012Validator(schema)
        errors = sorted(validator.iter_errors(config), key=lambda e: [str(p) for p in e.path])
        if errors:
            first = errors[0]
            location = ".".join(str(p) for p in first.path) or "<root>"
            raise ConfigValidationError(
                f"Invalid configuration at {location}: {first.message}",
                context={"path": location, "errors": len(errors)},
            )

    def _load_config_uncached(self, validate: bool = True) -> Dict[str, Any]:
        """Load and merge configuration from every layer (UNCACHED)."""
        cfg: Dict[str, Any] = {}
        for directory in self.config_dirs():
            cfg = self._load_directory(directory, cfg)
        self.apply_env_overrides(cfg)
        if validate:
            self.validate_schema(cfg)
        return cfg

    def load_config(self, validate: bool = True) -> Dict[str, Any]:
        """Load configuration using the centralized cache.

        The returned dict is shared between callers and must be treated as
        immutable.
        """
        from .cache import get_cached_config

        if self.config_dirs() != default_config_dirs(self.repo_root):
            # Directory attributes were overridden on this instance; the shared
            # cache would ignore them.
            return self._load_config_uncached(validate=validate)
        cfg = get_cached_config(repo_root=self.repo_root)
        if validate:
            self.validate_schema(cfg)
        return cfg

    def get(self, key: str, default: Any = None) -> Any:
        """Get a config value by dot-notation key.

        Example:
            >>> manager.get('git.binary')
            'git'
            >>> manager.get('nonexistent.key', 'fallback')
            'fallback'
        """
        current: Any = self.load_config(validate=False)
        for part in key.split("."):
            if isinstance(current, dict) and part in current:
                current = current[part]
            else:
                return default
        return current


__all__ = ["ConfigManager", "default_config_dirs"]
