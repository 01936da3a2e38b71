"""Domain-specific configuration for Gleam's stdlib logging.

This config controls whether log records are written to a file, at which
level, and where the file lives.
"""

from __future__ import annotations

from functools import cached_property
from pathlib import Path

from ..base import BaseDomainConfig


class LoggingConfig(BaseDomainConfig):
    def _config_section(self) -> str:
        return "logging"

    @cached_property
    def enabled(self) -> bool:
        return bool(self.section.get("enabled", False))

    @cached_property
    def level(self) -> str:
        return str(self.section.get("level", "INFO") or "INFO")

    @cached_property
    def path_template(self) -> str:
        return str(self.section.get("path", "") or "")

    def resolve_log_path(self) -> Path | None:
        """Return the absolute log file path, or None when no path is configured.

        Relative paths resolve against the repository root.
        """
        raw = self.path_template.strip()
        if not raw:
            return None
        path = Path(raw).expanduser()
        if not path.is_absolute():
            path = self.repo_root / path
        return path


__all__ = ["LoggingConfig"]
