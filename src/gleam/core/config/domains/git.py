"""Domain-specific configuration for the git executable."""
from __future__ import annotations

from functools import cached_property

from ..base import BaseDomainConfig


class GitConfig(BaseDomainConfig):
    def _config_section(self) -> str:
        return "git"

    @cached_property
    def binary(self) -> str:
        """git executable name or path."""
        return str(self.section.get("binary") or "git")


__all__ = ["GitConfig"]
