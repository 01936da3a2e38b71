"""Domain-specific configuration for background refreshes."""
from __future__ import annotations

from functools import cached_property

from ..base import BaseDomainConfig


class RefreshConfig(BaseDomainConfig):
    def _config_section(self) -> str:
        return "refresh"

    @cached_property
    def max_workers(self) -> int:
        return max(1, int(self.section.get("max_workers", 2) or 1))


__all__ = ["RefreshConfig"]
