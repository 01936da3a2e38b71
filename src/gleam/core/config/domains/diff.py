"""Domain-specific configuration for diff rendering."""
from __future__ import annotations

from functools import cached_property
from typing import Dict

from ..base import BaseDomainConfig


class DiffConfig(BaseDomainConfig):
    def _config_section(self) -> str:
        return "diff"

    @cached_property
    def line_numbers(self) -> bool:
        return bool(self.section.get("line_numbers", True))

    @cached_property
    def styles(self) -> Dict[str, str]:
        """rich style string per diff line kind (``added``, ``removed``, ...)."""
        raw = self.section.get("styles") or {}
        if not isinstance(raw, dict):
            return {}
        return {str(k): str(v or "") for k, v in raw.items()}


__all__ = ["DiffConfig"]
