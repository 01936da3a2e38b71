"""Domain-specific configuration for git command timeouts.

Both buckets default to ``None``, meaning git is waited on indefinitely.
"""
from __future__ import annotations

from functools import cached_property
from typing import Optional

from ..base import BaseDomainConfig


def _seconds(value: object) -> Optional[float]:
    if value is None:
        return None
    return float(value)  # type: ignore[arg-type]


class TimeoutsConfig(BaseDomainConfig):
    """Typed, cached access to the ``timeouts`` section."""

    def _config_section(self) -> str:
        return "timeouts"

    @cached_property
    def local_seconds(self) -> Optional[float]:
        """Timeout for status, diff, add, reset and commit."""
        return _seconds(self.section.get("local_seconds"))

    @cached_property
    def network_seconds(self) -> Optional[float]:
        """Timeout for push, pull and fetch."""
        return _seconds(self.section.get("network_seconds"))


__all__ = ["TimeoutsConfig"]
