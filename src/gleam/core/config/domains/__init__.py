"""Domain-specific configuration accessors.

Each accessor wraps one top-level section of the merged configuration.
"""
from __future__ import annotations

from .diff import DiffConfig
from .git import GitConfig
from .logging import LoggingConfig
from .refresh import RefreshConfig
from .timeouts import TimeoutsConfig

__all__ = [
    "DiffConfig",
    "GitConfig",
    "LoggingConfig",
    "RefreshConfig",
    "TimeoutsConfig",
]
