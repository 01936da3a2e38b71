"""Layered YAML configuration for Gleam.

Usage:
    from gleam.core.config import ConfigManager
    from gleam.core.config.domains import GitConfig, TimeoutsConfig
"""
from __future__ import annotations

from .base import BaseDomainConfig
from .cache import clear_all_caches, get_cached_config
from .manager import ConfigManager

__all__ = [
    "BaseDomainConfig",
    "ConfigManager",
    "clear_all_caches",
    "get_cached_config",
]
