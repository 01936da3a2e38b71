"""Gleam core library: git runner, change list, diff model, commit composer."""
from __future__ import annotations

__all__: list[str] = []
