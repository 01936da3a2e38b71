"""
Gleam - a small Git client

Gleam shows staged and unstaged changes, highlights diffs and composes
commits, delegating every repository operation to the ``git`` executable.
"""

__version__ = "1.0.0"
__all__ = ["__version__"]
