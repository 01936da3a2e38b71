"""Change list: staged and unstaged files with include checkboxes.

The list caches the last result of the runner's file queries so a view can
read it repeatedly while a background refresh replaces it.
"""
from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Any, Callable, List, Optional, Set

from gleam.core.background import BackgroundRunner, CancellationToken
from gleam.core.exceptions import GitError
from gleam.core.git.runner import RepositoryCommandRunner

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FileChange:
    path: str
    staged: bool
    included: bool = True


class ChangeList:
    """Thread-safe cache of staged and unstaged paths."""

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._staged: List[str] = []
        self._unstaged: List[str] = []
        self._excluded: Set[str] = set()

    @property
    def staged(self) -> List[str]:
        with self._lock:
            return list(self._staged)

    @property
    def unstaged(self) -> List[str]:
        with self._lock:
            return list(self._unstaged)

    def __len__(self) -> int:
        with self._lock:
            return len(self._staged) + len(self._unstaged)

    def refresh(self, runner: RepositoryCommandRunner) -> None:
        """Re-query both lists from git.

        Both queries always run. A failed query keeps the previous list for
        that side; the first failure is re-raised once both have run.
        """
        error: Optional[GitError] = None

        try:
            staged: Optional[List[str]] = runner.get_staged_files()
        except GitError as exc:
            logger.error("Error getting staged files: %s", exc)
            staged, error = None, exc

        try:
            unstaged: Optional[List[str]] = runner.get_unstaged_files()
        except GitError as exc:
            logger.error("Error getting unstaged files: %s", exc)
            unstaged = None
            error = error or exc

        with self._lock:
            if staged is not None:
                self._staged = staged
            if unstaged is not None:
                self._unstaged = unstaged
            logger.debug(
                "Change list refreshed: %d staged, %d unstaged",
                len(self._staged),
                len(self._unstaged),
            )

        if error is not None:
            raise error

    def refresh_async(
        self,
        runner: RepositoryCommandRunner,
        background: BackgroundRunner,
        on_done: Optional[Callable[[Any], None]] = None,
        token: Optional[CancellationToken] = None,
    ) -> Any:
        """Submit :meth:`refresh` to ``background`` and return its future."""
        return background.submit(self.refresh, runner, on_done=on_done, token=token)

    def entries(self) -> List[FileChange]:
        """Return staged entries followed by unstaged entries."""
        with self._lock:
            out = [FileChange(p, True, p not in self._excluded) for p in self._staged]
            out.extend(FileChange(p, False, p not in self._excluded) for p in self._unstaged)
            return out

    def set_included(self, path: str, included: bool) -> None:
        with self._lock:
            if included:
                self._excluded.discard(path)
            else:
                self._excluded.add(path)

    def is_included(self, path: str) -> bool:
        with self._lock:
            return path not in self._excluded

    def included_paths(self) -> List[str]:
        return [entry.path for entry in self.entries() if entry.included]


__all__ = ["ChangeList", "FileChange"]
