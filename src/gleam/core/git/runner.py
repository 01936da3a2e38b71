"""Repository command runner: one git subcommand per operation."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Sequence

from gleam.core.utils.subprocess import run_git_command

logger = logging.getLogger(__name__)


def split_file_list(output: str) -> List[str]:
    """Parse newline-separated paths printed by git into a list.

    Surrounding whitespace is trimmed before splitting, so empty or
    whitespace-only output yields ``[]`` rather than ``[""]``.

    Paths are taken verbatim from git's human-oriented output: a filename
    containing a newline is split in two, and git may print unusual paths
    quoted (``core.quotePath``).
    """
    files = output.strip().split("\n")
    if len(files) == 1 and files[0] == "":
        return []
    return files


@dataclass(frozen=True)
class RepositoryCommandRunner:
    """Run git subcommands against a fixed working directory.

    The runner is immutable and stateless across calls. Every operation
    spawns one git process, blocks until it exits and either returns the
    parsed output or raises a :class:`~gleam.core.exceptions.GitError`.
    Nothing is validated at construction time.
    """

    working_dir: Path
    git_binary: str = "git"
    local_timeout: Optional[float] = None
    network_timeout: Optional[float] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "working_dir", Path(self.working_dir))

    @classmethod
    def create(cls, working_dir: Path | str) -> "RepositoryCommandRunner":
        """Create a runner with default settings (``git`` on PATH, no timeouts)."""
        return cls(working_dir=Path(working_dir))

    @classmethod
    def from_config(cls, working_dir: Path | str) -> "RepositoryCommandRunner":
        """Create a runner using the ``git`` and ``timeouts`` config sections."""
        from gleam.core.config.domains import GitConfig, TimeoutsConfig

        root = Path(working_dir)
        timeouts = TimeoutsConfig(repo_root=root)
        return cls(
            working_dir=root,
            git_binary=GitConfig(repo_root=root).binary,
            local_timeout=timeouts.local_seconds,
            network_timeout=timeouts.network_seconds,
        )

    def _run(self, *args: str, network: bool = False) -> str:
        return run_git_command(
            args,
            cwd=self.working_dir,
            git_binary=self.git_binary,
            timeout=self.network_timeout if network else self.local_timeout,
        )

    # ---- queries ----

    def get_diff(self) -> str:
        """Return the unified diff of all unstaged changes (``""`` when clean)."""
        return self._run("diff")

    def get_file_diff(self, path: str) -> str:
        """Return the unified diff of unstaged changes to ``path``."""
        return self._run("diff", path)

    def get_staged_files(self) -> List[str]:
        """Return paths with changes staged in the index."""
        return split_file_list(self._run("diff", "--name-only", "--cached"))

    def get_unstaged_files(self) -> List[str]:
        """Return modified tracked paths and untracked, non-ignored paths."""
        return split_file_list(
            self._run("ls-files", "--others", "--modified", "--exclude-standard")
        )

    # ---- index ----

    def stage(self, paths: Sequence[str]) -> None:
        self._run("add", *paths)

    def unstage(self, paths: Sequence[str]) -> None:
        """Move ``paths`` out of the index; an empty sequence is a no-op.

        ``git reset HEAD --`` without paths would reset the whole index.
        """
        if not paths:
            return
        self._run("reset", "HEAD", "--", *paths)

    # Aliases named after the git subcommands.
    add = stage
    reset = unstage

    def stage_file(self, path: str) -> None:
        self.stage([path])

    def unstage_file(self, path: str) -> None:
        self.unstage([path])

    # ---- history and remotes ----

    def commit(self, message: str) -> None:
        logger.info("Committing in %s", self.working_dir)
        self._run("commit", "-m", message)

    def push(self) -> None:
        self._run("push", network=True)

    def pull(self) -> None:
        self._run("pull", network=True)

    def fetch(self) -> None:
        self._run("fetch", network=True)


__all__ = ["RepositoryCommandRunner", "split_file_list"]
