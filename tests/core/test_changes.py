from __future__ import annotations

from pathlib import Path

import pytest

from gleam.core.background import BackgroundRunner
from gleam.core.changes import ChangeList, FileChange
from gleam.core.exceptions import GitError
from gleam.core.git import RepositoryCommandRunner


@pytest.mark.requires_git
class TestChangeListRefresh:
    def test_entries_list_staged_before_unstaged(self, git_repo: Path) -> None:
        (git_repo / "staged.txt").write_text("s\n", encoding="utf-8")
        (git_repo / "unstaged.txt").write_text("u\n", encoding="utf-8")
        runner = RepositoryCommandRunner.create(git_repo)
        runner.stage_file("staged.txt")

        changes = ChangeList()
        changes.refresh(runner)

        assert changes.staged == ["staged.txt"]
        assert changes.unstaged == ["unstaged.txt"]
        assert len(changes) == 2
        assert changes.entries() == [
            FileChange("staged.txt", staged=True),
            FileChange("unstaged.txt", staged=False),
        ]

    def test_failed_refresh_keeps_previous_lists(self, git_repo: Path) -> None:
        (git_repo / "new.txt").write_text("n\n", encoding="utf-8")
        changes = ChangeList()
        changes.refresh(RepositoryCommandRunner.create(git_repo))

        broken = RepositoryCommandRunner(git_repo, git_binary="gleam-missing-git")
        with pytest.raises(GitError):
            changes.refresh(broken)

        assert changes.unstaged == ["new.txt"]

    def test_refresh_async_delivers_through_callback(self, git_repo: Path) -> None:
        (git_repo / "new.txt").write_text("n\n", encoding="utf-8")
        changes = ChangeList()
        seen = []

        with BackgroundRunner(max_workers=1) as background:
            future = changes.refresh_async(
                RepositoryCommandRunner.create(git_repo),
                background,
                on_done=lambda f: seen.append(f.exception()),
            )
            future.result(timeout=30)

        assert seen == [None]
        assert changes.unstaged == ["new.txt"]


class TestInclusion:
    def _populated(self) -> ChangeList:
        changes = ChangeList()
        changes._staged = ["a.txt"]
        changes._unstaged = ["b.txt", "c.txt"]
        return changes

    def test_everything_included_by_default(self) -> None:
        changes = self._populated()
        assert changes.included_paths() == ["a.txt", "b.txt", "c.txt"]

    def test_exclude_and_reinclude(self) -> None:
        changes = self._populated()

        changes.set_included("b.txt", False)
        assert changes.is_included("b.txt") is False
        assert changes.included_paths() == ["a.txt", "c.txt"]
        assert FileChange("b.txt", staged=False, included=False) in changes.entries()

        changes.set_included("b.txt", True)
        assert changes.included_paths() == ["a.txt", "b.txt", "c.txt"]

    def test_lists_are_copies(self) -> None:
        changes = self._populated()
        changes.staged.append("zzz")
        assert changes.staged == ["a.txt"]

    def test_new_list_is_empty(self) -> None:
        changes = ChangeList()
        assert len(changes) == 0
        assert changes.entries() == []
