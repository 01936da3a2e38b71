from __future__ import annotations

import os
import shutil
import stat
import time
from pathlib import Path

import pytest

from gleam.core.exceptions import GitCommandError, GitLaunchError, GitTimeoutError
from gleam.core.utils.paths import PROJECT_ROOT_ENV, resolve_project_root
from gleam.core.utils.subprocess import run_git_command


@pytest.mark.requires_git
class TestRunGitCommand:
    def test_returns_stdout(self, isolated_project_env: Path) -> None:
        out = run_git_command(["--version"], cwd=isolated_project_env)
        assert out.startswith("git version")

    def test_nonzero_exit_carries_returncode_and_argv(self, isolated_project_env: Path) -> None:
        with pytest.raises(GitCommandError) as exc_info:
            run_git_command(["no-such-subcommand"], cwd=isolated_project_env)

        err = exc_info.value
        assert err.returncode != 0
        assert err.argv == ["git", "no-such-subcommand"]
        assert err.to_json_error()["code"] == "GitCommandError"
        assert err.context["returncode"] == err.returncode

    def test_missing_executable(self, isolated_project_env: Path) -> None:
        with pytest.raises(GitLaunchError) as exc_info:
            run_git_command(["status"], cwd=isolated_project_env, git_binary="gleam-missing-git")
        assert exc_info.value.argv == ["gleam-missing-git", "status"]

    def test_error_message_names_the_command(self, isolated_project_env: Path) -> None:
        with pytest.raises(GitCommandError) as exc_info:
            run_git_command(["rev-parse", "--verify", "no-such-ref"], cwd=isolated_project_env)
        assert "git rev-parse --verify no-such-ref" in str(exc_info.value)


@pytest.mark.skipif(os.name != "posix", reason="uses a shell script as the git binary")
def test_timeout_terminates_process(tmp_path: Path) -> None:
    fake_git = tmp_path / "slow-git"
    fake_git.write_text("#!/bin/sh\nsleep 30\n", encoding="utf-8")
    fake_git.chmod(fake_git.stat().st_mode | stat.S_IXUSR)

    start = time.monotonic()
    with pytest.raises(GitTimeoutError) as exc_info:
        run_git_command(["status"], cwd=tmp_path, git_binary=str(fake_git), timeout=0.5)

    assert time.monotonic() - start < 10
    assert exc_info.value.context["timeout"] == 0.5


class TestResolveProjectRoot:
    def test_env_var_wins(self, isolated_project_env: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        target = isolated_project_env / "elsewhere"
        target.mkdir()
        monkeypatch.setenv(PROJECT_ROOT_ENV, str(target))

        assert resolve_project_root() == target.resolve()

    @pytest.mark.requires_git
    def test_git_toplevel_from_subdirectory(self, git_repo: Path) -> None:
        sub = git_repo / "a" / "b"
        sub.mkdir(parents=True)

        assert resolve_project_root(sub) == git_repo.resolve()

    def test_falls_back_to_start(self, isolated_project_env: Path) -> None:
        plain = isolated_project_env / "plain"
        plain.mkdir()

        assert resolve_project_root(plain) == plain.resolve()


@pytest.mark.skipif(os.name != "posix" or shutil.which("setsid") is None, reason="needs setsid")
def test_timeout_with_detached_grandchild_holding_stdout(tmp_path: Path) -> None:
    fake_git = tmp_path / "forking-git"
    fake_git.write_text("#!/bin/sh\nsetsid sleep 30 &\nsleep 30\n", encoding="utf-8")
    fake_git.chmod(fake_git.stat().st_mode | stat.S_IXUSR)

    start = time.monotonic()
    with pytest.raises(GitTimeoutError):
        run_git_command(["status"], cwd=tmp_path, git_binary=str(fake_git), timeout=0.5)

    assert time.monotonic() - start < 10
