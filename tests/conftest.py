import shutil
import sys
from pathlib import Path

import pytest

# Keep the repository free of Python bytecode and __pycache__ artifacts during tests.
sys.dont_write_bytecode = True

TESTS_ROOT = Path(__file__).resolve().parent
REPO_ROOT = TESTS_ROOT.parent
SRC_ROOT = REPO_ROOT / "src"

# Make src/ importable as 'gleam' and tests/ importable for 'helpers'
for p in (SRC_ROOT, TESTS_ROOT):
    if str(p) not in sys.path:
        sys.path.insert(0, str(p))


from gleam.core.config import clear_all_caches
from gleam.core.logging_setup import reset_stdlib_logging_for_tests
from helpers.git_helpers import git_commit_all, git_init

# GLEAM_* variables a developer shell may export; any of them would leak
# into config loading or root resolution.
_LEAK_PRONE_ENV_KEYS = [
    "GLEAM_PROJECT_ROOT",
    "GLEAM_paths__project_config_dir",
    "GLEAM_paths__user_config_dir",
]


def pytest_collection_modifyitems(config, items):
    """Skip git-backed tests if git is not available."""
    if shutil.which("git") is not None:
        return
    skip = pytest.mark.skip(reason="git not found on PATH")
    for item in items:
        if "requires_git" in item.keywords:
            item.add_marker(skip)


@pytest.fixture(autouse=True)
def _reset_gleam_state():
    clear_all_caches()
    yield
    clear_all_caches()
    reset_stdlib_logging_for_tests()


@pytest.fixture
def isolated_project_env(tmp_path, monkeypatch):
    """
    Isolated environment for tests.

    HOME points into tmp_path so neither ~/.gitconfig nor ~/.gleam of the
    developer running the suite affects results, and git identity comes
    from environment variables.
    """
    for key in _LEAK_PRONE_ENV_KEYS:
        monkeypatch.delenv(key, raising=False)

    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("GIT_CONFIG_NOSYSTEM", "1")
    monkeypatch.setenv("GIT_CEILING_DIRECTORIES", str(tmp_path))
    monkeypatch.setenv("GIT_TERMINAL_PROMPT", "0")
    monkeypatch.setenv("GIT_AUTHOR_NAME", "Test User")
    monkeypatch.setenv("GIT_AUTHOR_EMAIL", "test@example.com")
    monkeypatch.setenv("GIT_COMMITTER_NAME", "Test User")
    monkeypatch.setenv("GIT_COMMITTER_EMAIL", "test@example.com")
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def git_repo(isolated_project_env: Path) -> Path:
    """A real git repository on ``main`` with one commit containing README.md."""
    repo = isolated_project_env / "repo"
    repo.mkdir()
    git_init(repo)
    (repo / "README.md").write_text("# test repo\n", encoding="utf-8")
    git_commit_all(repo, "Initial commit")
    return repo
