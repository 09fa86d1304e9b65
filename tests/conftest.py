"""Global test fixtures and configuration."""

from __future__ import annotations

from pathlib import Path

import pytest

from gitstamp.utils.config_loader import ConfigLoader
from gitstamp.version.cache import ResolutionCache
from tests.helpers import git


@pytest.fixture(autouse=True)
def reset_singletons() -> None:
	"""Make sure every test starts without a shared cache or loaded config."""
	ResolutionCache._shared_instance = None
	ConfigLoader._instance = None
	yield
	ResolutionCache._shared_instance = None
	ConfigLoader._instance = None


@pytest.fixture
def isolated_git_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
	"""Point git at an empty home so user and system config cannot leak in."""
	home = tmp_path / "home"
	home.mkdir()
	monkeypatch.setenv("HOME", str(home))
	monkeypatch.setenv("XDG_CONFIG_HOME", str(home / ".config"))
	monkeypatch.setenv("GIT_CONFIG_NOSYSTEM", "1")
	monkeypatch.setenv("GIT_AUTHOR_NAME", "Test Author")
	monkeypatch.setenv("GIT_AUTHOR_EMAIL", "author@example.com")
	monkeypatch.setenv("GIT_COMMITTER_NAME", "Test Author")
	monkeypatch.setenv("GIT_COMMITTER_EMAIL", "author@example.com")
	for name in ("GIT_DIR", "GIT_WORK_TREE", "GIT_INDEX_FILE"):
		monkeypatch.delenv(name, raising=False)
	return home


@pytest.fixture
def git_repo(tmp_path: Path, isolated_git_env: Path) -> Path:
	"""Create an empty git repository on branch main."""
	repo = tmp_path / "repo"
	repo.mkdir()
	git(repo, "init", "-q")
	git(repo, "symbolic-ref", "HEAD", "refs/heads/main")
	return repo
