"""Locating the root of a git repository from one of its subdirectories."""

from __future__ import annotations

import logging
from pathlib import Path

from gitstamp.errors import RepositoryNotFoundError

logger = logging.getLogger(__name__)

GIT_DIR_NAME = ".git"


def find_git_dir(start: Path) -> Path:
	"""
	Walk upwards from ``start`` looking for a ``.git`` entry.

	Args:
		start: Directory to start searching from

	Returns:
		Path of the first ``.git`` entry found, or the non-existent
		candidate at the filesystem root when none is found

	"""
	current = Path(start).resolve()
	visited: set[Path] = set()

	while True:
		git_dir = current / GIT_DIR_NAME
		if git_dir.exists():
			return git_dir

		parent = current.parent
		# Path("/").parent is Path("/"), so stop once we stop moving
		if parent == current or parent in visited:
			return git_dir

		visited.add(current)
		current = parent


def find_repo_root(start: Path) -> Path:
	"""
	Get the root directory of the repository containing ``start``.

	Args:
		start: Directory inside the repository

	Returns:
		Directory holding the ``.git`` entry

	Raises:
		RepositoryNotFoundError: If no ``.git`` entry exists above ``start``

	"""
	git_dir = find_git_dir(start)
	if not git_dir.exists():
		msg = f"Cannot find '{GIT_DIR_NAME}' directory above {start}"
		raise RepositoryNotFoundError(msg)

	logger.debug("Found repository root %s for %s", git_dir.parent, start)
	return git_dir.parent
