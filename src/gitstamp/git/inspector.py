"""Git commands needed to work out the version of a worktree."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

from gitstamp.config import DEFAULT_CONFIG
from gitstamp.errors import GitNotFoundError
from gitstamp.git.runner import SubprocessRunner, run_command

if TYPE_CHECKING:
	from collections.abc import Mapping

	from gitstamp.git.runner import CommandRunner

logger = logging.getLogger(__name__)

DEFAULT_TEST_USER_EMAIL = DEFAULT_CONFIG["git"]["test_user_email"]
DEFAULT_TEST_USER_NAME = DEFAULT_CONFIG["git"]["test_user_name"]


class GitInspector:
	"""
	Read-only view of a git worktree through the git command line.

	Every query returns None when git cannot answer it. The only error
	raised is GitNotFoundError, at construction, when git itself is not
	runnable.

	"""

	def __init__(
		self,
		worktree: Path,
		runner: CommandRunner | None = None,
		*,
		executable: str = "git",
		testing: bool = False,
		test_user_email: str = DEFAULT_TEST_USER_EMAIL,
		test_user_name: str = DEFAULT_TEST_USER_NAME,
	) -> None:
		"""
		Initialize the inspector for a worktree.

		Args:
			worktree: Directory containing the ``.git`` entry
			runner: Command runner to use (defaults to a subprocess runner)
			executable: Name or path of the git executable
			testing: Configure a placeholder identity if none is set
			test_user_email: Email used for the placeholder identity
			test_user_name: Name used for the placeholder identity

		Raises:
			GitNotFoundError: If git cannot be invoked

		"""
		self.runner = runner or SubprocessRunner()
		self.executable = executable
		if not self._git_command_exists():
			msg = f"Git not found: '{executable} version' could not be run"
			raise GitNotFoundError(msg)

		self.worktree = Path(worktree)
		if testing and not self._is_user_set():
			self._set_git_user(test_user_email, test_user_name)

	@classmethod
	def from_git_dir(cls, git_dir: Path, runner: CommandRunner | None = None, **kwargs: Any) -> GitInspector:
		"""Create an inspector for the worktree owning ``git_dir``."""
		return cls(Path(git_dir).parent, runner, **kwargs)

	def run_git_command(self, *args: str, env: Mapping[str, str] | None = None) -> str | None:
		"""Run a git command in the worktree, returning None if it fails."""
		return run_command(self.runner, self.worktree, self.executable, args, env)

	def _git_command_exists(self) -> bool:
		output = run_command(self.runner, None, self.executable, ["version"])
		if output is None:
			logger.debug("Native git command not found")
			return False
		logger.debug("Using %s", output)
		return True

	def _is_user_set(self) -> bool:
		return bool(self.run_git_command("config", "user.email"))

	def _set_git_user(self, email: str, name: str) -> None:
		# Repository-local so the developer's global identity is never touched
		logger.info("No git identity configured, using placeholder %s", email)
		self.run_git_command("config", "user.email", email)
		self.run_git_command("config", "user.name", name)

	def current_branch(self) -> str | None:
		"""
		Get the name of the checked out branch.

		Returns:
			Branch name, or None on a detached HEAD or if git fails

		"""
		return self.run_git_command("branch", "--show-current") or None

	def current_full_hash(self) -> str | None:
		"""Get the full hash of HEAD, or None if there are no commits."""
		return self.run_git_command("rev-parse", "HEAD") or None

	def is_clean(self) -> bool | None:
		"""
		Check whether the worktree has uncommitted changes.

		Returns:
			True if clean, False if dirty, None if git could not tell

		"""
		status = self.run_git_command("status", "--porcelain")
		if status is None:
			return None
		return not status

	def describe(self, prefix: str = "") -> str | None:
		"""
		Describe HEAD relative to the nearest first-parent tag starting with ``prefix``.

		Prints ``<tag>-<distance>-g<hash>`` when a tag matches, even at
		distance 0, and falls back to the abbreviated hash when none does.

		Args:
			prefix: Tags must start with this string to be considered

		Returns:
			Output of ``git describe``, or None if it fails or is empty

		"""
		return (
			self.run_git_command(
				"describe",
				"--tags",
				"--always",
				"--long",
				"--first-parent",
				"--abbrev=7",
				f"--match={prefix}*",
				"HEAD",
			)
			or None
		)
