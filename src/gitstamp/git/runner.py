"""Execution of external commands on behalf of the git inspector."""

from __future__ import annotations

import logging
import os
import subprocess
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
	from collections.abc import Mapping, Sequence
	from pathlib import Path

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CommandResult:
	"""Exit code and raw standard output of a finished command."""

	exit_code: int
	stdout: str


class CommandRunner(Protocol):
	"""Capability to run an external command and capture its stdout."""

	def execute(
		self,
		cwd: Path | None,
		executable: str,
		args: Sequence[str],
		env: Mapping[str, str] | None = None,
	) -> CommandResult:
		"""Run ``executable`` with ``args`` in ``cwd`` and return its result."""
		...


class SubprocessRunner:
	"""Command runner backed by :func:`subprocess.run`."""

	def execute(
		self,
		cwd: Path | None,
		executable: str,
		args: Sequence[str],
		env: Mapping[str, str] | None = None,
	) -> CommandResult:
		"""
		Run a command and block until it exits.

		Args:
			cwd: Working directory for the command (None for the current one)
			executable: Program to run, looked up on PATH
			args: Arguments passed to the program
			env: Environment overrides layered over the current environment

		Returns:
			CommandResult with the exit code and undecoded-error-tolerant stdout

		Raises:
			OSError: If the executable cannot be started

		"""
		full_env = None
		if env:
			full_env = {**os.environ, **env}

		# Arguments are passed as a list without a shell, nothing is interpolated
		result = subprocess.run(  # noqa: S603
			[executable, *args],
			cwd=cwd,
			env=full_env,
			stdin=subprocess.DEVNULL,
			capture_output=True,
			text=True,
			errors="replace",
			check=False,
		)
		return CommandResult(exit_code=result.returncode, stdout=result.stdout or "")


def run_command(
	runner: CommandRunner,
	cwd: Path | None,
	executable: str,
	args: Sequence[str],
	env: Mapping[str, str] | None = None,
) -> str | None:
	"""
	Run a command and return its trimmed output.

	An empty string means the command succeeded without printing anything,
	None means it failed to start or exited non-zero.

	"""
	try:
		result = runner.execute(cwd, executable, args, env)
	except (OSError, subprocess.SubprocessError):
		logger.debug("Command %s %s could not be run", executable, " ".join(args), exc_info=True)
		return None

	if result.exit_code != 0:
		logger.debug("Command %s %s exited with %d", executable, " ".join(args), result.exit_code)
		return None
	return result.stdout.strip()
