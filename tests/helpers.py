"""Shared helpers for gitstamp tests."""

from __future__ import annotations

import shutil
import subprocess
import threading
from collections.abc import Callable, Mapping, Sequence
from pathlib import Path

import pytest

from gitstamp.git.runner import CommandResult

FULL_HASH = "3f786850e387550fdab836ed7e6dc881de23001b"
FAILED = CommandResult(exit_code=128, stdout="")

requires_git = pytest.mark.skipif(shutil.which("git") is None, reason="git executable not available")

Responder = Callable[[tuple[str, ...]], CommandResult]
Response = CommandResult | BaseException | Responder


def ok(stdout: str = "") -> CommandResult:
	"""Successful command result."""
	return CommandResult(exit_code=0, stdout=stdout)


class FakeGitRunner:
	"""
	Command runner answering git commands from a table.

	Responses are looked up by the exact argument tuple first, then by the
	git subcommand (first argument). Values may be a CommandResult, an
	exception to raise, or a callable building the result from the arguments.
	Unknown commands fail with exit code 128.

	"""

	def __init__(self, responses: Mapping[str | tuple[str, ...], Response] | None = None) -> None:
		self.responses: dict[str | tuple[str, ...], Response] = {
			"version": ok("git version 2.43.0\n"),
		}
		self.responses.update(responses or {})
		self.hooks: dict[str, Callable[[tuple[str, ...]], None]] = {}
		self.calls: list[tuple[Path | None, str, tuple[str, ...], Mapping[str, str] | None]] = []
		self._lock = threading.Lock()

	def execute(
		self,
		cwd: Path | None,
		executable: str,
		args: Sequence[str],
		env: Mapping[str, str] | None = None,
	) -> CommandResult:
		args = tuple(args)
		with self._lock:
			self.calls.append((cwd, executable, args, env))

		hook = self.hooks.get(args[0]) if args else None
		if hook is not None:
			hook(args)

		response = self.responses.get(args, self.responses.get(args[0] if args else "", FAILED))
		if isinstance(response, BaseException):
			raise response
		if callable(response):
			response = response(args)
		return response

	def count(self, subcommand: str) -> int:
		"""Number of times ``subcommand`` was run."""
		with self._lock:
			return sum(1 for _, _, args, _ in self.calls if args and args[0] == subcommand)


def describe_output(tag: str, distance: int, abbreviated_hash: str = "abc1234") -> Responder:
	"""
	Answer describe the way git does for HEAD ``distance`` commits after ``tag``.

	At distance 0 git prints the bare tag unless ``--long`` is passed.

	"""

	def respond(args: tuple[str, ...]) -> CommandResult:
		if distance == 0 and "--long" not in args:
			return ok(f"{tag}\n")
		return ok(f"{tag}-{distance}-g{abbreviated_hash}\n")

	return respond


def repository_runner(
	describe: str | Responder | None = describe_output("v1.0.0", 0),
	status: str | None = "",
	branch: str | None = "main",
	head: str | None = FULL_HASH,
) -> FakeGitRunner:
	"""Fake runner for a repository; a None answer makes that command fail."""

	def answer(value: str | Responder | None) -> CommandResult | Responder:
		if callable(value):
			return value
		return FAILED if value is None else ok(f"{value}\n")

	return FakeGitRunner(
		{
			"describe": answer(describe),
			"status": answer(status),
			"branch": answer(branch),
			"rev-parse": answer(head),
		}
	)


def git(repo: Path, *args: str) -> str:
	"""Run a real git command in ``repo`` and return its trimmed output."""
	result = subprocess.run(  # noqa: S603
		["git", *args],  # noqa: S607
		cwd=repo,
		capture_output=True,
		text=True,
		check=True,
	)
	return result.stdout.strip()


def commit_file(repo: Path, name: str, content: str, message: str = "change") -> str:
	"""Write a file, commit it, and return the new HEAD hash."""
	(repo / name).write_text(content, encoding="utf-8")
	git(repo, "add", name)
	git(repo, "commit", "-q", "-m", message)
	return git(repo, "rev-parse", "HEAD")
