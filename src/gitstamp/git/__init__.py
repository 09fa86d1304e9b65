"""Git access for gitstamp."""

from .inspector import GitInspector
from .locator import find_git_dir, find_repo_root
from .runner import CommandResult, CommandRunner, SubprocessRunner, run_command

__all__ = [
	"CommandResult",
	"CommandRunner",
	"GitInspector",
	"SubprocessRunner",
	"find_git_dir",
	"find_repo_root",
	"run_command",
]
