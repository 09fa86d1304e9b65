"""
Process-wide cache of resolved versions.

Builds with many modules ask for the version of the same repository over
and over. The cache makes sure git is only asked once per repository root
and tag prefix, even when the questions arrive on several threads at once.

"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any, ClassVar

from gitstamp.git.inspector import DEFAULT_TEST_USER_EMAIL, DEFAULT_TEST_USER_NAME, GitInspector
from gitstamp.git.locator import find_repo_root
from gitstamp.version.args import VersionArgs
from gitstamp.version.resolver import VersionResolver
from gitstamp.version.timer import Timer

if TYPE_CHECKING:
	from gitstamp.git.runner import CommandRunner
	from gitstamp.utils.config_loader import ConfigLoader
	from gitstamp.version.models import VersionDetails

logger = logging.getLogger(__name__)


@dataclass
class _Entry:
	lock: threading.Lock = field(default_factory=threading.Lock)
	details: VersionDetails | None = None


class ResolutionCache:
	"""
	Map of (repository root, tag prefix) to resolved VersionDetails.

	Each key is computed at most once. Callers asking for the same key while
	it is being computed wait for that computation and get the same
	instance; callers asking for other keys are not held up. Entries are
	never evicted.

	"""

	_shared_instance: ClassVar[ResolutionCache | None] = None
	_shared_lock: ClassVar[threading.Lock] = threading.Lock()

	def __init__(
		self,
		runner: CommandRunner | None = None,
		*,
		executable: str = "git",
		timer: Timer | None = None,
		testing: bool = False,
		test_user_email: str = DEFAULT_TEST_USER_EMAIL,
		test_user_name: str = DEFAULT_TEST_USER_NAME,
	) -> None:
		"""
		Initialize an empty cache.

		Args:
			runner: Command runner handed to every inspector
			executable: Name or path of the git executable
			timer: Timer to record resolution time into
			testing: Give inspectors a placeholder identity when none is set
			test_user_email: Email used for the placeholder identity
			test_user_name: Name used for the placeholder identity

		"""
		self.runner = runner
		self.executable = executable
		self.testing = testing
		self.test_user_email = test_user_email
		self.test_user_name = test_user_name
		self.timer = timer or Timer()
		self._entries: dict[tuple[Path, str], _Entry] = {}
		self._lock = threading.Lock()

	@classmethod
	def from_config(
		cls, config: ConfigLoader, runner: CommandRunner | None = None, *, testing: bool = False
	) -> ResolutionCache:
		"""
		Create a cache using the ``git`` section of a loaded configuration.

		Args:
			config: Loaded configuration
			runner: Command runner handed to every inspector
			testing: Give inspectors the configured placeholder identity when none is set

		"""
		return cls(
			runner,
			executable=config.get("git", "executable", "git"),
			testing=testing,
			test_user_email=config.get("git", "test_user_email", DEFAULT_TEST_USER_EMAIL),
			test_user_name=config.get("git", "test_user_name", DEFAULT_TEST_USER_NAME),
		)

	@classmethod
	def get_shared(cls, config: ConfigLoader | None = None) -> ResolutionCache:
		"""Get the process-wide cache, creating it on first use from ``config`` if given."""
		with cls._shared_lock:
			if cls._shared_instance is None:
				cls._shared_instance = cls.from_config(config) if config is not None else cls()
			return cls._shared_instance

	def get(self, root: Path, prefix: str = "") -> VersionDetails:
		"""
		Get the version details of a repository root for a tag prefix.

		Args:
			root: Directory containing the ``.git`` entry
			prefix: Only tags starting with this prefix are considered

		Returns:
			VersionDetails shared by every caller asking for the same key

		Raises:
			GitNotFoundError: If git cannot be invoked

		"""
		key = (Path(root), prefix)
		with self._lock:
			entry = self._entries.get(key)
			if entry is None:
				entry = self._entries[key] = _Entry()

		with entry.lock:
			if entry.details is None:
				entry.details = self._create_version_details(key[0], prefix)
			return entry.details

	def get_version_details(self, project_dir: Path, args: Any = None) -> VersionDetails:
		"""
		Locate the repository owning ``project_dir`` and get its version details.

		Args:
			project_dir: Any directory inside the repository
			args: Prefix string, mapping or VersionArgs (see VersionArgs.from_value)

		Raises:
			RepositoryNotFoundError: If ``project_dir`` is not inside a repository
			ConfigError: If the arguments are invalid
			GitNotFoundError: If git cannot be invoked

		"""
		root = find_repo_root(Path(project_dir))
		version_args = VersionArgs.from_value(args)
		return self.get(root, version_args.prefix)

	def get_git_version(self, project_dir: Path, args: Any = None) -> str:
		"""Get the version string for the repository owning ``project_dir``."""
		return self.get_version_details(project_dir, args).version

	def cached_keys(self) -> list[tuple[Path, str]]:
		"""List the keys that have a resolved value."""
		with self._lock:
			return [key for key, entry in self._entries.items() if entry.details is not None]

	def _create_version_details(self, root: Path, prefix: str) -> VersionDetails:
		logger.debug("Resolving version of %s with prefix %r", root, prefix)
		with self.timer.time(f"{root}|{prefix}"):
			inspector = GitInspector(
				root,
				self.runner,
				executable=self.executable,
				testing=self.testing,
				test_user_email=self.test_user_email,
				test_user_name=self.test_user_name,
			)
			return VersionResolver(inspector, prefix).resolve()


def resolve_version_details(project_dir: Path, runner: CommandRunner | None = None) -> VersionDetails:
	"""
	Resolve the version of the repository owning ``project_dir`` without caching.

	Uses the default (empty) tag prefix.

	Raises:
		RepositoryNotFoundError: If ``project_dir`` is not inside a repository
		GitNotFoundError: If git cannot be invoked

	"""
	return ResolutionCache(runner).get_version_details(project_dir)
