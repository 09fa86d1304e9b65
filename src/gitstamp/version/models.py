"""Data models for resolved versions."""

from __future__ import annotations

import re
from dataclasses import asdict, dataclass
from typing import Any, NamedTuple

UNSPECIFIED_VERSION = "unspecified"
DIRTY_SUFFIX = ".dirty"

# <tag>-<commits since tag>-g<abbreviated hash>, the tag itself may contain dashes
DESCRIBE_PATTERN = re.compile(r"^(?P<tag>.+)-(?P<distance>\d+)-g(?P<hash>[0-9a-f]{7,40})$")


class DescribeResult(NamedTuple):
	"""Components of a ``git describe`` output that found a tag."""

	tag: str
	distance: int
	abbreviated_hash: str


def parse_describe(output: str) -> DescribeResult | None:
	"""
	Split ``git describe`` output into tag, distance and hash.

	Args:
		output: Trimmed output of ``git describe --tags --always``

	Returns:
		DescribeResult, or None if the output is a bare hash (no tag matched)

	"""
	match = DESCRIBE_PATTERN.match(output)
	if match is None:
		return None
	return DescribeResult(
		tag=match.group("tag"),
		distance=int(match.group("distance")),
		abbreviated_hash=match.group("hash"),
	)


@dataclass(frozen=True)
class VersionDetails:
	"""Version of a repository at HEAD, with the git facts it was built from."""

	version: str
	branch: str | None = None
	full_hash: str | None = None
	abbreviated_hash: str | None = None
	last_tag: str | None = None
	commit_distance: int | None = None
	is_clean_tag: bool = False
	is_clean: bool | None = None

	def to_dict(self) -> dict[str, Any]:
		"""Return the details as a plain dictionary."""
		return asdict(self)

	def __str__(self) -> str:
		return self.version
