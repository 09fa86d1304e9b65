"""Turning git answers into a VersionDetails."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from gitstamp.version.models import (
	DIRTY_SUFFIX,
	UNSPECIFIED_VERSION,
	VersionDetails,
	parse_describe,
)

if TYPE_CHECKING:
	from gitstamp.git.inspector import GitInspector

logger = logging.getLogger(__name__)


class VersionResolver:
	"""Resolve the version of a worktree for a given tag prefix."""

	def __init__(self, inspector: GitInspector, prefix: str = "") -> None:
		"""
		Initialize the resolver.

		Args:
			inspector: Inspector bound to the repository root
			prefix: Only tags starting with this prefix are considered

		"""
		self.inspector = inspector
		self.prefix = prefix

	def resolve(self) -> VersionDetails:
		"""
		Query git and build the version details.

		An exact tag on a clean tree yields the tag itself. Commits after the
		tag or local modifications add ``.<distance>.g<hash>``, and a dirty
		tree always ends in ``.dirty``. If git cannot tell whether the tree
		is clean, no dirty suffix is added but ``is_clean`` stays None.

		Returns:
			Immutable VersionDetails

		"""
		description = self.inspector.describe(self.prefix)
		is_clean = self.inspector.is_clean()
		is_dirty = is_clean is False

		last_tag = None
		distance = None
		abbreviated_hash = None
		is_clean_tag = False

		if description is None:
			version = UNSPECIFIED_VERSION
		else:
			parsed = parse_describe(description)
			if parsed is None:
				# No tag matched the prefix, git printed the abbreviated hash
				abbreviated_hash = description
				version = description
			else:
				last_tag = parsed.tag
				distance = parsed.distance
				abbreviated_hash = parsed.abbreviated_hash
				is_clean_tag = distance == 0 and not is_dirty
				if is_clean_tag:
					version = parsed.tag
				else:
					version = f"{parsed.tag}.{distance}.g{abbreviated_hash}"

			if is_dirty:
				version += DIRTY_SUFFIX

		full_hash = self.inspector.current_full_hash()
		# An unborn branch has no commits yet and is not reported
		branch = self.inspector.current_branch() if full_hash is not None else None

		details = VersionDetails(
			version=version,
			branch=branch,
			full_hash=full_hash,
			abbreviated_hash=abbreviated_hash,
			last_tag=last_tag,
			commit_distance=distance,
			is_clean_tag=is_clean_tag,
			is_clean=is_clean,
		)
		logger.debug("Resolved %s (prefix=%r) to %s", self.inspector.worktree, self.prefix, details.version)
		return details
