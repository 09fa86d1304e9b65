"""Arguments accepted when resolving a version."""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from gitstamp.errors import ConfigError

PREFIX_REGEX = r"[/@]?([A-Za-z]+[/@-])+"
_PREFIX_PATTERN = re.compile(PREFIX_REGEX)


@dataclass(frozen=True)
class VersionArgs:
	"""
	Options for version resolution.

	Attributes:
		prefix: Only tags starting with this prefix are considered. Empty
			matches every tag. A non-empty prefix must look like ``rel-``,
			``release/`` or ``@app-``.

	"""

	prefix: str = ""

	def __post_init__(self) -> None:
		if self.prefix and _PREFIX_PATTERN.fullmatch(self.prefix) is None:
			msg = f"Specified prefix `{self.prefix}` does not match the allowed format regex `{PREFIX_REGEX}`."
			raise ConfigError(msg)

	@classmethod
	def from_value(cls, value: Any) -> VersionArgs:
		"""
		Build arguments from a loosely typed value.

		Args:
			value: None, a prefix string, a mapping with a ``prefix`` key,
				or an existing VersionArgs

		Returns:
			VersionArgs instance

		Raises:
			ConfigError: If the value has an unsupported type or an invalid prefix

		"""
		if value is None:
			return cls()
		if isinstance(value, VersionArgs):
			return value
		if isinstance(value, str):
			return cls(prefix=value)
		if isinstance(value, Mapping):
			unknown = set(value) - {"prefix"}
			if unknown:
				msg = f"Unknown version arguments: {', '.join(sorted(unknown))}"
				raise ConfigError(msg)
			return cls(prefix=value.get("prefix") or "")
		msg = f"Unsupported version arguments of type {type(value).__name__}"
		raise ConfigError(msg)
