"""Exceptions raised by gitstamp."""

from __future__ import annotations


class GitstampError(Exception):
	"""Base exception for gitstamp errors."""


class GitNotFoundError(GitstampError):
	"""Raised when the git executable cannot be invoked at all."""


class ConfigError(GitstampError):
	"""Exception raised for configuration errors."""


class RepositoryNotFoundError(ConfigError):
	"""Raised when no repository root can be located above a directory."""
