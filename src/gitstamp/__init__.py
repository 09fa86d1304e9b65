"""gitstamp - version strings derived from git history."""

from __future__ import annotations

from gitstamp.errors import ConfigError, GitNotFoundError, GitstampError, RepositoryNotFoundError
from gitstamp.version.args import VersionArgs
from gitstamp.version.cache import ResolutionCache, resolve_version_details
from gitstamp.version.models import VersionDetails

__version__ = "0.1.0"
__author__ = "gitstamp contributors"

__all__ = [
	"ConfigError",
	"GitNotFoundError",
	"GitstampError",
	"RepositoryNotFoundError",
	"ResolutionCache",
	"VersionArgs",
	"VersionDetails",
	"__version__",
	"resolve_version_details",
]
