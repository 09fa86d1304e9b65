"""Version resolution for gitstamp."""

from .args import VersionArgs
from .cache import ResolutionCache, resolve_version_details
from .models import DIRTY_SUFFIX, UNSPECIFIED_VERSION, VersionDetails, parse_describe
from .resolver import VersionResolver
from .timer import Timer

__all__ = [
	"DIRTY_SUFFIX",
	"UNSPECIFIED_VERSION",
	"ResolutionCache",
	"Timer",
	"VersionArgs",
	"VersionDetails",
	"VersionResolver",
	"parse_describe",
	"resolve_version_details",
]
