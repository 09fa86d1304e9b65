"""Commands printing the version of a repository."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING

import typer
from rich.console import Console
from rich.table import Table

from .cli_types import ConfigOpt, JsonFlag, PathArg, PrefixOpt, TimingsFlag

if TYPE_CHECKING:
	from gitstamp.version.cache import ResolutionCache
	from gitstamp.version.models import VersionDetails

logger = logging.getLogger(__name__)

stdout_console = Console()


def register_command(app: typer.Typer) -> None:
	"""Register the version commands with the CLI app."""

	@app.command(name="version")
	def version_command(
		path: PathArg = None,
		prefix: PrefixOpt = None,
		config_file: ConfigOpt = None,
	) -> None:
		"""Print the version string derived from git history."""
		_, details = _resolve(path, prefix, config_file)
		typer.echo(details.version)

	@app.command(name="details")
	def details_command(
		path: PathArg = None,
		prefix: PrefixOpt = None,
		config_file: ConfigOpt = None,
		as_json: JsonFlag = False,
		timings: TimingsFlag = False,
	) -> None:
		"""Print the version together with the git facts it was derived from."""
		cache, details = _resolve(path, prefix, config_file)

		if as_json:
			payload = details.to_dict()
			if timings:
				payload["timings_ms"] = cache.timer.to_dict()
			typer.echo(json.dumps(payload, indent=2))
			return

		stdout_console.print(_details_table(details))
		if timings:
			stdout_console.print(f"Resolved in {cache.timer.total_ms():.1f} ms")


def _resolve(path: Path | None, prefix: str | None, config_file: Path | None) -> tuple[ResolutionCache, VersionDetails]:
	"""Load configuration and resolve the version, exiting on errors."""
	from gitstamp.errors import GitstampError
	from gitstamp.utils.cli_utils import exit_with_error, handle_keyboard_interrupt, show_warning
	from gitstamp.utils.config_loader import ConfigLoader
	from gitstamp.version.cache import ResolutionCache
	from gitstamp.version.models import UNSPECIFIED_VERSION

	try:
		config = ConfigLoader.get_instance(str(config_file) if config_file else None, reload=config_file is not None)
		# CLI > config > default
		effective_prefix = prefix if prefix is not None else config.get("version", "prefix", "")
		executable = config.get("git", "executable", "git")

		cache = ResolutionCache.get_shared(config)
		if executable != cache.executable:
			cache = ResolutionCache.from_config(config)

		details = cache.get_version_details(path or Path.cwd(), effective_prefix)
	except KeyboardInterrupt:
		handle_keyboard_interrupt()
	except GitstampError as e:
		exit_with_error("Could not determine the version.", exception=e)

	if details.version == UNSPECIFIED_VERSION:
		show_warning("git could not describe HEAD (no commits yet?), the version is unspecified.")
	return cache, details


def _details_table(details: VersionDetails) -> Table:
	table = Table(title="Version details", show_header=True, header_style="bold")
	table.add_column("Field")
	table.add_column("Value")
	for name, value in details.to_dict().items():
		table.add_row(name, "-" if value is None else str(value))
	return table
