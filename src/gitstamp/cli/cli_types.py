"""Type definitions for CLI parameters."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

PathArg = Annotated[
	Path | None,
	typer.Argument(
		exists=True,
		file_okay=False,
		help="Directory inside the repository (defaults to the current directory)",
		show_default=False,
	),
]

PrefixOpt = Annotated[
	str | None,
	typer.Option(
		"--prefix",
		"-p",
		help="Only consider tags starting with this prefix (overrides config)",
	),
]

ConfigOpt = Annotated[
	Path | None,
	typer.Option(
		"--config",
		"-c",
		help="Path to config file",
	),
]

JsonFlag = Annotated[
	bool,
	typer.Option(
		"--json",
		help="Print the details as JSON",
	),
]

TimingsFlag = Annotated[
	bool,
	typer.Option(
		"--timings",
		help="Also print how long version resolution took",
	),
]
