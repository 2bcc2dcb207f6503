"""Shared CLI helpers."""

import json
from pathlib import Path
from typing import NoReturn, Optional

import typer
from rich.console import Console
from rich.markup import escape

from ..config import SweepSettings, load_settings
from ..exceptions import ElmSweepError

console = Console()

OUTPUT_FORMATS = ("rich", "json")


def resolve_settings(
    config: Optional[Path] = None,
    verbose: bool = False,
    quiet: bool = False,
) -> SweepSettings:
    """Build settings from CLI options."""
    overrides = {}
    if verbose:
        overrides["verbose"] = True
    if quiet:
        overrides["quiet"] = True
    return load_settings(config_file=config, **overrides)


def display_path(path: str, root: str) -> str:
    """Show ``path`` relative to ``root`` when it lies below it."""
    try:
        return str(Path(path).relative_to(root))
    except ValueError:
        return path


def fail(error: ElmSweepError, fmt: str = "rich") -> NoReturn:
    """Report ``error`` in the requested format and exit with status 1."""
    if fmt == "json":
        print(json.dumps(error.to_json(), indent=2))
    else:
        console.print(f"[red]Error:[/red] {escape(str(error))}")
    raise typer.Exit(1)
