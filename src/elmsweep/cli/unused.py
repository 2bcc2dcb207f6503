"""Unused modules command: report files unreachable from the project roots."""

import json
from pathlib import Path
from typing import Optional

import typer
from rich.table import Table

from ..exceptions import ElmSweepError
from ..graph import ReachabilityResult, analyze_reachability, compute_depth
from ..logging_config import setup_logging
from ..project import ProjectConfig, ProjectModel, build_project
from . import app
from ._common import OUTPUT_FORMATS, console, display_path, fail, resolve_settings


@app.command()
def unused(
    path: Path = typer.Argument(
        Path("."),
        help="Project root directory",
        exists=True,
        file_okay=False,
        dir_okay=True,
    ),
    entry_file: Optional[str] = typer.Option(
        None,
        "--entry-file",
        "-e",
        help="Application entry file, relative to the project root",
    ),
    exposed_modules: Optional[list[str]] = typer.Option(
        None,
        "--exposed-module",
        "-m",
        help="Package exposed module (repeatable)",
    ),
    source_dirs: Optional[list[str]] = typer.Option(
        None,
        "--source-dir",
        "-s",
        help="Source directory, relative to the project root (repeatable, default: src)",
    ),
    exclude_dirs: Optional[list[str]] = typer.Option(
        None,
        "--exclude-dir",
        help="Directory whose own files are skipped (repeatable)",
    ),
    exclude_files: Optional[list[str]] = typer.Option(
        None,
        "--exclude-file",
        help="File that is skipped (repeatable)",
    ),
    fmt: str = typer.Option(
        "rich",
        "--format",
        "-f",
        help="Output format: rich (human-readable) or json",
    ),
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="elmsweep settings file (TOML)",
        exists=True,
        file_okay=True,
        dir_okay=False,
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Show reachable modules and debug logging",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Suppress logging",
    ),
):
    """
    List source files that cannot be reached from the project roots.

    Pass [bold]--entry-file[/bold] for an application or one or more
    [bold]--exposed-module[/bold] options for a package.

    [bold cyan]Examples:[/bold cyan]

      elmsweep unused . --entry-file src/Main.elm

      elmsweep unused . -m Json.Extra -m Json.Extra.Decode --format json
    """
    if fmt not in OUTPUT_FORMATS:
        console.print(f"[red]Error:[/red] unknown format '{fmt}' (use rich or json)")
        raise typer.Exit(1)

    if entry_file and exposed_modules:
        console.print(
            "[red]Error:[/red] use either --entry-file (application) "
            "or --exposed-module (package), not both"
        )
        raise typer.Exit(1)

    try:
        settings = resolve_settings(config=config, verbose=verbose, quiet=quiet)
        setup_logging(settings.verbosity, log_file=settings.log_file)

        if entry_file:
            kind = "application"
        elif exposed_modules:
            kind = "package"
        else:
            kind = None

        project_config = ProjectConfig(
            kind=kind,
            root=path,
            source_dirs=list(source_dirs) if source_dirs else ["src"],
            exclude_dirs=list(exclude_dirs or []),
            exclude_files=list(exclude_files or []),
            entry_file=entry_file,
            exposed_modules=list(exposed_modules or []),
        )
        project = build_project(project_config, settings)
        result = analyze_reachability(project, settings=settings)

    except ElmSweepError as e:
        fail(e, fmt)

    if fmt == "json":
        _output_json(project, result)
    else:
        _output_rich(project, result, verbose=settings.verbose)


def _output_json(project: ProjectModel, result: ReachabilityResult) -> None:
    """Machine-readable output."""
    output = {
        "project": {
            "kind": project.kind.value,
            "root": project.root,
            "roots": list(result.roots),
        },
        "summary": {
            "total_files": len(project.file_list),
            "total_modules": len(result.graph.adjacency),
            "reachable_modules": len(result.reachable),
            "unused_files": len(result.unused),
        },
        "unused": [
            {"file": file_path, "module": module}
            for file_path, module in result.unused_modules.items()
        ],
    }
    print(json.dumps(output, indent=2))


def _output_rich(project: ProjectModel, result: ReachabilityResult, verbose: bool = False) -> None:
    """Human-readable terminal output."""
    console.print()
    console.print(
        f"  [bold]{len(project.file_list)}[/bold] source files, "
        f"[bold]{len(result.reachable)}[/bold] modules reachable from "
        f"{', '.join(result.roots)}"
    )
    console.print()

    if verbose:
        depth = compute_depth(result.graph.adjacency, result.roots)
        reachable_table = Table(title="Reachable modules", show_header=True, header_style="bold")
        reachable_table.add_column("Module")
        reachable_table.add_column("Depth", justify="right")
        for name in sorted(result.reachable, key=lambda n: (depth.get(n, -1), n)):
            reachable_table.add_row(name, str(depth.get(name, -1)))
        console.print(reachable_table)
        console.print()

    if not result.unused:
        console.print("[green]No unused modules found.[/green]")
        return

    table = Table(title="Unused modules", show_header=True, header_style="bold red")
    table.add_column("File")
    table.add_column("Module")
    for file_path, module in result.unused_modules.items():
        table.add_row(display_path(file_path, project.root), module)
    console.print(table)
