"""CLI entry point: registers all subcommands."""

from typing import Optional

import typer

from .. import __version__
from ._common import console

app = typer.Typer(
    name="elmsweep",
    help="elmsweep - find Elm modules unreachable from a project's roots",
    add_completion=False,
    rich_markup_mode="rich",
)


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"elmsweep {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        help="Show the version and exit",
        callback=_version_callback,
        is_eager=True,
    ),
):
    """
    Report Elm modules that nothing reachable imports.

    elmsweep only reports; it never deletes or renames files.
    """


# Import subcommands to register them
from .unused import unused as _unused  # noqa: F401, E402
from .outline import outline as _outline  # noqa: F401, E402
