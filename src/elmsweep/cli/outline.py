"""Outline command: top-level declarations of one source file."""

import json
from pathlib import Path

import typer
from rich.table import Table

from ..exceptions import ElmSweepError
from ..lexing import Lexer, Token, TokenKind, scan_declarations
from . import app
from ._common import OUTPUT_FORMATS, console, fail


@app.command()
def outline(
    file: Path = typer.Argument(
        ...,
        help="Elm source file",
        file_okay=True,
        dir_okay=False,
    ),
    fmt: str = typer.Option(
        "rich",
        "--format",
        "-f",
        help="Output format: rich (human-readable) or json",
    ),
    comments: bool = typer.Option(
        False,
        "--comments",
        help="Include comments in the outline",
    ),
):
    """
    Show the module statement, imports, types and functions of a file.
    """
    if fmt not in OUTPUT_FORMATS:
        console.print(f"[red]Error:[/red] unknown format '{fmt}' (use rich or json)")
        raise typer.Exit(1)

    try:
        lexer = Lexer.from_file(file)
    except ElmSweepError as e:
        fail(e, fmt)

    tokens = [
        token
        for token in scan_declarations(lexer.content)
        if comments or token.kind is not TokenKind.COMMENT
    ]

    if fmt == "json":
        output = [
            {
                "kind": token.kind.value,
                "line": _line_of(lexer.content, token),
                "summary": _summary(token),
            }
            for token in tokens
        ]
        print(json.dumps(output, indent=2))
        return

    table = Table(title=str(file), show_header=True, header_style="bold")
    table.add_column("Line", justify="right")
    table.add_column("Kind")
    table.add_column("Declaration")
    for token in tokens:
        table.add_row(str(_line_of(lexer.content, token)), token.kind.value, _summary(token))
    console.print(table)


def _line_of(content: str, token: Token) -> int:
    return content.count("\n", 0, token.start) + 1


def _summary(token: Token) -> str:
    """First line of the declaration, or the parsed statement for module/import."""
    if token.kind in (TokenKind.MODULE_STATEMENT, TokenKind.IMPORT_STATEMENT):
        return str(token.payload)
    return token.value.split("\n", 1)[0].strip()
