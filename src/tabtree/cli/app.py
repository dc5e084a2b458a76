"""tabtree CLI application."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        from tabtree import __version__

        print(f"tabtree {__version__}")
        raise typer.Exit()


app = typer.Typer(
    name="tabtree",
    help="Render tree-organized tables as aligned text",
    no_args_is_help=True,
    add_completion=False,
)


@app.callback()
def _app_callback(
    version: Annotated[  # noqa: ARG001
        bool,
        typer.Option("--version", "-V", help="Show version and exit", callback=version_callback),
    ] = False,
) -> None:
    """Render tree-organized tables as aligned text."""
    pass


console = Console()
error_console = Console(stderr=True)


@app.command()
def render(
    path: Annotated[
        Path,
        typer.Argument(help="YAML table document"),
    ],
    separator: Annotated[
        str | None,
        typer.Option("--separator", "-s", help="Column separator"),
    ] = None,
    terminator: Annotated[
        str | None,
        typer.Option("--terminator", "-t", help="Line terminator"),
    ] = None,
    sort: Annotated[
        int | None,
        typer.Option("--sort", help="Sort each section on this column", min=0),
    ] = None,
    descending: Annotated[
        bool,
        typer.Option("--descending", "-d", help="Sort from largest to smallest"),
    ] = False,
) -> None:
    """Render a table document."""
    from tabtree.commands import handle_render_command

    handle_render_command(
        path,
        console,
        error_console,
        column_separator=separator,
        line_terminator=terminator,
        sort_column=sort,
        descending=descending,
    )
