from __future__ import annotations

import typer

from apksign import __version__
from apksign.cli.commands.check import check
from apksign.cli.commands.resolve_cmd import resolve_signing


app = typer.Typer(
    add_completion=False,
    no_args_is_help=True,
    rich_markup_mode="rich",
)


app.command("resolve")(resolve_signing)
app.command()(check)


def _show_version(value: bool) -> None:
    if value:
        typer.echo(__version__)
        raise typer.Exit(code=0)


@app.callback()
def _main(  # pyright: ignore[reportUnusedFunction]
    version: bool = typer.Option(
        False,
        "--version",
        help="Show version and exit.",
        callback=_show_version,
        is_eager=True,
    ),
) -> None:
    """Resolve Android release-signing configuration."""


def main() -> None:
    app()
