from __future__ import annotations

import typer

from errfmt import __version__
from errfmt.cli.commands.config_cmd import show_config
from errfmt.cli.commands.render import render, report
from errfmt.core.errors import ErrorCode


app = typer.Typer(add_completion=False, rich_markup_mode="rich")


# Commands
app.command()(render)
app.command()(report)
app.command("config")(show_config)


@app.callback(invoke_without_command=True)
def _main(  # pyright: ignore[reportUnusedFunction]
    ctx: typer.Context,
    version: bool = typer.Option(False, "--version", help="Show version and exit."),
) -> None:
    if version:
        typer.echo(__version__)
        raise typer.Exit(code=ErrorCode.OK)

    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit(code=ErrorCode.OK)


def main() -> None:
    app()
