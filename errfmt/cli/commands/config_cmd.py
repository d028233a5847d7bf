from __future__ import annotations

from dataclasses import fields
from pathlib import Path

import typer

from errfmt.cli.context import build_context
from errfmt.output.console import Style


def show_config(
    config: Path | None = typer.Option(None, "--config", help="errfmt.toml or pyproject.toml"),
) -> None:
    """Show the effective render settings."""
    ctx = build_context(config)
    ctx.console.header("errfmt config")
    for f in fields(ctx.config):
        ctx.console.print(f"{f.name} = {getattr(ctx.config, f.name)}", Style.DIM)
