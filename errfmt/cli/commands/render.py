from __future__ import annotations

from pathlib import Path

import typer

from errfmt.cli.context import build_context
from errfmt.core.errors import ErrorCode
from errfmt.errors.build import errorf, new
from errfmt.errors.types import ChainError
from errfmt.fmt.printer import sprintf
from errfmt.output.report import report_error


def build_chain(messages: list[str]) -> ChainError:
    """Chain messages outermost first: ["a", "b"] renders as "a: b"."""
    *outer, innermost = messages
    err: ChainError = new(innermost)
    for message in reversed(outer):
        err = errorf("%s: %v", message, err)
    return err


def render(
    messages: list[str] = typer.Argument(..., help="Error messages, outermost first"),
    template: str = typer.Option("%v", "--format", "-f", help="Template applied to the chain"),
    config: Path | None = typer.Option(None, "--config", help="errfmt.toml or pyproject.toml"),
) -> None:
    """Build an error chain from MESSAGES and print it with a template."""
    ctx = build_context(config)
    if not messages:
        ctx.console.error("at least one message is required")
        raise typer.Exit(code=int(ErrorCode.USER_ERROR))

    ctx.console.print(sprintf(template, build_chain(messages)))


def report(
    messages: list[str] = typer.Argument(..., help="Error messages, outermost first"),
    detail: bool = typer.Option(False, "--detail", "-d", help="Also print the %+v chain"),
    config: Path | None = typer.Option(None, "--config", help="errfmt.toml or pyproject.toml"),
) -> None:
    """Print an error chain the way command-line tools report failures."""
    ctx = build_context(config)
    if not messages:
        ctx.console.error("at least one message is required")
        raise typer.Exit(code=int(ErrorCode.USER_ERROR))

    report_error(build_chain(messages), ctx.console, detail=detail)
