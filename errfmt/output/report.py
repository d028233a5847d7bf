"""Error presentation for command-line tools."""

from __future__ import annotations

from typing import TYPE_CHECKING

from errfmt.fmt.printer import sprintf

from .console import Style

if TYPE_CHECKING:
    from .console import ConsoleProtocol

__all__ = ["report_error"]


def report_error(err: BaseException, console: ConsoleProtocol, *, detail: bool = False) -> None:
    """Print err as a one-line error, optionally followed by its `%+v` chain."""
    console.error(sprintf("%v", err))
    if detail:
        console.print(sprintf("%+v", err), Style.DIM)
