"""Capabilities a value may implement to control how it is formatted.

Capabilities are checked at runtime with `isinstance` against these
protocols, not through a class hierarchy, so any object can opt in by
defining the method. When an error is rendered they are consulted in this
order:

1. `RawRepresentable` (only for `%#v`)
2. `ChainFormatter`
3. `LegacyChainFormatter`
4. `Formatter`
5. `str(err)`

A chain formatter writes its own message through an `ErrorPrinter` and
returns the next error in the chain (or None). A `Formatter` owns its output
completely and ends the chain walk.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

__all__ = [
    "ChainFormatter",
    "ErrorPrinter",
    "Formatter",
    "LegacyChainFormatter",
    "RawRepresentable",
    "State",
    "is_error",
]


class State(Protocol):
    """Write target and directive flags handed to a `Formatter`."""

    def write(self, text: str) -> int: ...

    def width(self) -> tuple[int, bool]: ...

    def precision(self) -> tuple[int, bool]: ...

    def flag(self, c: str) -> bool: ...


class ErrorPrinter(Protocol):
    """Restricted printer handed to chain formatters."""

    def print(self, *args: object) -> None:
        """Write the operands, formatted as by `sprint`."""
        ...

    def printf(self, template: str, *args: object) -> None:
        """Write the operands, formatted as by `sprintf`."""
        ...

    def detail(self) -> bool:
        """Start the detail section of the current error.

        Returns True if detail output was requested (`%+v`). Text printed
        after a False return is discarded, so callers may skip computing it.
        """
        ...

    def width(self) -> tuple[int, bool]: ...

    def precision(self) -> tuple[int, bool]: ...

    def flag(self, c: str) -> bool: ...


@runtime_checkable
class RawRepresentable(Protocol):
    """Supplies the text printed verbatim for `%#v`."""

    def raw_string(self) -> str: ...


@runtime_checkable
class ChainFormatter(Protocol):
    def format_chain(self, printer: ErrorPrinter) -> object | None: ...


@runtime_checkable
class LegacyChainFormatter(Protocol):
    """Older spelling of `ChainFormatter`; same contract."""

    def format_error(self, printer: ErrorPrinter) -> object | None: ...


@runtime_checkable
class Formatter(Protocol):
    """Formats itself for any verb; not chain aware."""

    def format_verb(self, state: State, verb: str) -> None: ...


def is_error(obj: object) -> bool:
    """Whether `obj` can take part in a chain as an error value."""
    return isinstance(obj, BaseException)
