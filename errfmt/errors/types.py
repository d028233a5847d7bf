"""Error values produced by `errorf` and friends."""

from __future__ import annotations

import re
from typing import Any

from errfmt.fmt.printer import sprint, sprintf
from errfmt.fmt.protocols import ErrorPrinter

from .frame import Frame

__all__ = ["ChainError", "LeafError", "WrappedError", "unwrap"]

# Flags, width, precision and an optional verb, as in a `%` directive.
_VERB_SPEC = re.compile(r"[+\-# 0]*\d*(?:\.\d*)?[A-Za-z]?")


class ChainError(Exception):
    """Base class for errors that render their own cause chain.

    `str(err)` is the `%v` form. The verbs also work in format specs:

        f"{err}"      # open /tmp/f: permission denied
        f"{err:+v}"   # the chain with call sites, one level per segment
        f"{err:>30}"  # str(err) right-aligned, as for any str
        f"{err:q}"    # "open /tmp/f: permission denied"
    """

    def __init__(self, message: str, frame: Frame | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.frame = frame if frame is not None else Frame()

    def __str__(self) -> str:
        return sprint(self)

    def __format__(self, spec: str) -> str:
        if not _VERB_SPEC.fullmatch(spec):
            # Standard alignment specs such as ">30" or "*^20".
            return format(str(self), spec)
        if not spec or not spec[-1].isalpha():
            spec += "v"
        return sprintf("%" + spec, self)

    def __reduce__(self) -> tuple[Any, ...]:
        return (type(self), (self.message, self.frame))

    def format_chain(self, printer: ErrorPrinter) -> object | None:
        printer.print(self.message)
        self.frame.format(printer)
        return None


class LeafError(ChainError):
    """An error with no cause."""


class WrappedError(ChainError):
    """An error that adds a message and a call site to a cause."""

    def __init__(self, message: str, cause: BaseException, frame: Frame | None = None) -> None:
        if cause is None:
            raise ValueError("WrappedError requires a cause; use LeafError instead")
        super().__init__(message, frame)
        self.cause = cause
        self.__cause__ = cause

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r}, cause={self.cause!r})"

    def __reduce__(self) -> tuple[Any, ...]:
        return (type(self), (self.message, self.cause, self.frame))

    def unwrap(self) -> BaseException:
        return self.cause

    def format_chain(self, printer: ErrorPrinter) -> object | None:
        super().format_chain(printer)
        return self.cause


def unwrap(err: object) -> object | None:
    """Return the cause reported by err's `unwrap()` method, or None."""
    method = getattr(err, "unwrap", None)
    if callable(method):
        return method()
    return None
