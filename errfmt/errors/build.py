"""Building errors from a template and arguments.

    errorf("open %s: %v", path, err)

When the template ends in `": %s"` or `": %v"` and the last argument is an
exception, the result wraps that exception instead of flattening it into the
message, so `%+v` can show each level of the chain with its own call site.
"""

from __future__ import annotations

from collections.abc import Sequence

from errfmt.fmt.printer import sprintf

from .frame import Frame
from .types import ChainError, LeafError, WrappedError

__all__ = ["build_error", "detect_cause", "errorf", "new"]

_CHAIN_SUFFIXES = (": %s", ": %v")
_SUFFIX_LEN = len(": %s")


def detect_cause(template: str, args: Sequence[object]) -> BaseException | None:
    """Return the last argument if template chains it as a cause.

    This is a literal suffix test, not a parse of the template: a template
    that also refers to the last argument through an explicit `%[n]` index
    is treated the same way, and renders best-effort.
    """
    if not template.endswith(_CHAIN_SUFFIXES):
        return None
    if not args:
        return None
    last = args[-1]
    if not isinstance(last, BaseException):
        return None
    return last


def _new_error(template: str, args: Sequence[object]) -> ChainError:
    # 0 = here, 1 = the public constructor, 2 = its caller.
    frame = Frame.caller(2)
    cause = detect_cause(template, args)
    if cause is None:
        return LeafError(sprintf(template, *args), frame)
    return WrappedError(sprintf(template[:-_SUFFIX_LEN], *args[:-1]), cause, frame)


def build_error(template: str, args: Sequence[object] = ()) -> ChainError:
    """Build a LeafError, or a WrappedError when the last argument is a chained cause."""
    return _new_error(template, args)


def errorf(template: str, *args: object) -> ChainError:
    """Varargs form of `build_error`."""
    return _new_error(template, args)


def new(text: str) -> LeafError:
    """A LeafError with text as its message, taken literally."""
    return LeafError(text, Frame.caller(1))
