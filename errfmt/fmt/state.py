"""Render state shared by the formatter, the chain renderer and its views.

A single `RenderState` is owned by one `Printer` for the duration of one
top-level render. The detail printer and the indenting state are thin views
over the same instance; none of them copy the buffer.
"""

from __future__ import annotations

from dataclasses import dataclass, field

__all__ = ["Buffer", "DETAIL_SEP", "FmtFlags", "RenderState"]

# Continuation-line indent inside a detail section.
DETAIL_SEP = "\n    "


class Buffer:
    """Append-only text sink."""

    __slots__ = ("_parts", "_size")

    def __init__(self) -> None:
        self._parts: list[str] = []
        self._size = 0

    def write(self, text: str) -> None:
        if text:
            self._parts.append(text)
            self._size += len(text)

    def getvalue(self) -> str:
        if len(self._parts) > 1:
            self._parts = ["".join(self._parts)]
        return self._parts[0] if self._parts else ""

    def endswith(self, suffix: str) -> bool:
        if len(suffix) > self._size:
            return False
        tail = ""
        for part in reversed(self._parts):
            tail = part + tail
            if len(tail) >= len(suffix):
                break
        return tail.endswith(suffix)

    def trim(self, n: int) -> None:
        """Drop the last `n` characters."""
        remaining = min(n, self._size)
        self._size -= remaining
        while remaining:
            last = self._parts[-1]
            if len(last) <= remaining:
                self._parts.pop()
                remaining -= len(last)
            else:
                self._parts[-1] = last[:-remaining]
                remaining = 0

    def reset(self) -> None:
        self._parts.clear()
        self._size = 0

    def __len__(self) -> int:
        return self._size


@dataclass(slots=True)
class FmtFlags:
    """Flags parsed from one formatting directive.

    `plus_v` and `sharp_v` record `%+v` and `%#v`; for the `v` verb the plain
    `plus`/`sharp` bits are moved into them so that `%+d` and `%+v` stay
    distinguishable.
    """

    plus: bool = False
    minus: bool = False
    sharp: bool = False
    space: bool = False
    zero: bool = False
    plus_v: bool = False
    sharp_v: bool = False
    width_present: bool = False
    precision_present: bool = False


@dataclass(slots=True)
class RenderState:
    """Flags, width/precision and output buffer for one render."""

    buf: Buffer = field(default_factory=Buffer)
    flags: FmtFlags = field(default_factory=FmtFlags)
    width: int = 0
    precision: int = 0
    in_detail: bool = False
    indent: bool = False

    @property
    def plus_v(self) -> bool:
        return self.flags.plus_v

    @property
    def sharp_v(self) -> bool:
        return self.flags.sharp_v

    def clear_flags(self) -> None:
        """Forget the previous directive's flags, width and precision."""
        self.flags = FmtFlags()
        self.width = 0
        self.precision = 0

    def reset(self) -> None:
        """Return every field to its initial value, buffer included."""
        self.buf.reset()
        self.clear_flags()
        self.in_detail = False
        self.indent = False

    def width_info(self) -> tuple[int, bool]:
        return self.width, self.flags.width_present

    def precision_info(self) -> tuple[int, bool]:
        return self.precision, self.flags.precision_present

    def flag(self, c: str) -> bool:
        f = self.flags
        if c == "-":
            return f.minus
        if c == "+":
            return f.plus or f.plus_v
        if c == "#":
            return f.sharp or f.sharp_v
        if c == " ":
            return f.space
        if c == "0":
            return f.zero
        return False
