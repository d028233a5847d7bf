"""printf-style formatting with chain-aware error rendering.

Templates use `%[flags][width][.precision]verb` directives:

    sprintf("open %s: %v", path, err)
    sprintf("%-10s|%5.2f|%#x", name, ratio, mask)
    sprintf("%[2]s %[1]s", "world", "hello")

Flags are `+ - # 0` and space; width and precision are digits or `*` (read
from the next int argument); `%[n]` selects the n-th argument (1-based).

Verbs:
    %v  default form; %+v detailed (errors: whole chain with frames);
        %#v raw form (`raw_string()` or `repr()`)
    %s  str; %q quoted; %x %X hex (ints, or UTF-8 bytes of strings)
    %d %b %o %O %c  integers; %t bools; %e %E %f %F %g %G floats
    %T  type name; %%  a literal percent

Formatting never raises. Problems show up inline instead, e.g.
`%!d(str=hi)` for a verb that does not apply, `%!s(MISSING)` for a missing
argument, `%!(EXTRA int=3)` for unused ones, and
`%!v(PANIC=__str__ method: ...)` when a value's own formatting code fails.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence
from dataclasses import replace
from typing import Protocol

from .pool import PrinterPool
from .protocols import (
    ChainFormatter,
    Formatter,
    LegacyChainFormatter,
    RawRepresentable,
    is_error,
)
from .quote import can_backquote, quote, quote_char
from .state import RenderState

__all__ = [
    "Printer",
    "fprint",
    "fprintf",
    "printer_pool",
    "sprint",
    "sprintf",
    "sprintln",
]

logger = logging.getLogger(__name__)

LDIGITS = "0123456789abcdefx"
UDIGITS = "0123456789ABCDEFX"

_STRING_VERBS = frozenset("vsqxX")
_TOO_LARGE = 1_000_000


class SupportsWrite(Protocol):
    def write(self, s: str, /) -> object: ...


def _too_large(n: int) -> bool:
    return n > _TOO_LARGE or n < -_TOO_LARGE


def _parse_num(s: str, start: int, end: int) -> tuple[int, bool, int]:
    """Parse a decimal run at s[start:end]; returns (num, found, new_index)."""
    num = 0
    found = False
    i = start
    while i < end and "0" <= s[i] <= "9":
        if _too_large(num):
            return 0, False, end
        num = num * 10 + (ord(s[i]) - ord("0"))
        found = True
        i += 1
    return num, found, i


def _parse_arg_number(s: str) -> tuple[int, int, bool]:
    """Parse `[n]` at the start of s; returns (zero-based index, width, ok)."""
    if len(s) < 3:
        return 0, 1, False
    for i in range(1, len(s)):
        if s[i] == "]":
            n, ok, newi = _parse_num(s, 1, i)
            if not ok or newi != i:
                return 0, i + 1, False
            return n - 1, i + 1, True
    return 0, 1, False


def _int_from_arg(args: Sequence[object], arg_num: int) -> tuple[int, bool, int]:
    num = 0
    is_int = False
    if arg_num < len(args):
        arg = args[arg_num]
        if isinstance(arg, int) and not isinstance(arg, bool):
            num, is_int = arg, True
            if _too_large(num):
                num, is_int = 0, False
        arg_num += 1
    return num, is_int, arg_num


def _safe_str(obj: object) -> str:
    try:
        return str(obj)
    except Exception:  # noqa: BLE001
        return f"<unprintable {type(obj).__name__}>"


def _method_name(arg: object) -> str:
    if isinstance(arg, ChainFormatter):
        return "format_chain"
    if isinstance(arg, LegacyChainFormatter):
        return "format_error"
    if isinstance(arg, Formatter):
        return "format_verb"
    return "__str__"


class Printer:
    """Formats operands into the buffer of its `RenderState`.

    Also satisfies the `State` protocol, so a `Formatter` value can write
    straight into the printer that is formatting it.
    """

    __slots__ = ("state", "arg", "erroring", "reordered", "good_arg_num")

    def __init__(self, state: RenderState | None = None) -> None:
        self.state = state if state is not None else RenderState()
        self.arg: object = None
        # Set while writing a %!verb(...) diagnostic, to avoid recursing into
        # the argument's own formatting methods.
        self.erroring = False
        self.reordered = False
        self.good_arg_num = True

    def reset(self) -> None:
        self.state.reset()
        self.arg = None
        self.erroring = False
        self.reordered = False
        self.good_arg_num = True

    def buffered(self) -> int:
        return len(self.state.buf)

    def getvalue(self) -> str:
        return self.state.buf.getvalue()

    # State protocol

    def write(self, text: str) -> int:
        self.state.buf.write(text)
        return len(text)

    def width(self) -> tuple[int, bool]:
        return self.state.width_info()

    def precision(self) -> tuple[int, bool]:
        return self.state.precision_info()

    def flag(self, c: str) -> bool:
        return self.state.flag(c)

    # Padding and strings

    def _pad(self, s: str, fill: str | None = None) -> None:
        st = self.state
        n = st.width - len(s) if st.flags.width_present else 0
        if n <= 0:
            st.buf.write(s)
            return
        if st.flags.minus:
            st.buf.write(s + " " * n)
            return
        if fill is None:
            fill = "0" if st.flags.zero else " "
        st.buf.write(fill * n + s)

    def _truncate(self, s: str) -> str:
        st = self.state
        if st.flags.precision_present and len(s) > st.precision:
            return s[: st.precision]
        return s

    def fmt_s(self, s: str) -> None:
        """Write s truncated to the precision and padded to the width."""
        self._pad(self._truncate(s))

    def _fmt_q(self, s: str) -> None:
        s = self._truncate(s)
        f = self.state.flags
        if f.sharp and can_backquote(s):
            self._pad("`" + s + "`")
        else:
            self._pad(quote(s, ascii_only=f.plus))

    def _fmt_hex(self, data: bytes, digits: str) -> None:
        st = self.state
        f = st.flags
        length = len(data)
        if f.precision_present and st.precision < length:
            length = st.precision
        if length <= 0:
            self._pad("")
            return
        parts: list[str] = []
        for i in range(length):
            if f.space and i > 0:
                parts.append(" ")
            if f.sharp and (f.space or i == 0):
                parts.append("0" + digits[16])
            b = data[i]
            parts.append(digits[b >> 4] + digits[b & 0xF])
        self._pad("".join(parts))

    def fmt_string(self, s: str, verb: str) -> None:
        """Write s for one of the string verbs."""
        if verb in ("v", "s"):
            self.fmt_s(s)
        elif verb == "q":
            self._fmt_q(s)
        elif verb == "x":
            self._fmt_hex(s.encode("utf-8", "surrogatepass"), LDIGITS)
        elif verb == "X":
            self._fmt_hex(s.encode("utf-8", "surrogatepass"), UDIGITS)
        else:
            self.bad_verb(verb)

    def _fmt_bytes(self, data: bytes, verb: str) -> None:
        if verb == "s":
            self.fmt_s(data.decode("utf-8", "replace"))
        elif verb == "q":
            self._fmt_q(data.decode("utf-8", "replace"))
        elif verb == "x":
            self._fmt_hex(data, LDIGITS)
        elif verb == "X":
            self._fmt_hex(data, UDIGITS)
        elif verb == "v":
            self.fmt_s(str(data))
        else:
            self.bad_verb(verb)

    # Numbers

    def _fmt_bool(self, value: bool, verb: str) -> None:
        if verb in ("t", "v"):
            self._pad(str(value), fill=" ")
        else:
            self.bad_verb(verb)

    def _fmt_int(self, n: int, verb: str) -> None:
        st = self.state
        f = st.flags
        if verb in ("v", "d"):
            digits = str(abs(n))
        elif verb == "b":
            digits = format(abs(n), "b")
        elif verb in ("o", "O"):
            digits = format(abs(n), "o")
        elif verb == "x":
            digits = format(abs(n), "x")
        elif verb == "X":
            digits = format(abs(n), "X")
        elif verb == "c":
            self._pad(chr(n) if 0 <= n <= 0x10FFFF else "\ufffd")
            return
        elif verb == "q":
            self._pad(quote_char(n, ascii_only=f.plus))
            return
        else:
            self.bad_verb(verb)
            return

        if f.precision_present:
            if st.precision == 0 and n == 0:
                self._pad("", fill=" ")
                return
            digits = digits.rjust(st.precision, "0")

        prefix = ""
        if verb == "O":
            prefix = "0o"
        elif f.sharp:
            if verb == "b":
                prefix = "0b"
            elif verb == "o" and not digits.startswith("0"):
                prefix = "0"
            elif verb == "x":
                prefix = "0x"
            elif verb == "X":
                prefix = "0X"

        sign = "-" if n < 0 else "+" if f.plus else " " if f.space else ""
        head = sign + prefix
        if f.zero and f.width_present and not f.minus and not f.precision_present:
            digits = digits.rjust(st.width - len(head), "0")
        self._pad(head + digits, fill=" ")

    def _fmt_float(self, x: float, verb: str) -> None:
        st = self.state
        f = st.flags
        if verb not in ("v", "e", "E", "f", "F", "g", "G"):
            self.bad_verb(verb)
            return

        finite = math.isfinite(x)
        negative = not math.isnan(x) and math.copysign(1.0, x) < 0
        magnitude = abs(x)
        if verb in ("v", "g", "G") and not f.precision_present:
            body = repr(magnitude)
            if verb == "G":
                body = body.upper()
        else:
            spec = "#" if f.sharp else ""
            if f.precision_present:
                spec += f".{st.precision}"
            body = format(magnitude, spec + ("g" if verb == "v" else verb))

        sign = "-" if negative else "+" if f.plus else " " if f.space else ""
        if finite and f.zero and f.width_present and not f.minus:
            body = body.rjust(st.width - len(sign), "0")
        self._pad(sign + body, fill=" ")

    # Diagnostics

    def bad_verb(self, verb: str) -> None:
        """Write the `%!verb(type=value)` diagnostic for the current argument."""
        self.erroring = True
        buf = self.state.buf
        buf.write("%!" + verb + "(")
        if self.arg is not None:
            buf.write(type(self.arg).__name__ + "=")
            self.print_arg(self.arg, "v")
        else:
            buf.write("None")
        buf.write(")")
        self.erroring = False

    def _catch_panic(self, arg: object, verb: str, method: str, exc: Exception) -> None:
        logger.debug("%s.%s raised while formatting", type(arg).__name__, method, exc_info=exc)
        self.state.buf.write(f"%!{verb}(PANIC={method} method: {_safe_str(exc)})")

    # Arguments

    def _handle_methods(self, verb: str) -> bool:
        if self.erroring:
            return False
        arg = self.arg
        if is_error(arg):
            from .chain import render_error

            saved = replace(self.state.flags)
            try:
                if render_error(self, verb, arg):
                    return True
            except Exception as exc:  # noqa: BLE001
                self.state.flags = saved
                method = "raw_string" if saved.sharp_v else _method_name(arg)
                self._catch_panic(arg, verb, method, exc)
                return True

        if isinstance(arg, Formatter):
            try:
                arg.format_verb(self, verb)
            except Exception as exc:  # noqa: BLE001
                self._catch_panic(arg, verb, "format_verb", exc)
            return True

        if self.state.flags.sharp_v:
            method = "raw_string" if isinstance(arg, RawRepresentable) else "__repr__"
            try:
                text = arg.raw_string() if isinstance(arg, RawRepresentable) else repr(arg)
            except Exception as exc:  # noqa: BLE001
                self._catch_panic(arg, verb, method, exc)
                return True
            self.fmt_s(text)
            return True

        return False

    def print_arg(self, arg: object, verb: str) -> None:
        """Format one operand for verb."""
        self.arg = arg
        if arg is None:
            if verb in ("v", "s"):
                self.fmt_s("None")
            elif verb == "T":
                self.fmt_s("NoneType")
            else:
                self.bad_verb(verb)
            return

        if verb == "T":
            self.fmt_s(type(arg).__name__)
            return

        if self._handle_methods(verb):
            return

        if isinstance(arg, bool):
            self._fmt_bool(arg, verb)
        elif isinstance(arg, int):
            self._fmt_int(arg, verb)
        elif isinstance(arg, float):
            self._fmt_float(arg, verb)
        elif isinstance(arg, str):
            self.fmt_string(arg, verb)
        elif isinstance(arg, (bytes, bytearray)):
            self._fmt_bytes(bytes(arg), verb)
        elif verb in _STRING_VERBS:
            try:
                text = str(arg)
            except Exception as exc:  # noqa: BLE001
                self._catch_panic(arg, verb, "__str__", exc)
                return
            self.fmt_string(text, verb)
        else:
            self.bad_verb(verb)

    def do_print(self, args: Sequence[object]) -> None:
        """Format operands with %v, adding spaces between non-string neighbours."""
        prev_string = False
        for i, arg in enumerate(args):
            is_string = isinstance(arg, str)
            if i > 0 and not is_string and not prev_string:
                self.state.buf.write(" ")
            self.print_arg(arg, "v")
            prev_string = is_string

    def do_println(self, args: Sequence[object]) -> None:
        for i, arg in enumerate(args):
            if i > 0:
                self.state.buf.write(" ")
            self.print_arg(arg, "v")
        self.state.buf.write("\n")

    def _arg_number(
        self, arg_num: int, template: str, i: int, num_args: int
    ) -> tuple[int, int, bool]:
        if i >= len(template) or template[i] != "[":
            return arg_num, i, False
        self.reordered = True
        index, wid, ok = _parse_arg_number(template[i:])
        if ok and 0 <= index < num_args:
            return index, i + wid, True
        self.good_arg_num = False
        return arg_num, i + wid, ok

    def do_printf(self, template: str, args: Sequence[object]) -> None:
        """Format args according to template."""
        st = self.state
        buf = st.buf
        end = len(template)
        arg_num = 0
        after_index = False
        self.reordered = False
        i = 0
        while i < end:
            self.good_arg_num = True
            last = i
            i = template.find("%", i)
            if i < 0:
                i = end
            if i > last:
                buf.write(template[last:i])
            if i >= end:
                break
            i += 1

            st.clear_flags()
            f = st.flags
            while i < end:
                c = template[i]
                if c == "#":
                    f.sharp = True
                elif c == "0":
                    f.zero = not f.minus
                elif c == "+":
                    f.plus = True
                elif c == "-":
                    f.minus = True
                    f.zero = False
                elif c == " ":
                    f.space = True
                else:
                    break
                i += 1

            arg_num, i, after_index = self._arg_number(arg_num, template, i, len(args))

            if i < end and template[i] == "*":
                i += 1
                st.width, f.width_present, arg_num = _int_from_arg(args, arg_num)
                if not f.width_present:
                    buf.write("%!(BADWIDTH)")
                if st.width < 0:
                    st.width = -st.width
                    f.minus = True
                    f.zero = False
                after_index = False
            else:
                st.width, f.width_present, i = _parse_num(template, i, end)
                if after_index and f.width_present:
                    self.good_arg_num = False

            if i + 1 < end and template[i] == ".":
                i += 1
                if after_index:
                    self.good_arg_num = False
                arg_num, i, after_index = self._arg_number(arg_num, template, i, len(args))
                if i < end and template[i] == "*":
                    i += 1
                    st.precision, f.precision_present, arg_num = _int_from_arg(args, arg_num)
                    if st.precision < 0:
                        st.precision = 0
                        f.precision_present = False
                    if not f.precision_present:
                        buf.write("%!(BADPREC)")
                    after_index = False
                else:
                    st.precision, f.precision_present, i = _parse_num(template, i, end)
                    if not f.precision_present:
                        st.precision = 0
                        f.precision_present = True

            if not after_index:
                arg_num, i, after_index = self._arg_number(arg_num, template, i, len(args))

            if i >= end:
                buf.write("%!(NOVERB)")
                break

            verb = template[i]
            i += 1
            if verb == "%":
                buf.write("%")
            elif not self.good_arg_num:
                buf.write(f"%!{verb}(BADINDEX)")
            elif arg_num >= len(args):
                buf.write(f"%!{verb}(MISSING)")
            else:
                if verb == "v":
                    f.sharp_v, f.sharp = f.sharp, False
                    f.plus_v, f.plus = f.plus, False
                self.print_arg(args[arg_num], verb)
                arg_num += 1

        if not self.reordered and arg_num < len(args):
            st.clear_flags()
            buf.write("%!(EXTRA ")
            for k, arg in enumerate(args[arg_num:]):
                if k > 0:
                    buf.write(", ")
                if arg is None:
                    buf.write("None")
                else:
                    buf.write(type(arg).__name__ + "=")
                    self.print_arg(arg, "v")
            buf.write(")")


printer_pool: PrinterPool[Printer] = PrinterPool(Printer)


def sprintf(template: str, *args: object) -> str:
    """Format according to template and return the resulting string."""
    with printer_pool.acquire() as p:
        p.do_printf(template, args)
        return p.getvalue()


def sprint(*args: object) -> str:
    """Format operands with %v; spaces go between operands when neither is a str."""
    with printer_pool.acquire() as p:
        p.do_print(args)
        return p.getvalue()


def sprintln(*args: object) -> str:
    """Format operands with %v, space-separated, with a trailing newline."""
    with printer_pool.acquire() as p:
        p.do_println(args)
        return p.getvalue()


def fprintf(out: SupportsWrite, template: str, *args: object) -> int:
    """Format according to template and write to out; returns the length written."""
    text = sprintf(template, *args)
    out.write(text)
    return len(text)


def fprint(out: SupportsWrite, *args: object) -> int:
    text = sprint(*args)
    out.write(text)
    return len(text)
