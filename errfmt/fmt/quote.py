"""Quoting for the `%q` verb."""

from __future__ import annotations

__all__ = ["can_backquote", "quote", "quote_char"]

_ESCAPES = {
    "\a": "\\a",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\v": "\\v",
}


def _escape(ch: str, quote_ch: str, ascii_only: bool) -> str:
    if ch == quote_ch or ch == "\\":
        return "\\" + ch
    if ch in _ESCAPES:
        return _ESCAPES[ch]
    cp = ord(ch)
    if ascii_only:
        if cp < 0x80 and ch.isprintable():
            return ch
    elif ch.isprintable():
        return ch
    if cp < 0x20 or cp == 0x7F:
        return f"\\x{cp:02x}"
    if cp < 0x10000:
        return f"\\u{cp:04x}"
    return f"\\U{cp:08x}"


def quote(s: str, *, ascii_only: bool = False) -> str:
    """Double-quote `s`, escaping control and non-printable characters.

    With `ascii_only` every non-ASCII character is escaped as well.
    """
    return '"' + "".join(_escape(ch, '"', ascii_only) for ch in s) + '"'


def quote_char(cp: int, *, ascii_only: bool = False) -> str:
    """Single-quote the character with code point `cp`."""
    if cp < 0 or cp > 0x10FFFF:
        cp = 0xFFFD
    return "'" + _escape(chr(cp), "'", ascii_only) + "'"


def can_backquote(s: str) -> bool:
    """Whether `s` can be written as a raw backquoted literal."""
    for ch in s:
        if ch == "`" or ch == "\ufeff":
            return False
        if ch == "\t":
            continue
        if ord(ch) < 0x20 or ch == "\x7f":
            return False
    return True
