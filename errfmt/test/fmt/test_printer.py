"""Tests for errfmt.fmt.printer module."""

from __future__ import annotations

import io

import pytest

from errfmt.fmt.printer import Printer, fprint, fprintf, sprint, sprintf, sprintln
from errfmt.fmt.protocols import State


class Tagged:
    """Formatter that reports the verb and flags it was called with."""

    def __init__(self) -> None:
        self.seen: list[tuple[str, bool, tuple[int, bool]]] = []

    def format_verb(self, state: State, verb: str) -> None:
        self.seen.append((verb, state.flag("+"), state.width()))
        state.write(f"<{verb}>")


class BadStr:
    def __str__(self) -> str:
        raise ValueError("boom")


class Raw:
    def raw_string(self) -> str:
        return "Raw{}"


class TestIntegers:
    @pytest.mark.parametrize(
        ("template", "arg", "expected"),
        [
            ("%d", 42, "42"),
            ("%v", -7, "-7"),
            ("%5d|", 42, "   42|"),
            ("%-5d|", 42, "42   |"),
            ("%05d", 42, "00042"),
            ("%05d", -42, "-0042"),
            ("%+d", 5, "+5"),
            ("% d", 5, " 5"),
            ("%x", 255, "ff"),
            ("%X", 255, "FF"),
            ("%#x", 255, "0xff"),
            ("%o", 8, "10"),
            ("%#o", 8, "010"),
            ("%O", 8, "0o10"),
            ("%b", 5, "101"),
            ("%#b", 5, "0b101"),
            ("%.3d", 7, "007"),
            ("%6.3d|", 7, "   007|"),
            ("%.0d", 0, ""),
            ("%c", 65, "A"),
            ("%q", 65, "'A'"),
        ],
    )
    def test_verbs(self, template: str, arg: int, expected: str) -> None:
        assert sprintf(template, arg) == expected

    def test_invalid_code_point_for_c(self) -> None:
        assert sprintf("%c", -1) == "\ufffd"

    def test_bool_is_not_an_int(self) -> None:
        assert sprintf("%t %v", True, False) == "True False"
        assert sprintf("%d", True) == "%!d(bool=True)"


class TestFloats:
    @pytest.mark.parametrize(
        ("template", "arg", "expected"),
        [
            ("%v", 1.5, "1.5"),
            ("%.2f", 3.14159, "3.14"),
            ("%8.3f", 3.14159, "   3.142"),
            ("%08.3f", -3.14159, "-003.142"),
            ("%-8.1f|", 2.0, "2.0     |"),
            ("%e", 1234.5, "1.234500e+03"),
            ("%+.1f", 2.0, "+2.0"),
            ("%g", 0.1, "0.1"),
        ],
    )
    def test_verbs(self, template: str, arg: float, expected: str) -> None:
        assert sprintf(template, arg) == expected

    def test_bad_verb(self) -> None:
        assert sprintf("%d", 1.5) == "%!d(float=1.5)"


class TestStrings:
    @pytest.mark.parametrize(
        ("template", "arg", "expected"),
        [
            ("%s", "abc", "abc"),
            ("%v", "abc", "abc"),
            ("%10s|", "abc", "       abc|"),
            ("%-10s|", "abc", "abc       |"),
            ("%.2s", "abc", "ab"),
            ("%5.1s|", "abc", "    a|"),
            ("%q", 'a"b\n', '"a\\"b\\n"'),
            ("%#q", "abc", "`abc`"),
            ("%#q", "a`b", '"a`b"'),
            ("%+q", "\u00e9", '"\\u00e9"'),
            ("%x", "hi", "6869"),
            ("% x", "hi", "68 69"),
            ("%#x", "hi", "0x6869"),
            ("%# x", "hi", "0x68 0x69"),
            ("%X", "\u00e9", "C3A9"),
            ("%.1x", "hi", "68"),
        ],
    )
    def test_verbs(self, template: str, arg: str, expected: str) -> None:
        assert sprintf(template, arg) == expected

    def test_bytes(self) -> None:
        assert sprintf("%s", b"hi") == "hi"
        assert sprintf("%x", b"\x01\xff") == "01ff"
        assert sprintf("%q", bytearray(b"a\tb")) == '"a\\tb"'

    def test_sharp_v_is_repr(self) -> None:
        assert sprintf("%#v", "abc") == "'abc'"
        assert sprintf("%#v", [1, "a"]) == "[1, 'a']"


class TestOtherValues:
    def test_none(self) -> None:
        assert sprintf("%v %s", None, None) == "None None"
        assert sprintf("%T", None) == "NoneType"
        assert sprintf("%d", None) == "%!d(None)"

    def test_type_verb(self) -> None:
        assert sprintf("%T %T %T", 1, "a", [1]) == "int str list"

    def test_objects_use_str(self) -> None:
        assert sprintf("%v", [1, "a"]) == "[1, 'a']"
        assert sprintf("%q", ["a"]) == "\"['a']\""

    def test_objects_reject_numeric_verbs(self) -> None:
        assert sprintf("%d", [1]) == "%!d(list=[1])"

    def test_raw_string_for_sharp_v(self) -> None:
        assert sprintf("%#v", Raw()) == "Raw{}"
        assert sprintf("%#10v|", Raw()) == "     Raw{}|"

    def test_formatter_owns_output(self) -> None:
        value = Tagged()
        assert sprintf("%x|%+v", value, value) == "<x>|<v>"
        assert value.seen[0] == ("x", False, (0, False))
        assert value.seen[1] == ("v", True, (0, False))

    def test_formatter_sees_width(self) -> None:
        value = Tagged()
        sprintf("%7s", value)
        assert value.seen == [("s", False, (7, True))]

    def test_str_panic_is_reported_inline(self) -> None:
        assert sprintf("%v", BadStr()) == "%!v(PANIC=__str__ method: boom)"


class TestDirectives:
    def test_percent_literal(self) -> None:
        assert sprintf("100%%") == "100%"

    def test_no_verb(self) -> None:
        assert sprintf("abc%") == "abc%!(NOVERB)"

    def test_missing_argument(self) -> None:
        assert sprintf("%d %s", 1) == "1 %!s(MISSING)"

    def test_extra_arguments(self) -> None:
        assert sprintf("%d", 1, 2, "x") == "1%!(EXTRA int=2, str=x)"
        assert sprintf("hi", None) == "hi%!(EXTRA None)"

    def test_explicit_indexes(self) -> None:
        assert sprintf("%[2]d %[1]d", 1, 2) == "2 1"
        assert sprintf("%[1]d %[1]x", 255) == "255 ff"
        assert sprintf("%[2]d %d", 1, 2, 3) == "2 3"

    def test_bad_index(self) -> None:
        assert sprintf("%[3]d", 1) == "%!d(BADINDEX)"
        assert sprintf("%[x]d", 1) == "%!d(BADINDEX)"

    def test_star_width_and_precision(self) -> None:
        assert sprintf("%*d", 5, 42) == "   42"
        assert sprintf("%*d|", -3, 7) == "7  |"
        assert sprintf("%.*s", 2, "abc") == "ab"
        assert sprintf("%[2]*[1]d", 42, 5) == "   42"

    def test_bad_width_and_precision(self) -> None:
        assert sprintf("%*d", "x", 1) == "%!(BADWIDTH)1"
        assert sprintf("%.*d", "x", 1) == "%!(BADPREC)1"

    def test_empty_precision_means_zero(self) -> None:
        assert sprintf("%.s|", "abc") == "|"


class TestPrintFunctions:
    def test_sprint_spaces_between_non_strings(self) -> None:
        assert sprint("a", 1, 2, "b") == "a1 2b"
        assert sprint() == ""

    def test_sprintln_always_spaces(self) -> None:
        assert sprintln("a", 1, "b") == "a 1 b\n"

    def test_fprintf_and_fprint(self) -> None:
        out = io.StringIO()
        n = fprintf(out, "%s=%d;", "x", 1)
        fprint(out, 1, 2)
        assert out.getvalue() == "x=1;1 2"
        assert n == 4

    def test_printer_state_protocol(self) -> None:
        p = Printer()
        assert p.write("abc") == 3
        assert p.getvalue() == "abc"
        assert p.buffered() == 3
        assert p.width() == (0, False)
        p.reset()
        assert p.getvalue() == ""
