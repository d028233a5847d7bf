"""Tests for errfmt.fmt.state module."""

from __future__ import annotations

from errfmt.fmt.state import DETAIL_SEP, Buffer, FmtFlags, RenderState


class TestBuffer:
    def test_write_and_getvalue(self) -> None:
        buf = Buffer()
        buf.write("ab")
        buf.write("")
        buf.write("cd")
        assert buf.getvalue() == "abcd"
        assert len(buf) == 4

    def test_endswith_spans_parts(self) -> None:
        buf = Buffer()
        buf.write("x\n")
        buf.write("  ")
        buf.write("  ")
        assert buf.endswith(DETAIL_SEP)
        assert not buf.endswith("y" + DETAIL_SEP)

    def test_endswith_longer_than_buffer(self) -> None:
        buf = Buffer()
        buf.write("ab")
        assert not buf.endswith("xab")

    def test_trim_across_parts(self) -> None:
        buf = Buffer()
        buf.write("abc")
        buf.write("\n ")
        buf.write("   ")
        buf.trim(len(DETAIL_SEP))
        assert buf.getvalue() == "abc"
        assert len(buf) == 3

    def test_trim_more_than_size(self) -> None:
        buf = Buffer()
        buf.write("ab")
        buf.trim(10)
        assert buf.getvalue() == ""
        assert len(buf) == 0

    def test_reset(self) -> None:
        buf = Buffer()
        buf.write("abc")
        buf.reset()
        assert buf.getvalue() == ""
        assert len(buf) == 0


class TestRenderState:
    def test_defaults(self) -> None:
        st = RenderState()
        assert st.flags == FmtFlags()
        assert st.width_info() == (0, False)
        assert st.precision_info() == (0, False)
        assert st.in_detail is False
        assert st.indent is False

    def test_flag_merges_v_variants(self) -> None:
        st = RenderState()
        st.flags.plus_v = True
        st.flags.sharp_v = True
        assert st.flag("+") is True
        assert st.flag("#") is True
        assert st.flag("-") is False
        assert st.flag("?") is False

    def test_flag_plain_bits(self) -> None:
        st = RenderState(flags=FmtFlags(minus=True, space=True, zero=True))
        assert st.flag("-") is True
        assert st.flag(" ") is True
        assert st.flag("0") is True

    def test_clear_flags_keeps_buffer_and_detail(self) -> None:
        st = RenderState()
        st.buf.write("kept")
        st.flags.width_present = True
        st.width = 8
        st.in_detail = True
        st.clear_flags()
        assert st.flags == FmtFlags()
        assert st.width == 0
        assert st.buf.getvalue() == "kept"
        assert st.in_detail is True

    def test_reset_clears_everything(self) -> None:
        st = RenderState()
        st.buf.write("junk")
        st.flags.plus_v = True
        st.precision = 3
        st.flags.precision_present = True
        st.in_detail = True
        st.indent = True
        st.reset()
        assert st.buf.getvalue() == ""
        assert st.flags == FmtFlags()
        assert st.precision == 0
        assert st.in_detail is False
        assert st.indent is False
