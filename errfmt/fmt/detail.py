"""Views over a RenderState handed to error values during a chain walk.

`DetailPrinter` is what chain formatters see: a print surface that knows
whether a detail section is open and suppresses or indents text
accordingly. `IndentingState` is the `State` given to a `Formatter` value
when detail output was requested. Both write into the shared buffer.
"""

from __future__ import annotations

from .printer import sprint, sprintf
from .state import DETAIL_SEP, RenderState

__all__ = ["DetailPrinter", "IndentingState"]


class IndentingState:
    """`State` that indents continuation lines while `indent` is on."""

    __slots__ = ("_state",)

    def __init__(self, state: RenderState) -> None:
        self._state = state

    def write(self, text: str) -> int:
        st = self._state
        if not st.in_detail or st.plus_v:
            st.buf.write(text.replace("\n", DETAIL_SEP) if st.indent else text)
        return len(text)

    def width(self) -> tuple[int, bool]:
        return self._state.width_info()

    def precision(self) -> tuple[int, bool]:
        return self._state.precision_info()

    def flag(self, c: str) -> bool:
        return self._state.flag(c)


class DetailPrinter:
    """Print surface passed to `format_chain` / `format_error`.

    Text written after `detail()` is kept only for `%+v`; otherwise it is
    dropped. In `%+v` mode the newlines of detail text are indented.
    """

    __slots__ = ("_state", "_out")

    def __init__(self, state: RenderState) -> None:
        self._state = state
        self._out = IndentingState(state)

    def _suppressed(self) -> bool:
        return self._state.in_detail and not self._state.plus_v

    def print(self, *args: object) -> None:
        if not self._suppressed():
            self._out.write(sprint(*args))

    def printf(self, template: str, *args: object) -> None:
        if not self._suppressed():
            self._out.write(sprintf(template, *args))

    def detail(self) -> bool:
        st = self._state
        was_in_detail = st.in_detail
        st.in_detail = True
        st.indent = st.plus_v
        if st.plus_v and not was_in_detail:
            self._out.write(":\n")
        return st.plus_v

    def width(self) -> tuple[int, bool]:
        return self._state.width_info()

    def precision(self) -> tuple[int, bool]:
        return self._state.precision_info()

    def flag(self, c: str) -> bool:
        return self._state.flag(c)
