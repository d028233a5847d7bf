"""Rendering of error values and the chains of causes behind them.

`render_error` is called by the printer for every error argument. It picks
where to write (straight into the caller's buffer, or an intermediate one
that is copied back with padding, quoting or hex applied), then walks the
chain: each chain-aware error prints its own message and hands back its
cause, until an error without one, or one that is not chain-aware, ends it.

    %v   open /tmp/f: permission denied
    %+v  open /tmp/f:
             app.main
                 /src/app.py:12
         --- permission denied
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from errfmt.core.config import get_config

from .detail import DetailPrinter, IndentingState
from .printer import printer_pool
from .protocols import ChainFormatter, Formatter, LegacyChainFormatter, RawRepresentable
from .state import DETAIL_SEP, FmtFlags

if TYPE_CHECKING:
    from .printer import Printer

__all__ = ["DETAIL_CHAIN_SEP", "render_error"]

logger = logging.getLogger(__name__)

# Separator between levels in %+v output.
DETAIL_CHAIN_SEP = "\n--- "


def render_error(p: Printer, verb: str, err: object) -> bool:
    """Format err for verb into p.

    Returns False only for `%#v` on an error without `raw_string()`, leaving
    the caller to print its `repr()`. Every other verb is handled here,
    including unsupported ones, which produce a `%!verb(...)` diagnostic.
    """
    st = p.state

    # Same precedence as for ordinary values: %#v before %+v.
    if st.sharp_v:
        if isinstance(err, RawRepresentable):
            p.fmt_s(err.raw_string())
            return True
        return False

    if st.plus_v:
        # Width and precision have no meaning for the detailed view.
        st.flags = FmtFlags(plus_v=True)
        _walk(p, p, err, DETAIL_CHAIN_SEP)
        return True

    if verb in ("s", "v"):
        padded = st.flags.width_present and st.width != 0
        if not padded and not st.flags.precision_present:
            _walk(p, p, err, " ")
            return True
    elif verb not in ("q", "x", "X"):
        p.bad_verb(verb)
        return True

    with printer_pool.acquire() as w:
        _walk(p, w, err, " ")
        p.fmt_string(w.getvalue(), verb)
    return True


def _walk(p: Printer, w: Printer, err: object | None, sep: str) -> None:
    st = w.state
    detailed = p.state.plus_v
    limit = get_config().max_chain_depth
    depth = 0
    while err is not None:
        st.in_detail = False
        st.indent = False
        depth += 1

        if isinstance(err, ChainFormatter):
            err = err.format_chain(DetailPrinter(st))
        elif isinstance(err, LegacyChainFormatter):
            err = err.format_error(DetailPrinter(st))
        elif isinstance(err, Formatter):
            # The value owns the rest of the output; keep only the detail bit.
            st.flags = FmtFlags(plus_v=detailed)
            if detailed:
                st.indent = True
                err.format_verb(IndentingState(st), "v")
            else:
                err.format_verb(w, "v")
            return
        else:
            w.fmt_string(str(err), "s")
            return

        if err is None:
            return

        if not st.in_detail or not detailed:
            st.buf.write(":")
        # Drop the indent left behind by the last line of detail text.
        if st.buf.endswith(DETAIL_SEP):
            st.buf.trim(len(DETAIL_SEP))
        st.buf.write(sep)

        if depth >= limit:
            logger.warning(
                "error chain longer than %d levels; output truncated (cyclic chain?)", limit
            )
            st.buf.write(f"%!v(CHAIN>{limit})")
            return
