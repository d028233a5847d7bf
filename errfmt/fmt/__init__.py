"""printf-style formatting engine with chain-aware error rendering."""

from .chain import DETAIL_CHAIN_SEP, render_error
from .detail import DetailPrinter, IndentingState
from .printer import Printer, fprint, fprintf, printer_pool, sprint, sprintf, sprintln
from .protocols import (
    ChainFormatter,
    ErrorPrinter,
    Formatter,
    LegacyChainFormatter,
    RawRepresentable,
    State,
    is_error,
)
from .state import DETAIL_SEP, Buffer, FmtFlags, RenderState

__all__ = [
    # chain
    "DETAIL_CHAIN_SEP",
    "render_error",
    # detail
    "DetailPrinter",
    "IndentingState",
    # printer
    "Printer",
    "fprint",
    "fprintf",
    "printer_pool",
    "sprint",
    "sprintf",
    "sprintln",
    # protocols
    "ChainFormatter",
    "ErrorPrinter",
    "Formatter",
    "LegacyChainFormatter",
    "RawRepresentable",
    "State",
    "is_error",
    # state
    "DETAIL_SEP",
    "Buffer",
    "FmtFlags",
    "RenderState",
]
