"""Chain-aware error construction and printf-style rendering.

    from errfmt import errorf, sprintf

    err = errorf("open %s: %v", "/tmp/f", PermissionError("permission denied"))
    str(err)             # 'open /tmp/f: permission denied'
    sprintf("%+v", err)  # one segment per level, each with its call site
"""

from errfmt.errors import (
    ChainError,
    Frame,
    LeafError,
    WrappedError,
    build_error,
    detect_cause,
    errorf,
    new,
    unwrap,
)
from errfmt.fmt import (
    ChainFormatter,
    ErrorPrinter,
    Formatter,
    LegacyChainFormatter,
    RawRepresentable,
    State,
    fprint,
    fprintf,
    sprint,
    sprintf,
    sprintln,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # errors
    "ChainError",
    "Frame",
    "LeafError",
    "WrappedError",
    "build_error",
    "detect_cause",
    "errorf",
    "new",
    "unwrap",
    # fmt
    "ChainFormatter",
    "ErrorPrinter",
    "Formatter",
    "LegacyChainFormatter",
    "RawRepresentable",
    "State",
    "fprint",
    "fprintf",
    "sprint",
    "sprintf",
    "sprintln",
]
