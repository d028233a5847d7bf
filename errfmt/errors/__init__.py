"""Chain-aware error values and their constructors."""

from .build import build_error, detect_cause, errorf, new
from .frame import Frame
from .types import ChainError, LeafError, WrappedError, unwrap

__all__ = [
    "ChainError",
    "Frame",
    "LeafError",
    "WrappedError",
    "build_error",
    "detect_cause",
    "errorf",
    "new",
    "unwrap",
]
