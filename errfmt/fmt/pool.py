"""Pool of reusable printers.

Rendering an error with width, precision or one of the `q`/`x`/`X` verbs
needs an intermediate buffer, as does every `sprintf` call. Printers are
checked out of a pool for that and returned afterwards. A checked-out
printer belongs to exactly one caller until it is released, and it is fully
reset both before hand-out and on release.
"""

from __future__ import annotations

import threading
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from typing import Generic, Protocol, TypeVar

from errfmt.core.config import get_config

__all__ = ["Poolable", "PrinterPool"]


class Poolable(Protocol):
    def reset(self) -> None: ...

    def buffered(self) -> int:
        """Number of characters currently held in the buffer."""
        ...


P = TypeVar("P", bound=Poolable)


class PrinterPool(Generic[P]):
    """Thread-safe free list of printers.

    Limits default to the active configuration (`pool_size`,
    `max_pooled_buffer`) and are read on every release, so `configure()`
    takes effect without rebuilding the pool.
    """

    def __init__(
        self,
        factory: Callable[[], P],
        *,
        max_size: int | None = None,
        max_buffer: int | None = None,
    ) -> None:
        self._factory = factory
        self._max_size = max_size
        self._max_buffer = max_buffer
        self._free: list[P] = []
        self._lock = threading.Lock()

    @property
    def max_size(self) -> int:
        return self._max_size if self._max_size is not None else get_config().pool_size

    @property
    def max_buffer(self) -> int:
        if self._max_buffer is not None:
            return self._max_buffer
        return get_config().max_pooled_buffer

    def idle(self) -> int:
        """Number of printers waiting in the pool."""
        with self._lock:
            return len(self._free)

    @contextmanager
    def acquire(self) -> Iterator[P]:
        """Check out a clean printer; it is returned on every exit path."""
        with self._lock:
            item = self._free.pop() if self._free else None
        if item is None:
            item = self._factory()
        item.reset()
        try:
            yield item
        finally:
            self._release(item)

    def _release(self, item: P) -> None:
        # Oversized buffers are left to the garbage collector.
        if item.buffered() > self.max_buffer:
            return
        item.reset()
        with self._lock:
            if len(self._free) < self.max_size:
                self._free.append(item)
