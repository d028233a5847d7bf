from __future__ import annotations

from collections.abc import Iterator

import pytest

from errfmt.core.config import Config, configure


@pytest.fixture(autouse=True)
def _restore_config() -> Iterator[None]:  # pyright: ignore[reportUnusedFunction]
    """Undo any configure() a test performs."""
    previous = configure(Config())
    try:
        yield
    finally:
        configure(previous)


@pytest.fixture
def no_frames() -> None:
    """Disable call-site capture so rendered output is exact."""
    configure(Config(capture_frames=False))
