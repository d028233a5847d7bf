"""Result type for explicit error handling.

Configuration loading reports failures as values instead of raising, so that
callers (the CLI, `config_from_env`) can decide whether a broken config file
is fatal.

Usage:
    match load_config(path):
        case Ok(config):
            configure(config)
        case Err(error):
            console.error(error.message)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeAlias, TypeVar

T = TypeVar("T")
E = TypeVar("E")

__all__ = ["Ok", "Err", "Result"]


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """A successful result.

    Attributes:
        value: The success value.
    """

    value: T


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """A failed result.

    Attributes:
        error: The error value.
    """

    error: E


Result: TypeAlias = Ok[T] | Err[E]
