"""Typed configuration loading and access.

Settings live either in a dedicated `errfmt.toml`:

    [errfmt]
    max_chain_depth = 50
    capture_frames = false

or in the `[tool.errfmt]` table of a `pyproject.toml`. Missing or invalid
values fall back to the defaults below.
"""

from __future__ import annotations

import logging
import os
import threading
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from .result import Err, Ok, Result
from .structured import StrDict, as_str_dict, get_bool, get_positive_int, get_table

__all__ = [
    "Config",
    "ConfigError",
    "CONFIG_ENV_VAR",
    "config_from_env",
    "configure",
    "get_config",
    "load_config",
]

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "ERRFMT_CONFIG"

DEFAULT_MAX_CHAIN_DEPTH = 100
DEFAULT_POOL_SIZE = 16
DEFAULT_MAX_POOLED_BUFFER = 64 * 1024


@dataclass(frozen=True, slots=True)
class ConfigError:
    """Error when config cannot be loaded or parsed."""

    message: str
    path: Path | None = None


@dataclass(frozen=True, slots=True)
class Config:
    """Render settings.

    Attributes:
        max_chain_depth: Most chain levels rendered before the walk is cut off.
        capture_frames: Whether constructed errors record their call site.
        pool_size: Most idle printers kept for reuse.
        max_pooled_buffer: Printers whose buffer grew past this many
            characters are dropped instead of pooled.
    """

    max_chain_depth: int = DEFAULT_MAX_CHAIN_DEPTH
    capture_frames: bool = True
    pool_size: int = DEFAULT_POOL_SIZE
    max_pooled_buffer: int = DEFAULT_MAX_POOLED_BUFFER

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> Config:
        """Create Config from the errfmt settings table."""
        capture = get_bool(data, "capture_frames")
        return cls(
            max_chain_depth=get_positive_int(data, "max_chain_depth") or DEFAULT_MAX_CHAIN_DEPTH,
            capture_frames=True if capture is None else capture,
            pool_size=get_positive_int(data, "pool_size") or DEFAULT_POOL_SIZE,
            max_pooled_buffer=get_positive_int(data, "max_pooled_buffer")
            or DEFAULT_MAX_POOLED_BUFFER,
        )


def _parse_toml(path: Path) -> Result[StrDict, ConfigError]:
    """Parse a TOML file, handling read and parse errors."""
    import tomllib

    try:
        data_obj: object = tomllib.loads(path.read_bytes().decode("utf-8"))
    except FileNotFoundError:
        return Err(ConfigError(f"Config file not found: {path}", path=path))
    except PermissionError:
        return Err(ConfigError(f"Permission denied reading: {path}", path=path))
    except tomllib.TOMLDecodeError as e:
        return Err(ConfigError(f"Invalid TOML syntax: {e}", path=path))
    except UnicodeDecodeError as e:
        return Err(ConfigError(f"Error reading config: {e}", path=path))

    data = as_str_dict(data_obj)
    if data is None:
        return Err(ConfigError("Config root must be a TOML table", path=path))
    return Ok(data)


def _settings_table(path: Path, data: StrDict) -> StrDict:
    if path.name == "pyproject.toml":
        tool = get_table(data, "tool") or {}
        return get_table(tool, "errfmt") or {}
    return get_table(data, "errfmt") or {}


def load_config(path: Path) -> Result[Config, ConfigError]:
    """Load configuration from `errfmt.toml` or `pyproject.toml`.

    Args:
        path: Path to the TOML file

    Returns:
        Ok(Config) on success, Err(ConfigError) on failure
    """
    result = _parse_toml(path)
    if isinstance(result, Err):
        return result

    config = Config.from_dict(_settings_table(path, result.value))
    logger.debug("loaded errfmt config from %s: %s", path, config)
    return Ok(config)


def config_from_env() -> Result[Config, ConfigError]:
    """Load the file named by `ERRFMT_CONFIG`, or defaults when unset."""
    raw = os.environ.get(CONFIG_ENV_VAR, "").strip()
    if not raw:
        return Ok(Config())
    return load_config(Path(raw).expanduser())


_lock = threading.Lock()
_current = Config()


def get_config() -> Config:
    """Return the active process-wide configuration."""
    return _current


def configure(config: Config) -> Config:
    """Install `config` as the active configuration and return the previous one."""
    global _current
    with _lock:
        previous = _current
        _current = config
    return previous
