"""Core types: configuration, result values and exit codes."""

from .config import (
    Config,
    ConfigError,
    config_from_env,
    configure,
    get_config,
    load_config,
)
from .errors import ErrorCode
from .result import Err, Ok, Result

__all__ = [
    # config
    "Config",
    "ConfigError",
    "config_from_env",
    "configure",
    "get_config",
    "load_config",
    # errors
    "ErrorCode",
    # result
    "Err",
    "Ok",
    "Result",
]
