from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import typer

from errfmt.core.config import Config, config_from_env, configure, load_config
from errfmt.core.errors import ErrorCode
from errfmt.core.result import Err, Ok
from errfmt.output.console import ConsoleProtocol, RichConsole


@dataclass(frozen=True, slots=True)
class CLIContext:
    config: Config
    console: ConsoleProtocol


def build_context(config_path: Path | None = None) -> CLIContext:
    """Load and install the configuration, then set up the console.

    An explicit `--config` wins over `ERRFMT_CONFIG`.
    """
    result = load_config(config_path) if config_path is not None else config_from_env()
    match result:
        case Ok(config):
            configure(config)
            return CLIContext(config=config, console=RichConsole())
        case Err(error):
            typer.echo(f"error: {error.message}", err=True)
            raise typer.Exit(code=int(ErrorCode.CONFIG_ERROR))
