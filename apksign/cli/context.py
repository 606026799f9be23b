from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import typer

from apksign.core.config import CONFIG_FILENAME, Config, load_config_or_default
from apksign.core.errors import ErrorCode
from apksign.core.result import Err
from apksign.output.console import ConsoleProtocol, RichConsole
from apksign.output.errors import print_config_error


@dataclass(frozen=True, slots=True)
class CLIContext:
    project_dir: Path
    config: Config
    console: ConsoleProtocol


def build_context(project: Path | None = None) -> CLIContext:
    console = RichConsole()

    try:
        project_dir = (project or Path.cwd()).expanduser().resolve()
    except OSError as e:
        console.error(f"invalid --project: {e}")
        raise typer.Exit(code=int(ErrorCode.USER_ERROR))

    if not project_dir.is_dir():
        console.error(f"project directory not found: {project_dir}")
        raise typer.Exit(code=int(ErrorCode.USER_ERROR))

    config_result = load_config_or_default(project_dir / CONFIG_FILENAME)
    if isinstance(config_result, Err):
        print_config_error(config_result.error, console)
        raise typer.Exit(code=int(ErrorCode.IO_ERROR))

    return CLIContext(project_dir=project_dir, config=config_result.value, console=console)
