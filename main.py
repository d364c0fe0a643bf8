"""
Portfolio Engine - Entrypoint

- Loads config
- Initializes engine state
- Starts CLI
"""
import sys
from typing import Optional

import typer
from loguru import logger
from rich.console import Console
from rich.markup import escape

from engine_core.config import DEFAULT_CONFIG_PATH, load_config
from engine_core.errors import EngineInitError
from engine_core.interpreter import build_interpreter
from engine_core.state import engine_init
from ui.cli import start_cli
from ui.terminal import TerminalInput, is_interactive
from utils.logger import setup_logging

EXIT_INIT_FAILURE = 3

app = typer.Typer(add_completion=False, help="Portfolio Engine interactive shell")


def _startup_failed(e: Exception):
    Console(stderr=True, highlight=False).print(f"[bold red]Startup failed:[/bold red] {escape(str(e))}")
    raise typer.Exit(code=EXIT_INIT_FAILURE)

@app.command()
def run(
    config: str = typer.Option(DEFAULT_CONFIG_PATH, "--config", "-c", help="Path to the YAML config file."),
    log_dir: Optional[str] = typer.Option(None, "--log-dir", help="Override LOG_DIR from the config."),
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Override LOG_LEVEL from the config."),
    version: bool = typer.Option(False, "--version", help="Print the configured engine name and version."),
):
    """
    Start an interactive session reading commands from stdin.
    """
    try:
        cfg = load_config(config)
    except EngineInitError as e:
        _startup_failed(e)

    if version:
        typer.echo(cfg.banner)
        raise typer.Exit()

    try:
        if log_dir:
            cfg.log_dir = log_dir
        if log_level:
            cfg.log_level = log_level
        setup_logging(cfg.log_dir, cfg.log_level)
        state = engine_init(cfg)
    except (EngineInitError, OSError, ValueError) as e:
        _startup_failed(e)

    if hasattr(sys.stdin, "reconfigure"):
        # undecodable bytes become U+FFFD instead of ending the session
        sys.stdin.reconfigure(errors="replace")

    interpreter = build_interpreter()
    if is_interactive():
        interpreter.stream = TerminalInput(cfg.prompt, interpreter.commands)
    exit_code = start_cli(state, interpreter, Console(highlight=False))
    logger.complete()
    raise typer.Exit(code=exit_code)


if __name__ == "__main__":
    app()
