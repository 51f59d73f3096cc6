"""
PlanSight CLI.

Usage:
    plansight serve
    plansight serve --host 0.0.0.0 --port 8080
    plansight --version
"""

from __future__ import annotations

import os
from typing import Annotated, Optional

import typer
import uvicorn
from rich.console import Console

from plansight import __version__
from plansight.config import get_config
from plansight.exceptions import ConfigurationError
from plansight.logging_setup import configure_logging
from plansight.web.settings import get_web_settings

app = typer.Typer(
    name="plansight",
    help="Heuristic advisor and tree viewer for EXPLAIN (FORMAT JSON) plans",
    no_args_is_help=True,
)

console = Console()
error_console = Console(stderr=True)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"PlanSight version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        Optional[bool],
        typer.Option(
            "--version",
            "-v",
            help="Show version and exit.",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """PlanSight - query plan advisor."""


@app.command()
def serve(
    host: Annotated[
        Optional[str],
        typer.Option("--host", help="Bind address (default: PLANSIGHT_WEB_HOST or 127.0.0.1)"),
    ] = None,
    port: Annotated[
        Optional[int],
        typer.Option("--port", "-p", help="Bind port (default: PLANSIGHT_WEB_PORT, PORT, or 8000)"),
    ] = None,
    reload: Annotated[
        bool,
        typer.Option("--reload", help="Enable auto-reload for development"),
    ] = False,
) -> None:
    """
    Start the web service.

    Examples:

        $ plansight serve
        $ PORT=8080 plansight serve
    """
    try:
        config = get_config()
        settings = get_web_settings()
    except ConfigurationError as e:
        error_console.print(f"[red]Configuration error:[/red] {e.message}")
        raise typer.Exit(1)

    configure_logging(config.log_level)

    bind_host = host or settings.host
    bind_port = port or settings.port
    # The app factory reads settings from the environment (also in reload workers)
    os.environ["PLANSIGHT_WEB_HOST"] = bind_host
    os.environ["PLANSIGHT_WEB_PORT"] = str(bind_port)

    console.print(f"Starting PlanSight on [bold]http://{bind_host}:{bind_port}[/bold]")
    console.print(f"  API docs: http://{bind_host}:{bind_port}/api/docs")
    console.print(f"  Web UI:   http://{bind_host}:{bind_port}/")

    uvicorn.run(
        "plansight.web.app:create_app",
        host=bind_host,
        port=bind_port,
        reload=reload,
        factory=True,
        log_config=None,
    )
