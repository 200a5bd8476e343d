"""CLI commands for running the creatorkit HTTP API."""

from __future__ import annotations

from typing import Any

import typer
from rich.console import Console

console = Console()

APP_PATH = "creatorkit.api.main:app"

api_app = typer.Typer(
    name="api",
    help="Run the creator tools HTTP API",
    no_args_is_help=True,
)


@api_app.command()
def start(
    port: int = typer.Option(8000, "--port", "-p", help="Port to listen on"),
    host: str = typer.Option("127.0.0.1", "--host", help="Interface to bind"),
    production: bool = typer.Option(
        False, "--production", help="Serve with workers instead of auto-reload"
    ),
    workers: int = typer.Option(
        2, "--workers", min=1, help="Worker processes in production mode"
    ),
) -> None:
    """
    Serve the /api/v1 endpoints with uvicorn.

    Development mode reloads on source changes and logs at info level.
    Production mode runs ``--workers`` processes and logs warnings only.

    Examples:
        creatorkit api start
        creatorkit api start --port 3000
        creatorkit api start --production --host 0.0.0.0 --workers 4
    """
    import uvicorn

    options: dict[str, Any] = {"host": host, "port": port}
    if production:
        options.update(workers=workers, log_level="warning")
    else:
        options.update(reload=True, log_level="info")

    mode = "production" if production else "development"
    console.print(f"[blue]Serving creatorkit API on http://{host}:{port} ({mode})[/blue]")
    uvicorn.run(APP_PATH, **options)
