"""CLI commands for the quota store."""

from __future__ import annotations

import asyncio

import typer
from rich.console import Console

from creatorkit.config.database import db_manager
from creatorkit.exceptions import RepositoryError

console = Console()

db_app = typer.Typer(
    name="db",
    help="Quota store management commands",
    no_args_is_help=True,
)


async def _init_async() -> None:
    try:
        await db_manager.create_tables()
    finally:
        await db_manager.close()


@db_app.command(name="init")
def init() -> None:
    """
    Create the usage table if it does not exist.

    Examples:
        creatorkit db init
    """
    try:
        asyncio.run(_init_async())
    except (OSError, RepositoryError) as e:
        console.print(f"[red]Could not initialise the database:[/red] {e}")
        raise typer.Exit(code=1)

    console.print(f"[green]✓[/green] Quota store ready at {db_manager.database_url}")
