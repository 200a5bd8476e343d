"""CLI commands for inspecting the daily quota."""

from __future__ import annotations

import asyncio
from datetime import date
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table
from sqlalchemy.exc import SQLAlchemyError

from creatorkit.config.database import db_manager
from creatorkit.config.settings import settings
from creatorkit.exceptions import RepositoryError
from creatorkit.services.quota import QuotaGate, QuotaStatus, today

console = Console()

quota_app = typer.Typer(
    name="quota",
    help="Daily quota commands",
    no_args_is_help=True,
)


async def _status_async(day: date) -> QuotaStatus:
    """Read the usage row for ``day``, creating the table if needed."""
    gate = QuotaGate(ceiling=settings.daily_quota_limit)
    try:
        await db_manager.create_tables()
        async with db_manager.get_session_factory()() as session:
            return await gate.status(session, day)
    finally:
        await db_manager.close()


@quota_app.command(name="status")
def status(
    day: Optional[str] = typer.Option(
        None, "--date", "-d", help="Day to report, YYYY-MM-DD (default: today, UTC)"
    ),
) -> None:
    """
    Show calls used and remaining for a day.

    Examples:
        creatorkit quota status
        creatorkit quota status --date 2025-01-31
    """
    try:
        target = date.fromisoformat(day) if day else today()
    except ValueError:
        console.print(f"[red]Invalid date:[/red] {day} (expected YYYY-MM-DD)")
        raise typer.Exit(code=2)

    try:
        usage = asyncio.run(_status_async(target))
    except (RepositoryError, SQLAlchemyError) as e:
        console.print(f"[red]Could not read the quota store:[/red] {e}")
        raise typer.Exit(code=1)

    table = Table(title=f"Quota for {usage.date.isoformat()}")
    table.add_column("Used", style="cyan", justify="right")
    table.add_column("Limit", style="blue", justify="right")
    table.add_column("Remaining", style="green", justify="right")
    table.add_row(f"{usage.used:,}", f"{usage.limit:,}", f"{usage.remaining:,}")
    console.print(table)
