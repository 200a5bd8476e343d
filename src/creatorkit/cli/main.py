"""
Main CLI entry point for creatorkit.
"""

from __future__ import annotations

import typer
from rich.console import Console
from rich.panel import Panel

from creatorkit import __version__
from creatorkit.cli.commands.api import api_app
from creatorkit.cli.commands.db import db_app
from creatorkit.cli.commands.quota import quota_app
from creatorkit.cli.commands.revenue import revenue_app
from creatorkit.cli.commands.thumbnails import thumbnails
from creatorkit.config.log_config import configure_logging
from creatorkit.config.settings import settings

console = Console()

app = typer.Typer(
    name="creatorkit",
    help="Free YouTube creator tools",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

# Add subcommands
app.add_typer(api_app, name="api", help="API server commands")
app.add_typer(db_app, name="db", help="Quota store commands")
app.add_typer(quota_app, name="quota", help="Daily quota commands")
app.add_typer(revenue_app, name="revenue", help="Revenue projection commands")
app.command(name="thumbnails")(thumbnails)


@app.command()
def version() -> None:
    """Show version and the active quota settings."""
    console.print(
        Panel(
            f"[bold blue]creatorkit[/bold blue] v{__version__}\n"
            f"Daily quota: {settings.daily_quota_limit:,} upstream calls\n"
            f"Upstream: {settings.youtube_base_url}",
            title="Version",
            border_style="blue",
        )
    )


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version: bool = typer.Option(
        False, "--version", "-v", help="Show version and exit"
    ),
) -> None:
    """
    creatorkit - Free YouTube creator tools.

    Serve the tools API, inspect the daily quota and run the revenue and
    thumbnail helpers from the terminal.
    """
    configure_logging(settings.log_level)

    if version:
        console.print(f"creatorkit v{__version__}")
        raise typer.Exit(code=0)

    if ctx.invoked_subcommand is None:
        console.print("[yellow]Use 'creatorkit --help' for available commands[/yellow]")
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
