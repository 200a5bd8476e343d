"""CLI commands for the revenue calculator."""

from __future__ import annotations

from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from creatorkit.config.settings import settings
from creatorkit.models.enums import Niche
from creatorkit.services import revenue
from creatorkit.services.creator_tools import format_number

console = Console()

revenue_app = typer.Typer(
    name="revenue",
    help="Revenue projection commands",
    no_args_is_help=True,
)


@revenue_app.command(name="estimate")
def estimate(
    views: int = typer.Option(..., "--views", "-n", min=0, help="Daily views"),
    niche: Optional[Niche] = typer.Option(
        None, "--niche", help="Content niche (uses its average CPM)"
    ),
    cpm: Optional[float] = typer.Option(
        None, "--cpm", min=0, help="Custom CPM, overrides the niche average"
    ),
    shorts: bool = typer.Option(False, "--shorts", help="Apply the Shorts CPM reduction"),
    sponsorship: bool = typer.Option(
        False, "--sponsorship", help="Include the niche's sponsorship range"
    ),
) -> None:
    """
    Project ad revenue for a daily view count.

    Examples:
        creatorkit revenue estimate --views 10000 --niche gaming
        creatorkit revenue estimate --views 10000 --cpm 10 --shorts
    """
    if niche is None and cpm is None:
        console.print("[red]Provide --niche or --cpm[/red]")
        raise typer.Exit(code=2)

    if cpm is None and niche is not None:
        result = revenue.estimate_for_niche(
            views, niche, shorts, sponsorship, settings.revenue_share
        )
        effective_cpm = revenue.niche_cpm(niche, shorts)
    else:
        result = revenue.project_revenue(
            views,
            cpm=cpm,
            niche=niche,
            shorts=shorts,
            include_sponsorship=sponsorship,
            revenue_share=settings.revenue_share,
        )
        effective_cpm = (cpm or 0.0) * (revenue.SHORTS_CPM_FACTOR if shorts else 1)

    table = Table(title=f"Revenue for {format_number(views)} daily views")
    table.add_column("Period", style="cyan")
    table.add_column("Ad revenue", style="green", justify="right")
    table.add_row("Daily", f"${result.daily:,.2f}")
    table.add_row("Weekly", f"${result.weekly:,.2f}")
    table.add_row("Monthly", f"${result.monthly:,.2f}")
    table.add_row("Yearly", f"${result.yearly:,.2f}")
    console.print(table)

    console.print(
        f"CPM ${effective_cpm:,.2f} | "
        f"RPM ${revenue.rpm(effective_cpm, settings.revenue_share):,.2f}"
    )
    if sponsorship:
        console.print(
            f"Sponsorship per day: ${result.sponsorship_min:,.2f} - "
            f"${result.sponsorship_max:,.2f}"
        )
