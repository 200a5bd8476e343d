"""CLI command for thumbnail links."""

from __future__ import annotations

import typer
from rich.console import Console
from rich.table import Table

from creatorkit.models.identifiers import extract_video_id
from creatorkit.services.creator_tools import thumbnail_urls

console = Console()


def thumbnails(
    url: str = typer.Argument(..., help="Video URL or 11-character video ID"),
) -> None:
    """
    Print the thumbnail image links for a video.

    Examples:
        creatorkit thumbnails https://youtu.be/dQw4w9WgXcQ
    """
    video_id = extract_video_id(url)
    if video_id is None:
        console.print(f"[red]Not a YouTube video URL:[/red] {url}")
        raise typer.Exit(code=1)

    table = Table(title=f"Thumbnails for {video_id}")
    table.add_column("Resolution", style="cyan")
    table.add_column("URL", style="blue")
    for link in thumbnail_urls(video_id):
        table.add_row(link.resolution, link.url)
    console.print(table)
