"""CLI output formatting utilities."""

from datetime import datetime

from rich.console import Console
from rich.table import Table

from xmplay.core.models import NormalizedTrack, Station
from xmplay.utils.text import truncate_text


def display_stations(stations: list[Station], console: Console) -> None:
    """Display the station list in a table."""
    if not stations:
        console.print("[yellow]No stations found.[/yellow]")
        return

    table = Table(title="Stations")
    table.add_column("#", style="dim", width=4)
    table.add_column("Number", style="dim", justify="right")
    table.add_column("Name", style="bold")
    table.add_column("Deeplink", style="cyan", no_wrap=True)
    table.add_column("Description")

    for i, station in enumerate(stations, 1):
        table.add_row(
            str(i),
            str(station.number),
            station.name,
            station.deeplink,
            truncate_text(station.short_description, 60),
        )

    console.print(table)


def display_tracks(tracks: list[NormalizedTrack], console: Console, title: str = "Tracks") -> None:
    """Display normalized tracks in a table."""
    if not tracks:
        console.print("[yellow]No tracks found.[/yellow]")
        return

    table = Table(title=title)
    table.add_column("#", style="dim", width=4)
    table.add_column("Played", style="green", no_wrap=True)
    table.add_column("Artist", style="bold", min_width=12)
    table.add_column("Title", min_width=12)
    # Links are the least useful column on narrow terminals
    table.add_column("Link", style="cyan", max_width=32, overflow="fold")

    for i, track in enumerate(tracks, 1):
        table.add_row(
            str(i),
            _format_timestamp(track.timestamp),
            track.artist,
            track.title,
            track.link or "-",
        )

    console.print(table)


def _format_timestamp(value: datetime | str) -> str:
    """Format a local timestamp, passing the placeholder through."""
    if isinstance(value, datetime):
        return value.strftime("%Y-%m-%d %H:%M:%S")
    return value
