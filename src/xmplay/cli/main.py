"""Main CLI application for xmplay."""

import warnings
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import asdict
from typing import Annotated

import typer
from rich.console import Console

from xmplay.core.config import Config, Verbosity
from xmplay.core.errors import XMPlayError

app = typer.Typer(
    name="xmplay",
    help="Browse xmplaylist.com stations and play recently aired tracks.",
    no_args_is_help=True,
)

console = Console()
error_console = Console(stderr=True)


class State:
    """Global CLI state."""

    def __init__(self) -> None:
        self.verbosity: Verbosity = Verbosity.NORMAL
        self.config: Config | None = None


state = State()


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        from xmplay import __version__

        console.print(f"xmplay version {__version__}")
        raise typer.Exit()


@contextmanager
def _reporting_errors() -> Iterator[None]:
    """Print xmplay errors and warnings the way every command does.

    Warnings are printed as soon as they are raised.
    """
    with warnings.catch_warnings():
        warnings.simplefilter("always")
        warnings.showwarning = _show_warning
        try:
            yield
        except XMPlayError as e:
            error_console.print(f"[red]Error:[/red] {e}")
            raise typer.Exit(1) from None


def _show_warning(message, category, filename, lineno, file=None, line=None) -> None:  # noqa: ARG001
    if state.verbosity != Verbosity.QUIET:
        error_console.print(f"[yellow]Warning:[/yellow] {message}")


def _config() -> Config:
    assert state.config is not None
    return state.config


@app.callback()
def main(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable verbose output"),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Suppress all output except errors"),
    ] = False,
    config_path: Annotated[
        str | None,
        typer.Option("--config", help="Path to configuration file"),
    ] = None,
    version: Annotated[  # noqa: ARG001
        bool,
        typer.Option("--version", callback=version_callback, is_eager=True, help="Show version"),
    ] = False,
) -> None:
    """xmplay - xmplaylist.com browser and player."""
    if quiet:
        state.verbosity = Verbosity.QUIET
    elif verbose:
        state.verbosity = Verbosity.VERBOSE
    else:
        state.verbosity = Verbosity.NORMAL

    with _reporting_errors():
        state.config = Config.load(config_path)


@app.command()
def stations(
    filter: Annotated[
        str | None,
        typer.Argument(help="Only show stations whose name, deeplink or description matches"),
    ] = None,
) -> None:
    """List xmplaylist.com stations."""
    from xmplay.cli.output import display_stations
    from xmplay.services.stations import StationCatalog

    with _reporting_errors():
        catalog = StationCatalog(_config())
        found = catalog.fetch(filter)

    if state.verbosity != Verbosity.QUIET:
        display_stations(found, console)


@app.command()
def playlist(
    channel: Annotated[str, typer.Argument(help="Station deeplink, e.g. 'octane'")],
    pages: Annotated[
        int | None,
        typer.Option("--pages", "-p", min=1, help="Number of history pages to fetch"),
    ] = None,
    site: Annotated[
        str | None,
        typer.Option("--site", "-s", help="Music service whose links are shown"),
    ] = None,
    filter: Annotated[
        str | None,
        typer.Option("--filter", "-f", help="Only show tracks containing this text"),
    ] = None,
    view: Annotated[
        str,
        typer.Option("--view", help="History view: recent, newest or most-heard"),
    ] = "recent",
    raw: Annotated[
        bool,
        typer.Option("--raw", help="Print the API pages as JSON instead of a table"),
    ] = False,
) -> None:
    """Show recently played tracks for a station."""
    from xmplay.cli.output import display_tracks
    from xmplay.services.playlist import PlaylistFetcher, PlaylistView, channel_path

    config = _config()
    try:
        selected_view = PlaylistView(view)
    except ValueError:
        error_console.print(f"[red]Error:[/red] Unknown view '{view}'")
        raise typer.Exit(1) from None

    path = channel_path(channel, selected_view)
    page_count = pages or config.playlist.pages

    if state.verbosity == Verbosity.VERBOSE:
        console.print(f"Fetching {page_count} page(s) for [bold]{path}[/bold]")

    with _reporting_errors():
        fetcher = PlaylistFetcher(config)
        if raw:
            raw_pages = fetcher.fetch_pages(path, page_count)
            console.print_json(data=[asdict(page) for page in raw_pages])
            return

        tracks = fetcher.fetch(
            path,
            page_count=page_count,
            link_site=site or config.playlist.link_site,
            filter=filter,
        )

    if state.verbosity != Verbosity.QUIET:
        display_tracks(tracks, console, title=f"Recently played on {path}")


@app.command()
def feed(
    pages: Annotated[
        int | None,
        typer.Option("--pages", "-p", min=1, help="Number of feed pages to fetch"),
    ] = None,
    site: Annotated[
        str | None,
        typer.Option("--site", "-s", help="Music service whose links are shown"),
    ] = None,
    filter: Annotated[
        str | None,
        typer.Option("--filter", "-f", help="Only show tracks containing this text"),
    ] = None,
) -> None:
    """Show recently played tracks across all stations."""
    from xmplay.cli.output import display_tracks
    from xmplay.services.playlist import PlaylistFetcher

    config = _config()
    with _reporting_errors():
        tracks = PlaylistFetcher(config).fetch_feed(
            page_count=pages or config.playlist.pages,
            link_site=site or config.playlist.link_site,
            filter=filter,
        )

    if state.verbosity != Verbosity.QUIET:
        display_tracks(tracks, console, title="All stations")


@app.command()
def play(
    channel: Annotated[
        str,
        typer.Argument(help="Station deeplink, or a station search term with --pick-station"),
    ],
    pages: Annotated[
        int | None,
        typer.Option("--pages", "-p", min=1, help="Number of history pages to fetch"),
    ] = None,
    site: Annotated[
        str | None,
        typer.Option("--site", "-s", help="Music service whose links are played"),
    ] = None,
    filter: Annotated[
        str | None,
        typer.Option("--filter", "-f", help="Only consider tracks containing this text"),
    ] = None,
    download: Annotated[
        bool,
        typer.Option("--download", "-d", help="Save tracks to files instead of playing them"),
    ] = False,
    quiet_tools: Annotated[
        bool,
        typer.Option("--quiet-tools", help="Hide the downloader and player diagnostics"),
    ] = False,
    play_all: Annotated[
        bool,
        typer.Option("--all", help="Dispatch every listed track instead of picking one"),
    ] = False,
    pick_station: Annotated[
        bool,
        typer.Option("--pick-station", help="Choose the station interactively"),
    ] = False,
) -> None:
    """Play (or download) tracks recently aired on a station."""
    from xmplay.cli.output import display_stations, display_tracks
    from xmplay.cli.picker import pick
    from xmplay.core.models import NormalizedTrack, PlaybackMode
    from xmplay.services.playback import PlaybackDispatcher
    from xmplay.services.playlist import PlaylistFetcher
    from xmplay.services.stations import StationCatalog

    config = _config()
    mode = PlaybackMode.DOWNLOAD if download else PlaybackMode.PLAY

    with _reporting_errors():
        dispatcher = PlaybackDispatcher.from_config(config)
        # Missing tools abort before any request is made
        dispatcher.check_dependencies(mode)

        if pick_station:
            found = StationCatalog(config).fetch(channel)
            display_stations(found, console)
            station = pick(found, console, prompt="Station")
            if station is None:
                raise typer.Exit()
            channel = station.deeplink

        tracks = PlaylistFetcher(config).fetch(
            channel,
            page_count=pages or config.playlist.pages,
            link_site=site or config.playlist.link_site,
            filter=filter,
        )

        if play_all:
            selected = tracks
        else:
            display_tracks(tracks, console, title=f"Recently played on {channel}")
            track = pick(tracks, console, prompt="Track")
            selected = [track] if track is not None else []

        def announce(track: NormalizedTrack) -> None:
            if state.verbosity != Verbosity.QUIET:
                verb = "Downloading" if download else "Playing"
                console.print(f"{verb}: [bold]{track.artist} - {track.title}[/bold]")

        dispatcher.play_all(selected, mode, quiet=quiet_tools, on_start=announce)


if __name__ == "__main__":
    app()
