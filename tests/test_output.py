"""Tests for CLI output formatting."""

from datetime import UTC, datetime
from io import StringIO

from rich.console import Console

from xmplay.cli.output import display_stations, display_tracks
from xmplay.core.models import NormalizedTrack, Station


def make_console(width: int = 80) -> tuple[Console, StringIO]:
    """Create a plain console writing to a buffer."""
    buffer = StringIO()
    return Console(file=buffer, width=width, color_system=None), buffer


class TestDisplayTracks:
    """Tests for display_tracks."""

    def test_artist_and_title_are_readable_at_80_columns(self) -> None:
        console, buffer = make_console(80)
        tracks = [
            NormalizedTrack(
                artist="Metallica",
                title="One",
                link="https://www.youtube.com/watch?v=WM8bTdBs-cw",
                timestamp=datetime(2025, 1, 1, tzinfo=UTC),
            ),
            NormalizedTrack(
                artist="Foo Fighters",
                title="Everlong",
                link="https://open.spotify.com/track/5UWwZ5lm5PKu6eKsHAGxOk",
                timestamp=datetime(2025, 1, 1, 0, 5, tzinfo=UTC),
            ),
        ]

        display_tracks(tracks, console)

        output = buffer.getvalue()
        assert "Metallica" in output
        assert "Foo Fighters" in output
        assert "Everlong" in output
        assert all(len(line) <= 80 for line in output.splitlines())

    def test_missing_link_shows_dash(self) -> None:
        console, buffer = make_console()
        track = NormalizedTrack(artist="A", title="Song", link=None, timestamp="Unknown")

        display_tracks([track], console)

        output = buffer.getvalue()
        assert "Unknown" in output
        assert " - " in output

    def test_empty(self) -> None:
        console, buffer = make_console()

        display_tracks([], console)

        assert "No tracks found" in buffer.getvalue()


class TestDisplayStations:
    """Tests for display_stations."""

    def test_stations(self) -> None:
        console, buffer = make_console()
        station = Station(
            number=37,
            name="Octane",
            deeplink="octane",
            short_description="New Hard Rock",
        )

        display_stations([station], console)

        output = buffer.getvalue()
        assert "Octane" in output
        assert "37" in output

    def test_empty(self) -> None:
        console, buffer = make_console()

        display_stations([], console)

        assert "No stations found" in buffer.getvalue()
