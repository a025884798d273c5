"""Pytest fixtures for xmplay tests."""

from datetime import UTC, datetime

import pytest

from xmplay.core.config import ApiConfig, Config
from xmplay.core.models import NormalizedTrack, RawTrackRecord, TrackLink

API = "https://xmplaylist.com/api"


@pytest.fixture
def config() -> Config:
    """Create a config that never sleeps between pages."""
    return Config(api=ApiConfig(base_url=API, request_delay=0.0))


@pytest.fixture(autouse=True)
def _no_base_url_override(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's XMPLAY_BASE_URL out of the tests."""
    monkeypatch.delenv("XMPLAY_BASE_URL", raising=False)


@pytest.fixture
def sample_record() -> RawTrackRecord:
    """Create the record used throughout the examples."""
    return RawTrackRecord(
        artists=["A", "B"],
        title="Song",
        timestamp="2025-01-01T00:00:00Z",
        links=[
            TrackLink(site="spotify", url="s1"),
            TrackLink(site="youtube", url="y1"),
        ],
        channel_id="octane",
    )


@pytest.fixture
def sample_track() -> NormalizedTrack:
    """Create a normalized track with a link."""
    return NormalizedTrack(
        artist="Metallica",
        title="One",
        link="https://www.youtube.com/watch?v=abc",
        timestamp=datetime(2025, 1, 1, 12, 0, 0, tzinfo=UTC),
    )


@pytest.fixture
def linkless_track() -> NormalizedTrack:
    """Create a normalized track without a link."""
    return NormalizedTrack(
        artist="Nobody",
        title="Nothing",
        link=None,
        timestamp="Unknown",
    )


def make_item(
    artists: list[str],
    title: str,
    timestamp: str = "2025-01-01T00:00:00.000Z",
    links: list[dict] | None = None,
    channel_id: str = "octane",
) -> dict:
    """Build one raw track item as the API returns it."""
    return {
        "id": f"{title}-{timestamp}",
        "channelId": channel_id,
        "timestamp": timestamp,
        "track": {"id": title.lower(), "title": title, "artists": artists},
        "links": links if links is not None else [],
    }


@pytest.fixture
def sample_station_response() -> dict:
    """Create a sample /station response."""
    return {
        "results": [
            {
                "number": 37,
                "name": "Octane",
                "deeplink": "octane",
                "shortDescription": "New Hard Rock",
                "longDescription": "Today's hard rock.",
            },
            {
                "number": 36,
                "name": "Alt Nation",
                "deeplink": "altnation",
                "shortDescription": "New Alternative",
            },
            {
                "number": 2,
                "name": "SiriusXM Hits 1",
                "deeplink": "siriusxmhits1",
                "shortDescription": "Today's Pop Hits",
            },
        ]
    }


@pytest.fixture
def sample_page_response() -> dict:
    """Create a sample single-page /station/{channel} response."""
    return {
        "results": [
            make_item(
                ["Metallica"],
                "One",
                links=[{"site": "youtube", "url": "https://youtube.com/watch?v=one"}],
            ),
            make_item(
                ["Foo Fighters", "Dave Grohl"],
                "Everlong",
                timestamp="2025-01-01T00:05:00.000Z",
                links=[{"site": "spotify", "url": "https://open.spotify.com/track/ever"}],
            ),
        ],
    }


@pytest.fixture
def item_factory():
    """Expose make_item to tests."""
    return make_item
