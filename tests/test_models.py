"""Tests for data models."""

from datetime import UTC, datetime

import pytest

from xmplay.core.errors import RemoteError
from xmplay.core.models import (
    UNKNOWN,
    NormalizedTrack,
    PlaylistPage,
    RawTrackRecord,
    Station,
    TrackLink,
)


class TestStation:
    """Tests for Station.from_dict."""

    def test_all_fields(self) -> None:
        station = Station.from_dict(
            {
                "number": 37,
                "name": "Octane",
                "deeplink": "octane",
                "shortDescription": "New Hard Rock",
                "longDescription": "Long text",
            }
        )

        assert station == Station(
            number=37,
            name="Octane",
            deeplink="octane",
            short_description="New Hard Rock",
            long_description="Long text",
        )

    def test_missing_and_empty_fields_become_unknown(self) -> None:
        station = Station.from_dict({"name": "", "deeplink": None})

        assert station.number == UNKNOWN
        assert station.name == UNKNOWN
        assert station.deeplink == UNKNOWN
        assert station.short_description == UNKNOWN
        assert station.long_description == UNKNOWN

    def test_numeric_string_number(self) -> None:
        assert Station.from_dict({"number": "12"}).number == 12

    def test_station_is_immutable(self) -> None:
        station = Station.from_dict({"name": "Octane"})
        with pytest.raises(AttributeError):
            station.name = "Other"  # type: ignore[misc]


class TestRawTrackRecord:
    """Tests for RawTrackRecord.from_dict."""

    def test_full_record(self) -> None:
        record = RawTrackRecord.from_dict(
            {
                "channelId": "octane",
                "timestamp": "2025-01-01T00:00:00Z",
                "track": {"artists": ["A", "B"], "title": "Song"},
                "links": [{"site": "youtube", "url": "y1"}],
            }
        )

        assert record.artists == ["A", "B"]
        assert record.title == "Song"
        assert record.timestamp == "2025-01-01T00:00:00Z"
        assert record.links == [TrackLink(site="youtube", url="y1")]
        assert record.channel_id == "octane"

    def test_empty_record(self) -> None:
        record = RawTrackRecord.from_dict({})

        assert record.artists == []
        assert record.title is None
        assert record.timestamp is None
        assert record.links == []
        assert record.channel_id is None

    def test_wrongly_shaped_fields_are_dropped(self) -> None:
        record = RawTrackRecord.from_dict(
            {
                "track": {"artists": "Metallica", "title": 5},
                "timestamp": 12345,
                "links": [
                    "not-a-link",
                    {"site": "youtube"},
                    {"site": "spotify", "url": None},
                    {"site": "youtube", "url": "y1"},
                ],
            }
        )

        assert record.artists == []
        assert record.title is None
        assert record.timestamp is None
        assert record.links == [TrackLink(site="youtube", url="y1")]

    def test_track_not_a_mapping(self) -> None:
        record = RawTrackRecord.from_dict({"track": ["A"]})
        assert record.artists == []
        assert record.title is None


class TestPlaylistPage:
    """Tests for PlaylistPage.from_dict."""

    def test_page_with_next(self) -> None:
        page = PlaylistPage.from_dict(
            {
                "results": [{"track": {"title": "One"}}],
                "next": "https://xmplaylist.com/api/station/octane?last=1",
            }
        )

        assert len(page.results) == 1
        assert page.results[0].title == "One"
        assert page.next == "https://xmplaylist.com/api/station/octane?last=1"

    def test_empty_next_means_no_more_pages(self) -> None:
        assert PlaylistPage.from_dict({"results": [], "next": ""}).next is None
        assert PlaylistPage.from_dict({"results": [], "next": None}).next is None
        assert PlaylistPage.from_dict({"results": []}).next is None

    def test_missing_results_is_empty_page(self) -> None:
        assert PlaylistPage.from_dict({}).results == []

    def test_non_object_payload_is_remote_error(self) -> None:
        with pytest.raises(RemoteError):
            PlaylistPage.from_dict(["not", "a", "page"])

    def test_results_not_a_list_is_remote_error(self) -> None:
        with pytest.raises(RemoteError) as exc_info:
            PlaylistPage.from_dict({"results": "nope"})

        assert "results" in str(exc_info.value)


class TestNormalizedTrack:
    """Tests for the NormalizedTrack display line."""

    def test_str_with_link(self) -> None:
        track = NormalizedTrack(
            artist="A, B",
            title="Song",
            link="y1",
            timestamp=datetime(2025, 1, 1, 0, 0, 0, tzinfo=UTC),
        )

        assert str(track) == "2025-01-01 00:00:00 A, B - Song y1"

    def test_str_without_link_or_timestamp(self) -> None:
        track = NormalizedTrack(artist="A", title="Song", link=None, timestamp=UNKNOWN)

        assert str(track) == "Unknown A - Song"
