"""Data models for xmplay."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any

from xmplay.core.errors import RemoteError

# Placeholder for fields the API left out
UNKNOWN = "Unknown"


class PlaybackMode(str, Enum):
    """What to do with a track link."""

    PLAY = "play"
    DOWNLOAD = "download"


@dataclass(frozen=True)
class Station:
    """A radio station from the station list."""

    number: int | str
    name: str
    deeplink: str
    short_description: str
    long_description: str = UNKNOWN

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Station:
        """Build a station, substituting UNKNOWN for missing or empty fields."""
        return cls(
            number=_number_or_unknown(data.get("number")),
            name=_text_or_unknown(data.get("name")),
            deeplink=_text_or_unknown(data.get("deeplink")),
            short_description=_text_or_unknown(data.get("shortDescription")),
            long_description=_text_or_unknown(data.get("longDescription")),
        )


@dataclass(frozen=True)
class TrackLink:
    """A link to a track on a third-party music service."""

    site: str
    url: str


@dataclass
class RawTrackRecord:
    """A played track as returned by the API, with optional fields made explicit."""

    artists: list[str] = field(default_factory=list)
    title: str | None = None
    timestamp: str | None = None
    links: list[TrackLink] = field(default_factory=list)
    channel_id: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> RawTrackRecord:
        """Build a record from JSON, dropping anything of the wrong shape."""
        track = data.get("track")
        if not isinstance(track, dict):
            track = {}

        artists = track.get("artists")
        if not isinstance(artists, list):
            artists = []

        links = []
        raw_links = data.get("links")
        for entry in raw_links if isinstance(raw_links, list) else []:
            if not isinstance(entry, dict):
                continue
            site = entry.get("site")
            url = entry.get("url")
            if isinstance(site, str) and isinstance(url, str):
                links.append(TrackLink(site=site, url=url))

        title = track.get("title")
        timestamp = data.get("timestamp")
        channel_id = data.get("channelId")

        return cls(
            artists=[str(a) for a in artists if a],
            title=title if isinstance(title, str) else None,
            timestamp=timestamp if isinstance(timestamp, str) else None,
            links=links,
            channel_id=channel_id if isinstance(channel_id, str) else None,
        )


@dataclass
class PlaylistPage:
    """One page of played-track history."""

    results: list[RawTrackRecord]
    next: str | None = None

    @classmethod
    def from_dict(cls, data: Any) -> PlaylistPage:
        """
        Build a page from a decoded JSON payload.

        Raises:
            RemoteError: If the payload is not a page object
        """
        if not isinstance(data, dict):
            raise RemoteError("Unexpected playlist payload: expected a JSON object")

        results = data.get("results", [])
        if not isinstance(results, list):
            raise RemoteError("Unexpected playlist payload: 'results' is not a list")

        next_url = data.get("next")
        return cls(
            results=[RawTrackRecord.from_dict(item) for item in results if isinstance(item, dict)],
            next=next_url if isinstance(next_url, str) and next_url else None,
        )


@dataclass(frozen=True)
class NormalizedTrack:
    """A flattened track ready for display or playback."""

    artist: str
    title: str
    link: str | None
    timestamp: datetime | str
    channel_id: str | None = None

    def __str__(self) -> str:
        if isinstance(self.timestamp, datetime):
            when = self.timestamp.strftime("%Y-%m-%d %H:%M:%S")
        else:
            when = self.timestamp
        line = f"{when} {self.artist} - {self.title}"
        if self.link:
            line += f" {self.link}"
        return line


def _text_or_unknown(value: Any) -> str:
    if value is None or value == "":
        return UNKNOWN
    return str(value)


def _number_or_unknown(value: Any) -> int | str:
    if isinstance(value, bool):
        return UNKNOWN
    if isinstance(value, int):
        return value
    if isinstance(value, str) and value.strip().isdigit():
        return int(value)
    return UNKNOWN
