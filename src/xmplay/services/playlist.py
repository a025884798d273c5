"""Played-track history retrieval."""

from __future__ import annotations

import time
from datetime import tzinfo
from enum import Enum

from xmplay.core.config import Config
from xmplay.core.models import NormalizedTrack, PlaylistPage
from xmplay.services.client import XMPlaylistClient
from xmplay.services.normalizer import normalize_all
from xmplay.utils.text import matches_filter

FEED_PATH = "feed"


class PlaylistView(str, Enum):
    """Server-side views of a channel's history."""

    RECENT = "recent"
    NEWEST = "newest"
    MOST_HEARD = "most-heard"


def channel_path(deeplink: str, view: PlaylistView = PlaylistView.RECENT) -> str:
    """Build the channel argument for a station deeplink and view."""
    if view == PlaylistView.RECENT:
        return deeplink
    return f"{deeplink}/{view.value}"


class PlaylistFetcher:
    """Fetches one or more pages of a channel's played-track history."""

    def __init__(
        self,
        config: Config | None = None,
        client: XMPlaylistClient | None = None,
        tz: tzinfo | None = None,
    ) -> None:
        self.config = config or Config()
        self.client = client or XMPlaylistClient(self.config)
        self.tz = tz

    def fetch(
        self,
        channel: str,
        page_count: int = 1,
        link_site: str = "youtube",
        filter: str | None = None,
    ) -> list[NormalizedTrack]:
        """
        Fetch and normalize a channel's recently played tracks.

        Args:
            channel: Station deeplink, optionally with a view suffix
                such as "/newest" or "/most-heard"
            page_count: Maximum number of pages to request (>= 1)
            link_site: Music service whose link is kept for each track
            filter: Keep only tracks whose display line contains this text

        Returns:
            Tracks in page order, each page in API order

        Raises:
            ValueError: If page_count is less than 1
            NetworkError: If any page request cannot complete
            RemoteError: If any page returns an error or an unexpected payload
        """
        pages = self.fetch_pages(channel, page_count)
        return self._normalize(pages, link_site, filter)

    def fetch_feed(
        self,
        page_count: int = 1,
        link_site: str = "youtube",
        filter: str | None = None,
    ) -> list[NormalizedTrack]:
        """Fetch and normalize the merged feed of all channels."""
        pages = self._fetch_from(FEED_PATH, page_count)
        return self._normalize(pages, link_site, filter)

    def fetch_pages(self, channel: str, page_count: int = 1) -> list[PlaylistPage]:
        """Fetch raw pages for a channel without normalizing them."""
        return self._fetch_from(f"station/{channel.strip('/')}", page_count)

    def _fetch_from(self, path: str, page_count: int) -> list[PlaylistPage]:
        if page_count < 1:
            raise ValueError(f"page_count must be at least 1, got {page_count}")

        # Errors propagate; pages collected so far are dropped with the local list
        pages: list[PlaylistPage] = []
        next_path: str | None = path
        remaining = page_count

        with self.client:
            while next_path and remaining > 0:
                if pages:
                    time.sleep(self.config.api.request_delay)
                page = PlaylistPage.from_dict(self.client.get_json(next_path))
                pages.append(page)
                next_path = page.next
                remaining -= 1

        return pages

    def _normalize(
        self,
        pages: list[PlaylistPage],
        link_site: str,
        filter: str | None,
    ) -> list[NormalizedTrack]:
        tracks = [
            track
            for page in pages
            for track in normalize_all(page.results, link_site, self.tz)
        ]
        if filter:
            tracks = [t for t in tracks if matches_filter(str(t), filter)]
        return tracks
