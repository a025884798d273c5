"""Station catalog service."""

from __future__ import annotations

from xmplay.core.config import Config
from xmplay.core.errors import RemoteError
from xmplay.core.models import Station
from xmplay.services.client import XMPlaylistClient
from xmplay.utils.text import matches_filter

STATION_PATH = "station"


class StationCatalog:
    """Fetches the list of stations known to xmplaylist.com."""

    def __init__(self, config: Config | None = None, client: XMPlaylistClient | None = None) -> None:
        self.config = config or Config()
        self.client = client or XMPlaylistClient(self.config)

    def fetch(self, filter: str | None = None) -> list[Station]:
        """
        Fetch all stations, optionally narrowed by a search term.

        Args:
            filter: Case-insensitive substring matched against the station
                name, deeplink, number and short description

        Returns:
            List of Station objects in API order (empty if nothing matches)

        Raises:
            NetworkError: If the request cannot complete
            RemoteError: If the API returns an error or an unexpected payload
        """
        data = self.client.get_json(STATION_PATH)

        if not isinstance(data, dict) or not isinstance(data.get("results", []), list):
            raise RemoteError("Unexpected station payload: expected an object with 'results'")

        stations = [
            Station.from_dict(item) for item in data.get("results", []) if isinstance(item, dict)
        ]

        if filter:
            stations = [s for s in stations if _station_matches(s, filter)]

        return stations


def _station_matches(station: Station, needle: str) -> bool:
    return any(
        matches_filter(str(value), needle)
        for value in (station.name, station.deeplink, station.number, station.short_description)
    )
