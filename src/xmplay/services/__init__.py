"""Service modules for xmplay."""

from xmplay.services.client import XMPlaylistClient
from xmplay.services.normalizer import normalize, normalize_all
from xmplay.services.playback import PlaybackDispatcher
from xmplay.services.playlist import PlaylistFetcher, PlaylistView, channel_path
from xmplay.services.stations import StationCatalog

__all__ = [
    "PlaybackDispatcher",
    "PlaylistFetcher",
    "PlaylistView",
    "StationCatalog",
    "XMPlaylistClient",
    "channel_path",
    "normalize",
    "normalize_all",
]
