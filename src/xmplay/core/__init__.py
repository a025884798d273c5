"""Core modules for xmplay."""

from xmplay.core.config import (
    ApiConfig,
    Config,
    PlaybackConfig,
    PlaylistConfig,
    Verbosity,
    load_config,
)
from xmplay.core.errors import (
    ConfigError,
    MissingDependencyError,
    NetworkError,
    NoLinkWarning,
    PlaybackError,
    RemoteError,
    XMPlayError,
)
from xmplay.core.models import (
    UNKNOWN,
    NormalizedTrack,
    PlaybackMode,
    PlaylistPage,
    RawTrackRecord,
    Station,
    TrackLink,
)

__all__ = [
    "ApiConfig",
    "Config",
    "PlaybackConfig",
    "PlaylistConfig",
    "Verbosity",
    "load_config",
    "ConfigError",
    "MissingDependencyError",
    "NetworkError",
    "NoLinkWarning",
    "PlaybackError",
    "RemoteError",
    "XMPlayError",
    "UNKNOWN",
    "NormalizedTrack",
    "PlaybackMode",
    "PlaylistPage",
    "RawTrackRecord",
    "Station",
    "TrackLink",
]
