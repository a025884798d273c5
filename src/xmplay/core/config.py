"""Configuration management for xmplay.

Handles TOML configuration loading from local and global paths,
with an environment variable override for the API base URL.
"""

from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any

from xmplay.core.errors import ConfigError

# Configuration file paths
LOCAL_CONFIG_PATH = Path(".xmplay/config")
GLOBAL_CONFIG_PATH = Path.home() / ".xmplay" / "config"

BASE_URL_ENV_VAR = "XMPLAY_BASE_URL"

DEFAULT_BASE_URL = "https://xmplaylist.com/api"

# Default configuration values
DEFAULT_CONFIG: dict[str, Any] = {
    "api": {
        "base_url": DEFAULT_BASE_URL,
        "user_agent": "",
        "timeout": 30.0,
        "request_delay": 0.2,
    },
    "playlist": {
        "link_site": "youtube",
        "pages": 1,
    },
    "playback": {
        "downloader": "yt-dlp",
        "player": "ffplay",
        "audio_format": "mp3",
        "output_dir": ".",
    },
}

# Formats the downloader can transcode to
VALID_AUDIO_FORMATS = {"mp3", "m4a", "opus", "flac", "wav", "aac", "vorbis"}


class Verbosity(Enum):
    """How much the CLI prints."""

    QUIET = 0
    NORMAL = 1
    VERBOSE = 2


@dataclass
class ApiConfig:
    """xmplaylist.com API settings."""

    base_url: str = DEFAULT_BASE_URL
    user_agent: str = ""
    timeout: float = 30.0
    request_delay: float = 0.2

    def get_user_agent(self) -> str:
        """Return the configured User-Agent, or one derived from the package version."""
        if self.user_agent:
            return self.user_agent
        from xmplay import __version__

        return f"xmplay/{__version__}"


@dataclass
class PlaylistConfig:
    """Defaults for playlist retrieval."""

    link_site: str = "youtube"
    pages: int = 1


@dataclass
class PlaybackConfig:
    """External tool settings."""

    downloader: str = "yt-dlp"
    player: str = "ffplay"
    audio_format: str = "mp3"
    output_dir: str = "."

    def get_output_dir(self) -> Path:
        """Get the download directory as a Path object."""
        return Path(self.output_dir)


@dataclass
class Config:
    """Main configuration container.

    Holds all configuration settings for xmplay, loaded from
    local and global config files with environment variable overrides.
    """

    api: ApiConfig = field(default_factory=ApiConfig)
    playlist: PlaylistConfig = field(default_factory=PlaylistConfig)
    playback: PlaybackConfig = field(default_factory=PlaybackConfig)

    def get_base_url(self) -> str:
        """Get the API base URL, preferring the XMPLAY_BASE_URL environment variable."""
        env_url = os.environ.get(BASE_URL_ENV_VAR, "")
        if env_url:
            return env_url.rstrip("/")
        return self.api.base_url.rstrip("/")

    @classmethod
    def load(cls, path: str | Path | None = None) -> Config:
        """Load configuration from an explicit file, or from the standard paths."""
        if path is None:
            return load_config()

        explicit = Path(path)
        if not explicit.exists():
            raise ConfigError(f"Config file not found: {explicit}")
        merged = _deep_merge(_default_dict(), _load_toml_file(explicit))
        _validate_config(merged)
        return _dict_to_config(merged)


def _load_toml_file(path: Path) -> dict[str, Any]:
    """Load and parse a TOML configuration file.

    Args:
        path: Path to the TOML file.

    Returns:
        Parsed configuration dictionary.

    Raises:
        ConfigError: If the file exists but cannot be parsed.
    """
    if not path.exists():
        return {}

    try:
        content = path.read_text()
        return tomllib.loads(content)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in config file {path}: {e}") from e


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Deep merge two dictionaries, with override taking precedence."""
    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def _default_dict() -> dict[str, Any]:
    return {section: values.copy() for section, values in DEFAULT_CONFIG.items()}


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _validate_config(config_dict: dict[str, Any]) -> None:
    """Validate configuration values.

    Raises:
        ConfigError: If configuration values are invalid.
    """
    api_config = config_dict.get("api", {})
    for key in ["base_url", "user_agent"]:
        value = api_config.get(key)
        if value is not None and not isinstance(value, str):
            raise ConfigError(f"api.{key} must be a string, got {type(value).__name__}")

    timeout = api_config.get("timeout", 30.0)
    if not _is_number(timeout) or timeout <= 0:
        raise ConfigError(f"api.timeout must be a positive number, got {timeout!r}")

    delay = api_config.get("request_delay", 0.2)
    if not _is_number(delay) or delay < 0:
        raise ConfigError(f"api.request_delay must be a non-negative number, got {delay!r}")

    playlist_config = config_dict.get("playlist", {})
    link_site = playlist_config.get("link_site")
    if link_site is not None and not isinstance(link_site, str):
        raise ConfigError(
            f"playlist.link_site must be a string, got {type(link_site).__name__}"
        )

    pages = playlist_config.get("pages", 1)
    if not isinstance(pages, int) or isinstance(pages, bool) or pages < 1:
        raise ConfigError(f"playlist.pages must be an integer >= 1, got {pages!r}")

    playback_config = config_dict.get("playback", {})
    for key in ["downloader", "player", "output_dir"]:
        value = playback_config.get(key)
        if value is not None and not isinstance(value, str):
            raise ConfigError(f"playback.{key} must be a string, got {type(value).__name__}")

    audio_format = playback_config.get("audio_format", "mp3")
    if audio_format not in VALID_AUDIO_FORMATS:
        raise ConfigError(
            f"Invalid audio format '{audio_format}'. "
            f"Valid options: {', '.join(sorted(VALID_AUDIO_FORMATS))}"
        )


def _dict_to_config(config_dict: dict[str, Any]) -> Config:
    """Convert configuration dictionary to Config dataclass."""
    api_dict = config_dict.get("api", {})
    playlist_dict = config_dict.get("playlist", {})
    playback_dict = config_dict.get("playback", {})

    return Config(
        api=ApiConfig(
            base_url=api_dict.get("base_url", DEFAULT_BASE_URL),
            user_agent=api_dict.get("user_agent", ""),
            timeout=float(api_dict.get("timeout", 30.0)),
            request_delay=float(api_dict.get("request_delay", 0.2)),
        ),
        playlist=PlaylistConfig(
            link_site=playlist_dict.get("link_site", "youtube"),
            pages=playlist_dict.get("pages", 1),
        ),
        playback=PlaybackConfig(
            downloader=playback_dict.get("downloader", "yt-dlp"),
            player=playback_dict.get("player", "ffplay"),
            audio_format=playback_dict.get("audio_format", "mp3"),
            output_dir=playback_dict.get("output_dir", "."),
        ),
    )


def load_config(
    local_path: Path | None = None,
    global_path: Path | None = None,
) -> Config:
    """Load configuration from local and global config files.

    Configuration priority (highest to lowest):
    1. Local config file (.xmplay/config in current directory)
    2. Global config file ($HOME/.xmplay/config)
    3. Default values

    Args:
        local_path: Override path for local config file.
        global_path: Override path for global config file.

    Returns:
        Config object with merged configuration values.

    Raises:
        ConfigError: If configuration files are invalid.
    """
    local_path = local_path or LOCAL_CONFIG_PATH
    global_path = global_path or GLOBAL_CONFIG_PATH

    merged_config = _default_dict()

    global_config = _load_toml_file(global_path)
    if global_config:
        merged_config = _deep_merge(merged_config, global_config)

    local_config = _load_toml_file(local_path)
    if local_config:
        merged_config = _deep_merge(merged_config, local_config)

    _validate_config(merged_config)

    return _dict_to_config(merged_config)
