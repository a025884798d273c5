"""Custom exceptions for xmplay."""

from __future__ import annotations


class XMPlayError(Exception):
    """Base exception for all xmplay errors."""

    pass


class ConfigError(XMPlayError):
    """Configuration-related errors."""

    pass


class NetworkError(XMPlayError):
    """The request could not complete (DNS, refused connection, timeout)."""

    pass


class RemoteError(XMPlayError):
    """The API answered with a non-success status or a malformed payload."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class MissingDependencyError(XMPlayError):
    """A required external executable is not on the PATH."""

    def __init__(self, missing: list[str]) -> None:
        super().__init__(f"Required executable(s) not found on PATH: {', '.join(missing)}")
        self.missing = missing


class PlaybackError(XMPlayError):
    """An external process could not be started."""

    pass


class NoLinkWarning(UserWarning):
    """A track has no link for the requested site and was skipped."""
