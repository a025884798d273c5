"""HTTP client for the xmplaylist.com API."""

from __future__ import annotations

from typing import Any
from urllib.parse import urljoin

import httpx

from xmplay.core.config import Config
from xmplay.core.errors import NetworkError, RemoteError


class XMPlaylistClient:
    """Thin wrapper around httpx that maps failures onto the xmplay error types.

    Can be used as a context manager so that several requests share one
    connection pool. Nested ``with`` blocks reuse the open pool; it is
    closed when the outermost block exits.
    """

    def __init__(
        self,
        config: Config | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.config = config or Config()
        self.base_url = self.config.get_base_url()
        self._transport = transport
        self._client: httpx.Client | None = None
        self._depth = 0

    def __enter__(self) -> XMPlaylistClient:
        if self._client is None:
            self._client = httpx.Client(
                timeout=self.config.api.timeout,
                headers={"User-Agent": self.config.api.get_user_agent()},
                follow_redirects=True,
                transport=self._transport,
            )
        self._depth += 1
        return self

    def __exit__(self, *exc_info: object) -> None:
        self._depth -= 1
        if self._depth == 0 and self._client is not None:
            self._client.close()
            self._client = None

    def url_for(self, path: str) -> str:
        """Resolve an API path or a server-provided link against the base URL."""
        if path.startswith(("http://", "https://")):
            return path
        if path.startswith("/api/"):
            return urljoin(self.base_url + "/", path)
        return f"{self.base_url}/{path.lstrip('/')}"

    def get_json(self, path: str) -> Any:
        """
        Issue one GET request and decode the JSON body.

        Args:
            path: API path ("station", "feed") or absolute URL

        Returns:
            The decoded JSON payload

        Raises:
            NetworkError: If the request cannot complete
            RemoteError: If the server answers with an error status or invalid JSON
        """
        if self._client is None:
            with self:
                return self.get_json(path)

        url = self.url_for(path)
        try:
            response = self._client.get(url)
            response.raise_for_status()
            return response.json()

        except httpx.TimeoutException as e:
            raise NetworkError(
                f"Request to {url} timed out after {self.config.api.timeout} seconds"
            ) from e

        except httpx.HTTPStatusError as e:
            raise RemoteError(
                f"xmplaylist.com returned error status {e.response.status_code} for {url}",
                status_code=e.response.status_code,
            ) from e

        except httpx.RequestError as e:
            raise NetworkError(f"Failed to connect to xmplaylist.com: {e}") from e

        except ValueError as e:
            # JSON decode error
            raise RemoteError(f"xmplaylist.com returned invalid JSON from {url}: {e}") from e
