"""Minimal async HTTP client for museum APIs.

Requests are made with ``urllib.request`` in the default thread pool so
callers on the asyncio loop never block on network I/O.
"""

from __future__ import annotations

import asyncio
import http.client
import json
import logging
import urllib.error
import urllib.parse
import urllib.request
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

logger = logging.getLogger(__name__)

# Sent on every outbound request
USER_AGENT = "ArtDisplay/0.1 (Desktop Art Viewer)"

# Request timeout in seconds
DEFAULT_TIMEOUT = 15.0


@dataclass(frozen=True)
class HttpResponse:
    """A completed HTTP exchange.

    Attributes:
        status: HTTP status code.
        headers: Response headers with lower-cased names.
        body: Raw response body.
        url: Requested URL (including query string).
    """

    status: int
    headers: Mapping[str, str] = field(default_factory=dict)
    body: bytes = b""
    url: str = ""

    @property
    def ok(self) -> bool:
        """Return True for a 2xx status."""
        return 200 <= self.status < 300  # noqa: PLR2004

    @property
    def content_type(self) -> str:
        """Return the raw Content-Type header (empty if absent)."""
        return self.headers.get("content-type", "")

    def json(self) -> Any:
        """Decode the body as JSON.

        Raises:
            ValueError: If the body is not valid UTF-8 JSON.
        """
        return json.loads(self.body.decode("utf-8"))


class HttpClient:
    """Async wrapper around blocking urllib requests.

    Non-2xx statuses are returned as ``HttpResponse`` objects. Transport
    failures (DNS, refused connection, timeout) propagate as ``OSError``
    subclasses such as ``urllib.error.URLError`` and ``TimeoutError``.

    Example:
        client = HttpClient(timeout=10)
        response = await client.get("https://example.org/api", params={"q": "oil"})
        if response.ok:
            data = response.json()
    """

    def __init__(self, user_agent: str = USER_AGENT, timeout: float = DEFAULT_TIMEOUT) -> None:
        """Initialize the client.

        Args:
            user_agent: Value of the User-Agent header sent on every request.
            timeout: Per-request timeout in seconds.
        """
        self._user_agent = user_agent
        self._timeout = timeout

    @property
    def user_agent(self) -> str:
        """Return the client identification string."""
        return self._user_agent

    @property
    def timeout(self) -> float:
        """Return the per-request timeout in seconds."""
        return self._timeout

    async def get(
        self,
        url: str,
        params: Mapping[str, str] | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> HttpResponse:
        """Perform a GET request without blocking the event loop.

        Args:
            url: Request URL.
            params: Optional query parameters appended to the URL.
            headers: Extra request headers.

        Returns:
            The response, whatever its status.
        """
        full_url = build_url(url, params)
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, self._request, full_url, dict(headers or {}))

    def _request(self, url: str, headers: dict[str, str]) -> HttpResponse:
        """Perform the request (blocking)."""
        req = urllib.request.Request(url, headers={"User-Agent": self._user_agent, **headers})
        try:
            with urllib.request.urlopen(req, timeout=self._timeout) as response:
                return HttpResponse(
                    status=response.status,
                    headers=_lower_headers(response.headers.items()),
                    body=response.read(),
                    url=url,
                )
        except urllib.error.HTTPError as e:
            logger.debug("HTTP %d from %s", e.code, url)
            return HttpResponse(
                status=e.code,
                headers=_lower_headers(e.headers.items()) if e.headers else {},
                body=e.read() or b"",
                url=url,
            )
        except http.client.HTTPException as e:
            raise ConnectionError(f"Malformed HTTP response from {url}: {e}") from e


def build_url(url: str, params: Mapping[str, str] | None = None) -> str:
    """Append URL-encoded query parameters to a URL."""
    if not params:
        return url
    separator = "&" if "?" in url else "?"
    return f"{url}{separator}{urllib.parse.urlencode(params)}"


def _lower_headers(items: Any) -> dict[str, str]:
    return {str(name).lower(): str(value) for name, value in items}
