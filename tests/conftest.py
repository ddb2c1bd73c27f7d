"""Shared fixtures for artdisplay tests."""

from __future__ import annotations

import itertools
import json
import os
from collections.abc import Callable
from typing import Any

import pytest

# Run Qt headless when no display is available
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from artdisplay.api.errors import AllSourcesExhaustedError
from artdisplay.api.http import HttpResponse, build_url
from artdisplay.models.artwork import Artwork, encode_data_uri

# Large enough to pass image validation
IMAGE_BODY = b"\x89PNG" + b"\x00" * 1996


class FakeHttpClient:
    """HttpClient stand-in serving canned responses by URL prefix.

    Unrouted URLs get a 404. Routes may hold an HttpResponse, an exception
    to raise, or a callable taking the full URL.
    """

    def __init__(self) -> None:
        self._routes: dict[str, Any] = {}
        self.calls: list[tuple[str, dict[str, str]]] = []

    def route(self, prefix: str, response: Any) -> None:
        self._routes[prefix] = response

    def json(self, prefix: str, data: Any, status: int = 200) -> None:
        body = json.dumps(data).encode()
        self.route(prefix, HttpResponse(status, {"content-type": "application/json"}, body))

    def image(
        self, prefix: str, body: bytes = IMAGE_BODY, content_type: str = "image/jpeg"
    ) -> None:
        self.route(prefix, HttpResponse(200, {"content-type": content_type}, body))

    def urls(self, contains: str = "") -> list[str]:
        return [url for url, _ in self.calls if contains in url]

    async def get(
        self,
        url: str,
        params: dict[str, str] | None = None,
        headers: dict[str, str] | None = None,
    ) -> HttpResponse:
        full_url = build_url(url, params)
        self.calls.append((full_url, dict(headers or {})))
        for prefix in sorted(self._routes, key=len, reverse=True):
            if full_url.startswith(prefix):
                response = self._routes[prefix]
                if isinstance(response, BaseException):
                    raise response
                if callable(response):
                    response = response(full_url)
                return response
        return HttpResponse(404, {"content-type": "text/html"}, b"not found", full_url)


class StubFetcher:
    """Fetcher returning queued results, then numbered artworks or an error."""

    def __init__(
        self,
        results: list[Artwork | Exception] | None = None,
        endless: bool = False,
    ) -> None:
        self._results = list(results or [])
        self._endless = endless
        self._counter = itertools.count(1)
        self.calls = 0

    async def fetch_random_artwork(self) -> Artwork:
        self.calls += 1
        if self._results:
            result = self._results.pop(0)
            if isinstance(result, Exception):
                raise result
            return result
        if self._endless:
            n = next(self._counter)
            return Artwork(id=f"test-fetched-{n}", title=f"Fetched {n}")
        raise AllSourcesExhaustedError("stub network down")


@pytest.fixture
def fake_client() -> FakeHttpClient:
    """Return an HTTP client with no routes."""
    return FakeHttpClient()


@pytest.fixture
def make_artwork() -> Callable[[str], Artwork]:
    """Return a factory building a small artwork for a key."""

    def factory(key: str) -> Artwork:
        return Artwork(
            id=f"test-{key}",
            title=f"Artwork {key}",
            artist="Test Artist",
            source="Test Museum",
            image=encode_data_uri(IMAGE_BODY, "image/png"),
        )

    return factory


@pytest.fixture
def failing_fetcher() -> StubFetcher:
    """Return a fetcher whose every call fails as if the network were down."""
    return StubFetcher()


@pytest.fixture
def endless_fetcher() -> StubFetcher:
    """Return a fetcher producing a new artwork on every call."""
    return StubFetcher(endless=True)


@pytest.fixture
def stub_fetcher_factory() -> Callable[..., StubFetcher]:
    """Return the StubFetcher class for tests needing scripted results."""
    return StubFetcher
