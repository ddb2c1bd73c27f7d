"""Base artwork source and helpers shared by all museum adapters.

Each source turns one museum API into a normalized ``Artwork`` or raises a
``FetchError``. Candidate selection follows one shape everywhere: try up to
``MAX_ATTEMPTS`` candidates and stop at the first one with a valid image.
"""

from __future__ import annotations

import itertools
import logging
import random
from abc import ABC, abstractmethod
from collections.abc import Awaitable, Callable, Iterable, Mapping
from typing import Any, TypeVar

from artdisplay.api.download import download_image
from artdisplay.api.errors import NetworkError, ParseError
from artdisplay.api.http import HttpClient
from artdisplay.models.artwork import DEFAULT_ARTIST, DEFAULT_TITLE, Artwork, encode_data_uri

logger = logging.getLogger(__name__)

# Candidates tried per fetch before giving up on a source
MAX_ATTEMPTS = 5

T = TypeVar("T")
R = TypeVar("R")


def strip_markup(text: str) -> str:
    """Remove markup tags from a string.

    Everything from a ``<`` up to the next ``>`` is dropped. Tags do not
    nest; an unterminated ``<`` swallows the rest of the string.

    Example:
        >>> strip_markup("<i>Water Lilies</i>")
        'Water Lilies'
    """
    result: list[str] = []
    in_tag = False
    for char in text:
        if char == "<":
            in_tag = True
        elif char == ">":
            in_tag = False
        elif not in_tag:
            result.append(char)
    return "".join(result)


async def try_candidates(
    candidates: Iterable[T],
    attempt: Callable[[T], Awaitable[R | None]],
    limit: int = MAX_ATTEMPTS,
) -> R | None:
    """Try candidates in order until one succeeds.

    Args:
        candidates: Candidate iterable (may be infinite).
        attempt: Coroutine function returning a result or None on failure.
        limit: Maximum number of candidates to try.

    Returns:
        The first non-None result, or None if every attempt failed.
    """
    for candidate in itertools.islice(candidates, limit):
        result = await attempt(candidate)
        if result is not None:
            return result
    return None


class ArtSource(ABC):
    """Abstract base class for museum artwork sources.

    Subclasses implement ``fetch`` for one museum API. The random number
    generator is injectable so tests can force a deterministic candidate order.
    """

    def __init__(self, rng: random.Random | None = None) -> None:
        """Initialize the source.

        Args:
            rng: Random number generator for term and candidate selection.
        """
        self._rng = rng or random.Random()

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the short source name for logging."""

    @property
    @abstractmethod
    def museum(self) -> str:
        """Return the museum name shown with each artwork."""

    @property
    @abstractmethod
    def prefix(self) -> str:
        """Return the id namespace prefix (e.g., "met")."""

    @abstractmethod
    async def fetch(self, client: HttpClient) -> Artwork:
        """Fetch one random artwork.

        Args:
            client: HTTP client to use for all requests.

        Returns:
            A normalized Artwork.

        Raises:
            FetchError: If no artwork could be produced.
        """

    def image_headers(self, url: str) -> dict[str, str]:
        """Return extra headers required to download ``url``."""
        _ = url
        return {}

    async def get_json(
        self,
        client: HttpClient,
        url: str,
        params: Mapping[str, str] | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> Any:
        """Fetch and decode a JSON document.

        Raises:
            NetworkError: On transport failure or non-2xx status.
            ParseError: If the body is not valid JSON.
        """
        try:
            response = await client.get(url, params=params, headers=headers)
        except OSError as e:
            raise NetworkError(f"{self.name} request failed: {e}") from e
        if not response.ok:
            raise NetworkError(f"{self.name} request failed: HTTP {response.status}")
        try:
            return response.json()
        except ValueError as e:
            raise ParseError(f"{self.name} parse failed: {e}") from e

    async def download(self, client: HttpClient, url: str) -> tuple[bytes, str] | None:
        """Download and validate an image for this source."""
        return await download_image(client, url, self.image_headers(url) or None)

    def make_artwork(
        self,
        native_id: object,
        image: tuple[bytes, str],
        *,
        title: str | None = None,
        artist: str | None = None,
        date: str | None = None,
        medium: str | None = None,
    ) -> Artwork:
        """Build a normalized Artwork, filling in placeholders for missing fields."""
        data, mime_type = image
        return Artwork(
            id=f"{self.prefix}-{native_id}",
            title=strip_markup(title or DEFAULT_TITLE),
            artist=artist or DEFAULT_ARTIST,
            date=date or "",
            medium=medium or "",
            source=self.museum,
            image=encode_data_uri(data, mime_type),
        )


def text_field(record: Mapping[str, Any], key: str) -> str | None:
    """Return a record field as a string, or None if missing or not text."""
    value = record.get(key)
    return value if isinstance(value, str) else None
