"""Cleveland Museum of Art open-access source."""

from __future__ import annotations

import logging
from typing import Any

from artdisplay.api.errors import NoResultsError, NoValidImageError, ParseError
from artdisplay.api.http import HttpClient
from artdisplay.api.sources.base import ArtSource, text_field, try_candidates
from artdisplay.models.artwork import Artwork

logger = logging.getLogger(__name__)

CMA_API_URL = "https://openaccess-api.clevelandart.org/api/artworks/"

MAX_SKIP = 99
PAGE_SIZE = 20

SEARCH_TERMS = (
    "painting",
    "landscape",
    "portrait",
    "impressionist",
    "modern",
    "still life",
    "abstract",
    "nature",
    "classical",
    "oil",
)


def _web_image_url(record: dict[str, Any]) -> str:
    """Return the web-size image URL of a CMA record, or empty string."""
    images = record.get("images")
    if not isinstance(images, dict):
        return ""
    web = images.get("web")
    if not isinstance(web, dict):
        return ""
    url = web.get("url")
    return url if isinstance(url, str) else ""


def _first_creator(record: dict[str, Any]) -> str | None:
    creators = record.get("creators")
    if isinstance(creators, list) and creators and isinstance(creators[0], dict):
        return text_field(creators[0], "description")
    return None


class CmaSource(ArtSource):
    """Fetch CC0 paintings from the Cleveland Museum of Art API."""

    @property
    def name(self) -> str:
        """Return source name."""
        return "CMA"

    @property
    def museum(self) -> str:
        """Return museum name."""
        return "Cleveland Museum of Art"

    @property
    def prefix(self) -> str:
        """Return id prefix."""
        return "cma"

    async def fetch(self, client: HttpClient) -> Artwork:
        """Fetch a random CMA painting with a valid image."""
        term = self._rng.choice(SEARCH_TERMS)
        skip = self._rng.randint(0, MAX_SKIP)
        result = await self.get_json(
            client,
            CMA_API_URL,
            params={
                "q": term,
                "has_image": "1",
                "cc0": "1",
                "type": "Painting",
                "limit": str(PAGE_SIZE),
                "skip": str(skip),
            },
        )
        if not isinstance(result, dict):
            raise ParseError("CMA search returned unexpected payload")

        data = result.get("data") or []
        if not isinstance(data, list):
            raise ParseError("CMA search returned unexpected data")
        records = [r for r in data if isinstance(r, dict) and _web_image_url(r)]
        if not records:
            raise NoResultsError(f"No CMA artworks with images for '{term}' (skip {skip})")

        self._rng.shuffle(records)
        artwork = await try_candidates(records, lambda r: self._try_record(client, r))
        if artwork is None:
            raise NoValidImageError("Could not find CMA artwork with valid image")
        return artwork

    async def _try_record(self, client: HttpClient, record: dict[str, Any]) -> Artwork | None:
        image = await self.download(client, _web_image_url(record))
        if image is None:
            return None
        return self.make_artwork(
            record.get("id"),
            image,
            title=text_field(record, "title"),
            artist=_first_creator(record),
            date=text_field(record, "creation_date"),
            medium=text_field(record, "technique"),
        )
