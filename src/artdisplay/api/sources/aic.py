"""Art Institute of Chicago source.

Uses the AIC search endpoint and builds IIIF image URLs from each record's
``image_id``. The AIC IIIF server rejects image requests without a Referer.
"""

from __future__ import annotations

import logging
import urllib.parse
from typing import Any

from artdisplay.api.errors import NoResultsError, NoValidImageError, ParseError
from artdisplay.api.http import USER_AGENT, HttpClient
from artdisplay.api.sources.base import ArtSource, text_field, try_candidates
from artdisplay.models.artwork import Artwork

logger = logging.getLogger(__name__)

AIC_SEARCH_URL = "https://api.artic.edu/api/v1/artworks/search"
AIC_DEFAULT_IIIF_URL = "https://www.artic.edu/iiif/2"
AIC_REFERER = "https://www.artic.edu/"
AIC_IMAGE_DOMAIN = "artic.edu"
AIC_FIELDS = "id,title,artist_display,date_display,medium_display,image_id"

# 843px wide is enough for a full-screen overlay and downloads quickly
IIIF_IMAGE_PATH = "full/843,/0/default.jpg"

PAGE_RANGE = (1, 5)
PAGE_SIZE = 20

SEARCH_TERMS = (
    "painting",
    "landscape",
    "impressionist",
    "modern",
    "watercolor",
    "oil",
    "portrait",
    "nature",
    "classical",
    "abstract",
)


def _iiif_url(result: dict[str, Any]) -> str:
    """Return the IIIF base URL advertised by a search response."""
    config = result.get("config")
    if not isinstance(config, dict):
        return AIC_DEFAULT_IIIF_URL
    url = config.get("iiif_url")
    return url if isinstance(url, str) and url else AIC_DEFAULT_IIIF_URL


class AicSource(ArtSource):
    """Fetch artwork from the Art Institute of Chicago API."""

    @property
    def name(self) -> str:
        """Return source name."""
        return "AIC"

    @property
    def museum(self) -> str:
        """Return museum name."""
        return "Art Institute of Chicago"

    @property
    def prefix(self) -> str:
        """Return id prefix."""
        return "aic"

    def image_headers(self, url: str) -> dict[str, str]:
        """Send the AIC Referer when the image is hosted under artic.edu."""
        host = urllib.parse.urlsplit(url).hostname or ""
        if host == AIC_IMAGE_DOMAIN or host.endswith(f".{AIC_IMAGE_DOMAIN}"):
            return {"Referer": AIC_REFERER}
        return {}

    async def fetch(self, client: HttpClient) -> Artwork:
        """Fetch a random AIC artwork with a valid image."""
        term = self._rng.choice(SEARCH_TERMS)
        page = self._rng.randint(*PAGE_RANGE)
        result = await self.get_json(
            client,
            AIC_SEARCH_URL,
            params={
                "q": term,
                "fields": AIC_FIELDS,
                "limit": str(PAGE_SIZE),
                "page": str(page),
            },
            headers={"AIC-User-Agent": USER_AGENT},
        )
        if not isinstance(result, dict):
            raise ParseError("AIC search returned unexpected payload")

        iiif_url = _iiif_url(result)
        data = result.get("data") or []
        if not isinstance(data, list):
            raise ParseError("AIC search returned unexpected data")
        records = [r for r in data if isinstance(r, dict) and r.get("image_id")]
        if not records:
            raise NoResultsError(f"No AIC artworks with images for '{term}' (page {page})")

        self._rng.shuffle(records)
        artwork = await try_candidates(records, lambda r: self._try_record(client, r, iiif_url))
        if artwork is None:
            raise NoValidImageError("Could not find AIC artwork with valid image")
        return artwork

    async def _try_record(
        self, client: HttpClient, record: dict[str, Any], iiif_url: str
    ) -> Artwork | None:
        image_url = f"{iiif_url}/{record['image_id']}/{IIIF_IMAGE_PATH}"
        image = await self.download(client, image_url)
        if image is None:
            return None
        return self.make_artwork(
            record.get("id"),
            image,
            title=text_field(record, "title"),
            artist=text_field(record, "artist_display"),
            date=text_field(record, "date_display"),
            medium=text_field(record, "medium_display"),
        )
