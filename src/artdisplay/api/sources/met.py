"""Metropolitan Museum of Art source.

Searches the collection by keyword, then fetches object records for random
ids from the result set until one has a downloadable primary image.
"""

from __future__ import annotations

import logging
from typing import Any

from artdisplay.api.errors import FetchError, NoResultsError, NoValidImageError, ParseError
from artdisplay.api.http import HttpClient
from artdisplay.api.sources.base import MAX_ATTEMPTS, ArtSource, text_field, try_candidates
from artdisplay.models.artwork import Artwork

logger = logging.getLogger(__name__)

MET_API_URL = "https://collectionapi.metmuseum.org/public/collection/v1"

SEARCH_TERMS = (
    "painting",
    "landscape",
    "portrait",
    "still life",
    "sculpture",
    "impressionism",
    "renaissance",
    "abstract",
    "nature",
    "mythology",
)


class MetSource(ArtSource):
    """Fetch artwork from The Met Collection API.

    Example:
        source = MetSource()
        artwork = await source.fetch(HttpClient())
    """

    @property
    def name(self) -> str:
        """Return source name."""
        return "Met"

    @property
    def museum(self) -> str:
        """Return museum name."""
        return "The Metropolitan Museum of Art"

    @property
    def prefix(self) -> str:
        """Return id prefix."""
        return "met"

    async def fetch(self, client: HttpClient) -> Artwork:
        """Fetch a random Met artwork with an image."""
        term = self._rng.choice(SEARCH_TERMS)
        result = await self.get_json(
            client,
            f"{MET_API_URL}/search",
            params={"hasImages": "true", "q": term},
        )
        if not isinstance(result, dict):
            raise ParseError("Met search returned unexpected payload")

        object_ids = result.get("objectIDs") or []
        if not object_ids:
            raise NoResultsError(f"No results from Met for '{term}'")

        candidates = (self._rng.choice(object_ids) for _ in range(MAX_ATTEMPTS))
        artwork = await try_candidates(candidates, lambda oid: self._try_object(client, oid))
        if artwork is None:
            raise NoValidImageError("Could not find Met artwork with image")
        return artwork

    async def _try_object(self, client: HttpClient, object_id: Any) -> Artwork | None:
        """Fetch one object record and its image, or None on any failure."""
        try:
            record = await self.get_json(client, f"{MET_API_URL}/objects/{object_id}")
        except FetchError as e:
            logger.debug("Met object %s unavailable: %s", object_id, e)
            return None
        if not isinstance(record, dict):
            return None

        image_url = text_field(record, "primaryImage")
        if not image_url:
            return None

        image = await self.download(client, image_url)
        if image is None:
            return None

        return self.make_artwork(
            record.get("objectID", object_id),
            image,
            title=text_field(record, "title"),
            artist=text_field(record, "artistDisplayName"),
            date=text_field(record, "objectDate"),
            medium=text_field(record, "medium"),
        )
