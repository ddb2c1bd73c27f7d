"""National Gallery of Art source backed by the embedded catalog."""

from __future__ import annotations

import logging
import random

from artdisplay.api.errors import NoResultsError, NoValidImageError
from artdisplay.api.http import HttpClient
from artdisplay.api.sources.base import MAX_ATTEMPTS, ArtSource, try_candidates
from artdisplay.api.sources.catalog import NgaCatalog, NgaCatalogEntry
from artdisplay.models.artwork import Artwork

logger = logging.getLogger(__name__)

NGA_IIIF_URL = "https://api.nga.gov/iiif"
IIIF_IMAGE_PATH = "full/!843,843/0/default.jpg"


def nga_image_url(uuid: str) -> str:
    """Build the IIIF image URL for a catalog uuid."""
    return f"{NGA_IIIF_URL}/{uuid}/{IIIF_IMAGE_PATH}"


class NgaSource(ArtSource):
    """Serve random paintings from the NGA catalog via its IIIF server."""

    def __init__(self, catalog: NgaCatalog, rng: random.Random | None = None) -> None:
        """Initialize with a loaded catalog.

        Args:
            catalog: Catalog to draw entries from.
            rng: Optional random number generator.
        """
        super().__init__(rng)
        self._catalog = catalog

    @property
    def name(self) -> str:
        """Return source name."""
        return "NGA"

    @property
    def museum(self) -> str:
        """Return museum name."""
        return "National Gallery of Art"

    @property
    def prefix(self) -> str:
        """Return id prefix."""
        return "nga"

    @property
    def catalog(self) -> NgaCatalog:
        """Return the catalog this source draws from."""
        return self._catalog

    async def fetch(self, client: HttpClient) -> Artwork:
        """Fetch the image of a random catalog entry."""
        if not len(self._catalog):
            raise NoResultsError("NGA catalog is empty")

        candidates = (self._rng.choice(self._catalog.entries) for _ in range(MAX_ATTEMPTS))
        artwork = await try_candidates(candidates, lambda e: self._try_entry(client, e))
        if artwork is None:
            raise NoValidImageError("Could not find NGA artwork with valid image")
        return artwork

    async def _try_entry(self, client: HttpClient, entry: NgaCatalogEntry) -> Artwork | None:
        image = await self.download(client, nga_image_url(entry.uuid))
        if image is None:
            return None
        return self.make_artwork(
            entry.uuid,
            image,
            title=entry.title,
            artist=entry.artist,
            date=entry.date,
            medium=entry.medium,
        )
