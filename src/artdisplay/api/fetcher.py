"""Fetch orchestration across all artwork sources.

Picks a random starting source and falls back through the others in
round-robin order until one produces an artwork.
"""

from __future__ import annotations

import logging
import random
from collections.abc import Sequence

from artdisplay.api.errors import AllSourcesExhaustedError, FetchError
from artdisplay.api.http import HttpClient
from artdisplay.api.sources import AicSource, ArtSource, CmaSource, MetSource, NgaCatalog, NgaSource
from artdisplay.models.artwork import Artwork

logger = logging.getLogger(__name__)


def default_sources(catalog: NgaCatalog, rng: random.Random | None = None) -> list[ArtSource]:
    """Return the standard source set: Met, AIC, CMA, NGA.

    Args:
        catalog: NGA catalog for the embedded source.
        rng: Optional shared random number generator.
    """
    return [
        MetSource(rng),
        AicSource(rng),
        CmaSource(rng),
        NgaSource(catalog, rng),
    ]


class ArtFetcher:
    """Fetch one random artwork from any available source.

    A single museum outage stays invisible as long as another source
    succeeds; the error only surfaces when every source has failed.

    Example:
        fetcher = ArtFetcher(HttpClient(), default_sources(NgaCatalog.load_bundled()))
        artwork = await fetcher.fetch_random_artwork()
    """

    def __init__(
        self,
        client: HttpClient,
        sources: Sequence[ArtSource],
        rng: random.Random | None = None,
    ) -> None:
        """Initialize with an HTTP client and the sources to cascade through.

        Args:
            client: HTTP client shared by all sources.
            sources: Sources in round-robin order.
            rng: Random number generator for the starting source.
        """
        if not sources:
            raise ValueError("ArtFetcher needs at least one source")
        self._client = client
        self._sources = tuple(sources)
        self._rng = rng or random.Random()

    @property
    def sources(self) -> tuple[ArtSource, ...]:
        """Return the configured sources."""
        return self._sources

    @property
    def name(self) -> str:
        """Return combined source names."""
        return f"Fallback({', '.join(s.name for s in self._sources)})"

    def source_order(self, start: int) -> list[ArtSource]:
        """Return the sources in round-robin order beginning at ``start``."""
        count = len(self._sources)
        return [self._sources[(start + i) % count] for i in range(count)]

    async def fetch_random_artwork(self) -> Artwork:
        """Fetch an artwork, starting at a random source and falling back.

        Returns:
            Artwork from the first source that succeeds.

        Raises:
            AllSourcesExhaustedError: If every source failed.
        """
        start = self._rng.randrange(len(self._sources))
        last_error = ""
        for source in self.source_order(start):
            try:
                return await source.fetch(self._client)
            except FetchError as e:
                logger.warning("%s failed: %s", source.name, e)
                last_error = str(e)
            except Exception as e:  # noqa: BLE001
                logger.warning("%s unexpected error: %s", source.name, e, exc_info=True)
                last_error = f"{source.name} unexpected error: {e}"
        raise AllSourcesExhaustedError(last_error)
