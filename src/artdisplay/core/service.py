"""Art service facade: prefetch cache plus history navigation.

Locking discipline:
- ``_lock`` guards history and cursor as a single unit. Every navigation
  decision is made while holding it.
- The cache lock is only ever taken while ``_lock`` is held or on its own,
  never the other way round.
- No network I/O happens under either lock. A synchronous fetch in live
  mode releases ``_lock``, fetches, then re-acquires it to record the result.
"""

from __future__ import annotations

import asyncio
import logging

from artdisplay.core.history import HistoryNavigator
from artdisplay.core.prefetch import Fetcher, PrefetchCache
from artdisplay.models.artwork import Artwork

logger = logging.getLogger(__name__)


class ArtService:
    """Serve artworks with next/previous navigation.

    Example:
        service = ArtService(fetcher)
        service.start()
        artwork = await service.next()
        earlier = await service.previous()
    """

    def __init__(
        self,
        fetcher: Fetcher,
        cache: PrefetchCache | None = None,
        history: HistoryNavigator | None = None,
    ) -> None:
        """Initialize the service.

        Args:
            fetcher: Used for synchronous fetches when the cache is empty.
            cache: Prefetch cache (a default one is built from ``fetcher``).
            history: History navigator (empty by default).
        """
        self._fetcher = fetcher
        self._cache = cache if cache is not None else PrefetchCache(fetcher)
        self._history = history if history is not None else HistoryNavigator()
        self._lock = asyncio.Lock()

    @property
    def cache(self) -> PrefetchCache:
        """Return the prefetch cache."""
        return self._cache

    @property
    def history(self) -> HistoryNavigator:
        """Return the history navigator."""
        return self._history

    def start(self) -> None:
        """Start background prefetching (requires a running loop)."""
        self._cache.start()

    async def stop(self) -> None:
        """Stop background prefetching."""
        await self._cache.stop()

    async def current(self) -> Artwork | None:
        """Return the artwork being shown, without side effects."""
        async with self._lock:
            return self._history.current()

    async def next(self) -> Artwork:
        """Advance to the next artwork.

        While browsing, replays the next history entry. In live mode, takes
        the oldest prefetched artwork, or fetches one if the cache is empty.

        Raises:
            FetchError: If a fetch was needed and every source failed.
        """
        async with self._lock:
            artwork = self._history.step_forward()
            if artwork is not None:
                return artwork

            artwork = await self._cache.pop()
            if artwork is not None:
                self._history.push(artwork)
                return artwork

        logger.debug("Prefetch cache empty, fetching synchronously")
        artwork = await self._fetcher.fetch_random_artwork()

        async with self._lock:
            self._history.push(artwork)
        return artwork

    async def previous(self) -> Artwork:
        """Step back one artwork in history. Never touches the network.

        Raises:
            HistoryError: If there is nothing to step back to.
        """
        async with self._lock:
            return self._history.step_back()
