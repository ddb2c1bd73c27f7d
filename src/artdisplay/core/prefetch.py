"""Bounded prefetch queue kept topped up by a background task."""

from __future__ import annotations

import asyncio
import contextlib
import logging
from collections import deque
from typing import Protocol

from artdisplay.api.errors import FetchError
from artdisplay.models.artwork import Artwork

logger = logging.getLogger(__name__)

DEFAULT_CAPACITY = 5
DEFAULT_FILL_INTERVAL = 2.0  # seconds


class Fetcher(Protocol):
    """Anything that can produce a random artwork."""

    async def fetch_random_artwork(self) -> Artwork: ...


class PrefetchCache:
    """FIFO of ready artworks filled ahead of demand.

    The queue lock is never held across a fetch: the filler checks the
    length, fetches unlocked, then re-checks the length before appending.

    Example:
        cache = PrefetchCache(fetcher)
        cache.start()               # on a running event loop
        artwork = await cache.pop() # None if nothing ready yet
    """

    def __init__(
        self,
        fetcher: Fetcher,
        capacity: int = DEFAULT_CAPACITY,
        interval: float = DEFAULT_FILL_INTERVAL,
    ) -> None:
        """Initialize an empty cache.

        Args:
            fetcher: Source of new artworks.
            capacity: Maximum number of queued artworks.
            interval: Seconds to sleep between filler iterations.
        """
        self._fetcher = fetcher
        self._capacity = capacity
        self._interval = interval
        self._queue: deque[Artwork] = deque()
        self._lock = asyncio.Lock()
        self._task: asyncio.Task[None] | None = None

    @property
    def capacity(self) -> int:
        """Return the maximum queue length."""
        return self._capacity

    @property
    def interval(self) -> float:
        """Return the filler sleep interval in seconds."""
        return self._interval

    @property
    def is_running(self) -> bool:
        """Return True while the filler task is alive."""
        return self._task is not None and not self._task.done()

    async def size(self) -> int:
        """Return the number of queued artworks."""
        async with self._lock:
            return len(self._queue)

    async def pop(self) -> Artwork | None:
        """Remove and return the oldest queued artwork, or None if empty."""
        async with self._lock:
            return self._queue.popleft() if self._queue else None

    async def put(self, artwork: Artwork) -> bool:
        """Append an artwork if there is room.

        Returns:
            True if queued, False if the queue was already full.
        """
        async with self._lock:
            if len(self._queue) >= self._capacity:
                return False
            self._queue.append(artwork)
            logger.info("Cached artwork: %s (cache size: %d)", artwork.title, len(self._queue))
            return True

    async def fill_once(self) -> bool:
        """Run one filler iteration.

        Returns:
            True if an artwork was added to the queue.
        """
        async with self._lock:
            if len(self._queue) >= self._capacity:
                return False

        try:
            artwork = await self._fetcher.fetch_random_artwork()
        except FetchError as e:
            logger.error("Prefetch failed: %s", e)
            return False
        except Exception:  # noqa: BLE001
            logger.exception("Unexpected error during prefetch")
            return False

        return await self.put(artwork)

    async def run(self) -> None:
        """Keep the queue topped up until cancelled."""
        while True:
            await self.fill_once()
            await asyncio.sleep(self._interval)

    def start(self) -> None:
        """Start the filler task on the running event loop."""
        if self.is_running:
            return
        self._task = asyncio.get_running_loop().create_task(self.run())
        logger.info("Prefetch started (capacity %d, interval %.1fs)", self._capacity, self._interval)

    async def stop(self) -> None:
        """Cancel the filler task and wait for it to finish."""
        if self._task is None:
            return
        task, self._task = self._task, None
        task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await task
        logger.info("Prefetch stopped")
