"""Background worker running the art service for a Qt application.

Qt objects live in the main thread, but the service is asyncio-based.
The worker runs a private event loop in a daemon thread and reports
results back through Qt signals.
"""

from __future__ import annotations

import asyncio
import logging
import threading
from collections.abc import Callable, Coroutine
from typing import Any

from PySide6.QtCore import QObject, Signal

from artdisplay.api.errors import FetchError
from artdisplay.api.fetcher import ArtFetcher, default_sources
from artdisplay.api.http import DEFAULT_TIMEOUT, HttpClient
from artdisplay.api.sources import NgaCatalog
from artdisplay.core.history import HistoryError
from artdisplay.core.prefetch import DEFAULT_FILL_INTERVAL, Fetcher, PrefetchCache
from artdisplay.core.service import ArtService

logger = logging.getLogger(__name__)


class ArtWorker(QObject):
    """Run ArtService on a background asyncio loop.

    Example:
        worker = ArtWorker(NgaCatalog.load_bundled())
        worker.artwork_changed.connect(lambda art: print(art.title))
        worker.ready.connect(worker.request_next)
        worker.start()
    """

    # Emitted once the service is running and accepting requests
    ready = Signal()

    # Emitted after a successful next/previous
    # Parameter: Artwork
    artwork_changed = Signal(object)

    # Reply to request_current
    # Parameter: Artwork | None
    current_received = Signal(object)

    # Emitted when a request fails
    # Parameter: str (error message)
    error_occurred = Signal(str)

    def __init__(
        self,
        catalog: NgaCatalog | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        prefetch_interval: float = DEFAULT_FILL_INTERVAL,
        fetcher: Fetcher | None = None,
        parent: QObject | None = None,
    ) -> None:
        """Initialize the worker.

        Args:
            catalog: NGA catalog (empty catalog if None).
            timeout: HTTP request timeout in seconds.
            prefetch_interval: Seconds between prefetch iterations.
            fetcher: Replacement fetcher (builds the standard one if None).
            parent: Optional parent QObject.
        """
        super().__init__(parent)
        self._catalog = catalog if catalog is not None else NgaCatalog()
        self._timeout = timeout
        self._prefetch_interval = prefetch_interval
        self._fetcher = fetcher

        self._running = False
        self._thread: threading.Thread | None = None
        self._loop: asyncio.AbstractEventLoop | None = None
        self._service: ArtService | None = None

    @property
    def timeout(self) -> float:
        """Return the HTTP request timeout."""
        return self._timeout

    @property
    def prefetch_interval(self) -> float:
        """Return the prefetch interval."""
        return self._prefetch_interval

    @property
    def is_running(self) -> bool:
        """Return True if the service loop is accepting requests."""
        return self._loop is not None and self._loop.is_running() and self._service is not None

    def start(self) -> None:
        """Start the worker thread."""
        if not self._running:
            self._running = True
            self._thread = threading.Thread(target=self._run_loop, daemon=True)
            self._thread.start()
            logger.info("ArtWorker started")

    def stop(self) -> None:
        """Stop the worker thread and wait for it to exit."""
        self._running = False
        if self._thread:
            self._thread.join(timeout=5.0)
            self._thread = None
            logger.info("ArtWorker stopped")

    def request_next(self) -> None:
        """Advance to the next artwork.

        Thread-safe call from main thread.
        """
        self._submit(self._safe_next)

    def request_previous(self) -> None:
        """Step back in history.

        Thread-safe call from main thread.
        """
        self._submit(self._safe_previous)

    def request_current(self) -> None:
        """Ask for the current artwork (reply via current_received).

        Thread-safe call from main thread.
        """
        self._submit(self._safe_current)

    def _submit(self, coro_fn: Callable[[], Coroutine[Any, Any, None]]) -> None:
        """Schedule a coroutine on the worker loop if it is running."""
        loop = self._loop
        if loop is not None and loop.is_running() and self._service is not None:
            asyncio.run_coroutine_threadsafe(coro_fn(), loop)
        else:
            logger.debug("ArtWorker not running, ignoring request")

    async def _safe_next(self) -> None:
        """Run next() with error handling."""
        if self._service is None:
            return
        try:
            artwork = await self._service.next()
        except FetchError as e:
            logger.error("Failed to get artwork: %s", e)
            self.error_occurred.emit(str(e))
            return
        except Exception as e:  # noqa: BLE001
            logger.exception("Unexpected error getting artwork")
            self.error_occurred.emit(f"Unexpected error: {e}")
            return
        self.artwork_changed.emit(artwork)

    async def _safe_previous(self) -> None:
        """Run previous() with error handling."""
        if self._service is None:
            return
        try:
            artwork = await self._service.previous()
        except HistoryError as e:
            logger.debug("Previous artwork unavailable: %s", e)
            self.error_occurred.emit(str(e))
            return
        self.artwork_changed.emit(artwork)

    async def _safe_current(self) -> None:
        if self._service is None:
            return
        self.current_received.emit(await self._service.current())

    def _run_loop(self) -> None:
        """Background thread: run asyncio event loop."""
        loop = asyncio.new_event_loop()
        asyncio.set_event_loop(loop)
        self._loop = loop
        try:
            loop.run_until_complete(self._serve())
        except Exception as e:  # noqa: BLE001
            logger.exception("ArtWorker loop crashed")
            self.error_occurred.emit(f"Unexpected error: {e}")
        finally:
            pending = asyncio.all_tasks(loop)
            for task in pending:
                task.cancel()
            loop.run_until_complete(asyncio.gather(*pending, return_exceptions=True))
            self._loop = None
            loop.close()

    def _build_fetcher(self) -> Fetcher:
        if self._fetcher is not None:
            return self._fetcher
        client = HttpClient(timeout=self._timeout)
        return ArtFetcher(client, default_sources(self._catalog))

    async def _serve(self) -> None:
        """Create the service, start prefetching and wait for stop()."""
        fetcher = self._build_fetcher()
        service = ArtService(fetcher, PrefetchCache(fetcher, interval=self._prefetch_interval))
        service.start()
        self._service = service
        self.ready.emit()
        try:
            while self._running:
                await asyncio.sleep(0.1)
        finally:
            self._service = None
            await service.stop()
