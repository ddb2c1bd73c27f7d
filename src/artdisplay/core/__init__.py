"""Core application logic.

Classes:
    ArtService: Facade with current/next/previous.
    PrefetchCache: Bounded queue filled in the background.
    HistoryNavigator: History list with a browsing cursor.
    ArtWorker: Runs the service on a background asyncio loop for Qt.
    ConfigManager: QSettings wrapper for configuration.
"""

from artdisplay.core.config import ConfigManager
from artdisplay.core.history import (
    AtHistoryBoundaryError,
    EmptyHistoryError,
    HistoryError,
    HistoryNavigator,
    NoPreviousArtworkError,
)
from artdisplay.core.prefetch import PrefetchCache
from artdisplay.core.service import ArtService
from artdisplay.core.worker import ArtWorker

__all__ = [
    "ArtService",
    "ArtWorker",
    "AtHistoryBoundaryError",
    "ConfigManager",
    "EmptyHistoryError",
    "HistoryError",
    "HistoryNavigator",
    "NoPreviousArtworkError",
    "PrefetchCache",
]
