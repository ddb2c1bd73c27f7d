"""Configuration manager using QSettings for persistent storage."""

import logging

from PySide6.QtCore import QSettings

from artdisplay.api.http import DEFAULT_TIMEOUT
from artdisplay.core.prefetch import DEFAULT_FILL_INTERVAL

logger = logging.getLogger(__name__)

# Settings keys
_KEY_TIMEOUT = "network/timeout"
_KEY_PREFETCH_INTERVAL = "prefetch/interval"
_KEY_CATALOG_PATH = "catalog/path"

_TIMEOUT_RANGE = (1, 120)
_PREFETCH_INTERVAL_RANGE = (1, 60)


def _clamp(value: int, bounds: tuple[int, int]) -> int:
    low, high = bounds
    return max(low, min(high, value))


class ConfigManager:
    """Wrapper around QSettings for type-safe config access.

    QSettings stores config in platform-specific locations:
    - Windows: HKEY_CURRENT_USER\\Software\\ArtDisplay\\ArtDisplay
    - macOS: ~/Library/Preferences/com.ArtDisplay.ArtDisplay.plist
    - Linux: ~/.config/ArtDisplay/ArtDisplay.conf

    Example:
        config = ConfigManager()
        client = HttpClient(timeout=config.get_timeout())
    """

    def __init__(self, organization: str = "ArtDisplay", application: str = "ArtDisplay") -> None:
        """Initialize the config manager.

        Args:
            organization: Organization name for QSettings.
            application: Application name for QSettings.
        """
        self._settings = QSettings(organization, application)

    @property
    def settings(self) -> QSettings:
        """Return the underlying QSettings instance."""
        return self._settings

    # -- Network settings ------------------------------------------------------

    def get_timeout(self) -> int:
        """Return the HTTP request timeout in seconds.

        Returns:
            Timeout in seconds (default 15).
        """
        value = self._settings.value(_KEY_TIMEOUT, int(DEFAULT_TIMEOUT), int)
        try:
            return _clamp(int(value), _TIMEOUT_RANGE)  # type: ignore[arg-type]
        except (TypeError, ValueError):
            logger.warning("Invalid timeout setting %r, using default", value)
            return int(DEFAULT_TIMEOUT)

    def set_timeout(self, seconds: int) -> None:
        """Set the HTTP request timeout.

        Args:
            seconds: Timeout in seconds (1-120).
        """
        self._settings.setValue(_KEY_TIMEOUT, _clamp(seconds, _TIMEOUT_RANGE))

    # -- Prefetch settings -----------------------------------------------------

    def get_prefetch_interval(self) -> int:
        """Return the pause between prefetch iterations in seconds.

        Returns:
            Interval in seconds (default 2).
        """
        value = self._settings.value(_KEY_PREFETCH_INTERVAL, int(DEFAULT_FILL_INTERVAL), int)
        try:
            return _clamp(int(value), _PREFETCH_INTERVAL_RANGE)  # type: ignore[arg-type]
        except (TypeError, ValueError):
            logger.warning("Invalid prefetch interval %r, using default", value)
            return int(DEFAULT_FILL_INTERVAL)

    def set_prefetch_interval(self, seconds: int) -> None:
        """Set the prefetch interval.

        Args:
            seconds: Interval in seconds (1-60).
        """
        self._settings.setValue(_KEY_PREFETCH_INTERVAL, _clamp(seconds, _PREFETCH_INTERVAL_RANGE))

    # -- Catalog settings ------------------------------------------------------

    def get_catalog_path(self) -> str:
        """Return the NGA catalog path.

        Returns:
            Path string, or empty string for the bundled catalog.
        """
        value = self._settings.value(_KEY_CATALOG_PATH, "", str)
        return str(value) if value else ""

    def set_catalog_path(self, path: str) -> None:
        """Set a custom NGA catalog path.

        Args:
            path: Path to a catalog JSON file, or empty string for the bundled one.
        """
        self._settings.setValue(_KEY_CATALOG_PATH, path)

    # -- General settings ------------------------------------------------------

    def clear(self) -> None:
        """Clear all settings (useful for testing or reset)."""
        self._settings.clear()

    def sync(self) -> None:
        """Force settings to be written to disk."""
        self._settings.sync()
