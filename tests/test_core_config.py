"""Tests for ConfigManager using QSettings."""

import pytest

from artdisplay.core.config import ConfigManager


@pytest.fixture
def config() -> ConfigManager:
    """Return a fresh ConfigManager for each test."""
    # Use unique organization/app to avoid test interference
    config = ConfigManager("ArtDisplayTest", "TestConfig")
    config.clear()
    return config


class TestNetworkSettings:
    """Tests for network settings."""

    def test_default_timeout(self, config: ConfigManager) -> None:
        """Test default timeout is 15 seconds."""
        assert config.get_timeout() == 15

    def test_set_timeout(self, config: ConfigManager) -> None:
        """Test timeout round-trips."""
        config.set_timeout(30)
        assert config.get_timeout() == 30

    @pytest.mark.parametrize(("value", "expected"), [(0, 1), (-5, 1), (500, 120)])
    def test_timeout_clamped(self, config: ConfigManager, value: int, expected: int) -> None:
        """Test timeout is clamped to 1-120."""
        config.set_timeout(value)
        assert config.get_timeout() == expected


class TestPrefetchSettings:
    """Tests for prefetch settings."""

    def test_default_interval(self, config: ConfigManager) -> None:
        """Test default prefetch interval is 2 seconds."""
        assert config.get_prefetch_interval() == 2

    def test_set_interval(self, config: ConfigManager) -> None:
        """Test interval round-trips."""
        config.set_prefetch_interval(10)
        assert config.get_prefetch_interval() == 10

    def test_interval_clamped(self, config: ConfigManager) -> None:
        """Test interval is clamped to 1-60."""
        config.set_prefetch_interval(0)
        assert config.get_prefetch_interval() == 1
        config.set_prefetch_interval(3600)
        assert config.get_prefetch_interval() == 60


class TestCatalogSettings:
    """Tests for catalog settings."""

    def test_default_bundled(self, config: ConfigManager) -> None:
        """Test empty path means bundled catalog."""
        assert config.get_catalog_path() == ""

    def test_set_path(self, config: ConfigManager) -> None:
        """Test path round-trips."""
        config.set_catalog_path("/tmp/nga.json")
        assert config.get_catalog_path() == "/tmp/nga.json"


class TestGeneral:
    """Tests for general operations."""

    def test_clear(self, config: ConfigManager) -> None:
        """Test clear resets to defaults."""
        config.set_timeout(42)
        config.set_catalog_path("/x.json")
        config.clear()
        assert config.get_timeout() == 15
        assert config.get_catalog_path() == ""

    def test_sync(self, config: ConfigManager) -> None:
        """Test sync does not raise."""
        config.set_timeout(20)
        config.sync()
        assert config.settings.value("network/timeout", 0, int) == 20
