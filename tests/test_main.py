"""Tests for the command line entry point."""

from functools import partial
from pathlib import Path

import pytest
from PySide6.QtWidgets import QApplication

import artdisplay.__main__ as cli
from artdisplay.__main__ import load_catalog, main, parse_args, save_artwork
from artdisplay.api.sources import NgaCatalog, NgaCatalogEntry
from artdisplay.core.worker import ArtWorker
from artdisplay.models.artwork import Artwork, encode_data_uri


class TestParseArgs:
    """Tests for argument parsing."""

    def test_defaults(self) -> None:
        """Test default options."""
        args = parse_args([])
        assert args.count == 1
        assert args.save_dir is None
        assert args.catalog is None
        assert args.timeout is None
        assert not args.verbose

    def test_options(self) -> None:
        """Test all options parse."""
        args = parse_args(
            ["-n", "3", "--save-dir", "out", "--catalog", "c.json", "--timeout", "9", "-v"]
        )
        assert args.count == 3
        assert args.save_dir == Path("out")
        assert args.catalog == "c.json"
        assert args.timeout == 9
        assert args.verbose


class TestSaveArtwork:
    """Tests for writing images to disk."""

    def test_writes_image(self, tmp_path: Path) -> None:
        """Test the decoded image is written with a matching extension."""
        artwork = Artwork(id="met-1", image=encode_data_uri(b"\x89PNG-data", "image/png"))
        path = save_artwork(artwork, tmp_path / "images")
        assert path == tmp_path / "images" / "met-1.png"
        assert path.read_bytes() == b"\x89PNG-data"


class TestLoadCatalog:
    """Tests for catalog selection."""

    def test_bundled(self) -> None:
        """Test an empty path loads the bundled catalog."""
        assert load_catalog("").entries == NgaCatalog.load_bundled().entries

    def test_custom(self, tmp_path: Path) -> None:
        """Test a path loads that file."""
        path = tmp_path / "nga.json"
        path.write_text(NgaCatalog([NgaCatalogEntry("u1", "T")]).to_json(), encoding="utf-8")
        assert load_catalog(str(path))[0].uuid == "u1"


@pytest.fixture
def cli_catalog(tmp_path: Path) -> str:
    """Return the path of an empty catalog file."""
    path = tmp_path / "nga.json"
    path.write_text("[]", encoding="utf-8")
    return str(path)


class TestMain:
    """Tests for the main entry point driven by a stub fetcher."""

    def test_fetches_and_saves(
        self, qapp: QApplication, monkeypatch, endless_fetcher, cli_catalog: str, tmp_path: Path
    ) -> None:
        """Test the requested number of artworks is fetched and written."""
        monkeypatch.setattr(cli, "ArtWorker", partial(ArtWorker, fetcher=endless_fetcher))
        out = tmp_path / "out"

        code = main(["-n", "2", "--catalog", cli_catalog, "--save-dir", str(out)])

        assert code == 0
        assert sorted(p.name for p in out.iterdir()) == [
            "test-fetched-1.img",
            "test-fetched-2.img",
        ]

    def test_save_failure_exits(
        self, qapp: QApplication, monkeypatch, endless_fetcher, cli_catalog: str, tmp_path: Path
    ) -> None:
        """Test an unwritable save directory ends the run with exit code 1."""
        monkeypatch.setattr(cli, "ArtWorker", partial(ArtWorker, fetcher=endless_fetcher))
        blocker = tmp_path / "not-a-dir"
        blocker.write_text("", encoding="utf-8")

        code = main(["-n", "3", "--catalog", cli_catalog, "--save-dir", str(blocker)])

        assert code == 1

    def test_fetch_failure_exits(
        self, qapp: QApplication, monkeypatch, failing_fetcher, cli_catalog: str
    ) -> None:
        """Test a failed fetch ends the run with exit code 1."""
        monkeypatch.setattr(cli, "ArtWorker", partial(ArtWorker, fetcher=failing_fetcher))

        assert main(["--catalog", cli_catalog]) == 1
