"""Tests for the embedded NGA catalog."""

import json
import uuid
from pathlib import Path

import pytest

from artdisplay.api.sources import NgaCatalog, NgaCatalogEntry


class TestNgaCatalog:
    """Tests for NgaCatalog."""

    def test_empty(self) -> None:
        """Test an empty catalog."""
        catalog = NgaCatalog()
        assert len(catalog) == 0
        assert list(catalog) == []

    def test_indexing(self) -> None:
        """Test entries are indexable in order."""
        entries = [NgaCatalogEntry(uuid="a", title="A"), NgaCatalogEntry(uuid="b", title="B")]
        catalog = NgaCatalog(entries)
        assert catalog[1].uuid == "b"
        assert catalog.entries == tuple(entries)

    def test_entries_are_immutable(self) -> None:
        """Test the catalog does not share the caller's list."""
        entries = [NgaCatalogEntry(uuid="a", title="A")]
        catalog = NgaCatalog(entries)
        entries.append(NgaCatalogEntry(uuid="b", title="B"))
        assert len(catalog) == 1

    def test_from_json_defaults(self) -> None:
        """Test missing fields get defaults and records without uuid are skipped."""
        text = json.dumps(
            [
                {"uuid": "u1", "title": "Title"},
                {"title": "No uuid"},
                {"uuid": "  ", "title": "Blank uuid"},
                "not a record",
            ]
        )
        catalog = NgaCatalog.from_json(text)
        assert len(catalog) == 1
        assert catalog[0] == NgaCatalogEntry(
            uuid="u1", title="Title", artist="Unknown Artist", date="", medium=""
        )

    def test_from_json_rejects_non_list(self) -> None:
        """Test a JSON object is rejected."""
        with pytest.raises(ValueError):
            NgaCatalog.from_json('{"uuid": "u1"}')

    def test_load_file(self, tmp_path: Path) -> None:
        """Test loading a catalog file written by to_json."""
        catalog = NgaCatalog([NgaCatalogEntry("u1", "T", "A", "1900", "oil")])
        path = tmp_path / "catalog.json"
        path.write_text(catalog.to_json(), encoding="utf-8")

        loaded = NgaCatalog.load(path)
        assert loaded.entries == catalog.entries

    def test_load_missing_file(self, tmp_path: Path) -> None:
        """Test a missing file raises OSError."""
        with pytest.raises(OSError):
            NgaCatalog.load(tmp_path / "missing.json")

    def test_bundled_catalog(self) -> None:
        """Test every bundled entry has a well-formed IIIF uuid and a title."""
        catalog = NgaCatalog.load_bundled()
        for entry in catalog:
            assert str(uuid.UUID(entry.uuid)) == entry.uuid.lower()
            assert entry.title
