"""Embedded National Gallery of Art catalog.

The NGA has no usable search API, so a compact catalog of paintings with
IIIF image identifiers is packaged as ``resources/nga_catalog.json``. It is
loaded once at startup and handed to ``NgaSource``; tests can pass a smaller
fixture catalog. The packaged file starts empty: populate it with
``scripts/build_nga_catalog.py``, or point ``--catalog`` at a built copy.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import asdict, dataclass
from importlib import resources
from pathlib import Path
from typing import Any

from artdisplay.models.artwork import DEFAULT_ARTIST

logger = logging.getLogger(__name__)

_BUNDLED_PACKAGE = "artdisplay"
_BUNDLED_NAME = "resources/nga_catalog.json"


@dataclass(frozen=True, slots=True)
class NgaCatalogEntry:
    """One painting in the NGA catalog.

    Attributes:
        uuid: IIIF image identifier.
        title: Painting title.
        artist: Attribution.
        date: Display date.
        medium: Medium description.
    """

    uuid: str
    title: str
    artist: str = DEFAULT_ARTIST
    date: str = ""
    medium: str = ""


class NgaCatalog:
    """Immutable, indexable collection of NGA catalog entries."""

    def __init__(self, entries: Iterable[NgaCatalogEntry] = ()) -> None:
        self._entries: tuple[NgaCatalogEntry, ...] = tuple(entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __getitem__(self, index: int) -> NgaCatalogEntry:
        return self._entries[index]

    def __iter__(self) -> Iterator[NgaCatalogEntry]:
        return iter(self._entries)

    @property
    def entries(self) -> tuple[NgaCatalogEntry, ...]:
        """Return all entries."""
        return self._entries

    @classmethod
    def from_records(cls, records: Iterable[Mapping[str, Any]]) -> NgaCatalog:
        """Build a catalog from decoded JSON records.

        Records without a uuid are skipped.
        """
        entries: list[NgaCatalogEntry] = []
        for record in records:
            uuid = str(record.get("uuid") or "").strip()
            if not uuid:
                logger.debug("Skipping catalog record without uuid: %r", record)
                continue
            entries.append(
                NgaCatalogEntry(
                    uuid=uuid,
                    title=str(record.get("title") or ""),
                    artist=str(record.get("artist") or DEFAULT_ARTIST),
                    date=str(record.get("date") or ""),
                    medium=str(record.get("medium") or ""),
                )
            )
        return cls(entries)

    @classmethod
    def from_json(cls, text: str) -> NgaCatalog:
        """Parse a catalog from its JSON text.

        Raises:
            ValueError: If the text is not a JSON array of objects.
        """
        data = json.loads(text)
        if not isinstance(data, list):
            raise ValueError("NGA catalog must be a JSON array")
        return cls.from_records(r for r in data if isinstance(r, dict))

    @classmethod
    def load(cls, path: str | Path) -> NgaCatalog:
        """Load a catalog from a JSON file."""
        catalog = cls.from_json(Path(path).read_text(encoding="utf-8"))
        logger.info("Loaded NGA catalog from %s (%d entries)", path, len(catalog))
        return catalog

    @classmethod
    def load_bundled(cls) -> NgaCatalog:
        """Load the catalog shipped with the package."""
        text = resources.files(_BUNDLED_PACKAGE).joinpath(_BUNDLED_NAME).read_text(encoding="utf-8")
        catalog = cls.from_json(text)
        logger.info("Loaded bundled NGA catalog (%d entries)", len(catalog))
        return catalog

    def to_json(self) -> str:
        """Serialize the catalog as compact JSON."""
        return json.dumps([asdict(e) for e in self._entries], separators=(",", ":"))
