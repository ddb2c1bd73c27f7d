#!/usr/bin/env python3
"""Build the embedded NGA catalog from the National Gallery of Art open data.

Downloads published_images.csv and objects.csv, keeps primary-view images of
paintings that have a title (one per object), and writes compact JSON.

Usage: python scripts/build_nga_catalog.py [--output PATH]
"""

import argparse
import csv
import io
import sys
import urllib.request
from collections.abc import Iterable, Iterator
from pathlib import Path

PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT / "src"))

from artdisplay.api.http import USER_AGENT  # noqa: E402
from artdisplay.api.sources.catalog import NgaCatalog, NgaCatalogEntry  # noqa: E402
from artdisplay.models.artwork import DEFAULT_ARTIST  # noqa: E402

IMAGES_URL = (
    "https://raw.githubusercontent.com/NationalGalleryOfArt/opendata/main/data/published_images.csv"
)
OBJECTS_URL = "https://raw.githubusercontent.com/NationalGalleryOfArt/opendata/main/data/objects.csv"
DEFAULT_OUTPUT = PROJECT_ROOT / "src" / "artdisplay" / "resources" / "nga_catalog.json"

# Open data CSVs are large; allow a generous timeout
DOWNLOAD_TIMEOUT = 300


def download_csv(url: str) -> list[dict[str, str]]:
    """Download and parse a CSV file into rows."""
    print(f"Downloading {url}...")
    req = urllib.request.Request(url, headers={"User-Agent": USER_AGENT})
    with urllib.request.urlopen(req, timeout=DOWNLOAD_TIMEOUT) as response:
        text = response.read().decode("utf-8")
    print(f"  Downloaded {len(text) / 1024 / 1024:.1f}MB")
    rows = list(csv.DictReader(io.StringIO(text)))
    print(f"  {len(rows)} records")
    return rows


def build_entries(
    images: Iterable[dict[str, str]], objects: Iterable[dict[str, str]]
) -> Iterator[NgaCatalogEntry]:
    """Join images to painting objects and yield catalog entries."""
    object_map = {obj.get("objectid", ""): obj for obj in objects}
    seen_objects: set[str] = set()

    for image in images:
        if image.get("viewtype") != "primary":
            continue
        uuid = (image.get("uuid") or "").strip()
        if not uuid:
            continue

        object_id = image.get("depictstmsobjectid") or ""
        if not object_id or object_id in seen_objects:
            continue

        obj = object_map.get(object_id)
        if obj is None:
            continue
        if "painting" not in (obj.get("classification") or "").lower():
            continue
        title = (obj.get("title") or "").strip()
        if not title:
            continue

        seen_objects.add(object_id)
        yield NgaCatalogEntry(
            uuid=uuid,
            title=title,
            artist=obj.get("attribution") or obj.get("attributioninverted") or DEFAULT_ARTIST,
            date=obj.get("displaydate") or "",
            medium=obj.get("medium") or "",
        )


def main() -> None:
    """Download, join and write the catalog."""
    parser = argparse.ArgumentParser(description="Build the embedded NGA catalog")
    parser.add_argument("--output", type=Path, default=DEFAULT_OUTPUT, help="output JSON path")
    args = parser.parse_args()

    images = download_csv(IMAGES_URL)
    objects = download_csv(OBJECTS_URL)

    print("Joining and filtering to paintings...")
    catalog = NgaCatalog(build_entries(images, objects))
    print(f"  {len(catalog)} paintings with images")

    text = catalog.to_json()
    args.output.parent.mkdir(parents=True, exist_ok=True)
    args.output.write_text(text, encoding="utf-8")
    print(f"Written to {args.output} ({len(text) / 1024:.0f}KB, {len(catalog)} entries)")


if __name__ == "__main__":
    main()
