"""Main entry point for ArtDisplay.

Fetches artworks through the same worker the overlay UI uses and logs
them, optionally saving each image to disk.
"""

import argparse
import logging
import mimetypes
import sys
from pathlib import Path

from PySide6.QtCore import QCoreApplication

from artdisplay.api.sources import NgaCatalog
from artdisplay.core.config import ConfigManager
from artdisplay.core.worker import ArtWorker
from artdisplay.models.artwork import Artwork

logger = logging.getLogger(__name__)


def parse_args(argv: list[str]) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="artdisplay",
        description="ArtDisplay - random artwork from public museum collections",
    )
    parser.add_argument(
        "-n", "--count", type=int, default=1, help="number of artworks to fetch (default: 1)",
    )
    parser.add_argument(
        "--save-dir", type=Path, default=None, help="directory to write images into",
    )
    parser.add_argument(
        "--catalog", default=None, help="NGA catalog JSON (default: bundled catalog)",
    )
    parser.add_argument(
        "--timeout", type=int, default=None, help="HTTP timeout in seconds",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="enable debug logging",
    )
    return parser.parse_args(argv)


def save_artwork(artwork: Artwork, directory: Path) -> Path:
    """Write an artwork's image to ``directory`` as ``<id><ext>``.

    Returns:
        Path of the written file.
    """
    directory.mkdir(parents=True, exist_ok=True)
    extension = mimetypes.guess_extension(artwork.mime_type) or ".img"
    path = directory / f"{artwork.id}{extension}"
    path.write_bytes(artwork.image_bytes())
    return path


def load_catalog(path: str) -> NgaCatalog:
    """Load the NGA catalog from ``path``, or the bundled one if empty."""
    if path:
        return NgaCatalog.load(path)
    return NgaCatalog.load_bundled()


def main(argv: list[str] | None = None) -> int:
    """Run ArtDisplay.

    Returns:
        Exit code (0 for success).
    """
    args = parse_args(sys.argv[1:] if argv is None else argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = QCoreApplication.instance() or QCoreApplication(sys.argv[:1])
    QCoreApplication.setApplicationName("ArtDisplay")
    QCoreApplication.setOrganizationName("ArtDisplay")

    config = ConfigManager()
    catalog_path = args.catalog if args.catalog is not None else config.get_catalog_path()
    try:
        catalog = load_catalog(catalog_path)
    except (OSError, ValueError) as e:
        logger.error("Could not load NGA catalog: %s", e)
        return 1

    timeout = args.timeout if args.timeout is not None else config.get_timeout()
    worker = ArtWorker(
        catalog,
        timeout=timeout,
        prefetch_interval=config.get_prefetch_interval(),
    )

    remaining = max(1, args.count)
    exit_code = 0

    def on_artwork(artwork: Artwork) -> None:
        nonlocal remaining, exit_code
        logger.info("%s - %s (%s) [%s]", artwork.title, artwork.artist, artwork.date, artwork.source)
        if args.save_dir is not None:
            try:
                path = save_artwork(artwork, args.save_dir)
            except OSError as e:
                logger.error("Could not save %s: %s", artwork.id, e)
                exit_code = 1
                app.quit()
                return
            logger.info("Saved %s", path)
        remaining -= 1
        if remaining > 0:
            worker.request_next()
        else:
            app.quit()

    def on_error(message: str) -> None:
        nonlocal exit_code
        logger.error("Failed to get artwork: %s", message)
        exit_code = 1
        app.quit()

    worker.ready.connect(worker.request_next)
    worker.artwork_changed.connect(on_artwork)
    worker.error_occurred.connect(on_error)

    worker.start()
    app.exec()
    worker.stop()
    return exit_code


if __name__ == "__main__":
    sys.exit(main())
