"""Museum artwork sources.

Sources:
1. The Met - keyword search, random object ids
2. Art Institute of Chicago - keyword search, IIIF images
3. Cleveland Museum of Art - keyword search, CC0 paintings
4. National Gallery of Art - embedded catalog, IIIF images
"""

from artdisplay.api.sources.aic import AicSource
from artdisplay.api.sources.base import MAX_ATTEMPTS, ArtSource, strip_markup, try_candidates
from artdisplay.api.sources.catalog import NgaCatalog, NgaCatalogEntry
from artdisplay.api.sources.cma import CmaSource
from artdisplay.api.sources.met import MetSource
from artdisplay.api.sources.nga import NgaSource

__all__ = [
    "MAX_ATTEMPTS",
    "AicSource",
    "ArtSource",
    "CmaSource",
    "MetSource",
    "NgaCatalog",
    "NgaCatalogEntry",
    "NgaSource",
    "strip_markup",
    "try_candidates",
]
