"""Artwork model: one normalized record served to the viewer."""

from __future__ import annotations

import base64
from dataclasses import asdict, dataclass

DEFAULT_TITLE = "Untitled"
DEFAULT_ARTIST = "Unknown Artist"

_DATA_URI_PREFIX = "data:"
_BASE64_MARKER = ";base64,"


def encode_data_uri(data: bytes, mime_type: str) -> str:
    """Encode binary image data as a self-describing data URI.

    Args:
        data: Raw image bytes.
        mime_type: MIME type of the image (e.g., "image/jpeg").

    Returns:
        String of the form ``data:<mime>;base64,<payload>``.
    """
    payload = base64.b64encode(data).decode("ascii")
    return f"{_DATA_URI_PREFIX}{mime_type}{_BASE64_MARKER}{payload}"


@dataclass(frozen=True, slots=True)
class Artwork:
    """A single piece of art with its image embedded.

    Attributes:
        id: Globally unique id, prefixed by source (e.g., "met-12345").
        title: Title with markup removed.
        artist: Artist display name.
        date: Free-text creation date (may be empty).
        medium: Free-text medium or technique (may be empty).
        source: Human-readable museum name.
        image: Image as a data URI (MIME type + base64 payload).
    """

    id: str
    title: str = DEFAULT_TITLE
    artist: str = DEFAULT_ARTIST
    date: str = ""
    medium: str = ""
    source: str = ""
    image: str = ""

    @property
    def mime_type(self) -> str:
        """Return the MIME type embedded in the image data URI."""
        if not self.image.startswith(_DATA_URI_PREFIX) or _BASE64_MARKER not in self.image:
            return ""
        header = self.image[len(_DATA_URI_PREFIX) :].split(_BASE64_MARKER, 1)[0]
        return header

    def image_bytes(self) -> bytes:
        """Decode the image data URI back into raw bytes.

        Returns:
            Image bytes, or empty bytes if the image is not a base64 data URI.
        """
        if _BASE64_MARKER not in self.image:
            return b""
        payload = self.image.split(_BASE64_MARKER, 1)[1]
        return base64.b64decode(payload)

    def to_dict(self) -> dict[str, str]:
        """Return the flat 7-field mapping handed to the UI layer."""
        return asdict(self)
