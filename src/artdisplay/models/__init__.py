"""Data models for artwork records."""

from artdisplay.models.artwork import (
    DEFAULT_ARTIST,
    DEFAULT_TITLE,
    Artwork,
    encode_data_uri,
)

__all__ = ["Artwork", "DEFAULT_ARTIST", "DEFAULT_TITLE", "encode_data_uri"]
