"""ArtDisplay - random artwork from public museum collections."""

__version__ = "0.1.0"
