"""Museum API access: HTTP transport, source adapters and fetch orchestration."""

from artdisplay.api.errors import (
    AllSourcesExhaustedError,
    FetchError,
    NetworkError,
    NoResultsError,
    NoValidImageError,
    ParseError,
)
from artdisplay.api.fetcher import ArtFetcher, default_sources
from artdisplay.api.http import HttpClient, HttpResponse

__all__ = [
    "AllSourcesExhaustedError",
    "ArtFetcher",
    "FetchError",
    "HttpClient",
    "HttpResponse",
    "NetworkError",
    "NoResultsError",
    "NoValidImageError",
    "ParseError",
    "default_sources",
]
