"""Errors raised while fetching artwork from museum sources."""


class FetchError(Exception):
    """Base class for artwork fetch failures."""


class NetworkError(FetchError):
    """Transport failure or non-2xx response from a museum API."""


class ParseError(FetchError):
    """Museum API returned a body that could not be decoded."""


class NoResultsError(FetchError):
    """Search (or catalog) produced no usable records."""


class NoValidImageError(FetchError):
    """None of the attempted candidates yielded a valid image."""


class AllSourcesExhaustedError(FetchError):
    """Every source failed; carries the last failure message."""

    def __init__(self, last_error: str) -> None:
        self.last_error = last_error
        super().__init__(f"All sources failed. Last error: {last_error}")
