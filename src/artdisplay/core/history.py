"""History navigation state machine.

History is the append-only list of artworks already served, oldest first.
The cursor is None in live mode (the newest entry is current) or an index
into history while the user browses backward.

``HistoryNavigator`` does no locking of its own. History and cursor form one
unit, so callers serialize whole operations (see ``ArtService``).
"""

from __future__ import annotations

import logging

from artdisplay.models.artwork import Artwork

logger = logging.getLogger(__name__)

# When a push takes history past HISTORY_LIMIT, the oldest HISTORY_TRIM
# entries are dropped in one batch.
HISTORY_LIMIT = 50
HISTORY_TRIM = 25


class HistoryError(Exception):
    """Base class for history navigation errors."""


class EmptyHistoryError(HistoryError):
    """Nothing has been served yet."""

    def __init__(self) -> None:
        super().__init__("No history")


class NoPreviousArtworkError(HistoryError):
    """Live mode with fewer than two entries: nothing to step back to."""

    def __init__(self) -> None:
        super().__init__("No previous artwork")


class AtHistoryBoundaryError(HistoryError):
    """Cursor already at the oldest entry."""

    def __init__(self) -> None:
        super().__init__("At beginning of history")


class HistoryNavigator:
    """Linear history with a movable cursor.

    Example:
        nav = HistoryNavigator()
        nav.push(a)
        nav.push(b)
        nav.step_back()     # -> a, cursor = 0
        nav.step_forward()  # -> b, cursor = 1
        nav.step_forward()  # -> None, back in live mode
    """

    def __init__(self, limit: int = HISTORY_LIMIT, trim: int = HISTORY_TRIM) -> None:
        """Initialize an empty history in live mode.

        Args:
            limit: Soft cap on history length.
            trim: Number of oldest entries dropped when the cap is exceeded.
        """
        self._limit = limit
        self._trim = trim
        self._history: list[Artwork] = []
        self._cursor: int | None = None

    def __len__(self) -> int:
        return len(self._history)

    @property
    def cursor(self) -> int | None:
        """Return the browsing position, or None in live mode."""
        return self._cursor

    @property
    def is_live(self) -> bool:
        """Return True when not browsing history."""
        return self._cursor is None

    @property
    def items(self) -> tuple[Artwork, ...]:
        """Return a snapshot of the history, oldest first."""
        return tuple(self._history)

    def current(self) -> Artwork | None:
        """Return the artwork under the cursor, or the newest one in live mode."""
        if self._cursor is not None:
            return self._history[self._cursor]
        return self._history[-1] if self._history else None

    def step_forward(self) -> Artwork | None:
        """Move the cursor one entry toward the live edge.

        Landing on the newest entry clears the cursor: a cursor on the last
        entry and live mode are indistinguishable, so the two states are
        merged and ``cursor`` reports None rather than the last index.

        Returns:
            The next history entry, or None when the caller must supply a
            new artwork (already live, or the cursor just ran off the end
            and was cleared).
        """
        if self._cursor is None:
            return None
        index = self._cursor + 1
        if index >= len(self._history):
            self._cursor = None
            return None
        self._cursor = index if index < len(self._history) - 1 else None
        return self._history[index]

    def step_back(self) -> Artwork:
        """Move the cursor one entry toward the oldest artwork.

        Raises:
            EmptyHistoryError: History is empty.
            AtHistoryBoundaryError: Cursor is already at index 0.
            NoPreviousArtworkError: Live mode with fewer than two entries.
        """
        if not self._history:
            raise EmptyHistoryError()
        if self._cursor == 0:
            raise AtHistoryBoundaryError()
        if self._cursor is not None:
            index = self._cursor - 1
        elif len(self._history) >= 2:  # noqa: PLR2004
            index = len(self._history) - 2
        else:
            raise NoPreviousArtworkError()
        self._cursor = index
        return self._history[index]

    def push(self, artwork: Artwork) -> None:
        """Append an artwork, trimming the oldest batch past the cap.

        A cursor set while the push happens keeps pointing at the same
        artwork, or at the oldest survivor if its entry was trimmed.
        """
        self._history.append(artwork)
        if len(self._history) > self._limit:
            del self._history[: self._trim]
            logger.debug("History trimmed to %d entries", len(self._history))
            if self._cursor is not None:
                self._cursor = max(self._cursor - self._trim, 0)
