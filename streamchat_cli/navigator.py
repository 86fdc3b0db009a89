"""Keyboard selection state for an open suggestion list."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class Direction(StrEnum):
    """Directional input within a suggestion list."""

    NEXT = "next"
    PREVIOUS = "previous"


@dataclass(frozen=True)
class Closed:
    """No list is open."""


@dataclass(frozen=True)
class Open:
    """A list of ``length`` items is open with ``index`` highlighted."""

    length: int
    index: int = 0

    def __post_init__(self) -> None:
        if self.length <= 0 or not 0 <= self.index < self.length:
            msg = f"Invalid selection: index {self.index} for list of {self.length}"
            raise ValueError(msg)


SelectionState = Closed | Open

CLOSED = Closed()


class SelectionNavigator:
    """Tracks the highlighted row of the open suggestion list.

    Length and index live in a single ``Open`` value so the index can never
    outlive the list it points into. Opening always starts at index 0.
    """

    def __init__(self) -> None:
        """Initialize in the closed state."""
        self._state: SelectionState = CLOSED

    @property
    def state(self) -> SelectionState:
        """Current selection state."""
        return self._state

    @property
    def is_open(self) -> bool:
        """Whether a list is open."""
        return isinstance(self._state, Open)

    @property
    def index(self) -> int | None:
        """Highlighted index, or None when closed."""
        if isinstance(self._state, Open):
            return self._state.index
        return None

    def open(self, length: int) -> None:
        """Open a fresh list of ``length`` items; empty lists stay closed."""
        self._state = Open(length) if length > 0 else CLOSED

    def close(self) -> None:
        """Close the list."""
        self._state = CLOSED

    def move(self, direction: Direction) -> bool:
        """Move the highlight, wrapping at both ends.

        Returns:
            True if the input was consumed (a list is open), False otherwise
        """
        if not isinstance(self._state, Open):
            return False
        delta = 1 if direction is Direction.NEXT else -1
        length = self._state.length
        self._state = Open(length, (self._state.index + delta + length) % length)
        return True

    def next(self) -> bool:
        """Highlight the next item."""
        return self.move(Direction.NEXT)

    def previous(self) -> bool:
        """Highlight the previous item."""
        return self.move(Direction.PREVIOUS)

    def commit(self) -> int | None:
        """Return the highlighted index and close the list."""
        index = self.index
        self._state = CLOSED
        return index
