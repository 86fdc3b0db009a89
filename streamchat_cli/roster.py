"""Roster of known chat users, supplied by the host."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator
    from pathlib import Path

logger = logging.getLogger(__name__)


class RosterError(ValueError):
    """Raised when a roster file cannot be parsed."""


@dataclass(frozen=True)
class RosterEntry:
    """A known user that can be @mentioned."""

    username: str


class Roster:
    """Ordered list of roster entries.

    Order matters: mention ranking breaks distance ties by roster order.
    Usernames are expected to be unique but duplicates are kept as given.
    """

    def __init__(self, entries: Iterable[RosterEntry] = ()) -> None:
        """Initialize the roster.

        Args:
            entries: Initial entries, in display order
        """
        self._entries: list[RosterEntry] = list(entries)

    @classmethod
    def from_usernames(cls, usernames: Iterable[str]) -> Roster:
        """Build a roster from bare usernames."""
        return cls(RosterEntry(name) for name in usernames)

    def __iter__(self) -> Iterator[RosterEntry]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def usernames(self) -> list[str]:
        """Return a snapshot of the usernames in roster order."""
        return [entry.username for entry in self._entries]

    def add(self, username: str) -> RosterEntry:
        """Append a user to the end of the roster."""
        entry = RosterEntry(username)
        self._entries.append(entry)
        logger.debug(f"Roster: added {username!r} ({len(self._entries)} users)")
        return entry

    def replace(self, entries: Iterable[RosterEntry]) -> None:
        """Swap in a freshly fetched roster."""
        self._entries = list(entries)
        logger.debug(f"Roster: replaced with {len(self._entries)} users")


def _parse_entry(raw: object, position: int) -> RosterEntry:
    if isinstance(raw, str):
        username = raw
    elif isinstance(raw, dict):
        username = raw.get("username")
    else:
        username = None

    if not isinstance(username, str) or not username:
        msg = f"Roster entry {position} has no usable 'username'"
        raise RosterError(msg)
    return RosterEntry(username)


def load_roster(path: Path) -> Roster:
    """Load a roster from a JSON file.

    The file holds an array of ``{"username": ...}`` objects or plain
    strings. Extra keys on the objects are ignored. A missing file yields an
    empty roster.

    Args:
        path: JSON file to read

    Returns:
        Roster in file order

    Raises:
        RosterError: If the file exists but is not a valid roster
    """
    if not path.exists():
        logger.info(f"Roster file {path} not found, starting with an empty roster")
        return Roster()

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        msg = f"Could not read roster {path}: {e}"
        raise RosterError(msg) from e

    if not isinstance(data, list):
        msg = f"Roster {path} must contain a JSON array"
        raise RosterError(msg)

    roster = Roster(_parse_entry(raw, i) for i, raw in enumerate(data))
    logger.debug(f"Loaded {len(roster)} users from {path}")
    return roster
