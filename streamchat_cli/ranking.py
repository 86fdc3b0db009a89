"""Edit-distance ranking for @mention suggestions.

Scores every roster username against the partial token with a plain
Levenshtein distance and keeps the closest few. The scan is linear in the
roster size, which is fine for a chat room roster (tens to low hundreds of
users); there is no index.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence


@dataclass(frozen=True)
class EditDistanceScore:
    """Distance between the query and one candidate username."""

    username: str
    distance: int


def levenshtein(a: str, b: str) -> int:
    """Return the edit distance between two strings.

    Insertions, deletions and substitutions each cost 1.

    Args:
        a: First string
        b: Second string

    Returns:
        Minimum number of single-character edits turning ``a`` into ``b``
    """
    table = [[0] * (len(b) + 1) for _ in range(len(a) + 1)]
    for i in range(len(a) + 1):
        table[i][0] = i
    for j in range(len(b) + 1):
        table[0][j] = j

    for i in range(1, len(a) + 1):
        for j in range(1, len(b) + 1):
            indicator = 0 if a[i - 1] == b[j - 1] else 1
            table[i][j] = min(
                table[i][j - 1] + 1,
                table[i - 1][j] + 1,
                table[i - 1][j - 1] + indicator,
            )
    return table[len(a)][len(b)]


def score_candidates(query: str, candidates: Sequence[str]) -> list[EditDistanceScore]:
    """Score each candidate against the query, preserving input order."""
    return [EditDistanceScore(username=c, distance=levenshtein(query, c)) for c in candidates]


def rank(query: str, candidates: Sequence[str], k: int) -> list[str]:
    """Return up to ``k`` candidates closest to ``query``.

    Sorting is stable, so candidates at equal distance keep the order they
    were supplied in.

    Args:
        query: Partial token typed by the user
        candidates: Usernames to rank, in roster order
        k: Maximum number of results

    Returns:
        Closest usernames, nearest first. Empty when ``query`` is empty.
    """
    if not query or k <= 0:
        return []

    scores = score_candidates(query, candidates)
    scores.sort(key=lambda s: s.distance)
    return [s.username for s in scores[:k]]
