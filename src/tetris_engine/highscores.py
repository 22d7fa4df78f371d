"""High-score candidates and the ranking collaborator interface.

The engine produces a :class:`HighScoreEntry` when a game ends and asks a
:class:`Leaderboard` where it places.  Storage and formatting belong to the
leaderboard implementation; :class:`TopScores` is a small in-memory one.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import List, Optional, Protocol, Sequence


HIGH_SCORE_LIMIT = 5


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class HighScoreEntry:
    """Final result of a finished game."""

    score: int
    level: int
    lines: int
    timestamp: datetime = field(default_factory=_utcnow)


def candidate_rank(
    existing: Sequence[HighScoreEntry],
    entry: HighScoreEntry,
    limit: int = HIGH_SCORE_LIMIT,
) -> Optional[int]:
    """Return the 1-based rank ``entry`` would take, or ``None`` if unranked.

    A score of zero is never ranked.  Existing entries with an equal score
    stay ahead of the newcomer.
    """

    if entry.score <= 0:
        return None
    position = sum(1 for other in existing if other.score >= entry.score)
    if position < limit:
        return position + 1
    return None


class Leaderboard(Protocol):
    def submit(self, entry: HighScoreEntry) -> Optional[int]: ...


class TopScores:
    """In-memory leaderboard keeping the best ``limit`` entries."""

    def __init__(self, entries: Sequence[HighScoreEntry] = (), *, limit: int = HIGH_SCORE_LIMIT) -> None:
        if limit < 1:
            raise ValueError("limit must be at least 1")
        self.limit = limit
        self._entries: List[HighScoreEntry] = sorted(entries, key=lambda e: e.score, reverse=True)[:limit]

    @property
    def entries(self) -> List[HighScoreEntry]:
        return list(self._entries)

    def submit(self, entry: HighScoreEntry) -> Optional[int]:
        """Insert ``entry`` if it ranks and return its 1-based position."""

        rank = candidate_rank(self._entries, entry, self.limit)
        if rank is None:
            return None
        self._entries.insert(rank - 1, entry)
        del self._entries[self.limit :]
        return rank


__all__ = ["HIGH_SCORE_LIMIT", "HighScoreEntry", "Leaderboard", "TopScores", "candidate_rank"]
