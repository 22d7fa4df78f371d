"""Immutable snapshot of a game session."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple

from .board import Board
from .controller import render_grid
from .highscores import HighScoreEntry
from .progression import FIRST_LEVEL, drop_interval_ms
from .tetromino import Tetromino


class Phase(str, Enum):
    """Lifecycle phase of a session."""

    PLAYING = "playing"
    PAUSED = "paused"
    GAME_OVER = "gameOver"


@dataclass(frozen=True)
class GameState:
    """Complete state of a game at one instant.

    Snapshots are never changed after creation; every session command
    produces a new one.  While ``clearing_rows`` is non-empty the board still
    shows the completed rows, ``active`` is ``None`` and ``pending_score``
    holds the score that will be committed once the clear finishes.
    ``last_drop_ms`` is ``None`` until the next ``tick`` anchors the drop timer.
    """

    board: Board = field(default_factory=Board)
    active: Optional[Tetromino] = None
    upcoming: Optional[Tetromino] = None
    score: int = 0
    level: int = FIRST_LEVEL
    lines: int = 0
    phase: Phase = Phase.PLAYING
    clearing_rows: Tuple[int, ...] = ()
    last_drop_ms: Optional[float] = None
    pending_score: Optional[int] = None
    high_score: Optional[HighScoreEntry] = None
    high_score_rank: Optional[int] = None

    @property
    def is_clearing(self) -> bool:
        return bool(self.clearing_rows)

    @property
    def is_over(self) -> bool:
        return self.phase is Phase.GAME_OVER

    @property
    def display_score(self) -> int:
        """Score to show, including a staged line-clear award."""

        return self.pending_score if self.pending_score is not None else self.score

    @property
    def drop_interval_ms(self) -> int:
        return drop_interval_ms(self.level)

    def grid(self) -> List[List[int]]:
        """Return the board with the active piece drawn on top."""

        return render_grid(self.board, self.active)
