"""Game session: the state machine driving a single game.

The session owns the only mutable reference, the current :class:`GameState`.
Each command computes a new snapshot from the current one, publishes it
through :attr:`GameSession.state` and returns it.  Commands that do not apply
in the current phase return the unchanged snapshot.

Time is supplied from outside.  ``tick`` receives the caller's frame
timestamp and the line-clear animation is finished by an explicit
``complete_line_clear`` call, so the engine never schedules anything itself.
The drop timer is only ever anchored to caller timestamps: after a spawn or a
resume it is empty, and the next ``tick`` anchors it without dropping.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Optional, Sequence

from .board import Board
from .controller import collides, hard_drop_target, rotate, spawn, translate
from .game_state import GameState, Phase
from .highscores import HighScoreEntry, Leaderboard
from .progression import level_for_lines, score_for_lines
from .randomizer import Randomizer, UniformRandomizer
from .tetromino import Tetromino


LOGGER = logging.getLogger(__name__)


class GameSession:
    """Falling-block game with move/rotate/drop/pause controls."""

    def __init__(
        self,
        *,
        randomizer: Optional[Randomizer] = None,
        leaderboard: Optional[Leaderboard] = None,
        autostart: bool = True,
    ) -> None:
        self._randomizer = randomizer or UniformRandomizer()
        self._leaderboard = leaderboard
        self._state: Optional[GameState] = None
        if autostart:
            self.start_game()

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    @property
    def started(self) -> bool:
        return self._state is not None

    @property
    def state(self) -> GameState:
        if self._state is None:
            raise RuntimeError("Game session has not been started")
        return self._state

    # ------------------------------------------------------------------
    # Lifecycle commands
    # ------------------------------------------------------------------
    def start_game(self, now_ms: Optional[float] = None) -> GameState:
        """Begin a fresh game with a spawned piece and a queued next piece.

        Without ``now_ms`` the drop timer is anchored by the first ``tick``.
        """

        active = spawn(self._randomizer.next_type())
        upcoming = spawn(self._randomizer.next_type())
        LOGGER.info("Game started")
        return self._commit(GameState(active=active, upcoming=upcoming, last_drop_ms=now_ms))

    def reset_game(self, now_ms: Optional[float] = None) -> GameState:
        """Discard the current game, whatever its phase, and start a new one."""

        if self._state is not None:
            LOGGER.info("Game reset at score %d", self._state.score)
        return self.start_game(now_ms)

    def toggle_pause(self, now_ms: Optional[float] = None) -> GameState:
        """Switch between playing and paused; ignored once the game is over.

        Resuming re-anchors the drop timer, at ``now_ms`` or else at the next
        ``tick``, so time spent paused never counts towards the next drop.
        """

        state = self.state
        if state.phase is Phase.GAME_OVER:
            return state
        if state.phase is Phase.PLAYING:
            LOGGER.info("Paused")
            return self._commit(replace(state, phase=Phase.PAUSED))
        LOGGER.info("Resumed")
        return self._commit(replace(state, phase=Phase.PLAYING, last_drop_ms=now_ms))

    # ------------------------------------------------------------------
    # Piece commands
    # ------------------------------------------------------------------
    def move_left(self) -> GameState:
        return self._shift(-1)

    def move_right(self) -> GameState:
        return self._shift(1)

    def move_down(self) -> GameState:
        """Move the piece down one row, locking it if it cannot fall."""

        state = self.state
        if not self._controllable(state):
            return state
        moved = translate(state.active, 0, 1)
        if collides(state.board, moved):
            return self._commit(self._lock(state, state.active))
        return self._commit(replace(state, active=moved))

    def rotate(self) -> GameState:
        """Turn the piece clockwise; blocked rotations leave it unchanged."""

        state = self.state
        if not self._controllable(state):
            return state
        rotated = rotate(state.active)
        if collides(state.board, rotated):
            return state
        return self._commit(replace(state, active=rotated))

    def hard_drop(self) -> GameState:
        """Drop the piece to its resting position and lock it there."""

        state = self.state
        if not self._controllable(state):
            return state
        target = hard_drop_target(state.board, state.active)
        return self._commit(self._lock(state, target))

    def tick(self, current_time_ms: float) -> GameState:
        """Apply gravity if the drop interval has elapsed at ``current_time_ms``."""

        if isinstance(current_time_ms, bool) or not isinstance(current_time_ms, (int, float)):
            raise TypeError(f"current_time_ms must be a number, got {current_time_ms!r}")
        state = self.state
        if not self._controllable(state):
            return state
        if state.last_drop_ms is None:
            return self._commit(replace(state, last_drop_ms=current_time_ms))
        if current_time_ms - state.last_drop_ms < state.drop_interval_ms:
            return state
        self.move_down()
        return self._commit(replace(self.state, last_drop_ms=current_time_ms))

    def complete_line_clear(self, now_ms: Optional[float] = None) -> GameState:
        """Finish a pending line clear and spawn the next piece.

        Commits the staged score together with the new line total and level.
        Does nothing when no rows are being cleared.
        """

        state = self.state
        if not state.is_clearing or state.phase is Phase.GAME_OVER:
            return state
        result = state.board.clear_full_rows()
        lines = state.lines + len(state.clearing_rows)
        level = level_for_lines(lines)
        if level != state.level:
            LOGGER.info("Level up: %d", level)
        cleared = replace(
            state,
            board=result.board,
            score=state.display_score,
            lines=lines,
            level=level,
            clearing_rows=(),
            pending_score=None,
        )
        return self._commit(self._spawn_next(cleared, now_ms))

    # ------------------------------------------------------------------
    # Testing conveniences
    # ------------------------------------------------------------------
    def set_board(self, rows: Sequence[Sequence[int]]) -> GameState:
        """Replace the board, keeping pieces and counters.

        This helper exists for unit tests and puzzle setups that need a
        specific board.
        """

        return self._commit(replace(self.state, board=Board.from_rows(rows)))

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _commit(self, state: GameState) -> GameState:
        self._state = state
        return state

    @staticmethod
    def _controllable(state: GameState) -> bool:
        return state.phase is Phase.PLAYING and state.active is not None and not state.is_clearing

    def _shift(self, dx: int) -> GameState:
        state = self.state
        if not self._controllable(state):
            return state
        moved = translate(state.active, dx, 0)
        if collides(state.board, moved):
            return state
        return self._commit(replace(state, active=moved))

    def _lock(self, state: GameState, piece: Tetromino) -> GameState:
        LOGGER.debug("Locked %s at %s", piece.shape.value, piece.position)
        if all(y < 0 for _, y in piece.blocks()):
            # Nothing would land on the visible board: the stack has overflowed.
            return self._game_over(replace(state, active=None))
        board = state.board.place(piece.blocks(), piece.color)
        rows = board.full_rows()
        if rows:
            award = score_for_lines(len(rows), state.level)
            LOGGER.debug("Clearing rows %s for %d points", rows, award)
            return replace(
                state,
                board=board,
                active=None,
                clearing_rows=rows,
                pending_score=state.score + award,
            )
        return self._spawn_next(replace(state, board=board))

    def _spawn_next(self, state: GameState, now_ms: Optional[float] = None) -> GameState:
        assert state.upcoming is not None
        active = spawn(state.upcoming.shape)
        upcoming = spawn(self._randomizer.next_type())
        if collides(state.board, active):
            return self._game_over(replace(state, active=None, upcoming=upcoming))
        return replace(state, active=active, upcoming=upcoming, last_drop_ms=now_ms)

    def _game_over(self, state: GameState) -> GameState:
        entry = HighScoreEntry(score=state.score, level=state.level, lines=state.lines)
        rank = self._leaderboard.submit(entry) if self._leaderboard is not None else None
        LOGGER.info(
            "Game over: score=%d level=%d lines=%d rank=%s",
            entry.score,
            entry.level,
            entry.lines,
            rank,
        )
        return replace(state, phase=Phase.GAME_OVER, high_score=entry, high_score_rank=rank)


__all__ = ["GameSession"]
