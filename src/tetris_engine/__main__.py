"""Simple ASCII self-play demo for the Tetris engine.

Run with: `python -m tetris_engine`

Each piece is given a random rotation and target column and then hard
dropped.  Line clears are completed immediately.  The final board and a
one-line summary are printed, useful as a smoke test of the whole engine.
"""

from __future__ import annotations

import argparse
import logging
import random

from .highscores import TopScores
from .randomizer import RANDOMIZERS, make_randomizer
from .session import GameSession


LOGGER = logging.getLogger(__name__)


def _print_grid(grid: list[list[int]]) -> None:
    for row in grid:
        print("".join(str(cell) if cell else "." for cell in row))


def play(session: GameSession, pieces: int, rng: random.Random) -> int:
    """Hard drop up to ``pieces`` pieces and return how many were placed."""

    placed = 0
    while placed < pieces and not session.state.is_over:
        for _ in range(rng.randrange(4)):
            session.rotate()
        target = rng.randrange(session.state.board.width)
        for _ in range(session.state.board.width):
            active = session.state.active
            if active is None or active.x == target:
                break
            before = active.position
            if active.x > target:
                session.move_left()
            else:
                session.move_right()
            if session.state.active.position == before:
                break
        session.hard_drop()
        placed += 1
        if session.state.is_clearing:
            LOGGER.debug("Clearing rows %s", session.state.clearing_rows)
            session.complete_line_clear()
    return placed


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--seed", type=int, default=0, help="Seed for pieces and moves.")
    parser.add_argument("--pieces", type=int, default=200, help="Maximum number of pieces to drop.")
    parser.add_argument(
        "--randomizer",
        choices=sorted(RANDOMIZERS),
        default="uniform",
        help="Piece generator to use.",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Logging level (e.g. DEBUG, INFO, WARNING).",
    )
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.INFO), format="%(message)s")

    session = GameSession(
        randomizer=make_randomizer(args.randomizer, args.seed),
        leaderboard=TopScores(),
    )
    placed = play(session, args.pieces, random.Random(args.seed))
    state = session.state
    _print_grid(state.grid())
    print(
        f"pieces={placed} score={state.score} level={state.level} "
        f"lines={state.lines} phase={state.phase.value}"
    )


if __name__ == "__main__":
    main()
