"""Piece movement rules: collision tests, spawning, rotation and hard drops.

All functions are pure.  They never change the board or the piece passed in;
candidate pieces are returned and the caller decides whether to commit them
after checking :func:`collides`.
"""

from __future__ import annotations

from typing import List, Optional

from .board import Board, WIDTH
from .tetromino import Cell, Tetromino, TetrominoType


# Spawn anchor.  The negative row keeps the piece above the visible board so
# its top row is never cut off when it first appears.
SPAWN_COLUMN = WIDTH // 2 - 2
SPAWN_ROW = -2


def occupied_cells(piece: Tetromino) -> List[Cell]:
    """Return the absolute ``(x, y)`` cells covered by ``piece``."""

    return piece.blocks()


def collides(board: Board, piece: Tetromino) -> bool:
    """Return ``True`` if any cell of ``piece`` is blocked on ``board``."""

    return any(board.is_occupied(x, y) for x, y in piece.blocks())


def can_move(board: Board, piece: Tetromino, dx: int, dy: int) -> bool:
    """Return ``True`` if ``piece`` can move by ``dx`` and ``dy`` on ``board``."""

    return not collides(board, piece.moved(dx, dy))


def spawn(shape: TetrominoType) -> Tetromino:
    """Return a new piece of ``shape`` in spawn orientation at the spawn anchor."""

    return Tetromino(shape, rotation=0, position=(SPAWN_COLUMN, SPAWN_ROW))


def rotate(piece: Tetromino) -> Tetromino:
    """Return ``piece`` turned one quarter clockwise.

    No wall kicks are tried.  If the candidate collides the caller keeps the
    old orientation.
    """

    return piece.rotated(1)


def translate(piece: Tetromino, dx: int, dy: int) -> Tetromino:
    """Return ``piece`` moved by ``dx`` columns and ``dy`` rows."""

    return piece.moved(dx, dy)


def hard_drop_target(board: Board, piece: Tetromino) -> Tetromino:
    """Return ``piece`` moved straight down to its lowest resting position.

    Always terminates because the floor counts as occupied.
    """

    while can_move(board, piece, 0, 1):
        piece = piece.moved(0, 1)
    return piece


def render_grid(board: Board, active: Optional[Tetromino] = None) -> List[List[int]]:
    """Return a copy of the board grid with the active piece overlaid.

    This is a convenience for renderers that want a single 2D array to draw
    without locking the piece.  Cells of the active piece above the top of the
    board are left out.
    """

    grid = board.rows()
    if active is not None:
        for x, y in active.blocks():
            if 0 <= y < board.height and 0 <= x < board.width:
                grid[y][x] = active.color
    return grid
