"""Board representation for the Tetris playfield."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence, Tuple

import numpy as np
from numpy.typing import NDArray

from .tetromino import Cell


# Dimensions of the standard Tetris board.
WIDTH = 10
HEIGHT = 20

Grid = NDArray[np.uint8]


def create_empty_grid() -> Grid:
    """Return a new empty board grid filled with zeros."""

    return np.zeros((HEIGHT, WIDTH), dtype=np.uint8)


def _frozen(grid: Grid) -> Grid:
    grid.flags.writeable = False
    return grid


@dataclass(frozen=True)
class LineClear:
    """Outcome of :meth:`Board.clear_full_rows`."""

    count: int
    board: "Board"
    rows: Tuple[int, ...]  # pre-clear row indices, bottom-most first


class Board:
    """Immutable Tetris board.

    The grid is indexed ``[y, x]``: ``0`` is an empty cell, ``1``-``7`` the
    colour index of a locked piece.  Each board owns a read-only copy of its
    grid, so operations return new boards instead of changing this one.
    """

    width: int = WIDTH
    height: int = HEIGHT

    __slots__ = ("_grid",)

    def __init__(self, grid: Grid | None = None) -> None:
        if grid is None:
            grid = create_empty_grid()
        else:
            grid = np.asarray(grid)
        if grid.shape != (self.height, self.width):
            raise ValueError(f"Grid must be {self.height}x{self.width}, got shape {grid.shape}")
        self._grid: Grid = _frozen(np.array(grid, dtype=np.uint8, copy=True))

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> "Board":
        """Build a board from nested row sequences (top row first)."""

        if len(rows) != cls.height:
            raise ValueError("Grid height mismatch")
        for row in rows:
            if len(row) != cls.width:
                raise ValueError("Grid width mismatch")
        return cls(np.asarray(rows, dtype=np.uint8))

    @property
    def grid(self) -> Grid:
        return self._grid

    def rows(self) -> list[list[int]]:
        """Return a mutable nested-list copy of the grid."""

        return self._grid.tolist()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return bool(np.array_equal(self._grid, other._grid))

    def __hash__(self) -> int:
        return hash(self._grid.tobytes())

    def __repr__(self) -> str:
        filled = int(np.count_nonzero(self._grid))
        return f"Board(filled={filled})"

    def get_cell(self, x: int, y: int) -> int:
        """Safely return the value at ``(x, y)``.

        Raises:
            IndexError: If the coordinates are outside the board.
        """
        if 0 <= y < self.height and 0 <= x < self.width:
            return int(self._grid[y, x])
        raise IndexError("Cell out of bounds")

    def is_occupied(self, x: int, y: int) -> bool:
        """Return ``True`` if a block may not occupy ``(x, y)``.

        Positions left or right of the board and at or below the floor count
        as occupied, which makes collision detection reject them for free.
        Rows above the top (negative ``y``) are always free so that pieces can
        spawn there and fall into view.
        """

        if x < 0 or x >= self.width or y >= self.height:
            return True
        if y < 0:
            return False
        return bool(self._grid[y, x] != 0)

    def place(self, cells: Iterable[Cell], color: int) -> "Board":
        """Return a new board with ``color`` written into ``cells``.

        Cells above the top of the board are skipped.  Prior occupancy is not
        checked; the caller must only place legally positioned pieces.

        Raises:
            IndexError: If a cell lies beside the board or below the floor.
        """

        coordinates = np.asarray([c for c in cells if c[1] >= 0], dtype=np.int16)
        grid = self._grid.copy()
        if coordinates.size:
            xs, ys = coordinates.T
            if np.any(xs < 0) or np.any(xs >= self.width) or np.any(ys >= self.height):
                raise IndexError("Block out of bounds")
            grid[ys, xs] = np.uint8(color)
        return Board(grid)

    def full_rows(self) -> Tuple[int, ...]:
        """Return the indices of completely filled rows, bottom-most first."""

        full = np.all(self._grid != 0, axis=1)
        return tuple(int(r) for r in np.flatnonzero(full)[::-1])

    def clear_full_rows(self) -> LineClear:
        """Remove every full row at once and compact the rest downwards.

        Eligibility is decided once against this board.  Surviving rows keep
        their order and the same number of empty rows is inserted at the top.
        """

        rows = self.full_rows()
        if not rows:
            return LineClear(count=0, board=self, rows=())

        full = np.zeros(self.height, dtype=bool)
        full[list(rows)] = True
        remaining = self._grid[~full]
        new_rows = np.zeros((len(rows), self.width), dtype=self._grid.dtype)
        return LineClear(count=len(rows), board=Board(np.vstack((new_rows, remaining))), rows=rows)
