"""Tetromino definitions: the shape table and the active piece value.

Every piece type has four hand-written 4x4 occupancy matrices, one per
rotation state.  Index ``0`` is the spawn orientation and each following index
is one clockwise quarter turn.  The matrices follow a simplified Super Rotation
System layout and are written out explicitly rather than rotated at runtime,
since several states (the ``S``/``Z`` verticals, the ``I`` bar) sit in
different columns than a plain bitmap rotation would produce.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Dict, List, Tuple

ShapeMatrix = Tuple[Tuple[int, int, int, int], ...]
Cell = Tuple[int, int]  # (x, y)

MATRIX_SIZE = 4
ROTATIONS = 4


class TetrominoType(str, Enum):
    """Enumeration of the seven standard tetromino shapes."""

    I = "I"
    O = "O"
    T = "T"
    S = "S"
    Z = "Z"
    J = "J"
    L = "L"


# Integer written into the board for each locked piece; ``0`` is an empty cell.
COLOR_INDEX: Dict[TetrominoType, int] = {t: i + 1 for i, t in enumerate(TetrominoType)}


SHAPES: Dict[TetrominoType, Tuple[ShapeMatrix, ...]] = {
    TetrominoType.I: (
        (
            (0, 0, 0, 0),
            (1, 1, 1, 1),
            (0, 0, 0, 0),
            (0, 0, 0, 0),
        ),
        (
            (0, 0, 1, 0),
            (0, 0, 1, 0),
            (0, 0, 1, 0),
            (0, 0, 1, 0),
        ),
        (
            (0, 0, 0, 0),
            (0, 0, 0, 0),
            (1, 1, 1, 1),
            (0, 0, 0, 0),
        ),
        (
            (0, 1, 0, 0),
            (0, 1, 0, 0),
            (0, 1, 0, 0),
            (0, 1, 0, 0),
        ),
    ),
    TetrominoType.O: (
        (
            (0, 0, 0, 0),
            (0, 1, 1, 0),
            (0, 1, 1, 0),
            (0, 0, 0, 0),
        ),
    )
    * ROTATIONS,
    TetrominoType.T: (
        (
            (0, 0, 0, 0),
            (0, 1, 0, 0),
            (1, 1, 1, 0),
            (0, 0, 0, 0),
        ),
        (
            (0, 0, 0, 0),
            (0, 1, 0, 0),
            (0, 1, 1, 0),
            (0, 1, 0, 0),
        ),
        (
            (0, 0, 0, 0),
            (0, 0, 0, 0),
            (1, 1, 1, 0),
            (0, 1, 0, 0),
        ),
        (
            (0, 0, 0, 0),
            (0, 1, 0, 0),
            (1, 1, 0, 0),
            (0, 1, 0, 0),
        ),
    ),
    TetrominoType.S: (
        (
            (0, 0, 0, 0),
            (0, 1, 1, 0),
            (1, 1, 0, 0),
            (0, 0, 0, 0),
        ),
        (
            (0, 0, 0, 0),
            (0, 1, 0, 0),
            (0, 1, 1, 0),
            (0, 0, 1, 0),
        ),
        (
            (0, 0, 0, 0),
            (0, 0, 0, 0),
            (0, 1, 1, 0),
            (1, 1, 0, 0),
        ),
        (
            (0, 0, 0, 0),
            (0, 1, 0, 0),
            (1, 1, 0, 0),
            (1, 0, 0, 0),
        ),
    ),
    TetrominoType.Z: (
        (
            (0, 0, 0, 0),
            (1, 1, 0, 0),
            (0, 1, 1, 0),
            (0, 0, 0, 0),
        ),
        (
            (0, 0, 0, 0),
            (0, 0, 1, 0),
            (0, 1, 1, 0),
            (0, 1, 0, 0),
        ),
        (
            (0, 0, 0, 0),
            (0, 0, 0, 0),
            (1, 1, 0, 0),
            (0, 1, 1, 0),
        ),
        # Same outline as state 1, one column further left.
        (
            (0, 0, 0, 0),
            (0, 1, 0, 0),
            (0, 1, 1, 0),
            (0, 0, 1, 0),
        ),
    ),
    TetrominoType.J: (
        (
            (0, 0, 0, 0),
            (1, 0, 0, 0),
            (1, 1, 1, 0),
            (0, 0, 0, 0),
        ),
        (
            (0, 0, 0, 0),
            (0, 1, 1, 0),
            (0, 1, 0, 0),
            (0, 1, 0, 0),
        ),
        (
            (0, 0, 0, 0),
            (0, 0, 0, 0),
            (1, 1, 1, 0),
            (0, 0, 1, 0),
        ),
        (
            (0, 0, 0, 0),
            (0, 1, 0, 0),
            (0, 1, 0, 0),
            (1, 1, 0, 0),
        ),
    ),
    TetrominoType.L: (
        (
            (0, 0, 0, 0),
            (0, 0, 1, 0),
            (1, 1, 1, 0),
            (0, 0, 0, 0),
        ),
        (
            (0, 0, 0, 0),
            (0, 1, 0, 0),
            (0, 1, 0, 0),
            (0, 1, 1, 0),
        ),
        (
            (0, 0, 0, 0),
            (0, 0, 0, 0),
            (1, 1, 1, 0),
            (1, 0, 0, 0),
        ),
        (
            (0, 0, 0, 0),
            (1, 1, 0, 0),
            (0, 1, 0, 0),
            (0, 1, 0, 0),
        ),
    ),
}


def shape_for(shape: TetrominoType, rotation: int) -> ShapeMatrix:
    """Return the 4x4 occupancy matrix for ``shape`` at ``rotation``.

    Parameters
    ----------
    shape:
        The :class:`TetrominoType` to query.
    rotation:
        Index of the desired rotation state.  Values are wrapped so any integer
        is accepted.
    """

    return SHAPES[shape][rotation % ROTATIONS]


def shape_blocks(shape: TetrominoType, rotation: int) -> List[Cell]:
    """Return the ``(dx, dy)`` offsets of the filled cells of a shape matrix."""

    matrix = shape_for(shape, rotation)
    return [
        (dx, dy)
        for dy, row in enumerate(matrix)
        for dx, filled in enumerate(row)
        if filled
    ]


def _require_int(name: str, value: object) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {value!r}")


@dataclass(frozen=True)
class Tetromino:
    """Active falling piece.

    Instances are immutable: :meth:`rotated` and :meth:`moved` return new
    pieces and leave the original untouched.  ``position`` is the board
    coordinate ``(x, y)`` of the top-left corner of the 4x4 shape matrix;
    ``y`` may be negative while the piece is still above the visible board.
    """

    shape: TetrominoType
    rotation: int = 0
    position: Tuple[int, int] = (0, 0)  # (x, y)

    def __post_init__(self) -> None:
        if not isinstance(self.shape, TetrominoType):
            raise TypeError(f"shape must be a TetrominoType, got {self.shape!r}")
        _require_int("rotation", self.rotation)
        if len(self.position) != 2:
            raise TypeError(f"position must be an (x, y) pair, got {self.position!r}")
        x, y = self.position
        _require_int("x", x)
        _require_int("y", y)
        # Normalise so equal orientations compare equal.
        object.__setattr__(self, "rotation", self.rotation % ROTATIONS)
        object.__setattr__(self, "position", (x, y))

    @property
    def x(self) -> int:
        return self.position[0]

    @property
    def y(self) -> int:
        return self.position[1]

    @property
    def matrix(self) -> ShapeMatrix:
        return shape_for(self.shape, self.rotation)

    @property
    def color(self) -> int:
        return COLOR_INDEX[self.shape]

    def rotated(self, direction: int = 1) -> "Tetromino":
        """Return the piece turned by ``direction`` quarter turns clockwise.

        Negative values rotate counter-clockwise.  The anchor is unchanged; no
        offset correction is applied.
        """

        _require_int("direction", direction)
        return replace(self, rotation=(self.rotation + direction) % ROTATIONS)

    def moved(self, dx: int, dy: int) -> "Tetromino":
        """Return the piece translated by ``dx`` columns and ``dy`` rows."""

        _require_int("dx", dx)
        _require_int("dy", dy)
        x, y = self.position
        return replace(self, position=(x + dx, y + dy))

    def blocks(self) -> List[Cell]:
        """Return the absolute ``(x, y)`` board coordinates of this piece."""

        x, y = self.position
        return [(x + dx, y + dy) for dx, dy in shape_blocks(self.shape, self.rotation)]
