"""Piece generators deciding which tetromino type comes next."""

from __future__ import annotations

import random
from typing import Iterable, List, Optional, Protocol

from .tetromino import TetrominoType


class Randomizer(Protocol):
    def next_type(self) -> TetrominoType: ...


class UniformRandomizer:
    """Draw every piece independently and uniformly from the seven types."""

    def __init__(self, seed: Optional[int] = None) -> None:
        self._rng = random.Random(seed)

    def next_type(self) -> TetrominoType:
        return self._rng.choice(list(TetrominoType))


class BagRandomizer:
    """7-bag generator: each run of seven pieces holds every type once.

    With ``shuffle=False`` the bag is dealt in enumeration order, which gives a
    fully predictable sequence for tests.
    """

    def __init__(self, seed: Optional[int] = None, *, shuffle: bool = True) -> None:
        self._rng = random.Random(seed)
        self._shuffle = shuffle
        self._bag: List[TetrominoType] = []

    def next_type(self) -> TetrominoType:
        if not self._bag:
            self._bag = list(TetrominoType)
            if self._shuffle:
                self._rng.shuffle(self._bag)
        return self._bag.pop(0)


class SequenceRandomizer:
    """Cycle through a fixed list of types, e.g. to replay a recorded game."""

    def __init__(self, types: Iterable[TetrominoType]) -> None:
        self._types = [TetrominoType(t) for t in types]
        if not self._types:
            raise ValueError("Sequence must contain at least one piece type")
        self._index = 0

    def next_type(self) -> TetrominoType:
        shape = self._types[self._index % len(self._types)]
        self._index += 1
        return shape


RANDOMIZERS = {
    "uniform": UniformRandomizer,
    "bag": BagRandomizer,
}


def make_randomizer(kind: str = "uniform", seed: Optional[int] = None) -> Randomizer:
    """Return a seeded randomizer by name (``"uniform"`` or ``"bag"``)."""

    try:
        factory = RANDOMIZERS[kind]
    except KeyError:
        raise ValueError(f"Unknown randomizer: {kind}") from None
    return factory(seed)


__all__ = [
    "Randomizer",
    "UniformRandomizer",
    "BagRandomizer",
    "SequenceRandomizer",
    "make_randomizer",
]
