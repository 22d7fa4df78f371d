"""Scoring, level and fall-speed rules."""

from __future__ import annotations


# Base award for clearing 0-4 rows with one lock.  Larger simultaneous clears
# are worth more than the same number of single clears.
LINE_SCORES = (0, 100, 300, 500, 800)

LINES_PER_LEVEL = 10
FIRST_LEVEL = 1

BASE_DROP_MS = 1000
DROP_STEP_MS = 50
MIN_DROP_MS = 50


def score_for_lines(cleared: int, level: int) -> int:
    """Return the points for clearing ``cleared`` rows at ``level``.

    Raises:
        ValueError: If ``cleared`` is not between 0 and 4.
    """

    if not 0 <= cleared < len(LINE_SCORES):
        raise ValueError(f"Cannot clear {cleared} rows with one piece")
    return LINE_SCORES[cleared] * (level + 1)


def level_for_lines(total_lines: int) -> int:
    """Return the level reached after ``total_lines`` cleared rows."""

    if total_lines < 0:
        raise ValueError("Line total cannot be negative")
    return total_lines // LINES_PER_LEVEL + FIRST_LEVEL


def drop_interval_ms(level: int) -> int:
    """Return the automatic fall interval in milliseconds for ``level``.

    The interval shrinks linearly by ``DROP_STEP_MS`` per level and bottoms
    out at ``MIN_DROP_MS`` from level 20 on.
    """

    if level < FIRST_LEVEL:
        raise ValueError(f"Levels start at {FIRST_LEVEL}, got {level}")
    return max(MIN_DROP_MS, BASE_DROP_MS - (level - 1) * DROP_STEP_MS)
