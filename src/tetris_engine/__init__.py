"""Falling-block puzzle engine: pieces, board, scoring and the game loop."""

from .board import Board, LineClear
from .tetromino import COLOR_INDEX, Tetromino, TetrominoType, shape_blocks, shape_for
from .controller import (
    can_move,
    collides,
    hard_drop_target,
    occupied_cells,
    render_grid,
    rotate,
    spawn,
    translate,
)
from .progression import drop_interval_ms, level_for_lines, score_for_lines
from .randomizer import BagRandomizer, SequenceRandomizer, UniformRandomizer, make_randomizer
from .highscores import HighScoreEntry, Leaderboard, TopScores, candidate_rank
from .game_state import GameState, Phase
from .session import GameSession

__all__ = [
    "Board",
    "LineClear",
    "COLOR_INDEX",
    "Tetromino",
    "TetrominoType",
    "shape_blocks",
    "shape_for",
    "can_move",
    "collides",
    "hard_drop_target",
    "occupied_cells",
    "render_grid",
    "rotate",
    "spawn",
    "translate",
    "drop_interval_ms",
    "level_for_lines",
    "score_for_lines",
    "BagRandomizer",
    "SequenceRandomizer",
    "UniformRandomizer",
    "make_randomizer",
    "HighScoreEntry",
    "Leaderboard",
    "TopScores",
    "candidate_rank",
    "GameState",
    "Phase",
    "GameSession",
]
