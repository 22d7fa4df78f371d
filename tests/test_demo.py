import random

from tetris_engine.__main__ import play
from tetris_engine.highscores import TopScores
from tetris_engine.randomizer import BagRandomizer
from tetris_engine.session import GameSession


def test_self_play_runs_until_limit_or_game_over():
    session = GameSession(randomizer=BagRandomizer(seed=5), leaderboard=TopScores())
    placed = play(session, 60, random.Random(5))
    state = session.state
    assert 0 < placed <= 60
    assert not state.is_clearing
    assert state.is_over or placed == 60
    assert state.board.grid.shape == (20, 10)
