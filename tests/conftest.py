import os

# Headless pygame for every test module
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import numpy as np  # noqa: E402
import pytest  # noqa: E402

from snakegame.game import Game, GameStatus, RoundState  # noqa: E402
from snakegame.grid import Grid  # noqa: E402
from snakegame.storage import MemoryScoreStore  # noqa: E402


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


@pytest.fixture
def grid5():
    return Grid(5, 5)


@pytest.fixture
def make_game(rng):
    """Build a Game, optionally dropping it straight into a hand-made round."""
    def _make(grid=None, store=None, snake=None, direction=None, food=(0, 0),
              score=0, status=GameStatus.PLAYING):
        game = Game(grid=grid or Grid(25, 25), store=store or MemoryScoreStore(), rng=rng)
        if snake is not None:
            game.round = RoundState(
                snake=list(snake),
                direction=direction,
                pending=direction,
                food=food,
                score=score,
                speed_ms=game.config.initial_speed_ms,
            )
            game.status = status
        return game
    return _make
