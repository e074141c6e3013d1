"""Classic single-player Snake on a fixed grid, drawn with pygame."""

from .game import Game, GameStatus, RoundState, StepResult, new_round, step_game, is_opposite
from .grid import Grid
from .food import spawn_food
from .storage import FileScoreStore, MemoryScoreStore

__all__ = [
    "Game", "GameStatus", "RoundState", "StepResult",
    "new_round", "step_game", "is_opposite",
    "Grid", "spawn_food",
    "FileScoreStore", "MemoryScoreStore",
]
