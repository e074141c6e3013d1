# config.py
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional
import os

# ----- Window & grid -----
CELL_SIZE = 20
GRID_W, GRID_H = 25, 25
HUD_HEIGHT = 40
PAD_HEIGHT = 120   # on-screen direction buttons below the board
BOARD_W, BOARD_H = GRID_W * CELL_SIZE, GRID_H * CELL_SIZE
WIDTH, HEIGHT = BOARD_W, HUD_HEIGHT + BOARD_H + PAD_HEIGHT
FPS = 60

# ----- Colors -----
BG         = (13, 17, 23)
GRID_LINE  = (255, 255, 255, 8)
HUD_BG     = (22, 27, 34)
TEXT       = (230, 237, 243)
TEXT_DIM   = (139, 148, 158)
HEAD_COLOR = (0, 217, 255)    # gradient start (head)
TAIL_COLOR = (233, 69, 96)    # gradient end (tail)
FOOD       = (255, 107, 107)
FOOD_GLOW  = (233, 69, 96)
EYE        = (255, 255, 255)
PUPIL      = (26, 26, 46)
OVERLAY    = (0, 0, 0, 160)
BUTTON     = (0, 217, 255)
BUTTON_TXT = (13, 17, 23)
PAD_BUTTON = (48, 54, 61)
PAD_ARROW  = (0, 217, 255)

# ----- Directions (dx, dy); y grows downward -----
UP, DOWN, LEFT, RIGHT = (0, -1), (0, 1), (-1, 0), (1, 0)
DIRECTIONS = {"UP": UP, "DOWN": DOWN, "LEFT": LEFT, "RIGHT": RIGHT}

# ----- Rules -----
SCORE_PER_FOOD = 10


def default_best_score_path() -> Path:
    env = os.environ.get("SNAKEGAME_BEST_SCORE_FILE")
    if env:
        return Path(env).expanduser()
    return Path.home() / ".snakegame" / "best_score"


# ----- Tunables (speeds are tick intervals, smaller is faster) -----
@dataclass
class Config:
    initial_speed_ms: int = 150
    speed_step_ms: int = 2
    min_speed_ms: int = 50
    seed: Optional[int] = None
    best_score_path: Path = field(default_factory=default_best_score_path)

    def __post_init__(self):
        if self.min_speed_ms <= 0:
            raise ValueError(f"min_speed_ms must be positive, got {self.min_speed_ms}")
        if self.speed_step_ms < 0:
            raise ValueError(f"speed_step_ms must not be negative, got {self.speed_step_ms}")
        if self.initial_speed_ms < self.min_speed_ms:
            raise ValueError(
                f"initial_speed_ms ({self.initial_speed_ms}) is below min_speed_ms ({self.min_speed_ms})")

CFG = Config()
