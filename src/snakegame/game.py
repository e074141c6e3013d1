# game.py
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple
import logging

import numpy as np  # type: ignore

from .config import CFG, Config, GRID_W, GRID_H, UP, DOWN, LEFT, RIGHT, SCORE_PER_FOOD
from .food import spawn_food
from .grid import Cell, Grid
from .storage import MemoryScoreStore, ScoreStore

logger = logging.getLogger(__name__)

Direction = Tuple[int, int]
VALID_DIRECTIONS = (UP, DOWN, LEFT, RIGHT)


class GameStatus(Enum):
    READY = "ready"
    PLAYING = "playing"
    PAUSED = "paused"
    GAME_OVER = "game_over"


class StepResult(Enum):
    MOVED = "moved"
    ATE = "ate"
    HIT_WALL = "wall"
    HIT_SELF = "self"

    @property
    def is_collision(self) -> bool:
        return self in (StepResult.HIT_WALL, StepResult.HIT_SELF)


# ---------- Helpers ----------
def is_opposite(a: Direction, b: Direction) -> bool:
    return a[0] == -b[0] and a[1] == -b[1]


# ---------- Round state ----------
@dataclass
class RoundState:
    snake: List[Cell]       # head at index 0
    direction: Direction    # applied on the last tick
    pending: Direction      # committed on the next tick
    food: Cell
    score: int
    speed_ms: int           # current tick interval

    def __post_init__(self):
        if not self.snake:
            raise ValueError("Snake needs at least one segment")

def new_round(grid: Grid, rng: np.random.Generator, config: Config = CFG) -> RoundState:
    cx, cy = grid.center()
    snake = [(cx, cy), (cx - 1, cy), (cx - 2, cy)]
    return RoundState(
        snake=snake,
        direction=RIGHT,
        pending=RIGHT,
        food=spawn_food(snake, grid, rng),
        score=0,
        speed_ms=config.initial_speed_ms,
    )


# ---------- Update step ----------
def step_game(state: RoundState, grid: Grid, rng: np.random.Generator,
              config: Config = CFG) -> StepResult:
    """
    Advance the round by exactly one cell.

    On a collision the snake is left untouched so the final frame can be
    drawn. The body check runs against the snake before it moves, so
    stepping into the cell the tail is about to leave still counts as a
    hit.
    """
    # Commit direction once per tick
    state.direction = state.pending

    hx, hy = state.snake[0]
    dx, dy = state.direction
    new_head = (hx + dx, hy + dy)

    if not grid.in_bounds(new_head):
        return StepResult.HIT_WALL
    if new_head in state.snake:
        return StepResult.HIT_SELF

    state.snake.insert(0, new_head)

    if new_head == state.food:
        state.score += SCORE_PER_FOOD
        state.food = spawn_food(state.snake, grid, rng)
        state.speed_ms = max(config.min_speed_ms, state.speed_ms - config.speed_step_ms)
        return StepResult.ATE

    state.snake.pop()
    return StepResult.MOVED


# ---------- State machine ----------
class Game:
    """
    One snake game: the round state plus the READY / PLAYING / PAUSED /
    GAME_OVER lifecycle and the best score.

    The hosting shell feeds it input through :meth:`start`,
    :meth:`toggle_pause` and :meth:`request_direction`, and elapsed time
    through :meth:`advance`. Renderers only read its properties.
    """

    def __init__(self, config: Config = CFG, grid: Optional[Grid] = None,
                 store: Optional[ScoreStore] = None,
                 rng: Optional[np.random.Generator] = None):
        self.config = config
        self.grid = grid if grid is not None else Grid(GRID_W, GRID_H)
        self.rng = rng if rng is not None else np.random.default_rng(config.seed)
        self.store = store if store is not None else MemoryScoreStore()

        self.best_score = self.store.load_best_score()
        self.is_new_record = False
        self.accumulator = 0.0
        self._init_round()

    def _init_round(self) -> None:
        self.round = new_round(self.grid, self.rng, self.config)
        self.status = GameStatus.READY
        self.is_new_record = False

    # Read-only views for renderers --------------------------------------
    @property
    def snake(self) -> List[Cell]:
        return self.round.snake

    @property
    def food(self) -> Cell:
        return self.round.food

    @property
    def direction(self) -> Direction:
        return self.round.direction

    @property
    def score(self) -> int:
        return self.round.score

    @property
    def speed_ms(self) -> int:
        return self.round.speed_ms

    # Commands ------------------------------------------------------------
    def start(self) -> None:
        """Begin a fresh round from READY or GAME_OVER; resume from PAUSED."""
        if self.status == GameStatus.PLAYING:
            return
        if self.status in (GameStatus.READY, GameStatus.GAME_OVER):
            self._init_round()
            logger.info("Game started (best score %d)", self.best_score)
        else:
            logger.info("Game resumed")
        self.status = GameStatus.PLAYING

    def toggle_pause(self) -> None:
        if self.status == GameStatus.PLAYING:
            self.status = GameStatus.PAUSED
            logger.info("Game paused")
        elif self.status == GameStatus.PAUSED:
            self.status = GameStatus.PLAYING
            logger.info("Game resumed")
        else:
            self.start()

    def request_direction(self, direction: Direction) -> None:
        """
        Queue ``direction`` for the next tick.

        Reversals of the direction applied on the last tick are ignored.
        From READY or GAME_OVER an accepted request also starts a new round,
        which resets the heading to RIGHT.
        """
        if direction not in VALID_DIRECTIONS:
            raise ValueError(f"Not a direction: {direction!r}")
        if is_opposite(direction, self.round.direction):
            return
        self.round.pending = direction

        if self.status in (GameStatus.READY, GameStatus.GAME_OVER):
            self.start()

    def tick(self) -> Optional[StepResult]:
        """Run one update step; does nothing unless PLAYING."""
        if self.status != GameStatus.PLAYING:
            return None

        result = step_game(self.round, self.grid, self.rng, self.config)
        logger.debug("Tick: %s head=%s", result.value, self.snake[0])
        if result.is_collision:
            self._game_over(result)
        elif result == StepResult.ATE:
            logger.debug("Food eaten: score=%d speed=%dms", self.score, self.speed_ms)
        return result

    def advance(self, elapsed_ms: float) -> int:
        """
        Credit ``elapsed_ms`` of wall time and replay every tick it pays for.

        Ticks while not PLAYING still consume credit, they just do nothing.
        Returns the number of ticks consumed.
        """
        self.accumulator += elapsed_ms
        ticks = 0
        while self.accumulator >= self.round.speed_ms:
            self.tick()
            self.accumulator -= self.round.speed_ms
            ticks += 1
        return ticks

    def _game_over(self, reason: StepResult) -> None:
        self.status = GameStatus.GAME_OVER
        logger.info("Game over (%s): score=%d length=%d",
                    reason.value, self.score, len(self.snake))

        if self.score > self.best_score:
            self.best_score = self.score
            self.is_new_record = True
            self.store.save_best_score(self.best_score)
            logger.info("New best score: %d", self.best_score)
