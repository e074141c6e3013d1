# food.py
import logging
from typing import Sequence

import numpy as np  # type: ignore

from .grid import Cell, Grid

logger = logging.getLogger(__name__)


def spawn_food(snake: Sequence[Cell], grid: Grid, rng: np.random.Generator) -> Cell:
    """
    Pick a random cell that no snake segment occupies.

    Samples uniformly and retries until a free cell turns up. There is no
    retry limit: on a board completely covered by the snake this never
    returns. The grid holds 625 cells by default, far more than a snake
    reaches in practice.
    """
    occupied = set(snake)
    while True:
        cell = grid.random_cell(rng)
        if cell not in occupied:
            logger.debug("Food spawned at %s", cell)
            return cell
