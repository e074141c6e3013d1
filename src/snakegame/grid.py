# grid.py
from dataclasses import dataclass
from typing import Tuple

import numpy as np  # type: ignore

Cell = Tuple[int, int]


@dataclass(frozen=True)
class Grid:
    """Playable area, ``width`` x ``height`` cells with (0, 0) at the top left."""
    width: int
    height: int

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Grid must be at least 1x1, got {self.width}x{self.height}")

    @property
    def area(self) -> int:
        return self.width * self.height

    def in_bounds(self, cell: Cell) -> bool:
        x, y = cell
        return 0 <= x < self.width and 0 <= y < self.height

    def center(self) -> Cell:
        return (self.width // 2, self.height // 2)

    def random_cell(self, rng: np.random.Generator) -> Cell:
        """Uniformly random cell of the grid."""
        return (int(rng.integers(self.width)), int(rng.integers(self.height)))
