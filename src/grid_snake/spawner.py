"""Food placement and snake (re)creation."""

from __future__ import annotations

import logging
from collections.abc import Iterable

import numpy as np

from grid_snake.grid import CellType, Grid, GridPosition
from grid_snake.snake import Snake

logger = logging.getLogger(__name__)


class SpawnError(RuntimeError):
    """Raised when a spawner cannot produce a usable position."""


class Spawner:
    """Places food and creates fresh snakes on a square grid.

    Uses a seeded NumPy RNG for deterministic, reproducible placement. By
    default food may land on an occupied cell, snake included; pass
    ``avoid_occupied=True`` to draw only from free cells.
    """

    def __init__(
        self,
        size: int = 20,
        rng: np.random.Generator | None = None,
        avoid_occupied: bool = False,
    ) -> None:
        self.grid = Grid(size)
        self.rng = rng if rng is not None else np.random.default_rng()
        self.avoid_occupied = avoid_occupied

    @property
    def size(self) -> int:
        return self.grid.size

    @property
    def start(self) -> GridPosition:
        return self.grid.center

    def place_food(
        self, occupied: Iterable[GridPosition] = (),
    ) -> GridPosition:
        """Pick a cell for the next food item.

        *occupied* is only consulted when ``avoid_occupied`` is set. If the
        board is completely full the draw falls back to any cell.
        """
        if self.avoid_occupied:
            self.grid.clear()
            for pos in occupied:
                if self.grid.in_bounds(pos):
                    self.grid.set(pos, CellType.SEGMENT)
            empty = self.grid.empty_cells()
            if empty:
                return empty[int(self.rng.integers(len(empty)))]
            logger.warning("No empty cells available for food spawning.")

        x, y = self.rng.integers(0, self.size, size=2).tolist()
        return GridPosition(x, y)

    def reset_snake(self) -> Snake:
        """Return a fresh, frozen snake at the canonical start position."""
        return Snake(self.start)
