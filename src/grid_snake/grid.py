"""Grid geometry and occupancy for the snake game."""

from __future__ import annotations

import enum
from collections.abc import Iterable
from typing import TYPE_CHECKING, NamedTuple

import numpy as np

if TYPE_CHECKING:
    from grid_snake.snake import Direction


class GridPosition(NamedTuple):
    """An integer ``(x, y)`` cell coordinate; ``y`` grows upwards."""

    x: int
    y: int

    def shifted(self, direction: Direction) -> GridPosition:
        """Return the neighbouring cell one step in *direction*."""
        dx, dy = direction.delta
        return GridPosition(self.x + dx, self.y + dy)


class CellType(enum.IntEnum):
    """Integer codes stored in the occupancy array."""

    EMPTY = 0
    SEGMENT = 1
    HEAD = 2
    FOOD = 3


class Grid:
    """Square game grid of side *size*.

    Occupancy is kept in a NumPy array indexed ``cells[y, x]`` so that free
    cells can be found in one vectorised pass.
    """

    def __init__(self, size: int = 20) -> None:
        if size < 4:
            raise ValueError("Grid size must be at least 4.")
        self.size = size
        self.cells = np.zeros((size, size), dtype=np.int8)

    @property
    def center(self) -> GridPosition:
        """The canonical start position."""
        return GridPosition(self.size // 2, self.size // 2)

    def in_bounds(self, pos: GridPosition) -> bool:
        """Check whether a coordinate lies within the grid."""
        return 0 <= pos.x < self.size and 0 <= pos.y < self.size

    def clear(self) -> None:
        """Reset all cells to empty."""
        self.cells[:] = CellType.EMPTY

    def get(self, pos: GridPosition) -> CellType:
        return CellType(self.cells[pos.y, pos.x])

    def set(self, pos: GridPosition, cell_type: CellType) -> None:
        self.cells[pos.y, pos.x] = cell_type

    def paint(
        self,
        head: GridPosition | None = None,
        segments: Iterable[GridPosition] = (),
        food: GridPosition | None = None,
    ) -> None:
        """Repaint the occupancy array from scratch.

        Out-of-bounds positions are skipped; the head is painted last so it
        wins over an overlapping segment or food cell.
        """
        self.clear()
        if food is not None and self.in_bounds(food):
            self.set(food, CellType.FOOD)
        for seg in segments:
            if self.in_bounds(seg):
                self.set(seg, CellType.SEGMENT)
        if head is not None and self.in_bounds(head):
            self.set(head, CellType.HEAD)

    def empty_cells(self) -> list[GridPosition]:
        """Return all empty cell coordinates."""
        ys, xs = np.where(self.cells == CellType.EMPTY)
        return [
            GridPosition(x, y)
            for x, y in zip(xs.tolist(), ys.tolist(), strict=True)
        ]
