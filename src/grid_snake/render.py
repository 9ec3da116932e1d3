"""Headless rendering helpers: world layout and text frames."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from grid_snake.grid import CellType, Grid

if TYPE_CHECKING:
    from grid_snake.config import GameConfig
    from grid_snake.engine import Snapshot
    from grid_snake.grid import GridPosition

_GLYPHS = {
    CellType.EMPTY: ".",
    CellType.SEGMENT: "o",
    CellType.HEAD: "@",
    CellType.FOOD: "*",
}


@dataclass(frozen=True)
class Layout:
    """Maps grid cells to world coordinates in a square window.

    The world origin is the window centre; the grid sits inside a margin.
    """

    grid_size: int = 20
    world_size: int = 700
    margin: int = 16

    @classmethod
    def from_config(cls, config: GameConfig) -> Layout:
        return cls(config.grid_size, config.world_size, config.margin)

    @property
    def cell_size(self) -> float:
        return (self.world_size - 2 * self.margin) / self.grid_size

    def to_world(self, pos: GridPosition) -> tuple[float, float]:
        """Return the world-space centre of the cell at *pos*."""
        origin = -self.world_size / 2 + self.margin
        return (
            origin + (pos.x + 0.5) * self.cell_size,
            origin + (pos.y + 0.5) * self.cell_size,
        )


def render_ascii(snapshot: Snapshot, size: int) -> str:
    """Draw *snapshot* as a bordered text frame, ``y`` growing upwards."""
    grid = Grid(size)
    grid.paint(snapshot.head, snapshot.segments, snapshot.food)

    border = "#" * (size + 2)
    rows = [border]
    # Row 0 of the array is y == 0, which belongs at the bottom.
    for row in grid.cells[::-1]:
        rows.append("#" + "".join(_GLYPHS[CellType(c)] for c in row) + "#")
    rows.append(border)
    return "\n".join(rows)
