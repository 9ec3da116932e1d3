"""Tests for the Grid module."""

import numpy as np
import pytest

from grid_snake.grid import CellType, Grid, GridPosition
from grid_snake.snake import Direction


class TestGridPosition:
    def test_structural_equality(self):
        assert GridPosition(1, 2) == GridPosition(1, 2)
        assert GridPosition(1, 2) != GridPosition(2, 1)
        assert len({GridPosition(1, 2), GridPosition(1, 2)}) == 1

    def test_shifted(self):
        pos = GridPosition(3, 3)
        assert pos.shifted(Direction.UP) == (3, 4)
        assert pos.shifted(Direction.LEFT) == (2, 3)
        assert pos.shifted(Direction.NONE) == pos


class TestGridInit:
    def test_default_size(self):
        grid = Grid()
        assert grid.size == 20
        assert grid.cells.shape == (20, 20)

    def test_minimum_size_enforced(self):
        with pytest.raises(ValueError, match="at least 4"):
            Grid(size=3)

    def test_all_cells_start_empty(self):
        grid = Grid(size=5)
        assert np.all(grid.cells == CellType.EMPTY)

    def test_center(self):
        assert Grid(20).center == (10, 10)
        assert Grid(5).center == (2, 2)


class TestGridOperations:
    def test_in_bounds(self):
        grid = Grid(size=5)
        assert grid.in_bounds(GridPosition(0, 0))
        assert grid.in_bounds(GridPosition(4, 4))
        assert not grid.in_bounds(GridPosition(-1, 0))
        assert not grid.in_bounds(GridPosition(0, 5))
        assert not grid.in_bounds(GridPosition(5, 0))

    def test_set_and_get_use_x_y(self):
        grid = Grid(size=5)
        grid.set(GridPosition(1, 3), CellType.FOOD)
        assert grid.get(GridPosition(1, 3)) == CellType.FOOD
        assert grid.cells[3, 1] == CellType.FOOD

    def test_paint(self):
        grid = Grid(size=5)
        grid.paint(
            head=GridPosition(2, 2),
            segments=[GridPosition(1, 2), GridPosition(0, 2)],
            food=GridPosition(4, 4),
        )
        assert grid.get(GridPosition(2, 2)) == CellType.HEAD
        assert grid.get(GridPosition(1, 2)) == CellType.SEGMENT
        assert grid.get(GridPosition(4, 4)) == CellType.FOOD
        assert len(grid.empty_cells()) == 21

    def test_paint_skips_out_of_bounds(self):
        grid = Grid(size=5)
        grid.paint(head=GridPosition(5, 2), segments=[GridPosition(-1, 0)])
        assert np.all(grid.cells == CellType.EMPTY)

    def test_head_painted_over_food(self):
        grid = Grid(size=5)
        grid.paint(head=GridPosition(1, 1), food=GridPosition(1, 1))
        assert grid.get(GridPosition(1, 1)) == CellType.HEAD

    def test_empty_cells(self):
        grid = Grid(size=4)
        assert len(grid.empty_cells()) == 16
        grid.set(GridPosition(0, 0), CellType.SEGMENT)
        empty = grid.empty_cells()
        assert len(empty) == 15
        assert GridPosition(0, 0) not in empty
        assert all(isinstance(p, GridPosition) for p in empty)
