"""Grid Snake: single-player snake simulation core."""

from grid_snake.collision import Outcome, detect_collision
from grid_snake.config import GameConfig
from grid_snake.driver import TickDriver
from grid_snake.engine import GameEngine, Snapshot
from grid_snake.grid import Grid, GridPosition
from grid_snake.snake import Direction, Snake
from grid_snake.spawner import SpawnError, Spawner

__all__ = [
    "Direction",
    "GameConfig",
    "GameEngine",
    "Grid",
    "GridPosition",
    "Outcome",
    "Snake",
    "Snapshot",
    "SpawnError",
    "Spawner",
    "TickDriver",
    "detect_collision",
]
