"""Tick-based game engine composing snake, collision and spawner logic."""

from __future__ import annotations

import inspect
import logging
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Protocol

import numpy as np

from grid_snake.collision import Outcome, detect_collision
from grid_snake.config import GameConfig
from grid_snake.grid import Grid, GridPosition
from grid_snake.snake import Direction, Snake
from grid_snake.spawner import SpawnError, Spawner

logger = logging.getLogger(__name__)


class SpawnerLike(Protocol):
    """What the engine needs from a spawner.

    ``place_food`` may take no arguments; if it accepts one, the engine
    passes the cells the snake currently occupies.
    """

    def place_food(
        self, occupied: Iterable[GridPosition] = (),
    ) -> GridPosition: ...

    def reset_snake(self) -> Snake: ...


@dataclass(frozen=True)
class Snapshot:
    """Read-only view of the simulation for renderers and observers."""

    tick: int
    head: GridPosition
    segments: tuple[GridPosition, ...]
    food: GridPosition
    direction: Direction
    pending_growth: int

    def to_dict(self) -> dict:
        """Serialize to a JSON-friendly dict."""
        return {
            "tick": self.tick,
            "head": list(self.head),
            "segments": [list(seg) for seg in self.segments],
            "food": list(self.food),
            "direction": self.direction.name.lower(),
            "pending_growth": self.pending_growth,
        }


class GameEngine:
    """Single-snake, tick-based game engine.

    The engine owns the snake and the food position and is the only thing
    that mutates them. Each call to :meth:`step` runs movement, growth and
    collision handling once and returns the tick's :class:`Outcome`.
    """

    def __init__(
        self,
        size: int = 20,
        seed: int | None = None,
        food_avoids_snake: bool = False,
        max_spawn_attempts: int = 8,
        spawner: SpawnerLike | None = None,
    ) -> None:
        if max_spawn_attempts < 1:
            raise ValueError("max_spawn_attempts must be at least 1.")
        self.grid = Grid(size)
        self.max_spawn_attempts = max_spawn_attempts
        if spawner is None:
            spawner = Spawner(
                size,
                rng=np.random.default_rng(seed),
                avoid_occupied=food_avoids_snake,
            )
        self.spawner = spawner
        self._food_wants_occupied = bool(
            inspect.signature(spawner.place_food).parameters,
        )

        self.tick = 0
        self.deaths = 0
        self.food_eaten = 0
        self.snake: Snake | None = self.spawner.reset_snake()
        self.food = self._spawn_food()

    @classmethod
    def from_config(
        cls, config: GameConfig, spawner: SpawnerLike | None = None,
    ) -> GameEngine:
        return cls(
            size=config.grid_size,
            seed=config.seed,
            food_avoids_snake=config.food_avoids_snake,
            max_spawn_attempts=config.max_spawn_attempts,
            spawner=spawner,
        )

    @property
    def size(self) -> int:
        return self.grid.size

    def request_direction(self, direction: Direction) -> bool:
        """Forward a direction request to the snake."""
        accepted = self._require_snake().request_direction(direction)
        if not accepted:
            logger.debug("Ignored direction request %s.", direction.name)
        return accepted

    def advance(self) -> GridPosition:
        """Move the snake one cell."""
        return self._require_snake().advance()

    def apply_growth(self) -> GridPosition | None:
        """Spend one pending growth credit, if any."""
        return self._require_snake().apply_growth()

    def check(self) -> Outcome:
        """Detect collisions at the current head and apply their effects."""
        snake = self._require_snake()
        outcome = detect_collision(snake, self.food, self.size)

        if outcome is Outcome.ATE_FOOD:
            snake.schedule_growth(1)
            self.food_eaten += 1
            self.food = self._spawn_food()
            logger.debug("Food eaten at tick %d; relocated to %s.",
                         self.tick, tuple(self.food))
        elif outcome is Outcome.DIED:
            self.deaths += 1
            logger.info(
                "Snake died at %s on tick %d with %d segments.",
                tuple(snake.head), self.tick, len(snake.segments),
            )
            self.reset()
        return outcome

    def step(self) -> Outcome:
        """Advance the game by one tick."""
        self.tick += 1
        self.advance()
        self.apply_growth()
        return self.check()

    def reset(self) -> None:
        """Discard the current snake and spawn a fresh one at the start."""
        if self.snake is not None:
            self.snake.reset(self.grid.center)
        self.snake = self.spawner.reset_snake()

    def observe(self) -> Snapshot:
        """Return a read-only snapshot of the current state."""
        snake = self._require_snake()
        return Snapshot(
            tick=self.tick,
            head=snake.head,
            segments=tuple(snake.segments),
            food=self.food,
            direction=snake.direction,
            pending_growth=snake.pending_growth,
        )

    def get_state(self) -> dict:
        """Return the full, serializable game state."""
        return {
            "tick": self.tick,
            "size": self.size,
            "deaths": self.deaths,
            "food_eaten": self.food_eaten,
            "snake": self._require_snake().to_dict(),
            "food": list(self.food),
        }

    def _require_snake(self) -> Snake:
        if self.snake is None:
            raise RuntimeError("No snake exists; the engine is not running.")
        return self.snake

    def _spawn_food(self) -> GridPosition:
        """Ask the spawner for food, rejecting out-of-bounds answers."""
        args = ()
        if self._food_wants_occupied:
            args = (self.snake.body() if self.snake is not None else [],)
        for _ in range(self.max_spawn_attempts):
            pos = GridPosition(*self.spawner.place_food(*args))
            if self.grid.in_bounds(pos):
                return pos
            logger.warning("Spawner returned out-of-bounds food %s.",
                           tuple(pos))
        raise SpawnError(
            f"No in-bounds food position after "
            f"{self.max_spawn_attempts} attempts.",
        )
