"""Simulation throughput benchmarking."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass

import numpy as np

from grid_snake.collision import Outcome
from grid_snake.engine import GameEngine
from grid_snake.snake import Direction

logger = logging.getLogger(__name__)

_MOVES = (Direction.UP, Direction.DOWN, Direction.LEFT, Direction.RIGHT)


@dataclass
class BenchmarkResult:
    """Results from a throughput benchmark run."""

    total_ticks: int
    deaths: int
    food_eaten: int
    wall_time_seconds: float
    ticks_per_second: float

    def summary(self) -> str:
        return (
            f"Benchmark: {self.total_ticks} ticks, {self.deaths} deaths, "
            f"{self.food_eaten} food in {self.wall_time_seconds:.2f}s | "
            f"{self.ticks_per_second:.1f} ticks/s"
        )


def benchmark_throughput(
    *,
    ticks: int = 10_000,
    grid_size: int = 20,
    seed: int = 42,
) -> BenchmarkResult:
    """Measure raw engine throughput with random input every tick."""
    if ticks < 1:
        raise ValueError("ticks must be at least 1.")
    engine = GameEngine(size=grid_size, seed=seed)
    rng = np.random.default_rng(seed)

    deaths = 0
    food_eaten = 0
    start = time.perf_counter()
    for choice in rng.integers(len(_MOVES), size=ticks).tolist():
        engine.request_direction(_MOVES[choice])
        outcome = engine.step()
        if outcome is Outcome.DIED:
            deaths += 1
        elif outcome is Outcome.ATE_FOOD:
            food_eaten += 1
    elapsed = time.perf_counter() - start

    result = BenchmarkResult(
        total_ticks=ticks,
        deaths=deaths,
        food_eaten=food_eaten,
        wall_time_seconds=elapsed,
        ticks_per_second=ticks / max(elapsed, 1e-9),
    )
    logger.info(result.summary())
    return result
