"""Fixed-interval tick driver for a game engine."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from grid_snake.collision import Outcome
    from grid_snake.engine import GameEngine, Snapshot
    from grid_snake.snake import Direction

logger = logging.getLogger(__name__)


class TickDriver:
    """Runs an engine's tick sequence on a single asyncio event loop.

    Input submitted between ticks goes straight to the engine on the same
    loop, so there is exactly one mutation point and no locking. Pausing
    withholds ticks. ``on_frame`` is called only when the observable state
    actually changed since the last frame.
    """

    def __init__(
        self,
        engine: GameEngine,
        tick_seconds: float = 0.15,
        on_frame: Callable[[Snapshot], None] | None = None,
        on_outcome: Callable[[Outcome], None] | None = None,
    ) -> None:
        if tick_seconds <= 0:
            raise ValueError("tick_seconds must be positive.")
        self.engine = engine
        self.tick_seconds = tick_seconds
        self.on_frame = on_frame
        self.on_outcome = on_outcome
        self.paused = False
        self.running = False
        self._last_frame: tuple | None = None

    def submit(self, direction: Direction) -> bool:
        """Deliver a direction request; may be called at any cadence."""
        return self.engine.request_direction(direction)

    def pause(self) -> None:
        self.paused = True

    def resume(self) -> None:
        self.paused = False

    def stop(self) -> None:
        """Ask a running loop to exit after the current tick."""
        self.running = False

    def tick(self) -> Outcome | None:
        """Run one tick unless paused. Returns the outcome, if any."""
        if self.paused:
            return None
        outcome = self.engine.step()
        if self.on_outcome is not None:
            self.on_outcome(outcome)
        self.publish_frame()
        return outcome

    def run_ticks(self, count: int) -> list[Outcome]:
        """Run *count* ticks back to back without sleeping."""
        outcomes = []
        for _ in range(count):
            outcome = self.tick()
            if outcome is not None:
                outcomes.append(outcome)
        return outcomes

    def publish_frame(self) -> bool:
        """Send the current snapshot to ``on_frame`` if it changed."""
        snapshot = self.engine.observe()
        key = (
            snapshot.head, snapshot.segments, snapshot.food,
            snapshot.direction,
        )
        if key == self._last_frame:
            return False
        self._last_frame = key
        if self.on_frame is not None:
            self.on_frame(snapshot)
        return True

    async def run(self, max_ticks: int | None = None) -> int:
        """Tick every ``tick_seconds`` until stopped.

        Returns the number of ticks actually run (paused intervals are not
        counted).
        """
        self.running = True
        ticks = 0
        self.publish_frame()
        logger.info("Tick driver started (interval %.3fs).", self.tick_seconds)
        try:
            while self.running:
                if max_ticks is not None and ticks >= max_ticks:
                    break
                await asyncio.sleep(self.tick_seconds)
                if self.running and self.tick() is not None:
                    ticks += 1
        except asyncio.CancelledError:
            logger.info("Tick driver cancelled after %d ticks.", ticks)
            raise
        except Exception:
            logger.exception("Tick driver failed after %d ticks.", ticks)
            raise
        finally:
            self.running = False
        logger.info("Tick driver stopped after %d ticks.", ticks)
        return ticks
