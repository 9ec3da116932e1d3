"""Tests for the fixed-interval tick driver."""

import asyncio

import pytest

from grid_snake.collision import Outcome
from grid_snake.driver import TickDriver
from grid_snake.engine import GameEngine
from grid_snake.grid import GridPosition
from grid_snake.snake import Direction


@pytest.fixture()
def engine():
    game = GameEngine(size=20, seed=0)
    game.food = GridPosition(0, 0)
    return game


class TestTickDriverSync:
    def test_invalid_interval(self, engine):
        with pytest.raises(ValueError, match="positive"):
            TickDriver(engine, tick_seconds=0)

    def test_submit_forwards_to_engine(self, engine):
        driver = TickDriver(engine)
        assert driver.submit(Direction.LEFT)
        assert engine.snake.pending_direction == Direction.LEFT

    def test_run_ticks(self, engine):
        driver = TickDriver(engine)
        driver.submit(Direction.UP)
        outcomes = driver.run_ticks(3)
        assert len(outcomes) == 3
        assert engine.tick == 3
        assert engine.snake.head == (10, 13)

    def test_pause_withholds_ticks(self, engine):
        driver = TickDriver(engine)
        driver.pause()
        assert driver.tick() is None
        assert driver.run_ticks(5) == []
        assert engine.tick == 0
        driver.resume()
        assert driver.tick() is not None
        assert engine.tick == 1

    def test_frames_only_on_change(self, engine):
        frames = []
        driver = TickDriver(engine, on_frame=frames.append)
        assert driver.publish_frame()
        assert not driver.publish_frame()
        # Frozen snake: nothing observable moves.
        driver.tick()
        assert len(frames) == 1
        driver.submit(Direction.RIGHT)
        driver.tick()
        assert len(frames) == 2
        assert frames[-1].head == (11, 10)

    def test_outcome_callback(self, engine):
        seen = []
        driver = TickDriver(engine, on_outcome=seen.append)
        driver.run_ticks(2)
        assert seen == [Outcome.NONE, Outcome.NONE]


class TestTickDriverAsync:
    @pytest.mark.asyncio
    async def test_run_max_ticks(self, engine):
        driver = TickDriver(engine, tick_seconds=0.001)
        driver.submit(Direction.DOWN)
        ticks = await driver.run(max_ticks=3)
        assert ticks == 3
        assert engine.tick == 3
        assert not driver.running

    @pytest.mark.asyncio
    async def test_stop_from_callback(self, engine):
        driver = TickDriver(engine, tick_seconds=0.001)
        driver.on_outcome = lambda _outcome: driver.stop()
        ticks = await driver.run()
        assert ticks == 1

    @pytest.mark.asyncio
    async def test_input_between_ticks(self, engine):
        driver = TickDriver(engine, tick_seconds=0.01)
        task = asyncio.create_task(driver.run(max_ticks=2))
        driver.submit(Direction.LEFT)
        await task
        assert engine.snake.head == (8, 10)

    @pytest.mark.asyncio
    async def test_cancel(self, engine):
        driver = TickDriver(engine, tick_seconds=0.01)
        task = asyncio.create_task(driver.run())
        await asyncio.sleep(0.03)
        task.cancel()
        with pytest.raises(asyncio.CancelledError):
            await task
        assert not driver.running
