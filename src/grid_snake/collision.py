"""Collision detection run after each tick's movement and growth."""

from __future__ import annotations

import enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from grid_snake.grid import GridPosition
    from grid_snake.snake import Snake


class Outcome(enum.Enum):
    """Result of a collision check."""

    NONE = "none"
    ATE_FOOD = "ate_food"
    DIED = "died"


def hit_wall(head: GridPosition, size: int) -> bool:
    """Check whether *head* has left a ``size`` x ``size`` grid."""
    return head.x < 0 or head.x >= size or head.y < 0 or head.y >= size


def detect_collision(snake: Snake, food: GridPosition, size: int) -> Outcome:
    """Classify the snake's current head position.

    Checks run wall, then food, then self; the first match wins. This only
    reports the outcome, it does not change any state.
    """
    head = snake.head
    if hit_wall(head, size):
        return Outcome.DIED
    if head == food:
        return Outcome.ATE_FOOD
    if any(seg == head for seg in snake.segments):
        return Outcome.DIED
    return Outcome.NONE
