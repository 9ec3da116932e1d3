"""Snake representation, input resolution, movement and growth."""

from __future__ import annotations

import enum

from grid_snake.grid import GridPosition


class Direction(enum.Enum):
    """Movement directions with (dx, dy) values. ``NONE`` keeps still."""

    NONE = (0, 0)
    UP = (0, 1)
    DOWN = (0, -1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def delta(self) -> tuple[int, int]:
        return self.value

    def is_opposite(self, other: Direction) -> bool:
        """Whether turning from this direction to *other* is a 180° reversal."""
        return _OPPOSITES.get(self) is other


_OPPOSITES: dict[Direction, Direction] = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


class Snake:
    """A snake head followed by a rope of body segments.

    ``segments`` is ordered head-to-tail and excludes the head. Each tick
    every segment takes the cell its predecessor held before the tick.
    """

    def __init__(
        self,
        head: GridPosition,
        direction: Direction = Direction.NONE,
    ) -> None:
        self.head = GridPosition(*head)
        self.direction = direction
        self.pending_direction = direction
        self.segments: list[GridPosition] = []
        self.pending_growth = 0
        self._previous_head = self.head

    def request_direction(self, requested: Direction) -> bool:
        """Queue *requested* for the next tick.

        Reversals are dropped, and so is any request made while a turn is
        already queued but not yet applied. Returns whether it was accepted.
        """
        if self.direction.is_opposite(requested):
            return False
        if self.direction != self.pending_direction:
            return False
        self.pending_direction = requested
        return True

    def advance(self) -> GridPosition:
        """Move one cell in the queued direction and drag the body along.

        No bounds are enforced here. Returns the new head position.
        """
        self.direction = self.pending_direction
        old_head = self.head
        self.head = old_head.shifted(self.direction)
        self._previous_head = old_head

        prev = old_head
        for i, seg in enumerate(self.segments):
            self.segments[i] = prev
            prev = seg
        return self.head

    def apply_growth(self) -> GridPosition | None:
        """Spend one growth credit by appending a segment.

        The segment goes on the tail's current cell, or on the cell the head
        just left when there is no body yet. A frozen snake grows onto its own
        head. Returns the appended position, or ``None`` if nothing grew.
        """
        if self.pending_growth == 0:
            return None
        if self.segments:
            pos = self.segments[-1]
        else:
            pos = self._previous_head
        self.segments.append(pos)
        self.pending_growth -= 1
        return pos

    def schedule_growth(self, segments: int = 1) -> None:
        """Add growth credits to be spent on future ticks."""
        if segments < 0:
            raise ValueError("Growth must be non-negative.")
        self.pending_growth += segments

    def reset(self, start: GridPosition) -> None:
        """Hard reset to a frozen, body-less snake at *start*."""
        self.head = GridPosition(*start)
        self._previous_head = self.head
        self.segments.clear()
        self.direction = Direction.NONE
        self.pending_direction = Direction.NONE
        self.pending_growth = 0

    def occupies(self, pos: GridPosition) -> bool:
        """Check whether the head or any segment is on *pos*."""
        return pos == self.head or pos in self.segments

    def body(self) -> list[GridPosition]:
        """Head followed by the segments."""
        return [self.head, *self.segments]

    def to_dict(self) -> dict:
        """Serialize snake state to a dictionary."""
        return {
            "head": list(self.head),
            "segments": [list(seg) for seg in self.segments],
            "direction": self.direction.name.lower(),
            "pending_direction": self.pending_direction.name.lower(),
            "pending_growth": self.pending_growth,
        }
