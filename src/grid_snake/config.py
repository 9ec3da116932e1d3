"""Game configuration."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass
from pathlib import Path

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GameConfig:
    """Startup parameters for a game session.

    Supports JSON serialization so a session can be reproduced.
    """

    # Simulation
    grid_size: int = 20
    tick_seconds: float = 0.15
    seed: int | None = None
    food_avoids_snake: bool = False
    max_spawn_attempts: int = 8

    # Display
    world_size: int = 700
    margin: int = 16

    def __post_init__(self) -> None:
        if self.grid_size < 4:
            raise ValueError("grid_size must be at least 4.")
        if self.tick_seconds <= 0:
            raise ValueError("tick_seconds must be positive.")
        if self.max_spawn_attempts < 1:
            raise ValueError("max_spawn_attempts must be at least 1.")
        if self.margin < 0 or 2 * self.margin >= self.world_size:
            raise ValueError("margin must leave room for the grid.")

    def to_dict(self) -> dict:
        """Serialize to a plain dict."""
        return asdict(self)

    def save(self, path: str | Path) -> None:
        """Write config to a JSON file."""
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(json.dumps(self.to_dict(), indent=2))
        logger.info("Config saved to %s", p)

    @classmethod
    def load(cls, path: str | Path) -> GameConfig:
        """Load config from a JSON file."""
        raw = json.loads(Path(path).read_text())
        return cls(**raw)
