"""Game configuration."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass
from pathlib import Path

from toroid_snake.grid import Position
from toroid_snake.snake import Direction

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GameConfig:
    """World dimensions, tick periods, spawn layout and sprite sizes.

    Supports JSON serialization so a run can be reproduced.
    """

    # Grid
    grid_width: int = 10
    grid_height: int = 10

    # Timing (seconds)
    move_period: float = 0.15
    food_period: float = 1.0

    # Snake spawn
    spawn_x: int = 3
    spawn_y: int = 3
    spawn_direction: str = "up"

    # Sprite sizes as a fraction of one cell
    head_size: float = 0.8
    segment_size: float = 0.65
    food_size: float = 0.8

    # Food placement RNG
    seed: int | None = None

    def __post_init__(self) -> None:
        if self.grid_width < 2 or self.grid_height < 2:
            raise ValueError("Grid dimensions must be at least 2×2.")
        if self.move_period <= 0 or self.food_period <= 0:
            raise ValueError("Tick periods must be positive.")
        direction = Direction.from_name(self.spawn_direction)
        for x, y in (self.spawn_position, self._tail_position(direction)):
            if not (0 <= x < self.grid_width and 0 <= y < self.grid_height):
                raise ValueError(
                    f"Spawn cell ({x}, {y}) lies outside the "
                    f"{self.grid_width}×{self.grid_height} grid."
                )
        for name in ("head_size", "segment_size", "food_size"):
            if not 0 < getattr(self, name) <= 1:
                raise ValueError(f"{name} must be in (0, 1].")

    @property
    def spawn_position(self) -> Position:
        return Position(self.spawn_x, self.spawn_y)

    @property
    def direction(self) -> Direction:
        return Direction.from_name(self.spawn_direction)

    @property
    def tail_position(self) -> Position:
        """Cell of the initial body segment, directly behind the head."""
        return self._tail_position(self.direction)

    def _tail_position(self, direction: Direction) -> Position:
        dx, dy = direction.value
        return Position(self.spawn_x - dx, self.spawn_y - dy)

    def to_dict(self) -> dict:
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
