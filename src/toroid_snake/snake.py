"""Snake and food components attached to world entities."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class Direction(enum.Enum):
    """Cardinal movement directions with (dx, dy) values.

    ``UP`` increases ``y``, matching a y-up screen space.
    """

    LEFT = (-1, 0)
    RIGHT = (1, 0)
    UP = (0, 1)
    DOWN = (0, -1)

    def opposite(self) -> Direction:
        return _OPPOSITES[self]

    @classmethod
    def from_name(cls, name: str) -> Direction:
        """Look up a direction by case-insensitive name."""
        try:
            return cls[name.upper()]
        except KeyError:
            raise ValueError(f"Unknown direction '{name}'.") from None


# Pairs that would cause an instant 180° reversal.
_OPPOSITES: dict[Direction, Direction] = {
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
}


@dataclass
class SnakeHead:
    """Marks the head entity and carries its current heading."""

    direction: Direction


@dataclass(frozen=True)
class SnakeSegment:
    """Marks an entity as a link of the snake chain (head included)."""


@dataclass(frozen=True)
class Food:
    """Marks an edible entity."""


@dataclass(frozen=True)
class Size:
    """Logical sprite size as a fraction of one cell."""

    width: float
    height: float

    @classmethod
    def square(cls, size: float) -> Size:
        return cls(size, size)
