"""Toroidal grid geometry for the snake world."""

from __future__ import annotations

import enum
from typing import NamedTuple

import numpy as np


class Position(NamedTuple):
    """Logical cell coordinate; ``y`` grows upwards."""

    x: int
    y: int


class CellType(enum.IntEnum):
    """Integer codes stored in a rendered board array."""

    EMPTY = 0
    SNAKE = 1
    FOOD = 2
    HEAD = 3


def wrap(coord: int, bound: int) -> int:
    """Wrap a single coordinate that stepped at most one cell out of range."""
    if coord < 0:
        return bound - 1
    if coord >= bound:
        return 0
    return coord


class Grid:
    """Bounded toroidal grid of ``width`` x ``height`` cells.

    Each axis wraps independently, so a position that leaves the grid on
    both axes at once comes back on both.
    """

    def __init__(self, width: int = 10, height: int = 10) -> None:
        if width < 2 or height < 2:
            raise ValueError("Grid dimensions must be at least 2×2.")
        self.width = width
        self.height = height

    def in_bounds(self, x: int, y: int) -> bool:
        """Check whether a coordinate lies within the grid."""
        return 0 <= x < self.width and 0 <= y < self.height

    def wrap(self, x: int, y: int) -> Position:
        return Position(wrap(x, self.width), wrap(y, self.height))

    def step(self, position: Position, dx: int, dy: int) -> Position:
        """Move *position* by one unit step and wrap the result."""
        return self.wrap(position.x + dx, position.y + dy)

    def board(
        self,
        snake: list[Position],
        food: list[Position],
    ) -> np.ndarray:
        """Paint snake and food onto an ``(height, width)`` int8 array.

        Row index is ``y``. Food is painted first so that a snake cell
        overlapping an uneaten food shows as snake.
        """
        cells = np.zeros((self.height, self.width), dtype=np.int8)
        for pos in food:
            cells[pos.y, pos.x] = CellType.FOOD
        for pos in snake[1:]:
            cells[pos.y, pos.x] = CellType.SNAKE
        if snake:
            cells[snake[0].y, snake[0].x] = CellType.HEAD
        return cells

    def to_dict(self) -> dict:
        return {"width": self.width, "height": self.height}
