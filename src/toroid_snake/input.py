"""Keyboard state to heading resolution."""

from __future__ import annotations

from collections.abc import Collection

from toroid_snake.snake import Direction

# First pressed key in this order wins.
KEY_PRIORITY: tuple[Direction, ...] = (
    Direction.LEFT,
    Direction.RIGHT,
    Direction.DOWN,
    Direction.UP,
)


def resolve_direction(
    current: Direction,
    pressed: Collection[Direction],
) -> Direction:
    """Return the heading after applying the currently pressed keys.

    With no key pressed the heading is kept. A request to turn straight
    back is ignored.
    """
    requested = next((d for d in KEY_PRIORITY if d in pressed), current)
    if requested == current.opposite():
        return current
    return requested
