"""Mutable per-game state shared by the simulation systems."""

from __future__ import annotations

from dataclasses import dataclass, field

from toroid_snake.events import EventQueue, GameOverEvent, GrowthEvent
from toroid_snake.grid import Position
from toroid_snake.snake import Direction
from toroid_snake.world import EntityId


class InvariantViolation(AssertionError):
    """A system ran in an order or state the tick schedule forbids."""


@dataclass
class GameState:
    """Resources owned by one game.

    ``segments`` lists the snake chain from head to tail.
    ``last_tail_position`` is where the tail sat before the latest
    movement, i.e. the slot a grown segment will fill.
    """

    segments: list[EntityId] = field(default_factory=list)
    last_tail_position: Position | None = None
    pressed: frozenset[Direction] = frozenset()
    growth_events: EventQueue[GrowthEvent] = field(default_factory=EventQueue)
    game_over_events: EventQueue[GameOverEvent] = field(
        default_factory=EventQueue,
    )

    def clear_events(self) -> None:
        self.growth_events.clear()
        self.game_over_events.clear()
