"""Frame-driven game engine composing world, systems and timers."""

from __future__ import annotations

from collections.abc import Collection
from dataclasses import dataclass

import numpy as np

from toroid_snake.clock import FixedTimestep
from toroid_snake.config import GameConfig
from toroid_snake.grid import Grid, Position
from toroid_snake.snake import Direction, Food, Size, SnakeHead
from toroid_snake.state import GameState
from toroid_snake.systems import (
    food_spawner,
    game_over,
    snake_eating,
    snake_growth,
    snake_movement,
    snake_movement_input,
    spawn_snake,
)
from toroid_snake.world import EntityId, World


@dataclass(frozen=True)
class Sprite:
    """What a renderer needs to draw one entity."""

    entity: EntityId
    kind: str
    position: Position
    size: Size


class GameEngine:
    """Single-snake, frame-driven game engine.

    Call :meth:`update` once per rendered frame with the elapsed time and
    the currently pressed direction keys. Movement and food spawning
    each fire on their own fixed period, as many times as the elapsed
    time covers.
    """

    def __init__(self, config: GameConfig | None = None) -> None:
        self.config = config if config is not None else GameConfig()
        self.grid = Grid(self.config.grid_width, self.config.grid_height)
        self.rng = np.random.default_rng(self.config.seed)
        self.world = World()
        self.state = GameState()
        self.move_timer = FixedTimestep(self.config.move_period)
        self.food_timer = FixedTimestep(self.config.food_period)
        self.ticks = 0
        self.food_ticks = 0
        self.resets = 0
        spawn_snake(self.world, self.state, self.config)

    @property
    def head(self) -> EntityId:
        return self.state.segments[0]

    @property
    def direction(self) -> Direction:
        return self.world.get(self.head, SnakeHead).direction

    @property
    def length(self) -> int:
        return len(self.state.segments)

    def snake_positions(self) -> list[Position]:
        """Segment positions from head to tail."""
        return [self.world.get_position(eid) for eid in self.state.segments]

    def food_positions(self) -> list[Position]:
        return [self.world.get_position(eid) for eid in self.world.query(Food)]

    def update(
        self, dt: float, pressed: Collection[Direction] = (),
    ) -> int:
        """Advance by one frame of *dt* seconds.

        Input is resolved before any tick of the frame runs. Returns the
        number of movement ticks that fired.
        """
        self.state.pressed = frozenset(pressed)
        snake_movement_input(self.world, self.state)

        moves = self.move_timer.accumulate(dt)
        for _ in range(moves):
            self.movement_tick()
        for _ in range(self.food_timer.accumulate(dt)):
            self.food_tick()
        return moves

    def movement_tick(self) -> None:
        """Run one movement tick: move, eat, grow, then handle game over."""
        self.state.clear_events()
        snake_movement(self.world, self.state, self.grid)
        snake_eating(self.world, self.state)
        snake_growth(self.world, self.state, self.config)
        if game_over(self.world, self.state, self.config):
            self.resets += 1
        self.ticks += 1

    def food_tick(self) -> EntityId:
        self.food_ticks += 1
        return food_spawner(self.world, self.grid, self.config, self.rng)

    def sprites(self) -> list[Sprite]:
        """Return the position and size of every visible entity."""
        sprites = []
        for eid in self.world.entities():
            if self.world.has(eid, SnakeHead):
                kind = "head"
            elif self.world.has(eid, Food):
                kind = "food"
            else:
                kind = "segment"
            sprites.append(
                Sprite(
                    entity=eid,
                    kind=kind,
                    position=self.world.get_position(eid),
                    size=self.world.get(eid, Size),
                )
            )
        return sprites

    def board(self) -> np.ndarray:
        """Render the world into an ``(height, width)`` cell-code array."""
        return self.grid.board(self.snake_positions(), self.food_positions())

    def get_state(self) -> dict:
        """Return the full, serializable game state."""
        return {
            "ticks": self.ticks,
            "food_ticks": self.food_ticks,
            "resets": self.resets,
            "direction": self.direction.name.lower(),
            "snake": [list(p) for p in self.snake_positions()],
            "food": [list(p) for p in self.food_positions()],
            "grid": self.grid.to_dict(),
        }
