"""Toroid Snake — fixed-timestep snake simulation core."""

from toroid_snake.clock import FixedTimestep
from toroid_snake.config import GameConfig
from toroid_snake.engine import GameEngine, Sprite
from toroid_snake.grid import Grid, Position
from toroid_snake.snake import Direction
from toroid_snake.state import GameState, InvariantViolation
from toroid_snake.world import DeadEntityError, World

__all__ = [
    "DeadEntityError",
    "Direction",
    "FixedTimestep",
    "GameConfig",
    "GameEngine",
    "GameState",
    "Grid",
    "InvariantViolation",
    "Position",
    "Sprite",
    "World",
]
