"""Simulation systems run by the engine each frame or tick.

Every system receives the world and the game state explicitly. Within
one movement tick they must run in this order::

    snake_movement -> snake_eating -> snake_growth -> game_over
"""

from __future__ import annotations

import logging

import numpy as np

from toroid_snake.config import GameConfig
from toroid_snake.events import GameOverEvent, GrowthEvent
from toroid_snake.grid import Grid, Position
from toroid_snake.input import resolve_direction
from toroid_snake.snake import Food, Size, SnakeHead, SnakeSegment
from toroid_snake.state import GameState, InvariantViolation
from toroid_snake.world import EntityId, EntityStore

logger = logging.getLogger(__name__)


def spawn_segment(
    world: EntityStore, position: Position, config: GameConfig,
) -> EntityId:
    """Spawn a single body segment."""
    return world.spawn(
        position, SnakeSegment(), Size.square(config.segment_size),
    )


def spawn_snake(
    world: EntityStore, state: GameState, config: GameConfig,
) -> None:
    """Replace the segment chain with a fresh head and one body segment."""
    head = world.spawn(
        config.spawn_position,
        SnakeHead(config.direction),
        SnakeSegment(),
        Size.square(config.head_size),
    )
    state.segments = [
        head,
        spawn_segment(world, config.tail_position, config),
    ]
    logger.info(
        "Snake spawned at %s heading %s.",
        tuple(config.spawn_position), config.direction.name,
    )


def snake_movement_input(world: EntityStore, state: GameState) -> None:
    """Apply the pressed keys to the head's heading."""
    head_id = next(world.query(SnakeHead), None)
    if head_id is None:
        return
    head = world.get(head_id, SnakeHead)
    head.direction = resolve_direction(head.direction, state.pressed)


def snake_movement(
    world: EntityStore, state: GameState, grid: Grid,
) -> None:
    """Advance the head one cell and pull every segment along.

    Positions are snapshotted before any write so each segment follows
    where its predecessor was at the start of the tick.
    """
    if not state.segments:
        raise InvariantViolation("Snake movement ran with no segments.")

    previous = [world.get_position(eid) for eid in state.segments]
    head_id = state.segments[0]
    dx, dy = world.get(head_id, SnakeHead).direction.value
    new_head = grid.step(previous[0], dx, dy)
    world.set_position(head_id, new_head)

    if new_head in previous:
        state.game_over_events.send(GameOverEvent())

    for position, eid in zip(previous, state.segments[1:]):
        world.set_position(eid, position)

    state.last_tail_position = previous[-1]


def snake_eating(world: EntityStore, state: GameState) -> None:
    """Despawn food under the head, one growth event per food eaten."""
    if not state.segments:
        return
    head_pos = world.get_position(state.segments[0])
    for food_id in world.query(Food):
        if world.get_position(food_id) == head_pos:
            world.despawn(food_id)
            state.growth_events.send(GrowthEvent())
            logger.debug("Food %d eaten at %s.", food_id, tuple(head_pos))


def snake_growth(
    world: EntityStore, state: GameState, config: GameConfig,
) -> None:
    """Append one segment at the vacated tail cell if food was eaten."""
    if not state.growth_events.drain():
        return
    if state.last_tail_position is None:
        raise InvariantViolation("Snake grew before it ever moved.")
    state.segments.append(
        spawn_segment(world, state.last_tail_position, config),
    )
    logger.debug(
        "Snake grew to %d segments at %s.",
        len(state.segments), tuple(state.last_tail_position),
    )


def food_spawner(
    world: EntityStore,
    grid: Grid,
    config: GameConfig,
    rng: np.random.Generator,
) -> EntityId:
    """Drop one food on a uniformly random cell.

    Neither existing food nor the snake is checked, so food may stack or
    land under the snake.
    """
    position = Position(
        int(rng.integers(0, grid.width)), int(rng.integers(0, grid.height)),
    )
    food_id = world.spawn(position, Food(), Size.square(config.food_size))
    logger.debug("Food %d spawned at %s.", food_id, tuple(position))
    return food_id


def game_over(
    world: EntityStore, state: GameState, config: GameConfig,
) -> bool:
    """Reset the world if the snake bit itself this tick.

    Returns True when a reset happened.
    """
    if not state.game_over_events.drain():
        return False

    logger.info("Game over with snake length %d.", len(state.segments))
    for eid in [*world.query(Food), *world.query(SnakeSegment)]:
        world.despawn(eid)
    state.last_tail_position = None
    spawn_snake(world, state, config)
    return True
