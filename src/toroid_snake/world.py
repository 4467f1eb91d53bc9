"""Entity arena holding positions and marker components."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any, Protocol, TypeVar

from toroid_snake.grid import Position

T = TypeVar("T")

EntityId = int


class DeadEntityError(KeyError):
    """Raised when an operation targets an entity that is not alive."""

    def __init__(self, entity_id: EntityId) -> None:
        super().__init__(f"Entity {entity_id} is not alive.")
        self.entity_id = entity_id


class EntityStore(Protocol):
    """Capability the simulation systems need from an entity store."""

    def spawn(self, position: Position, *components: Any) -> EntityId: ...

    def despawn(self, entity_id: EntityId) -> None: ...

    def get_position(self, entity_id: EntityId) -> Position: ...

    def set_position(self, entity_id: EntityId, position: Position) -> None: ...

    def get(self, entity_id: EntityId, component_type: type[T]) -> T: ...

    def query(self, component_type: type) -> Iterator[EntityId]: ...


class World:
    """In-memory entity store keyed by monotonically increasing ids.

    Every entity has a :class:`Position`. Other components live in
    per-type maps and are looked up by their class, so marker classes
    such as ``Food`` act as tags.
    """

    def __init__(self) -> None:
        self._next_id: EntityId = 0
        self._positions: dict[EntityId, Position] = {}
        self._components: dict[type, dict[EntityId, Any]] = {}

    def __len__(self) -> int:
        return len(self._positions)

    def spawn(self, position: Position, *components: Any) -> EntityId:
        """Create an entity at *position* carrying *components*."""
        eid = self._next_id
        self._next_id += 1
        self._positions[eid] = Position(*position)
        for component in components:
            self._components.setdefault(type(component), {})[eid] = component
        return eid

    def despawn(self, entity_id: EntityId) -> None:
        """Remove an entity and all of its components."""
        if self._positions.pop(entity_id, None) is None:
            raise DeadEntityError(entity_id)
        for store in self._components.values():
            store.pop(entity_id, None)

    def alive(self, entity_id: EntityId) -> bool:
        return entity_id in self._positions

    def get_position(self, entity_id: EntityId) -> Position:
        try:
            return self._positions[entity_id]
        except KeyError:
            raise DeadEntityError(entity_id) from None

    def set_position(self, entity_id: EntityId, position: Position) -> None:
        if entity_id not in self._positions:
            raise DeadEntityError(entity_id)
        self._positions[entity_id] = Position(*position)

    def get(self, entity_id: EntityId, component_type: type[T]) -> T:
        if entity_id not in self._positions:
            raise DeadEntityError(entity_id)
        store = self._components.get(component_type, {})
        if entity_id not in store:
            raise KeyError(
                f"Entity {entity_id} has no {component_type.__name__} component."
            )
        return store[entity_id]

    def has(self, entity_id: EntityId, component_type: type) -> bool:
        return entity_id in self._components.get(component_type, {})

    def query(self, component_type: type) -> Iterator[EntityId]:
        """Iterate over ids carrying *component_type*, in spawn order.

        Iterates over a snapshot, so callers may despawn while looping.
        """
        yield from list(self._components.get(component_type, {}))

    def entities(self) -> list[EntityId]:
        return list(self._positions)
