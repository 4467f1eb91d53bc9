"""Single-tick signal channels between simulation systems."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

E = TypeVar("E")


@dataclass(frozen=True)
class GrowthEvent:
    """The head landed on food this tick."""


@dataclass(frozen=True)
class GameOverEvent:
    """The head ran into the snake's own body this tick."""


class EventQueue(Generic[E]):
    """Small owned queue of events.

    Readers only care whether anything arrived, so several sends within
    one tick are equivalent to one. The driver clears every queue at the
    start of a tick.
    """

    def __init__(self) -> None:
        self._events: list[E] = []

    def __len__(self) -> int:
        return len(self._events)

    def __bool__(self) -> bool:
        return bool(self._events)

    def send(self, event: E) -> None:
        self._events.append(event)

    def drain(self) -> list[E]:
        """Return and remove every pending event."""
        events, self._events = self._events, []
        return events

    def clear(self) -> None:
        self._events.clear()
