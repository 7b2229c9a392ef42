"""Readiness events and the collection that holds them."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator


@dataclass(frozen=True)
class Event:
    """A readiness state paired with the token of the source it belongs to."""

    token: int
    readable: bool = False
    writable: bool = False
    error: bool = False
    read_closed: bool = False
    write_closed: bool = False
    priority: bool = False
    aio: bool = False
    lio: bool = False

    def is_readable(self) -> bool:
        return self.readable

    def is_writable(self) -> bool:
        return self.writable

    def is_error(self) -> bool:
        return self.error

    def is_read_closed(self) -> bool:
        return self.read_closed

    def is_write_closed(self) -> bool:
        return self.write_closed

    def is_priority(self) -> bool:
        return self.priority

    def is_aio(self) -> bool:
        return self.aio

    def is_lio(self) -> bool:
        return self.lio


@dataclass
class Events:
    """A bounded collection of readiness events, refilled on every poll."""

    _capacity: int
    _events: list[Event] = field(default_factory=list, init=False)

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._capacity = capacity
        self._events = []

    def capacity(self) -> int:
        """Return how many events this collection can hold."""
        return self._capacity

    def is_empty(self) -> bool:
        return not self._events

    def push(self, event: Event) -> None:
        """Append an event, failing if the collection is full."""
        if len(self._events) >= self._capacity:
            raise OverflowError(f"events collection is full ({self._capacity})")
        self._events.append(event)

    def clear(self) -> None:
        self._events.clear()

    def __iter__(self) -> Iterator[Event]:
        return iter(list(self._events))

    def __len__(self) -> int:
        return len(self._events)

    def __repr__(self) -> str:
        return repr(self._events)