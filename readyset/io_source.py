"""Adapter that makes any object with a file descriptor an event source."""

from __future__ import annotations

import threading
from typing import Any, Callable, Generic, Protocol, TypeVar

from readyset.interest import Interest
from readyset.source import Source

T = TypeVar("T")
R = TypeVar("R")


class _Selector(Protocol):
    def id(self) -> int: ...

    def register(self, fd: int, token: int, interests: Interest) -> None: ...

    def reregister(self, fd: int, token: int, interests: Interest) -> None: ...

    def deregister(self, fd: int) -> None: ...


class _SelectorId:
    """Tracks which selector, if any, an I/O source is associated with."""

    def __init__(self) -> None:
        self._id: int | None = None
        self._lock = threading.Lock()

    def _swap(self, new: int | None) -> int | None:
        with self._lock:
            previous, self._id = self._id, new
            return previous

    def associate(self, registry: Any) -> None:
        previous = self._swap(registry.selector().id())
        if previous is not None:
            raise FileExistsError("I/O source already registered with a `Registry`")

    def check_association(self, registry: Any) -> None:
        registry_id = registry.selector().id()
        with self._lock:
            current = self._id
        if current == registry_id:
            return
        if current is None:
            raise FileNotFoundError("I/O source not registered with `Registry`")
        raise FileExistsError(
            "I/O source already registered with a different `Registry`"
        )

    def remove_association(self, registry: Any) -> None:
        previous = self._swap(None)
        if previous != registry.selector().id():
            raise FileNotFoundError("I/O source not registered with `Registry`")


class IoSource(Source, Generic[T]):
    """Wraps an object exposing ``fileno()`` so it can be registered.

    All I/O on the wrapped object should go through :meth:`do_io`.
    Other attribute access is passed on to the wrapped object.
    """

    def __init__(self, io: T) -> None:
        self._inner = io
        self._selector_id = _SelectorId()

    def do_io(self, f: Callable[[T], R]) -> R:
        """Run the I/O operation ``f`` on the wrapped object and return its result."""
        return f(self._inner)

    def into_inner(self) -> T:
        """Return the wrapped object; deregister first to stop receiving events."""
        return self._inner

    def _fd(self) -> int:
        return self._inner.fileno()  # type: ignore[attr-defined]

    def register(self, registry: Any, token: int, interests: Interest) -> None:
        self._selector_id.associate(registry)
        registry.selector().register(self._fd(), token, interests)

    def reregister(self, registry: Any, token: int, interests: Interest) -> None:
        self._selector_id.check_association(registry)
        registry.selector().reregister(self._fd(), token, interests)

    def deregister(self, registry: Any) -> None:
        self._selector_id.remove_association(registry)
        registry.selector().deregister(self._fd())

    def __getattr__(self, name: str) -> Any:
        if name in ("_inner", "_selector_id"):
            raise AttributeError(name)
        return getattr(self._inner, name)

    def __repr__(self) -> str:
        return repr(self._inner)