"""The interface every event source registered with a registry implements."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from readyset.interest import Interest


class Source(ABC):
    """An event source that may be registered with a registry.

    Users should not call these methods directly; the registry calls them.
    Implementations usually hand the call on to a lower-level source such
    as a socket wrapper. A source must be deregistered before it is
    discarded, because deregistering needs the registry.
    """

    @abstractmethod
    def register(self, registry: Any, token: int, interests: Interest) -> None:
        """Register this source with ``registry`` under ``token``."""

    @abstractmethod
    def reregister(self, registry: Any, token: int, interests: Interest) -> None:
        """Replace the token and interests this source is registered with."""

    @abstractmethod
    def deregister(self, registry: Any) -> None:
        """Remove this source from ``registry``."""