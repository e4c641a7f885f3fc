"""Events and the interface for objects that react to them."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

__all__ = ["Event", "EventHandler"]


@dataclass(frozen=True)
class Event:
    """A signal that something happened, identified by an integer id."""

    id: int


class EventHandler(ABC):
    """Something that reacts to events."""

    @abstractmethod
    def on(self, event: Event) -> None:
        """React to ``event``."""