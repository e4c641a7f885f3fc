"""Commands and the interface for objects that execute them."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

__all__ = ["Command", "CommandHandler"]


@dataclass(frozen=True)
class Command:
    """An instruction to perform an action, identified by an integer id."""

    id: int


class CommandHandler(ABC):
    """Something that executes commands."""

    @abstractmethod
    def handle(self, command: Command) -> None:
        """Execute ``command``."""