"""Interface for complete devices that react to events and execute commands."""

from __future__ import annotations

from abc import abstractmethod

from modestiot.commands import Command, CommandHandler
from modestiot.events import Event, EventHandler

__all__ = ["Device"]


class Device(EventHandler, CommandHandler):
    """A device that ties sensors and actuators together."""

    @abstractmethod
    def on(self, event: Event) -> None:
        """React to an event received by the device."""

    @abstractmethod
    def handle(self, command: Command) -> None:
        """Execute a command issued to the device."""