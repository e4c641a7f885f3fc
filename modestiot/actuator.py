"""Base class for output devices that execute commands."""

from __future__ import annotations

from modestiot.commands import Command, CommandHandler

__all__ = ["Actuator"]


class Actuator(CommandHandler):
    """An output on a pin that passes its commands on to an optional handler."""

    def __init__(self, pin: int, handler: CommandHandler | None = None) -> None:
        self.pin = pin
        self.handler = handler

    def handle(self, command: Command) -> None:
        """Forward ``command`` to the handler, if one is set."""
        if self.handler is not None:
            self.handler.handle(command)