"""Base class for input devices that produce events."""

from __future__ import annotations

from modestiot.events import Event, EventHandler

__all__ = ["Sensor"]


class Sensor(EventHandler):
    """An input on a pin that passes its events on to an optional handler."""

    def __init__(self, pin: int, handler: EventHandler | None = None) -> None:
        self.pin = pin
        self.handler = handler

    def on(self, event: Event) -> None:
        """Forward ``event`` to the handler, if one is set."""
        if self.handler is not None:
            self.handler.on(event)