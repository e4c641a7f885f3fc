"""A push button sensor."""

from __future__ import annotations

from typing import ClassVar

from modestiot.board import Board, PinMode
from modestiot.events import Event, EventHandler
from modestiot.sensor import Sensor

__all__ = ["Button"]


class Button(Sensor):
    """A button on a pull-up input pin that reports presses as events."""

    BUTTON_PRESSED_EVENT_ID: ClassVar[int] = 0
    BUTTON_PRESSED_EVENT: ClassVar[Event] = Event(BUTTON_PRESSED_EVENT_ID)

    def __init__(
        self,
        pin: int,
        handler: EventHandler | None = None,
        board: Board | None = None,
    ) -> None:
        super().__init__(pin, handler)
        self.board = board if board is not None else Board()
        self.board.pin_mode(pin, PinMode.INPUT_PULLUP)