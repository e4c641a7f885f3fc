"""An LED actuator."""

from __future__ import annotations

from typing import ClassVar

from modestiot.actuator import Actuator
from modestiot.board import Board, PinMode
from modestiot.commands import Command, CommandHandler

__all__ = ["Led"]


class Led(Actuator):
    """An LED on an output pin, switched by toggle, on and off commands."""

    TOGGLE_LED_COMMAND_ID: ClassVar[int] = 0
    TURN_ON_COMMAND_ID: ClassVar[int] = 1
    TURN_OFF_COMMAND_ID: ClassVar[int] = 2
    TOGGLE_LED_COMMAND: ClassVar[Command] = Command(TOGGLE_LED_COMMAND_ID)
    TURN_ON_COMMAND: ClassVar[Command] = Command(TURN_ON_COMMAND_ID)
    TURN_OFF_COMMAND: ClassVar[Command] = Command(TURN_OFF_COMMAND_ID)

    def __init__(
        self,
        pin: int,
        initial_state: bool = False,
        handler: CommandHandler | None = None,
        board: Board | None = None,
    ) -> None:
        super().__init__(pin, handler)
        self.board = board if board is not None else Board()
        self._state = bool(initial_state)
        self.board.pin_mode(pin, PinMode.OUTPUT)
        self.board.digital_write(pin, self._state)

    @property
    def state(self) -> bool:
        """Whether the LED is lit."""
        return self._state

    @state.setter
    def state(self, value: bool) -> None:
        self._state = bool(value)
        self.board.digital_write(self.pin, self._state)

    def handle(self, command: Command) -> None:
        """Apply a known command, then forward it to the handler."""
        if command == self.TOGGLE_LED_COMMAND:
            self.state = not self._state
        elif command == self.TURN_ON_COMMAND:
            self.state = True
        elif command == self.TURN_OFF_COMMAND:
            self.state = False
        super().handle(command)