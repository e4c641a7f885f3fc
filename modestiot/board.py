"""A simulated set of digital GPIO pins."""

from __future__ import annotations

from enum import Enum

__all__ = ["PinMode", "Board"]


class PinMode(Enum):
    """How a digital pin is configured."""

    INPUT = "input"
    OUTPUT = "output"
    INPUT_PULLUP = "input_pullup"


class Board:
    """Digital pins with a mode and a logic level each."""

    def __init__(self) -> None:
        self._modes: dict[int, PinMode] = {}
        self._levels: dict[int, bool] = {}

    @staticmethod
    def _check(pin: int) -> None:
        if pin < 0:
            raise ValueError(f"invalid pin number: {pin}")

    def pin_mode(self, pin: int, mode: PinMode) -> None:
        """Configure ``pin``; a pull-up input idles high."""
        self._check(pin)
        self._modes[pin] = PinMode(mode)
        if mode is PinMode.INPUT_PULLUP:
            self._levels[pin] = True
        else:
            self._levels.setdefault(pin, False)

    def mode_of(self, pin: int) -> PinMode:
        """Return the mode ``pin`` was configured with."""
        self._check(pin)
        try:
            return self._modes[pin]
        except KeyError:
            raise LookupError(f"pin {pin} has not been configured") from None

    def digital_write(self, pin: int, value: bool) -> None:
        """Drive ``pin`` high or low."""
        self._check(pin)
        self._levels[pin] = bool(value)

    def digital_read(self, pin: int) -> bool:
        """Return the current level of ``pin``; unknown pins read low."""
        self._check(pin)
        return self._levels.get(pin, False)