# modestiot

A small, object-oriented framework for describing IoT devices in Python.
Sensors pass on **events**, actuators carry out **commands**, and a device
ties the two together. Digital pins are simulated by a `Board`, so device
logic can be prototyped and tested without any hardware.

## Installation

```
pip install modestiot
```

With the test dependencies:

```
pip install "modestiot[test]"
```

## Concepts

- `Event` and `EventHandler` (`modestiot.events`): an `Event` is a frozen
  dataclass holding an integer `id`; two events are equal when their ids are.
  An `EventHandler` implements `on(event)`.
- `Command` and `CommandHandler` (`modestiot.commands`): a `Command` is a frozen
  dataclass holding an integer `id`. A `CommandHandler` implements
  `handle(command)`.
- `Sensor` (`modestiot.sensor`): an input on a pin, with `pin` and `handler`
  attributes. `on(event)` forwards the event to `handler` if one is set.
- `Actuator` (`modestiot.actuator`): an output on a pin, with `pin` and
  `handler` attributes. `handle(command)` forwards the command to `handler` if
  one is set.
- `Button` (`modestiot.button`): a sensor that configures its pin as
  `PinMode.INPUT_PULLUP` on its board. It defines `Button.BUTTON_PRESSED_EVENT`
  (id `0`).
- `Led` (`modestiot.led`): an actuator that configures its pin as
  `PinMode.OUTPUT` and writes its initial state to it. It responds to
  `Led.TOGGLE_LED_COMMAND` (id `0`), `Led.TURN_ON_COMMAND` (id `1`) and
  `Led.TURN_OFF_COMMAND` (id `2`), then forwards every command, known or not,
  to its handler. Its `state` property can also be set directly; every change
  is written to the pin.
- `Device` (`modestiot.device`): an abstract base that is both an
  `EventHandler` and a `CommandHandler`; subclasses implement `on` and
  `handle`.
- `Board` and `PinMode` (`modestiot.board`): a simulated set of digital pins.
  `pin_mode(pin, mode)` configures a pin (a pull-up input reads high),
  `mode_of(pin)` returns its mode or raises `LookupError` if it was never
  configured, `digital_write(pin, value)` sets its level, and
  `digital_read(pin)` returns it (pins never written read low). Negative pin
  numbers raise `ValueError`.

`Button` and `Led` take an optional `board`; when none is given each creates a
`Board` of its own.

## Example

```python
from modestiot.board import Board
from modestiot.button import Button
from modestiot.device import Device
from modestiot.led import Led


class Lamp(Device):
    def __init__(self, board):
        self.led = Led(2, False, None, board)
        self.button = Button(4, self, board)

    def on(self, event):
        if event == Button.BUTTON_PRESSED_EVENT:
            self.handle(Led.TOGGLE_LED_COMMAND)

    def handle(self, command):
        self.led.handle(command)


board = Board()
lamp = Lamp(board)

lamp.button.on(Button.BUTTON_PRESSED_EVENT)
print(lamp.led.state)          # True
print(board.digital_read(2))   # True
```

A handler can be given when a sensor or actuator is built, or set later
through its `handler` attribute.

## What it does not do

- It does not touch real GPIO pins; all pin state lives in a `Board` object.
- It does not poll pins or watch for interrupts. A button press reaches the
  framework only when your code calls `on(Button.BUTTON_PRESSED_EVENT)` on the
  button.
- There is no main loop, scheduler or command-line program; you drive devices
  from your own code.