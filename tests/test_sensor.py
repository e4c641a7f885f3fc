from unittest.mock import Mock, call

from modestiot.events import Event, EventHandler
from modestiot.sensor import Sensor


def test_event_is_forwarded_to_handler():
    handler = Mock(spec=EventHandler)
    Sensor(4, handler).on(Event(0))
    handler.on.assert_called_once_with(Event(0))


def test_without_handler_event_is_dropped_until_one_is_set():
    sensor = Sensor(4)
    sensor.on(Event(0))
    assert sensor.handler is None
    handler = Mock(spec=EventHandler)
    sensor.handler = handler
    sensor.on(Event(5))
    assert handler.on.call_args_list == [call(Event(5))]


def test_handler_can_be_replaced():
    first, second = Mock(spec=EventHandler), Mock(spec=EventHandler)
    sensor = Sensor(4, first)
    sensor.handler = second
    sensor.on(Event(1))
    first.on.assert_not_called()
    second.on.assert_called_once_with(Event(1))


def test_pin_is_kept():
    assert Sensor(12).pin == 12