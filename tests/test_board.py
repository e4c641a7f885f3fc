import pytest

from modestiot.board import Board, PinMode


def test_mode_is_remembered():
    board = Board()
    board.pin_mode(13, PinMode.OUTPUT)
    assert board.mode_of(13) is PinMode.OUTPUT


def test_unconfigured_pin_mode_raises():
    with pytest.raises(LookupError):
        Board().mode_of(4)


def test_write_then_read_round_trip():
    board = Board()
    board.pin_mode(13, PinMode.OUTPUT)
    board.digital_write(13, True)
    assert board.digital_read(13) is True
    board.digital_write(13, False)
    assert board.digital_read(13) is False


def test_pullup_input_reads_high():
    board = Board()
    board.pin_mode(2, PinMode.INPUT_PULLUP)
    assert board.digital_read(2) is True


def test_output_starts_low():
    board = Board()
    board.pin_mode(5, PinMode.OUTPUT)
    assert board.digital_read(5) is False


def test_negative_pin_rejected():
    board = Board()
    with pytest.raises(ValueError):
        board.pin_mode(-1, PinMode.OUTPUT)
    with pytest.raises(ValueError):
        board.digital_write(-1, True)


def test_reconfiguring_changes_mode():
    board = Board()
    board.pin_mode(7, PinMode.INPUT)
    board.pin_mode(7, PinMode.OUTPUT)
    assert board.mode_of(7) is PinMode.OUTPUT