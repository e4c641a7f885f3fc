from collections import Counter

import pytest

from modestiot.commands import Command, CommandHandler


@pytest.mark.parametrize("number", [0, 2, 17])
def test_same_id_means_equal(number):
    command = Command(number)
    assert command.id == number
    assert command == Command(number)


def test_different_ids_differ():
    assert not (Command(0) == Command(1))


def test_command_is_immutable():
    command = Command(0)
    with pytest.raises(AttributeError):
        command.id = 9
    assert command.id == 0


def test_command_handler_is_abstract():
    with pytest.raises(TypeError):
        CommandHandler()


def test_concrete_handler_counts_commands():
    class Tally(CommandHandler):
        def __init__(self):
            self.counts = Counter()

        def handle(self, command):
            self.counts[command] += 1

    tally = Tally()
    for command in (Command(1), Command(0), Command(1)):
        tally.handle(command)
    assert tally.counts == Counter({Command(1): 2, Command(0): 1})