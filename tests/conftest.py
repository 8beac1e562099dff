"""Pytest configuration and fixtures."""

import io

import pytest

from dicesim.console.input_reader import InputReader
from dicesim.console.menu import MenuLoop
from dicesim.engine.dice import FairDie, FixedDie
from dicesim.engine.output import ConsoleOutput
from dicesim.engine.roller import DiceRoller
from dicesim.models.linked_list import NodeArena


class ScriptedInput:
    """Stands in for input(): answers prompts from a list, then signals EOF."""

    def __init__(self, lines):
        self._lines = iter(lines)
        self.prompts = []

    def __call__(self, prompt):
        self.prompts.append(prompt)
        try:
            return next(self._lines)
        except StopIteration:
            raise EOFError from None


@pytest.fixture
def scripted_input():
    """Factory for scripted console input."""
    return ScriptedInput


@pytest.fixture
def fixed_die():
    """Six-sided die that always shows 6."""
    return FixedDie(6)


@pytest.fixture
def seeded_die():
    """Fair six-sided die with a deterministic generator."""
    return FairDie(6, seed=1234)


@pytest.fixture
def arena():
    """Empty node arena."""
    return NodeArena()


@pytest.fixture
def menu_factory(scripted_input, fixed_die):
    """
    Build a menu fed by scripted lines and writing into a buffer.

    Returns a function(lines, reprompt=True) -> (menu, buffer, script).
    """

    def _build(lines, reprompt=True):
        buffer = io.StringIO()
        script = scripted_input(lines)
        reader = InputReader(read_line=script, write=lambda line: print(line, file=buffer))
        roller = DiceRoller(fixed_die, ConsoleOutput(buffer))
        menu = MenuLoop(roller, reader=reader, stream=buffer, reprompt=reprompt)
        return menu, buffer, script

    return _build
