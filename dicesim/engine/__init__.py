"""Dice engine package."""

from dicesim.engine.dice import Die, FairDie, FixedDie, create_die
from dicesim.engine.output import ConsoleOutput, OutputSink
from dicesim.engine.roller import DiceRoller

__all__ = [
    "Die",
    "FairDie",
    "FixedDie",
    "create_die",
    "OutputSink",
    "ConsoleOutput",
    "DiceRoller",
]
