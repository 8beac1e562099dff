"""Console menu and input handling."""

from dicesim.console.input_reader import InputParseError, InputReader
from dicesim.console.menu import MenuLoop, MenuState, create_menu

__all__ = [
    "InputParseError",
    "InputReader",
    "MenuLoop",
    "MenuState",
    "create_menu",
]
