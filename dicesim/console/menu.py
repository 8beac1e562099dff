"""Interactive console menu."""

import logging
import sys
from enum import Enum
from typing import Optional, TextIO

from dicesim.algorithms import (
    calculate_factorial,
    check_palindrome,
    find_maximum_number,
    reverse_string,
)
from dicesim.console.input_reader import InputParseError, InputReader
from dicesim.engine.dice import create_die
from dicesim.engine.output import ConsoleOutput
from dicesim.engine.roller import DiceRoller
from dicesim.helpers.debug import log_call
from dicesim.settings import AppConfig

logger = logging.getLogger(__name__)

WELCOME_BANNER = "Welcome to the Dice Rolling Simulator!"
BANNER_RULE = "-" * 37
GOODBYE_MESSAGE = "Thank you for using the Dice Rolling Simulator!"
INVALID_CHOICE_MESSAGE = "Invalid choice. Please try again."
MENU_OPTIONS = [
    "1. Roll Dice",
    "2. Reverse a String",
    "3. Find Maximum Number in an Array",
    "4. Check if a String is a Palindrome",
    "5. Calculate the Factorial of a Number",
    "6. Quit",
]


class MenuState(str, Enum):
    """States of the menu loop."""

    SHOWING_MENU = "showing_menu"
    AWAITING_CHOICE = "awaiting_choice"
    DISPATCHING = "dispatching"
    TERMINATED = "terminated"


class MenuLoop:
    """Reads a choice, dispatches it and repeats until the user quits."""

    def __init__(
        self,
        roller: DiceRoller,
        reader: Optional[InputReader] = None,
        stream: Optional[TextIO] = None,
        reprompt: bool = True,
    ) -> None:
        """
        Initialize menu loop.

        Args:
            roller: Roller used by the "Roll Dice" option
            reader: Console input reader (reads standard input by default)
            stream: Where menu text is written (standard output by default)
            reprompt: Ask again on a non-numeric answer instead of raising InputParseError
        """
        self._roller = roller
        self._stream = stream
        self._reader = reader or InputReader(write=self._print)
        self._reprompt = reprompt
        self._state = MenuState.SHOWING_MENU
        self._actions = {
            "1": self.action_roll_dice,
            "2": self.action_reverse_string,
            "3": self.action_find_maximum_number,
            "4": self.action_check_palindrome,
            "5": self.action_calculate_factorial,
        }

    @property
    def state(self) -> MenuState:
        """Get current state."""
        return self._state

    @property
    def roller(self) -> DiceRoller:
        """Get the injected roller."""
        return self._roller

    def run(self) -> int:
        """
        Run until the user quits or input ends.

        Returns:
            Process exit status (0)

        Raises:
            InputParseError: On bad numeric input when re-prompting is off
        """
        logger.info("Menu started")
        self._print(WELCOME_BANNER)
        self._print(BANNER_RULE)

        while self._state != MenuState.TERMINATED:
            self.show_menu()
            try:
                choice = self._reader.read_text("Enter your choice: ")
                self._print()
                self.dispatch(choice)
            except EOFError:
                logger.info("End of input reached, leaving menu")
                self._print()
                self._terminate()

        logger.info("Menu terminated")
        return 0

    def show_menu(self) -> None:
        """Print the option list and wait for a choice."""
        self._state = MenuState.SHOWING_MENU
        self._print()
        self._print("Select an option:")
        for option in MENU_OPTIONS:
            self._print(option)
        self._print()
        self._state = MenuState.AWAITING_CHOICE

    def dispatch(self, choice: str) -> MenuState:
        """
        Run the action for one menu choice.

        Args:
            choice: Raw line entered by the user

        Returns:
            State after the action (TERMINATED after "6", SHOWING_MENU otherwise)
        """
        self._state = MenuState.DISPATCHING

        if choice == "6":
            self._terminate()
            return self._state

        action = self._actions.get(choice)
        if action is None:
            logger.warning(f"Invalid menu choice: {choice!r}")
            self._print(INVALID_CHOICE_MESSAGE)
        else:
            try:
                action()
            except InputParseError:
                raise
            except ValueError as e:
                logger.warning(f"Menu action {choice} failed: {e}")
                self._print(f"Error: {e}")

        self._state = MenuState.SHOWING_MENU
        return self._state

    @log_call
    def action_roll_dice(self) -> None:
        self._roller.roll_dice()

    @log_call
    def action_reverse_string(self) -> None:
        text = self._reader.read_text("Enter a string to reverse: ")
        self._print(f"Reversed string: {reverse_string(text)}")

    @log_call
    def action_find_maximum_number(self) -> None:
        count = self._read_int("Enter the number of elements: ", minimum=1)
        numbers = [self._read_int(f"Enter number {i + 1}: ") for i in range(count)]
        self._print(f"Maximum number: {find_maximum_number(numbers)}")

    @log_call
    def action_check_palindrome(self) -> None:
        text = self._reader.read_text("Enter a string: ")
        self._print(f"Is Palindrome: {check_palindrome(text)}")

    @log_call
    def action_calculate_factorial(self) -> None:
        number = self._read_int("Enter a number: ")
        self._print(f"Factorial of {number}: {calculate_factorial(number)}")

    def _terminate(self) -> None:
        self._print(GOODBYE_MESSAGE)
        self._state = MenuState.TERMINATED

    def _read_int(self, prompt: str, minimum: Optional[int] = None) -> int:
        return self._reader.read_int(prompt, reprompt=self._reprompt, minimum=minimum)

    def _print(self, line: str = "") -> None:
        print(line, file=self._stream if self._stream is not None else sys.stdout)


def create_menu(config: AppConfig, reader: Optional[InputReader] = None) -> MenuLoop:
    """
    Wire a menu loop from configuration.

    Args:
        config: Application configuration
        reader: Optional input reader (standard input by default)

    Returns:
        MenuLoop writing to standard output
    """
    die = create_die(config.dice.to_spec())
    roller = DiceRoller(die, ConsoleOutput())
    if reader is None:
        reader = InputReader(max_length=config.console.max_input_length)
    return MenuLoop(
        roller,
        reader=reader,
        reprompt=config.console.parse_failure_policy == "reprompt",
    )
