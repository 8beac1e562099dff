"""Roll-and-display composition."""

from dicesim.engine.dice import Die
from dicesim.engine.output import OutputSink


class DiceRoller:
    """Rolls a die and hands the result to an output sink."""

    def __init__(self, die: Die, output: OutputSink) -> None:
        """
        Initialize roller.

        Args:
            die: Die to roll
            output: Sink that displays each result
        """
        self._die = die
        self._output = output

    @property
    def die(self) -> Die:
        """Get the injected die."""
        return self._die

    @property
    def output(self) -> OutputSink:
        """Get the injected output sink."""
        return self._output

    def roll_dice(self) -> None:
        """Perform one roll-and-display cycle."""
        result = self._die.roll_result()
        self._output.display_result(result.value)
