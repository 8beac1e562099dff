"""Result presentation."""

import sys
from abc import ABC, abstractmethod
from typing import Optional, TextIO


class OutputSink(ABC):
    """Destination that renders a roll for a human observer."""

    @abstractmethod
    def display_result(self, result: int) -> None:
        """Display the rolled value."""
        raise NotImplementedError


class ConsoleOutput(OutputSink):
    """Writes each roll as a line of text to a console stream."""

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        """Initialize with the stream to write to (standard output by default)."""
        self._stream = stream

    def display_result(self, result: int) -> None:
        stream = self._stream if self._stream is not None else sys.stdout
        print(f"You rolled: {result}", file=stream)
