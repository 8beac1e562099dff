"""Console input sanitization and parsing."""

import logging
import re
import unicodedata
from typing import Callable, Optional

from dicesim.config import DEFAULT_MAX_INPUT_LENGTH
from dicesim.models.parsing import ParseResult

logger = logging.getLogger(__name__)

_INTEGER = re.compile(r"[+-]?\d+")


class InputParseError(ValueError):
    """Raised when a numeric answer cannot be parsed and re-prompting is off."""


class InputReader:
    """Reads console lines, sanitizes them and parses integers."""

    MAX_INPUT_LENGTH = DEFAULT_MAX_INPUT_LENGTH

    def __init__(
        self,
        read_line: Callable[[str], str] = input,
        write: Callable[[str], None] = print,
        max_length: int = MAX_INPUT_LENGTH,
    ) -> None:
        """
        Initialize reader.

        Args:
            read_line: Function that shows a prompt and returns one line (input by default)
            write: Function that shows one line of feedback (print by default)
            max_length: Lines are truncated to this many characters
        """
        self._read_line = read_line
        self._write = write
        self.max_length = max_length

    def sanitize(self, input_text: str) -> str:
        """
        Sanitize a line by:
        1. Normalizing unicode
        2. Removing control characters
        3. Truncating to max length

        Applied to numeric answers only; free text is returned as typed.
        """
        if not isinstance(input_text, str):
            raise TypeError(f"Input must be a string, got {type(input_text)}")

        # Normalize unicode (NFKC: compatibility decomposition + composition)
        sanitized = unicodedata.normalize("NFKC", input_text)

        # Remove control characters except tabs
        sanitized = re.sub(r"[\x00-\x08\x0A-\x1F\x7F]", "", sanitized)

        if len(sanitized) > self.max_length:
            logger.warning(f"Input truncated from {len(sanitized)} to {self.max_length} characters")
            sanitized = sanitized[: self.max_length]

        return sanitized

    def parse_int(self, input_text: str) -> ParseResult:
        """
        Parse an integer answer. Never raises.
        Returns ParseResult with value on success, error otherwise.
        """
        text = input_text.strip()
        if not text:
            return ParseResult.failure("Input is empty")
        if not _INTEGER.fullmatch(text):
            return ParseResult.failure(f"Invalid number: {input_text!r}")
        return ParseResult.success(int(text))

    def read_text(self, prompt: str) -> str:
        """Prompt for one line of free text, returned unchanged."""
        return self._read_line(prompt)

    def read_int(self, prompt: str, reprompt: bool = True, minimum: Optional[int] = None) -> int:
        """
        Prompt until an integer is entered.

        Args:
            prompt: Text shown before reading
            reprompt: Ask again on bad input; otherwise raise InputParseError
            minimum: Smallest accepted value, if any

        Returns:
            Parsed integer
        """
        while True:
            line = self.sanitize(self.read_text(prompt))
            result = self.parse_int(line)
            if result.ok and (minimum is None or result.value >= minimum):
                return result.value

            logger.warning(f"Rejected numeric input {line!r}: {result.error or 'below minimum'}")
            if not reprompt:
                raise InputParseError(result.error or f"Number {result.value} is below {minimum}")
            if result.ok:
                self._write(f"Please enter a number of at least {minimum}.")
            else:
                self._write(f"{result.error}. Please try again.")
