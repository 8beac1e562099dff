"""String exercises."""

import logging
import re
from collections import Counter

logger = logging.getLogger(__name__)

_NON_ALPHANUMERIC = re.compile(r"[^a-zA-Z0-9]")
_LOWERCASE_LETTERS = re.compile(r"[a-z]*")


def reverse_string(text: str) -> str:
    """Return text with its characters in reverse order."""
    return text[::-1]


def check_palindrome(text: str) -> bool:
    """
    Exact-character palindrome check.

    Case-sensitive and without normalization: s[i] is compared with s[len-1-i]
    for every i below len/2.
    """
    length = len(text)
    for i in range(length // 2):
        if text[i] != text[length - i - 1]:
            return False
    return True


def reverse_words(text: str) -> str:
    """
    Reverse the order of space-separated words.

    Splits on single spaces only, so runs of spaces yield empty words that are
    kept in place.
    """
    return " ".join(reversed(text.split(" ")))


def are_anagrams(first: str, second: str) -> bool:
    """
    Check whether two lowercase a-z strings are anagrams.

    Args:
        first: First word
        second: Second word

    Returns:
        True if both contain the same letters with the same counts

    Raises:
        ValueError: If a string of matching length holds anything but a-z
    """
    if len(first) != len(second):
        return False

    for word in (first, second):
        if not _LOWERCASE_LETTERS.fullmatch(word):
            logger.warning(f"Anagram check rejected non a-z input: {word!r}")
            raise ValueError(f"Anagram check only accepts lowercase letters a-z, got {word!r}")

    counts = Counter(first)
    counts.subtract(second)
    return all(count == 0 for count in counts.values())


def is_palindrome_normalized(text: str) -> bool:
    """
    Palindrome check ignoring anything but ASCII letters and digits, case-folded.

    Uses two cursors moving inwards from both ends.
    """
    cleaned = _NON_ALPHANUMERIC.sub("", text).lower()

    start = 0
    end = len(cleaned) - 1
    while start < end:
        if cleaned[start] != cleaned[end]:
            return False
        start += 1
        end -= 1
    return True
