"""Algorithm exercises.

Only reverse_string, find_maximum_number, check_palindrome and
calculate_factorial are reachable from the console menu; everything else is
library API exercised directly.
"""

from dicesim.algorithms.linked_lists import find_intersection, reverse_linked_list
from dicesim.algorithms.numbers import (
    calculate_factorial,
    calculate_sum,
    fibonacci,
    find_common_elements,
    find_maximum_number,
    find_missing_number,
    find_second_largest,
    is_prime,
    remove_duplicates,
)
from dicesim.algorithms.strings import (
    are_anagrams,
    check_palindrome,
    is_palindrome_normalized,
    reverse_string,
    reverse_words,
)

__all__ = [
    # Strings
    "reverse_string",
    "check_palindrome",
    "reverse_words",
    "are_anagrams",
    "is_palindrome_normalized",
    # Numbers
    "find_maximum_number",
    "calculate_factorial",
    "is_prime",
    "find_second_largest",
    "calculate_sum",
    "remove_duplicates",
    "find_missing_number",
    "fibonacci",
    "find_common_elements",
    # Linked lists
    "reverse_linked_list",
    "find_intersection",
]
