"""Integer and integer-sequence exercises."""

import logging
from typing import Sequence

logger = logging.getLogger(__name__)


def find_maximum_number(numbers: Sequence[int]) -> int:
    """
    Find the largest value.

    Raises:
        ValueError: If numbers is empty
    """
    if not numbers:
        raise ValueError("Sequence should contain at least one number.")

    maximum = numbers[0]
    for number in numbers[1:]:
        if number > maximum:
            maximum = number
    return maximum


def calculate_factorial(number: int) -> int:
    """
    Compute number! iteratively.

    A negative number never enters the loop and yields 1.
    """
    if number < 0:
        logger.warning(f"Factorial of negative number {number} requested, returning 1")

    factorial = 1
    for i in range(1, number + 1):
        factorial *= i
    return factorial


def is_prime(number: int) -> bool:
    """Trial division up to the square root."""
    if number <= 1:
        return False

    i = 2
    while i * i <= number:
        if number % i == 0:
            return False
        i += 1
    return True


def find_second_largest(numbers: Sequence[int]) -> int:
    """
    Find the second-largest value with a single positional scan.

    Repeats of the maximum are skipped rather than counted, so [5, 1, 9, 9, 3]
    gives 5.

    Raises:
        ValueError: If fewer than two numbers are given, or no number lies
            strictly below the maximum
    """
    if len(numbers) < 2:
        raise ValueError("Sequence should contain at least two numbers.")

    largest = None
    second_largest = None
    for number in numbers:
        if largest is None or number > largest:
            second_largest = largest
            largest = number
        elif number < largest and (second_largest is None or number > second_largest):
            second_largest = number

    if second_largest is None:
        raise ValueError("Sequence has no value below its maximum.")
    return second_largest


def calculate_sum(numbers: Sequence[int]) -> int:
    """Sum of all elements; 0 for an empty sequence."""
    total = 0
    for number in numbers:
        total += number
    return total


def remove_duplicates(numbers: Sequence[int]) -> list[int]:
    """Unique values of numbers. Order is not guaranteed to follow the input."""
    return list(set(numbers))


def find_missing_number(numbers: Sequence[int]) -> int:
    """
    Find the one value missing from a run of consecutive integers 1..n.

    The input is assumed to hold n-1 distinct values from 1..n; this is not checked.
    """
    n = len(numbers) + 1
    expected_sum = n * (n + 1) // 2
    return expected_sum - calculate_sum(numbers)


def fibonacci(n: int) -> int:
    """
    Return the nth Fibonacci number, with F(0) = 0 and F(1) = 1.

    Raises:
        ValueError: If n is negative
    """
    if n < 0:
        raise ValueError(f"Fibonacci index must be non-negative, got {n}")
    if n <= 1:
        return n

    previous, current = 0, 1
    for _ in range(2, n + 1):
        previous, current = current, previous + current
    return current


def find_common_elements(first: Sequence[int], second: Sequence[int]) -> list[int]:
    """
    Elements of second that also appear in first.

    Output follows the order of second and keeps its repeats.
    """
    seen = set(first)
    return [number for number in second if number in seen]
