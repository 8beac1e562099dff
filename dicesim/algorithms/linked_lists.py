"""Linked list exercises over a NodeArena."""

from typing import Optional

from dicesim.models.linked_list import NodeArena


def reverse_linked_list(arena: NodeArena, head: Optional[int]) -> Optional[int]:
    """
    Reverse the chain starting at head in place.

    Args:
        arena: Arena owning the nodes
        head: Index of the first node, or None for an empty list

    Returns:
        Index of the new head (the old tail), or None
    """
    previous = None
    current = head
    while current is not None:
        following = arena.next_of(current)
        arena.set_next(current, previous)
        previous = current
        current = following
    return previous


def find_intersection(
    arena: NodeArena, head_a: Optional[int], head_b: Optional[int]
) -> Optional[int]:
    """
    Find the first node shared by two lists.

    Each cursor restarts at the other list's head after running off its own end,
    so both cover the same total distance and meet at the junction, or at None
    when the lists never converge.

    Returns:
        Index of the shared node, or None
    """
    cursor_a = head_a
    cursor_b = head_b
    while cursor_a != cursor_b:
        cursor_a = head_b if cursor_a is None else arena.next_of(cursor_a)
        cursor_b = head_a if cursor_b is None else arena.next_of(cursor_b)
    return cursor_a
