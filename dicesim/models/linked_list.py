"""Singly linked list stored in an index-based arena."""

from typing import Iterable, Optional

from pydantic import BaseModel, Field


class ListNode(BaseModel):
    """A node; `next` is the arena index of the following node."""

    value: int = Field(description="Node payload")
    next: Optional[int] = Field(default=None, description="Index of the next node, None at the tail")


class NodeArena:
    """
    Owns every node of one or more singly linked lists.

    Lists are referred to by the index of their head node. Two lists built in the
    same arena can share a tail, which is how intersecting lists are represented:
    node identity is the arena index.
    """

    def __init__(self) -> None:
        """Initialize an empty arena."""
        self._nodes: list[ListNode] = []

    def __len__(self) -> int:
        return len(self._nodes)

    def add(self, value: int, next: Optional[int] = None) -> int:
        """
        Append a node to the arena.

        Args:
            value: Node payload
            next: Index of the node that follows, if any

        Returns:
            Index of the new node
        """
        if next is not None:
            self._check(next)
        self._nodes.append(ListNode(value=value, next=next))
        return len(self._nodes) - 1

    def build(self, values: Iterable[int], tail: Optional[int] = None) -> Optional[int]:
        """
        Build a chain from values, optionally joined onto an existing tail.

        Args:
            values: Payloads in list order
            tail: Index of an existing node the last new node should point at

        Returns:
            Head index of the chain (the tail itself if values is empty)
        """
        head = tail
        for value in reversed(list(values)):
            head = self.add(value, next=head)
        return head

    def node(self, index: int) -> ListNode:
        """Get node by index."""
        self._check(index)
        return self._nodes[index]

    def next_of(self, index: int) -> Optional[int]:
        """Get the index following `index`."""
        return self.node(index).next

    def set_next(self, index: int, next: Optional[int]) -> None:
        """Relink `index` to point at `next`."""
        if next is not None:
            self._check(next)
        self.node(index).next = next

    def values(self, head: Optional[int]) -> list[int]:
        """Payloads from `head` to the end of its chain."""
        result = []
        current = head
        while current is not None:
            node = self.node(current)
            result.append(node.value)
            current = node.next
        return result

    def _check(self, index: int) -> None:
        if not 0 <= index < len(self._nodes):
            raise IndexError(f"Node index {index} out of range")
