"""Data models module for DiceSim."""

# Dice
from dicesim.models.dice import DiceVariant, DieSpec, RollResult

# Console input
from dicesim.models.parsing import ParseResult

# Linked lists
from dicesim.models.linked_list import ListNode, NodeArena

__all__ = [
    # Dice
    "DiceVariant",
    "DieSpec",
    "RollResult",
    # Console input
    "ParseResult",
    # Linked lists
    "ListNode",
    "NodeArena",
]
