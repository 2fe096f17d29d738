"""
Node: the storage cell of a singly linked list.

A Node holds one integer element and a link to its successor.

ARCHITECTURAL RULE:
    Nodes are created and released by the owning LinkedList only.
    The list is the only thing that rewires `next` during normal use.
    Test harnesses may rewire `next` on purpose to build damaged chains.
"""

from dataclasses import dataclass, field
from typing import Optional


@dataclass(eq=False)
class Node:
    """
    A single cell in a chain.

    Properties:
        value:
            Signed integer element stored in this cell

        next:
            Successor Node, or None at the end of the chain

    Equality is identity: two Nodes are the same Node only if they are
    the same object. The repr shows the value only, so printing a Node
    never walks a long (or cyclic) chain.
    """

    value: int
    next: Optional["Node"] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError(f"Node value must be an int, got {type(self.value).__name__}")
