"""
LinkedList: the owning container of a singly linked chain of Nodes.

The list holds the head link and a cached element count. Every public
operation starts here and walks the chain.

INVARIANTS (hold before and after every public operation):
    - Following `next` from head visits exactly `size` Nodes
    - The chain is acyclic (has_cycle tolerates damaged chains)
    - Every reachable Node is owned by this list only
    - size == 0 iff head is None

FAILURE SEMANTICS:
    Routine failures (empty list, index out of range, allocation
    failure) are reported as False / NOT_FOUND / None and leave the
    list unchanged. Nothing here is logged or raised for them.
"""

from __future__ import annotations

import sys
from typing import Iterable, Iterator, List, Optional, TextIO

from sllist.algorithms import chain_has_cycle, iter_chain, middle_node, reverse_chain
from sllist.node import Node
from sllist.render import RenderStyle, render_list

NOT_FOUND = -1


class LinkedList:
    """
    Singly linked list of integers.

    Usage:
        lst = LinkedList()
        lst.insert_back(1)
        lst.insert_front(0)
        lst.insert_at(5, 1)
        lst.search(5)       # -> 1
        lst.render()        # prints "0 -> 5 -> 1"

    The list is also a context manager; leaving the block destroys it.
    """

    def __init__(self) -> None:
        self._head: Optional[Node] = None
        self._size: int = 0

    @classmethod
    def from_iterable(cls, values: Iterable[int]) -> "LinkedList":
        """Build a list holding `values` in order. O(n)."""
        lst = cls()
        tail: Optional[Node] = None
        for value in values:
            node = Node(value)
            if tail is None:
                lst._head = node
            else:
                tail.next = node
            tail = node
            lst._size += 1
        return lst

    # ---- state ----

    @property
    def head(self) -> Optional[Node]:
        """First Node of the chain, or None when empty."""
        return self._head

    @property
    def size(self) -> int:
        return self._size

    @property
    def is_empty(self) -> bool:
        return self._head is None

    # ---- teardown ----

    def destroy(self) -> None:
        """
        Release every Node, head to tail, and leave the list empty.

        Iterative: each Node is unlinked before moving to its saved
        successor, so long chains never recurse and even a damaged
        cyclic chain terminates. Calling destroy on an empty list is a
        no-op.
        """
        current = self._head
        self._head = None
        self._size = 0
        while current is not None:
            saved = current.next
            current.next = None
            current = saved

    def __enter__(self) -> "LinkedList":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.destroy()

    # ---- insertion ----

    def _allocate(self, value: int) -> Optional[Node]:
        try:
            return Node(value)
        except MemoryError:
            return None

    def insert_front(self, value: int) -> bool:
        """Prepend `value`. O(1)."""
        node = self._allocate(value)
        if node is None:
            return False

        node.next = self._head
        self._head = node
        self._size += 1
        return True

    def insert_back(self, value: int) -> bool:
        """Append `value` after the current tail. O(n)."""
        node = self._allocate(value)
        if node is None:
            return False

        if self._head is None:
            self._head = node
        else:
            current = self._head
            while current.next is not None:
                current = current.next
            current.next = node
        self._size += 1
        return True

    def insert_at(self, value: int, position: int) -> bool:
        """
        Insert `value` so that it ends up at 0-based index `position`.

        Valid positions are 0..size inclusive; position == size appends.
        Any other position returns False and leaves the list unchanged.
        """
        if position < 0 or position > self._size:
            return False

        if position == 0:
            return self.insert_front(value)

        node = self._allocate(value)
        if node is None:
            return False

        current = self._head
        for _ in range(position - 1):
            current = current.next

        node.next = current.next
        current.next = node
        self._size += 1
        return True

    # ---- deletion ----

    def delete_front(self) -> bool:
        """Remove the head Node. False on an empty list."""
        if self._head is None:
            return False

        removed = self._head
        self._head = removed.next
        removed.next = None
        self._size -= 1
        return True

    def delete_back(self) -> bool:
        """Remove the tail Node. O(n). False on an empty list."""
        if self._head is None:
            return False

        # Singleton: head itself is the tail
        if self._head.next is None:
            self._head = None
            self._size -= 1
            return True

        current = self._head
        while current.next.next is not None:
            current = current.next
        current.next = None
        self._size -= 1
        return True

    def delete_at(self, position: int) -> bool:
        """Remove the Node at 0-based `position` (0..size-1)."""
        if self._head is None or position < 0 or position >= self._size:
            return False

        if position == 0:
            return self.delete_front()

        current = self._head
        for _ in range(position - 1):
            current = current.next

        removed = current.next
        current.next = removed.next
        removed.next = None
        self._size -= 1
        return True

    def delete_value(self, value: int) -> bool:
        """Remove the first Node holding `value`. False when absent."""
        prev = None
        current = self._head
        while current is not None and current.value != value:
            prev = current
            current = current.next

        if current is None:
            return False

        if prev is None:
            self._head = current.next
        else:
            prev.next = current.next
        current.next = None
        self._size -= 1
        return True

    # ---- query ----

    def search(self, value: int) -> int:
        """Index of the first Node holding `value`, or NOT_FOUND (-1)."""
        for index, node in enumerate(iter_chain(self._head)):
            if node.value == value:
                return index
        return NOT_FOUND

    def middle(self) -> Optional[int]:
        """Value at index size // 2 (upper middle), or None when empty."""
        node = middle_node(self._head)
        if node is None:
            return None
        return node.value

    def has_cycle(self) -> bool:
        """True if following `next` from head ever revisits a Node."""
        return chain_has_cycle(self._head)

    # ---- bulk transformation ----

    def reverse(self) -> None:
        """Reverse the chain in place. Size is unchanged."""
        self._head = reverse_chain(self._head)

    # ---- display ----

    def render(self, sink: Optional[TextIO] = None, style: RenderStyle = RenderStyle.ARROW) -> None:
        """
        Write the values to a text sink (stdout by default).

        Args:
            sink: Any object with a write(str) method
            style: Rendering convention, chosen by the caller
        """
        if sink is None:
            sink = sys.stdout
        sink.write(render_list(self, style=style))

    # ---- python protocol ----

    def to_list(self) -> List[int]:
        return [node.value for node in iter_chain(self._head)]

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[int]:
        for node in iter_chain(self._head):
            yield node.value

    def __contains__(self, value: object) -> bool:
        return self.search(value) != NOT_FOUND

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LinkedList):
            return NotImplemented
        return self._size == other._size and self.to_list() == other.to_list()

    def __str__(self) -> str:
        return render_list(self, style=RenderStyle.ARROW).rstrip("\n")

    def __repr__(self) -> str:
        return f"LinkedList({self.to_list()!r})"
