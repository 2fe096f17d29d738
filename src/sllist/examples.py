"""
Example list builders used by the demos and the tests.

    - build_example_list:   the full walkthrough list 0 -> 1 -> 5 -> 2 -> 3
    - build_pushdown_list:  front insertions only, 30 -> 20 -> 10
    - build_cyclic_list:    a chain whose tail is spliced back into itself
"""
from typing import Iterable

from sllist.linked_list import LinkedList


def build_example_list() -> LinkedList:
    lst = LinkedList()
    lst.insert_back(1)
    lst.insert_back(2)
    lst.insert_back(3)
    lst.insert_front(0)
    lst.insert_at(5, 2)
    return lst


def build_pushdown_list(values: Iterable[int] = (10, 20, 30)) -> LinkedList:
    lst = LinkedList()
    for value in values:
        lst.insert_front(value)
    return lst


def build_cyclic_list(values: Iterable[int] = (1, 2, 3, 4), loop_to: int = 0) -> LinkedList:
    """
    Build a list, then point the tail's `next` at the Node at index
    `loop_to`, producing a damaged chain for cycle-detection checks.

    Only has_cycle, the analyzer, the DOT backend and destroy are safe
    on the result.
    """
    lst = LinkedList.from_iterable(values)
    if lst.head is None:
        raise ValueError("Cannot build a cycle from an empty list")
    if loop_to < 0 or loop_to >= lst.size:
        raise ValueError(f"loop_to {loop_to} out of range for size {lst.size}")

    target = lst.head
    for _ in range(loop_to):
        target = target.next

    tail = lst.head
    while tail.next is not None:
        tail = tail.next
    tail.next = target
    return lst
