"""
Chain algorithms over bare Node links.

These functions work on a head Node rather than on a LinkedList so that
the list, the analyzer and the DOT backend share one implementation.

    - iter_chain:       walk an acyclic chain head to tail
    - reverse_chain:    in-place reversal with three cursors
    - middle_node:      two-pointer middle (upper middle for even lengths)
    - chain_has_cycle:  tortoise-and-hare detection
    - find_cycle:       Floyd's cycle start and cycle length
    - count_reachable:  distinct Nodes reachable from head, cycle or not

Only chain_has_cycle, find_cycle and count_reachable accept a cyclic
chain. Everything else assumes the acyclic invariant.
"""

from __future__ import annotations

from typing import Iterator, Optional, Tuple

from sllist.node import Node


def iter_chain(head: Optional[Node]) -> Iterator[Node]:
    """Yield each Node from head to tail."""
    current = head
    while current is not None:
        yield current
        current = current.next


def reverse_chain(head: Optional[Node]) -> Optional[Node]:
    """
    Reverse the chain in place and return the new head.

    Each `next` is repointed at the previously visited Node. O(n) time,
    O(1) extra space.
    """
    prev = None
    current = head
    while current is not None:
        saved = current.next
        current.next = prev
        prev = current
        current = saved
    return prev


def middle_node(head: Optional[Node]) -> Optional[Node]:
    """
    Return the Node at index floor(n / 2), or None for an empty chain.

    slow advances one step, fast advances two, until fast cannot make
    another double step. For even n this lands on the upper middle.
    """
    if head is None:
        return None

    slow = head
    fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
    return slow


def chain_has_cycle(head: Optional[Node]) -> bool:
    """
    Tortoise-and-hare cycle detection.

    True iff the two cursors meet on the same Node after the first
    step; False as soon as fast reaches the end. Never follows a None
    link and terminates in O(n) on any chain.
    """
    slow = head
    fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            return True
    return False


def find_cycle(head: Optional[Node]) -> Optional[Tuple[int, int]]:
    """
    Locate a cycle with Floyd's algorithm.

    Returns:
        (start_index, length) where start_index is the index of the
        first Node on the cycle, or None when the chain is acyclic.
    """
    slow = head
    fast = head
    meeting = None
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            meeting = slow
            break

    if meeting is None:
        return None

    # A cursor from head and one from the meeting point meet at the cycle start
    start_index = 0
    probe = head
    while probe is not meeting:
        probe = probe.next
        meeting = meeting.next
        start_index += 1

    length = 1
    walker = probe.next
    while walker is not probe:
        walker = walker.next
        length += 1

    return start_index, length


def count_reachable(head: Optional[Node]) -> int:
    """Count distinct Nodes reachable from head. Safe on cyclic chains."""
    cycle = find_cycle(head)
    if cycle is not None:
        start_index, length = cycle
        return start_index + length
    return sum(1 for _ in iter_chain(head))
