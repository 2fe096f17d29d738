"""
Tests for the chain algorithms on bare Nodes.
"""

from sllist.node import Node
from sllist.algorithms import (
    iter_chain,
    reverse_chain,
    middle_node,
    chain_has_cycle,
    find_cycle,
    count_reachable,
)


def build_chain(values):
    head = None
    for value in reversed(values):
        head = Node(value, head)
    return head


def values_of(head):
    return [node.value for node in iter_chain(head)]


def nodes_of(head):
    return list(iter_chain(head))


def test_iter_chain_empty():
    assert values_of(None) == []


def test_reverse_chain():
    head = reverse_chain(build_chain([1, 2, 3, 4]))
    assert values_of(head) == [4, 3, 2, 1]


def test_reverse_chain_empty_and_singleton():
    assert reverse_chain(None) is None
    single = Node(9)
    assert reverse_chain(single) is single
    assert single.next is None


def test_reverse_chain_reuses_nodes():
    head = build_chain([1, 2, 3])
    before = nodes_of(head)
    after = nodes_of(reverse_chain(head))
    assert after == list(reversed(before))


def test_middle_node_matches_floor_half():
    for n in range(1, 12):
        values = list(range(100, 100 + n))
        middle = middle_node(build_chain(values))
        assert middle.value == values[n // 2]


def test_middle_node_empty():
    assert middle_node(None) is None


def test_no_cycle_in_straight_chain():
    assert not chain_has_cycle(None)
    assert not chain_has_cycle(Node(1))
    assert not chain_has_cycle(build_chain([1, 2, 3, 4, 5]))
    assert find_cycle(build_chain([1, 2, 3])) is None


def test_self_loop():
    node = Node(1)
    node.next = node
    assert chain_has_cycle(node)
    assert find_cycle(node) == (0, 1)
    assert count_reachable(node) == 1


def test_cycle_start_and_length():
    head = build_chain([1, 2, 3, 4, 5, 6])
    nodes = nodes_of(head)
    nodes[-1].next = nodes[2]

    assert chain_has_cycle(head)
    assert find_cycle(head) == (2, 4)
    assert count_reachable(head) == 6


def test_count_reachable_acyclic():
    assert count_reachable(None) == 0
    assert count_reachable(build_chain([5, 5, 5])) == 3
