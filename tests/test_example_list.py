"""
Test the example list builders used by the demos.
"""

import pytest

from sllist.examples import build_example_list, build_pushdown_list, build_cyclic_list


def test_example_list_structure():
    lst = build_example_list()
    assert lst.to_list() == [0, 1, 5, 2, 3]
    assert lst.search(5) == 2
    assert not lst.has_cycle()


def test_pushdown_list_structure():
    assert build_pushdown_list().to_list() == [30, 20, 10]


def test_cyclic_list_tail_points_to_head():
    lst = build_cyclic_list()
    assert lst.has_cycle()

    tail = lst.head.next.next.next
    assert tail.value == 4
    assert tail.next is lst.head


def test_cyclic_list_rejects_bad_input():
    with pytest.raises(ValueError):
        build_cyclic_list(())
    with pytest.raises(ValueError):
        build_cyclic_list((1, 2), loop_to=2)
