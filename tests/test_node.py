"""
Tests for the Node storage cell.

These tests verify:
    - Construction with a value and no successor
    - Identity equality
    - A repr that never walks the chain
    - Rejection of non-integer values
"""

import pytest
from sllist.node import Node


class TestNode:
    """Test Node construction and behaviour."""

    def test_create_node(self):
        """Should hold the value with no successor."""
        node = Node(7)
        assert node.value == 7
        assert node.next is None

    def test_negative_value(self):
        """Should store signed integers."""
        assert Node(-42).value == -42

    def test_link_successor(self):
        """Should accept an explicit successor."""
        tail = Node(2)
        head = Node(1, tail)
        assert head.next is tail

    def test_equality_is_identity(self):
        """Two Nodes with the same value are still distinct Nodes."""
        a = Node(1)
        b = Node(1)
        assert a != b
        assert a == a

    def test_repr_does_not_follow_next(self):
        """repr must be safe on a self-referencing Node."""
        node = Node(3)
        node.next = node
        assert repr(node) == "Node(value=3)"

    @pytest.mark.parametrize("bad", ["1", 1.5, None, True])
    def test_rejects_non_integer(self, bad):
        """Should raise TypeError for anything but an int."""
        with pytest.raises(TypeError):
            Node(bad)
