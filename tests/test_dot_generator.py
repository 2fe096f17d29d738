"""
Tests for DOT diagram generator.

These tests verify that linked lists are correctly converted to Graphviz DOT format.

Tests cover:
    - Value nodes, HEAD marker and NULL terminator
    - Edges following the chain
    - Detailed mode labels
    - Back edges for cyclic chains
    - File output
"""

import pytest
from sllist.linked_list import LinkedList
from sllist.examples import build_example_list, build_cyclic_list
from sllist.backends.dot_generator import (
    generate_dot,
    save_dot_file,
    DotMode,
)


class TestDotBasicStructure:
    """Test basic DOT graph structure."""

    def test_empty_list_generates_valid_dot(self):
        """Should generate valid DOT even for an empty list."""
        dot = generate_dot(LinkedList(), mode=DotMode.SIMPLE)

        assert dot.startswith("digraph linked_list {")
        assert dot.endswith("}")
        assert "HEAD -> NULL;" in dot

    def test_each_value_becomes_node(self):
        dot = generate_dot(LinkedList.from_iterable([7, 8]), mode=DotMode.SIMPLE)

        assert 'n0 [label="7"];' in dot
        assert 'n1 [label="8"];' in dot

    def test_edges_follow_chain(self):
        dot = generate_dot(LinkedList.from_iterable([7, 8, 9]), mode=DotMode.SIMPLE)

        assert "HEAD -> n0;" in dot
        assert "n0 -> n1;" in dot
        assert "n1 -> n2;" in dot
        assert "n2 -> NULL;" in dot

    def test_simple_mode_has_no_graph_label(self):
        dot = generate_dot(build_example_list(), mode=DotMode.SIMPLE)
        assert "size=" not in dot


class TestDotDetailedMode:
    """Test DETAILED mode annotations."""

    def test_index_labels(self):
        dot = generate_dot(build_example_list(), mode=DotMode.DETAILED)
        assert 'n2 [label="[2] 5"];' in dot

    def test_graph_label_has_size_and_middle(self):
        dot = generate_dot(build_example_list(), mode=DotMode.DETAILED)
        assert 'label="size=5, middle=5";' in dot

    def test_empty_list_middle(self):
        dot = generate_dot(LinkedList(), mode=DotMode.DETAILED)
        assert "middle=none" in dot


class TestDotCycles:
    """Cyclic chains are drawn once with a back edge."""

    def test_back_edge_to_cycle_start(self):
        dot = generate_dot(build_cyclic_list((1, 2, 3, 4), loop_to=1), mode=DotMode.SIMPLE)

        assert "n3 -> n1 [color=red" in dot
        assert "NULL" not in dot
        assert "n4" not in dot

    def test_detailed_mode_reports_cycle(self):
        dot = generate_dot(build_cyclic_list(), mode=DotMode.DETAILED)
        assert "cycle at index 0, length 4" in dot


@pytest.mark.parametrize("mode", list(DotMode))
def test_save_dot_file(tmp_path, mode):
    path = tmp_path / "list.dot"
    lst = build_example_list()
    save_dot_file(lst, str(path), mode=mode)
    assert path.read_text() == generate_dot(lst, mode=mode)
