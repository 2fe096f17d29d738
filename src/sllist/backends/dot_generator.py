"""
Graphviz DOT diagram generator for linked lists.

Converts a LinkedList into Graphviz DOT format for visualization.

Supports two modes:
    - SIMPLE: One box per Node, labelled with its value
    - DETAILED: Index labels, plus size and middle in the graph label

A damaged (cyclic) chain is drawn up to its last distinct Node, with a
back edge to the Node where the cycle starts.
"""

from enum import Enum
from typing import List

from sllist.algorithms import count_reachable, find_cycle, middle_node
from sllist.linked_list import LinkedList


class DotMode(Enum):
    """Visualization modes for DOT output."""
    SIMPLE = "simple"      # Values only
    DETAILED = "detailed"  # Indices, size, middle


def _escape_dot_string(s: str) -> str:
    """Escape special characters for DOT labels."""
    if not s:
        return '""'
    s = s.replace('\\', '\\\\')
    s = s.replace('"', '\\"')
    s = s.replace('\n', '\\n')
    return f'"{s}"'


def _node_id(index: int) -> str:
    return f"n{index}"


def generate_dot(lst: LinkedList, mode: DotMode = DotMode.SIMPLE) -> str:
    """
    Generate Graphviz DOT format for a list.

    Args:
        lst: List to visualize (not modified)
        mode: Visualization mode (SIMPLE, DETAILED)

    Returns:
        String containing DOT graph definition
    """
    lines = []

    # Header
    lines.append("digraph linked_list {")
    lines.append("  rankdir=LR;")
    lines.append("  node [shape=box, style=filled, fillcolor=lightblue];")

    cycle = find_cycle(lst.head)
    reachable = count_reachable(lst.head)

    if mode == DotMode.DETAILED:
        info = [f"size={lst.size}"]
        if cycle is None:
            middle = middle_node(lst.head)
            info.append(f"middle={middle.value if middle is not None else 'none'}")
        else:
            info.append(f"cycle at index {cycle[0]}, length {cycle[1]}")
        lines.append(f"  label={_escape_dot_string(', '.join(info))};")

    # =========================================================================
    # NODES
    # =========================================================================

    lines.append('  HEAD [shape=ellipse, fillcolor=lightgreen, label="HEAD"];')

    node_ids: List[str] = []
    current = lst.head
    for index in range(reachable):
        node_id = _node_id(index)
        if mode == DotMode.DETAILED:
            label = f"[{index}] {current.value}"
        else:
            label = str(current.value)
        lines.append(f"  {node_id} [label={_escape_dot_string(label)}];")
        node_ids.append(node_id)
        current = current.next

    if cycle is None:
        lines.append('  NULL [shape=plaintext, style="", label="NULL"];')

    # =========================================================================
    # EDGES
    # =========================================================================

    if node_ids:
        lines.append(f"  HEAD -> {node_ids[0]};")
    else:
        lines.append("  HEAD -> NULL;")

    for from_id, to_id in zip(node_ids, node_ids[1:]):
        lines.append(f"  {from_id} -> {to_id};")

    if node_ids:
        if cycle is None:
            lines.append(f"  {node_ids[-1]} -> NULL;")
        else:
            start_index = cycle[0]
            lines.append(f"  {node_ids[-1]} -> {node_ids[start_index]} [color=red, label=\"cycle\"];")

    # Footer
    lines.append("}")

    return "\n".join(lines)


def save_dot_file(lst: LinkedList, filename: str, mode: DotMode = DotMode.SIMPLE) -> None:
    """
    Generate DOT and save to file.

    Args:
        lst: List to visualize
        filename: Output file path (.dot extension recommended)
        mode: Visualization mode
    """
    dot = generate_dot(lst, mode=mode)
    with open(filename, 'w') as f:
        f.write(dot)


__all__ = ["DotMode", "generate_dot", "save_dot_file"]
