"""
List Analyzer — read-only health report for a linked list.

This module inspects a LinkedList without modifying it:
    - Cached size versus Nodes actually reachable from head
    - Cycle presence, cycle start and cycle length
    - Middle value, value range and duplicates

It is safe on a damaged (cyclic) chain: every walk is bounded by the
reachable Node count computed with Floyd's algorithm.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import List, Optional

from sllist.algorithms import count_reachable, find_cycle, middle_node
from sllist.linked_list import LinkedList


@dataclass
class ListReport:
    """Analysis report for a single list."""

    size: int = 0
    reachable_nodes: int = 0

    # Cycle properties
    has_cycle: bool = False
    cycle_start_index: Optional[int] = None
    cycle_length: int = 0

    # Value properties
    middle: Optional[int] = None
    min_value: Optional[int] = None
    max_value: Optional[int] = None
    duplicate_values: List[int] = field(default_factory=list)

    warnings: List[str] = field(default_factory=list)

    def add_warning(self, msg: str) -> None:
        """Add a warning to the report."""
        if msg not in self.warnings:
            self.warnings.append(msg)


def _bounded_values(lst: LinkedList, limit: int) -> List[int]:
    """Collect at most `limit` values from head, cycle or not."""
    values = []
    current = lst.head
    while current is not None and len(values) < limit:
        values.append(current.value)
        current = current.next
    return values


def analyze_list(lst: LinkedList) -> ListReport:
    """
    Analyze a list and return a ListReport with metrics and warnings.

    Warnings are raised in the report (never as exceptions) for:
    - a cycle in the chain
    - a cached size that disagrees with the reachable Node count
    - duplicate values
    """
    report = ListReport(size=lst.size)

    # =========================================================================
    # 1. STRUCTURE
    # =========================================================================

    report.reachable_nodes = count_reachable(lst.head)

    cycle = find_cycle(lst.head)
    if cycle is not None:
        report.has_cycle = True
        report.cycle_start_index, report.cycle_length = cycle

    # =========================================================================
    # 2. VALUES
    # =========================================================================

    values = _bounded_values(lst, report.reachable_nodes)

    if values:
        report.min_value = min(values)
        report.max_value = max(values)

    counts = Counter(values)
    report.duplicate_values = sorted(v for v, n in counts.items() if n > 1)

    # middle_node only terminates on an acyclic chain
    if not report.has_cycle:
        node = middle_node(lst.head)
        report.middle = node.value if node is not None else None

    # =========================================================================
    # 3. WARNING FLAGS
    # =========================================================================

    if report.has_cycle:
        report.add_warning(
            f"Cycle detected: starts at index {report.cycle_start_index}, length {report.cycle_length}"
        )

    if report.reachable_nodes != report.size:
        report.add_warning(
            f"Size mismatch: cached size {report.size}, reachable nodes {report.reachable_nodes}"
        )

    if report.duplicate_values:
        report.add_warning(
            f"Duplicate values: {', '.join(str(v) for v in report.duplicate_values)}"
        )

    return report
