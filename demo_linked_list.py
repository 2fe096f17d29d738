#!/usr/bin/env python3
"""
Demo: Walk through every list operation on the example list.
"""

from sllist.examples import build_example_list
from sllist.analyzer import analyze_list
from sllist.serialization import list_to_yaml


def main():
    print("=" * 70)
    print("LINKED LIST DEMO")
    print("=" * 70)

    lst = build_example_list()

    print("Original list: ", end="")
    lst.render()  # 0 -> 1 -> 5 -> 2 -> 3

    print(f"Position of 5: {lst.search(5)}")

    lst.delete_front()
    lst.delete_back()
    print("After deletions: ", end="")
    lst.render()  # 1 -> 5 -> 2

    lst.reverse()
    print("After reverse: ", end="")
    lst.render()  # 2 -> 5 -> 1

    print(f"Middle element: {lst.middle()}")
    print(f"Has cycle: {'true' if lst.has_cycle() else 'false'}")

    report = analyze_list(lst)
    print()
    print(f"Reachable nodes: {report.reachable_nodes}/{report.size}")
    if report.warnings:
        for i, warning in enumerate(report.warnings, 1):
            print(f"  {i}. {warning}")
    else:
        print("No warnings - list looks clean!")

    print()
    print("YAML:")
    print(list_to_yaml(lst))

    lst.destroy()


if __name__ == "__main__":
    main()
