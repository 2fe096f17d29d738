#!/usr/bin/env python3
"""
Demo: The minimal variant. Front insertion, delete by value and
NULL-terminated traversal.
"""

from sllist.examples import build_pushdown_list
from sllist.render import RenderStyle


def main():
    with build_pushdown_list((10, 20, 30)) as lst:
        print("Linked List: ", end="")
        lst.render(style=RenderStyle.NULL_TERMINATED)  # 30 -> 20 -> 10 -> NULL

        lst.delete_value(20)
        print("After Deletion: ", end="")
        lst.render(style=RenderStyle.NULL_TERMINATED)  # 30 -> 10 -> NULL


if __name__ == "__main__":
    main()
