#!/usr/bin/env python3
"""
Demo: Generate Graphviz DOT diagrams for a healthy and a cyclic list.

Shows both visualization modes (SIMPLE, DETAILED).
"""

from sllist.examples import build_example_list, build_cyclic_list
from sllist.backends import generate_dot, save_dot_file, DotMode


def main():
    samples = {
        "example": build_example_list(),
        "cyclic": build_cyclic_list((1, 2, 3, 4), loop_to=1),
    }

    print("=" * 80)
    print("DOT GENERATOR DEMO")
    print("=" * 80)

    for name, lst in samples.items():
        for mode in [DotMode.SIMPLE, DotMode.DETAILED]:
            print(f"\n{name.upper()} / {mode.value.upper()} MODE:")
            print("-" * 80)
            print(generate_dot(lst, mode=mode))

            filename = f"list_{name}_{mode.value}.dot"
            save_dot_file(lst, filename, mode=mode)
            print(f"\nSaved to: {filename}")

    for lst in samples.values():
        lst.destroy()

    print("\n" + "=" * 80)
    print("To visualize the diagrams:")
    print("  dot -Tpng list_example_simple.dot -o list_example_simple.png")
    print("=" * 80)


if __name__ == "__main__":
    main()
