#!/usr/bin/env python3
"""
Demo script for boxgrid.

This script walks through the compositions and the layout engine
with printed examples.
"""

import sys

import boxgrid
from boxgrid import Canvas, GridPainter, LineMapInspector, compose, from_list, grid_lines


def print_header(title):
    """Print a formatted header."""
    print("\n" + "=" * 70)
    print(f"  {title}")
    print("=" * 70 + "\n")


def demo_1():
    """Demo 1: Boxed Grid"""
    print_header("Demo 1: Boxed Grid")

    print('boxgrid.grid(["a", "b", "c"], limit=2)\n')
    print(boxgrid.grid(["a", "b", "c"], limit=2))


def demo_2():
    """Demo 2: Table"""
    print_header("Demo 2: Table")

    headers = ["Name", "Age", "Height"]
    rows = [
        ["Alice", 23, "169 cm"],
        ["Bob", 27, "181 cm"],
        ["Carol", 19, "200 cm"],
    ]
    print(boxgrid.table(headers, rows))


def demo_3():
    """Demo 3: Nested Values"""
    print_header("Demo 3: Nested Values")

    value = {"primes": [2, 3, 5, 7], "origin": (0, 0), "name": "boxgrid"}
    print(f"boxgrid.pretty({value!r})\n")
    print(boxgrid.pretty(value))


def demo_4():
    """Demo 4: Spanning Cells"""
    print_header("Demo 4: Spanning Cells")

    tall = Canvas.from_string("tall\ncell\nhere").with_meta(row_span=2)
    wide = Canvas.from_string("a wide cell").with_meta(column_span=2)
    canvases = [tall] + from_list(["one", "two"]) + [wide]
    print(compose.grid(canvases, limit=2, align_items="center"))


def demo_5():
    """Demo 5: Styles and Alignment"""
    print_header("Demo 5: Styles and Alignment")

    canvases = from_list(["x", "longer", "mid"])
    for style in ("light", "heavy", "double"):
        print(f"{style}, justify_items=center:")
        print(compose.grid(canvases, boxgrid.get_symbols(style), justify_items="center"))
        print()

    print("math_matrix:")
    print(compose.math_matrix(boxgrid.from_matrix([[1, 0, 0], [0, 1, 0], [0, 0, 1]])))


def demo_6():
    """Demo 6: With Debug Trace"""
    print_header("Demo 6: Paint with Debug Trace")

    painter = GridPainter(limit=2, pad_items=(0, 1, 0, 1), outer_margin=1)
    canvas = painter.paint(from_list(["a", "bb", "ccc"]), grid_lines, debug=True)
    print(canvas)
    print()
    print(painter.get_trace().summary())

    layout = painter.layout(from_list(["a", "bb", "ccc"]), with_lines=True)
    inspector = LineMapInspector(layout.line_map)
    print("\nSeparator network:")
    print(f"  • Connected: {inspector.is_connected()}")
    print(f"  • Junctions: {len(layout.line_map.intersects)}")
    print(f"  • Problems: {inspector.problems() or 'none'}")


def main():
    """Main demo function."""
    demos = [
        demo_1,
        demo_2,
        demo_3,
        demo_4,
        demo_5,
        demo_6,
    ]

    print("\n" + "=" * 70)
    print("  BOXGRID - DEMONSTRATION")
    print("=" * 70)

    for demo_func in demos:
        demo_func()

    print("\n" + "=" * 70)


if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        print("\n\nDemo interrupted. Goodbye!")
        sys.exit(0)
