"""
Debug utilities for boxgrid.

Key Components:
- visual_diff: Compare two text diagrams character by character
- CanvasInspector: Find characters, rows, columns and regions on a canvas
- LineMapInspector: Analyse a line map as a graph of connected separators

Usage:
    >>> from boxgrid.debug import visual_diff
    >>> print(visual_diff(expected_output, str(canvas)))

    >>> inspector = LineMapInspector(layout.line_map)
    >>> inspector.is_connected()
    True
    >>> inspector.problems()
    []
"""

from typing import Dict, List, Set, Tuple

import networkx as nx

from .canvas import Canvas
from .lines import JunctionKind, LineMap
from .models import Point
from .symbols import BOX_DOUBLE, BOX_HEAVY, BOX_LIGHT, BOX_LIGHT_ARC

# Number of directions a line leaves each junction in
JUNCTION_DEGREE: Dict[JunctionKind, int] = {
    JunctionKind.VERTICAL_AND_HORIZONTAL: 4,
    JunctionKind.UP_AND_HORIZONTAL: 3,
    JunctionKind.DOWN_AND_HORIZONTAL: 3,
    JunctionKind.VERTICAL_AND_RIGHT: 3,
    JunctionKind.VERTICAL_AND_LEFT: 3,
    JunctionKind.VERTICAL: 2,
    JunctionKind.HORIZONTAL: 2,
    JunctionKind.DOWN_AND_RIGHT: 2,
    JunctionKind.DOWN_AND_LEFT: 2,
    JunctionKind.UP_AND_RIGHT: 2,
    JunctionKind.UP_AND_LEFT: 2,
}

LINE_CHARS = "".join(
    sorted({char for table in (BOX_LIGHT, BOX_LIGHT_ARC, BOX_HEAVY, BOX_DOUBLE) for char in table.values()})
)


def visual_diff(expected: str, actual: str, context_lines: int = 2) -> str:
    """
    Generate a visual character-by-character diff between two text diagrams.

    Args:
        expected: The expected output
        actual: The actual output
        context_lines: Number of matching lines to show around differences

    Returns:
        A formatted string showing the differences

    Example:
        >>> expected = "╭───╮\\n│ a │\\n╰───╯"
        >>> actual = "╭───╮\\n│ b │\\n╰───╯"
        >>> print(visual_diff(expected, actual))
    """
    exp_lines = expected.split("\n")
    act_lines = actual.split("\n")

    output: List[str] = ["=" * 60, "VISUAL DIFF", "=" * 60]

    max_lines = max(len(exp_lines), len(act_lines))

    def line_at(lines: List[str], i: int) -> str:
        return lines[i] if i < len(lines) else ""

    diff_line_indices = [
        i for i in range(max_lines) if line_at(exp_lines, i) != line_at(act_lines, i)
    ]

    if not diff_line_indices:
        output.append("No differences found.")
        return "\n".join(output)

    output.append(f"Found {len(diff_line_indices)} differing line(s)")
    output.append("")

    shown_lines: Set[int] = set()
    for diff_idx in diff_line_indices:
        low = max(0, diff_idx - context_lines)
        high = min(max_lines, diff_idx + context_lines + 1)
        shown_lines.update(range(low, high))

    prev_shown = -2
    for i in sorted(shown_lines):
        if i > prev_shown + 1:
            output.append("...")

        exp_line = line_at(exp_lines, i)
        act_line = line_at(act_lines, i)

        if exp_line == act_line:
            output.append(f"{i:3d}:   {act_line}")
        else:
            output.append(f"{i:3d}: E |{exp_line}|")
            output.append(f"     A |{act_line}|")

            max_len = max(len(exp_line), len(act_line))
            diff_positions = [
                j for j in range(max_len) if exp_line[j : j + 1] != act_line[j : j + 1]
            ]

            # "     A |" is 8 characters wide
            marker = [" "] * (max_len + 8)
            for pos in diff_positions:
                marker[pos + 8] = "^"
            output.append("".join(marker).rstrip())
            output.append(
                f"     Diff at col(s): {diff_positions[:5]}"
                f"{'...' if len(diff_positions) > 5 else ''}"
            )

        prev_shown = i

    return "\n".join(output)


class CanvasInspector:
    """
    Utilities for inspecting a canvas.

    Coordinates are canvas coordinates; positions inside the box with nothing
    drawn read as a space.
    """

    def __init__(self, canvas: Canvas):
        """
        Initialize the inspector.

        Args:
            canvas: The canvas to inspect
        """
        self._canvas = canvas
        self._box = canvas.box

    def char_at(self, x: int, y: int) -> str:
        return self._canvas.get(x, y, " ")

    def find_char(self, char: str) -> List[Point]:
        """All (x, y) positions of a character, row by row."""
        return [(x, y) for x, y, _ in self.find_chars(char)]

    def find_chars(self, chars: str) -> List[Tuple[int, int, str]]:
        """
        Find all positions of any character in the given set.

        Args:
            chars: String of characters to find (e.g. "╭╮╰╯")

        Returns:
            List of (x, y, char) tuples, row by row
        """
        char_set = set(chars)
        box = self._box
        positions = []
        for y in range(box.y0, box.y1):
            for x in range(box.x0, box.x1):
                c = self.char_at(x, y)
                if c in char_set:
                    positions.append((x, y, c))
        return positions

    def get_row(self, y: int) -> str:
        """Get a single row as a string."""
        box = self._box
        if box.y0 <= y < box.y1:
            return "".join(self.char_at(x, y) for x in range(box.x0, box.x1))
        return ""

    def get_column(self, x: int) -> str:
        """Get a single column as a string."""
        box = self._box
        if box.x0 <= x < box.x1:
            return "".join(self.char_at(x, y) for y in range(box.y0, box.y1))
        return ""

    def get_region(self, x: int, y: int, width: int, height: int) -> str:
        """Get a rectangular region of the canvas as a multi-line string."""
        return "\n".join(
            "".join(self.char_at(col, row) for col in range(x, x + width))
            for row in range(y, y + height)
        )

    def count_char(self, char: str) -> int:
        """Count occurrences of a character."""
        return len(self.find_char(char))

    def get_line_chars_count(self) -> Dict[str, int]:
        """Count every box-drawing character on the canvas."""
        counts: Dict[str, int] = {}
        for _, _, char in self.find_chars(LINE_CHARS):
            counts[char] = counts.get(char, 0) + 1
        return counts


class LineMapInspector:
    """
    Graph view of a line map.

    Junction points and segment endpoints are nodes; the pieces of each
    segment between consecutive points on it are edges. A grid with every
    cell boxed is one connected component, and the degree of every junction
    point matches its kind.
    """

    def __init__(self, line_map: LineMap):
        self.line_map = line_map
        self.graph: nx.Graph = line_map.graph()

    def is_connected(self) -> bool:
        """Whether all separators form a single network. An empty map counts as connected."""
        if self.graph.number_of_nodes() == 0:
            return True
        return nx.is_connected(self.graph)

    def components(self) -> List[Set[Point]]:
        """Connected groups of points, largest first."""
        return sorted(nx.connected_components(self.graph), key=len, reverse=True)

    def degree(self, point: Point) -> int:
        """Number of segment pieces meeting at a point, 0 if the point is not on any line."""
        if point not in self.graph:
            return 0
        return self.graph.degree(point)

    def dangling_endpoints(self) -> List[Point]:
        """Segment endpoints with no junction recorded for them."""
        endpoints = {
            point
            for line in self.line_map.horizontal_lines + self.line_map.vertical_lines
            for point in line
        }
        return sorted(endpoints - set(self.line_map.intersects))

    def degree_mismatches(self) -> List[Tuple[Point, JunctionKind, int]]:
        """Junctions whose graph degree differs from the number of directions of their kind."""
        return [
            (point, kind, self.degree(point))
            for point, kind in sorted(self.line_map.intersects.items())
            if self.degree(point) != JUNCTION_DEGREE[kind]
        ]

    def problems(self) -> List[str]:
        """Human-readable list of everything that looks wrong; empty when the map is sound."""
        problems = [f"no junction at endpoint {point}" for point in self.dangling_endpoints()]
        problems += [
            f"{kind.value} at {point} has {degree} connection(s), expected {JUNCTION_DEGREE[kind]}"
            for point, kind, degree in self.degree_mismatches()
        ]
        return problems
