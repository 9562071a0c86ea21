"""
Line and junction synthesis.

Given positioned blocks and the gap offset tables, works out every separator
segment needed to draw the grid and the kind of junction at each point where
lines meet::

    ╭───┬───╮   horizontal_lines: top, middle and bottom rows of ─
    │ 1 │ 2 │   vertical_lines:   left, middle and right columns of │
    ├───┼───┤   intersects:       {(0, 0): DOWN_AND_RIGHT,
    │ 3 │   │                      (4, 0): DOWN_AND_HORIZONTAL,
    ╰───┴───╯                      (4, 2): VERTICAL_AND_HORIZONTAL, ...}

Each block seeds the four corners of its boundary box with the two
directions its own lines leave in. Flags from neighbouring blocks are
unioned, so shared corners grow into T and cross junctions. Blocks spanning
several tracks also mark the gap lines they cross as straight pass-throughs.
"""

from collections import defaultdict
from dataclasses import dataclass, field
from enum import Enum, Flag, auto
from typing import Dict, List, Optional, Sequence, Tuple

import networkx as nx

from .models import Block, Line, Offsets, Point, Sides


class Direction(Flag):
    """Directions a line continues in from a point."""

    NONE = 0
    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()


class JunctionKind(str, Enum):
    """Box-drawing junction kinds, named after the Unicode box-drawing glyphs."""

    VERTICAL_AND_HORIZONTAL = "vertical_and_horizontal"
    UP_AND_HORIZONTAL = "up_and_horizontal"
    DOWN_AND_HORIZONTAL = "down_and_horizontal"
    VERTICAL_AND_RIGHT = "vertical_and_right"
    VERTICAL_AND_LEFT = "vertical_and_left"
    VERTICAL = "vertical"
    HORIZONTAL = "horizontal"
    DOWN_AND_RIGHT = "down_and_right"
    DOWN_AND_LEFT = "down_and_left"
    UP_AND_RIGHT = "up_and_right"
    UP_AND_LEFT = "up_and_left"


UP, DOWN, LEFT, RIGHT = Direction.UP, Direction.DOWN, Direction.LEFT, Direction.RIGHT

JUNCTIONS: Dict[Direction, JunctionKind] = {
    UP | DOWN | LEFT | RIGHT: JunctionKind.VERTICAL_AND_HORIZONTAL,
    LEFT | RIGHT | UP: JunctionKind.UP_AND_HORIZONTAL,
    LEFT | RIGHT | DOWN: JunctionKind.DOWN_AND_HORIZONTAL,
    UP | DOWN | RIGHT: JunctionKind.VERTICAL_AND_RIGHT,
    UP | DOWN | LEFT: JunctionKind.VERTICAL_AND_LEFT,
    UP | DOWN: JunctionKind.VERTICAL,
    LEFT | RIGHT: JunctionKind.HORIZONTAL,
    DOWN | RIGHT: JunctionKind.DOWN_AND_RIGHT,
    DOWN | LEFT: JunctionKind.DOWN_AND_LEFT,
    UP | RIGHT: JunctionKind.UP_AND_RIGHT,
    UP | LEFT: JunctionKind.UP_AND_LEFT,
}


def classify_junction(flags: Direction) -> Optional[JunctionKind]:
    """Junction kind for a set of direction flags, or None if nothing is drawable."""
    return JUNCTIONS.get(flags)


@dataclass
class LineMap:
    """
    Separator lines of a grid.

    Attributes:
        horizontal_lines: Deduplicated horizontal segments, left point first.
        vertical_lines: Deduplicated vertical segments, top point first.
        intersects: Junction kind at every point where lines meet or turn.
    """

    horizontal_lines: List[Line] = field(default_factory=list)
    vertical_lines: List[Line] = field(default_factory=list)
    intersects: Dict[Point, JunctionKind] = field(default_factory=dict)

    def bounds(self) -> Tuple[int, int, int, int]:
        """Inclusive (x_min, y_min, x_max, y_max) over every line endpoint."""
        points = [p for line in self.horizontal_lines + self.vertical_lines for p in line]
        if not points:
            return 0, 0, 0, 0
        xs = [x for x, _ in points]
        ys = [y for _, y in points]
        return min(xs), min(ys), max(xs), max(ys)

    def translate(self, dx: int, dy: int) -> "LineMap":
        """Return a copy with every point shifted by (dx, dy)."""

        def move(point: Point) -> Point:
            return point[0] + dx, point[1] + dy

        return LineMap(
            horizontal_lines=[(move(a), move(b)) for a, b in self.horizontal_lines],
            vertical_lines=[(move(a), move(b)) for a, b in self.vertical_lines],
            intersects={move(p): kind for p, kind in self.intersects.items()},
        )

    def filter_rows(self, keep_y) -> "LineMap":
        """
        Keep only the horizontal lines (and their junctions) at the given y values.

        Vertical lines are kept whole; junctions off the kept rows are dropped
        so the vertical glyph shows through.
        """
        keep_y = set(keep_y)
        return LineMap(
            horizontal_lines=[line for line in self.horizontal_lines if line[0][1] in keep_y],
            vertical_lines=list(self.vertical_lines),
            intersects={p: kind for p, kind in self.intersects.items() if p[1] in keep_y},
        )

    def graph(self) -> nx.Graph:
        """
        Separator network as a graph.

        Nodes are segment endpoints and junction points; each segment is split
        into edges between consecutive points lying on it. Edges carry an
        ``orientation`` attribute, ``"horizontal"`` or ``"vertical"``.
        """
        graph = nx.Graph()
        for point, kind in self.intersects.items():
            graph.add_node(point, kind=kind)

        for orientation, lines, axis in (
            ("horizontal", self.horizontal_lines, 0),
            ("vertical", self.vertical_lines, 1),
        ):
            for start, end in lines:
                on_line = {start, end}
                for point in self.intersects:
                    if _on_segment(point, start, end):
                        on_line.add(point)
                ordered = sorted(on_line, key=lambda p: p[axis])
                for a, b in zip(ordered, ordered[1:]):
                    graph.add_edge(a, b, orientation=orientation)
                if len(ordered) == 1:
                    graph.add_node(start)

        return graph


def make_lines(
    blocks: Sequence[Block], row_gap_offsets: Offsets, column_gap_offsets: Offsets
) -> LineMap:
    """
    Build the line map for a set of placed blocks.

    Args:
        blocks: Placed blocks covering the grid (placeholders included).
        row_gap_offsets: Gap offsets per row.
        column_gap_offsets: Gap offsets per column.

    Returns:
        LineMap with deduplicated lines and classified junctions. Points
        whose flags match no junction kind are left out.

    Raises:
        KeyError: If a block refers to a track missing from the offset tables.
    """
    horizontal: Dict[Line, None] = {}
    vertical: Dict[Line, None] = {}
    flags: Dict[Point, Direction] = defaultdict(lambda: Direction.NONE)

    for block in blocks:
        x_left, _ = column_gap_offsets[block.column]
        _, x_right = column_gap_offsets[block.last_column]
        y_top, _ = row_gap_offsets[block.row]
        _, y_bottom = row_gap_offsets[block.last_row]

        horizontal[((x_left, y_top), (x_right, y_top))] = None
        horizontal[((x_left, y_bottom), (x_right, y_bottom))] = None
        vertical[((x_left, y_top), (x_left, y_bottom))] = None
        vertical[((x_right, y_top), (x_right, y_bottom))] = None

        flags[(x_left, y_top)] |= DOWN | RIGHT
        flags[(x_right, y_top)] |= DOWN | LEFT
        flags[(x_left, y_bottom)] |= UP | RIGHT
        flags[(x_right, y_bottom)] |= UP | LEFT

        # Row gaps crossed by the block: its side lines run straight through.
        for row in range(block.row + 1, block.last_row + 1):
            y_gap, _ = row_gap_offsets[row]
            flags[(x_left, y_gap)] |= UP | DOWN
            flags[(x_right, y_gap)] |= UP | DOWN

        # Column gaps crossed by the block: top and bottom lines run straight through.
        for column in range(block.column + 1, block.last_column + 1):
            x_gap, _ = column_gap_offsets[column]
            flags[(x_gap, y_top)] |= LEFT | RIGHT
            flags[(x_gap, y_bottom)] |= LEFT | RIGHT

    intersects: Dict[Point, JunctionKind] = {}
    for point, point_flags in flags.items():
        kind = classify_junction(point_flags)
        if kind is not None:
            intersects[point] = kind

    return LineMap(
        horizontal_lines=list(horizontal),
        vertical_lines=list(vertical),
        intersects=intersects,
    )


def inset_outer_edges(
    offsets: Offsets, gap_offsets: Offsets, lead: int, trail: int
) -> Offsets:
    """
    Replace the half-gap at the outer edges of one axis with fixed margins.

    The first track's gap interval starts ``lead`` pixels before its content
    and the last track's gap interval ends so the border line sits ``trail``
    pixels after it: a margin of 1 draws the border right against the content.

    Args:
        offsets: Plain offsets for the axis.
        gap_offsets: Gap offsets for the axis.
        lead: Margin before the first track (top or left).
        trail: Margin after the last track (bottom or right).

    Returns:
        New gap offsets with the first and last intervals adjusted.
    """
    first, last = min(offsets), max(offsets)
    inset = dict(gap_offsets)

    _, end = inset[first]
    inset[first] = (offsets[first][0] - lead, end)

    # Read back: with a single track, first and last are the same interval.
    start, _ = inset[last]
    inset[last] = (start, offsets[last][1] + trail - 1)

    return inset


def inset_grid_edges(
    row_offsets: Offsets,
    column_offsets: Offsets,
    row_gap_offsets: Offsets,
    column_gap_offsets: Offsets,
    margin: Sides,
) -> Tuple[Offsets, Offsets]:
    """Apply ``inset_outer_edges`` to both axes. Returns (row, column) gap offsets."""
    return (
        inset_outer_edges(row_offsets, row_gap_offsets, margin.top, margin.bottom),
        inset_outer_edges(column_offsets, column_gap_offsets, margin.left, margin.right),
    )


def _on_segment(point: Point, start: Point, end: Point) -> bool:
    (x, y), (x0, y0), (x1, y1) = point, start, end
    return min(x0, x1) <= x <= max(x0, x1) and min(y0, y1) <= y <= max(y0, y1)
