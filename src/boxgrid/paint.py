"""
Painting primitives.

Small functions that return canvases: single dots, straight and diagonal
lines, brackets, and the full set of grid separators described by a
``LineMap``.
"""

from typing import Dict, List, Optional

from .canvas import Canvas
from .lines import LineMap
from .models import Point
from .symbols import MISSING, get_symbols


def dot_at(point: Point, filler: str = "·") -> Canvas:
    """Canvas with a single character at ``point``."""
    return Canvas.from_points(filler, [point])


def line(p1: Point, p2: Point, filler: str = "·") -> Canvas:
    """
    Canvas with a line from ``p1`` to ``p2``, both endpoints included.

    Axis-aligned lines are straight runs; anything else is plotted with
    Bresenham's algorithm.
    """
    return Canvas.from_points(filler, line_points(p1, p2))


def line_points(p1: Point, p2: Point) -> List[Point]:
    """Points covered by a line from ``p1`` to ``p2``."""
    (x0, y0), (x1, y1) = p1, p2
    if p1 == p2:
        return [p1]
    if y0 == y1:
        return [(x, y0) for x in range(min(x0, x1), max(x0, x1) + 1)]
    if x0 == x1:
        return [(x0, y) for y in range(min(y0, y1), max(y0, y1) + 1)]
    return bresenham(p1, p2)


def bresenham(p1: Point, p2: Point) -> List[Point]:
    """
    Bresenham line from ``p1`` to ``p2``.

    The line is always walked along its major axis from the lower to the
    higher coordinate, so the same pair of points gives the same pixels in
    either order.

    >>> bresenham((0, 1), (6, 4))
    [(0, 1), (1, 1), (2, 2), (3, 2), (4, 3), (5, 3), (6, 4)]
    """
    (x0, y0), (x1, y1) = p1, p2
    low_slope = abs(y1 - y0) < abs(x1 - x0)

    # Work in (major, minor) coordinates.
    if low_slope:
        a0, b0, a1, b1 = x0, y0, x1, y1
    else:
        a0, b0, a1, b1 = y0, x0, y1, x1
    if a0 > a1:
        a0, b0, a1, b1 = a1, b1, a0, b0

    da = a1 - a0
    db = abs(b1 - b0)
    step = 1 if b1 > b0 else -1
    error = 2 * db - da

    points = []
    b = b0
    for a in range(a0, a1 + 1):
        points.append((a, b) if low_slope else (b, a))
        if error > 0:
            b += step
            error += 2 * (db - da)
        else:
            error += 2 * db
    return points


def grid_lines(line_map: LineMap, symbols: Optional[Dict[str, str]] = None) -> Canvas:
    """
    Paint a line map.

    Vertical lines go down first, then horizontal lines over them, then the
    junction glyphs on top of both.

    Args:
        line_map: Lines and junctions to draw.
        symbols: Glyph table; defaults to light lines with arc corners.

    Returns:
        Canvas with the separators drawn.
    """
    table = symbols if symbols is not None else get_symbols()
    vertical = table.get("vertical", MISSING)
    horizontal = table.get("horizontal", MISSING)

    layers = [line(p1, p2, vertical) for p1, p2 in line_map.vertical_lines]
    layers += [line(p1, p2, horizontal) for p1, p2 in line_map.horizontal_lines]
    layers += [
        dot_at(point, table.get(kind.value, MISSING))
        for point, kind in line_map.intersects.items()
    ]
    return Canvas.overlay(layers)


def bracket(
    top: Point,
    bottom: Point,
    side: str = "left",
    curly: bool = False,
    symbols: Optional[Dict[str, str]] = None,
) -> Canvas:
    """
    Paint a vertical bracket from ``top`` to ``bottom``.

    Args:
        top: Top end of the bracket.
        bottom: Bottom end, directly below ``top``.
        side: ``"left"`` opens to the right, ``"right"`` opens to the left.
        curly: Add a tick pointing outward halfway down.
        symbols: Glyph table; defaults to light lines with arc corners.

    Returns:
        Canvas with the bracket drawn.

    Raises:
        ValueError: If ``side`` is neither ``"left"`` nor ``"right"``.
    """
    if side not in ("left", "right"):
        raise ValueError(f"side must be 'left' or 'right', got {side!r}")

    table = symbols if symbols is not None else get_symbols()
    top_corner, bottom_corner, tick = {
        "left": ("down_and_right", "up_and_right", "vertical_and_left"),
        "right": ("down_and_left", "up_and_left", "vertical_and_right"),
    }[side]

    layers = [
        line(top, bottom, table.get("vertical", MISSING)),
        dot_at(top, table.get(top_corner, MISSING)),
        dot_at(bottom, table.get(bottom_corner, MISSING)),
    ]
    if curly:
        x, y0 = top
        _, y1 = bottom
        layers.append(dot_at((x, (y0 + y1) // 2), table.get(tick, MISSING)))

    return Canvas.overlay(layers)
