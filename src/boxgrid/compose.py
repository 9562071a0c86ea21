"""
Ready-made compositions of canvases.

Every function here takes content canvases, picks grid options suited to the
composition and paints the grid. Any ``GridOptions`` field can be overridden
by keyword, and ``symbols`` swaps the glyph table used for lines.

Examples (content canvases made from the strings and numbers shown)::

    grid(["a", "b", "c"], limit=2)   pretty_list([1, 2])   plain_list([1, 2, 3])
    ╭───┬───╮                        ╭      ╮               [1, 2, 3]
    │ a │ b │                        │ 1  2 │
    ├───┼───┤                        ╰      ╯
    │ c │   │
    ╰───┴───╯
"""

from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple

from .canvas import Canvas
from .grid import GridOptions, GridPainter, LinesRenderer
from .lines import LineMap
from .models import Sides
from .paint import bracket, dot_at, grid_lines

Symbols = Optional[Dict[str, str]]
Pairs = Iterable[Tuple[Canvas, Canvas]]

NO_PADDING = Sides()
SIDE_PADDING = Sides(top=0, right=1, bottom=0, left=1)
BORDER = Sides.uniform(1)
INLINE_BORDER = Sides(top=0, right=1, bottom=0, left=1)


def _painter(defaults: Dict[str, Any], overrides: Dict[str, Any]) -> GridPainter:
    merged = dict(defaults)
    merged.update(overrides)
    return GridPainter(GridOptions().replace(**merged))


def _lines(symbols: Symbols) -> LinesRenderer:
    def render(line_map: LineMap) -> Canvas:
        return grid_lines(line_map, symbols)

    return render


def _pad_rows(rows: Sequence[Sequence[Canvas]]) -> Tuple[List[Canvas], int]:
    """Flatten rows, filling short rows with empty canvases. Returns (cells, columns)."""
    columns = max([len(row) for row in rows] + [1])
    cells = []
    for row in rows:
        cells.extend(row)
        cells.extend(Canvas.empty() for _ in range(columns - len(row)))
    return cells, columns


def _interleave(canvases: Sequence[Canvas], separator: str) -> List[Canvas]:
    result: List[Canvas] = []
    for index, canvas in enumerate(canvases):
        if index:
            result.append(Canvas.from_string(separator))
        result.append(canvas)
    return result


# ----------------------------------------------------------------------
# Grids
# ----------------------------------------------------------------------


def grid(canvases: Sequence[Canvas], symbols: Symbols = None, **options: Any) -> Canvas:
    """
    Lay out canvases in a grid with every cell boxed.

    Args:
        canvases: Content in flow order.
        symbols: Glyph table for the lines.
        **options: GridOptions overrides (``limit`` sets the number of columns).

    Returns:
        The painted grid.
    """
    defaults = {"align_items": "top", "pad_items": SIDE_PADDING, "outer_margin": BORDER}
    return _painter(defaults, options).paint(canvases, _lines(symbols))


def grid_layout(canvases: Sequence[Canvas], **options: Any) -> Canvas:
    """Lay out canvases in a grid without lines."""
    defaults = {"align_items": "top", "pad_items": NO_PADDING}
    return _painter(defaults, options).paint(canvases)


def matrix(rows: Sequence[Sequence[Canvas]], symbols: Symbols = None, **options: Any) -> Canvas:
    """
    Lay out rows of canvases with every cell boxed.

    Short rows are filled with empty cells.
    """
    cells, columns = _pad_rows(rows)
    defaults = {
        "limit": columns,
        "align_items": "top",
        "pad_items": SIDE_PADDING,
        "outer_margin": BORDER,
    }
    return _painter(defaults, options).paint(cells, _lines(symbols))


def matrix_layout(rows: Sequence[Sequence[Canvas]], **options: Any) -> Canvas:
    """Lay out rows of canvases without lines."""
    cells, columns = _pad_rows(rows)
    defaults = {"limit": columns, "align_items": "top", "pad_items": NO_PADDING}
    return _painter(defaults, options).paint(cells)


def math_matrix(rows: Sequence[Sequence[Canvas]], symbols: Symbols = None, **options: Any) -> Canvas:
    """
    Lay out rows of canvases between tall square brackets, right-justified::

        ╭       ╮
        │ 1   2 │
        │       │
        │ 3   4 │
        ╰       ╯
    """
    cells, columns = _pad_rows(rows)
    defaults = {
        "limit": columns,
        "pad_items": SIDE_PADDING,
        "outer_margin": BORDER,
        "align_items": "center",
        "justify_items": "right",
    }
    return _painter(defaults, options).paint(cells, _bracketed(False, symbols))


def table(
    headers: Sequence[Canvas],
    rows: Sequence[Sequence[Canvas]],
    symbols: Symbols = None,
    **options: Any,
) -> Canvas:
    """
    Lay out a table with a header row.

    Only the top border, the line under the header and the bottom border are
    drawn across; column separators run the full height.

    Args:
        headers: One canvas per column.
        rows: Data rows. Short rows are filled with empty cells.
        symbols: Glyph table for the lines.
        **options: GridOptions overrides.

    Returns:
        The painted table.
    """
    # The empty second row sits where the header separator is drawn.
    cells, columns = _pad_rows([list(headers), []] + [list(row) for row in rows])

    def render(line_map: LineMap) -> Canvas:
        ys = sorted({start[1] for start, _ in line_map.horizontal_lines})
        keep = {ys[0], ys[-1]}
        if len(ys) > 1:
            keep.add(ys[1])
        return grid_lines(line_map.filter_rows(keep), symbols)

    defaults = {
        "limit": columns,
        "row_gap": 0,
        "align_items": "top",
        "pad_items": SIDE_PADDING,
        "outer_margin": BORDER,
    }
    return _painter(defaults, options).paint(cells, render)


def box(canvas: Canvas, symbols: Symbols = None, **options: Any) -> Canvas:
    """Draw a box around a canvas."""
    defaults = {"pad_items": SIDE_PADDING, "outer_margin": BORDER}
    return _painter(defaults, options).paint([canvas], _lines(symbols))


def card(label: Canvas, message: Canvas, symbols: Symbols = None, **options: Any) -> Canvas:
    """A one-column table: ``label`` as the header, ``message`` below it."""
    return table([label], [[message]], symbols, **options)


# ----------------------------------------------------------------------
# Collections
# ----------------------------------------------------------------------


def _bracketed(curly: bool, symbols: Symbols) -> LinesRenderer:
    def render(line_map: LineMap) -> Canvas:
        x0, y0, x1, y1 = line_map.bounds()
        return Canvas.overlay(
            [
                bracket((x0, y0), (x0, y1), "left", curly, symbols),
                bracket((x1, y0), (x1, y1), "right", curly, symbols),
            ]
        )

    return render


def _delimited(opening: str, closing: str) -> LinesRenderer:
    def render(line_map: LineMap) -> Canvas:
        x0, y0, x1, y1 = line_map.bounds()
        y_center = (y0 + y1) // 2
        return Canvas.overlay([dot_at((x0, y_center), opening), dot_at((x1, y_center), closing)])

    return render


_PRETTY_DEFAULTS = {
    "flow": "column",
    "limit": 1,
    "column_gap": 0,
    "row_gap": 1,
    "pad_items": SIDE_PADDING,
    "outer_margin": BORDER,
    "align_items": "center",
    "justify_items": "center",
}

_PLAIN_DEFAULTS = {
    "flow": "column",
    "limit": 1,
    "column_gap": 0,
    "pad_items": NO_PADDING,
    "outer_margin": INLINE_BORDER,
    "align_items": "bottom",
}


def pretty_list(canvases: Sequence[Canvas], symbols: Symbols = None, **options: Any) -> Canvas:
    """Canvases side by side between tall square brackets."""
    return _painter(_PRETTY_DEFAULTS, options).paint(canvases, _bracketed(False, symbols))


def pretty_tuple(canvases: Sequence[Canvas], symbols: Symbols = None, **options: Any) -> Canvas:
    """Canvases side by side between tall brackets with a tick halfway down."""
    return _painter(_PRETTY_DEFAULTS, options).paint(canvases, _bracketed(True, symbols))


def pretty_map(pairs: Pairs, symbols: Symbols = None, **options: Any) -> Canvas:
    """
    Key/value pairs as a two-column boxed matrix.

    Args:
        pairs: (key canvas, value canvas) pairs, as made by
            ``convert.from_mapping``.
        symbols: Glyph table for the lines.
        **options: GridOptions overrides.
    """
    options.setdefault("align_items", "center")
    rows = [[key, value] for key, value in pairs]
    return matrix(rows, symbols, **options)


def plain_list(canvases: Sequence[Canvas], **options: Any) -> Canvas:
    """Canvases on one line, comma separated, in square brackets: ``[1, 2, 3]``."""
    return _painter(_PLAIN_DEFAULTS, options).paint(
        _interleave(canvases, ", "), _delimited("[", "]")
    )


def plain_tuple(canvases: Sequence[Canvas], **options: Any) -> Canvas:
    """Canvases on one line, comma separated, in parentheses: ``(1, 2, 3)``."""
    return _painter(_PLAIN_DEFAULTS, options).paint(
        _interleave(canvases, ", "), _delimited("(", ")")
    )


def plain_map(pairs: Pairs, **options: Any) -> Canvas:
    """Key/value pairs on one line in braces: ``{color: red, size: 2}``."""
    cells: List[Canvas] = []
    for index, (key, value) in enumerate(pairs):
        if index:
            cells.append(Canvas.from_string(", "))
        cells.extend([key, Canvas.from_string(": "), value])
    return _painter(_PLAIN_DEFAULTS, options).paint(cells, _delimited("{", "}"))
