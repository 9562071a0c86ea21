"""
boxgrid - Box-drawn text diagrams from Python values

Lays out blocks of text on a grid, sizes rows and columns to fit them, and
draws box-drawing separators with the right junction at every crossing.

Example:
    >>> import boxgrid
    >>> print(boxgrid.grid(["a", "b", "c"], limit=2))
    ╭───┬───╮
    │ a │ b │
    ├───┼───┤
    │ c │   │
    ╰───┴───╯

    >>> print(boxgrid.table(["Name", "Age"], [["Alice", 23], ["Bob", 27]]))
    ╭───────┬─────╮
    │ Name  │ Age │
    ├───────┼─────┤
    │ Alice │ 23  │
    │ Bob   │ 27  │
    ╰───────┴─────╯

Debug Mode Example:
    >>> painter = GridPainter(limit=2)
    >>> canvas = painter.paint(from_list(["a", "b", "c"]), grid_lines, debug=True)
    >>> print(painter.get_trace().summary())
"""

from typing import Any, Iterable, Sequence

from . import compose
from .canvas import Box, Canvas
from .convert import from_list, from_mapping, from_matrix, to_canvas
from .debug import CanvasInspector, LineMapInspector, visual_diff
from .export import DiagramExporter
from .grid import GridLayout, GridOptions, GridPainter, layout_blocks, layout_grid, paint_grid
from .lines import Direction, JunctionKind, LineMap, classify_junction, make_lines
from .models import PLACEHOLDER_ID, Block, LayoutError, Sides
from .offsets import offsets_from_sizes
from .paint import bracket, dot_at, grid_lines, line
from .placement import PlacementResult, place_blocks
from .sizing import SizingResult, size_blocks, track_sizes
from .symbols import BOX_DOUBLE, BOX_HEAVY, BOX_LIGHT, BOX_LIGHT_ARC, get_symbols
from .tracer import BlockRecord, LayoutTrace, PipelineStage

__version__ = "0.1.0"


def pretty(value: Any) -> Canvas:
    """Draw any value: containers as bracketed or boxed layouts, the rest as text."""
    return to_canvas(value)


def grid(values: Iterable[Any], **options: Any) -> Canvas:
    """Values in a grid with every cell boxed. See ``compose.grid``."""
    return compose.grid(from_list(values), **options)


def grid_layout(values: Iterable[Any], **options: Any) -> Canvas:
    """Values in a grid without lines. See ``compose.grid_layout``."""
    return compose.grid_layout(from_list(values), **options)


def matrix(rows: Iterable[Iterable[Any]], **options: Any) -> Canvas:
    """Rows of values with every cell boxed. See ``compose.matrix``."""
    return compose.matrix(from_matrix(rows), **options)


def table(headers: Sequence[Any], rows: Iterable[Iterable[Any]], **options: Any) -> Canvas:
    """A table with a header row. See ``compose.table``."""
    return compose.table(from_list(headers), from_matrix(rows), **options)


__all__ = [
    # Main API
    "pretty",
    "grid",
    "grid_layout",
    "matrix",
    "table",
    "compose",
    # Layout engine
    "Block",
    "Sides",
    "LayoutError",
    "PLACEHOLDER_ID",
    "GridOptions",
    "GridLayout",
    "GridPainter",
    "layout_blocks",
    "layout_grid",
    "paint_grid",
    "offsets_from_sizes",
    "place_blocks",
    "PlacementResult",
    "size_blocks",
    "SizingResult",
    "track_sizes",
    "make_lines",
    "classify_junction",
    "LineMap",
    "Direction",
    "JunctionKind",
    # Canvas and painting
    "Canvas",
    "Box",
    "dot_at",
    "line",
    "grid_lines",
    "bracket",
    "get_symbols",
    "BOX_LIGHT",
    "BOX_LIGHT_ARC",
    "BOX_HEAVY",
    "BOX_DOUBLE",
    # Conversion
    "to_canvas",
    "from_list",
    "from_matrix",
    "from_mapping",
    # Export
    "DiagramExporter",
    # Debug/Tracing
    "LayoutTrace",
    "PipelineStage",
    "BlockRecord",
    "CanvasInspector",
    "LineMapInspector",
    "visual_diff",
]
