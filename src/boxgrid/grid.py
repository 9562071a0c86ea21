"""
Grid orchestrator.

Runs the layout pipeline over a sequence of content canvases:

1. blocks     - one Block per canvas, sized from the canvas plus item padding
2. placement  - grid coordinates for every block, placeholders in empty cells
3. sizing     - track sizes, offset tables and block sizes
4. positions  - pixel origin of every block
5. lines      - separator lines and junctions (only when lines are drawn)
6. composed   - canvases moved into place with the lines drawn on top

Example:
    >>> painter = GridPainter(GridOptions(limit=2, pad_items=Sides(0, 1, 0, 1),
    ...                                   outer_margin=Sides.uniform(1)))
    >>> canvases = [Canvas.from_string(s) for s in "abc"]
    >>> print(painter.paint(canvases, grid_lines))
    ╭───┬───╮
    │ a │ b │
    ├───┼───┤
    │ c │   │
    ╰───┴───╯
"""

import dataclasses
import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Hashable, List, Optional, Sequence

from .canvas import Canvas
from .lines import LineMap, inset_grid_edges, make_lines
from .models import PLACEHOLDER_ID, Block, LayoutError, Offsets, Sides, TrackSizes
from .offsets import translate_offsets
from .placement import FLOWS, place_blocks
from .positioning import ALIGN_VALUES, JUSTIFY_VALUES, position_blocks
from .sizing import size_blocks
from .tracer import LayoutTrace

logger = logging.getLogger(__name__)

LinesRenderer = Callable[[LineMap], Canvas]


@dataclass
class GridOptions:
    """
    Configuration of a grid layout.

    Attributes:
        flow: ``"row"`` fills rows first, ``"column"`` fills columns first.
        limit: Maximum number of tracks across the flow.
        row_gap: Pixels between rows.
        column_gap: Pixels between columns.
        pad_items: Padding around every item's content.
        outer_margin: Distance from the outermost content to the border
            lines. ``None`` keeps half a gap. Only used when lines are drawn.
        justify_items: Default horizontal placement: left, center or right.
        align_items: Default vertical placement: top, center or bottom.
        placeholder_id: Id of the blocks that fill empty cells.
    """

    flow: str = "row"
    limit: int = 1
    row_gap: int = 1
    column_gap: int = 1
    pad_items: Sides = field(default_factory=Sides)
    outer_margin: Optional[Sides] = None
    justify_items: str = "left"
    align_items: str = "top"
    placeholder_id: Hashable = PLACEHOLDER_ID

    def __post_init__(self):
        self.pad_items = Sides.of(self.pad_items)
        if self.outer_margin is not None:
            self.outer_margin = Sides.of(self.outer_margin)

    def validate(self) -> None:
        """Raise LayoutError if any option is out of range."""
        if self.flow not in FLOWS:
            raise LayoutError(f"flow must be one of {FLOWS}, got {self.flow!r}")
        if not isinstance(self.limit, int) or self.limit < 1:
            raise LayoutError(f"limit must be a positive integer, got {self.limit!r}")
        if self.row_gap < 0 or self.column_gap < 0:
            raise LayoutError(
                f"gaps must be >= 0, got row_gap={self.row_gap}, column_gap={self.column_gap}"
            )
        if self.justify_items not in JUSTIFY_VALUES:
            raise LayoutError(
                f"justify_items must be one of {JUSTIFY_VALUES}, got {self.justify_items!r}"
            )
        if self.align_items not in ALIGN_VALUES:
            raise LayoutError(
                f"align_items must be one of {ALIGN_VALUES}, got {self.align_items!r}"
            )
        self.pad_items.validate("pad_items")
        if self.outer_margin is not None:
            self.outer_margin.validate("outer_margin")

    def replace(self, **changes: Any) -> "GridOptions":
        """Return a copy with the given fields changed."""
        unknown = set(changes) - {f.name for f in dataclasses.fields(self)}
        if unknown:
            raise LayoutError(f"Unknown grid options: {sorted(unknown)}")
        return dataclasses.replace(self, **changes)


@dataclass
class GridLayout:
    """
    Result of laying out a grid.

    Attributes:
        blocks: Positioned blocks, caller blocks first, then placeholders.
        row_count: Number of rows.
        column_count: Number of columns.
        row_sizes: Height of every row.
        column_sizes: Width of every column.
        row_offsets: Plain row intervals.
        column_offsets: Plain column intervals.
        row_gap_offsets: Row intervals reaching into the gaps.
        column_gap_offsets: Column intervals reaching into the gaps.
        line_map: Separators, when the layout was made for drawing lines.
    """

    blocks: List[Block] = field(default_factory=list)
    row_count: int = 0
    column_count: int = 0
    row_sizes: TrackSizes = field(default_factory=dict)
    column_sizes: TrackSizes = field(default_factory=dict)
    row_offsets: Offsets = field(default_factory=dict)
    column_offsets: Offsets = field(default_factory=dict)
    row_gap_offsets: Offsets = field(default_factory=dict)
    column_gap_offsets: Offsets = field(default_factory=dict)
    line_map: Optional[LineMap] = None

    @property
    def content_blocks(self) -> List[Block]:
        return [block for block in self.blocks if not block.is_placeholder]

    def block(self, block_id: Hashable) -> Block:
        """
        Find a caller block by id.

        Raises:
            KeyError: If no caller block has that id.
        """
        for block in self.content_blocks:
            if block.id == block_id:
                return block
        raise KeyError(block_id)


def layout_blocks(
    blocks: Sequence[Block],
    options: Optional[GridOptions] = None,
    with_lines: bool = False,
    trace: Optional[LayoutTrace] = None,
) -> GridLayout:
    """
    Lay out blocks whose intrinsic sizes (padding included) are already set.

    Args:
        blocks: Blocks in flow order.
        options: Grid options; defaults to ``GridOptions()``.
        with_lines: Also build the line map. Outer margins are applied and
            every table is shifted so the first gap interval on each axis
            starts at 0.
        trace: Trace to record stages into.

    Returns:
        GridLayout with every stage's results.

    Raises:
        LayoutError: If the options or blocks are invalid.
    """
    options = options or GridOptions()
    options.validate()

    placement = place_blocks(blocks, options.flow, options.limit, options.placeholder_id)
    if trace is not None:
        trace.add_stage(
            "placement",
            {
                "row_count": placement.row_count,
                "column_count": placement.column_count,
                "cells": [(block.id, block.row, block.column) for block in placement.blocks],
                "placeholders": len(placement.placeholders),
            },
        )

    sizing = size_blocks(
        placement.blocks,
        placement.row_count,
        placement.column_count,
        options.row_gap,
        options.column_gap,
    )
    row_offsets, column_offsets = sizing.row_offsets, sizing.column_offsets
    row_gap_offsets, column_gap_offsets = sizing.row_gap_offsets, sizing.column_gap_offsets
    if trace is not None:
        trace.add_stage(
            "sizing",
            {
                "row_sizes": sizing.row_sizes,
                "column_sizes": sizing.column_sizes,
                "row_offsets": row_offsets,
                "column_offsets": column_offsets,
            },
        )

    if with_lines:
        if options.outer_margin is not None:
            row_gap_offsets, column_gap_offsets = inset_grid_edges(
                row_offsets,
                column_offsets,
                row_gap_offsets,
                column_gap_offsets,
                options.outer_margin,
            )
        # Border lines start at 0 on both axes.
        dy = -row_gap_offsets[0][0]
        dx = -column_gap_offsets[0][0]
        row_offsets = translate_offsets(row_offsets, dy)
        row_gap_offsets = translate_offsets(row_gap_offsets, dy)
        column_offsets = translate_offsets(column_offsets, dx)
        column_gap_offsets = translate_offsets(column_gap_offsets, dx)

    positioned = position_blocks(
        sizing.blocks,
        row_offsets,
        column_offsets,
        options.pad_items,
        options.justify_items,
        options.align_items,
    )
    if trace is not None:
        trace.add_stage(
            "positions",
            {"origins": [(block.id, block.x, block.y) for block in positioned]},
        )

    line_map = None
    if with_lines:
        line_map = make_lines(positioned, row_gap_offsets, column_gap_offsets)
        if trace is not None:
            trace.add_stage(
                "lines",
                {
                    "horizontal_lines": len(line_map.horizontal_lines),
                    "vertical_lines": len(line_map.vertical_lines),
                    "intersects": len(line_map.intersects),
                },
            )

    logger.debug(
        "laid out %d blocks on a %dx%d grid",
        len(blocks),
        placement.row_count,
        placement.column_count,
    )

    return GridLayout(
        blocks=positioned,
        row_count=placement.row_count,
        column_count=placement.column_count,
        row_sizes=sizing.row_sizes,
        column_sizes=sizing.column_sizes,
        row_offsets=row_offsets,
        column_offsets=column_offsets,
        row_gap_offsets=row_gap_offsets,
        column_gap_offsets=column_gap_offsets,
        line_map=line_map,
    )


class GridPainter:
    """
    Lay out canvases on a grid and compose them into one canvas.

    Canvases are identified by their index in the input sequence. A canvas
    may carry ``row_span``, ``column_span``, ``justify_self`` and
    ``align_self`` in its metadata.

    Example:
        >>> painter = GridPainter(limit=2)
        >>> painter.paint([Canvas.from_string(s) for s in "abc"]).render(trim=True)
        'a b\n\nc'
    """

    def __init__(self, options: Optional[GridOptions] = None, **overrides: Any):
        """
        Initialize the painter.

        Args:
            options: Grid options; defaults to ``GridOptions()``.
            **overrides: Individual option fields to change.

        Raises:
            LayoutError: If the resulting options are invalid.
        """
        options = options or GridOptions()
        if overrides:
            options = options.replace(**overrides)
        options.validate()
        self.options = options
        self._trace: Optional[LayoutTrace] = None

    def blocks_for(self, canvases: Sequence[Canvas]) -> List[Block]:
        """One block per canvas, with the item padding added to its size."""
        pad = self.options.pad_items
        blocks = []
        for index, canvas in enumerate(canvases):
            blocks.append(
                Block(
                    id=index,
                    row_span=canvas.get_meta("row_span", 1),
                    column_span=canvas.get_meta("column_span", 1),
                    intrinsic_width=canvas.intrinsic_width() + pad.horizontal,
                    intrinsic_height=canvas.intrinsic_height() + pad.vertical,
                    meta={
                        "justify_self": canvas.get_meta("justify_self"),
                        "align_self": canvas.get_meta("align_self"),
                    },
                )
            )
        return blocks

    def layout(
        self,
        canvases: Sequence[Canvas],
        with_lines: bool = False,
        trace: Optional[LayoutTrace] = None,
    ) -> GridLayout:
        """
        Lay out canvases without composing them.

        Args:
            canvases: Content canvases in flow order.
            with_lines: Also build the line map.
            trace: Trace to record stages into.

        Returns:
            GridLayout; caller block ids are canvas indices.
        """
        blocks = self.blocks_for(canvases)
        if trace is not None:
            trace.add_stage(
                "blocks",
                {
                    "count": len(blocks),
                    "sizes": {b.id: (b.intrinsic_width, b.intrinsic_height) for b in blocks},
                },
            )
        return layout_blocks(blocks, self.options, with_lines, trace)

    def paint(
        self,
        canvases: Sequence[Canvas],
        lines_renderer: Optional[LinesRenderer] = None,
        debug: bool = False,
    ) -> Canvas:
        """
        Lay out canvases and compose them.

        Args:
            canvases: Content canvases in flow order.
            lines_renderer: Turns the line map into a canvas drawn over the
                content. ``None`` draws no lines.
            debug: Record a LayoutTrace, available from ``get_trace()``.

        Returns:
            The composed canvas.
        """
        trace = None
        if debug:
            trace = LayoutTrace(options=dataclasses.asdict(self.options))
        self._trace = trace

        canvases = list(canvases)
        layout = self.layout(canvases, with_lines=lines_renderer is not None, trace=trace)

        layers = [
            canvases[block.id].translate_origin().translate(block.x, block.y)
            for block in layout.content_blocks
        ]
        if lines_renderer is not None:
            layers.append(lines_renderer(layout.line_map))

        composed = Canvas.overlay(layers)

        if trace is not None:
            trace.add_blocks(layout.blocks)
            trace.add_stage(
                "composed",
                {"width": composed.width, "height": composed.height},
                canvas=composed,
            )

        return composed

    def get_trace(self) -> Optional[LayoutTrace]:
        """
        Get the trace from the last paint with ``debug=True``.

        Returns None if the last paint ran without debug.
        """
        return self._trace


def layout_grid(
    canvases: Sequence[Canvas],
    options: Optional[GridOptions] = None,
    with_lines: bool = False,
    **overrides: Any,
) -> GridLayout:
    """Shortcut for ``GridPainter(options, **overrides).layout(canvases, with_lines)``."""
    return GridPainter(options, **overrides).layout(canvases, with_lines)


def paint_grid(
    canvases: Sequence[Canvas],
    lines_renderer: Optional[LinesRenderer] = None,
    options: Optional[GridOptions] = None,
    **overrides: Any,
) -> Canvas:
    """Shortcut for ``GridPainter(options, **overrides).paint(canvases, lines_renderer)``."""
    return GridPainter(options, **overrides).paint(canvases, lines_renderer)
