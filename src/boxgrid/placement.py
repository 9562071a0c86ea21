"""
Placement of blocks on the grid.

Assigns a (row, column) to each block in flow order:

- ``row`` flow fills a row left to right, up to ``limit`` columns, then wraps
  to the next row.
- ``column`` flow fills a column top to bottom, up to ``limit`` rows, then
  wraps to the next column. It is computed as the transpose of row flow.

Cells left empty once every block is placed are filled with 1x1 placeholder
blocks so the occupied region is always a full rectangle::

      flow="row", limit=2      flow="column", limit=2
    ╭───┬───╮                ╭───┬───╮
    │ 1 │ 2 │                │ 1 │ 3 │
    ├───┼───┤                ├───┼───┤
    │ 3 │ · │                │ 2 │ · │
    ╰───┴───╯                ╰───┴───╯
"""

import logging
from dataclasses import dataclass, field, replace
from typing import Hashable, List, Sequence, Set, Tuple

from .models import PLACEHOLDER_ID, Block, LayoutError

logger = logging.getLogger(__name__)

FLOWS = ("row", "column")


@dataclass
class PlacementResult:
    """Result of the placement stage."""

    blocks: List[Block] = field(default_factory=list)
    row_count: int = 0
    column_count: int = 0

    @property
    def placeholders(self) -> List[Block]:
        return [block for block in self.blocks if block.is_placeholder]


def place_blocks(
    blocks: Sequence[Block],
    flow: str = "row",
    limit: int = 1,
    placeholder_id: Hashable = PLACEHOLDER_ID,
) -> PlacementResult:
    """
    Place blocks on the grid by setting their row and column.

    Args:
        blocks: Blocks in flow order. Their spans are respected.
        flow: ``"row"`` or ``"column"``.
        limit: Maximum number of tracks across the flow (columns for row
            flow, rows for column flow). Widened to the largest span if needed.
        placeholder_id: Id given to the blocks that fill empty cells.

    Returns:
        PlacementResult with the placed blocks (input order, then
        placeholders in flow order) and the realised row/column counts.

    Raises:
        LayoutError: On an unknown flow, a limit below 1 or invalid spans.
    """
    if flow not in FLOWS:
        raise LayoutError(f"flow must be 'row' or 'column', got {flow!r}")
    if limit < 1:
        raise LayoutError(f"limit must be >= 1, got {limit}")
    for block in blocks:
        block.validate()

    if flow == "row":
        return _place_flow_row(blocks, limit, placeholder_id)

    # Column flow is row flow on the transposed grid.
    transposed = [_transpose(block) for block in blocks]
    result = _place_flow_row(transposed, limit, placeholder_id)
    return PlacementResult(
        blocks=[_transpose(block) for block in result.blocks],
        row_count=result.column_count,
        column_count=result.row_count,
    )


def _place_flow_row(
    blocks: Sequence[Block], limit: int, placeholder_id: Hashable
) -> PlacementResult:
    """Row-major placement. See place_blocks."""
    column_count = max([limit] + [block.column_span for block in blocks])
    if column_count > limit:
        logger.debug("limit widened from %d to %d to fit spans", limit, column_count)

    occupied: Set[Tuple[int, int]] = set()
    placed: List[Block] = []
    row, column = 0, 0

    for block in blocks:
        row, column = _next_free_cell(block, row, column, column_count, occupied)
        occupied.update(block.cells(row, column))
        placed.append(replace(block, row=row, column=column))
        column += block.column_span

    row_count = max([1] + [block.row + block.row_span for block in placed])

    # Fill every cell not covered by a block so the grid is rectangular.
    for cell_row in range(row_count):
        for cell_column in range(column_count):
            if (cell_row, cell_column) not in occupied:
                placeholder = Block.placeholder(placeholder_id)
                placed.append(replace(placeholder, row=cell_row, column=cell_column))

    logger.debug(
        "placed %d blocks on a %dx%d grid (%d placeholders)",
        len(blocks),
        row_count,
        column_count,
        len(placed) - len(blocks),
    )

    return PlacementResult(blocks=placed, row_count=row_count, column_count=column_count)


def _next_free_cell(
    block: Block,
    row: int,
    column: int,
    column_count: int,
    occupied: Set[Tuple[int, int]],
) -> Tuple[int, int]:
    """
    First cell at or after the cursor where the block fits without overlap.

    Scans left to right, wrapping to the start of the next row when the
    block's column span does not fit before ``column_count``.
    """
    while True:
        if column + block.column_span > column_count:
            row, column = row + 1, 0
        elif any(cell in occupied for cell in block.cells(row, column)):
            column += 1
        else:
            return row, column


def _transpose(block: Block) -> Block:
    """Swap rows and columns of a block (spans and coordinates)."""
    return replace(
        block,
        row_span=block.column_span,
        column_span=block.row_span,
        row=block.column,
        column=block.row,
    )
