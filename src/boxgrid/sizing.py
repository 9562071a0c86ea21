"""
Sizing of rows and columns.

Resolves the size of every track from the intrinsic sizes of the blocks
placed on it, then gives each block its final width and height::

         ╭───┬───╮ <- row_gap_offsets[0][0]
  row 0  │ 1 │ 2 │ <- row_offsets[0] = (start, end)
         ├───┼───┤ <- row_gap_offsets[0][1] == row_gap_offsets[1][0]
  row 1  │ 3 │   │
         ╰───┴───╯

Per axis:

1. every track starts at size 1;
2. blocks spanning one track raise it to their intrinsic size;
3. blocks spanning several tracks that still do not fit add the missing
   pixels one at a time, round-robin from the first spanned track.
"""

from dataclasses import dataclass, field, replace
from typing import Iterable, List, Sequence, Tuple

from .models import Block, LayoutError, Offsets, TrackSizes
from .offsets import offsets_from_sizes


@dataclass
class SizingResult:
    """Result of the sizing stage."""

    blocks: List[Block] = field(default_factory=list)
    row_sizes: TrackSizes = field(default_factory=dict)
    column_sizes: TrackSizes = field(default_factory=dict)
    row_offsets: Offsets = field(default_factory=dict)
    column_offsets: Offsets = field(default_factory=dict)
    row_gap_offsets: Offsets = field(default_factory=dict)
    column_gap_offsets: Offsets = field(default_factory=dict)


def size_blocks(
    blocks: Sequence[Block],
    row_count: int,
    column_count: int,
    row_gap: int = 0,
    column_gap: int = 0,
) -> SizingResult:
    """
    Set the width and height of each placed block.

    Args:
        blocks: Placed blocks (row and column set).
        row_count: Number of rows in the grid.
        column_count: Number of columns in the grid.
        row_gap: Pixels between rows.
        column_gap: Pixels between columns.

    Returns:
        SizingResult with sized blocks, track sizes and the four offset tables.

    Raises:
        LayoutError: If a block is unplaced or reaches outside the grid.
    """
    for block in blocks:
        _check_block(block, row_count, column_count)

    row_sizes = track_sizes(
        ((block.row, block.row_span, block.intrinsic_height) for block in blocks),
        row_count,
        row_gap,
    )
    column_sizes = track_sizes(
        ((block.column, block.column_span, block.intrinsic_width) for block in blocks),
        column_count,
        column_gap,
    )

    sized = [
        replace(
            block,
            width=span_size(column_sizes, block.column, block.column_span, column_gap),
            height=span_size(row_sizes, block.row, block.row_span, row_gap),
        )
        for block in blocks
    ]

    row_offsets, row_gap_offsets = offsets_from_sizes(row_sizes, row_gap)
    column_offsets, column_gap_offsets = offsets_from_sizes(column_sizes, column_gap)

    return SizingResult(
        blocks=sized,
        row_sizes=row_sizes,
        column_sizes=column_sizes,
        row_offsets=row_offsets,
        column_offsets=column_offsets,
        row_gap_offsets=row_gap_offsets,
        column_gap_offsets=column_gap_offsets,
    )


def track_sizes(
    spans: Iterable[Tuple[int, int, int]], count: int, gap: int
) -> TrackSizes:
    """
    Resolve the size of each track on one axis.

    Args:
        spans: (first track, span, intrinsic size) for each block.
        count: Number of tracks.
        gap: Pixels between tracks, counted inside multi-track spans.

    Returns:
        Mapping of track index to size. Every track is at least 1.
    """
    sizes = {track: 1 for track in range(count)}
    spans = list(spans)

    # Single-track blocks first, a plain max per track.
    for start, span, size in spans:
        if span == 1:
            sizes[start] = max(sizes[start], size)

    # Then spanning blocks, topping up whatever is still missing.
    for start, span, size in spans:
        if span == 1:
            continue
        difference = size - span_size(sizes, start, span, gap)
        for i in range(max(difference, 0)):
            sizes[start + i % span] += 1

    return sizes


def span_size(sizes: TrackSizes, start: int, span: int, gap: int) -> int:
    """Total size of ``span`` tracks from ``start``, including the gaps between them."""
    return sum(sizes[track] for track in range(start, start + span)) + (span - 1) * gap


def _check_block(block: Block, row_count: int, column_count: int) -> None:
    block.validate()
    if not block.is_placed:
        raise LayoutError(f"Block {block.id!r} has not been placed")
    if block.row < 0 or block.last_row >= row_count:
        raise LayoutError(
            f"Block {block.id!r} covers rows {block.row}..{block.last_row}, "
            f"grid has {row_count}"
        )
    if block.column < 0 or block.last_column >= column_count:
        raise LayoutError(
            f"Block {block.id!r} covers columns {block.column}..{block.last_column}, "
            f"grid has {column_count}"
        )
