"""
Pixel positioning of sized blocks.

A block's content origin is the start of its first track, shifted inside the
block's resolved area by justification (horizontal) and alignment (vertical)
and by the item padding on the leading side.

A block may override the grid-wide default through its metadata:
``block.meta["justify_self"]`` and ``block.meta["align_self"]``.
"""

from dataclasses import replace
from typing import List, Sequence

from .models import Block, LayoutError, Offsets, Sides

JUSTIFY_VALUES = ("left", "center", "right")
ALIGN_VALUES = ("top", "center", "bottom")


def justify_offset(justify: str, size: int, content: int, before: int, after: int) -> int:
    """
    Horizontal shift of content inside an area.

    Args:
        justify: ``"left"``, ``"center"`` or ``"right"``.
        size: Width of the area.
        content: Width of the content, padding excluded.
        before: Padding on the left.
        after: Padding on the right.

    Returns:
        Offset of the content from the left edge of the area. Centering
        rounds the free space on the left up.
    """
    if justify == "left":
        return before
    if justify == "right":
        return size - content - after
    if justify == "center":
        free = size - before - after - content
        return before + -(-free // 2)
    raise LayoutError(f"justify must be one of {JUSTIFY_VALUES}, got {justify!r}")


def align_offset(align: str, size: int, content: int, before: int, after: int) -> int:
    """
    Vertical shift of content inside an area.

    Same as ``justify_offset`` for ``"top"``/``"center"``/``"bottom"``, except
    centering rounds the free space above down.
    """
    if align == "top":
        return before
    if align == "bottom":
        return size - content - after
    if align == "center":
        free = size - before - after - content
        return before + free // 2
    raise LayoutError(f"align must be one of {ALIGN_VALUES}, got {align!r}")


def position_blocks(
    blocks: Sequence[Block],
    row_offsets: Offsets,
    column_offsets: Offsets,
    pad: Sides,
    justify_items: str = "left",
    align_items: str = "top",
) -> List[Block]:
    """
    Set the pixel origin (x, y) of every sized block.

    Args:
        blocks: Sized blocks (width and height set).
        row_offsets: Plain row offsets.
        column_offsets: Plain column offsets.
        pad: Item padding, already included in each block's intrinsic size.
        justify_items: Default horizontal placement.
        align_items: Default vertical placement.

    Returns:
        New blocks with ``x`` and ``y`` set.

    Raises:
        KeyError: If a block's track is missing from the offset tables.
        LayoutError: On an unknown justify or align value.
    """
    positioned = []
    for block in blocks:
        content_width = max(block.intrinsic_width - pad.horizontal, 0)
        content_height = max(block.intrinsic_height - pad.vertical, 0)

        x_start, _ = column_offsets[block.column]
        y_start, _ = row_offsets[block.row]

        dx = justify_offset(
            block.meta.get("justify_self") or justify_items,
            block.width,
            content_width,
            pad.left,
            pad.right,
        )
        dy = align_offset(
            block.meta.get("align_self") or align_items,
            block.height,
            content_height,
            pad.top,
            pad.bottom,
        )
        positioned.append(replace(block, x=x_start + dx, y=y_start + dy))

    return positioned
