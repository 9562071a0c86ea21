"""
Track offset model.

Turns a mapping of track sizes into pixel intervals. Two tables come out of
every computation:

- plain offsets, tight to the track content: ``[edge, edge + size)``
- gap offsets, each interval pushed halfway into the neighbouring gaps so that
  separator lines sit on the gap and adjacent intervals share an endpoint.

Example (sizes 5 and 5, gap 2)::

    plain:  {0: (0, 5),  1: (7, 12)}
    gap:    {0: (-1, 6), 1: (6, 13)}
"""

from typing import Tuple

from .models import LayoutError, Offsets, TrackSizes


def offsets_from_sizes(sizes: TrackSizes, gap: int) -> Tuple[Offsets, Offsets]:
    """
    Calculate plain and gap offsets for a track size map.

    Tracks are laid out in index order starting at 0, with ``gap`` pixels
    between neighbours. The gap offset of a track extends ``ceil(gap / 2)``
    backward and ``floor(gap / 2)`` forward, so for any two neighbours
    ``gap_offsets[i][1] == gap_offsets[i + 1][0]``.

    Args:
        sizes: Mapping of track index (0-based, contiguous) to size.
        gap: Pixels between neighbouring tracks.

    Returns:
        Tuple of (offsets, gap_offsets). Interval ends are exclusive.

    Raises:
        LayoutError: If the gap or a size is negative, or indices are not
            contiguous from 0.
    """
    if gap < 0:
        raise LayoutError(f"gap must be >= 0, got {gap}")

    indices = sorted(sizes)
    if indices != list(range(len(indices))):
        raise LayoutError(f"track indices must be contiguous from 0, got {indices}")

    gap_before = gap - gap // 2
    gap_after = gap // 2

    offsets: Offsets = {}
    gap_offsets: Offsets = {}
    edge = 0

    for index in indices:
        size = sizes[index]
        if size < 0:
            raise LayoutError(f"track {index} has negative size {size}")

        offsets[index] = (edge, edge + size)
        gap_offsets[index] = (edge - gap_before, edge + size + gap_after)
        edge += size + gap

    return offsets, gap_offsets


def translate_offsets(offsets: Offsets, delta: int) -> Offsets:
    """Shift every interval of an offset table by ``delta``."""
    return {index: (start + delta, end + delta) for index, (start, end) in offsets.items()}

