"""
Data models for grid layout.

This module contains the dataclasses and type aliases shared by every stage of
the layout engine: the blocks being laid out, four-sided spacing values, and the
shapes of the track size and offset tables.

Classes:
    LayoutError: Raised when the engine is given malformed input.
    Sides: Four-sided spacing (padding, outer margins).
    Block: A rectangular content unit placed on the grid.

Type aliases:
    Point: An (x, y) pixel coordinate.
    Line: A pair of points, the endpoints of an axis-aligned segment.
    Interval: A half-open (start, end) pixel interval.
    TrackSizes: Mapping of track index to size.
    Offsets: Mapping of track index to its pixel interval.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Hashable, Mapping, Optional, Tuple, Union

Point = Tuple[int, int]
Line = Tuple[Point, Point]
Interval = Tuple[int, int]
TrackSizes = Dict[int, int]
Offsets = Dict[int, Interval]

PLACEHOLDER_ID = "__placeholder__"


class LayoutError(ValueError):
    """Exception raised when the layout engine is given malformed input."""

    pass


@dataclass(frozen=True)
class Sides:
    """
    Spacing on the four sides of a rectangle.

    Attributes:
        top: Spacing above.
        right: Spacing to the right.
        bottom: Spacing below.
        left: Spacing to the left.
    """

    top: int = 0
    right: int = 0
    bottom: int = 0
    left: int = 0

    @classmethod
    def uniform(cls, size: int) -> "Sides":
        """Same spacing on every side."""
        return cls(size, size, size, size)

    @classmethod
    def of(cls, value: Union["Sides", int, Tuple[int, int, int, int], Mapping[str, int]]):
        """
        Coerce an int, a (top, right, bottom, left) tuple or a mapping to Sides.

        Mappings may omit sides, which default to 0.
        """
        if isinstance(value, Sides):
            return value
        if isinstance(value, int):
            return cls.uniform(value)
        if isinstance(value, Mapping):
            unknown = set(value) - {"top", "right", "bottom", "left"}
            if unknown:
                raise LayoutError(f"Unknown sides: {sorted(unknown)}")
            return cls(**value)
        top, right, bottom, left = value
        return cls(top, right, bottom, left)

    @property
    def horizontal(self) -> int:
        """Total spacing on the left and right."""
        return self.left + self.right

    @property
    def vertical(self) -> int:
        """Total spacing on the top and bottom."""
        return self.top + self.bottom

    def validate(self, name: str = "sides") -> None:
        """Raise LayoutError if any side is negative."""
        for side in ("top", "right", "bottom", "left"):
            if getattr(self, side) < 0:
                raise LayoutError(f"{name}.{side} must be >= 0")


@dataclass
class Block:
    """
    A rectangular content unit laid out on the grid.

    Blocks are created from content canvases and pass through placement,
    sizing and positioning. Each stage returns new blocks with more fields
    filled in; a block is never modified once it has been positioned.

    Attributes:
        id: Opaque identifier used to find the content this block stands for.
        row_span: Number of rows the block covers.
        column_span: Number of columns the block covers.
        intrinsic_width: Content width plus item padding.
        intrinsic_height: Content height plus item padding.
        row: First row covered (set by placement).
        column: First column covered (set by placement).
        width: Final width across the spanned columns (set by sizing).
        height: Final height across the spanned rows (set by sizing).
        x: Pixel x of the content origin (set by positioning).
        y: Pixel y of the content origin (set by positioning).
    """

    id: Hashable
    row_span: int = 1
    column_span: int = 1
    intrinsic_width: int = 0
    intrinsic_height: int = 0

    # Grid coordinates (set by placement)
    row: Optional[int] = None
    column: Optional[int] = None

    # Pixel size (set by sizing)
    width: Optional[int] = None
    height: Optional[int] = None

    # Pixel origin (set by positioning)
    x: Optional[int] = None
    y: Optional[int] = None

    meta: Dict[str, Any] = field(default_factory=dict, compare=False, repr=False)

    @classmethod
    def placeholder(cls, placeholder_id: Hashable = PLACEHOLDER_ID) -> "Block":
        """A 1x1 block with no content, used to fill empty cells."""
        return cls(id=placeholder_id, meta={"placeholder": True})

    @property
    def is_placeholder(self) -> bool:
        return self.meta.get("placeholder", False)

    @property
    def is_placed(self) -> bool:
        return self.row is not None and self.column is not None

    @property
    def last_row(self) -> int:
        return self.row + self.row_span - 1

    @property
    def last_column(self) -> int:
        return self.column + self.column_span - 1

    def cells(self, row: int, column: int):
        """Cells covered by the block if anchored at (row, column)."""
        return [
            (row + row_delta, column + column_delta)
            for row_delta in range(self.row_span)
            for column_delta in range(self.column_span)
        ]

    def validate(self) -> None:
        """Raise LayoutError if spans or intrinsic sizes are out of range."""
        if self.row_span < 1 or self.column_span < 1:
            raise LayoutError(
                f"Block {self.id!r}: spans must be >= 1, "
                f"got row_span={self.row_span}, column_span={self.column_span}"
            )
        if self.intrinsic_width < 0 or self.intrinsic_height < 0:
            raise LayoutError(
                f"Block {self.id!r}: intrinsic size must be >= 0, "
                f"got {self.intrinsic_width}x{self.intrinsic_height}"
            )
