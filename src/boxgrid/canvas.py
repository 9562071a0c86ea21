"""
Sparse character canvas.

A canvas maps (x, y) points to single characters and keeps a half-open
bounding box. Canvases are never changed in place: translating, padding,
overlaying or tagging one returns a new canvas.

Classes:
    Box: Half-open bounding box [x0, x1) x [y0, y1).
    Canvas: Immutable sparse character canvas.
"""

from dataclasses import dataclass
from typing import Any, Dict, Iterable, Mapping, Optional, Sequence

from .models import Point


@dataclass(frozen=True)
class Box:
    """
    Half-open bounding box.

    Attributes:
        x0: Left edge (inclusive).
        y0: Top edge (inclusive).
        x1: Right edge (exclusive).
        y1: Bottom edge (exclusive).
    """

    x0: int = 0
    y0: int = 0
    x1: int = 0
    y1: int = 0

    @classmethod
    def empty(cls) -> "Box":
        return cls()

    @classmethod
    def of_size(cls, x0: int, y0: int, width: int, height: int) -> "Box":
        return cls(x0, y0, x0 + width, y0 + height)

    @classmethod
    def from_points(cls, points: Iterable[Point]) -> "Box":
        """Smallest box containing every point, or an empty box if there are none."""
        points = list(points)
        if not points:
            return cls.empty()
        xs = [x for x, _ in points]
        ys = [y for _, y in points]
        return cls(min(xs), min(ys), max(xs) + 1, max(ys) + 1)

    @classmethod
    def union(cls, boxes: Iterable["Box"]) -> "Box":
        """Smallest box containing every non-empty box."""
        boxes = [box for box in boxes if not box.is_empty]
        if not boxes:
            return cls.empty()
        return cls(
            min(box.x0 for box in boxes),
            min(box.y0 for box in boxes),
            max(box.x1 for box in boxes),
            max(box.y1 for box in boxes),
        )

    @property
    def width(self) -> int:
        return self.x1 - self.x0

    @property
    def height(self) -> int:
        return self.y1 - self.y0

    @property
    def is_empty(self) -> bool:
        return self.width <= 0 or self.height <= 0

    @property
    def origin(self) -> Point:
        return self.x0, self.y0

    def translate(self, dx: int, dy: int) -> "Box":
        return Box(self.x0 + dx, self.y0 + dy, self.x1 + dx, self.y1 + dy)

    def grow(self, top: int = 0, right: int = 0, bottom: int = 0, left: int = 0) -> "Box":
        """Box with the given amounts added on each side, keeping the top-left corner."""
        return Box(self.x0, self.y0, self.x1 + left + right, self.y1 + top + bottom)


class Canvas:
    """
    An immutable, sparse 2D character canvas.

    Pixels not set on the canvas render as the filler character. The bounding
    box may be larger than the set pixels (padding reserves blank space).
    """

    def __init__(
        self,
        pixels: Optional[Mapping[Point, str]] = None,
        box: Optional[Box] = None,
        meta: Optional[Mapping[str, Any]] = None,
    ):
        self._pixels: Dict[Point, str] = dict(pixels or {})
        self.box = box if box is not None else Box.from_points(self._pixels)
        self.meta: Dict[str, Any] = dict(meta or {})

    # ------------------------------------------------------------------
    # Constructors
    # ------------------------------------------------------------------

    @classmethod
    def empty(cls) -> "Canvas":
        return cls()

    @classmethod
    def from_string(cls, text: str, origin: Point = (0, 0)) -> "Canvas":
        """
        Canvas holding ``text``, one line per row, with its top-left corner at ``origin``.

        A single trailing newline is ignored. Spaces are kept as pixels, so
        the box covers the longest line.
        """
        if text == "":
            return cls.empty()

        x0, y0 = origin
        lines = text[:-1].split("\n") if text.endswith("\n") else text.split("\n")

        pixels = {
            (x0 + x, y0 + y): char
            for y, line in enumerate(lines)
            for x, char in enumerate(line)
        }
        width = max(len(line) for line in lines)
        return cls(pixels, Box.of_size(x0, y0, width, len(lines)))

    @classmethod
    def from_points(cls, filler: str, points: Iterable[Point]) -> "Canvas":
        """Canvas with ``filler`` drawn at every point."""
        if len(filler) != 1:
            raise ValueError(f"filler must be a single character, got {filler!r}")
        return cls({point: filler for point in points})

    # ------------------------------------------------------------------
    # Geometry
    # ------------------------------------------------------------------

    @property
    def width(self) -> int:
        return self.box.width

    @property
    def height(self) -> int:
        return self.box.height

    def intrinsic_width(self) -> int:
        return self.box.width

    def intrinsic_height(self) -> int:
        return self.box.height

    @property
    def is_empty(self) -> bool:
        return not self._pixels and self.box.is_empty

    @property
    def points(self) -> Dict[Point, str]:
        """Copy of the set pixels."""
        return dict(self._pixels)

    def get(self, x: int, y: int, default: Optional[str] = None) -> Optional[str]:
        """Character at (x, y), or ``default`` if nothing is drawn there."""
        return self._pixels.get((x, y), default)

    def translate(self, dx: int, dy: int) -> "Canvas":
        """Return the canvas shifted by (dx, dy)."""
        if dx == 0 and dy == 0:
            return self
        pixels = {(x + dx, y + dy): char for (x, y), char in self._pixels.items()}
        return Canvas(pixels, self.box.translate(dx, dy), self.meta)

    def translate_origin(self) -> "Canvas":
        """Return the canvas shifted so its top-left corner is at (0, 0)."""
        x0, y0 = self.box.origin
        return self.translate(-x0, -y0)

    def pad(self, top: int = 0, right: int = 0, bottom: int = 0, left: int = 0) -> "Canvas":
        """
        Return the canvas with blank space around it.

        The top-left corner stays where it is; content moves right by
        ``left`` and down by ``top``. Negative amounts are treated as 0.
        """
        top, right, bottom, left = (max(v, 0) for v in (top, right, bottom, left))
        pixels = {(x + left, y + top): char for (x, y), char in self._pixels.items()}
        return Canvas(pixels, self.box.grow(top, right, bottom, left), self.meta)

    # ------------------------------------------------------------------
    # Metadata
    # ------------------------------------------------------------------

    def with_meta(self, **meta: Any) -> "Canvas":
        """Return a copy with ``meta`` merged into the canvas metadata."""
        merged = dict(self.meta)
        merged.update(meta)
        return Canvas(self._pixels, self.box, merged)

    def get_meta(self, key: str, default: Any = None) -> Any:
        return self.meta.get(key, default)

    # ------------------------------------------------------------------
    # Composition and output
    # ------------------------------------------------------------------

    @classmethod
    def overlay(cls, canvases: Sequence["Canvas"]) -> "Canvas":
        """
        Stack canvases, later ones drawn on top of earlier ones.

        The resulting box covers every non-empty box. Metadata is not carried.
        """
        pixels: Dict[Point, str] = {}
        for canvas in canvases:
            pixels.update(canvas._pixels)
        box = Box.union(canvas.box for canvas in canvases)
        return cls(pixels, box)

    def render(self, filler: str = " ", trim: bool = False) -> str:
        """
        Render the canvas to a string.

        Args:
            filler: Character used for blank pixels inside the box.
            trim: Strip trailing whitespace from every line.

        Returns:
            Lines joined with ``\\n``; an empty string for an empty box.
        """
        box = self.box
        lines = []
        for y in range(box.y0, box.y1):
            line = "".join(self._pixels.get((x, y), filler) for x in range(box.x0, box.x1))
            lines.append(line.rstrip() if trim else line)
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"Canvas(box={self.box}, pixels={len(self._pixels)})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Canvas):
            return NotImplemented
        return self.box == other.box and self._pixels == other._pixels
