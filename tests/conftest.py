"""Pytest configuration and shared fixtures for boxgrid tests."""

import pytest

from boxgrid import Block, Canvas, GridOptions, GridPainter, Sides, line


def hash_lines(line_map):
    """Lines renderer drawing every separator pixel as '#'."""
    segments = line_map.horizontal_lines + line_map.vertical_lines
    return Canvas.overlay([line(p1, p2, "#") for p1, p2 in segments])


@pytest.fixture
def hash_renderer():
    """Lines renderer that draws plain '#' separators."""
    return hash_lines


@pytest.fixture
def abc():
    """Three single-character canvases."""
    return [Canvas.from_string(s) for s in "abc"]


@pytest.fixture
def boxed_options():
    """Options for a fully boxed grid with one space either side of each item."""
    return GridOptions(
        limit=2,
        pad_items=Sides(top=0, right=1, bottom=0, left=1),
        outer_margin=Sides.uniform(1),
    )


@pytest.fixture
def painter():
    """Default GridPainter instance."""
    return GridPainter()


@pytest.fixture
def spanning_blocks():
    """A block spanning two rows next to two single-row blocks."""
    return [
        Block(id="tall", row_span=2, intrinsic_width=1, intrinsic_height=3),
        Block(id="top", intrinsic_width=1, intrinsic_height=1),
        Block(id="bottom", intrinsic_width=1, intrinsic_height=1),
    ]


@pytest.fixture
def table_data():
    """Headers and rows for table tests."""
    headers = ["Name", "Age", "Height"]
    rows = [
        ["Alice", "23", "169 cm"],
        ["Bob", "27", "181 cm"],
        ["Carol", "19", "200 cm"],
    ]
    return headers, rows
