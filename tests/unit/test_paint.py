"""Tests for the painting primitives."""

import pytest

from boxgrid.lines import make_lines
from boxgrid.models import Block
from boxgrid.paint import bracket, bresenham, dot_at, grid_lines, line, line_points
from boxgrid.symbols import get_symbols


@pytest.fixture
def single_cell_map():
    """Line map of one 1x1 block with its border on (0, 0)."""
    gaps = {0: (0, 2)}
    return make_lines([Block(id="a", row=0, column=0)], gaps, gaps)


class TestLinePoints:
    """Tests for line and line_points."""

    def test_single_point(self):
        """Test a zero-length line is one point."""
        assert line_points((2, 3), (2, 3)) == [(2, 3)]

    def test_horizontal_inclusive(self):
        """Test both endpoints are drawn."""
        assert line_points((3, 0), (0, 0)) == [(0, 0), (1, 0), (2, 0), (3, 0)]

    def test_vertical_inclusive(self):
        """Test a vertical run from top to bottom."""
        assert line_points((1, 2), (1, 0)) == [(1, 0), (1, 1), (1, 2)]

    def test_line_canvas(self):
        """Test the filler is drawn along the line."""
        assert str(line((0, 0), (2, 0), "-")) == "---"

    def test_default_filler(self):
        """Test the default filler is a middle dot."""
        assert str(line((0, 0), (0, 1))) == "·\n·"


class TestBresenham:
    """Tests for bresenham."""

    def test_low_slope(self):
        """Test a shallow line steps along x."""
        assert bresenham((0, 1), (6, 4)) == [
            (0, 1), (1, 1), (2, 2), (3, 2), (4, 3), (5, 3), (6, 4)
        ]

    def test_steep(self):
        """Test a steep line steps along y."""
        assert bresenham((0, 0), (1, 3)) == [(0, 0), (0, 1), (1, 2), (1, 3)]

    def test_order_independent(self):
        """Test swapping the endpoints draws the same pixels."""
        assert sorted(bresenham((6, 4), (0, 1))) == sorted(bresenham((0, 1), (6, 4)))

    def test_diagonal(self):
        """Test a 45-degree line."""
        assert bresenham((0, 0), (2, 2)) == [(0, 0), (1, 1), (2, 2)]

    def test_descending(self):
        """Test a steep line is walked from its top end."""
        assert bresenham((0, 2), (2, 0)) == [(2, 0), (1, 1), (0, 2)]


class TestDotAt:
    """Tests for dot_at."""

    def test_places_one_character(self):
        """Test a single pixel at the point."""
        canvas = dot_at((2, 1), "*")
        assert canvas.points == {(2, 1): "*"}


class TestGridLines:
    """Tests for grid_lines."""

    def test_default_style_is_arc(self, single_cell_map):
        """Test rounded corners by default."""
        assert str(grid_lines(single_cell_map)) == "╭─╮\n│ │\n╰─╯"

    def test_light_style(self, single_cell_map):
        """Test square corners with the light table."""
        assert str(grid_lines(single_cell_map, get_symbols("light"))) == "┌─┐\n│ │\n└─┘"

    def test_missing_glyph(self, single_cell_map):
        """Test tags missing from the table draw a placeholder glyph."""
        symbols = {"vertical": "|", "horizontal": "-"}
        assert str(grid_lines(single_cell_map, symbols)) == "?-?\n| |\n?-?"

    def test_junctions_drawn_over_lines(self):
        """Test T junctions replace the straight glyph."""
        gaps = {0: (0, 2), 1: (2, 4)}
        blocks = [Block(id="a", row=0, column=0), Block(id="b", row=0, column=1)]
        line_map = make_lines(blocks, {0: (0, 2)}, gaps)
        assert str(grid_lines(line_map)) == "╭─┬─╮\n│ │ │\n╰─┴─╯"


class TestBracket:
    """Tests for bracket."""

    def test_left(self):
        """Test a left bracket opens to the right."""
        assert str(bracket((0, 0), (0, 2))) == "╭\n│\n╰"

    def test_right(self):
        """Test a right bracket opens to the left."""
        assert str(bracket((0, 0), (0, 2), side="right")) == "╮\n│\n╯"

    def test_curly_left(self):
        """Test the tick points outward halfway down."""
        assert str(bracket((0, 0), (0, 2), curly=True)) == "╭\n┤\n╰"

    def test_curly_right(self):
        """Test the right tick mirrors the left one."""
        assert str(bracket((0, 0), (0, 2), side="right", curly=True)) == "╮\n├\n╯"

    def test_two_rows(self):
        """Test a bracket with no middle rows is just the two corners."""
        assert str(bracket((0, 0), (0, 1))) == "╭\n╰"

    def test_bad_side(self):
        """Test that an unknown side raises."""
        with pytest.raises(ValueError, match="side"):
            bracket((0, 0), (0, 2), side="up")
