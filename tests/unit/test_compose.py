"""Tests for the ready-made compositions."""

import pytest

from boxgrid import compose
from boxgrid.canvas import Canvas
from boxgrid.models import LayoutError
from boxgrid.symbols import get_symbols


def c(text):
    return Canvas.from_string(str(text))


def cs(*texts):
    return [c(text) for text in texts]


class TestGrid:
    """Tests for grid and grid_layout."""

    def test_boxed_grid(self, abc):
        """Test every cell is boxed and padded."""
        assert str(compose.grid(abc, limit=2)) == (
            "╭───┬───╮\n"
            "│ a │ b │\n"
            "├───┼───┤\n"
            "│ c │   │\n"
            "╰───┴───╯"
        )

    def test_light_symbols(self, abc):
        """Test swapping the glyph table."""
        result = compose.grid(abc, get_symbols("light"), limit=2)
        assert str(result).split("\n")[0] == "┌───┬───┐"
        assert str(result).split("\n")[-1] == "└───┴───┘"

    def test_override_padding(self, abc):
        """Test any option can be overridden."""
        assert str(compose.grid(abc, limit=2, pad_items=0)) == (
            "╭─┬─╮\n│a│b│\n├─┼─┤\n│c│ │\n╰─┴─╯"
        )

    def test_unknown_option(self, abc):
        """Test a misspelt option raises."""
        with pytest.raises(LayoutError, match="Unknown grid options"):
            compose.grid(abc, limits=2)

    def test_grid_layout(self, abc):
        """Test a grid without lines."""
        assert str(compose.grid_layout(abc, limit=2, row_gap=0)) == "a b\nc  "


class TestMatrix:
    """Tests for matrix, matrix_layout and math_matrix."""

    def test_single_cell(self):
        """Test a 1x1 matrix is a box."""
        assert str(compose.matrix([cs("x")])) == "╭───╮\n│ x │\n╰───╯"

    def test_short_rows_are_filled(self, abc):
        """Test missing cells are left empty."""
        rows = [abc[:2], abc[2:]]
        assert compose.matrix(rows) == compose.grid(abc, limit=2)

    def test_matrix_layout(self):
        """Test rows without lines."""
        assert str(compose.matrix_layout([cs("x", "y"), cs("z", "w")])) == "x y\n   \nz w"

    def test_math_matrix(self):
        """Test square brackets and right-justified entries."""
        result = compose.math_matrix([cs(1, 2), cs(3, 4)])
        assert str(result) == (
            "╭       ╮\n"
            "│ 1   2 │\n"
            "│       │\n"
            "│ 3   4 │\n"
            "╰       ╯"
        )


class TestTable:
    """Tests for table and card."""

    def test_table(self, table_data):
        """Test only the outer and header lines run across."""
        headers, rows = table_data
        result = compose.table(cs(*headers), [cs(*row) for row in rows])
        assert str(result) == (
            "╭───────┬─────┬────────╮\n"
            "│ Name  │ Age │ Height │\n"
            "├───────┼─────┼────────┤\n"
            "│ Alice │ 23  │ 169 cm │\n"
            "│ Bob   │ 27  │ 181 cm │\n"
            "│ Carol │ 19  │ 200 cm │\n"
            "╰───────┴─────┴────────╯"
        )

    def test_card(self):
        """Test a card is a one-column table."""
        assert str(compose.card(c("label"), c("message"))) == (
            "╭─────────╮\n"
            "│ label   │\n"
            "├─────────┤\n"
            "│ message │\n"
            "╰─────────╯"
        )

    def test_box(self):
        """Test a single boxed canvas."""
        assert str(compose.box(c("x"))) == "╭───╮\n│ x │\n╰───╯"


class TestCollections:
    """Tests for the list, tuple and map presets."""

    def test_pretty_list(self):
        """Test square brackets around items."""
        assert str(compose.pretty_list(cs(1, 2))) == "╭      ╮\n│ 1  2 │\n╰      ╯"

    def test_pretty_tuple(self):
        """Test curly brackets around items."""
        assert str(compose.pretty_tuple(cs(1, 2))) == "╭      ╮\n┤ 1  2 ├\n╰      ╯"

    def test_pretty_map(self):
        """Test key/value pairs as a boxed two-column matrix."""
        result = compose.pretty_map([(c("color"), c("red"))])
        assert str(result) == "╭───────┬─────╮\n│ color │ red │\n╰───────┴─────╯"

    def test_pretty_map_rows(self):
        """Test one row per pair."""
        result = compose.pretty_map([(c("a"), c(1)), (c("b"), c(2))])
        assert str(result) == "╭───┬───╮\n│ a │ 1 │\n├───┼───┤\n│ b │ 2 │\n╰───┴───╯"

    def test_plain_list(self):
        """Test one line, comma separated."""
        assert str(compose.plain_list(cs(1, 2, 3))) == "[1, 2, 3]"

    def test_plain_tuple(self):
        """Test parentheses instead of brackets."""
        assert str(compose.plain_tuple(cs(1, 2, 3))) == "(1, 2, 3)"

    def test_plain_map(self):
        """Test braces and colon separators."""
        assert str(compose.plain_map([(c("color"), c("red"))])) == "{color: red}"
