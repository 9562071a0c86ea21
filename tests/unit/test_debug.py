"""
Tests for the debug module.

These tests verify visual_diff, CanvasInspector and the graph checks done
by LineMapInspector.
"""

from boxgrid import compose
from boxgrid.canvas import Canvas
from boxgrid.debug import JUNCTION_DEGREE, CanvasInspector, LineMapInspector, visual_diff
from boxgrid.grid import GridPainter
from boxgrid.lines import JunctionKind, LineMap, make_lines
from boxgrid.models import Block

BOXED_X = "╭───╮\n│ x │\n╰───╯"


def boxed_grid_map(canvases, options):
    return GridPainter(options).layout(canvases, with_lines=True).line_map


class TestVisualDiff:
    """Tests for visual_diff function."""

    def test_identical(self):
        """Test that identical diagrams report no differences."""
        result = visual_diff(BOXED_X, BOXED_X)
        assert "No differences found." in result

    def test_single_difference(self):
        """Test that a changed character is reported with its column."""
        actual = BOXED_X.replace("x", "y")
        result = visual_diff(BOXED_X, actual)
        assert "Found 1 differing line(s)" in result
        assert "E |│ x │|" in result
        assert "A |│ y │|" in result
        assert "Diff at col(s): [2]" in result

    def test_extra_lines(self):
        """Test that lines missing from one side count as differences."""
        result = visual_diff("a", "a\nb")
        assert "Found 1 differing line(s)" in result

    def test_context_is_limited(self):
        """Test that distant matching lines are elided."""
        expected = "\n".join(str(i) for i in range(20))
        actual = expected.replace("15", "X")
        result = visual_diff(expected, actual, context_lines=1)
        assert "..." in result
        assert "  2:" not in result


class TestCanvasInspector:
    """Tests for CanvasInspector class."""

    def test_char_at(self):
        """Test reading drawn and blank positions."""
        inspector = CanvasInspector(compose.box(Canvas.from_string("x")))
        assert inspector.char_at(2, 1) == "x"
        assert inspector.char_at(1, 1) == " "

    def test_find_char(self):
        """Test finding every position of a character."""
        inspector = CanvasInspector(compose.box(Canvas.from_string("x")))
        assert inspector.find_char("x") == [(2, 1)]
        assert inspector.find_char("│") == [(0, 1), (4, 1)]

    def test_find_chars(self):
        """Test finding any of several characters."""
        inspector = CanvasInspector(compose.box(Canvas.from_string("x")))
        assert inspector.find_chars("╭╯") == [(0, 0, "╭"), (4, 2, "╯")]

    def test_rows_and_columns(self):
        """Test reading whole rows and columns."""
        inspector = CanvasInspector(compose.box(Canvas.from_string("x")))
        assert inspector.get_row(1) == "│ x │"
        assert inspector.get_column(0) == "╭│╰"
        assert inspector.get_row(9) == ""
        assert inspector.get_column(-1) == ""

    def test_get_region(self):
        """Test reading a rectangle."""
        inspector = CanvasInspector(compose.box(Canvas.from_string("x")))
        assert inspector.get_region(1, 0, 3, 2) == "───\n x "

    def test_counts(self):
        """Test counting characters and line glyphs."""
        inspector = CanvasInspector(compose.box(Canvas.from_string("x")))
        assert inspector.count_char("─") == 6
        assert inspector.get_line_chars_count() == {
            "╭": 1,
            "╮": 1,
            "╰": 1,
            "╯": 1,
            "─": 6,
            "│": 2,
        }


class TestLineMapInspector:
    """Tests for LineMapInspector class."""

    def test_full_grid_is_sound(self, abc, boxed_options):
        """Test a boxed grid is connected with every junction degree matching."""
        inspector = LineMapInspector(boxed_grid_map(abc, boxed_options))
        assert inspector.is_connected()
        assert inspector.problems() == []

    def test_spanning_grid_is_sound(self, boxed_options):
        """Test pass-through junctions keep their degree."""
        tall = Canvas.from_string("x\nx\nx").with_meta(row_span=2)
        canvases = [tall, Canvas.from_string("a"), Canvas.from_string("b")]
        inspector = LineMapInspector(boxed_grid_map(canvases, boxed_options))
        assert inspector.problems() == []

    def test_degree(self, abc, boxed_options):
        """Test degrees at a cross, a T and a corner."""
        inspector = LineMapInspector(boxed_grid_map(abc, boxed_options))
        assert inspector.degree((4, 2)) == 4
        assert inspector.degree((0, 2)) == 3
        assert inspector.degree((0, 0)) == 2
        assert inspector.degree((100, 100)) == 0

    def test_components(self):
        """Test two separate boxes are two components."""
        gaps = {0: (0, 2)}
        first = make_lines([Block(id="a", row=0, column=0)], gaps, gaps)
        second = first.translate(10, 0)
        combined = LineMap(
            horizontal_lines=first.horizontal_lines + second.horizontal_lines,
            vertical_lines=first.vertical_lines + second.vertical_lines,
            intersects={**first.intersects, **second.intersects},
        )
        inspector = LineMapInspector(combined)
        assert not inspector.is_connected()
        assert [len(component) for component in inspector.components()] == [4, 4]

    def test_empty_map_is_connected(self):
        """Test an empty map has nothing to report."""
        inspector = LineMapInspector(LineMap())
        assert inspector.is_connected()
        assert inspector.problems() == []

    def test_dangling_endpoints(self):
        """Test segment ends without a junction are reported."""
        inspector = LineMapInspector(LineMap(horizontal_lines=[((0, 0), (2, 0))]))
        assert inspector.dangling_endpoints() == [(0, 0), (2, 0)]
        assert "no junction at endpoint (0, 0)" in inspector.problems()

    def test_degree_mismatch(self):
        """Test a corner with only one line leaving it is reported."""
        line_map = LineMap(
            horizontal_lines=[((0, 0), (2, 0))],
            intersects={
                (0, 0): JunctionKind.DOWN_AND_RIGHT,
                (2, 0): JunctionKind.DOWN_AND_LEFT,
            },
        )
        inspector = LineMapInspector(line_map)
        assert inspector.degree_mismatches() == [
            ((0, 0), JunctionKind.DOWN_AND_RIGHT, 1),
            ((2, 0), JunctionKind.DOWN_AND_LEFT, 1),
        ]
        assert len(inspector.problems()) == 2

    def test_junction_degree_covers_every_kind(self):
        """Test the degree table knows every junction kind."""
        assert set(JUNCTION_DEGREE) == set(JunctionKind)
