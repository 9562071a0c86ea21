"""Tests for converting Python values to canvases."""

from boxgrid.canvas import Canvas
from boxgrid.convert import from_list, from_mapping, from_matrix, to_canvas

PRETTY_ONE_TWO = "╭      ╮\n│ 1  2 │\n╰      ╯"


class TestScalars:
    """Tests for scalar values."""

    def test_int(self):
        """Test integers are drawn with str."""
        assert str(to_canvas(42)) == "42"

    def test_float(self):
        """Test floats are drawn with str."""
        assert str(to_canvas(1.5)) == "1.5"

    def test_bool_and_none(self):
        """Test True and None are drawn by name."""
        assert str(to_canvas(True)) == "True"
        assert str(to_canvas(None)) == "None"

    def test_string_is_verbatim(self):
        """Test strings are drawn without quotes, one line per row."""
        assert str(to_canvas("a\nbc")) == "a \nbc"

    def test_unregistered_uses_repr(self):
        """Test unknown types fall back to repr."""
        assert str(to_canvas(b"x")) == "b'x'"

    def test_canvas_passes_through(self):
        """Test a canvas is returned as is."""
        canvas = Canvas.from_string("x")
        assert to_canvas(canvas) is canvas


class TestContainers:
    """Tests for container values."""

    def test_list(self):
        """Test lists become pretty lists."""
        assert str(to_canvas([1, 2])) == PRETTY_ONE_TWO

    def test_tuple(self):
        """Test tuples get curly brackets."""
        assert str(to_canvas((1, 2))) == "╭      ╮\n┤ 1  2 ├\n╰      ╯"

    def test_set_is_sorted(self):
        """Test sets are drawn in a stable order."""
        assert str(to_canvas({2, 1})) == PRETTY_ONE_TWO
        assert str(to_canvas(frozenset([2, 1]))) == PRETTY_ONE_TWO

    def test_dict(self):
        """Test dicts become key/value matrices."""
        assert str(to_canvas({"color": "red"})) == (
            "╭───────┬─────╮\n│ color │ red │\n╰───────┴─────╯"
        )

    def test_recursive_list(self):
        """Test a list containing itself stops at the repeat."""
        value = [1]
        value.append(value)
        assert "[...]" in str(to_canvas(value))

    def test_recursive_dict(self):
        """Test a dict containing itself stops at the repeat."""
        value = {}
        value["self"] = value
        assert "{...}" in str(to_canvas(value))

    def test_repeated_but_not_recursive(self):
        """Test the same list twice side by side is drawn in full both times."""
        inner = [1, 2]
        assert "..." not in str(to_canvas([inner, inner]))


class TestRegistration:
    """Tests for registering new types."""

    def test_register_custom_type(self):
        """Test a registered type controls its own drawing."""

        class Money:
            def __init__(self, cents):
                self.cents = cents

        @to_canvas.register(Money)
        def _money(value, seen=frozenset()):
            return Canvas.from_string(f"${value.cents / 100:.2f}")

        assert str(to_canvas(Money(150))) == "$1.50"
        assert "$0.05" in str(to_canvas([Money(5)]))


class TestHelpers:
    """Tests for from_list, from_matrix and from_mapping."""

    def test_from_list(self):
        """Test every value is converted."""
        assert [str(canvas) for canvas in from_list([1, "a"])] == ["1", "a"]

    def test_from_matrix(self):
        """Test rows of values are converted."""
        rows = from_matrix([[1, 2], [3]])
        assert [[str(canvas) for canvas in row] for row in rows] == [["1", "2"], ["3"]]

    def test_from_mapping(self):
        """Test keys and values become canvas pairs."""
        pairs = from_mapping({"a": 1})
        assert [(str(k), str(v)) for k, v in pairs] == [("a", "1")]
