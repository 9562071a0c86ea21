"""Tests for glyph tables."""

import pytest

from boxgrid.lines import JunctionKind
from boxgrid.symbols import BLOCK_ELEMENTS, BOX_STYLES, DEFAULT_STYLE, get_symbols


class TestBoxStyles:
    """Tests for the box-drawing tables."""

    @pytest.mark.parametrize("name", sorted(BOX_STYLES))
    def test_every_junction_kind_has_a_glyph(self, name):
        """Test each table covers every junction kind."""
        table = BOX_STYLES[name]
        for kind in JunctionKind:
            assert len(table[kind.value]) == 1

    def test_arc_differs_from_light_only_in_corners(self):
        """Test the arc table rounds the four corners."""
        light, arc = get_symbols("light"), get_symbols("arc")
        changed = {tag for tag in light if light[tag] != arc[tag]}
        assert changed == {"down_and_left", "down_and_right", "up_and_left", "up_and_right"}

    def test_default_style(self):
        """Test arc is the default."""
        assert DEFAULT_STYLE == "arc"
        assert get_symbols()["down_and_right"] == "╭"

    def test_block_elements(self):
        """Test the block element table is single characters."""
        assert BLOCK_ELEMENTS["full_block"] == "█"
        assert all(len(glyph) == 1 for glyph in BLOCK_ELEMENTS.values())


class TestGetSymbols:
    """Tests for get_symbols."""

    def test_returns_copy(self):
        """Test changing the result leaves the table alone."""
        table = get_symbols("heavy")
        table["vertical"] = "!"
        assert get_symbols("heavy")["vertical"] == "┃"

    def test_unknown_style(self):
        """Test an unknown style raises KeyError."""
        with pytest.raises(KeyError, match="dotted"):
            get_symbols("dotted")
