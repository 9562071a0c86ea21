"""
Glyph tables for drawing grid lines.

Each box-drawing table maps a junction kind tag (see
``boxgrid.lines.JunctionKind``) plus ``"horizontal"`` and ``"vertical"`` to a
single character.
"""

from typing import Dict

BOX_LIGHT: Dict[str, str] = {
    "down_and_horizontal": "┬",
    "down_and_left": "┐",
    "down_and_right": "┌",
    "horizontal": "─",
    "up_and_horizontal": "┴",
    "up_and_left": "┘",
    "up_and_right": "└",
    "vertical": "│",
    "vertical_and_horizontal": "┼",
    "vertical_and_left": "┤",
    "vertical_and_right": "├",
}

# Light lines with rounded corners
BOX_LIGHT_ARC: Dict[str, str] = {
    **BOX_LIGHT,
    "down_and_left": "╮",
    "down_and_right": "╭",
    "up_and_left": "╯",
    "up_and_right": "╰",
}

BOX_HEAVY: Dict[str, str] = {
    "down_and_horizontal": "┳",
    "down_and_left": "┓",
    "down_and_right": "┏",
    "horizontal": "━",
    "up_and_horizontal": "┻",
    "up_and_left": "┛",
    "up_and_right": "┗",
    "vertical": "┃",
    "vertical_and_horizontal": "╋",
    "vertical_and_left": "┫",
    "vertical_and_right": "┣",
}

BOX_DOUBLE: Dict[str, str] = {
    "down_and_horizontal": "╦",
    "down_and_left": "╗",
    "down_and_right": "╔",
    "horizontal": "═",
    "up_and_horizontal": "╩",
    "up_and_left": "╝",
    "up_and_right": "╚",
    "vertical": "║",
    "vertical_and_horizontal": "╬",
    "vertical_and_left": "╣",
    "vertical_and_right": "╠",
}

BLOCK_ELEMENTS: Dict[str, str] = {
    "full_block": "█",
    "left_five_eighths": "▋",
    "left_half": "▌",
    "left_one_eighth": "▏",
    "left_one_quarter": "▎",
    "left_seven_eighths": "▉",
    "left_three_eighths": "▍",
    "left_three_quarters": "▊",
    "lower_five_eighths": "▅",
    "lower_half": "▄",
    "lower_one_eighth": "▁",
    "lower_one_quarter": "▂",
    "lower_seven_eighths": "▇",
    "lower_three_eighths": "▃",
    "lower_three_quarters": "▆",
    "right_half": "▐",
    "upper_half": "▀",
}

BOX_STYLES: Dict[str, Dict[str, str]] = {
    "light": BOX_LIGHT,
    "arc": BOX_LIGHT_ARC,
    "heavy": BOX_HEAVY,
    "double": BOX_DOUBLE,
}

DEFAULT_STYLE = "arc"

# Drawn where a table has no glyph for a tag
MISSING = "?"


def get_symbols(name: str = DEFAULT_STYLE) -> Dict[str, str]:
    """
    Look up a box-drawing table by style name.

    Args:
        name: One of ``"light"``, ``"arc"``, ``"heavy"`` or ``"double"``.

    Returns:
        A copy of the glyph table.

    Raises:
        KeyError: If the style is unknown.
    """
    if name not in BOX_STYLES:
        raise KeyError(f"Unknown box style {name!r}; expected one of {sorted(BOX_STYLES)}")
    return dict(BOX_STYLES[name])
