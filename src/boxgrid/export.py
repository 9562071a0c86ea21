"""
File export for diagrams.

- Text files (.txt): the diagram exactly as rendered
- PNG images: the diagram drawn with a monospace font, so box-drawing
  characters line up as they do in a terminal

Diagrams may be given as a Canvas or as an already rendered string.
"""

import logging
from pathlib import Path
from typing import List, Optional, Union

from PIL import Image, ImageDraw, ImageFont

from .canvas import Canvas

logger = logging.getLogger(__name__)

Diagram = Union[Canvas, str]

# Tried in order after any font the caller names
MONOSPACE_FONTS = [
    # Linux
    "DejaVuSansMono.ttf",
    "/usr/share/fonts/truetype/dejavu/DejaVuSansMono.ttf",
    "LiberationMono-Regular.ttf",
    # macOS
    "Menlo.ttc",
    "/System/Library/Fonts/Menlo.ttc",
    "/System/Library/Fonts/Monaco.ttf",
    # Windows
    "consola.ttf",
    "C:/Windows/Fonts/consola.ttf",
    "cour.ttf",
]


def diagram_text(diagram: Diagram) -> str:
    """Rendered text of a diagram."""
    if isinstance(diagram, Canvas):
        return diagram.render()
    return diagram


class DiagramExporter:
    """
    Exports diagrams to text and PNG files.

    Attributes:
        default_font: Font name or path tried first for PNG export.
    """

    def __init__(self, default_font: Optional[str] = None):
        """
        Initialize the exporter.

        Args:
            default_font: Font name or path for PNG export (e.g. "DejaVuSansMono.ttf").
        """
        self.default_font = default_font

    def save_txt(self, diagram: Diagram, filename: str) -> None:
        """
        Save a diagram to a UTF-8 text file.

        Args:
            diagram: Canvas or rendered text.
            filename: Output filename.
        """
        Path(filename).write_text(diagram_text(diagram), encoding="utf-8")

    def to_image(
        self,
        diagram: Diagram,
        font_size: int = 16,
        bg_color: str = "#FFFFFF",
        fg_color: str = "#000000",
        padding: int = 20,
        font: Optional[str] = None,
        scale: int = 2,
    ) -> Image.Image:
        """
        Draw a diagram onto a new RGB image.

        Args:
            diagram: Canvas or rendered text.
            font_size: Font size in points before scaling.
            bg_color: Background color (e.g. "#FFFFFF").
            fg_color: Text color (e.g. "#000000").
            padding: Blank border around the text, in pixels before scaling.
            font: Font name or path; overrides ``default_font``.
            scale: Resolution multiplier.

        Returns:
            The image. Its size is the text grid plus padding on each side.
        """
        if scale < 1:
            raise ValueError(f"scale must be >= 1, got {scale}")

        lines = diagram_text(diagram).split("\n")
        loaded_font = self._load_monospace_font(font_size * scale, font or self.default_font)

        # Every character occupies the advance width of "M" in a monospace font.
        char_width = max(int(round(loaded_font.getlength("M"))), 1)
        left, top, right, bottom = loaded_font.getbbox("M│")
        line_height = max(int((bottom - top) * 1.2), 1)

        scaled_padding = padding * scale
        columns = max(len(line) for line in lines)
        img_width = char_width * columns + scaled_padding * 2
        img_height = line_height * len(lines) + scaled_padding * 2

        img = Image.new("RGB", (max(img_width, 1), max(img_height, 1)), bg_color)
        draw = ImageDraw.Draw(img)

        y = scaled_padding
        for line in lines:
            # Draw per character so a font without some glyph cannot shift the rest.
            for column, char in enumerate(line):
                if char != " ":
                    x = scaled_padding + column * char_width
                    draw.text((x, y), char, font=loaded_font, fill=fg_color)
            y += line_height

        return img

    def save_png(
        self,
        diagram: Diagram,
        filename: str,
        font_size: int = 16,
        bg_color: str = "#FFFFFF",
        fg_color: str = "#000000",
        padding: int = 20,
        font: Optional[str] = None,
        scale: int = 2,
    ) -> None:
        """
        Save a diagram as a PNG image.

        Takes the same options as ``to_image``.

        Example:
            >>> exporter = DiagramExporter(default_font="DejaVuSansMono.ttf")
            >>> exporter.save_png(canvas, "table.png", font_size=24)
        """
        img = self.to_image(diagram, font_size, bg_color, fg_color, padding, font, scale)
        img.save(Path(filename), "PNG")

    def _load_monospace_font(self, font_size: int, font_name: Optional[str] = None):
        """
        Load a monospace font for PNG rendering.

        Tries the named font, then common system monospace fonts, then
        Pillow's bundled default font.
        """
        fonts_to_try: List[str] = [font_name] if font_name else []
        fonts_to_try.extend(MONOSPACE_FONTS)

        for candidate in fonts_to_try:
            try:
                return ImageFont.truetype(candidate, font_size)
            except OSError:
                continue

        logger.debug("no monospace TrueType font found, using Pillow's default font")
        return ImageFont.load_default(size=font_size)
