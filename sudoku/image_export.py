"""
Grid Image Export

Draws a grid as a PNG with givens and solver-filled digits in different
colours.
"""

import logging
from pathlib import Path
from typing import Union

from PIL import Image, ImageDraw, ImageFont

from sudoku.solver import BLOCK, SIZE, Grid

logger = logging.getLogger(__name__)


# Layout
CELL_SIZE = 48
MARGIN = 12
THIN_LINE = 1
THICK_LINE = 3
FONT_SIZE = 28

# Colours
BACKGROUND = "white"
LINE_COLOR = "black"
GIVEN_COLOR = "black"
FILLED_COLOR = "#1565C0"  # Blue


def _load_font(size: int) -> ImageFont.ImageFont:
    """Load a TrueType font, falling back to Pillow's built-in font."""
    for name in ("DejaVuSans-Bold.ttf", "arial.ttf"):
        try:
            return ImageFont.truetype(name, size)
        except OSError:
            continue
    return ImageFont.load_default()


def render_image(grid: Grid) -> Image.Image:
    """
    Draw a grid.

    Args:
        grid: Grid to draw

    Returns:
        RGB PIL Image
    """
    side = CELL_SIZE * SIZE + 2 * MARGIN
    image = Image.new("RGB", (side, side), BACKGROUND)
    draw = ImageDraw.Draw(image)
    font = _load_font(FONT_SIZE)

    # Lines, thicker on block boundaries
    for i in range(SIZE + 1):
        width = THICK_LINE if i % BLOCK == 0 else THIN_LINE
        offset = MARGIN + i * CELL_SIZE
        draw.line([(MARGIN, offset), (side - MARGIN, offset)], fill=LINE_COLOR, width=width)
        draw.line([(offset, MARGIN), (offset, side - MARGIN)], fill=LINE_COLOR, width=width)

    for row in range(SIZE):
        for col in range(SIZE):
            value = grid.get_cell(row, col)
            if value == 0:
                continue

            text = str(value)
            color = GIVEN_COLOR if grid.is_given(row, col) else FILLED_COLOR

            # Center the digit in its cell
            left, top, right, bottom = draw.textbbox((0, 0), text, font=font)
            cx = MARGIN + col * CELL_SIZE + (CELL_SIZE - (right - left)) // 2 - left
            cy = MARGIN + row * CELL_SIZE + (CELL_SIZE - (bottom - top)) // 2 - top
            draw.text((cx, cy), text, fill=color, font=font)

    return image


def save_grid_image(grid: Grid, path: Union[str, Path]) -> Path:
    """
    Save a grid as a PNG image.

    Args:
        grid: Grid to draw
        path: Output file path, parent directories are created

    Returns:
        Path written

    Raises:
        OSError: If the image cannot be written
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    render_image(grid).save(path, "PNG")
    logger.info(f"Grid image saved: {path}")
    return path
