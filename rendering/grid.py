"""
Grid Logo Rendering

Draws a sorted Walsh matrix as a square grid of colored cells. Row i of the
matrix becomes column i of the image; chip j of that row is the cell at
vertical position j.
"""

from PIL import Image, ImageDraw
from tqdm import tqdm
from typing import Tuple

from walsh.codes import WalshMatrix
from walsh.utils import ensure_parent_dir

Color = Tuple[int, int, int, int]

# RGBA colors for negative and non-negative chips
NEGATIVE_COLOR: Color = (0x44, 0xFF, 0x44, 0xFF)
POSITIVE_COLOR: Color = (0xFF, 0x00, 0x44, 0x00)

DEFAULT_LOGO_SIZE = 128


def cell_size(logo_size: int, num_rows: int) -> int:
    """
    Pixel size of one grid cell.

    Raises:
        ValueError: If the matrix is empty or has more rows than pixels
    """
    if num_rows == 0:
        raise ValueError("Cannot render an empty matrix")
    size = logo_size // num_rows
    if size == 0:
        raise ValueError(f"{num_rows} rows don't fit in a {logo_size}px logo")
    return size


def chip_color(chip: int, negative_color: Color = NEGATIVE_COLOR,
               positive_color: Color = POSITIVE_COLOR) -> Color:
    return negative_color if chip < 0 else positive_color


def render_logo(
    matrix: WalshMatrix,
    logo_size: int = DEFAULT_LOGO_SIZE,
    negative_color: Color = NEGATIVE_COLOR,
    positive_color: Color = POSITIVE_COLOR,
    verbose: bool = False,
) -> Image.Image:
    """
    Render the matrix as a logo_size x logo_size RGBA image.

    Pixels not covered by a cell stay fully transparent black.

    Args:
        matrix: Matrix to draw, usually sorted by sequency
        logo_size: Width and height of the image in pixels
        negative_color: Fill for chips < 0
        positive_color: Fill for chips >= 0
        verbose: Show a progress bar over rows

    Returns:
        PIL Image
    """
    cell = cell_size(logo_size, len(matrix))

    image = Image.new("RGBA", (logo_size, logo_size), (0, 0, 0, 0))
    draw = ImageDraw.Draw(image)

    iterator = enumerate(matrix.rows)
    if verbose:
        iterator = tqdm(iterator, total=len(matrix), desc="Drawing rows")

    for i, row in iterator:
        for j, chip in enumerate(row.chips):
            x0, y0 = i * cell, j * cell
            # PIL rectangles include both corners
            draw.rectangle(
                [x0, y0, x0 + cell - 1, y0 + cell - 1],
                fill=chip_color(chip, negative_color, positive_color),
            )

    return image


def save_png(image: Image.Image, path: str):
    """Save an image as PNG, creating parent directories."""
    ensure_parent_dir(path)
    image.save(path, format="PNG")
