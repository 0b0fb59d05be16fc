"""
Pixel Canvas

A small RGBA image with pixel-by-pixel line and rectangle drawing, used for
the demo logo.
"""

from PIL import Image
from typing import Optional, Tuple

from .grid import save_png

Color = Tuple[int, int, int, int]

RED: Color = (255, 0, 0, 255)
GREEN: Color = (0, 255, 0, 255)


class Canvas:
    """
    RGBA canvas. Pixels outside the image are silently skipped.

    Args:
        width: Image width in pixels
        height: Image height in pixels
    """

    def __init__(self, width: int = 100, height: int = 100):
        self.image = Image.new("RGBA", (width, height), (0, 0, 0, 0))

    @property
    def size(self) -> Tuple[int, int]:
        return self.image.size

    def set(self, x: int, y: int, color: Color):
        width, height = self.image.size
        if 0 <= x < width and 0 <= y < height:
            self.image.putpixel((x, y), color)

    def get(self, x: int, y: int) -> Color:
        return self.image.getpixel((x, y))

    def hline(self, x1: int, y: int, x2: int, color: Color):
        """Draw a horizontal line from x1 to x2 inclusive."""
        for x in range(x1, x2 + 1):
            self.set(x, y, color)

    def vline(self, x: int, y1: int, y2: int, color: Color):
        """Draw a vertical line from y1 to y2 inclusive."""
        for y in range(y1, y2 + 1):
            self.set(x, y, color)

    def rect(self, x1: int, y1: int, x2: int, y2: int, color: Color):
        """Draw a rectangle outline with corners (x1, y1) and (x2, y2)."""
        self.hline(x1, y1, x2, color)
        self.hline(x1, y2, x2, color)
        self.vline(x1, y1, y2, color)
        self.vline(x2, y1, y2, color)

    def save(self, path: str):
        save_png(self.image, path)


def draw_demo(canvas: Optional[Canvas] = None) -> Canvas:
    """Draw the demo logo: a red line crossing a green rectangle."""
    if canvas is None:
        canvas = Canvas(100, 100)

    canvas.hline(10, 20, 80, RED)
    canvas.rect(10, 10, 80, 50, GREEN)

    return canvas
