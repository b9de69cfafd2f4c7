#
# PROJECT: render-kernel
# MODULE: render_kernel/canvas.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

from .color import Color


class Canvas:
    """
    Fixed-size 2D grid of Colors stored row-major.

    get/set treat out-of-range coordinates as a caller bug and raise
    IndexError. plot is the clipping variant for callers that project
    geometry which may land off screen.
    """
    __slots__ = ['_w', '_h', '_pixels']

    def __init__(self, width: int, height: int):
        if width < 0 or height < 0:
            raise ValueError(f"Canvas dimensions must be non-negative, got {width}x{height}")
        self._w, self._h = int(width), int(height)
        self._pixels = [Color.black() for _ in range(self._w * self._h)]

    @property
    def width(self) -> int:
        return self._w

    @property
    def height(self) -> int:
        return self._h

    @property
    def dimensions(self):
        return (self._w, self._h)

    def _index(self, x, y):
        if x < 0 or x >= self._w or y < 0 or y >= self._h:
            raise IndexError(f"Pixel ({x}, {y}) outside {self._w}x{self._h} canvas")
        return y * self._w + x

    def get(self, x: int, y: int) -> Color:
        return self._pixels[self._index(x, y)]

    def set(self, x: int, y: int, color: Color):
        self._pixels[self._index(x, y)] = color

    def plot(self, x: int, y: int, color: Color) -> bool:
        """Set a pixel if it lies on the canvas. Returns whether it was written."""
        if x < 0 or x >= self._w or y < 0 or y >= self._h:
            return False
        self._pixels[y * self._w + x] = color
        return True

    def fill(self, color: Color):
        """Set all pixels to color."""
        self._pixels = [color] * (self._w * self._h)

    def pixels(self):
        """Yield (x, y, color) with y outer and x inner."""
        w = self._w
        for i, color in enumerate(self._pixels):
            yield i % w, i // w, color

    def rows(self):
        """Yield each row as a list of Colors, top to bottom."""
        w = self._w
        for y in range(self._h):
            yield self._pixels[y * w:(y + 1) * w]

    def to_packed_argb(self):
        """Flat 0xAARRGGBB framebuffer, row-major."""
        return [c.to_packed_argb() for c in self._pixels]
