"""An 8-bit indexed drawing surface with a clipping rectangle."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

from wastekit.geometry import Rect

DEFAULT_WIDTH = 640
DEFAULT_HEIGHT = 480


def _order(x1: int, y1: int, x2: int, y2: int) -> tuple[int, int, int, int]:
    return min(x1, x2), min(y1, y2), max(x1, x2), max(y1, y2)


def _clip(x1: int, y1: int, x2: int, y2: int, clip: Rect) -> tuple[int, int, int, int] | None:
    x1, y1, x2, y2 = _order(x1, y1, x2, y2)
    if x2 < clip.x1 or x1 > clip.x2 or y2 < clip.y1 or y1 > clip.y2:
        return None
    if x1 < clip.x1:
        x1 = clip.x1
    if x2 > clip.x2:
        x2 = clip.x2 - 1
    if y1 < clip.y1:
        y1 = clip.y1
    if y2 > clip.y2:
        y2 = clip.y2 - 1
    return x1, y1, x2, y2


class Bitmap:
    """Row-major palette-indexed pixels; ``width`` bytes per scanline."""

    def __init__(self, width: int = DEFAULT_WIDTH, height: int = DEFAULT_HEIGHT) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("bitmap dimensions must be positive")
        self.width = width
        self.height = height
        self.pixels = bytearray(width * height)
        self.clipping = Rect(0, 0, width, height)

    def _offset(self, x: int, y: int) -> int:
        return y * self.width + x

    def _fill(self, start: int, count: int, color: int) -> None:
        if count <= 0:
            return
        end = min(start + count, len(self.pixels))
        start = max(start, 0)
        if start < end:
            self.pixels[start:end] = bytes([color & 0xFF]) * (end - start)

    def get(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside bitmap")
        return self.pixels[self._offset(x, y)]

    def pixel(self, x: int, y: int, color: int) -> None:
        """Set one pixel if it lies inside the clipping rectangle."""
        clip = self.clipping
        if x < clip.x1 or x >= clip.x2 or y < clip.y1 or y >= clip.y2:
            return
        self.pixels[self._offset(x, y)] = color & 0xFF

    def line(self, x0: int, y0: int, x1: int, y1: int, color: int) -> None:
        """Draw a line with both endpoints included."""
        if y0 == y1:
            clipped = _clip(x0, y0, x1, y1, self.clipping)
            if clipped is None:
                return
            x0, y0, x1, y1 = clipped
            self._fill(self._offset(x0, y0), x1 - x0 + 1, color)
        elif x0 == x1:
            clipped = _clip(x0, y0, x1, y1, self.clipping)
            if clipped is None:
                return
            x0, y0, x1, y1 = clipped
            start = self._offset(x0, y0)
            for row in range(y1 - y0 + 1):
                index = start + row * self.width
                if 0 <= index < len(self.pixels):
                    self.pixels[index] = color & 0xFF
        else:
            dx, sx = abs(x1 - x0), (1 if x0 < x1 else -1)
            dy, sy = -abs(y1 - y0), (1 if y0 < y1 else -1)
            err = dx + dy
            while True:
                self.pixel(x0, y0, color)
                if x0 == x1 and y0 == y1:
                    break
                e2 = 2 * err
                if e2 >= dy:
                    err += dy
                    x0 += sx
                if e2 <= dx:
                    err += dx
                    y0 += sy

    def rectf(self, x1: int, y1: int, x2: int, y2: int, color: int) -> None:
        """Fill columns ``x1..x2-1`` of rows ``y1..y2-1``."""
        for y in range(y1, y2):
            self._fill(self._offset(x1, y), x2 - x1, color)

    def rectb(self, x0: int, y0: int, x1: int, y1: int, color: int) -> None:
        """Draw the outline of a rectangle."""
        self.line(x0, y0, x1, y0, color)
        self.line(x1, y0, x1, y1, color)
        self.line(x0, y1, x1, y1, color)
        self.line(x0, y0, x0, y1, color)

    @contextmanager
    def clipped(self, rect: Rect) -> Iterator[Bitmap]:
        """Use ``rect`` as the clipping rectangle for the duration of the block."""
        saved = self.clipping
        self.clipping = rect
        try:
            yield self
        finally:
            self.clipping = saved