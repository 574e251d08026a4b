"""Integer rectangles and points used for clipping and hit testing."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Rect:
    """Rectangle given by two corners."""

    x1: int = 0
    y1: int = 0
    x2: int = 0
    y2: int = 0

    def width(self) -> int:
        return self.x2 - self.x1

    def height(self) -> int:
        return self.y2 - self.y1

    def is_valid(self) -> bool:
        """A rectangle is valid unless all of its coordinates are zero."""
        return any((self.x1, self.y1, self.x2, self.y2))

    def shrink(self, x: int, y: int) -> Rect:
        """Return the rectangle moved inwards by ``x`` and ``y`` on each side."""
        return Rect(self.x1 + x, self.y1 + y, self.x2 - x, self.y2 - y)


@dataclass(frozen=True)
class Point:
    """A point on the screen or map."""

    x: int = 0
    y: int = 0

    def in_rect(self, rect: Rect) -> bool:
        """True if the point lies inside ``rect``, edges included."""
        return rect.x1 <= self.x <= rect.x2 and rect.y1 <= self.y <= rect.y2

    def in_triangle(self, p1: Point, p2: Point, p3: Point) -> bool:
        """True if the point lies inside the triangle ``p1``, ``p2``, ``p3``."""
        a = (p1.x - self.x) * (p2.y - p1.y) - (p2.x - p1.x) * (p1.y - self.y)
        b = (p2.x - self.x) * (p3.y - p2.y) - (p3.x - p2.x) * (p2.y - self.y)
        c = (p3.x - self.x) * (p1.y - p3.y) - (p1.x - p3.x) * (p3.y - self.y)
        return (a >= 0 and b >= 0 and c >= 0) or (a < 0 and b < 0 and c < 0)