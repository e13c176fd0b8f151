"""Page-space geometry primitives shared by layout, selection, and rendering.

Coordinates are floats in the scroll-independent tree canvas. Rectangles are
derived from two anchor points and normalized so anchor order never matters.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    x: float
    y: float

    def translated(self, dx: float, dy: float) -> Point:
        return Point(self.x + dx, self.y + dy)


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle with ``left <= right`` and ``top <= bottom``."""

    left: float
    top: float
    right: float
    bottom: float

    @classmethod
    def from_points(cls, p1: Point, p2: Point) -> Rect:
        """Build the normalized rectangle spanned by two anchor points."""
        return cls(
            left=min(p1.x, p2.x),
            top=min(p1.y, p2.y),
            right=max(p1.x, p2.x),
            bottom=max(p1.y, p2.y),
        )

    @property
    def width(self) -> float:
        return self.right - self.left

    @property
    def height(self) -> float:
        return self.bottom - self.top

    def intersects(self, other: Rect) -> bool:
        """Strict overlap test: rectangles that only share an edge do not intersect."""
        return (
            other.left < self.right
            and other.right > self.left
            and other.top < self.bottom
            and other.bottom > self.top
        )

    def translated(self, dx: float, dy: float) -> Rect:
        """Return this rectangle shifted by ``(dx, dy)``."""
        return Rect(self.left + dx, self.top + dy, self.right + dx, self.bottom + dy)


__all__ = ["Point", "Rect"]
