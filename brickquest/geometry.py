"""Axis-aligned rectangles and camera views in world coordinates."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Rect:
    """A rectangle given by its top-left corner and its size."""

    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0

    @property
    def left(self) -> float:
        return min(self.x, self.x + self.width)

    @property
    def right(self) -> float:
        return max(self.x, self.x + self.width)

    @property
    def top(self) -> float:
        return min(self.y, self.y + self.height)

    @property
    def bottom(self) -> float:
        return max(self.y, self.y + self.height)

    @property
    def position(self) -> tuple[float, float]:
        return (self.x, self.y)

    @property
    def size(self) -> tuple[float, float]:
        return (self.width, self.height)

    @property
    def center(self) -> tuple[float, float]:
        return (self.x + self.width / 2.0, self.y + self.height / 2.0)

    def intersection(self, other: Rect) -> Rect | None:
        """Return the overlapping area, or None when the rectangles do not overlap."""
        left = max(self.left, other.left)
        top = max(self.top, other.top)
        right = min(self.right, other.right)
        bottom = min(self.bottom, other.bottom)
        if left < right and top < bottom:
            return Rect(left, top, right - left, bottom - top)
        return None

    def intersects(self, other: Rect) -> bool:
        return self.intersection(other) is not None

    def contains(self, point: tuple[float, float]) -> bool:
        """True when the point lies inside; left/top edges count, right/bottom do not."""
        px, py = point
        return self.left <= px < self.right and self.top <= py < self.bottom


@dataclass
class View:
    """The part of the world that is shown, given by its centre and size."""

    center: tuple[float, float] = (400.0, 300.0)
    size: tuple[float, float] = (800.0, 600.0)

    def rect(self) -> Rect:
        cx, cy = self.center
        width, height = self.size
        return Rect(cx - width / 2.0, cy - height / 2.0, width, height)