"""Axis-aligned rectangles used for boundaries and bounding boxes."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Rect:
    """A rectangle given by its top-left corner and its size."""

    left: float
    top: float
    width: float
    height: float

    @property
    def right(self) -> float:
        """The x coordinate of the right edge."""
        return self.left + self.width

    @property
    def bottom(self) -> float:
        """The y coordinate of the bottom edge."""
        return self.top + self.height

    def _span_x(self) -> tuple[float, float]:
        return min(self.left, self.right), max(self.left, self.right)

    def _span_y(self) -> tuple[float, float]:
        return min(self.top, self.bottom), max(self.top, self.bottom)

    def intersects(self, other: Rect) -> bool:
        """Return True if the two rectangles overlap with a non-empty area."""
        a_min_x, a_max_x = self._span_x()
        a_min_y, a_max_y = self._span_y()
        b_min_x, b_max_x = other._span_x()
        b_min_y, b_max_y = other._span_y()
        inter_left = max(a_min_x, b_min_x)
        inter_top = max(a_min_y, b_min_y)
        inter_right = min(a_max_x, b_max_x)
        inter_bottom = min(a_max_y, b_max_y)
        return inter_left < inter_right and inter_top < inter_bottom

    def contains(self, x: float, y: float) -> bool:
        """Return True if the point lies inside; left and top edges are inclusive."""
        min_x, max_x = self._span_x()
        min_y, max_y = self._span_y()
        return min_x <= x < max_x and min_y <= y < max_y