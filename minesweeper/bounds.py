"""Axis-aligned rectangle in world space."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Bounds2:
    """A rectangle given by its bottom-left corner and its size."""

    position: tuple[float, float]
    size: tuple[float, float]

    def contains(self, point: tuple[float, float]) -> bool:
        """Whether ``point`` lies inside the rectangle, edges included."""
        left, bottom = self.position
        right, top = left + self.size[0], bottom + self.size[1]
        x, y = point
        return left <= x <= right and bottom <= y <= top