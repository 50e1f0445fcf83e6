"""Tile coordinates on the board grid."""

from __future__ import annotations

from dataclasses import dataclass

_U16_MAX = 0xFFFF


@dataclass(frozen=True)
class Coordinates:
    """A grid position held as two unsigned 16-bit values."""

    x: int
    y: int

    def __post_init__(self) -> None:
        for name, value in (("x", self.x), ("y", self.y)):
            if not 0 <= value <= _U16_MAX:
                raise ValueError(f"{name} must be within 0..{_U16_MAX}, got {value}")

    def __add__(self, other: object) -> Coordinates:
        """Add another position, or shift by an ``(dx, dy)`` offset.

        Offsets wrap around the 16-bit range, so stepping left of column 0
        lands on a column that no board contains.
        """
        if isinstance(other, Coordinates):
            x, y = self.x + other.x, self.y + other.y
            if x > _U16_MAX or y > _U16_MAX:
                raise OverflowError("coordinate addition overflowed")
            return Coordinates(x, y)
        if isinstance(other, tuple) and len(other) == 2:
            dx, dy = other
            return Coordinates((self.x + dx) & _U16_MAX, (self.y + dy) & _U16_MAX)
        return NotImplemented

    def __sub__(self, other: object) -> Coordinates:
        """Subtract component-wise, saturating at zero."""
        if not isinstance(other, Coordinates):
            return NotImplemented
        return Coordinates(max(self.x - other.x, 0), max(self.y - other.y, 0))

    def __str__(self) -> str:
        return f"Coordinates: {self.x}, {self.y}"