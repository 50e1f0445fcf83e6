"""Orthographic 2D camera with panning and zooming."""

from __future__ import annotations

from dataclasses import dataclass

MIN_SCALE = 0.2
MAX_SCALE = 8.0
_LINE_ZOOM_STEP = 0.1
_LINE_ZOOM_MIN = 0.1


@dataclass
class Camera2D:
    """A camera centred on ``(x, y)`` whose ``scale`` is world units per pixel."""

    x: float = 0.0
    y: float = 0.0
    scale: float = 1.0
    min_scale: float = MIN_SCALE
    max_scale: float = MAX_SCALE

    def pan(self, dx: float, dy: float) -> None:
        """Move by a cursor delta in screen pixels; screen y points down."""
        self.x += dx
        self.y -= dy

    def zoom_lines(self, lines: float) -> None:
        """Zoom by mouse wheel lines; a step that would leave the range is ignored."""
        step = lines * _LINE_ZOOM_STEP
        if self.scale - step > _LINE_ZOOM_MIN and self.scale + step < MAX_SCALE:
            self.scale -= step

    def pinch(self, factor: float) -> None:
        """Zoom by a pinch factor; above 1 zooms in, the scale is kept in range."""
        if factor <= 0:
            raise ValueError(f"pinch factor must be positive, got {factor}")
        self.scale = min(max(self.scale / factor, self.min_scale), self.max_scale)

    def screen_to_world(
        self, position: tuple[float, float], viewport_size: tuple[float, float]
    ) -> tuple[float, float]:
        """World point under a screen position whose origin is the top-left corner."""
        sx, sy = position
        width, height = viewport_size
        return (
            self.x + (sx - width / 2.0) * self.scale,
            self.y + (height / 2.0 - sy) * self.scale,
        )

    def world_to_screen(
        self, position: tuple[float, float], viewport_size: tuple[float, float]
    ) -> tuple[float, float]:
        """Screen position of a world point; the inverse of ``screen_to_world``."""
        wx, wy = position
        width, height = viewport_size
        return (
            (wx - self.x) / self.scale + width / 2.0,
            height / 2.0 - (wy - self.y) / self.scale,
        )