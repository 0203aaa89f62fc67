"""The visible region of the complex plane, and how it zooms and pans."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum

from .settings import FractalType


class Direction(Enum):
    """Directions in which the view can be moved."""

    UP = "U"
    DOWN = "D"
    LEFT = "L"
    RIGHT = "R"


@dataclass(frozen=True)
class Plane:
    """Bounds of the view: real axis left to right, imaginary axis top row first.

    ``max_i`` is the imaginary value of the top row and ``min_i`` that of the
    bottom row; the two may be in either order.
    """

    min_r: float
    max_r: float
    min_i: float
    max_i: float

    def zoom(
        self, factor: float, mouse_x: float, mouse_y: float, width: int, height: int
    ) -> Plane:
        """Scale the view by ``factor`` around the point under the given pixel."""
        span_r = self.max_r - self.min_r
        span_i = self.max_i - self.min_i
        anchor_r = self.min_r + (mouse_x / width) * span_r
        anchor_i = self.max_i - (mouse_y / height) * span_i
        return Plane(
            min_r=anchor_r - (anchor_r - self.min_r) * factor,
            max_r=anchor_r + (self.max_r - anchor_r) * factor,
            min_i=anchor_i - (anchor_i - self.min_i) * factor,
            max_i=anchor_i + (self.max_i - anchor_i) * factor,
        )

    def move(self, distance: float, direction: Direction) -> Plane:
        """Pan the view by ``distance`` times its own extent along one axis."""
        step_r = (self.max_r - self.min_r) * distance
        step_i = (self.max_i - self.min_i) * distance
        if direction is Direction.RIGHT:
            return replace(self, min_r=self.min_r + step_r, max_r=self.max_r + step_r)
        if direction is Direction.LEFT:
            return replace(self, min_r=self.min_r - step_r, max_r=self.max_r - step_r)
        if direction is Direction.DOWN:
            return replace(self, min_i=self.min_i - step_i, max_i=self.max_i - step_i)
        return replace(self, min_i=self.min_i + step_i, max_i=self.max_i + step_i)

    def pixel_to_complex(
        self, x: float, y: float, width: int, height: int
    ) -> tuple[float, float]:
        """Map a pixel position to its (real, imaginary) point."""
        real = self.min_r + float(x) * (self.max_r - self.min_r) / width
        imaginary = self.max_i + float(y) * (self.min_i - self.max_i) / height
        return real, imaginary


def default_plane(fractal: FractalType, width: int, height: int) -> Plane:
    """Return the starting view for a fractal in a window of the given size."""
    if FractalType(fractal) is FractalType.JULIA:
        min_r, max_r, min_i = -2.0, 2.0, -2.0
        max_i = min_i + (max_r - min_r) * height / width
        return Plane(min_r=min_r, max_r=max_r, min_i=min_i, max_i=max_i)
    min_r, max_r, max_i = -2.0, 1.0, -1.5
    min_i = max_i + (max_r - min_r) * height / width
    return Plane(min_r=min_r, max_r=max_r, min_i=min_i, max_i=max_i)