from __future__ import annotations

import math
from dataclasses import dataclass, field

from domain.models import Point, Size


@dataclass
class SquareGrid:
    x_delta: float
    y_delta: float
    x_offset: float = 0.0
    y_offset: float = 0.0

    def make_square(self) -> None:
        smallest = min(self.x_delta, self.y_delta)
        self.x_delta = smallest
        self.y_delta = smallest

    def set_deltas(self, x_delta: float, y_delta: float) -> None:
        self.x_delta = x_delta
        self.y_delta = y_delta

    def set_deltas_square(self, delta: float) -> None:
        self.set_deltas(delta, delta)

    def set_offsets_from_canvas(self, canvas: Size) -> None:
        mid = canvas.center()
        self.x_offset = mid.x % self.x_delta
        self.y_offset = mid.y % self.y_delta

    @property
    def delta_avg(self) -> float:
        return (self.x_delta + self.y_delta) * 0.5

    def nearest_intersection(self, point: Point) -> Point:
        return Point(
            _round_half_away((point.x - self.x_offset) / self.x_delta) * self.x_delta + self.x_offset,
            _round_half_away((point.y - self.y_offset) / self.y_delta) * self.y_delta + self.y_offset,
        )


@dataclass
class CircularGrid:
    r_delta: float
    center: Point = field(default_factory=lambda: Point(0.0, 0.0))
    max_radius: float = 0.0

    @classmethod
    def for_canvas(cls, r_delta: float, canvas: Size) -> CircularGrid:
        grid = cls(r_delta=r_delta)
        grid.set_from_canvas(canvas)
        return grid

    def set_r_delta(self, r_delta: float) -> None:
        self.r_delta = r_delta

    def set_from_canvas(self, canvas: Size) -> None:
        self.max_radius = max(canvas.width, canvas.height)
        self.center = canvas.center()

    def ring_radii(self) -> list[float]:
        radii: list[float] = []
        if self.r_delta <= 0:
            return radii
        radius = self.r_delta
        while radius < self.max_radius:
            radii.append(radius)
            radius += self.r_delta
        return radii


def _round_half_away(value: float) -> float:
    return math.copysign(math.floor(abs(value) + 0.5), value)
