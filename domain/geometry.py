from __future__ import annotations

import math
import random

from domain.models import Point, Size


def normalize(vector: Point) -> Point | None:
    length = vector.length()
    if length == 0.0 or not math.isfinite(length):
        return None
    return Point(vector.x / length, vector.y / length)


def random_unit_vector(rng: random.Random) -> Point:
    angle = rng.uniform(0.0, math.tau)
    return Point(math.cos(angle), math.sin(angle))


def point_in_circle(point: Point, center: Point, radius: float) -> bool:
    return point.distance(center) < radius


def distance_to_line(line_start: Point, line_end: Point, point: Point) -> float:
    # Distance to the infinite line through both endpoints, not to the segment.
    a = line_end.x - line_start.x
    b = line_end.y - line_start.y
    root = math.hypot(a, b)
    if root == 0.0:
        return math.inf
    c = a * (line_start.y - point.y) - (line_start.x - point.x) * b
    return abs(c) / root


def in_expanded_bounds(point: Point, corner_a: Point, corner_b: Point, margin: float) -> bool:
    min_x = min(corner_a.x, corner_b.x) - margin
    max_x = max(corner_a.x, corner_b.x) + margin
    min_y = min(corner_a.y, corner_b.y) - margin
    max_y = max(corner_a.y, corner_b.y) + margin
    return min_x <= point.x <= max_x and min_y <= point.y <= max_y


def clamp_point(point: Point, bounds: Size) -> Point:
    return Point(
        max(0.0, min(bounds.width, point.x)),
        max(0.0, min(bounds.height, point.y)),
    )


def circle_layout(count: int, center: Point, radius: float) -> list[Point]:
    if count <= 0:
        return []
    step = math.tau / count
    return [
        center + Point(math.sin(idx * step) * radius, -math.cos(idx * step) * radius)
        for idx in range(count)
    ]

