from __future__ import annotations

import pytest

from domain.grid import CircularGrid, SquareGrid
from domain.models import Point, Size


def test_make_square_uses_smaller_delta() -> None:
    grid = SquareGrid(30.0, 20.0)
    grid.make_square()
    assert (grid.x_delta, grid.y_delta) == (20.0, 20.0)
    assert grid.delta_avg == 20.0


def test_offsets_put_a_grid_line_through_the_canvas_center() -> None:
    grid = SquareGrid(30.0, 30.0)
    grid.set_offsets_from_canvas(Size(800.0, 600.0))
    assert grid.x_offset == pytest.approx(400.0 % 30.0)
    assert grid.y_offset == pytest.approx(300.0 % 30.0)
    assert grid.nearest_intersection(Point(401.0, 299.0)) == Point(400.0, 300.0)


def test_nearest_intersection_rounds_half_away_from_zero() -> None:
    grid = SquareGrid(10.0, 10.0)
    assert grid.nearest_intersection(Point(15.0, 24.9)) == Point(20.0, 20.0)
    assert grid.nearest_intersection(Point(-15.0, -5.0)) == Point(-20.0, -10.0)


def test_set_deltas_square() -> None:
    grid = SquareGrid(10.0, 20.0)
    grid.set_deltas_square(42.0)
    assert grid.delta_avg == 42.0


def test_circular_grid_follows_canvas() -> None:
    grid = CircularGrid.for_canvas(100.0, Size(800.0, 600.0))
    assert grid.center == Point(400.0, 300.0)
    assert grid.max_radius == 800.0
    assert grid.ring_radii() == [100.0, 200.0, 300.0, 400.0, 500.0, 600.0, 700.0]

    grid.set_r_delta(300.0)
    assert grid.ring_radii() == [300.0, 600.0]


def test_circular_grid_without_spacing_has_no_rings() -> None:
    grid = CircularGrid(r_delta=0.0, max_radius=100.0)
    assert grid.ring_radii() == []
