from __future__ import annotations

from domain.models import Graph, Point
from domain.services.embedding import GraphEmbedding
from tests.helpers.engine_fixtures import make_embedding, place


def test_point_at_vertex_position_hits_that_vertex(embedding: GraphEmbedding) -> None:
    for index in range(embedding.vertex_count):
        assert embedding.vertex_at(embedding.get_position(index)) == index


def test_tiny_hit_radius_still_contains_own_position(embedding: GraphEmbedding) -> None:
    embedding.vertex_states[1].hit_radius = 1e-6
    assert embedding.vertex_at(embedding.get_position(1)) == 1


def test_vertex_hit_is_strictly_inside_radius(embedding: GraphEmbedding) -> None:
    center = embedding.get_position(0)
    radius = embedding.vertex_states[0].hit_radius
    assert embedding.vertex_at(Point(center.x + radius - 0.01, center.y)) == 0
    assert embedding.vertex_at(Point(center.x + radius, center.y)) is None


def test_overlapping_vertices_resolve_to_lowest_index(embedding: GraphEmbedding) -> None:
    place(embedding, (100.0, 100.0), (105.0, 100.0), (400.0, 400.0), (500.0, 500.0))
    assert embedding.vertex_at(Point(103.0, 100.0)) == 0


def test_vertex_at_misses_empty_space(embedding: GraphEmbedding) -> None:
    assert embedding.vertex_at(Point(400.0, 300.0)) is None


def test_edge_at_hits_near_the_line() -> None:
    embedding = make_embedding(Graph(vertex_count=2, edges=[(0, 1)]))
    place(embedding, (100.0, 100.0), (300.0, 100.0))
    assert embedding.edge_at(Point(200.0, 104.0)) == 0
    assert embedding.edge_at(Point(200.0, 105.0)) is None


def test_edge_at_uses_line_distance_inside_bounding_box() -> None:
    embedding = make_embedding(Graph(vertex_count=2, edges=[(0, 1)]))
    place(embedding, (100.0, 100.0), (300.0, 100.0))
    # Just past the end of the segment but inside the width-expanded box.
    assert embedding.edge_at(Point(304.0, 101.0)) == 0
    # Outside the box: rejected by the pre-filter.
    assert embedding.edge_at(Point(306.0, 100.0)) is None


def test_edge_at_prefers_lowest_index() -> None:
    embedding = make_embedding(Graph(vertex_count=2, edges=[(0, 1), (0, 1)]))
    place(embedding, (100.0, 100.0), (300.0, 100.0))
    assert embedding.edge_at(Point(150.0, 100.0)) == 0


def test_edge_with_coincident_endpoints_is_never_hit() -> None:
    embedding = make_embedding(Graph(vertex_count=2, edges=[(0, 1)]))
    place(embedding, (100.0, 100.0), (100.0, 100.0))
    assert embedding.edge_at(Point(100.0, 100.0)) is None
