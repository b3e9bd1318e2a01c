from __future__ import annotations

import pytest

from domain.models import DrawState, Graph, Point, Size
from domain.services.embedding import GraphEmbedding
from tests.helpers.engine_fixtures import make_embedding


def test_build_places_vertices_evenly_on_a_circle(embedding: GraphEmbedding) -> None:
    expected = [(400.0, 50.0), (650.0, 300.0), (400.0, 550.0), (150.0, 300.0)]
    assert embedding.vertex_count == 4
    for index, (x, y) in enumerate(expected):
        position = embedding.get_position(index)
        assert position.x == pytest.approx(x)
        assert position.y == pytest.approx(y)


def test_build_uses_smaller_canvas_dimension_for_radius() -> None:
    embedding = make_embedding(Graph(vertex_count=2), canvas=Size(1000.0, 300.0))
    top = embedding.get_position(0)
    assert top.x == pytest.approx(500.0)
    assert top.y == pytest.approx(150.0 - 100.0)


def test_build_derives_edge_states_in_graph_order(embedding: GraphEmbedding) -> None:
    assert [state.endpoints for state in embedding.edge_states] == [(0, 1), (1, 2), (2, 3), (0, 3)]
    assert all(state.draw_state is DrawState.DEFAULT for state in embedding.edge_states)
    assert all(state.width == 5.0 for state in embedding.edge_states)
    assert embedding.hovered_vertex is None
    assert embedding.dragged_vertex is None
    assert embedding.history_size == 0
    assert embedding.current_highlight_index is None


def test_build_keeps_duplicate_edges() -> None:
    embedding = make_embedding(Graph(vertex_count=2, edges=[(0, 1), (0, 1)]))
    assert embedding.edge_count == 2


def test_empty_graph_builds_empty_embedding() -> None:
    embedding = make_embedding(Graph(vertex_count=0))
    assert embedding.vertex_count == 0
    assert embedding.edge_count == 0


def test_update_edges_keeps_vertex_positions(embedding: GraphEmbedding) -> None:
    embedding.set_position(2, Point(12.0, 34.0))
    before = [embedding.get_position(index) for index in range(embedding.vertex_count)]

    replacement = Graph(vertex_count=4, edges=[(0, 2), (1, 3), (0, 1)])
    embedding.update_edges(replacement)

    assert [embedding.get_position(index) for index in range(4)] == before
    assert embedding.edge_count == len(replacement.edges)
    assert [state.endpoints for state in embedding.edge_states] == replacement.edges


def test_update_edges_resets_edge_draw_states(embedding: GraphEmbedding) -> None:
    embedding.edge_states[0].draw_state = DrawState.HIDDEN
    embedding.update_edges(Graph(vertex_count=4, edges=[(0, 1)]))
    assert embedding.edge_states[0].draw_state is DrawState.DEFAULT


def test_get_position_out_of_range_returns_origin(embedding: GraphEmbedding) -> None:
    assert embedding.get_position(99) == Point(0.0, 0.0)
    assert embedding.get_position(-1) == Point(0.0, 0.0)


def test_set_position_overwrites_in_place(embedding: GraphEmbedding) -> None:
    embedding.set_position(1, Point(5.0, 6.0))
    assert embedding.get_position(1) == Point(5.0, 6.0)
    assert embedding.vertex_count == 4


def test_set_position_beyond_end_grows_with_defaults(embedding: GraphEmbedding) -> None:
    embedding.set_position(6, Point(1.0, 2.0))
    assert embedding.vertex_count == 7
    assert embedding.get_position(4) == Point(0.0, 0.0)
    assert embedding.get_position(5) == Point(0.0, 0.0)
    assert embedding.get_position(6) == Point(1.0, 2.0)
    assert embedding.vertex_states[5].hit_radius == embedding.config.vertex_hit_radius


def test_set_position_rejects_negative_index(embedding: GraphEmbedding) -> None:
    with pytest.raises(IndexError):
        embedding.set_position(-1, Point(0.0, 0.0))
