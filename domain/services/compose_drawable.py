from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import List

from domain.grid import CircularGrid, SquareGrid
from domain.models import (
    BLACK,
    TRANSPARENT,
    WHITE,
    Color,
    DrawableEdge,
    DrawableGraph,
    DrawableLabel,
    DrawableLine,
    DrawableRing,
    DrawableVertex,
    DrawState,
    Point,
    Size,
)
from domain.services.embedding import GraphEmbedding

INTERACTION_GROWTH = 2.0
GRID_LINE_WIDTH = 2.0
EDGE_LABEL_OFFSET = 10.0
EDGE_LABEL_ANGLE_SHIFT = 0.3


@dataclass
class VertexDrawConfig:
    main_color: Color = Color.from_hex("#66BFFF")
    border_color: Color = Color.from_hex("#0052AC")
    main_size: float = 12.0
    border_size: float = 5.0
    highlight_color: Color = Color.from_hex("#00E430")
    unhighlight_color: Color = Color.from_hex("#BE2137")
    drag_color: Color = Color.from_hex("#0052AC")
    draw_index: bool = True
    zero_indexed: bool = False
    label_color: Color = BLACK
    label_size: float = 35.0


@dataclass
class EdgeDrawConfig:
    width: float = 5.0
    color: Color = BLACK
    highlight_color: Color = Color.from_hex("#BE2137")
    unhighlight_color: Color = Color.from_hex("#C8C8C8")
    draw_index: bool = False
    zero_indexed: bool = False
    label_color: Color = Color.from_hex("#0079F1")
    label_size: float = 40.0


@dataclass
class DrawConfig:
    vertex: VertexDrawConfig = field(default_factory=VertexDrawConfig)
    edge: EdgeDrawConfig = field(default_factory=EdgeDrawConfig)
    background_color: Color = Color.from_hex("#E8E8E8")


@dataclass(frozen=True)
class VertexStyle:
    main_color: Color
    border_color: Color


def vertex_style(state: DrawState, config: VertexDrawConfig) -> VertexStyle:
    if state is DrawState.HIGHLIGHTED:
        return VertexStyle(config.highlight_color, config.highlight_color)
    if state is DrawState.UNHIGHLIGHTED:
        return VertexStyle(config.unhighlight_color, config.unhighlight_color)
    if state is DrawState.HIDDEN:
        return VertexStyle(TRANSPARENT, TRANSPARENT)
    return VertexStyle(config.main_color, config.border_color)


def edge_color(state: DrawState, config: EdgeDrawConfig) -> Color:
    if state is DrawState.HIGHLIGHTED:
        return config.highlight_color
    if state is DrawState.UNHIGHLIGHTED:
        return config.unhighlight_color
    if state is DrawState.HIDDEN:
        return TRANSPARENT
    return config.color


def edge_label_index(u: int, v: int) -> int:
    low, high = min(u, v), max(u, v)
    return high * (high - 1) // 2 + low


def display_index(index: int, zero_indexed: bool) -> str:
    return str(index if zero_indexed else index + 1)


def vertex_label_position(index: int, position: Point, character_width: float) -> Point:
    string_width = character_width
    if index >= 10:
        string_width += character_width
    return position + Point(-string_width / 2.0 + 9.0, character_width / 2.0 - 10.0)


def edge_label_offset(start: Point, end: Point) -> Point:
    diff = end - start
    angle = (math.atan2(diff.y, diff.x) + math.pi) % math.pi - EDGE_LABEL_ANGLE_SHIFT
    if angle < math.pi / 4.0 or math.pi / 2.0 <= angle < 3.0 * math.pi / 4.0:
        return Point(-EDGE_LABEL_OFFSET, -EDGE_LABEL_OFFSET)
    return Point(EDGE_LABEL_OFFSET, -EDGE_LABEL_OFFSET)


def compose_drawable_graph(embedding: GraphEmbedding, config: DrawConfig) -> DrawableGraph:
    return DrawableGraph(
        vertices=_compose_vertices(embedding, config.vertex),
        edges=_compose_edges(embedding, config.edge),
    )


def _compose_vertices(embedding: GraphEmbedding, config: VertexDrawConfig) -> List[DrawableVertex]:
    vertices: List[DrawableVertex] = []
    for index in reversed(range(embedding.vertex_count)):
        state = embedding.vertex_states[index]
        main_radius = config.main_size
        border_radius = config.border_size + main_radius
        style = vertex_style(state.draw_state, config)
        main_color, border_color = style.main_color, style.border_color
        interacted = False

        if embedding.hovered_vertex == index:
            main_radius += INTERACTION_GROWTH
            border_radius += INTERACTION_GROWTH
            main_color = border_color = config.highlight_color
            interacted = True

        if embedding.dragged_vertex == index:
            main_color = border_color = config.drag_color
            interacted = True

        if state.draw_state is DrawState.HIDDEN and not interacted:
            continue

        label = None
        if config.draw_index:
            label = DrawableLabel(
                content=display_index(index, config.zero_indexed),
                position=vertex_label_position(index, state.position, config.label_size),
                size=config.label_size,
                color=config.label_color,
            )

        vertices.append(
            DrawableVertex(
                index=index,
                position=state.position,
                main_radius=main_radius,
                border_radius=border_radius,
                main_color=main_color,
                border_color=border_color,
                label=label,
            )
        )
    return vertices


def _compose_edges(embedding: GraphEmbedding, config: EdgeDrawConfig) -> List[DrawableEdge]:
    edges: List[DrawableEdge] = []
    for index, state in enumerate(embedding.edge_states):
        u, v = state.endpoints
        start = embedding.get_position(u)
        end = embedding.get_position(v)
        width = config.width
        color = edge_color(state.draw_state, config)
        hovered = embedding.hovered_edge == index

        if hovered:
            width += INTERACTION_GROWTH
            color = config.highlight_color

        if state.draw_state is DrawState.HIDDEN and not hovered:
            continue

        label = None
        if config.draw_index:
            label = DrawableLabel(
                content=display_index(edge_label_index(u, v), config.zero_indexed),
                position=(start + end) / 2.0 + edge_label_offset(start, end),
                size=config.label_size,
                color=config.label_color,
            )

        edges.append(
            DrawableEdge(index=index, start=start, end=end, width=width, color=color, label=label)
        )
    return edges


def compose_square_grid(grid: SquareGrid, canvas: Size) -> List[DrawableLine]:
    lines: List[DrawableLine] = []
    if grid.x_delta <= 0 or grid.y_delta <= 0:
        return lines
    x = grid.x_offset
    while x < canvas.width:
        lines.append(DrawableLine(Point(x, 0.0), Point(x, canvas.height), GRID_LINE_WIDTH, WHITE))
        x += grid.x_delta
    y = grid.y_offset
    while y < canvas.height:
        lines.append(DrawableLine(Point(0.0, y), Point(canvas.width, y), GRID_LINE_WIDTH, WHITE))
        y += grid.y_delta
    return lines


def compose_circular_grid(grid: CircularGrid) -> List[DrawableRing]:
    return [
        DrawableRing(center=grid.center, radius=radius, width=GRID_LINE_WIDTH, color=WHITE)
        for radius in grid.ring_radii()
    ]
