from __future__ import annotations

import logging
import math
import random
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from typing import List, Optional

from domain.geometry import (
    circle_layout,
    clamp_point,
    distance_to_line,
    in_expanded_bounds,
    normalize,
    point_in_circle,
    random_unit_vector,
)
from domain.gestures import Clock, GestureClassifier, GestureConfig
from domain.grid import CircularGrid, SquareGrid
from domain.models import (
    ORIGIN,
    DragState,
    DrawState,
    Edge,
    EdgeState,
    Graph,
    Point,
    Size,
    VertexState,
)
from domain.services.highlight_history import HighlightHistory

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ForceConfig:
    edge_rest_length: float = 70.0
    repulsion_strength: float = 50.0
    repulsion_half_distance: float = 20.0


@dataclass(frozen=True)
class EngineConfig:
    canvas: Size = Size(800.0, 600.0)
    layout_margin: float = 50.0
    vertex_hit_radius: float = 17.0
    edge_width: float = 5.0
    alignment_gain: float = 5.0
    gestures: GestureConfig = field(default_factory=GestureConfig)
    force: ForceConfig = field(default_factory=ForceConfig)


def parabola(x: float, top_x: float) -> float:
    # Zero at 0 and 2 * top_x, peaks at 1.0 when x == top_x.
    x = x / (2.0 * top_x)
    return 4.0 * (x - x * x)


class GraphEmbedding:
    def __init__(
        self,
        graph: Graph,
        config: EngineConfig | None = None,
        *,
        clock: Clock | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.config = config or EngineConfig()
        self.canvas = self.config.canvas
        self.rng = rng or random.Random()
        self.gestures = GestureClassifier(self.config.gestures, clock=clock)
        self.history = HighlightHistory()

        self.vertex_states: List[VertexState] = []
        self.edge_states: List[EdgeState] = []
        self.hovered_vertex: Optional[int] = None
        self.hovered_edge: Optional[int] = None
        self.dragged_vertex: Optional[int] = None
        self.drag_state: Optional[DragState] = None

        self._place_on_circle(graph.vertex_count)
        self.update_edges(graph)

    @property
    def vertex_count(self) -> int:
        return len(self.vertex_states)

    @property
    def edge_count(self) -> int:
        return len(self.edge_states)

    def set_canvas(self, canvas: Size) -> None:
        self.canvas = canvas

    def _place_on_circle(self, count: int) -> None:
        radius = min(self.canvas.width, self.canvas.height) / 2.0 - self.config.layout_margin
        self.vertex_states = [
            VertexState(position=position, hit_radius=self.config.vertex_hit_radius)
            for position in circle_layout(count, self.canvas.center(), radius)
        ]

    def update_edges(self, graph: Graph) -> None:
        self.edge_states = [
            EdgeState(endpoints=edge, width=self.config.edge_width) for edge in graph.edges
        ]
        if self.hovered_edge is not None and self.hovered_edge >= len(self.edge_states):
            self.hovered_edge = None

    def get_position(self, vertex: int) -> Point:
        if 0 <= vertex < len(self.vertex_states):
            return self.vertex_states[vertex].position
        return ORIGIN

    def set_position(self, vertex: int, position: Point) -> None:
        if vertex < 0:
            msg = f"Vertex index must be non-negative, got {vertex}"
            raise IndexError(msg)
        if vertex < len(self.vertex_states):
            self.vertex_states[vertex].position = position
            return
        # Writing past the end grows the collection with default vertices.
        while len(self.vertex_states) < vertex:
            self.vertex_states.append(VertexState(hit_radius=self.config.vertex_hit_radius))
        self.vertex_states.append(
            VertexState(position=position, hit_radius=self.config.vertex_hit_radius)
        )

    def vertex_at(self, point: Point) -> Optional[int]:
        for index, state in enumerate(self.vertex_states):
            if point_in_circle(point, state.position, state.hit_radius):
                return index
        return None

    def edge_at(self, point: Point) -> Optional[int]:
        for index, state in enumerate(self.edge_states):
            start = self.get_position(state.endpoints[0])
            end = self.get_position(state.endpoints[1])
            if not in_expanded_bounds(point, start, end, state.width):
                continue
            if distance_to_line(start, end, point) < state.width:
                return index
        return None

    def handle_pointer_sample(self, pointer_down: bool, pointer_position: Point) -> None:
        sample = self.gestures.register(pointer_down, pointer_position)

        if self.drag_state is not None:
            if sample.dragging:
                vertex = self.drag_state.vertex_index
                delta = pointer_position - self.drag_state.last_pointer_position
                self.set_position(vertex, self.get_position(vertex) + delta)
                self.drag_state = DragState(vertex, pointer_position)
            else:
                self.drag_state = None
                self.dragged_vertex = None
            return

        hovered_vertex = self.vertex_at(pointer_position)
        hovered_edge = self.edge_at(pointer_position)

        if not sample.dragging:
            self.hovered_vertex = hovered_vertex
        else:
            self.hovered_vertex = None
            if hovered_vertex is not None:
                self.dragged_vertex = hovered_vertex
                self.drag_state = DragState(hovered_vertex, pointer_position)

        self.hovered_edge = hovered_edge if hovered_vertex is None else None

        if sample.clicked:
            if self.hovered_vertex is not None:
                self.vertex_states[self.hovered_vertex].cycle_draw_state()
            if self.hovered_edge is not None:
                self.edge_states[self.hovered_edge].cycle_draw_state()

    def apply_force(self, graph: Graph) -> None:
        force = self.config.force
        edges = graph.canonical_edges()
        positions = [self.get_position(vertex) for vertex in range(graph.vertex_count)]
        forces: List[Point] = []

        for main, main_position in enumerate(positions):
            total = ORIGIN
            for secondary, secondary_position in enumerate(positions):
                if secondary == main:
                    continue
                distance = main_position.distance(secondary_position)
                if distance == 0.0:
                    total = total + random_unit_vector(self.rng)
                    continue
                direction = (secondary_position - main_position) / distance
                if (min(main, secondary), max(main, secondary)) in edges:
                    magnitude = math.log10(distance / force.edge_rest_length)
                else:
                    magnitude = -force.repulsion_strength * 0.5 ** (
                        distance / force.repulsion_half_distance
                    )
                total = total + direction * magnitude
            forces.append(total)

        self.apply_forces(forces)

    def align_to_square(self, grid: SquareGrid) -> None:
        gain = self.config.alignment_gain
        half_period = grid.delta_avg
        forces: List[Point] = []
        for state in self.vertex_states:
            target = grid.nearest_intersection(state.position)
            distance = target.distance(state.position)
            if distance > 0.0:
                direction = (target - state.position) / distance
                forces.append(direction * (gain * parabola(distance, half_period)))
            else:
                forces.append(ORIGIN)
        self.apply_forces(forces)

    def align_to_circular(self, grid: CircularGrid) -> None:
        gain = self.config.alignment_gain
        half_ring = 0.5 * grid.r_delta
        forces: List[Point] = []
        for state in self.vertex_states:
            direction = normalize(state.position - grid.center)
            if direction is None:
                forces.append(ORIGIN)
                continue
            distance_mod = grid.center.distance(state.position) % grid.r_delta
            sign = 1.0 if distance_mod - half_ring >= 0.0 else -1.0
            forces.append(direction * (sign * gain * parabola(distance_mod, half_ring)))
        self.apply_forces(forces)

    def apply_forces(self, forces: Sequence[Point]) -> None:
        if len(forces) != len(self.vertex_states):
            logger.warning(
                "Force count %d does not match vertex count %d; skipping pass.",
                len(forces),
                len(self.vertex_states),
            )
            return

        for vertex, force in enumerate(forces):
            if vertex == self.dragged_vertex:
                continue
            moved = self.get_position(vertex) + force
            self.set_position(vertex, clamp_point(moved, self.canvas))

    def highlight(self, edges: Iterable[Edge]) -> None:
        self.clear_highlighting()
        self._apply_highlight(edges)

    def add_to_history(self, highlight_set: Graph) -> None:
        self.history.append(highlight_set)

    def highlight_and_record(self, highlight_set: Graph) -> None:
        self.highlight(highlight_set.edges)
        self.history.record(highlight_set)

    def next_highlight(self) -> bool:
        return self._step_history(1)

    def previous_highlight(self) -> bool:
        return self._step_history(-1)

    def clear_highlighting(self) -> None:
        for state in self.edge_states:
            state.draw_state = DrawState.DEFAULT
        self.history.unset_cursor()

    def clear_history(self) -> None:
        self.history.clear()
        self.clear_highlighting()

    @property
    def history_size(self) -> int:
        return len(self.history)

    @property
    def current_highlight_index(self) -> Optional[int]:
        return self.history.current_index

    def _step_history(self, offset: int) -> bool:
        highlight_set = self.history.step(offset)
        if highlight_set is None:
            return False
        self._apply_highlight(highlight_set.edges, reset_others=True)
        return True

    def _apply_highlight(self, edges: Iterable[Edge], reset_others: bool = False) -> None:
        wanted = set(edges)
        for state in self.edge_states:
            if state.endpoints in wanted:
                state.draw_state = DrawState.HIGHLIGHTED
            elif reset_others:
                state.draw_state = DrawState.DEFAULT
