from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from pathlib import Path
from typing import List

from adapters.graph6.codec import parse_graph6
from adapters.svg.writer import SvgItem
from domain.errors import Graph6DecodeError
from domain.gestures import Clock
from domain.grid import CircularGrid, SquareGrid
from domain.models import DrawableGraph, Graph, Point
from domain.ports.exporter import DrawingExporter
from domain.services.compose_drawable import (
    DrawConfig,
    compose_circular_grid,
    compose_drawable_graph,
    compose_square_grid,
)
from domain.services.embedding import EngineConfig, GraphEmbedding

logger = logging.getLogger(__name__)

# K4 minus one edge; what the editor shows before anything is imported.
DEFAULT_GRAPH = Graph(vertex_count=4, edges=[(0, 1), (1, 2), (2, 3), (0, 3), (1, 3)])


@dataclass
class Controls:
    apply_force: bool = False
    align_to_square_grid: bool = False
    align_to_circular_grid: bool = False
    grid_size: float = 30.0
    keep_embedding: bool = False


@dataclass(frozen=True)
class HighlightImportResult:
    recorded: int
    skipped: int


class EditorSession:
    def __init__(
        self,
        graph: Graph | None = None,
        engine_config: EngineConfig | None = None,
        draw_config: DrawConfig | None = None,
        controls: Controls | None = None,
        *,
        clock: Clock | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.graph = graph or DEFAULT_GRAPH
        self.engine_config = engine_config or EngineConfig()
        self.draw_config = draw_config or DrawConfig()
        self.controls = controls or Controls()
        self._clock = clock
        self._rng = rng
        self.embedding = self._build_embedding(self.graph)

        canvas = self.engine_config.canvas
        self.square_grid = SquareGrid(self.controls.grid_size, self.controls.grid_size)
        self.square_grid.make_square()
        self.circular_grid = CircularGrid.for_canvas(self.controls.grid_size, canvas)
        self.drawable = compose_drawable_graph(self.embedding, self.draw_config)

    def _build_embedding(self, graph: Graph) -> GraphEmbedding:
        return GraphEmbedding(graph, self.engine_config, clock=self._clock, rng=self._rng)

    def reset_embedding(self) -> None:
        self.embedding = self._build_embedding(self.graph)

    def import_graph(self, text: str) -> Graph:
        try:
            graph = parse_graph6(text.strip())
        except Graph6DecodeError as exc:
            logger.warning("Ignoring graph import: %s", exc)
            raise

        self.graph = graph
        if self.controls.keep_embedding:
            if graph.vertex_count != self.embedding.vertex_count:
                logger.warning(
                    "Keeping %d vertex positions for a graph with %d vertices.",
                    self.embedding.vertex_count,
                    graph.vertex_count,
                )
            self.embedding.update_edges(graph)
        else:
            self.embedding = self._build_embedding(graph)
        return graph

    def add_highlighting(self, text: str) -> HighlightImportResult:
        recorded = 0
        skipped = 0
        for line in text.splitlines():
            candidate = line.strip()
            if not candidate:
                continue
            try:
                highlight_set = parse_graph6(candidate)
            except Graph6DecodeError as exc:
                logger.info("Skipping highlight line %r: %s", candidate, exc)
                skipped += 1
                continue
            self.embedding.highlight_and_record(highlight_set)
            recorded += 1
        return HighlightImportResult(recorded=recorded, skipped=skipped)

    def next_highlighting(self) -> bool:
        return self.embedding.next_highlight()

    def previous_highlighting(self) -> bool:
        return self.embedding.previous_highlight()

    def clear_highlighting(self) -> None:
        self.embedding.clear_highlighting()

    def clear_history(self) -> None:
        self.embedding.clear_history()

    def step(self, pointer_down: bool = False, pointer_position: Point | None = None) -> DrawableGraph:
        canvas = self.embedding.canvas
        position = pointer_position or Point(-1.0, -1.0)
        self.embedding.handle_pointer_sample(pointer_down, position)

        if self.controls.apply_force:
            self.embedding.apply_force(self.graph)

        if self.controls.align_to_square_grid:
            self.square_grid.set_deltas_square(self.controls.grid_size)
            self.square_grid.set_offsets_from_canvas(canvas)
            self.embedding.align_to_square(self.square_grid)

        if self.controls.align_to_circular_grid:
            self.circular_grid.set_r_delta(self.controls.grid_size)
            self.circular_grid.set_from_canvas(canvas)
            self.embedding.align_to_circular(self.circular_grid)

        self.drawable = compose_drawable_graph(self.embedding, self.draw_config)
        return self.drawable

    def run(self, frames: int) -> DrawableGraph:
        for _ in range(max(0, frames)):
            self.step()
        return self.drawable

    def grid_overlay(self) -> List[SvgItem]:
        canvas = self.embedding.canvas
        items: List[SvgItem] = []
        if self.controls.align_to_square_grid:
            self.square_grid.set_deltas_square(self.controls.grid_size)
            self.square_grid.set_offsets_from_canvas(canvas)
            items.extend(compose_square_grid(self.square_grid, canvas))
        if self.controls.align_to_circular_grid:
            self.circular_grid.set_r_delta(self.controls.grid_size)
            self.circular_grid.set_from_canvas(canvas)
            items.extend(compose_circular_grid(self.circular_grid))
        return items

    def export(self, exporter: DrawingExporter, path: Path) -> None:
        drawable = compose_drawable_graph(self.embedding, self.draw_config)
        exporter.export(drawable, self.embedding.canvas, path)
