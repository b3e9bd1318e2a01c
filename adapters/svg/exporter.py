from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

from adapters.svg.writer import DEFAULT_FONT_SIZE, SvgItem, draw_graph_to_svg
from domain.models import DrawableGraph, Size
from domain.ports.exporter import DrawingExporter

logger = logging.getLogger(__name__)


class SvgDrawingExporter(DrawingExporter):
    def __init__(
        self,
        font_size: float = DEFAULT_FONT_SIZE,
        background: Sequence[SvgItem] = (),
    ) -> None:
        self.font_size = font_size
        self.background = list(background)

    def render(self, drawable: DrawableGraph, canvas: Size) -> bytes:
        writer = draw_graph_to_svg(
            drawable, canvas, background=self.background, font_size=self.font_size
        )
        return writer.to_bytes()

    def export(self, drawable: DrawableGraph, canvas: Size, path: Path) -> None:
        writer = draw_graph_to_svg(
            drawable, canvas, background=self.background, font_size=self.font_size
        )
        writer.write_to_file(path)
        logger.info(
            "Exported %d vertices and %d edges to %s",
            len(drawable.vertices),
            len(drawable.edges),
            path,
        )
