from __future__ import annotations

import logging
from pathlib import Path

from adapters.filesystem.file_utils import dump_json_bytes, write_bytes_atomic
from domain.models import DrawableGraph, Size
from domain.ports.exporter import DrawingExporter

logger = logging.getLogger(__name__)


class JsonDrawingExporter(DrawingExporter):
    def render(self, drawable: DrawableGraph, canvas: Size) -> bytes:
        payload = {
            "canvas": {"width": canvas.width, "height": canvas.height},
            **drawable.to_dict(),
        }
        return dump_json_bytes(payload)

    def export(self, drawable: DrawableGraph, canvas: Size, path: Path) -> None:
        write_bytes_atomic(path, self.render(drawable, canvas))
        logger.info("Wrote drawing snapshot to %s", path)
