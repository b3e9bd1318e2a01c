from __future__ import annotations

from pathlib import Path
from typing import Protocol

from domain.models import DrawableGraph, Size


class DrawingExporter(Protocol):
    def render(self, drawable: DrawableGraph, canvas: Size) -> bytes: ...

    def export(self, drawable: DrawableGraph, canvas: Size, path: Path) -> None: ...
