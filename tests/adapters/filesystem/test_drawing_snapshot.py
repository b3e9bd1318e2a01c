from __future__ import annotations

import json
from pathlib import Path

from adapters.filesystem.drawing_snapshot import JsonDrawingExporter
from adapters.filesystem.file_utils import dump_json_bytes, write_json_atomic
from domain.models import Size
from domain.services.compose_drawable import DrawConfig, compose_drawable_graph
from domain.services.embedding import GraphEmbedding

CANVAS = Size(800.0, 600.0)


def test_snapshot_lists_canvas_vertices_and_edges(embedding: GraphEmbedding) -> None:
    drawable = compose_drawable_graph(embedding, DrawConfig())
    payload = json.loads(JsonDrawingExporter().render(drawable, CANVAS))

    assert payload["canvas"] == {"width": 800.0, "height": 600.0}
    assert [vertex["index"] for vertex in payload["vertices"]] == [3, 2, 1, 0]
    top = payload["vertices"][-1]
    assert top["position"] == {"x": 400.0, "y": 50.0}
    assert top["main_color"] == "#66BFFF"
    assert top["label"]["content"] == "1"
    assert payload["edges"][0]["color"] == "#000000"
    assert payload["edges"][0]["label"] is None


def test_snapshot_export_writes_atomically(embedding: GraphEmbedding, tmp_path: Path) -> None:
    drawable = compose_drawable_graph(embedding, DrawConfig())
    target = tmp_path / "snapshots" / "graph.json"
    JsonDrawingExporter().export(drawable, CANVAS, target)

    assert json.loads(target.read_bytes())["canvas"]["width"] == 800.0
    assert not target.with_suffix(".json.tmp").exists()
    assert not target.with_suffix(".json.lock").exists()


def test_json_helpers(tmp_path: Path) -> None:
    assert json.loads(dump_json_bytes({"a": [1, 2]})) == {"a": [1, 2]}
    target = tmp_path / "data.json"
    write_json_atomic(target, {"ok": True})
    assert json.loads(target.read_text()) == {"ok": True}
