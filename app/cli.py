from __future__ import annotations

import logging
from enum import Enum
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from adapters.filesystem.drawing_snapshot import JsonDrawingExporter
from adapters.graph6.codec import encode_graph6, parse_graph6
from adapters.svg.exporter import SvgDrawingExporter
from app.config import load_settings
from app.session import Controls, EditorSession
from domain.errors import Graph6DecodeError, Graph6EncodeError, SvgWriterError
from domain.models import Graph
from domain.ports.exporter import DrawingExporter

app = typer.Typer(no_args_is_help=True)
console = Console()


class ExportFormat(str, Enum):
    svg = "svg"
    json = "json"


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
    )


@app.command("decode")
def decode(text: str = typer.Argument(..., help="Graph in graph6 format.")) -> None:
    try:
        graph = parse_graph6(text)
    except Graph6DecodeError as exc:
        console.print(f"[red]Decode failed:[/] {exc}")
        raise typer.Exit(code=1) from exc

    table = Table(title=f"{graph.vertex_count} vertices, {len(graph.edges)} edges")
    table.add_column("#", justify="right")
    table.add_column("u", justify="right")
    table.add_column("v", justify="right")
    for index, (u, v) in enumerate(graph.edges):
        table.add_row(str(index), str(u), str(v))
    console.print(table)


@app.command("encode")
def encode(
    vertices: int = typer.Option(..., "--vertices", "-n", min=0, help="Number of vertices."),
    edge: List[str] = typer.Option([], "--edge", "-e", help="Edge as 'U-V', repeatable."),
) -> None:
    try:
        edges = [_parse_edge(item) for item in edge]
        graph = Graph(vertex_count=vertices, edges=edges)
        encoded = encode_graph6(graph)
    except (ValueError, Graph6EncodeError) as exc:
        console.print(f"[red]Encode failed:[/] {exc}")
        raise typer.Exit(code=1) from exc
    typer.echo(encoded)


@app.command("render")
def render(
    graph6: str = typer.Argument(..., help="Graph in graph6 format."),
    output: Path = typer.Option(Path("graph.svg"), "--output", "-o", help="Target file."),
    steps: int = typer.Option(0, min=0, help="Number of simulation frames to run before export."),
    force: Optional[bool] = typer.Option(None, "--force/--no-force", help="Apply force layout."),
    square_grid: Optional[bool] = typer.Option(
        None, "--square-grid/--no-square-grid", help="Align to the square grid."
    ),
    circular_grid: Optional[bool] = typer.Option(
        None, "--circular-grid/--no-circular-grid", help="Align to the circular grid."
    ),
    grid_size: Optional[float] = typer.Option(None, min=10.0, max=50.0, help="Grid spacing."),
    highlight: List[str] = typer.Option([], "--highlight", help="Graph6 highlight set, repeatable."),
    export_format: ExportFormat = typer.Option(ExportFormat.svg, "--format", help="Output format."),
    config: Optional[Path] = typer.Option(None, "--config", help="YAML settings file."),
) -> None:
    settings = load_settings(config)
    controls = settings.controls
    session = EditorSession(
        engine_config=settings.to_engine_config(),
        draw_config=settings.to_draw_config(),
        controls=Controls(
            apply_force=controls.apply_force if force is None else force,
            align_to_square_grid=(
                controls.align_to_square_grid if square_grid is None else square_grid
            ),
            align_to_circular_grid=(
                controls.align_to_circular_grid if circular_grid is None else circular_grid
            ),
            grid_size=controls.grid_size if grid_size is None else grid_size,
            keep_embedding=controls.keep_embedding,
        ),
    )

    try:
        session.import_graph(graph6)
    except Graph6DecodeError as exc:
        console.print(f"[red]Decode failed:[/] {exc}")
        raise typer.Exit(code=1) from exc

    if highlight:
        result = session.add_highlighting("\n".join(highlight))
        if result.skipped:
            console.print(f"[yellow]Skipped {result.skipped} invalid highlight set(s)[/]")

    session.run(steps)

    exporter: DrawingExporter
    if export_format is ExportFormat.json:
        exporter = JsonDrawingExporter()
    else:
        background = session.grid_overlay() if settings.export.include_grid else []
        exporter = SvgDrawingExporter(
            font_size=settings.export.svg_font_size, background=background
        )

    try:
        session.export(exporter, output)
    except SvgWriterError as exc:
        console.print(f"[red]Export failed:[/] {exc}")
        raise typer.Exit(code=1) from exc
    console.print(f"[green]Wrote[/] {output}")


def _parse_edge(raw: str) -> tuple[int, int]:
    left, sep, right = raw.partition("-")
    if not sep:
        msg = f"Edge must look like 'U-V', got {raw!r}"
        raise ValueError(msg)
    return int(left), int(right)


if __name__ == "__main__":
    app()
