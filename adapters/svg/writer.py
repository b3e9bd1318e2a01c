from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path
from typing import Union
from xml.sax.saxutils import escape

from adapters.filesystem.file_utils import write_bytes_atomic
from domain.errors import (
    AlreadyFinalisedError,
    AlreadyHasHeaderError,
    FileIOError,
    MissingHeaderError,
    NotFinalisedError,
    UnexpectedIndentationLevelError,
)
from domain.models import (
    Color,
    DrawableEdge,
    DrawableGraph,
    DrawableLabel,
    DrawableLine,
    DrawableRing,
    DrawableVertex,
    Point,
    Size,
)

XML_HEADER = '<?xml version="1.0" encoding="UTF-8" standalone="no"?>'
DOCSTRING = "<!-- Created with graph-embedding-editor -->"
SVG_NAMESPACE = "http://www.w3.org/2000/svg"
DEFAULT_FONT_SIZE = 24.0

SvgItem = Union[
    str,
    DrawableGraph,
    DrawableVertex,
    DrawableEdge,
    DrawableLabel,
    DrawableLine,
    DrawableRing,
]


def format_number(value: float) -> str:
    if float(value).is_integer():
        return str(int(value))
    text = f"{value:.3f}".rstrip("0").rstrip(".")
    return "0" if text == "-0" else text


def _paint(attribute: str, color: Color) -> str:
    painted = f' {attribute}="{color.to_hex()}"'
    if not color.is_opaque():
        painted += f' {attribute}-opacity="{format_number(round(color.a, 3))}"'
    return painted


def svg_circle(center: Point, radius: float, color: Color) -> str:
    return (
        f'<circle cx="{format_number(center.x)}" cy="{format_number(center.y)}"'
        f' r="{format_number(radius)}"{_paint("fill", color)}/>\n'
    )


def svg_line(start: Point, end: Point, width: float, color: Color) -> str:
    return (
        f'<line x1="{format_number(start.x)}" y1="{format_number(start.y)}"'
        f' x2="{format_number(end.x)}" y2="{format_number(end.y)}"'
        f'{_paint("stroke", color)} stroke-width="{format_number(width)}"/>\n'
    )


def svg_label(label: DrawableLabel, font_size: float = DEFAULT_FONT_SIZE) -> str:
    return (
        f'<text x="{format_number(label.position.x)}" y="{format_number(label.position.y)}"'
        f'{_paint("fill", label.color)} font-size="{format_number(font_size)}">'
        f"{escape(label.content)}</text>\n"
    )


def svg_ring(ring: DrawableRing) -> str:
    return (
        f'<circle cx="{format_number(ring.center.x)}" cy="{format_number(ring.center.y)}"'
        f' r="{format_number(ring.radius)}" fill="none"{_paint("stroke", ring.color)}'
        f' stroke-width="{format_number(ring.width)}"/>\n'
    )


def to_svg_string(item: SvgItem, font_size: float = DEFAULT_FONT_SIZE) -> str:
    if isinstance(item, str):
        return item
    if isinstance(item, DrawableLabel):
        return svg_label(item, font_size)
    if isinstance(item, DrawableVertex):
        text = svg_circle(item.position, item.border_radius, item.border_color)
        text += svg_circle(item.position, item.main_radius, item.main_color)
        if item.label is not None:
            text += svg_label(item.label, font_size)
        return text
    if isinstance(item, DrawableEdge):
        text = svg_line(item.start, item.end, item.width, item.color)
        if item.label is not None:
            text += svg_label(item.label, font_size)
        return text
    if isinstance(item, DrawableLine):
        return svg_line(item.start, item.end, item.width, item.color)
    if isinstance(item, DrawableRing):
        return svg_ring(item)
    if isinstance(item, DrawableGraph):
        parts = [to_svg_string(edge, font_size) for edge in item.edges]
        parts.extend(to_svg_string(vertex, font_size) for vertex in item.vertices)
        return "".join(parts)
    msg = f"Unsupported SVG item: {type(item).__name__}"
    raise TypeError(msg)


class SvgWriter:
    def __init__(self, indentation_size: int = 4, font_size: float = DEFAULT_FONT_SIZE) -> None:
        self.indentation_size = indentation_size
        self.font_size = font_size
        self.indentation_level = 0
        self.has_header = False
        self.finalised = False
        self._parts: list[str] = []

    def write_header(self, canvas: Size) -> None:
        if self.has_header:
            raise AlreadyHasHeaderError()

        self._parts.append(f"{XML_HEADER}\n{DOCSTRING}\n\n<svg\n")
        self.indentation_level += 1
        self.has_header = True

        self.add_item(
            f'viewBox="0 0 {format_number(canvas.width)} {format_number(canvas.height)}"'
        )
        self.add_item('version="1.1"')
        self.add_item(f'xmlns="{SVG_NAMESPACE}">')

    def add_item(self, item: SvgItem) -> None:
        if not self.has_header:
            raise MissingHeaderError()
        if self.finalised:
            raise AlreadyFinalisedError()

        indent = " " * (self.indentation_level * self.indentation_size)
        for line in to_svg_string(item, self.font_size).splitlines():
            self._parts.append(f"{indent}{line}\n")

    def add_items(self, items: Iterable[SvgItem]) -> None:
        for item in items:
            self.add_item(item)

    def begin_group(self, group_id: str) -> None:
        self.add_item(f'<g id="{escape(group_id)}">')
        self.indentation_level += 1

    def end_group(self) -> None:
        if self.indentation_level <= 1:
            raise UnexpectedIndentationLevelError(expected=2, found=self.indentation_level)
        self.indentation_level -= 1
        self.add_item("</g>")

    def finalise(self) -> None:
        if not self.has_header:
            raise MissingHeaderError()
        if self.finalised:
            raise AlreadyFinalisedError()
        if self.indentation_level != 1:
            raise UnexpectedIndentationLevelError(expected=1, found=self.indentation_level)

        self.indentation_level -= 1
        self._parts.append("</svg>\n")
        self.finalised = True

    def getvalue(self) -> str:
        return "".join(self._parts)

    def to_bytes(self) -> bytes:
        if not self.finalised:
            raise NotFinalisedError()
        return self.getvalue().encode("utf-8")

    def write_to_file(self, path: Path) -> None:
        payload = self.to_bytes()
        try:
            write_bytes_atomic(path, payload)
        except OSError as exc:
            raise FileIOError(exc) from exc


def draw_graph_to_svg(
    drawable: DrawableGraph,
    canvas: Size,
    *,
    background: Iterable[SvgItem] = (),
    font_size: float = DEFAULT_FONT_SIZE,
) -> SvgWriter:
    writer = SvgWriter(font_size=font_size)
    writer.write_header(canvas)
    background_items = list(background)
    if background_items:
        writer.begin_group("grid")
        writer.add_items(background_items)
        writer.end_group()
    writer.add_item(drawable)
    writer.finalise()
    return writer
