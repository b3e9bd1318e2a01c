from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Set, Tuple

from pydantic import BaseModel, ConfigDict, Field, model_validator

Edge = Tuple[int, int]


@dataclass(frozen=True)
class Point:
    x: float
    y: float

    def __add__(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> Point:
        return Point(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def __truediv__(self, divisor: float) -> Point:
        return Point(self.x / divisor, self.y / divisor)

    def length(self) -> float:
        return math.hypot(self.x, self.y)

    def distance(self, other: Point) -> float:
        return math.hypot(self.x - other.x, self.y - other.y)


ORIGIN = Point(0.0, 0.0)


@dataclass(frozen=True)
class Size:
    width: float
    height: float

    def center(self) -> Point:
        return Point(self.width / 2.0, self.height / 2.0)


@dataclass(frozen=True)
class Color:
    r: float
    g: float
    b: float
    a: float = 1.0

    @classmethod
    def from_hex(cls, value: str) -> Color:
        raw = value.strip().lstrip("#")
        if len(raw) not in {6, 8}:
            msg = f"Expected #RRGGBB or #RRGGBBAA color, got {value!r}"
            raise ValueError(msg)
        try:
            channels = [int(raw[idx : idx + 2], 16) / 255.0 for idx in range(0, len(raw), 2)]
        except ValueError as exc:
            msg = f"Invalid hex color: {value!r}"
            raise ValueError(msg) from exc
        return cls(*channels)

    def to_hex(self) -> str:
        r, g, b = (_channel_byte(channel) for channel in (self.r, self.g, self.b))
        return f"#{r:02X}{g:02X}{b:02X}"

    def is_opaque(self) -> bool:
        return self.a >= 1.0


def _channel_byte(value: float) -> int:
    return max(0, min(255, round(value * 255.0)))


TRANSPARENT = Color(0.0, 0.0, 0.0, 0.0)
BLACK = Color(0.0, 0.0, 0.0)
WHITE = Color(1.0, 1.0, 1.0)


class DrawState(Enum):
    DEFAULT = "default"
    HIGHLIGHTED = "highlighted"
    UNHIGHLIGHTED = "unhighlighted"
    HIDDEN = "hidden"

    def cycled(self) -> DrawState:
        return _DRAW_STATE_CYCLE[self]


_DRAW_STATE_CYCLE = {
    DrawState.DEFAULT: DrawState.HIGHLIGHTED,
    DrawState.HIGHLIGHTED: DrawState.UNHIGHLIGHTED,
    DrawState.UNHIGHLIGHTED: DrawState.HIDDEN,
    DrawState.HIDDEN: DrawState.DEFAULT,
}


class Graph(BaseModel):
    model_config = ConfigDict(frozen=True)

    vertex_count: int = Field(0, ge=0)
    edges: List[Edge] = Field(default_factory=list)

    @model_validator(mode="after")
    def ensure_edges_in_range(self) -> Graph:
        for u, v in self.edges:
            if u == v:
                msg = f"Self-loop edge ({u}, {v}) is not allowed"
                raise ValueError(msg)
            if not (0 <= u < self.vertex_count and 0 <= v < self.vertex_count):
                msg = f"Edge ({u}, {v}) out of range for {self.vertex_count} vertices"
                raise ValueError(msg)
        return self

    def canonical_edges(self) -> Set[Edge]:
        return {(min(u, v), max(u, v)) for u, v in self.edges}


@dataclass
class VertexState:
    position: Point = ORIGIN
    hit_radius: float = 17.0
    draw_state: DrawState = DrawState.DEFAULT

    def cycle_draw_state(self) -> None:
        self.draw_state = self.draw_state.cycled()


@dataclass
class EdgeState:
    endpoints: Edge = (0, 0)
    width: float = 5.0
    draw_state: DrawState = DrawState.DEFAULT

    def cycle_draw_state(self) -> None:
        self.draw_state = self.draw_state.cycled()


@dataclass(frozen=True)
class DragState:
    vertex_index: int
    last_pointer_position: Point = field(default=ORIGIN)


@dataclass(frozen=True)
class DrawableLabel:
    content: str
    position: Point
    size: float
    color: Color


@dataclass(frozen=True)
class DrawableVertex:
    index: int
    position: Point
    main_radius: float
    border_radius: float
    main_color: Color
    border_color: Color
    label: DrawableLabel | None = None


@dataclass(frozen=True)
class DrawableEdge:
    index: int
    start: Point
    end: Point
    width: float
    color: Color
    label: DrawableLabel | None = None


@dataclass(frozen=True)
class DrawableLine:
    start: Point
    end: Point
    width: float
    color: Color


@dataclass(frozen=True)
class DrawableRing:
    center: Point
    radius: float
    width: float
    color: Color


@dataclass(frozen=True)
class DrawableGraph:
    vertices: List[DrawableVertex]
    edges: List[DrawableEdge]

    def vertex_indices(self) -> List[int]:
        return [vertex.index for vertex in self.vertices]

    def to_dict(self) -> dict:
        return {
            "vertices": [_vertex_to_dict(vertex) for vertex in self.vertices],
            "edges": [_edge_to_dict(edge) for edge in self.edges],
        }


def _point_to_dict(point: Point) -> dict:
    return {"x": point.x, "y": point.y}


def _label_to_dict(label: DrawableLabel | None) -> dict | None:
    if label is None:
        return None
    return {
        "content": label.content,
        "position": _point_to_dict(label.position),
        "size": label.size,
        "color": label.color.to_hex(),
    }


def _vertex_to_dict(vertex: DrawableVertex) -> dict:
    return {
        "index": vertex.index,
        "position": _point_to_dict(vertex.position),
        "main_radius": vertex.main_radius,
        "border_radius": vertex.border_radius,
        "main_color": vertex.main_color.to_hex(),
        "border_color": vertex.border_color.to_hex(),
        "label": _label_to_dict(vertex.label),
    }


def _edge_to_dict(edge: DrawableEdge) -> dict:
    return {
        "index": edge.index,
        "start": _point_to_dict(edge.start),
        "end": _point_to_dict(edge.end),
        "width": edge.width,
        "color": edge.color.to_hex(),
        "label": _label_to_dict(edge.label),
    }
