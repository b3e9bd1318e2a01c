from __future__ import annotations

from typing import Protocol

from domain.models import Graph


class GraphDecoder(Protocol):
    def decode(self, text: str) -> Graph: ...


class GraphEncoder(Protocol):
    def encode(self, graph: Graph) -> str: ...
