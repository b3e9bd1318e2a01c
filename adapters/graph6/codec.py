from __future__ import annotations

from domain.errors import (
    EmptyStringError,
    Graph6DecodeError,
    Graph6EncodeError,
    InvalidStartCharacterError,
    UnexpectedStringEndError,
    UnsupportedGraphSizeError,
)
from domain.models import Graph
from domain.ports.codec import GraphDecoder, GraphEncoder

HEADER_PREFIX = ">"
HEADER_LENGTH = 10  # ">>graph6<<"
BYTE_OFFSET = 63
MAX_BYTE = 126
EXTENDED_SIZE_MARKER = MAX_BYTE
SHORT_SIZE_LIMIT = 62
SUPPORTED_SIZE = 64


class InvalidCharacterError(Graph6DecodeError):
    def __init__(self, character: str, position: int) -> None:
        self.character = character
        self.position = position
        super().__init__(f"Invalid character {character!r} at position {position}")


def parse_graph6(text: str) -> Graph:
    vertex_count, start = _read_vertex_count(text)
    edges: list[tuple[int, int]] = []

    vertex = 1
    neighbour = 0
    for position in range(start, len(text)):
        if vertex >= vertex_count:
            break
        bits = _data_value(text, position)
        mask = 1 << 5
        while mask:
            if bits & mask:
                edges.append((neighbour, vertex))
            neighbour += 1
            if neighbour >= vertex:
                vertex += 1
                neighbour = 0
            if vertex >= vertex_count:
                break
            mask >>= 1

    return Graph(vertex_count=vertex_count, edges=edges)


def graph6_vertex_count(text: str) -> int:
    vertex_count, _ = _read_vertex_count(text)
    return vertex_count


def _read_vertex_count(text: str) -> tuple[int, int]:
    if not text:
        raise EmptyStringError()

    first = text[0]
    if not (BYTE_OFFSET <= ord(first) <= MAX_BYTE) and first != HEADER_PREFIX:
        raise InvalidStartCharacterError(first)

    index = 0
    if first == HEADER_PREFIX:
        index += HEADER_LENGTH
        if index >= len(text):
            raise UnexpectedStringEndError()

    size_byte = _data_value(text, index)
    if ord(text[index]) < EXTENDED_SIZE_MARKER:
        return size_byte, index + 1

    # "~" followed by three six-bit groups encodes 63 <= n <= 258047.
    if index + 3 >= len(text):
        raise UnexpectedStringEndError()
    if ord(text[index + 1]) == EXTENDED_SIZE_MARKER:
        raise UnsupportedGraphSizeError(SUPPORTED_SIZE)
    vertex_count = 0
    for offset in range(1, 4):
        vertex_count = (vertex_count << 6) | _data_value(text, index + offset)
    if vertex_count > SUPPORTED_SIZE:
        raise UnsupportedGraphSizeError(SUPPORTED_SIZE)
    return vertex_count, index + 4


def _data_value(text: str, position: int) -> int:
    code = ord(text[position])
    if not BYTE_OFFSET <= code <= MAX_BYTE:
        raise InvalidCharacterError(text[position], position)
    return code - BYTE_OFFSET


def encode_graph6(graph: Graph) -> str:
    vertex_count = graph.vertex_count
    if vertex_count > SUPPORTED_SIZE:
        msg = f"Cannot encode {vertex_count} vertices, at most {SUPPORTED_SIZE} are supported"
        raise Graph6EncodeError(msg)

    if vertex_count <= SHORT_SIZE_LIMIT:
        prefix = chr(vertex_count + BYTE_OFFSET)
    else:
        prefix = chr(EXTENDED_SIZE_MARKER) + "".join(
            chr(((vertex_count >> shift) & 0x3F) + BYTE_OFFSET) for shift in (12, 6, 0)
        )

    edges = graph.canonical_edges()
    bits = [
        1 if (neighbour, vertex) in edges else 0
        for vertex in range(1, vertex_count)
        for neighbour in range(vertex)
    ]
    while len(bits) % 6:
        bits.append(0)

    body = []
    for start in range(0, len(bits), 6):
        value = 0
        for bit in bits[start : start + 6]:
            value = (value << 1) | bit
        body.append(chr(value + BYTE_OFFSET))
    return prefix + "".join(body)


class Graph6Codec(GraphDecoder, GraphEncoder):
    def decode(self, text: str) -> Graph:
        return parse_graph6(text)

    def encode(self, graph: Graph) -> str:
        return encode_graph6(graph)
