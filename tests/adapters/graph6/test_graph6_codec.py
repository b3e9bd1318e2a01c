from __future__ import annotations

import random

import pytest

from adapters.graph6.codec import (
    Graph6Codec,
    InvalidCharacterError,
    encode_graph6,
    graph6_vertex_count,
    parse_graph6,
)
from domain.errors import (
    EmptyStringError,
    Graph6DecodeError,
    Graph6EncodeError,
    InvalidStartCharacterError,
    UnexpectedStringEndError,
    UnsupportedGraphSizeError,
)
from domain.models import Graph

K4_EDGES = [(0, 1), (0, 2), (1, 2), (0, 3), (1, 3), (2, 3)]


@pytest.mark.parametrize(
    ("text", "vertex_count", "edges"),
    [
        ("?", 0, []),
        ("@", 1, []),
        ("A?", 2, []),
        ("A_", 2, [(0, 1)]),
        ("Bw", 3, [(0, 1), (0, 2), (1, 2)]),
        ("C~", 4, K4_EDGES),
        ("Cl", 4, [(0, 1), (1, 2), (0, 3), (2, 3)]),
    ],
)
def test_parse_known_graphs(text: str, vertex_count: int, edges: list[tuple[int, int]]) -> None:
    graph = parse_graph6(text)
    assert graph.vertex_count == vertex_count
    assert graph.edges == edges


def test_parse_accepts_optional_header() -> None:
    assert parse_graph6(">>graph6<<Bw") == parse_graph6("Bw")


def test_parse_without_body_has_no_edges() -> None:
    graph = parse_graph6("C")
    assert graph.vertex_count == 4
    assert graph.edges == []


def test_parse_ignores_padding_bits() -> None:
    # "Bw" uses three of six bits; trailing ones in the padding are not edges.
    assert parse_graph6("B~").edges == [(0, 1), (0, 2), (1, 2)]


def test_parse_extended_size_prefix() -> None:
    assert graph6_vertex_count("~??~") == 63
    graph = parse_graph6("~?@?" + "?" * 336)
    assert graph.vertex_count == 64
    assert graph.edges == []


def test_empty_string_is_rejected() -> None:
    with pytest.raises(EmptyStringError):
        parse_graph6("")


@pytest.mark.parametrize("text", [" A_", "!", "\x7f"])
def test_invalid_start_character(text: str) -> None:
    with pytest.raises(InvalidStartCharacterError) as excinfo:
        parse_graph6(text)
    assert excinfo.value.character == text[0]


@pytest.mark.parametrize("text", [">>graph6<<", ">short", "~??"])
def test_truncated_prefix(text: str) -> None:
    with pytest.raises(UnexpectedStringEndError):
        parse_graph6(text)


@pytest.mark.parametrize("text", ["~~??????", "~?@@" + "?" * 400])
def test_graphs_above_supported_size(text: str) -> None:
    with pytest.raises(UnsupportedGraphSizeError) as excinfo:
        parse_graph6(text)
    assert excinfo.value.supported_size == 64


def test_invalid_body_character_reports_position() -> None:
    with pytest.raises(InvalidCharacterError) as excinfo:
        parse_graph6("C ")
    assert excinfo.value.position == 1
    assert isinstance(excinfo.value, Graph6DecodeError)


def test_decode_errors_are_value_errors() -> None:
    with pytest.raises(ValueError):
        parse_graph6("")


@pytest.mark.parametrize(
    ("graph", "expected"),
    [
        (Graph(vertex_count=0), "?"),
        (Graph(vertex_count=1), "@"),
        (Graph(vertex_count=2, edges=[(1, 0)]), "A_"),
        (Graph(vertex_count=4, edges=K4_EDGES), "C~"),
        (Graph(vertex_count=4, edges=[(0, 1), (1, 2), (2, 3), (0, 3), (1, 3)]), "Cn"),
    ],
)
def test_encode_known_graphs(graph: Graph, expected: str) -> None:
    assert encode_graph6(graph) == expected


def test_encode_uses_extended_prefix_above_62_vertices() -> None:
    encoded = encode_graph6(Graph(vertex_count=64, edges=[(0, 63)]))
    assert encoded.startswith("~?@?")
    decoded = parse_graph6(encoded)
    assert decoded.vertex_count == 64
    assert decoded.edges == [(0, 63)]


def test_encode_rejects_large_graphs() -> None:
    with pytest.raises(Graph6EncodeError):
        encode_graph6(Graph(vertex_count=65))


def test_codec_class_delegates() -> None:
    codec = Graph6Codec()
    graph = codec.decode("Bw")
    assert codec.encode(graph) == "Bw"


@pytest.mark.parametrize("vertex_count", [5, 17, 62])
def test_decode_inverts_encode_for_random_graphs(vertex_count: int) -> None:
    rng = random.Random(vertex_count)
    edges = [
        (neighbour, vertex)
        for vertex in range(1, vertex_count)
        for neighbour in range(vertex)
        if rng.random() < 0.3
    ]
    rng.shuffle(edges)
    flipped = [(v, u) if rng.random() < 0.5 else (u, v) for u, v in edges]
    graph = Graph(vertex_count=vertex_count, edges=flipped)
    decoded = parse_graph6(encode_graph6(graph))
    assert decoded.vertex_count == vertex_count
    assert decoded.canonical_edges() == graph.canonical_edges()
