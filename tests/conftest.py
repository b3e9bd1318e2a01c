from __future__ import annotations

import os
from collections.abc import Generator

import pytest

from domain.models import Graph
from domain.services.embedding import GraphEmbedding
from tests.helpers.engine_fixtures import FakeClock, make_embedding, square_graph


def _clear_gee_env() -> None:
    for key in list(os.environ):
        if key.startswith("GEE_"):
            os.environ.pop(key, None)


_clear_gee_env()


@pytest.fixture(autouse=True)
def clear_gee_env() -> Generator[None, None, None]:
    _clear_gee_env()
    yield
    _clear_gee_env()


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def graph() -> Graph:
    return square_graph()


@pytest.fixture
def embedding(graph: Graph, clock: FakeClock) -> GraphEmbedding:
    return make_embedding(graph, clock)
