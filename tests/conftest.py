"""Shared fixtures for Flight Paths tests."""

from typing import Iterable, Tuple

import pytest

from src.flight_paths.adapters.data_providers.memory_provider import SAMPLE_FLIGHTS
from src.flight_paths.adapters.repositories.route_graph import RouteGraph


def build_graph(
    edges: Iterable[Tuple[str, str, int]], capacity: int = 100
) -> RouteGraph:
    """Create a RouteGraph from (origin, destination, weight) triples."""
    graph = RouteGraph(capacity=capacity)
    for origin, destination, weight in edges:
        graph.insert(origin, destination, weight)
    return graph


@pytest.fixture
def sample_graph() -> RouteGraph:
    """The eleven-flight sample network, in insertion order."""
    return build_graph(SAMPLE_FLIGHTS)


@pytest.fixture
def diamond_graph() -> RouteGraph:
    """A -> B -> Z and A -> C -> Z, with B inserted first."""
    return build_graph(
        [
            ("A", "B", 5),
            ("A", "C", 7),
            ("B", "Z", 1),
            ("C", "Z", 1),
        ]
    )


@pytest.fixture
def make_graph():
    """Factory fixture building a RouteGraph from edge triples."""
    return build_graph
