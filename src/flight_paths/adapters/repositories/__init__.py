"""
Repository adapters for route graph storage.
"""

from src.flight_paths.adapters.repositories.route_graph import (
    DEFAULT_CAPACITY,
    InsertOutcome,
    RouteGraph,
    RouteGraphRepository,
    VisitationTable,
)

__all__ = [
    "DEFAULT_CAPACITY",
    "InsertOutcome",
    "RouteGraph",
    "RouteGraphRepository",
    "VisitationTable",
]
