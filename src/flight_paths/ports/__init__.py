"""
Port interfaces for Flight Paths.

Ports define the abstract interfaces that the domain layer uses to
communicate with data sources and search algorithms. This follows the
Ports and Adapters (Hexagonal) architecture pattern.
"""

from src.flight_paths.ports.edge_data_provider import EdgeDataProvider
from src.flight_paths.ports.graph_repository import GraphNotInitializedError
from src.flight_paths.ports.route_finder import RouteFinder

__all__ = [
    "EdgeDataProvider",
    "GraphNotInitializedError",
    "RouteFinder",
]
