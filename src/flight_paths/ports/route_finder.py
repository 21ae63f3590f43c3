"""
Route Finder port interface.

Defines the abstract contract for route search strategies.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from src.flight_paths.adapters.repositories.route_graph import (
        RouteGraph,
        VisitationTable,
    )
    from src.flight_paths.schemas.route import SearchPath
    from src.flight_paths.schemas.search import SearchMethod


class RouteFinder(ABC):
    """
    Abstract interface for route search strategies.

    A finder owns the visitation markers for the duration of one call.
    It never mutates the graph itself, so one graph can serve any number
    of sequential searches without a reset pass.

    Implementations:
    - DepthFirstRouteFinder: Exhaustive depth-first search with backtracking
    - LookaheadRouteFinder: Two-hop search through one intermediate location
    """

    @abstractmethod
    def find_route(
        self,
        graph: RouteGraph,
        origin: str,
        destination: str,
        visited: Optional[VisitationTable] = None,
    ) -> Optional[SearchPath]:
        """
        Find a path from origin to destination.

        Args:
            graph: Populated route graph.
            origin: Start location name.
            destination: End location name.
            visited: Visitation table to use. A fresh one is created when
                omitted; pass one in to inspect the markers afterwards.

        Returns:
            The first path found, or None when no route exists.
        """
        ...

    @property
    @abstractmethod
    def method(self) -> SearchMethod:
        """Search method implemented by this finder."""
        ...

    @property
    @abstractmethod
    def name(self) -> str:
        """
        Algorithm identifier.

        Returns:
            Human-readable algorithm name.
        """
        ...
