"""
Route Finder Service - Domain orchestrator for route searches.

Coordinates the interaction between:
- RouteGraphRepository (loaded route graph)
- RouteFinder implementations (one per search method)
- RouteQuery (validated search parameters)
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, Dict, Iterable, List, Optional, Union

from src.flight_paths.schemas.search import RouteQuery, SearchMethod

if TYPE_CHECKING:
    from src.flight_paths.adapters.repositories.route_graph import (
        RouteGraphRepository,
    )
    from src.flight_paths.ports.route_finder import RouteFinder
    from src.flight_paths.schemas.route import SearchPath

logger = logging.getLogger(__name__)


class RouteFinderService:
    """
    Domain service for point-to-point route searches.

    Orchestrates one search:
    1. Validates the query
    2. Retrieves the route graph
    3. Dispatches to the finder registered for the search method
    4. Logs timings

    Every search gets its own visitation table, so searches never see
    each other's markers.

    Attributes:
        _graph_repo: Repository providing the route graph.
        _finders: Route finder per search method.
    """

    def __init__(
        self,
        graph_repo: RouteGraphRepository,
        finders: Iterable[RouteFinder],
    ) -> None:
        """
        Initialize the route finder service.

        Args:
            graph_repo: Repository for route graph access.
            finders: Finder implementations; the last one registered for a
                method wins.
        """
        self._graph_repo = graph_repo
        self._finders: Dict[SearchMethod, RouteFinder] = {
            finder.method: finder for finder in finders
        }

    def find_route(
        self,
        origin: str,
        destination: str,
        method: Optional[Union[SearchMethod, str]] = None,
    ) -> Optional[SearchPath]:
        """
        Find a path between two locations.

        Args:
            origin: Start location name.
            destination: End location name.
            method: Search method (enum or its string value). Defaults to
                depth-first.

        Returns:
            The first path found, or None when no route exists.

        Raises:
            InvalidLocationError: If a location name is malformed.
            ValueError: If the method is unknown or has no finder.
            GraphNotInitializedError: If the graph cannot be loaded.
        """
        start_time = time.perf_counter()

        query = RouteQuery.create(origin, destination, method)
        finder = self._finders.get(query.method)
        if finder is None:
            raise ValueError(f"No route finder registered for {query.method.value}")

        graph = self._graph_repo.get_graph()

        algo_start = time.perf_counter()
        path = finder.find_route(graph, query.origin, query.destination)
        algo_time = time.perf_counter() - algo_start

        total_time = time.perf_counter() - start_time

        if path is None:
            logger.info(
                "No route %s -> %s (%s) in %.3fms",
                query.origin,
                query.destination,
                finder.name,
                total_time * 1000,
            )
        else:
            logger.info(
                "Route %s -> %s (%s): %d segments, weight %d in %.3fms "
                "(algo: %.3fms)",
                query.origin,
                query.destination,
                finder.name,
                path.num_segments,
                path.total_weight,
                total_time * 1000,
                algo_time * 1000,
            )

        return path

    @property
    def available_methods(self) -> List[SearchMethod]:
        """Search methods with a registered finder."""
        return list(self._finders)

    @property
    def is_ready(self) -> bool:
        """Check if service is ready to handle requests."""
        return self._graph_repo.is_initialized
