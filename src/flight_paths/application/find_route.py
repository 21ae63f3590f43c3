"""
FindRoute Use Case - Public API for route searches.

Acts as a Facade/Factory, handling dependency initialization and
providing a small interface for consumers.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Union

from src.flight_paths.adapters.algorithms.depth_first import DepthFirstRouteFinder
from src.flight_paths.adapters.algorithms.lookahead import LookaheadRouteFinder
from src.flight_paths.adapters.data_providers.memory_provider import (
    SampleEdgeProvider,
)
from src.flight_paths.adapters.data_providers.sqlite_provider import (
    SqliteEdgeProvider,
)
from src.flight_paths.adapters.repositories.route_graph import RouteGraphRepository
from src.flight_paths.config import RouterConfig
from src.flight_paths.exceptions import NoRouteFoundError
from src.flight_paths.ports.edge_data_provider import EdgeDataProvider
from src.flight_paths.schemas.route import SearchPath
from src.flight_paths.schemas.search import SearchMethod
from src.flight_paths.services.route_finder_service import RouteFinderService

logger = logging.getLogger(__name__)


def format_route(
    path: Optional[SearchPath], origin: str, destination: str
) -> str:
    """
    Render a search result as a console trace.

    Example:
        New York to Chicago to Denver to Los Angeles
        Distance is 3000
    """
    if path is None:
        return f"No route from {origin} to {destination}"
    trace = " to ".join(path.route_cities)
    return f"{trace}\nDistance is {path.total_weight}"


class FindRoute:
    """
    Public API for point-to-point route searches.

    Example usage:
        >>> with FindRoute() as router:
        ...     path = router.search("New York", "Los Angeles")
        ...     print(path.route_cities, path.total_weight)
        ['New York', 'Chicago', 'Denver', 'Los Angeles'] 3000

    Attributes:
        _config: Effective configuration.
        _graph_repo: Route graph repository.
        _service: Underlying RouteFinderService.
    """

    def __init__(
        self,
        config: Optional[RouterConfig] = None,
        data_provider: Optional[EdgeDataProvider] = None,
        db_path: Optional[Union[str, Path]] = None,
    ) -> None:
        """
        Initialize the router with optional custom dependencies.

        Args:
            config: Configuration. Defaults to RouterConfig().
            data_provider: Custom edge source. Takes precedence over db_path.
            db_path: SQLite database to read. Overrides config.db_path.
                Without either, the sample network is used.
        """
        self._config = config or RouterConfig()

        if data_provider is not None:
            self._data_provider = data_provider
        else:
            db_path = db_path or self._config.db_path
            if db_path:
                self._data_provider = SqliteEdgeProvider(db_path)
            else:
                self._data_provider = SampleEdgeProvider()

        self._graph_repo = RouteGraphRepository(
            data_provider=self._data_provider,
            capacity=self._config.graph_capacity,
        )

        self._service = RouteFinderService(
            graph_repo=self._graph_repo,
            finders=[DepthFirstRouteFinder(), LookaheadRouteFinder()],
        )

        logger.info(
            "FindRoute initialized with %s (capacity %d, default method %s)",
            self._data_provider.name,
            self._config.graph_capacity,
            self._config.default_method.value,
        )

    def search(
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
            method: Search method; defaults to the configured one.

        Returns:
            The first path found, or None when no route exists.
        """
        return self._service.find_route(
            origin=origin,
            destination=destination,
            method=method or self._config.default_method,
        )

    def require_route(
        self,
        origin: str,
        destination: str,
        method: Optional[Union[SearchMethod, str]] = None,
    ) -> SearchPath:
        """
        Like search(), but raise when no route exists.

        Raises:
            NoRouteFoundError: If the search finds no path.
        """
        method = SearchMethod(method or self._config.default_method)
        path = self.search(origin, destination, method)
        if path is None:
            raise NoRouteFoundError(origin, destination, method.value)
        return path

    def render(
        self,
        origin: str,
        destination: str,
        method: Optional[Union[SearchMethod, str]] = None,
    ) -> str:
        """Search and format the result as a console trace."""
        return format_route(self.search(origin, destination, method), origin, destination)

    def get_locations(self) -> frozenset[str]:
        """All locations in the route graph."""
        return self._graph_repo.get_graph().locations

    def has_route(self, origin: str, destination: str) -> bool:
        """
        Check if a direct edge exists between two locations.

        Returns:
            True if a direct edge exists, False otherwise.
        """
        return self._graph_repo.get_graph().exact_distance(origin, destination) is not None

    @property
    def is_ready(self) -> bool:
        """Check if the graph has been loaded."""
        return self._service.is_ready

    @property
    def config(self) -> RouterConfig:
        return self._config

    def refresh_data(self) -> None:
        """Reload the route graph on next access."""
        self._graph_repo.invalidate()

    def shutdown(self) -> None:
        """Release the data provider's resources."""
        if hasattr(self._data_provider, "close"):
            self._data_provider.close()
        logger.info("FindRoute shutdown complete")

    def __enter__(self) -> "FindRoute":
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit with cleanup."""
        self.shutdown()
