"""
Route Graph Repository - Ordered Edge Storage.

Implements the fixed-capacity flight graph with:
- Insertion-ordered edge storage (insertion order decides tie-breaks)
- Per-search visitation tables (no marker state on the graph itself)
- Lazy, lock-guarded loading from an EdgeDataProvider
"""

from __future__ import annotations

import logging
import threading
from datetime import datetime
from enum import Enum
from typing import TYPE_CHECKING, Iterator, List, Optional, Tuple

import pandas as pd

from src.flight_paths.exceptions import CapacityExceededError
from src.flight_paths.ports.graph_repository import GraphNotInitializedError
from src.flight_paths.schemas.flight import (
    EDGE_COLUMNS,
    EdgeRecord,
    FlightEdgeSchema,
    validate_edges,
)

if TYPE_CHECKING:
    from src.flight_paths.ports.edge_data_provider import EdgeDataProvider

logger = logging.getLogger(__name__)

DEFAULT_CAPACITY = 100


class InsertOutcome(Enum):
    """Result of a single edge insertion."""

    INSERTED = "inserted"
    """Edge appended to the graph."""

    CAPACITY_EXCEEDED = "capacity_exceeded"
    """Graph already full, insertion refused and graph unchanged."""


# =============================================================================
# VISITATION TABLE: Per-search markers keyed by edge index
# =============================================================================


class VisitationTable:
    """
    Visited markers for one search, keyed by edge index.

    Every marker starts False. Within a search a marker only moves from
    False to True; backtracking does not clear it. Indices past the end of
    the table are unvisited, so a kept table stays usable after the graph
    grows.
    """

    def __init__(self, size: int) -> None:
        self._visited: List[bool] = [False] * size

    def is_visited(self, index: int) -> bool:
        return index < len(self._visited) and self._visited[index]

    def mark(self, index: int) -> None:
        self.cover(index + 1)
        self._visited[index] = True

    def cover(self, size: int) -> None:
        """Grow the table to at least `size` markers, new ones unvisited."""
        if size > len(self._visited):
            self._visited.extend([False] * (size - len(self._visited)))

    def reset(self) -> None:
        """Clear every marker for a new independent search."""
        self._visited = [False] * len(self._visited)

    def visited_indices(self) -> List[int]:
        return [i for i, seen in enumerate(self._visited) if seen]

    @property
    def all_visited(self) -> bool:
        return all(self._visited)

    def __len__(self) -> int:
        return len(self._visited)


# =============================================================================
# ROUTE GRAPH: Fixed-capacity, insertion-ordered edge list
# =============================================================================


class RouteGraph:
    """
    Fixed-capacity collection of directed, weighted edges.

    Lookups scan edges in insertion order and return the first match, so
    the order in which edges are inserted is part of the observable
    contract. Parallel edges are allowed; only the first one inserted is
    ever returned by exact_distance().

    Attributes:
        _edges: EdgeRecords in insertion order.
        _capacity: Maximum number of edges.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        """
        Initialize an empty graph.

        Args:
            capacity: Maximum number of edges the graph accepts.

        Raises:
            ValueError: If capacity is negative.
        """
        if capacity < 0:
            raise ValueError(f"capacity must be >= 0, got {capacity}")
        self._capacity = capacity
        self._edges: List[EdgeRecord] = []

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def edges(self) -> Tuple[EdgeRecord, ...]:
        return tuple(self._edges)

    @property
    def is_full(self) -> bool:
        return len(self._edges) >= self._capacity

    def __len__(self) -> int:
        return len(self._edges)

    def __iter__(self) -> Iterator[EdgeRecord]:
        return iter(self._edges)

    def insert(self, origin: str, destination: str, weight: int) -> InsertOutcome:
        """
        Append a new edge.

        Args:
            origin: Departure location name.
            destination: Arrival location name.
            weight: Non-negative distance.

        Returns:
            InsertOutcome.INSERTED, or InsertOutcome.CAPACITY_EXCEEDED when
            the graph already holds `capacity` edges (graph left unchanged).

        Raises:
            InvalidLocationError: If a location name is malformed.
            InvalidWeightError: If weight is not a non-negative int.
        """
        edge = EdgeRecord(origin=origin, destination=destination, weight=weight)

        if self.is_full:
            logger.warning(
                "Insert refused, graph full (%d edges): %s -> %s",
                self._capacity,
                origin,
                destination,
            )
            return InsertOutcome.CAPACITY_EXCEEDED

        self._edges.append(edge)
        return InsertOutcome.INSERTED

    def exact_distance(self, origin: str, destination: str) -> Optional[int]:
        """
        Weight of the first edge from origin to destination.

        Case-sensitive, no normalization. Visitation is not consulted.

        Returns:
            The edge weight, or None if no such edge exists.
        """
        for edge in self._edges:
            if edge.matches(origin, destination):
                return edge.weight
        return None

    def next_unvisited_departure(
        self, origin: str, visited: VisitationTable
    ) -> Optional[Tuple[str, int]]:
        """
        Claim the first unvisited edge departing from origin.

        The matching edge is marked visited in `visited` as a side effect,
        so repeated calls enumerate every outgoing edge exactly once per
        search.

        Args:
            origin: Departure location name.
            visited: Visitation table of the running search.

        Returns:
            (destination, weight) of the claimed edge, or None when every
            edge from origin has been visited.
        """
        visited.cover(len(self._edges))
        for index, edge in enumerate(self._edges):
            if edge.origin == origin and not visited.is_visited(index):
                visited.mark(index)
                return edge.destination, edge.weight
        return None

    def new_visitation(self) -> VisitationTable:
        """Fresh visitation table with every marker cleared."""
        return VisitationTable(len(self._edges))

    def departures(self, origin: str) -> List[EdgeRecord]:
        """All edges leaving origin, in insertion order."""
        return [edge for edge in self._edges if edge.origin == origin]

    @property
    def locations(self) -> frozenset[str]:
        """Every location appearing as an origin or destination."""
        names = set()
        for edge in self._edges:
            names.add(edge.origin)
            names.add(edge.destination)
        return frozenset(names)

    def has_location(self, location: str) -> bool:
        return location in self.locations

    def to_dataframe(self) -> pd.DataFrame:
        """Edges as a FlightEdgeSchema DataFrame, in insertion order."""
        df = pd.DataFrame(
            [(e.origin, e.destination, e.weight) for e in self._edges],
            columns=EDGE_COLUMNS,
        )
        return FlightEdgeSchema.validate(df)

    @classmethod
    def from_dataframe(
        cls, df: pd.DataFrame, capacity: int = DEFAULT_CAPACITY
    ) -> "RouteGraph":
        """
        Build a graph from edge rows, inserting them in row order.

        Args:
            df: DataFrame with origin, destination and weight columns.
            capacity: Graph capacity.

        Returns:
            Populated RouteGraph.

        Raises:
            CapacityExceededError: If df has more rows than capacity.
            pandera.errors.SchemaError: If df fails FlightEdgeSchema or holds
                fractional weights.
        """
        if len(df) > capacity:
            raise CapacityExceededError(capacity=capacity, requested=len(df))

        validated = validate_edges(df)
        graph = cls(capacity=capacity)

        for origin, destination, weight in zip(
            validated["origin"], validated["destination"], validated["weight"]
        ):
            graph.insert(str(origin), str(destination), int(weight))

        return graph


# =============================================================================
# ROUTE GRAPH REPOSITORY: Lazy load from an EdgeDataProvider
# =============================================================================


class RouteGraphRepository:
    """
    Repository building the route graph from a data provider.

    The first get_graph() call blocks while the graph loads; later calls
    return the loaded graph. invalidate() forces a reload on next access.

    Usage:
        >>> repo = RouteGraphRepository(SampleEdgeProvider(), capacity=100)
        >>> graph = repo.get_graph()
    """

    def __init__(
        self,
        data_provider: EdgeDataProvider,
        capacity: int = DEFAULT_CAPACITY,
    ) -> None:
        """
        Initialize repository with data provider.

        Args:
            data_provider: Source for edge data.
            capacity: Capacity of the graphs this repository builds.
        """
        self._provider = data_provider
        self._capacity = capacity
        self._graph: Optional[RouteGraph] = None
        self._loaded_at: Optional[datetime] = None
        self._lock = threading.Lock()

    def get_graph(self) -> RouteGraph:
        """
        Get the current graph, loading it on first access.

        Returns:
            Populated RouteGraph.

        Raises:
            GraphNotInitializedError: If loading fails.
        """
        graph = self._graph
        if graph is not None:
            return graph

        with self._lock:
            # Double-check after acquiring lock
            if self._graph is not None:
                return self._graph

            try:
                self._graph = self._build_graph()
            except Exception as e:
                logger.error(f"Graph load failed: {e}")
                raise GraphNotInitializedError(
                    f"Failed to initialize route graph: {e}"
                ) from e

            self._loaded_at = datetime.now()
            return self._graph

    def _build_graph(self) -> RouteGraph:
        edges_df = self._provider.get_edges_df()
        graph = RouteGraph.from_dataframe(edges_df, capacity=self._capacity)
        logger.info(
            "Route graph loaded from %s: %d edges, %d locations (capacity %d)",
            self._provider.name,
            len(graph),
            len(graph.locations),
            graph.capacity,
        )
        return graph

    def invalidate(self) -> None:
        """Drop the loaded graph so the next access reloads it."""
        with self._lock:
            self._graph = None
            self._loaded_at = None

    @property
    def is_initialized(self) -> bool:
        """Check if graph has been loaded."""
        return self._graph is not None

    @property
    def loaded_at(self) -> Optional[datetime]:
        return self._loaded_at
