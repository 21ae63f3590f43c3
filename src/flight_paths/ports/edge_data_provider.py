"""
Edge Data Provider port interface.

Defines the abstract contract for sources of flight edges.
Implementations handle the specifics of each backend (SQLite, memory, ...).
"""

from abc import ABC, abstractmethod

from src.flight_paths.schemas.flight import FlightEdgeDataFrame


class EdgeDataProvider(ABC):
    """
    Abstract interface for edge data providers.

    Providers return validated DataFrames directly. Schema validation
    (FlightEdgeSchema) happens in the provider, not per insert.

    Row order matters: the graph inserts rows in the order returned, and
    insertion order decides which path a search finds.

    Implementations:
    - SampleEdgeProvider: The built-in sample flight network
    - DataFrameEdgeProvider: Wraps an in-memory DataFrame
    - SqliteEdgeProvider: Reads a `flights` table from SQLite
    """

    @abstractmethod
    def get_edges_df(self) -> FlightEdgeDataFrame:
        """
        Return all edges as a validated DataFrame.

        Returns:
            DataFrame validated against FlightEdgeSchema, in insertion order.

        Raises:
            pandera.errors.SchemaError: If data fails validation.
        """
        ...

    @property
    @abstractmethod
    def name(self) -> str:
        """
        Human-readable name of this data provider.

        Returns:
            Provider identifier (e.g., "Sample Flights", "SQLite").
        """
        ...
