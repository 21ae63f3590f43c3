"""
Graph Repository port.

Errors shared by every graph repository backend.
"""

from src.flight_paths.exceptions import FlightPathsError


class GraphNotInitializedError(FlightPathsError):
    """Raised when the route graph cannot be loaded on first access."""

    pass
