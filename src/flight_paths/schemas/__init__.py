"""
Schema definitions for Flight Paths.

Dataclasses for graph edges and results, Pandera models for bulk data.
"""

from .flight import (
    EDGE_COLUMNS,
    MAX_LOCATION_LENGTH,
    EdgeRecord,
    FlightEdgeDataFrame,
    FlightEdgeSchema,
    validate_edges,
)
from .route import RouteSegment, RouteSegmentSchema, SearchPath
from .search import RouteQuery, SearchMethod

__all__ = [
    # Edge schemas
    "EDGE_COLUMNS",
    "MAX_LOCATION_LENGTH",
    "EdgeRecord",
    "FlightEdgeDataFrame",
    "FlightEdgeSchema",
    "validate_edges",
    # Route schemas
    "RouteSegment",
    "RouteSegmentSchema",
    "SearchPath",
    # Search
    "RouteQuery",
    "SearchMethod",
]
