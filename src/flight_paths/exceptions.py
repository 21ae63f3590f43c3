"""
Custom exceptions for the flight_paths package.

Provides a hierarchy of exceptions for clear error handling
and debugging of graph construction and route searches.

Expected search outcomes (no route, full graph on a single insert) are
reported as return values, not exceptions. The classes below cover
contract violations and the opt-in strict entry points.
"""

from typing import Any


class FlightPathsError(Exception):
    """Base exception for all flight_paths errors."""

    pass


class ValidationError(FlightPathsError):
    """Base exception for input validation errors."""

    pass


class InvalidLocationError(ValidationError):
    """Raised when a location name is empty, too long or not a string."""

    def __init__(self, location: Any, reason: str) -> None:
        self.location = location
        self.reason = reason
        message = f"Invalid location {location!r}: {reason}"
        super().__init__(message)


class InvalidWeightError(ValidationError):
    """Raised when an edge weight is negative or not an integer."""

    def __init__(self, weight: Any) -> None:
        self.weight = weight
        message = f"Edge weight must be a non-negative integer, got {weight!r}"
        super().__init__(message)


class CapacityExceededError(FlightPathsError):
    """Raised when a bulk load does not fit into the graph capacity."""

    def __init__(self, capacity: int, requested: int) -> None:
        self.capacity = capacity
        self.requested = requested
        message = (
            f"Graph capacity exceeded: {requested} edges requested, "
            f"capacity is {capacity}"
        )
        super().__init__(message)


class NoRouteFoundError(FlightPathsError):
    """Raised by strict lookups when no route connects two locations."""

    def __init__(self, origin: str, destination: str, method: str) -> None:
        self.origin = origin
        self.destination = destination
        self.method = method
        message = f"No route from '{origin}' to '{destination}' ({method} search)"
        super().__init__(message)
