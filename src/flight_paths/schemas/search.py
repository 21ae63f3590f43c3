"""
Search request schema.

Defines the validated parameters passed to a route finder.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from src.flight_paths.schemas.flight import validate_location


class SearchMethod(str, Enum):
    """Route search strategy."""

    DEPTH_FIRST = "depth_first"
    """Exhaustive depth-first search with backtracking."""

    LOOKAHEAD = "lookahead"
    """Two-hop search through one intermediate location."""


@dataclass(frozen=True)
class RouteQuery:
    """
    Immutable route search parameters.

    Attributes:
        origin: Requested start location.
        destination: Requested end location.
        method: Search strategy to run.
    """

    origin: str
    destination: str
    method: SearchMethod = SearchMethod.DEPTH_FIRST

    def __post_init__(self) -> None:
        """Validate query after initialization."""
        validate_location(self.origin)
        validate_location(self.destination)
        if not isinstance(self.method, SearchMethod):
            raise ValueError(f"method must be a SearchMethod, got {self.method!r}")

    @classmethod
    def create(
        cls,
        origin: str,
        destination: str,
        method: Optional[Union[SearchMethod, str]] = None,
    ) -> "RouteQuery":
        """
        Factory method accepting the method as an enum or its string value.

        Raises:
            ValueError: If the method string is not a known SearchMethod.
            InvalidLocationError: If either location name is malformed.
        """
        if method is None:
            method = SearchMethod.DEPTH_FIRST
        elif not isinstance(method, SearchMethod):
            method = SearchMethod(method)

        return cls(origin=origin, destination=destination, method=method)
