"""
Lookahead Route Finder - two-hop search through one intermediate location.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

from src.flight_paths.adapters.algorithms.frame_stack import FrameStack
from src.flight_paths.ports.route_finder import RouteFinder
from src.flight_paths.schemas.search import SearchMethod

if TYPE_CHECKING:
    from src.flight_paths.adapters.repositories.route_graph import (
        RouteGraph,
        VisitationTable,
    )
    from src.flight_paths.schemas.route import SearchPath

logger = logging.getLogger(__name__)


class LookaheadRouteFinder(RouteFinder):
    """
    Restricted two-hop search.

    Walks the departures of the origin in insertion order. For each
    intermediate location it looks one step ahead for a direct edge to the
    destination and commits both edges on the first hit. Paths of any other
    length are never produced, including a direct origin -> destination
    edge. Departures with zero weight are skipped as intermediates.

    The loop is bounded by the number of departures of the origin; once
    they are exhausted the search reports no route.
    """

    @property
    def method(self) -> SearchMethod:
        return SearchMethod.LOOKAHEAD

    @property
    def name(self) -> str:
        """Algorithm identifier."""
        return "One-Step Lookahead"

    def find_route(
        self,
        graph: RouteGraph,
        origin: str,
        destination: str,
        visited: Optional[VisitationTable] = None,
    ) -> Optional[SearchPath]:
        if visited is None:
            visited = graph.new_visitation()

        frames = FrameStack()

        while True:
            departure = graph.next_unvisited_departure(origin, visited)
            if departure is None:
                break

            intermediate, weight = departure
            if weight <= 0:
                continue

            onward = graph.exact_distance(intermediate, destination)
            if onward is not None and onward > 0:
                frames.push(origin, intermediate, weight)
                frames.push(intermediate, destination, onward)
                return frames.to_path()

            logger.debug(
                "Lookahead via %s has no edge to %s", intermediate, destination
            )

        logger.debug(
            "No two-hop route %s -> %s, departures exhausted", origin, destination
        )
        return None
