"""
Depth-First Route Finder - exhaustive search with backtracking.

Tries outgoing edges in insertion order, commits each one to the frame
stack and backtracks out of dead ends. Returns the first path that reaches
the destination, which is deterministic but not necessarily the cheapest.
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


class DepthFirstRouteFinder(RouteFinder):
    """
    Exhaustive depth-first search with an explicit backtracking stack.

    Written as a loop over a manual stack rather than recursion, with the
    same push/pop order:

    1. If an edge leads straight from the current location to the
       destination (positive weight), commit it and stop.
    2. Otherwise claim the next unvisited departure, commit it and move
       to its destination.
    3. With no departures left, pop the frame that led here and resume
       from its origin. Popping an empty stack means no route exists.

    Edges claimed on an abandoned branch stay visited, so they are never
    retried from a different ancestor during the same search.

    Terminates on every graph: each step either claims one of finitely many
    edges or pops a frame that an earlier claim pushed.
    """

    @property
    def method(self) -> SearchMethod:
        return SearchMethod.DEPTH_FIRST

    @property
    def name(self) -> str:
        """Algorithm identifier."""
        return "Depth-First Backtracking"

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
        current = origin
        steps = 0

        while True:
            steps += 1

            # Destination reached?
            direct = graph.exact_distance(current, destination)
            if direct is not None and direct > 0:
                frames.push(current, destination, direct)
                break

            departure = graph.next_unvisited_departure(current, visited)
            if departure is not None:
                next_location, weight = departure
                logger.debug(
                    "Extend %s -> %s (%d), depth %d",
                    current,
                    next_location,
                    weight,
                    frames.depth + 1,
                )
                frames.push(current, next_location, weight)
                current = next_location
                continue

            # Dead end: backtrack
            frame = frames.pop()
            if frame is None:
                logger.debug(
                    "No route %s -> %s after %d steps", origin, destination, steps
                )
                return None

            logger.debug("Backtrack from %s to %s", current, frame.origin)
            current = frame.origin

        path = frames.to_path()
        logger.debug(
            "Route %s -> %s found in %d steps: %d segments, weight %d",
            origin,
            destination,
            steps,
            path.num_segments,
            path.total_weight,
        )
        return path
