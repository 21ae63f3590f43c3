"""
Backtracking frame stack shared by the route finders.
"""

from typing import List, Optional

from src.flight_paths.schemas.route import RouteSegment, SearchPath


class FrameStack:
    """
    LIFO of the edges committed to the current partial path.

    Scoped to one search call. Popping a frame abandons the most recent
    commitment so the search can resume from that frame's origin.
    """

    def __init__(self) -> None:
        self._frames: List[RouteSegment] = []

    def push(self, origin: str, destination: str, weight: int) -> None:
        self._frames.append(RouteSegment(origin, destination, weight))

    def pop(self) -> Optional[RouteSegment]:
        """Remove and return the top frame, or None if the stack is empty."""
        if not self._frames:
            return None
        return self._frames.pop()

    def drain(self) -> List[RouteSegment]:
        """
        Empty the stack and return its frames in origin-to-destination order.

        Frames come off a stack newest first; they are reversed here so
        callers always receive forward order.
        """
        drained = []
        while self._frames:
            drained.append(self._frames.pop())
        drained.reverse()
        return drained

    def to_path(self) -> SearchPath:
        """Drain the stack into a SearchPath."""
        return SearchPath.from_segments(self.drain())

    @property
    def depth(self) -> int:
        return len(self._frames)

    def __bool__(self) -> bool:
        return bool(self._frames)
