"""
Algorithm adapters for route search.
"""

from src.flight_paths.adapters.algorithms.depth_first import DepthFirstRouteFinder
from src.flight_paths.adapters.algorithms.frame_stack import FrameStack
from src.flight_paths.adapters.algorithms.lookahead import LookaheadRouteFinder

__all__ = [
    "DepthFirstRouteFinder",
    "FrameStack",
    "LookaheadRouteFinder",
]
