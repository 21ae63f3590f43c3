"""
Application layer for Flight Paths.

Public API of the route finder: a facade that wires the providers,
repository and search strategies together.
"""

from src.flight_paths.application.find_route import FindRoute, format_route

__all__ = ["FindRoute", "format_route"]
