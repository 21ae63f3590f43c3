"""
Domain services for Flight Paths.

Services orchestrate the interaction between ports (repositories, finders)
and domain logic (query validation, strategy selection).
"""

from src.flight_paths.services.route_finder_service import RouteFinderService

__all__ = ["RouteFinderService"]
