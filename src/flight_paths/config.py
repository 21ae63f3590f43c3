"""
Configuration module for Flight Paths.

Loads settings from environment variables (and a `.env` file, if present)
and provides defaults for the route finder.
"""

import logging
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from src.flight_paths.adapters.repositories.route_graph import DEFAULT_CAPACITY
from src.flight_paths.schemas.search import SearchMethod

ENV_CAPACITY = "FLIGHT_PATHS_CAPACITY"
ENV_DB_PATH = "FLIGHT_PATHS_DB"
ENV_METHOD = "FLIGHT_PATHS_METHOD"
ENV_LOG_LEVEL = "FLIGHT_PATHS_LOG_LEVEL"


@dataclass(frozen=True)
class RouterConfig:
    """
    Route finder configuration.

    Attributes:
        graph_capacity: Maximum number of edges in the route graph.
        db_path: SQLite database with a `flights` table. None selects the
            built-in sample network.
        default_method: Search method used when a caller does not pick one.
        log_level: Root logging level name for the console entry point.
    """

    graph_capacity: int = DEFAULT_CAPACITY
    db_path: Optional[str] = None
    default_method: SearchMethod = SearchMethod.DEPTH_FIRST
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if self.graph_capacity < 0:
            raise ValueError(
                f"graph_capacity must be >= 0, got {self.graph_capacity}"
            )
        if not isinstance(logging.getLevelName(self.log_level), int):
            raise ValueError(f"Unknown log level: {self.log_level}")

    @classmethod
    def from_env(cls) -> "RouterConfig":
        """
        Build configuration from the environment.

        Raises:
            ValueError: If a variable holds an invalid value.
        """
        load_dotenv()

        capacity_raw = os.getenv(ENV_CAPACITY)
        try:
            capacity = int(capacity_raw) if capacity_raw else DEFAULT_CAPACITY
        except ValueError as e:
            raise ValueError(
                f"{ENV_CAPACITY} must be an integer, got {capacity_raw!r}"
            ) from e

        method_raw = os.getenv(ENV_METHOD)
        method = SearchMethod(method_raw) if method_raw else SearchMethod.DEPTH_FIRST

        return cls(
            graph_capacity=capacity,
            db_path=os.getenv(ENV_DB_PATH) or None,
            default_method=method,
            log_level=os.getenv(ENV_LOG_LEVEL, "INFO").upper(),
        )
