"""
Flight Paths - Console Entry Point.

Finds a route between two locations and prints the path trace and the
total distance. Without arguments, searches the sample network from
New York to Los Angeles.

Usage:
    python run_route_finder.py
    python run_route_finder.py "New York" "Los Angeles" --method lookahead
    python run_route_finder.py A B --db flights.db
"""

import argparse
import logging
import sys
from typing import List, Optional

from src.flight_paths.application import FindRoute, format_route
from src.flight_paths.config import RouterConfig
from src.flight_paths.exceptions import FlightPathsError
from src.flight_paths.schemas.search import SearchMethod

# Module-level logger
logger = logging.getLogger(__name__)


def setup_logging(level: str = "INFO") -> None:
    """
    Configure console logging.

    Sets up the root logger with the given level and timestamped format.
    """
    log_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S"

    formatter = logging.Formatter(log_format, datefmt=date_format)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # stderr keeps stdout free for the route trace
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Find a route between two locations.")
    parser.add_argument("origin", nargs="?", default="New York")
    parser.add_argument("destination", nargs="?", default="Los Angeles")
    parser.add_argument(
        "--method",
        choices=[m.value for m in SearchMethod],
        default=None,
        help="Search method (default: configured method, depth_first)",
    )
    parser.add_argument("--db", default=None, help="SQLite database with a flights table")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run one search and print the result.

    Returns:
        0 when a route was found, 1 when none exists, 2 on errors.
    """
    args = parse_args(argv)
    try:
        config = RouterConfig.from_env()
    except ValueError as e:
        setup_logging()
        logger.error("Invalid configuration: %s", e)
        return 2
    setup_logging(config.log_level)

    try:
        with FindRoute(config=config, db_path=args.db) as router:
            path = router.search(args.origin, args.destination, args.method)
            print(format_route(path, args.origin, args.destination))
    except FlightPathsError as e:
        logger.error("Search failed: %s", e)
        return 2

    return 0 if path is not None else 1


if __name__ == "__main__":
    sys.exit(main())
