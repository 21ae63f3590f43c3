"""
SQLite Edge Provider - SQL to DataFrame adapter.

Reads edges from a `flights` table and validates them against
FlightEdgeSchema.
"""

import logging
import sqlite3
from pathlib import Path
from typing import Optional, Union

import pandas as pd

from src.flight_paths.ports.edge_data_provider import EdgeDataProvider
from src.flight_paths.schemas.flight import (
    EDGE_COLUMNS,
    FlightEdgeDataFrame,
    validate_edges,
)

logger = logging.getLogger(__name__)

# rowid keeps the table's insertion order
EDGES_QUERY = """
    SELECT origin, destination, weight
    FROM flights
    ORDER BY rowid
"""


class SqliteEdgeProvider(EdgeDataProvider):
    """
    Data provider for a SQLite edge table.

    Expected table:
        CREATE TABLE flights (origin TEXT, destination TEXT, weight INTEGER)

    Attributes:
        _db_path: Path to the SQLite database file.
        _conn: SQLite connection (lazy initialized).
    """

    def __init__(self, db_path: Union[str, Path]) -> None:
        self._db_path = Path(db_path)
        self._conn: Optional[sqlite3.Connection] = None

    def _get_connection(self) -> sqlite3.Connection:
        """Get or create database connection."""
        if self._conn is None:
            if not self._db_path.exists():
                raise FileNotFoundError(f"Database not found: {self._db_path}")
            self._conn = sqlite3.connect(str(self._db_path))
        return self._conn

    def get_edges_df(self) -> FlightEdgeDataFrame:
        """
        Fetch all edges in table order.

        Returns:
            DataFrame validated against FlightEdgeSchema.

        Raises:
            FileNotFoundError: If the database file does not exist.
            pandera.errors.SchemaError: If rows fail validation.
        """
        conn = self._get_connection()

        logger.debug("Executing query: %s", EDGES_QUERY)
        df = pd.read_sql(EDGES_QUERY, conn)

        if df.empty:
            logger.warning("No edges found in %s", self._db_path)
            df = pd.DataFrame(columns=EDGE_COLUMNS)

        validated = validate_edges(df)

        logger.info("Loaded %d edges from %s", len(validated), self._db_path)
        return validated

    @property
    def name(self) -> str:
        return f"SQLite ({self._db_path.name})"

    def close(self) -> None:
        """Close the database connection."""
        if self._conn is not None:
            self._conn.close()
            self._conn = None
