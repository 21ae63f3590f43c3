"""
In-memory edge providers.

The sample flight network and a thin wrapper around caller-supplied
DataFrames.
"""

import logging
from typing import Iterable, List, Tuple

import pandas as pd

from src.flight_paths.ports.edge_data_provider import EdgeDataProvider
from src.flight_paths.schemas.flight import (
    EDGE_COLUMNS,
    FlightEdgeDataFrame,
    validate_edges,
)

logger = logging.getLogger(__name__)

# Sample network, in insertion order
SAMPLE_FLIGHTS: List[Tuple[str, str, int]] = [
    ("New York", "Chicago", 1000),
    ("Chicago", "Denver", 1000),
    ("New York", "Toronto", 800),
    ("New York", "Denver", 1900),
    ("Toronto", "Calgary", 1500),
    ("Toronto", "Los Angeles", 1800),
    ("Toronto", "Chicago", 500),
    ("Denver", "Urbana", 1000),
    ("Denver", "Houston", 1500),
    ("Houston", "Los Angeles", 1500),
    ("Denver", "Los Angeles", 1000),
]


def edges_to_dataframe(edges: Iterable[Tuple[str, str, int]]) -> pd.DataFrame:
    """Build an edge DataFrame from (origin, destination, weight) triples."""
    return pd.DataFrame(list(edges), columns=EDGE_COLUMNS)


class DataFrameEdgeProvider(EdgeDataProvider):
    """
    Provider over a caller-supplied DataFrame.

    The frame is validated on every call and returned as a copy, so
    callers cannot alter the provider's data through the result.
    """

    def __init__(self, edges_df: pd.DataFrame, name: str = "DataFrame") -> None:
        self._df = edges_df
        self._name = name

    def get_edges_df(self) -> FlightEdgeDataFrame:
        if self._df.empty:
            logger.warning("Provider %s has no edges", self._name)
        return validate_edges(self._df.copy())

    @property
    def name(self) -> str:
        return self._name


class SampleEdgeProvider(DataFrameEdgeProvider):
    """The built-in sample network of eleven flights."""

    def __init__(self) -> None:
        super().__init__(edges_to_dataframe(SAMPLE_FLIGHTS), name="Sample Flights")
