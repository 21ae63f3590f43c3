"""
Data provider adapters for edge sources.
"""

from src.flight_paths.adapters.data_providers.memory_provider import (
    SAMPLE_FLIGHTS,
    DataFrameEdgeProvider,
    SampleEdgeProvider,
    edges_to_dataframe,
)
from src.flight_paths.adapters.data_providers.sqlite_provider import (
    SqliteEdgeProvider,
)

__all__ = [
    "SAMPLE_FLIGHTS",
    "DataFrameEdgeProvider",
    "SampleEdgeProvider",
    "SqliteEdgeProvider",
    "edges_to_dataframe",
]
