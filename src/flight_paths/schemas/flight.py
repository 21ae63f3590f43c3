"""
Flight edge schemas.

Defines the record stored in the route graph and the Pandera contract for
bulk edge data. Schema validation happens at the provider boundary only,
not per-insert.
"""

from dataclasses import dataclass
from typing import Any

import pandas as pd
import pandera as pa
from pandera.typing import DataFrame, Series

from src.flight_paths.exceptions import InvalidLocationError, InvalidWeightError

# Location names are bounded-length text
MAX_LOCATION_LENGTH = 20


def validate_location(location: Any) -> str:
    """
    Validate a location name.

    Names are compared exactly (case-sensitive, no normalization), so the
    value is returned unchanged.

    Args:
        location: Candidate location name.

    Returns:
        The same name.

    Raises:
        InvalidLocationError: If the name is not a string, is empty, or is
            longer than MAX_LOCATION_LENGTH.
    """
    if not isinstance(location, str):
        raise InvalidLocationError(location, "must be a string")
    if not location:
        raise InvalidLocationError(location, "must not be empty")
    if len(location) > MAX_LOCATION_LENGTH:
        raise InvalidLocationError(
            location, f"longer than {MAX_LOCATION_LENGTH} characters"
        )
    return location


def validate_weight(weight: Any) -> int:
    """
    Validate an edge weight.

    Raises:
        InvalidWeightError: If weight is not a non-negative int.
    """
    # bool is an int subclass but never a distance
    if isinstance(weight, bool) or not isinstance(weight, int) or weight < 0:
        raise InvalidWeightError(weight)
    return weight


@dataclass(frozen=True)
class EdgeRecord:
    """
    One directed, weighted connection between two locations.

    Frozen: the weight is set once at insertion and never changes.
    The per-search visited marker is not stored here; it lives in a
    VisitationTable owned by the search that reads this edge.

    Attributes:
        origin: Departure location name.
        destination: Arrival location name.
        weight: Non-negative distance.
    """

    origin: str
    destination: str
    weight: int

    def __post_init__(self) -> None:
        """Validate fields after initialization."""
        validate_location(self.origin)
        validate_location(self.destination)
        validate_weight(self.weight)

    def matches(self, origin: str, destination: str) -> bool:
        """Exact, case-sensitive endpoint comparison."""
        return self.origin == origin and self.destination == destination


class FlightEdgeSchema(pa.DataFrameModel):
    """
    Contract for bulk edge data.

    Row order is significant: it becomes the graph's insertion order.
    Extra columns are allowed and ignored by the graph.
    """

    origin: Series[str] = pa.Field(
        nullable=False,
        str_length={"min_value": 1, "max_value": MAX_LOCATION_LENGTH},
        description="Departure location name",
    )
    destination: Series[str] = pa.Field(
        nullable=False,
        str_length={"min_value": 1, "max_value": MAX_LOCATION_LENGTH},
        description="Arrival location name",
    )
    weight: Series[int] = pa.Field(
        ge=0,
        description="Edge distance",
    )

    class Config:
        strict = False
        coerce = True
        name = "FlightEdgeSchema"
        description = "Directed weighted edges, in insertion order"


class EdgeWeightSchema(pa.DataFrameModel):
    """
    Pre-check on raw edge weights.

    FlightEdgeSchema coerces weight to int, which would truncate fractional
    values. This schema reads weights as floats first and rejects any that
    are not whole numbers.
    """

    weight: Series[float] = pa.Field(description="Raw edge distance")

    class Config:
        strict = False
        coerce = True
        name = "EdgeWeightSchema"

    @pa.check("weight")
    def weight_is_whole(cls, series: Series[float]) -> Series[bool]:
        """Weights must be whole numbers before integer coercion."""
        return series % 1 == 0


# Type alias for clarity in function signatures
FlightEdgeDataFrame = DataFrame[FlightEdgeSchema]


def validate_edges(df: pd.DataFrame) -> FlightEdgeDataFrame:
    """
    Validate bulk edge data.

    Raises:
        pandera.errors.SchemaError: If a weight is fractional or the frame
            fails FlightEdgeSchema.
    """
    EdgeWeightSchema.validate(df)
    return FlightEdgeSchema.validate(df)


EDGE_COLUMNS = ["origin", "destination", "weight"]
