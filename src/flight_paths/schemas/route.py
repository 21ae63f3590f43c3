"""
Route result schemas.

Defines the output contract of the route finders: the ordered segments of
a path and its total weight.
"""

from dataclasses import dataclass
from typing import List, Sequence

import pandas as pd
import pandera as pa
from pandera.typing import DataFrame, Series


class RouteSegmentSchema(pa.DataFrameModel):
    """
    Schema for the segments of a found path.

    Each row represents one traversed edge, in origin-to-destination order.
    """

    segment_index: Series[int] = pa.Field(
        ge=0,
        description="Zero-based index of this segment in the path",
    )
    origin: Series[str] = pa.Field(
        nullable=False,
        description="Departure location name",
    )
    destination: Series[str] = pa.Field(
        nullable=False,
        description="Arrival location name",
    )
    weight: Series[int] = pa.Field(
        ge=0,
        description="Edge distance",
    )

    class Config:
        strict = False
        coerce = True
        name = "RouteSegmentSchema"
        ordered = True


@dataclass(frozen=True)
class RouteSegment:
    """One traversed edge of a path."""

    origin: str
    destination: str
    weight: int


@dataclass(frozen=True)
class SearchPath:
    """
    Immutable representation of a found path.

    Segments are stored in forward order, from the requested origin to the
    requested destination. Produced fresh per search; the caller owns it.
    """

    segments: tuple[RouteSegment, ...]

    @property
    def total_weight(self) -> int:
        """Sum of all segment weights."""
        return sum(seg.weight for seg in self.segments)

    @property
    def num_segments(self) -> int:
        """Number of traversed edges."""
        return len(self.segments)

    @property
    def start_city(self) -> str:
        """Origin location."""
        if not self.segments:
            raise ValueError("Path has no segments")
        return self.segments[0].origin

    @property
    def end_city(self) -> str:
        """Final destination location."""
        if not self.segments:
            raise ValueError("Path has no segments")
        return self.segments[-1].destination

    @property
    def route_cities(self) -> List[str]:
        """Ordered list of all locations on the path."""
        if not self.segments:
            return []
        cities = [self.segments[0].origin]
        for seg in self.segments:
            cities.append(seg.destination)
        return cities

    def to_dataframe(self) -> DataFrame[RouteSegmentSchema]:
        """Segments as a DataFrame validated against RouteSegmentSchema."""
        df = pd.DataFrame(
            {
                "segment_index": list(range(len(self.segments))),
                "origin": [seg.origin for seg in self.segments],
                "destination": [seg.destination for seg in self.segments],
                "weight": [seg.weight for seg in self.segments],
            }
        )
        return RouteSegmentSchema.validate(df)

    @classmethod
    def from_segments(cls, segments: Sequence[RouteSegment]) -> "SearchPath":
        """
        Factory method to create a SearchPath from forward-ordered segments.

        Raises:
            ValueError: If segments is empty or not contiguous.
        """
        if not segments:
            raise ValueError("Path must have at least one segment")

        for prev, nxt in zip(segments, segments[1:]):
            if prev.destination != nxt.origin:
                raise ValueError(
                    f"Segments are not contiguous: {prev.destination!r} "
                    f"-> {nxt.origin!r}"
                )

        return cls(segments=tuple(segments))
