"""
Flight edge schemas.

Defines the contract for directed flight edges, both as individual
immutable records and as Pandera-validated DataFrames at the
data-provider boundary.
"""

from dataclasses import dataclass

import pandera as pa
from pandera.typing import DataFrame, Series

# Column order of edge frames; also the order of seed tuples
EDGE_COLUMNS = ["origin", "destination", "distance"]


class EdgeSchema(pa.DataFrameModel):
    """
    Core contract for edge data loaded into the store.

    Row order matters: edges are appended in frame order, and every
    lookup returns the first match in insertion order.
    """

    origin: Series[str] = pa.Field(
        nullable=False,
        str_length={"min_value": 1},
        description="Departure city name (e.g., 'New York')",
    )
    destination: Series[str] = pa.Field(
        nullable=False,
        str_length={"min_value": 1},
        description="Arrival city name",
    )
    distance: Series[int] = pa.Field(
        gt=0,
        description="Flight distance (positive weight)",
    )

    class Config:
        # Extra columns pass through unchanged
        strict = False
        coerce = True
        name = "EdgeSchema"
        description = "Directed flight edges in insertion order"


EdgeDataFrame = DataFrame[EdgeSchema]


@dataclass(frozen=True)
class Edge:
    """
    One directed flight leg.

    The insertion index is the edge's identity: two edges with the same
    cities and distance are still distinct flights.
    """

    index: int
    origin: str
    destination: str
    distance: int

    @property
    def route(self) -> tuple[str, str]:
        """(origin, destination) pair."""
        return (self.origin, self.destination)

    def __str__(self) -> str:
        return f"{self.origin} -> {self.destination} ({self.distance})"
