"""
Route result schemas.

Defines the search-time path stack and the output contract of the
route finder: an ordered, immutable sequence of edges plus the
formatted itinerary produced from it.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, List, Optional, Sequence

import pandas as pd
import pandera as pa
from pandera.typing import Series

from src.flight_db.schemas.edge import Edge


class SearchMode(str, Enum):
    """
    How the route finder starts its search.

    DIRECT_THEN_BACKTRACK is the mode formerly named
    "BreadthFirst". It is not a breadth-first search: it checks for a
    direct flight once, at the origin, and then runs the same
    extend/backtrack loop as DEPTH_FIRST_BACKTRACKING, which re-checks
    for a direct flight at every step.
    """

    DEPTH_FIRST_BACKTRACKING = "depth-first"
    DIRECT_THEN_BACKTRACK = "direct-then-backtrack"


class PathStack:
    """
    Last-in-first-out record of the edges traversed by one search.

    Owned by a single search; never shared between searches.
    """

    def __init__(self, edges: Optional[Sequence[Edge]] = None) -> None:
        self._edges: List[Edge] = list(edges) if edges else []

    def push(self, edge: Edge) -> None:
        self._edges.append(edge)

    def pop(self) -> Edge:
        """
        Remove and return the most recent edge.

        Raises:
            IndexError: If the stack is empty.
        """
        if not self._edges:
            raise IndexError("pop from empty PathStack")
        return self._edges.pop()

    def peek(self) -> Optional[Edge]:
        """Most recent edge, or None when empty."""
        return self._edges[-1] if self._edges else None

    def drain(self) -> Iterator[Edge]:
        """Pop every edge, most recent first. Leaves the stack empty."""
        while self._edges:
            yield self._edges.pop()

    def __len__(self) -> int:
        return len(self._edges)

    def __bool__(self) -> bool:
        return bool(self._edges)

    def __iter__(self) -> Iterator[Edge]:
        """Iterate from the earliest hop to the most recent."""
        return iter(list(self._edges))

    def __repr__(self) -> str:
        return f"PathStack({self._edges!r})"


class RouteLegSchema(pa.DataFrameModel):
    """
    Schema for the legs of a found route.

    Each row represents one hop, in travel order.
    """

    leg_index: Series[int] = pa.Field(
        ge=0,
        description="Zero-based index of this leg in the route",
    )
    origin: Series[str] = pa.Field(nullable=False)
    destination: Series[str] = pa.Field(nullable=False)
    distance: Series[int] = pa.Field(gt=0)
    cumulative_distance: Series[int] = pa.Field(
        gt=0,
        description="Distance flown up to and including this leg",
    )

    class Config:
        strict = False
        coerce = True
        name = "RouteLegSchema"
        ordered = True


@dataclass(frozen=True)
class RouteResult:
    """
    Immutable representation of a found route.

    Attributes:
        origin: City the search started from.
        destination: City the search was looking for.
        mode: Search mode that produced this route.
        edges: Traversed edges in travel order.
    """

    origin: str
    destination: str
    mode: SearchMode
    edges: tuple[Edge, ...]

    @property
    def total_distance(self) -> int:
        """Sum of all leg distances."""
        return sum(edge.distance for edge in self.edges)

    @property
    def num_hops(self) -> int:
        return len(self.edges)

    @property
    def cities(self) -> List[str]:
        """Ordered list of all cities on the route."""
        if not self.edges:
            return []
        cities = [self.edges[0].origin]
        for edge in self.edges:
            cities.append(edge.destination)
        return cities

    def to_path_stack(self) -> PathStack:
        """Fresh PathStack holding this route's edges (most recent on top)."""
        return PathStack(self.edges)

    def to_dataframe(self) -> pd.DataFrame:
        """Legs of this route as a RouteLegSchema-validated DataFrame."""
        distances = [edge.distance for edge in self.edges]
        cumulative = pd.Series(distances, dtype="int64").cumsum()
        df = pd.DataFrame(
            {
                "leg_index": range(len(self.edges)),
                "origin": [edge.origin for edge in self.edges],
                "destination": [edge.destination for edge in self.edges],
                "distance": distances,
                "cumulative_distance": cumulative,
            }
        )
        return RouteLegSchema.validate(df)

    @classmethod
    def from_path_stack(
        cls,
        stack: PathStack,
        origin: str,
        destination: str,
        mode: SearchMode,
    ) -> "RouteResult":
        """
        Factory method to create a RouteResult from a finished search.

        Does not consume the stack.

        Raises:
            ValueError: If the stack is empty.
        """
        if not stack:
            raise ValueError("Route must have at least one edge")

        return cls(
            origin=origin,
            destination=destination,
            mode=mode,
            edges=tuple(stack),
        )


@dataclass(frozen=True)
class Itinerary:
    """Printable itinerary and the total distance it covers."""

    text: str
    total_distance: int

    def __str__(self) -> str:
        return self.text
