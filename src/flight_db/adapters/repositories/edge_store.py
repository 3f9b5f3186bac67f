"""
Edge Store - insertion-ordered repository of directed flight edges.

Implements the flight database with:
- Bounded capacity (append fails loudly instead of truncating)
- First-match-in-insertion-order lookups
- Per-search used-edge tracking via SearchContext
- Origin index for outgoing-edge lookups without a full scan
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, Iterator, List, Optional, Set, Tuple

import pandas as pd

from src.flight_db.exceptions import CapacityExceededError, InvalidEdgeError
from src.flight_db.schemas.edge import EDGE_COLUMNS, Edge, EdgeSchema

logger = logging.getLogger(__name__)

DEFAULT_MAX_EDGES = 100


# =============================================================================
# SEARCH CONTEXT: per-search used flags
# =============================================================================


@dataclass
class SearchContext:
    """
    Used-edge state for one search.

    An edge is "used" once it has been consumed as a connecting flight
    during this search. The store itself is never marked, so every
    search starts from a clean slate.

    Attributes:
        used: Indices of consumed edges.
    """

    used: Set[int] = field(default_factory=set)

    def is_used(self, edge: Edge) -> bool:
        return edge.index in self.used

    def mark_used(self, edge: Edge) -> None:
        self.used.add(edge.index)

    def reset(self) -> None:
        self.used.clear()


# =============================================================================
# EDGE STORE
# =============================================================================


class EdgeStore:
    """
    Bounded, insertion-ordered store of directed flight edges.

    Duplicate routes and self-loops are accepted; lookups always return
    the first match in insertion order. City names are compared exactly
    (case-sensitive).

    Usage:
        >>> store = EdgeStore(max_edges=10)
        >>> store.append("New York", "Chicago", 1000)
        >>> store.find_exact("New York", "Chicago").distance
        1000
    """

    def __init__(self, max_edges: int = DEFAULT_MAX_EDGES) -> None:
        """
        Initialize an empty store.

        Args:
            max_edges: Maximum number of edges the store accepts.
        """
        if max_edges < 0:
            raise ValueError(f"max_edges must be >= 0, got {max_edges}")
        self._max_edges = max_edges
        self._edges: List[Edge] = []
        self._by_origin: Dict[str, List[int]] = {}

    @classmethod
    def from_dataframe(
        cls, df: pd.DataFrame, max_edges: int = DEFAULT_MAX_EDGES
    ) -> "EdgeStore":
        """
        Build a store from an edge DataFrame, preserving row order.

        Args:
            df: Frame with origin, destination and distance columns.
            max_edges: Store capacity.

        Raises:
            pandera.errors.SchemaError: If df fails EdgeSchema validation.
            CapacityExceededError: If df has more rows than max_edges.
        """
        validated = EdgeSchema.validate(df)
        store = cls(max_edges=max_edges)
        store.extend(
            zip(validated["origin"], validated["destination"], validated["distance"])
        )
        logger.info(
            "Edge store seeded: %d flights, %d cities",
            len(store),
            len(store.cities),
        )
        return store

    def append(self, origin: str, destination: str, distance: int) -> Edge:
        """
        Append a flight edge.

        Args:
            origin: Departure city.
            destination: Arrival city.
            distance: Positive distance.

        Returns:
            The stored Edge.

        Raises:
            CapacityExceededError: If the store is already full.
            InvalidEdgeError: If a city is empty or distance is not a
                positive whole number.
        """
        if len(self._edges) >= self._max_edges:
            raise CapacityExceededError(self._max_edges)
        if not origin or not destination:
            raise InvalidEdgeError(origin, destination, distance)
        try:
            whole_distance = int(distance)
        except (TypeError, ValueError):
            raise InvalidEdgeError(origin, destination, distance) from None
        # Rejects fractions such as 0.5 that int() would truncate
        if whole_distance != distance or whole_distance <= 0:
            raise InvalidEdgeError(origin, destination, distance)

        edge = Edge(
            index=len(self._edges),
            origin=str(origin),
            destination=str(destination),
            distance=whole_distance,
        )
        self._edges.append(edge)
        self._by_origin.setdefault(edge.origin, []).append(edge.index)
        return edge

    def extend(self, rows: Iterable[Tuple[str, str, int]]) -> None:
        """Append (origin, destination, distance) rows in order."""
        for origin, destination, distance in rows:
            self.append(origin, destination, distance)

    def find_exact(self, origin: str, destination: str) -> Optional[Edge]:
        """
        First edge from origin to destination, or None.

        Pure lookup: used state is neither consulted nor changed.
        """
        for index in self._by_origin.get(origin, ()):
            edge = self._edges[index]
            if edge.destination == destination:
                return edge
        return None

    def find_unused_outgoing(
        self, origin: str, context: SearchContext
    ) -> Optional[Edge]:
        """
        First edge leaving origin that is unused in context, or None.

        The returned edge is marked used in context before it is returned,
        so repeated calls walk through the outgoing edges one by one.
        """
        for index in self._by_origin.get(origin, ()):
            if index not in context.used:
                edge = self._edges[index]
                context.mark_used(edge)
                return edge
        return None

    def unused_outgoing(self, origin: str, context: SearchContext) -> List[Edge]:
        """Edges leaving origin that are unused in context, without marking them."""
        return [
            self._edges[index]
            for index in self._by_origin.get(origin, ())
            if index not in context.used
        ]

    def outgoing(self, origin: str) -> List[Edge]:
        """All edges leaving origin, in insertion order."""
        return [self._edges[index] for index in self._by_origin.get(origin, ())]

    def new_search(self) -> SearchContext:
        """Fresh used-edge state for one search."""
        return SearchContext()

    def has_route(self, origin: str, destination: str) -> bool:
        """Check if a direct flight exists."""
        return self.find_exact(origin, destination) is not None

    def to_dataframe(self) -> pd.DataFrame:
        """All edges as a DataFrame in insertion order."""
        return pd.DataFrame(
            [(e.origin, e.destination, e.distance) for e in self._edges],
            columns=EDGE_COLUMNS,
        )

    @property
    def cities(self) -> frozenset[str]:
        """Every city appearing as an origin or destination."""
        return frozenset(self._by_origin) | frozenset(
            edge.destination for edge in self._edges
        )

    @property
    def capacity(self) -> int:
        return self._max_edges

    @property
    def is_full(self) -> bool:
        return len(self._edges) >= self._max_edges

    def __len__(self) -> int:
        return len(self._edges)

    def __iter__(self) -> Iterator[Edge]:
        return iter(self._edges)

    def __getitem__(self, index: int) -> Edge:
        return self._edges[index]
