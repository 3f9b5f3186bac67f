"""
Route Finder port interface.

Defines the abstract contract for path search algorithms.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from src.flight_db.adapters.repositories.edge_store import EdgeStore
    from src.flight_db.schemas.route import RouteResult, SearchMode


class RouteFinder(ABC):
    """
    Abstract interface for route finding algorithms.

    Implementations:
    - BacktrackingRouteFinder: depth-first search with backtracking
    """

    @abstractmethod
    def find_route(
        self,
        store: EdgeStore,
        origin: str,
        destination: str,
        mode: SearchMode,
    ) -> RouteResult:
        """
        Find a route from origin to destination.

        Args:
            store: Seeded edge store. Must not be mutated.
            origin: City to start from.
            destination: City to reach.
            mode: Search mode.

        Returns:
            RouteResult with the traversed edges in travel order.

        Raises:
            NoRouteFoundError: If the search exhausts the graph.
        """
        ...

    @property
    @abstractmethod
    def name(self) -> str:
        """Algorithm identifier."""
        ...
