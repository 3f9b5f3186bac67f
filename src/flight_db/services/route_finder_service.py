"""
Route Finder Service - Domain orchestrator for route searches.

Coordinates the interaction between:
- EdgeStore (seeded flight edges)
- RouteFinder (algorithm adapter)
- RouteQuery (validated search parameters)
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, Union

from src.flight_db.schemas.query import RouteQuery
from src.flight_db.schemas.route import RouteResult, SearchMode

if TYPE_CHECKING:
    from src.flight_db.adapters.repositories.edge_store import EdgeStore
    from src.flight_db.ports.route_finder import RouteFinder

logger = logging.getLogger(__name__)


class RouteFinderService:
    """
    Domain service for finding flight routes.

    Orchestrates the routing process:
    1. Validates the query
    2. Delegates the search to the algorithm adapter
    3. Logs timing

    Searches never mutate the store, so one service can run any number
    of searches in sequence with identical results.

    Attributes:
        _store: Seeded edge store.
        _route_finder: Algorithm adapter for route finding.
    """

    def __init__(self, store: EdgeStore, route_finder: RouteFinder) -> None:
        self._store = store
        self._route_finder = route_finder

    def find_route(
        self,
        origin: str,
        destination: str,
        mode: Union[SearchMode, str] = SearchMode.DEPTH_FIRST_BACKTRACKING,
    ) -> RouteResult:
        """
        Find a route between two cities.

        Args:
            origin: City to start from.
            destination: City to reach.
            mode: SearchMode or its string value.

        Returns:
            RouteResult with the traversed edges.

        Raises:
            InvalidQueryError: If the query is invalid.
            NoRouteFoundError: If no route exists.
            SearchLimitExceededError: If the search hits its iteration cap.
        """
        query = RouteQuery.create(origin=origin, destination=destination, mode=mode)

        logger.debug(
            "Search query: origin=%s, destination=%s, mode=%s",
            query.origin,
            query.destination,
            query.mode.value,
        )

        start_time = time.perf_counter()
        result = self._route_finder.find_route(
            store=self._store,
            origin=query.origin,
            destination=query.destination,
            mode=query.mode,
        )
        elapsed = time.perf_counter() - start_time

        logger.info(
            "Route search completed: %s -> %s, %d hops, distance %d in %.3fms",
            query.origin,
            query.destination,
            result.num_hops,
            result.total_distance,
            elapsed * 1000,
        )

        return result

    @property
    def algorithm_name(self) -> str:
        """Get name of the underlying algorithm."""
        return self._route_finder.name
