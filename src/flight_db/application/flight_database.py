"""
FlightDatabase - Public API for the flight database.

Acts as a Facade/Factory: seeds the edge store from a data provider,
wires the route finder and reporter, and exposes route searches.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

from src.flight_db.adapters.algorithms.backtracking import BacktrackingRouteFinder
from src.flight_db.adapters.data_providers.seed_provider import SeedDataProvider
from src.flight_db.adapters.repositories.edge_store import EdgeStore
from src.flight_db.config import Config
from src.flight_db.ports.edge_data_provider import EdgeDataProvider
from src.flight_db.ports.route_finder import RouteFinder
from src.flight_db.schemas.edge import Edge
from src.flight_db.schemas.route import Itinerary, RouteResult, SearchMode
from src.flight_db.services.reporter import Reporter
from src.flight_db.services.route_finder_service import RouteFinderService

logger = logging.getLogger(__name__)

# Marks "use the configured default"; None means "no limit"
_FROM_CONFIG = object()


class FlightDatabase:
    """
    Public API for the flight database.

    Example usage:
        >>> db = FlightDatabase()
        >>> result = db.route("New York", "Los Angeles")
        >>> print(db.report_result(result))
        New York to Toronto to Los Angeles
        Distance is 2600

    Attributes:
        _store: Seeded EdgeStore.
        _service: Underlying RouteFinderService.
        _reporter: Itinerary formatter.
    """

    def __init__(
        self,
        data_provider: Optional[EdgeDataProvider] = None,
        route_finder: Optional[RouteFinder] = None,
        max_edges: Optional[int] = None,
        max_iterations: Union[Optional[int], object] = _FROM_CONFIG,
    ) -> None:
        """
        Initialize the database with optional custom dependencies.

        Args:
            data_provider: Edge source. If None, uses SeedDataProvider.
            route_finder: Custom algorithm. If None, uses BacktrackingRouteFinder.
            max_edges: Store capacity. Defaults to Config.MAX_EDGES.
            max_iterations: Search iteration cap for the default route finder.
                Defaults to Config.MAX_ITERATIONS; None disables the cap.
        """
        self._data_provider = data_provider or SeedDataProvider()

        try:
            self._store = EdgeStore.from_dataframe(
                self._data_provider.get_edges_df(),
                max_edges=max_edges if max_edges is not None else Config.MAX_EDGES,
            )
        except BaseException:
            self._data_provider.close()
            raise

        if route_finder is not None:
            self._route_finder = route_finder
        else:
            self._route_finder = BacktrackingRouteFinder(
                max_iterations=(
                    Config.MAX_ITERATIONS
                    if max_iterations is _FROM_CONFIG
                    else max_iterations
                ),
            )

        self._service = RouteFinderService(
            store=self._store,
            route_finder=self._route_finder,
        )
        self._reporter = Reporter()

        logger.info(
            "FlightDatabase initialized from %s with %s algorithm",
            self._data_provider.name,
            self._route_finder.name,
        )

    def route(
        self,
        origin: str,
        destination: str,
        mode: Union[SearchMode, str] = SearchMode.DEPTH_FIRST_BACKTRACKING,
    ) -> RouteResult:
        """
        Find a route between two cities.

        Raises:
            NoRouteFoundError: If no route exists.
        """
        return self._service.find_route(origin, destination, mode)

    def report(
        self,
        origin: str,
        destination: str,
        mode: Union[SearchMode, str] = SearchMode.DEPTH_FIRST_BACKTRACKING,
    ) -> Itinerary:
        """Find a route and format it as an itinerary."""
        return self.report_result(self.route(origin, destination, mode))

    def report_result(self, result: RouteResult) -> Itinerary:
        return self._reporter.report_result(result)

    def append_flight(self, origin: str, destination: str, distance: int) -> Edge:
        """
        Add a flight to the store.

        Raises:
            CapacityExceededError: If the store is full.
        """
        return self._store.append(origin, destination, distance)

    def find_exact(self, origin: str, destination: str) -> Optional[Edge]:
        """First direct flight between two cities, or None."""
        return self._store.find_exact(origin, destination)

    def has_route(self, origin: str, destination: str) -> bool:
        """Check if a direct flight exists between two cities."""
        return self._store.has_route(origin, destination)

    @property
    def cities(self) -> frozenset[str]:
        """All cities known to the database."""
        return self._store.cities

    @property
    def store(self) -> EdgeStore:
        return self._store

    @property
    def algorithm_name(self) -> str:
        return self._service.algorithm_name

    def close(self) -> None:
        """Release data provider resources."""
        self._data_provider.close()
        logger.debug("FlightDatabase closed")

    def __enter__(self) -> "FlightDatabase":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
