"""
Edge Data Provider port interface.

Defines the abstract contract for data sources that seed the edge store.
"""

from abc import ABC, abstractmethod
from typing import Set

from src.flight_db.schemas.edge import EdgeDataFrame


class EdgeDataProvider(ABC):
    """
    Abstract interface for edge data providers.

    Providers return validated DataFrames; schema validation happens at
    the boundary (in the provider), not per-row in the store.

    Implementations:
    - SeedDataProvider: the built-in sample routes
    - SqliteEdgeProvider: a flights table in a SQLite database
    """

    @abstractmethod
    def get_edges_df(self) -> EdgeDataFrame:
        """
        Return all edges as a validated DataFrame, in insertion order.

        Raises:
            pandera.errors.SchemaError: If data fails validation.
        """
        ...

    def get_cities(self) -> Set[str]:
        """Return every city appearing as an origin or a destination."""
        df = self.get_edges_df()
        return set(df["origin"]) | set(df["destination"])

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable name of this data provider."""
        ...

    def close(self) -> None:
        """Release any resources held by the provider."""
        return None

    @property
    def is_available(self) -> bool:
        """
        Check if the data source is currently available.

        Default implementation returns True. Override for providers
        that need connection health checks.
        """
        return True
