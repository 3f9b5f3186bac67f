"""
Seed Data Provider - the built-in sample flight routes.
"""

import logging
from typing import List, Optional, Tuple

import pandas as pd

from src.flight_db.ports.edge_data_provider import EdgeDataProvider
from src.flight_db.schemas.edge import EDGE_COLUMNS, EdgeDataFrame, EdgeSchema

logger = logging.getLogger(__name__)

# Insertion order is significant: searches take the first matching edge
SEED_FLIGHTS: List[Tuple[str, str, int]] = [
    ("New York", "Chicago", 1000),
    ("Chicago", "Denver", 1000),
    ("New York", "Toronto", 800),
    ("New York", "Denver", 1900),
    ("Toronto", "Calgary", 1500),
    ("Toronto", "Los Angeles", 1800),
    ("Toronto", "Chicago", 500),
    ("Denver", "Urbana", 1000),
    ("Denver", "Houston", 1500),
    ("Houston", "Los Angeles", 1500),
    ("Denver", "Los Angeles", 1000),
]


class SeedDataProvider(EdgeDataProvider):
    """
    In-process provider for a fixed list of flights.

    Defaults to SEED_FLIGHTS; tests and callers may pass their own rows.
    """

    def __init__(self, flights: Optional[List[Tuple[str, str, int]]] = None) -> None:
        self._flights = list(SEED_FLIGHTS if flights is None else flights)

    def get_edges_df(self) -> EdgeDataFrame:
        """Return the seed flights as an EdgeSchema-validated DataFrame."""
        df = pd.DataFrame(self._flights, columns=EDGE_COLUMNS)
        validated = EdgeSchema.validate(df)
        logger.debug("Loaded %d seed flights", len(validated))
        return validated

    @property
    def name(self) -> str:
        return "Built-in seed data"
