"""
Shared fixtures for flight database tests.

Provides the sample routes as a DataFrame, a seeded EdgeStore and
a FlightDatabase built from the built-in seed data.
"""

import pandas as pd
import pytest

from src.flight_db.adapters.data_providers.seed_provider import SEED_FLIGHTS
from src.flight_db.adapters.repositories.edge_store import EdgeStore
from src.flight_db.application import FlightDatabase
from src.flight_db.schemas.edge import EDGE_COLUMNS


@pytest.fixture
def seed_df() -> pd.DataFrame:
    """Sample routes in insertion order."""
    return pd.DataFrame(SEED_FLIGHTS, columns=EDGE_COLUMNS)


@pytest.fixture
def seed_store() -> EdgeStore:
    """EdgeStore holding the sample routes."""
    store = EdgeStore(max_edges=100)
    store.extend(SEED_FLIGHTS)
    return store


@pytest.fixture
def flight_db() -> FlightDatabase:
    """FlightDatabase seeded from the built-in data."""
    return FlightDatabase(max_iterations=1000)
