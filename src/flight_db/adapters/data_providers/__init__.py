"""
Data provider adapters for seeding the edge store.
"""

from src.flight_db.adapters.data_providers.seed_provider import (
    SEED_FLIGHTS,
    SeedDataProvider,
)
from src.flight_db.adapters.data_providers.sqlite_provider import SqliteEdgeProvider

__all__ = ["SEED_FLIGHTS", "SeedDataProvider", "SqliteEdgeProvider"]
