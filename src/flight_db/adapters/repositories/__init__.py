"""
Repository adapters for flight edge storage.
"""

from src.flight_db.adapters.repositories.edge_store import (
    DEFAULT_MAX_EDGES,
    EdgeStore,
    SearchContext,
)

__all__ = [
    "DEFAULT_MAX_EDGES",
    "EdgeStore",
    "SearchContext",
]
