"""
Schema definitions for the flight database.

Dataclasses for edges and routes, Pandera-validated DataFrames at
the data boundaries.
"""

from .edge import EDGE_COLUMNS, Edge, EdgeDataFrame, EdgeSchema
from .query import RouteQuery
from .route import (
    Itinerary,
    PathStack,
    RouteLegSchema,
    RouteResult,
    SearchMode,
)

__all__ = [
    # Edge schemas
    "EDGE_COLUMNS",
    "Edge",
    "EdgeDataFrame",
    "EdgeSchema",
    # Query
    "RouteQuery",
    # Route schemas
    "Itinerary",
    "PathStack",
    "RouteLegSchema",
    "RouteResult",
    "SearchMode",
]
