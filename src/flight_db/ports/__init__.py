"""
Port interfaces for the flight database.

Ports define the abstract interfaces that the service layer uses to
talk to data sources and search algorithms (Ports and Adapters).
"""

from src.flight_db.ports.edge_data_provider import EdgeDataProvider
from src.flight_db.ports.route_finder import RouteFinder

__all__ = [
    "EdgeDataProvider",
    "RouteFinder",
]
