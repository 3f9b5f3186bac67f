"""
Domain services for the flight database.

Services orchestrate the interaction between the edge store, the
search algorithm and itinerary reporting.
"""

from src.flight_db.services.reporter import Reporter
from src.flight_db.services.route_finder_service import RouteFinderService

__all__ = ["Reporter", "RouteFinderService"]
