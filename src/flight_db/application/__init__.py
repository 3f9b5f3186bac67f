"""
Application layer for the flight database.

Provides the public API: a facade that seeds the store and runs
route searches.
"""

from src.flight_db.application.flight_database import FlightDatabase

__all__ = ["FlightDatabase"]
