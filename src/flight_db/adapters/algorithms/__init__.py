"""
Algorithm adapters for route finding.
"""

from src.flight_db.adapters.algorithms.backtracking import BacktrackingRouteFinder

__all__ = ["BacktrackingRouteFinder"]
