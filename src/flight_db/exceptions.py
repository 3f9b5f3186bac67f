"""
Custom exceptions for the flight database.

Provides a hierarchy of exceptions for clear error handling
of edge storage and route-finding operations.

Lookup misses are not errors: EdgeStore lookups return None and
callers branch on it.
"""


class FlightDBError(Exception):
    """Base exception for all flight database errors."""

    pass


class ValidationError(FlightDBError):
    """Base exception for input validation errors."""

    pass


class InvalidEdgeError(ValidationError):
    """Raised when a flight edge has an empty city or non-positive distance."""

    def __init__(self, origin: str, destination: str, distance: int) -> None:
        self.origin = origin
        self.destination = destination
        self.distance = distance
        message = (
            f"Invalid flight {origin!r} -> {destination!r} "
            f"with distance {distance}"
        )
        super().__init__(message)


class InvalidQueryError(ValidationError):
    """Raised when route search parameters are invalid."""

    pass


class CapacityExceededError(FlightDBError):
    """Raised when appending to an edge store that is already full."""

    def __init__(self, capacity: int) -> None:
        self.capacity = capacity
        message = f"Edge store is full: capacity of {capacity} flights reached"
        super().__init__(message)


class NoRouteFoundError(FlightDBError):
    """Raised when backtracking exhausts the graph without reaching the target."""

    def __init__(self, origin: str, destination: str) -> None:
        self.origin = origin
        self.destination = destination
        message = f"No route exists between '{origin}' and '{destination}'"
        super().__init__(message)


class SearchLimitExceededError(FlightDBError):
    """Raised when a search runs past its iteration limit."""

    def __init__(self, limit: int) -> None:
        self.limit = limit
        message = f"Route search exceeded {limit} iterations"
        super().__init__(message)
