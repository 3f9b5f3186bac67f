"""
Tests for the flight database exception hierarchy.
"""

import pytest

from src.flight_db.exceptions import (
    CapacityExceededError,
    FlightDBError,
    InvalidEdgeError,
    InvalidQueryError,
    NoRouteFoundError,
    SearchLimitExceededError,
    ValidationError,
)


@pytest.mark.parametrize(
    "error",
    [
        CapacityExceededError(100),
        InvalidEdgeError("A", "B", 0),
        InvalidQueryError("bad"),
        NoRouteFoundError("A", "B"),
        SearchLimitExceededError(10),
    ],
)
def test_all_errors_are_flight_db_errors(error):
    assert isinstance(error, FlightDBError)


def test_validation_errors():
    assert issubclass(InvalidEdgeError, ValidationError)
    assert issubclass(InvalidQueryError, ValidationError)


def test_messages():
    assert str(CapacityExceededError(100)) == (
        "Edge store is full: capacity of 100 flights reached"
    )
    assert str(NoRouteFoundError("A", "B")) == "No route exists between 'A' and 'B'"
    assert str(SearchLimitExceededError(10)) == "Route search exceeded 10 iterations"
    assert "'A' -> 'B'" in str(InvalidEdgeError("A", "B", 0))
