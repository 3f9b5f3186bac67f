"""
Route query schema.

Defines the validated parameters of a single route search.
"""

from dataclasses import dataclass
from typing import Union

from src.flight_db.exceptions import InvalidQueryError
from src.flight_db.schemas.route import SearchMode


@dataclass(frozen=True)
class RouteQuery:
    """
    Immutable route search parameters.

    Attributes:
        origin: City to start from.
        destination: City to reach.
        mode: Search mode.
    """

    origin: str
    destination: str
    mode: SearchMode = SearchMode.DEPTH_FIRST_BACKTRACKING

    def __post_init__(self) -> None:
        """Validate query after initialization."""
        if not self.origin:
            raise InvalidQueryError("origin cannot be empty")
        if not self.destination:
            raise InvalidQueryError("destination cannot be empty")
        if not isinstance(self.mode, SearchMode):
            raise InvalidQueryError(f"Unknown search mode: {self.mode!r}")

    @classmethod
    def create(
        cls,
        origin: str,
        destination: str,
        mode: Union[SearchMode, str] = SearchMode.DEPTH_FIRST_BACKTRACKING,
    ) -> "RouteQuery":
        """
        Factory method for creating a RouteQuery.

        Accepts the mode as a SearchMode or its string value
        (e.g., "depth-first").
        """
        if not isinstance(mode, SearchMode):
            try:
                mode = SearchMode(mode)
            except ValueError:
                raise InvalidQueryError(f"Unknown search mode: {mode!r}") from None

        return cls(origin=origin, destination=destination, mode=mode)
