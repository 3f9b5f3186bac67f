"""
Reporter - turns a finished search into a printable itinerary.
"""

import logging

from src.flight_db.schemas.route import Itinerary, PathStack, RouteResult

logger = logging.getLogger(__name__)


class Reporter:
    """
    Formats path stacks as itineraries.

    Output format:

        New York to Toronto to Los Angeles
        Distance is 2600
    """

    separator = " to "

    def report(self, stack: PathStack, origin: str, destination: str) -> Itinerary:
        """
        Drain a path stack into an itinerary.

        The stack is consumed from the most recent hop down; hop origins
        are then listed in travel order, followed by the destination.

        Args:
            stack: Path stack of a finished search. Empty afterwards.
            origin: City the search started from.
            destination: City the search reached.

        Returns:
            Itinerary text and total distance.
        """
        total = 0
        origins = []
        for edge in stack.drain():
            origins.append(edge.origin)
            total += edge.distance
        origins.reverse()

        if origins and origins[0] != origin:
            logger.warning(
                "Itinerary starts at %s, expected %s", origins[0], origin
            )

        cities = self.separator.join(origins + [destination])
        text = f"{cities}\nDistance is {total}"
        return Itinerary(text=text, total_distance=total)

    def report_result(self, result: RouteResult) -> Itinerary:
        """Report a RouteResult without touching its edges."""
        return self.report(result.to_path_stack(), result.origin, result.destination)
