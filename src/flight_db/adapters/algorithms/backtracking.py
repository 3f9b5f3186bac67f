"""
Backtracking Route Finder - depth-first search over the edge store.

The search keeps a PathStack of traversed edges and a cursor on the
current city. At each step it:

1. Checks for a direct flight from the current city to the target.
2. Looks one hop ahead: the first unused outgoing edge whose
   destination flies directly to the target completes the route.
3. Otherwise consumes the first unused outgoing edge and moves on.
4. At a dead end, pops the most recent edge and resumes from its origin.

Edges are consumed through a per-search SearchContext, so each edge is
taken at most once per search and successive searches do not interfere.
"""

import logging
from typing import Optional, Tuple

from src.flight_db.adapters.repositories.edge_store import EdgeStore, SearchContext
from src.flight_db.exceptions import NoRouteFoundError, SearchLimitExceededError
from src.flight_db.ports.route_finder import RouteFinder
from src.flight_db.schemas.edge import Edge
from src.flight_db.schemas.route import PathStack, RouteResult, SearchMode

logger = logging.getLogger(__name__)


class BacktrackingRouteFinder(RouteFinder):
    """
    Depth-first route search with backtracking.

    Finds *a* route, not the shortest one: edges are tried in insertion
    order and the first route that reaches the target wins.

    Attributes:
        _max_iterations: Optional cap on search loop iterations.
    """

    def __init__(self, max_iterations: Optional[int] = None) -> None:
        """
        Initialize the route finder.

        Args:
            max_iterations: Raise SearchLimitExceededError after this many
                loop iterations. None leaves the search unbounded.
        """
        if max_iterations is not None and max_iterations < 1:
            raise ValueError(f"max_iterations must be >= 1, got {max_iterations}")
        self._max_iterations = max_iterations

    @property
    def name(self) -> str:
        """Algorithm identifier."""
        return "Depth-First Backtracking"

    def find_route(
        self,
        store: EdgeStore,
        origin: str,
        destination: str,
        mode: SearchMode = SearchMode.DEPTH_FIRST_BACKTRACKING,
    ) -> RouteResult:
        """
        Search the store for a route from origin to destination.

        In DIRECT_THEN_BACKTRACK mode the direct-flight check runs only at
        the origin; DEPTH_FIRST_BACKTRACKING repeats it at every step.

        Returns:
            RouteResult with the traversed edges in travel order.

        Raises:
            NoRouteFoundError: If backtracking empties the path stack.
            SearchLimitExceededError: If max_iterations is exceeded.
        """
        context = store.new_search()
        stack = PathStack()
        current = origin
        check_direct = True
        iterations = 0

        while True:
            iterations += 1
            if self._max_iterations is not None and iterations > self._max_iterations:
                logger.warning(
                    "Search %s -> %s stopped after %d iterations",
                    origin,
                    destination,
                    self._max_iterations,
                )
                raise SearchLimitExceededError(self._max_iterations)

            if check_direct:
                direct = store.find_exact(current, destination)
                if direct is not None and direct.distance > 0:
                    stack.push(direct)
                    break
            check_direct = mode is SearchMode.DEPTH_FIRST_BACKTRACKING

            hop = self._look_ahead(store, context, current, destination)
            if hop is not None:
                connecting, final = hop
                stack.push(connecting)
                stack.push(final)
                break

            connecting = store.find_unused_outgoing(current, context)
            if connecting is not None:
                logger.debug("Extend: %s", connecting)
                stack.push(connecting)
                current = connecting.destination
                continue

            # Dead end
            if not stack:
                logger.debug(
                    "Search %s -> %s exhausted after %d iterations",
                    origin,
                    destination,
                    iterations,
                )
                raise NoRouteFoundError(origin, destination)

            previous = stack.pop()
            logger.debug("Backtrack: %s", previous)
            current = previous.origin

        logger.debug(
            "Route %s -> %s found in %d iterations (%d hops)",
            origin,
            destination,
            iterations,
            len(stack),
        )
        return RouteResult.from_path_stack(stack, origin, destination, mode)

    def _look_ahead(
        self,
        store: EdgeStore,
        context: SearchContext,
        current: str,
        destination: str,
    ) -> Optional[Tuple[Edge, Edge]]:
        """
        Find an unused edge out of current whose destination reaches the target.

        The chosen connecting edge is marked used; edges that were only
        inspected stay available for descent.

        Returns:
            (connecting edge, final edge) or None.
        """
        for connecting in store.unused_outgoing(current, context):
            final = store.find_exact(connecting.destination, destination)
            if final is not None and final.distance > 0:
                context.mark_used(connecting)
                return connecting, final
        return None
