"""
Tests for BacktrackingRouteFinder.

Tests cover:
- Sample query resolution (first-match insertion order)
- Direct flights and one-hop look-ahead
- Backtracking out of dead ends
- Search exhaustion (no route)
- DIRECT_THEN_BACKTRACK mode (formerly "BreadthFirst", which is
  not a breadth-first search)
- Iteration limit safety net
- Store is untouched by searches
"""

import pytest

from src.flight_db.adapters.algorithms.backtracking import BacktrackingRouteFinder
from src.flight_db.adapters.repositories.edge_store import EdgeStore
from src.flight_db.exceptions import NoRouteFoundError, SearchLimitExceededError
from src.flight_db.schemas.route import SearchMode


@pytest.fixture
def finder() -> BacktrackingRouteFinder:
    return BacktrackingRouteFinder()


def make_store(*rows) -> EdgeStore:
    store = EdgeStore()
    store.extend(rows)
    return store


class TestSampleRoutes:
    """Routes over the built-in sample data."""

    def test_new_york_to_los_angeles(self, finder, seed_store):
        result = finder.find_route(seed_store, "New York", "Los Angeles")

        assert result.cities == ["New York", "Toronto", "Los Angeles"]
        assert result.total_distance == 2600
        assert [e.distance for e in result.edges] == [800, 1800]

    def test_direct_flight_is_single_hop(self, finder, seed_store):
        result = finder.find_route(
            seed_store, "New York", "Chicago", SearchMode.DEPTH_FIRST_BACKTRACKING
        )

        assert result.num_hops == 1
        assert result.total_distance == seed_store.find_exact("New York", "Chicago").distance

    def test_look_ahead_picks_first_connecting_city(self, finder, seed_store):
        result = finder.find_route(seed_store, "New York", "Urbana")

        assert result.cities == ["New York", "Denver", "Urbana"]
        assert result.total_distance == 2900

    def test_backtracks_out_of_dead_ends(self, finder, seed_store):
        # Calgary and Los Angeles have no outgoing flights
        result = finder.find_route(seed_store, "Toronto", "Urbana")

        assert result.cities == ["Toronto", "Chicago", "Denver", "Urbana"]
        assert result.total_distance == 2500

    def test_no_outgoing_flights_raises(self, finder, seed_store):
        with pytest.raises(NoRouteFoundError) as exc_info:
            finder.find_route(seed_store, "Los Angeles", "New York")

        assert exc_info.value.origin == "Los Angeles"
        assert exc_info.value.destination == "New York"

    def test_unreachable_city_exhausts_graph(self, finder, seed_store):
        with pytest.raises(NoRouteFoundError):
            finder.find_route(seed_store, "New York", "Atlantis")

    def test_repeated_searches_give_same_result(self, finder, seed_store):
        first = finder.find_route(seed_store, "Toronto", "Urbana")
        second = finder.find_route(seed_store, "Toronto", "Urbana")

        assert first == second

    def test_search_does_not_change_store(self, finder, seed_store):
        before = list(seed_store)
        finder.find_route(seed_store, "Toronto", "Urbana")

        assert list(seed_store) == before


class TestDirectThenBacktrack:
    """DIRECT_THEN_BACKTRACK only checks for a direct flight at the origin."""

    def test_sample_query_matches_depth_first(self, finder, seed_store):
        result = finder.find_route(
            seed_store, "New York", "Los Angeles", SearchMode.DIRECT_THEN_BACKTRACK
        )

        assert result.total_distance == 2600
        assert result.mode is SearchMode.DIRECT_THEN_BACKTRACK

    def test_direct_flight(self, finder, seed_store):
        result = finder.find_route(
            seed_store, "Denver", "Houston", SearchMode.DIRECT_THEN_BACKTRACK
        )

        assert result.num_hops == 1
        assert result.total_distance == 1500

    def test_backtracking(self, finder, seed_store):
        result = finder.find_route(
            seed_store, "Toronto", "Urbana", SearchMode.DIRECT_THEN_BACKTRACK
        )

        assert result.cities == ["Toronto", "Chicago", "Denver", "Urbana"]

    def test_no_route(self, finder, seed_store):
        with pytest.raises(NoRouteFoundError):
            finder.find_route(
                seed_store, "Urbana", "Chicago", SearchMode.DIRECT_THEN_BACKTRACK
            )


class TestSmallGraphs:
    """Hand-built graphs exercising specific search paths."""

    def test_duplicate_route_uses_first(self, finder):
        store = make_store(("A", "B", 10), ("A", "B", 99))

        assert finder.find_route(store, "A", "B").total_distance == 10

    def test_deep_chain(self, finder):
        store = make_store(("A", "B", 1), ("B", "C", 2), ("C", "D", 3), ("D", "E", 4))
        result = finder.find_route(store, "A", "E")

        assert result.cities == ["A", "B", "C", "D", "E"]
        assert result.total_distance == 10

    def test_cycle_terminates(self, finder):
        store = make_store(("A", "B", 1), ("B", "A", 1), ("B", "C", 1))

        with pytest.raises(NoRouteFoundError):
            finder.find_route(store, "A", "Z")

    def test_empty_store(self, finder):
        with pytest.raises(NoRouteFoundError):
            finder.find_route(EdgeStore(), "A", "B")


class TestIterationLimit:
    """Tests for the optional max_iterations safety net."""

    def test_limit_exceeded_raises(self, seed_store):
        finder = BacktrackingRouteFinder(max_iterations=2)

        with pytest.raises(SearchLimitExceededError) as exc_info:
            finder.find_route(seed_store, "Toronto", "Urbana")

        assert exc_info.value.limit == 2

    def test_generous_limit_does_not_interfere(self, seed_store):
        finder = BacktrackingRouteFinder(max_iterations=2 * len(seed_store) + 1)

        result = finder.find_route(seed_store, "Toronto", "Urbana")
        assert result.total_distance == 2500

    def test_exhaustion_fits_within_two_iterations_per_edge(self, seed_store):
        # Every descent consumes an edge and every pop undoes a descent
        finder = BacktrackingRouteFinder(max_iterations=2 * len(seed_store) + 1)

        with pytest.raises(NoRouteFoundError):
            finder.find_route(seed_store, "New York", "Atlantis")

    def test_invalid_limit_rejected(self):
        with pytest.raises(ValueError):
            BacktrackingRouteFinder(max_iterations=0)

    def test_name(self, finder):
        assert finder.name == "Depth-First Backtracking"
