"""
Tests for the route search strategies.

Tests cover:
- Depth-first search on the sample network (direct hits, backtracking)
- Path invariants: endpoints, contiguity, total weight
- Exhaustive search and visitation markers on unreachable targets
- Insertion-order tie-breaks
- Lookahead two-hop search and its bounded exhaustion
- FrameStack ordering
"""

import pytest

from src.flight_paths.adapters.algorithms.depth_first import DepthFirstRouteFinder
from src.flight_paths.adapters.algorithms.frame_stack import FrameStack
from src.flight_paths.adapters.algorithms.lookahead import LookaheadRouteFinder
from src.flight_paths.schemas.route import RouteSegment
from src.flight_paths.schemas.search import SearchMethod


@pytest.fixture
def dfs() -> DepthFirstRouteFinder:
    return DepthFirstRouteFinder()


@pytest.fixture
def lookahead() -> LookaheadRouteFinder:
    return LookaheadRouteFinder()


def assert_valid_path(path, origin, destination):
    """Check the structural invariants every found path must hold."""
    assert path is not None
    assert path.segments[0].origin == origin
    assert path.segments[-1].destination == destination
    for prev, nxt in zip(path.segments, path.segments[1:]):
        assert prev.destination == nxt.origin
    assert path.total_weight == sum(seg.weight for seg in path.segments)


# =============================================================================
# FRAME STACK TESTS
# =============================================================================


class TestFrameStack:
    """Tests for FrameStack."""

    def test_pop_empty_returns_none(self):
        """Popping an empty stack reports None instead of underflowing."""
        assert FrameStack().pop() is None

    def test_pop_is_lifo(self):
        """The most recent frame comes off first."""
        stack = FrameStack()
        stack.push("A", "B", 1)
        stack.push("B", "C", 2)

        assert stack.pop() == RouteSegment("B", "C", 2)
        assert stack.depth == 1

    def test_drain_returns_forward_order(self):
        """drain() yields origin-to-destination order and empties the stack."""
        stack = FrameStack()
        stack.push("A", "B", 1)
        stack.push("B", "C", 2)
        stack.push("C", "D", 3)

        drained = stack.drain()

        assert [seg.origin for seg in drained] == ["A", "B", "C"]
        assert not stack
        assert stack.depth == 0


# =============================================================================
# DEPTH-FIRST TESTS
# =============================================================================


class TestDepthFirstSampleNetwork:
    """Depth-first search on the sample network."""

    def test_method_and_name(self, dfs):
        """Finder identifies itself."""
        assert dfs.method is SearchMethod.DEPTH_FIRST
        assert dfs.name == "Depth-First Backtracking"

    def test_new_york_to_los_angeles(self, dfs, sample_graph):
        """First path under insertion order is NY -> Chicago -> Denver -> LA."""
        path = dfs.find_route(sample_graph, "New York", "Los Angeles")

        assert_valid_path(path, "New York", "Los Angeles")
        assert path.route_cities == ["New York", "Chicago", "Denver", "Los Angeles"]
        assert path.total_weight == 3000

    def test_direct_edge(self, dfs, sample_graph):
        """A direct edge is taken immediately."""
        path = dfs.find_route(sample_graph, "New York", "Chicago")

        assert path.segments == (RouteSegment("New York", "Chicago", 1000),)
        assert path.total_weight == 1000

    def test_backtracks_out_of_dead_ends(self, dfs, sample_graph):
        """NY -> Calgary needs the whole Chicago subtree abandoned first."""
        visited = sample_graph.new_visitation()

        path = dfs.find_route(sample_graph, "New York", "Calgary", visited)

        assert_valid_path(path, "New York", "Calgary")
        assert path.route_cities == ["New York", "Toronto", "Calgary"]
        assert path.total_weight == 2300
        # Edges claimed on abandoned branches stay visited
        assert visited.visited_indices() == [0, 1, 2, 7, 8, 9, 10]

    def test_no_departures_means_no_route(self, dfs, sample_graph):
        """A location without departures cannot reach anything."""
        assert dfs.find_route(sample_graph, "Los Angeles", "New York") is None

    def test_unknown_origin(self, dfs, sample_graph):
        """Unknown locations are a normal no-route outcome."""
        assert dfs.find_route(sample_graph, "Miami", "Denver") is None

    def test_unreachable_visits_every_reachable_edge(self, dfs, sample_graph):
        """Exhaustive search marks every edge reachable from the origin."""
        visited = sample_graph.new_visitation()

        path = dfs.find_route(sample_graph, "New York", "Miami", visited)

        assert path is None
        assert visited.all_visited

    def test_unreachable_from_inner_node(self, dfs, sample_graph):
        """Only edges reachable from the origin are marked."""
        visited = sample_graph.new_visitation()

        assert dfs.find_route(sample_graph, "Chicago", "Toronto", visited) is None
        assert visited.visited_indices() == [1, 7, 8, 9, 10]

    def test_repeated_searches_identical(self, dfs, sample_graph):
        """Each call starts from a clean visitation table."""
        first = dfs.find_route(sample_graph, "New York", "Calgary")
        second = dfs.find_route(sample_graph, "New York", "Calgary")

        assert first == second

    def test_reset_table_reproduces_result(self, dfs, sample_graph):
        """Reusing a table after reset() gives the same path."""
        visited = sample_graph.new_visitation()
        first = dfs.find_route(sample_graph, "New York", "Calgary", visited)

        visited.reset()
        second = dfs.find_route(sample_graph, "New York", "Calgary", visited)

        assert first == second

    def test_stale_table_changes_result(self, dfs, sample_graph):
        """Without a reset, markers from the previous search leak in."""
        visited = sample_graph.new_visitation()
        dfs.find_route(sample_graph, "New York", "Miami", visited)

        assert dfs.find_route(sample_graph, "New York", "Calgary", visited) is None

    def test_kept_table_after_inserts(self, dfs, make_graph):
        """A reset table still covers edges inserted since it was created."""
        graph = make_graph([("A", "B", 1)])
        visited = graph.new_visitation()
        assert dfs.find_route(graph, "A", "D", visited) is None

        graph.insert("A", "C", 2)
        graph.insert("C", "D", 3)
        visited.reset()
        path = dfs.find_route(graph, "A", "D", visited)

        assert path.route_cities == ["A", "C", "D"]
        assert path.total_weight == 5


class TestDepthFirstOrdering:
    """Insertion order decides which path is found."""

    def test_first_inserted_branch_wins(self, dfs, diamond_graph):
        """A -> B is inserted before A -> C."""
        path = dfs.find_route(diamond_graph, "A", "Z")

        assert path.route_cities == ["A", "B", "Z"]
        assert path.total_weight == 6

    def test_reversed_insertion_order(self, dfs, make_graph):
        """Swapping the insertion order swaps the path."""
        graph = make_graph(
            [
                ("A", "C", 7),
                ("A", "B", 5),
                ("B", "Z", 1),
                ("C", "Z", 1),
            ]
        )
        path = dfs.find_route(graph, "A", "Z")

        assert path.route_cities == ["A", "C", "Z"]
        assert path.total_weight == 8

    def test_not_cheapest(self, dfs, make_graph):
        """The first path found is returned even when a cheaper one exists."""
        graph = make_graph(
            [
                ("A", "B", 100),
                ("A", "Z", 1),
                ("B", "Z", 100),
            ]
        )
        # Direct edge found first at A
        assert dfs.find_route(graph, "A", "Z").total_weight == 1

        graph = make_graph(
            [
                ("A", "B", 100),
                ("A", "C", 1),
                ("B", "Z", 100),
                ("C", "Z", 1),
            ]
        )
        assert dfs.find_route(graph, "A", "Z").total_weight == 200

    def test_zero_weight_direct_edge_not_an_arrival(self, dfs, make_graph):
        """A zero-weight direct edge does not count as reaching the target."""
        graph = make_graph(
            [
                ("A", "Z", 0),
                ("A", "B", 2),
                ("B", "Z", 3),
            ]
        )
        path = dfs.find_route(graph, "A", "Z")

        assert path.route_cities == ["A", "B", "Z"]
        assert path.total_weight == 5

    def test_long_chain(self, dfs, make_graph):
        """Deep paths are found without recursion limits."""
        names = [f"N{i}" for i in range(500)]
        edges = [(a, b, 1) for a, b in zip(names, names[1:])]
        graph = make_graph(edges, capacity=len(edges))

        path = dfs.find_route(graph, "N0", "N499")

        assert path.num_segments == 499
        assert path.total_weight == 499


# =============================================================================
# LOOKAHEAD TESTS
# =============================================================================


class TestLookahead:
    """Tests for the two-hop lookahead finder."""

    def test_method_and_name(self, lookahead):
        """Finder identifies itself."""
        assert lookahead.method is SearchMethod.LOOKAHEAD
        assert lookahead.name == "One-Step Lookahead"

    def test_new_york_to_los_angeles(self, lookahead, sample_graph):
        """Chicago has no edge to LA, Toronto does."""
        path = lookahead.find_route(sample_graph, "New York", "Los Angeles")

        assert_valid_path(path, "New York", "Los Angeles")
        assert path.route_cities == ["New York", "Toronto", "Los Angeles"]
        assert path.total_weight == 2600

    def test_ignores_direct_edge(self, lookahead, sample_graph):
        """Only two-hop paths are produced, even with a direct edge."""
        path = lookahead.find_route(sample_graph, "New York", "Chicago")

        assert path.route_cities == ["New York", "Toronto", "Chicago"]
        assert path.total_weight == 1300

    def test_third_departure(self, lookahead, sample_graph):
        """Departures are tried in insertion order until one connects."""
        path = lookahead.find_route(sample_graph, "New York", "Urbana")

        assert path.route_cities == ["New York", "Denver", "Urbana"]
        assert path.total_weight == 2900

    def test_exhausted_departures_return_none(self, lookahead, sample_graph):
        """No intermediate connects: the loop ends with no route."""
        visited = sample_graph.new_visitation()

        assert lookahead.find_route(sample_graph, "Denver", "Calgary", visited) is None
        # Only Denver's departures were claimed
        assert visited.visited_indices() == [7, 8, 10]

    def test_no_departures(self, lookahead, sample_graph):
        """A location without departures returns None immediately."""
        assert lookahead.find_route(sample_graph, "Los Angeles", "Denver") is None

    def test_three_hop_target_not_found(self, lookahead, sample_graph):
        """Targets more than two hops away are out of reach."""
        assert lookahead.find_route(sample_graph, "Chicago", "Los Angeles") is not None
        assert lookahead.find_route(sample_graph, "New York", "Houston") is not None
        assert lookahead.find_route(sample_graph, "Toronto", "Houston") is None

    def test_zero_weight_intermediate_skipped(self, lookahead, make_graph):
        """Zero-weight departures are not used as the first hop."""
        graph = make_graph([("A", "B", 0), ("B", "C", 5)])
        assert lookahead.find_route(graph, "A", "C") is None

    def test_zero_weight_second_hop_skipped(self, lookahead, make_graph):
        """A zero-weight onward edge does not connect."""
        graph = make_graph([("A", "B", 3), ("B", "C", 0), ("A", "D", 1), ("D", "C", 2)])
        path = lookahead.find_route(graph, "A", "C")

        assert path.route_cities == ["A", "D", "C"]

    def test_repeated_searches_identical(self, lookahead, sample_graph):
        """Each call starts from a clean visitation table."""
        first = lookahead.find_route(sample_graph, "New York", "Los Angeles")
        second = lookahead.find_route(sample_graph, "New York", "Los Angeles")
        assert first == second

    def test_kept_table_after_inserts(self, lookahead, make_graph):
        """A reset table still covers edges inserted since it was created."""
        graph = make_graph([("A", "B", 1)])
        visited = graph.new_visitation()
        assert lookahead.find_route(graph, "A", "D", visited) is None

        graph.insert("A", "C", 2)
        graph.insert("C", "D", 3)
        visited.reset()

        assert lookahead.find_route(graph, "A", "D", visited).route_cities == ["A", "C", "D"]
