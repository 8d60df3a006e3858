"""
End-to-end path queries: WaypointGraph -> DijkstraPathfinder.
"""

import logging
import math

import pytest

from errors import UnknownNodeError
from nodes import WaypointNode
from pathfinder import DijkstraPathfinder
from waypoint_graph import WaypointGraph


@pytest.fixture
def triangle():
    """A-B (1), B-C (2), A-C (10) plus an isolated D."""
    g = WaypointGraph()
    a, b, c, d = (WaypointNode(i) for i in range(4))
    for n in (a, b, c, d):
        g.add_waypoint(n)
    g.add_connection(a, b, 1.0)
    g.add_connection(b, c, 2.0)
    g.add_connection(a, c, 10.0)
    return g, (a, b, c, d)


def test_shortest_path_beats_direct_edge(triangle):
    g, (a, b, c, _) = triangle
    finder = DijkstraPathfinder(g)

    assert finder.get_path(a, c) == [a, b, c]
    assert finder.find_path(0, 2) == [0, 1, 2]

    route = finder.plan_route(0, 2)
    assert route.reached
    assert route.cost == 3.0
    assert route.hops == 2


def test_path_to_self(triangle):
    g, (a, *_) = triangle
    finder = DijkstraPathfinder(g)

    assert finder.find_path(0, 0) == [0]
    assert finder.get_path(a, a) == [a]
    assert finder.plan_route(0, 0).cost == 0.0


def test_unreachable_target_returns_start_only(triangle, caplog):
    g, (a, _, _, d) = triangle
    finder = DijkstraPathfinder(g)

    with caplog.at_level(logging.WARNING, logger="pathfinder"):
        path = finder.get_path(a, d)

    assert path == [a]
    assert path[-1] is not d
    assert "No path found" in caplog.text

    route = finder.plan_route(0, 3)
    assert not route.reached
    assert math.isinf(route.cost)
    assert route.ids == (0,)


def test_query_sees_graph_mutations(triangle):
    g, (a, b, c, d) = triangle
    finder = DijkstraPathfinder(g)

    g.add_connection(c, d, 1.0)
    assert finder.find_path(0, 3) == [0, 1, 2, 3]

    g.remove_waypoint(b)
    assert finder.find_path(0, 3) == [0, 2, 3]
    assert finder.plan_route(0, 3).cost == 11.0


def test_sparse_ids():
    g = WaypointGraph()
    n3, n10, n7 = WaypointNode(3), WaypointNode(10), WaypointNode(7)
    for n in (n3, n10, n7):
        g.add_waypoint(n)
    g.add_connection(n3, n7, 1.5)
    g.add_connection(n7, n10, 1.5)

    assert DijkstraPathfinder(g).find_path(10, 3) == [10, 7, 3]


def test_unknown_ids_rejected(triangle):
    g, _ = triangle
    finder = DijkstraPathfinder(g)

    with pytest.raises(UnknownNodeError):
        finder.find_path(0, 9)
    with pytest.raises(UnknownNodeError):
        finder.find_path(9, 0)


def test_returned_route_unaffected_by_later_mutation(triangle):
    g, (a, b, c, _) = triangle
    finder = DijkstraPathfinder(g)

    route = finder.plan_route(0, 2)
    g.remove_waypoint(b)

    assert route.ids == (0, 1, 2)
    assert route.cost == 3.0
    assert finder.plan_route(0, 2).cost == 10.0
