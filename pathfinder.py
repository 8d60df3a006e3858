"""
Path queries over a WaypointGraph.

The pathfinder reads a fresh adjacency-matrix snapshot on every query, so
graph mutations between queries are always visible and a running query is
never affected by later mutations.
"""

from typing import List, Optional
import logging
import math

from algorithms import ShortestPathEngine
from dijkstra_engine import DenseDijkstraEngine
from nodes import WaypointNode
from routing import Route
from waypoint_graph import WaypointGraph

logger = logging.getLogger(__name__)


class DijkstraPathfinder:
    """
    Answers "how do I get from waypoint A to waypoint B".

    ``get_path`` / ``find_path`` keep the plain list contract: when the end
    is unreachable the result is just ``[start]``, and callers check whether
    the last element is the requested end. ``plan_route`` returns a Route
    carrying the cost and an explicit ``reached`` flag instead.
    """

    def __init__(
        self, graph: WaypointGraph, engine: Optional[ShortestPathEngine] = None
    ) -> None:
        self._graph = graph
        self._engine = engine or DenseDijkstraEngine()

    @property
    def graph(self) -> WaypointGraph:
        return self._graph

    def get_path(
        self, start_node: WaypointNode, end_node: WaypointNode
    ) -> List[WaypointNode]:
        return list(self.plan_route(start_node.id, end_node.id).waypoints)

    def find_path(self, start_id: int, end_id: int) -> List[int]:
        """Ordered waypoint ids from start_id to end_id (or [start_id])."""
        return list(self.plan_route(start_id, end_id).ids)

    def plan_route(self, start_id: int, end_id: int) -> Route:
        """
        Compute the shortest route between two member ids.

        Raises UnknownNodeError if either id is not in the graph.
        """
        start = self._graph.waypoint(start_id)
        self._graph.waypoint(end_id)

        matrix = self._graph.adjacency_matrix()
        dist, parents = self._engine.shortest_paths(matrix, start_id)
        path_ids = self._engine.reconstruct_path(parents, start_id, end_id)

        # path_ids[0] is start_id; resolve the rest through the graph
        waypoints = (start,) + tuple(
            self._graph.waypoint(node_id) for node_id in path_ids[1:]
        )
        reached = path_ids[-1] == end_id
        cost = float(dist[end_id]) if reached else math.inf

        if reached:
            logger.info(
                "Shortest path from %d to %d: %s (cost %.3f)",
                start_id,
                end_id,
                path_ids,
                cost,
            )
        else:
            logger.warning("No path found between %d and %d.", start_id, end_id)

        return Route(start_id=start_id, end_id=end_id, waypoints=waypoints, cost=cost)
