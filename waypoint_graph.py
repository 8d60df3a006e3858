"""
Concrete waypoint graph.

Implements the Graph interface over an ordered list of owned WaypointNode
objects. Connections are kept as matched one-way pairs.
"""

from typing import Dict, Iterator, List, Mapping, Tuple, Union
import logging

import numpy as np

from errors import DuplicateIdentifierError, UnknownNodeError
from graph import Graph
from nodes import WaypointNode

logger = logging.getLogger(__name__)


class WaypointGraph(Graph):
    """
    Graph that exclusively owns its waypoints.

    Insertion order of the nodes is kept and exposed, but the adjacency
    matrix is indexed by node id, not by position.
    """

    def __init__(self) -> None:
        self._waypoints: List[WaypointNode] = []
        self._by_id: Dict[int, WaypointNode] = {}

    # --- Mutation API --------------------------------------------------------

    def add_waypoint(self, node: WaypointNode) -> None:
        """
        Add a node without any connections.

        Raises DuplicateIdentifierError if a node with the same id is already
        a member; the graph is left unchanged.
        """
        if node.id in self._by_id:
            raise DuplicateIdentifierError(node.id)

        self._waypoints.append(node)
        self._by_id[node.id] = node
        logger.debug("Added waypoint %d", node.id)

    def remove_waypoint(self, node: WaypointNode) -> None:
        """
        Remove a node, every connection pointing at it, and its own links.

        Removing a node that is not a member is a no-op.
        """
        if not self._is_member(node):
            return

        for other in self._waypoints:
            if other is not node:
                other.remove_connection(node.id)

        node.clear_connections()
        self._waypoints.remove(node)
        del self._by_id[node.id]
        logger.debug("Removed waypoint %d", node.id)

    def add_connection(
        self, node_a: WaypointNode, node_b: WaypointNode, distance: float
    ) -> None:
        """
        Connect two member nodes in both directions at ``distance``.

        Does nothing if both directions already exist. If only one direction
        exists, both are (re)written with ``distance``.

        Raises UnknownNodeError if either node is not a member.
        """
        for node in (node_a, node_b):
            if not self._is_member(node):
                raise UnknownNodeError(node.id)

        if node_a.is_connected_to(node_b) and node_b.is_connected_to(node_a):
            return

        node_a.add_connection(node_b, distance)
        node_b.add_connection(node_a, distance)
        logger.debug(
            "Connected waypoints %d <-> %d (%s)", node_a.id, node_b.id, distance
        )

    # --- Lookup --------------------------------------------------------------

    @property
    def waypoints(self) -> Tuple[WaypointNode, ...]:
        return tuple(self._waypoints)

    @property
    def waypoint_ids(self) -> List[int]:
        return [node.id for node in self._waypoints]

    def waypoint(self, node_id: int) -> WaypointNode:
        """Return the member with ``node_id`` or raise UnknownNodeError."""
        try:
            return self._by_id[node_id]
        except KeyError:
            raise UnknownNodeError(node_id) from None

    def __contains__(self, item: Union[WaypointNode, int]) -> bool:
        if isinstance(item, WaypointNode):
            return self._is_member(item)
        return item in self._by_id

    def __len__(self) -> int:
        return len(self._waypoints)

    def __iter__(self) -> Iterator[WaypointNode]:
        return iter(list(self._waypoints))

    def _is_member(self, node: WaypointNode) -> bool:
        return self._by_id.get(node.id) is node

    # --- Graph interface -----------------------------------------------------

    def nodes(self) -> List[WaypointNode]:
        return list(self._waypoints)

    def outgoing(self, node_id: int) -> Mapping[int, float]:
        return self.waypoint(node_id).connections  # already a copy

    def adjacency_matrix(self) -> np.ndarray:
        """
        Square float matrix sized ``max(id) + 1``.

        Ids that are not in use leave all-zero rows and columns; zero always
        means "no link". Links to ids that are not members are skipped. An
        empty graph gives a 0 x 0 matrix.
        """
        size = max(self._by_id) + 1 if self._by_id else 0
        matrix = np.zeros((size, size), dtype=float)

        for node in self._waypoints:
            for neighbor_id, distance in node.connections.items():
                if neighbor_id not in self._by_id:
                    continue
                matrix[node.id, neighbor_id] = distance

        return matrix
