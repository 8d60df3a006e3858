"""
Waypoint node for pathfinding graphs.

A node knows its own id and its outgoing links. Links are keyed by the
neighbour's id rather than by the neighbour object: the owning graph is the
only place that holds node objects, so removing a node never leaves a live
reference to it behind.
"""

from __future__ import annotations

from typing import Dict, Mapping, Union


class WaypointNode:
    """
    A navigable point with weighted one-way links to other waypoints.

    Two matching links (a -> b and b -> a) model one undirected edge; the
    graph keeps them paired when connections go through
    ``WaypointGraph.add_connection``.
    """

    def __init__(self, node_id: int) -> None:
        if isinstance(node_id, bool) or not isinstance(node_id, int):
            raise ValueError(f"Waypoint id must be an int, got {node_id!r}")
        if node_id < 0:
            raise ValueError(f"Waypoint id must be non-negative, got {node_id}")
        self._id = node_id
        self._connections: Dict[int, float] = {}

    @property
    def id(self) -> int:
        """Stable identifier; read-only because graphs index nodes by it."""
        return self._id

    @property
    def connections(self) -> Mapping[int, float]:
        """Neighbour id -> distance. Returns a copy."""
        return dict(self._connections)

    @property
    def connection_ids(self) -> list[int]:
        return list(self._connections)

    @property
    def distances(self) -> list[float]:
        return list(self._connections.values())

    # --- Mutation (the owning graph keeps pairs consistent) ------------------

    def add_connection(self, node: Union[WaypointNode, int], distance: float) -> None:
        """Add or overwrite the outgoing link to ``node``."""
        self._connections[_node_id(node)] = float(distance)

    def remove_connection(self, node: Union[WaypointNode, int]) -> None:
        """Drop the outgoing link to ``node``; no-op if there is none."""
        self._connections.pop(_node_id(node), None)

    def clear_connections(self) -> None:
        """Drop every outgoing link."""
        self._connections.clear()

    # --- Queries -------------------------------------------------------------

    def is_connected_to(self, node: Union[WaypointNode, int]) -> bool:
        return _node_id(node) in self._connections

    def distance_to(self, node: Union[WaypointNode, int]) -> float:
        """
        Distance of the outgoing link to ``node``.

        Raises KeyError if there is no such link.
        """
        return self._connections[_node_id(node)]

    def __repr__(self) -> str:
        return f"WaypointNode(id={self._id}, connections={self._connections!r})"


def _node_id(node: Union[WaypointNode, int]) -> int:
    return node.id if isinstance(node, WaypointNode) else node
