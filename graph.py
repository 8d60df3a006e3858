"""
Weighted waypoint graph abstraction.

Nodes are WaypointNode instances identified by integer ids.
Links are directed: u -> v with float weight; an undirected edge is a pair.
"""

from abc import ABC, abstractmethod
from typing import Iterable, Mapping

import numpy as np

from nodes import WaypointNode


class Graph(ABC):
    """Weighted graph over WaypointNode objects."""

    @abstractmethod
    def nodes(self) -> Iterable[WaypointNode]:
        """Return all member nodes in insertion order."""
        raise NotImplementedError

    @abstractmethod
    def outgoing(self, node_id: int) -> Mapping[int, float]:
        """
        Outgoing neighbours and link weights for a given node id.

        Returns: dict[int, float]
        """
        raise NotImplementedError

    @abstractmethod
    def adjacency_matrix(self) -> np.ndarray:
        """
        Dense projection of the graph, indexed by node id.

        Cell [i, j] holds the weight of i -> j, or 0 when there is no link.
        Recomputed on every call.
        """
        raise NotImplementedError
