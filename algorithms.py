"""
Algorithm interfaces for pathfinding.

Keeps the shortest-path computation separate from graph ownership and from
the query surface. Engines work on an adjacency-matrix snapshot, never on a
live graph.
"""

from abc import ABC, abstractmethod
from typing import List, Tuple

import numpy as np


class ShortestPathEngine(ABC):
    """
    Interface for single-source shortest-path computation over a dense matrix.
    """

    @abstractmethod
    def shortest_path_costs(self, matrix: np.ndarray, source: int) -> np.ndarray:
        """
        Compute shortest-path costs from source to every vertex index.

        Returns:
            Array of length len(matrix); unreachable vertices hold math.inf.
        """
        raise NotImplementedError

    @abstractmethod
    def shortest_paths(
        self, matrix: np.ndarray, source: int
    ) -> Tuple[np.ndarray, np.ndarray]:
        """
        Compute shortest-path costs plus the parent of each vertex.

        Returns:
            (dist, parents) where parents[v] is the predecessor of v on its
            shortest path, or NO_PARENT for the source and unreached vertices.
        """
        raise NotImplementedError

    @abstractmethod
    def reconstruct_path(
        self, parents: np.ndarray, source: int, target: int
    ) -> List[int]:
        """
        Turn a parent array into the ordered vertex list source -> target.
        """
        raise NotImplementedError
