"""
Dense-matrix DijkstraEngine implementation.

Runs the classic O(V^2) single-source shortest path over an adjacency
matrix, which suits small waypoint graphs (tens to low hundreds of nodes).
"""

from typing import List, Tuple
import math

import numpy as np

from algorithms import ShortestPathEngine
from config import NO_PARENT


class DenseDijkstraEngine(ShortestPathEngine):
    """
    Single-source Dijkstra over an adjacency matrix.

    Zero cells mean "no edge". Among unfinalized vertices with equal best
    distance, the lowest index is finalized first, so results are
    deterministic for a given matrix.

    Complexity:
        O(V^2) time, O(V) extra space.
    """

    def shortest_path_costs(self, matrix: np.ndarray, source: int) -> np.ndarray:
        dist, _ = self.shortest_paths(matrix, source)
        return dist

    def shortest_paths(
        self, matrix: np.ndarray, source: int
    ) -> Tuple[np.ndarray, np.ndarray]:
        """
        Dijkstra variant that also records parents for path reconstruction.

        Every round finalizes the cheapest vertex not yet finalized, then
        relaxes each positive-weight edge leaving it. The loop runs
        n_vertices - 1 times whatever the source is; vertices that are never
        reached keep math.inf and NO_PARENT.
        """
        graph = np.asarray(matrix, dtype=float)
        n_vertices = graph.shape[0]
        if not 0 <= source < n_vertices:
            raise IndexError(f"Source {source} outside matrix of size {n_vertices}")

        dist = np.full(n_vertices, math.inf)
        parents = np.full(n_vertices, NO_PARENT, dtype=int)
        finalized = np.zeros(n_vertices, dtype=bool)
        dist[source] = 0.0

        for _ in range(n_vertices - 1):
            # argmin returns the first minimum, i.e. the lowest index on ties
            candidates = np.flatnonzero(~finalized)
            nearest = int(candidates[np.argmin(dist[candidates])])
            finalized[nearest] = True

            edges = graph[nearest]
            alt = dist[nearest] + edges
            improved = (edges > 0) & (alt < dist)
            dist[improved] = alt[improved]
            parents[improved] = nearest

        return dist, parents

    def reconstruct_path(
        self, parents: np.ndarray, source: int, target: int
    ) -> List[int]:
        """
        Walk parents back from target, then reverse and prepend the source.

        An unreachable target has no parent, so the walk stops immediately
        and the result is just [source].
        """
        path: List[int] = []
        current = target
        while parents[current] != NO_PARENT:
            path.append(current)
            current = int(parents[current])

        path.append(source)
        path.reverse()
        return path
