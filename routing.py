"""
Route record returned by path queries.
"""

from dataclasses import dataclass
from typing import Tuple

from nodes import WaypointNode


@dataclass(frozen=True)
class Route:
    """
    Ordered waypoints from start to end plus the total distance.

    An unreachable end gives waypoints == (start,) and cost == math.inf;
    ``reached`` tells the two cases apart without inspecting the path.
    """
    start_id: int
    end_id: int
    waypoints: Tuple[WaypointNode, ...]
    cost: float

    @property
    def ids(self) -> Tuple[int, ...]:
        return tuple(node.id for node in self.waypoints)

    @property
    def reached(self) -> bool:
        return bool(self.waypoints) and self.waypoints[-1].id == self.end_id

    @property
    def hops(self) -> int:
        return max(len(self.waypoints) - 1, 0)
