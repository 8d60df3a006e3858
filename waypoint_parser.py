"""
Waypoint table parser.

Each row has three columns: the waypoint id, its bracketed connection ids and
the bracketed distances, positionally paired::

    0;[1,2];[2.5,4.0]
    1;[0];[2.5]

Every id mentioned (as a source or as a connection target) becomes a
waypoint. Links are written one-way on the source node only; a table that
wants a bidirectional edge must list both directions.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Sequence
import csv
import logging
import math

from config import LIST_SEPARATOR, TABLE_DELIMITER, PathfindingConfig
from errors import TableFormatError
from nodes import WaypointNode
from waypoint_graph import WaypointGraph

logger = logging.getLogger(__name__)


def parse_table(rows: Iterable[str], delimiter: str = TABLE_DELIMITER) -> WaypointGraph:
    """Build a WaypointGraph from raw text rows."""
    return _build_graph(
        (row.strip().split(delimiter) for row in rows if row.strip()),
    )


def load_table(path: Path, delimiter: str = TABLE_DELIMITER) -> WaypointGraph:
    """Read a delimiter-separated waypoint table from disk."""
    path = Path(path)
    with path.open(newline="") as f:
        reader = csv.reader(f, delimiter=delimiter)
        graph = _build_graph(
            [cell.strip() for cell in row]
            for row in reader
            if any(cell.strip() for cell in row)
        )
    logger.info("Loaded %d waypoints from %s", len(graph), path)
    return graph


def _build_graph(rows: Iterable[Sequence[str]]) -> WaypointGraph:
    graph = WaypointGraph()
    links = 0

    for row_number, columns in enumerate(rows, start=1):
        if len(columns) != 3:
            raise TableFormatError(
                row_number, f"expected 3 columns, got {len(columns)}"
            )

        waypoint_id = _parse_id(columns[0], row_number)
        connection_ids = [
            _parse_id(v, row_number) for v in _parse_list(columns[1], row_number)
        ]
        distances = [
            _parse_distance(v, row_number)
            for v in _parse_list(columns[2], row_number)
        ]
        if len(connection_ids) != len(distances):
            raise TableFormatError(
                row_number,
                f"{len(connection_ids)} connections but {len(distances)} distances",
            )

        node = _get_or_add(graph, waypoint_id)
        for connection_id, distance in zip(connection_ids, distances):
            node.add_connection(_get_or_add(graph, connection_id), distance)
            links += 1

    logger.debug("Parsed %d waypoints and %d one-way links", len(graph), links)
    return graph


def _get_or_add(graph: WaypointGraph, waypoint_id: int) -> WaypointNode:
    if waypoint_id in graph:
        return graph.waypoint(waypoint_id)
    node = WaypointNode(waypoint_id)
    graph.add_waypoint(node)
    return node


def _parse_list(cell: str, row_number: int) -> List[str]:
    cell = cell.strip()
    if len(cell) < 2 or cell[0] != "[" or cell[-1] != "]":
        raise TableFormatError(row_number, f"expected a bracketed list, got {cell!r}")
    inner = cell[1:-1].strip()
    if not inner:
        return []
    return [item.strip() for item in inner.split(LIST_SEPARATOR)]


def _parse_id(text: str, row_number: int) -> int:
    try:
        value = int(text)
    except ValueError:
        raise TableFormatError(row_number, f"invalid waypoint id {text!r}") from None
    if value < 0:
        raise TableFormatError(row_number, f"negative waypoint id {value}")
    return value


def _parse_distance(text: str, row_number: int) -> float:
    try:
        value = float(text)
    except ValueError:
        raise TableFormatError(row_number, f"invalid distance {text!r}") from None
    if not (math.isfinite(value) and value >= 0):
        raise TableFormatError(
            row_number, f"distance must be finite and non-negative, got {text!r}"
        )
    return value


def load_table_with_config(path: Path, cfg: PathfindingConfig) -> WaypointGraph:
    """Read a waypoint table using the delimiter from a loaded config."""
    return load_table(path, delimiter=cfg.delimiter)
