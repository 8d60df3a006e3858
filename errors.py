"""
Error taxonomy for waypoint graphs and path queries.

All errors are raised before any mutation happens, so a failed call leaves the
graph exactly as it was.
"""


class WaypointError(Exception):
    """Base class for every error raised by this package."""


class DuplicateIdentifierError(WaypointError, ValueError):
    """A waypoint with the same id is already a member of the graph."""

    def __init__(self, waypoint_id: int) -> None:
        super().__init__(f"Waypoint id {waypoint_id} is already in the graph.")
        self.waypoint_id = waypoint_id


class UnknownNodeError(WaypointError, LookupError):
    """A waypoint (or waypoint id) is not a current member of the graph."""

    def __init__(self, waypoint_id: int) -> None:
        super().__init__(f"Waypoint {waypoint_id} does not exist in the graph.")
        self.waypoint_id = waypoint_id


class TableFormatError(WaypointError, ValueError):
    """A row of a waypoint table could not be parsed."""

    def __init__(self, row_number: int, reason: str) -> None:
        super().__init__(f"Row {row_number}: {reason}")
        self.row_number = row_number
        self.reason = reason
