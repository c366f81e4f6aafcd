"""Routing failures.

Each is terminal for a single query: the engine never returns a partial
or approximate route.
"""

from __future__ import annotations


class RoutingError(Exception):
    """Base class for all routing failures."""

    reason = "routing_error"


class RoomNotFound(RoutingError):
    """An endpoint room id is absent from the floor plan."""

    reason = "room_not_found"

    def __init__(self, room_id: str) -> None:
        super().__init__(f"Room '{room_id}' not found.")
        self.room_id = room_id


class GateNotFound(RoutingError):
    """A room's primary gate has no matching gate record."""

    reason = "gate_not_found"

    def __init__(self, room_id: str, gate_id: str) -> None:
        super().__init__(f"Gate '{gate_id}' for room '{room_id}' not found.")
        self.room_id = room_id
        self.gate_id = gate_id


class NoPathFound(RoutingError):
    """The graph search exhausted without reaching the target."""

    reason = "no_path_found"

    def __init__(self, from_room: str, to_room: str) -> None:
        super().__init__(f"No path found from '{from_room}' to '{to_room}'.")
        self.from_room = from_room
        self.to_room = to_room
