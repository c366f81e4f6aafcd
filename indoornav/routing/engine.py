"""RoutingEngine — main entry point for room-to-room routing.

Usage::

    from indoornav.routing import RoutingEngine

    engine = RoutingEngine(floor_plan)
    steps = engine.find_optimal_path("room-1", "library")
"""

from __future__ import annotations

import logging
import math
import threading
from dataclasses import dataclass
from datetime import datetime

from indoornav import config
from indoornav.models.floorplan import FloorPlan, Gate, Path, Room
from indoornav.models.route import NavigationNode, Route, RouteStep
from indoornav.routing.access import has_time_rule, is_gate_available, is_path_available
from indoornav.routing.dijkstra import EdgeFilter, shortest_path
from indoornav.routing.errors import GateNotFound, NoPathFound, RoomNotFound, RoutingError
from indoornav.routing.graph import RoutingGraph, build_graph
from indoornav.search import search_rooms

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class _Snapshot:
    """Floor plan and the graph built from it, swapped as one unit."""

    floor_plan: FloorPlan
    graph: RoutingGraph


class RoutingEngine:
    """Compute routes between rooms of a single floor plan.

    The floor plan is read-only for the engine's lifetime; call
    :meth:`update_graph` to replace it.  Each query reads one snapshot, so
    a concurrent rebuild never mixes old and new graph state.

    Parameters
    ----------
    floor_plan:
        The building description to route over.
    walking_speed:
        Distance units per minute used for time estimates.
    time_filtered:
        When True, queries without an explicit time are evaluated against
        the current local time.  When False (default) gate and path time
        rules are ignored unless a query passes ``at``.
    """

    def __init__(
        self,
        floor_plan: FloorPlan,
        *,
        walking_speed: float = config.WALKING_SPEED_UNITS_PER_MINUTE,
        time_filtered: bool = False,
    ) -> None:
        if walking_speed <= 0:
            raise ValueError("walking_speed must be positive")
        self.walking_speed = walking_speed
        self.time_filtered = time_filtered
        self._write_lock = threading.Lock()
        self._snapshot = _Snapshot(floor_plan, build_graph(floor_plan))

    @property
    def floor_plan(self) -> FloorPlan:
        return self._snapshot.floor_plan

    @property
    def graph(self) -> RoutingGraph:
        return self._snapshot.graph

    def update_graph(self, floor_plan: FloorPlan) -> None:
        """Replace the floor plan and rebuild the graph from scratch.

        Rebuilds are serialised: concurrent calls take effect in the order
        they acquire the lock, and the last one to do so wins.  Queries
        never wait on the lock; they keep the snapshot they started with.
        """
        with self._write_lock:
            snapshot = _Snapshot(floor_plan, build_graph(floor_plan))
            self._snapshot = snapshot
        logger.info(
            "Rebuilt routing graph for %s (%d nodes)",
            floor_plan.id, snapshot.graph.node_count,
        )

    # ------------------------------------------------------------------
    # Routing
    # ------------------------------------------------------------------

    def find_optimal_path(
        self,
        from_room_id: str,
        to_room_id: str,
        at: datetime | None = None,
    ) -> list[RouteStep]:
        """Find the shortest route between two rooms.

        Parameters
        ----------
        from_room_id, to_room_id:
            Room ids.  The first gate of each room is used for routing.
        at:
            Optional query time.  When given, closed or time-restricted
            gates and paths are excluded from the search.

        Returns
        -------
        list[RouteStep]
            Departure step first (distance 0), one step per traversed
            path, arrival step last.

        Raises
        ------
        RoomNotFound, GateNotFound, NoPathFound
        """
        snap = self._snapshot
        plan = snap.floor_plan

        from_room = plan.get_room(from_room_id)
        if from_room is None:
            raise RoomNotFound(from_room_id)
        to_room = plan.get_room(to_room_id)
        if to_room is None:
            raise RoomNotFound(to_room_id)

        from_gate = _primary_gate(plan, from_room)
        to_gate = _primary_gate(plan, to_room)

        departure = RouteStep(
            from_node=_room_node(from_room),
            to_node=_gate_node(from_gate),
            instruction=f"Start at {from_room.name}",
            room_id=from_room.id,
            gate_id=from_gate.id,
        )
        if from_room.id == to_room.id:
            return [departure]

        if at is None and self.time_filtered:
            at = datetime.now()

        edge_filter: EdgeFilter | None = None
        if at is not None:
            if not is_gate_available(from_gate, at, "out"):
                logger.debug("Source gate %s unavailable at %s", from_gate.id, at)
                raise NoPathFound(from_room_id, to_room_id)
            edge_filter = _time_filter(snap, to_gate.id, at)

        result = shortest_path(
            snap.graph.adjacency, from_gate.id, to_gate.id, edge_filter,
            nodes=snap.graph.nodes,
        )
        if not result.found:
            raise NoPathFound(from_room_id, to_room_id)

        steps = [departure]
        cumulative = 0.0
        hops = list(zip(result.gates, result.gates[1:]))
        for index, (prev_id, next_id) in enumerate(hops):
            path = snap.graph.edge_between(prev_id, next_id)
            if path is None:
                # Adjacency and edge index are built together
                raise NoPathFound(from_room_id, to_room_id)
            is_last = index == len(hops) - 1
            cumulative += path.distance
            next_gate = plan.get_gate(next_id)
            steps.append(RouteStep(
                from_node=_node(plan, prev_id),
                to_node=_room_node(to_room) if is_last else _node(plan, next_id),
                path=path,
                instruction=_instruction(plan, path, next_id, next_gate, to_room if is_last else None),
                distance=path.distance,
                cumulative_distance=cumulative,
                estimated_time=path.distance / self.walking_speed,
                room_id=to_room.id if is_last else None,
                gate_id=next_id,
            ))

        if not hops:
            # Two rooms sharing one primary gate
            steps.append(RouteStep(
                from_node=_gate_node(to_gate),
                to_node=_room_node(to_room),
                instruction=f"Arrive at {to_room.name}",
                room_id=to_room.id,
                gate_id=to_gate.id,
            ))

        logger.debug(
            "Route %s -> %s: %d steps, distance %.1f",
            from_room_id, to_room_id, len(steps), cumulative,
        )
        return steps

    def plan_route(
        self,
        from_room_id: str,
        to_room_id: str,
        at: datetime | None = None,
    ) -> Route:
        """Like :meth:`find_optimal_path` but wrapped in a :class:`Route`."""
        steps = self.find_optimal_path(from_room_id, to_room_id, at)
        warnings: list[str] = []
        if not self.is_path_accessible(steps):
            warnings.append("Route passes a closed gate")
        plan = self.floor_plan
        for step in steps:
            gate = plan.get_gate(step.gate_id)
            if gate is not None and has_time_rule(gate):
                warnings.append(f"{gate.name or gate.id} has time restrictions")
            if step.path is not None and has_time_rule(step.path):
                warnings.append(f"Path {step.path.id} has time restrictions")
        return Route.from_steps(from_room_id, to_room_id, steps, warnings)

    def find_alternative_paths(
        self,
        from_room_id: str,
        to_room_id: str,
    ) -> list[list[RouteStep]]:
        """Return candidate routes; currently only the optimal one.

        k-shortest-paths is not implemented.  Returns an empty list when
        no route exists.
        """
        alternatives: list[list[RouteStep]] = []
        try:
            alternatives.append(self.find_optimal_path(from_room_id, to_room_id))
        except RoutingError as exc:
            logger.info("No alternatives for %s -> %s: %s", from_room_id, to_room_id, exc)
        return alternatives

    # ------------------------------------------------------------------
    # Route helpers
    # ------------------------------------------------------------------

    def calculate_total_distance(self, steps: list[RouteStep]) -> float:
        return sum(step.distance for step in steps)

    def get_estimated_time(self, steps: list[RouteStep]) -> int:
        """Whole minutes to walk the route, rounded up."""
        return math.ceil(self.calculate_total_distance(steps) / self.walking_speed)

    def is_path_accessible(self, steps: list[RouteStep]) -> bool:
        """True if every step's gate exists and is open."""
        plan = self.floor_plan
        for step in steps:
            gate = plan.get_gate(step.gate_id)
            if gate is None or not gate.is_open:
                return False
        return True

    def get_navigation_instructions(self, steps: list[RouteStep]) -> list[str]:
        """Short turn-by-turn summary for display."""
        if not steps:
            return []
        start = self._room_name(steps[0].room_id)
        end = self._room_name(steps[-1].room_id)
        instructions = [f"Start at {start}"]
        if len(steps) > 1:
            instructions.append("Head to the main corridor")
        instructions.append(f"Arrive at {end}")
        return instructions

    # ------------------------------------------------------------------
    # Room lookups
    # ------------------------------------------------------------------

    def search_rooms_by_name(self, query: str) -> list[Room]:
        return search_rooms(self.floor_plan.rooms, query)

    def get_room_by_id(self, room_id: str) -> Room | None:
        return self.floor_plan.get_room(room_id)

    def get_rooms_by_type(self, room_type: str) -> list[Room]:
        return [r for r in self.floor_plan.rooms if r.type == room_type]

    def _room_name(self, room_id: str | None) -> str:
        room = self.floor_plan.get_room(room_id) if room_id else None
        return room.name if room else (room_id or "")


def _primary_gate(plan: FloorPlan, room: Room) -> Gate:
    gate_id = room.gates[config.PRIMARY_GATE_INDEX]
    gate = plan.get_gate(gate_id)
    if gate is None:
        raise GateNotFound(room.id, gate_id)
    return gate


def _time_filter(snap: _Snapshot, target_gate_id: str, at: datetime) -> EdgeFilter:
    """Edge predicate applying gate and path availability at *at*."""
    gates: dict[str, Gate] = {}
    for gate in snap.floor_plan.gates:
        gates.setdefault(gate.id, gate)

    def allowed(from_id: str, to_id: str) -> bool:
        path = snap.graph.edge_between(from_id, to_id)
        if path is not None and not is_path_available(path, at):
            return False
        gate = gates.get(to_id)
        if gate is None:
            return True
        direction = "in" if to_id == target_gate_id else None
        return is_gate_available(gate, at, direction)

    return allowed


def _room_node(room: Room) -> NavigationNode:
    cx, cy = room.bounding_box.center
    return NavigationNode(id=room.id, type="room", x=cx, y=cy)


def _gate_node(gate: Gate) -> NavigationNode:
    return NavigationNode(id=gate.id, type="gate", x=gate.coordinates.x, y=gate.coordinates.y)


def _node(plan: FloorPlan, node_id: str) -> NavigationNode:
    gate = plan.get_gate(node_id)
    if gate is not None:
        return _gate_node(gate)
    area = next((a for a in plan.special_areas if a.id == node_id), None)
    if area is not None and area.coordinates is not None:
        cx, cy = area.coordinates.bounding_box().center
        return NavigationNode(id=node_id, type="area", x=cx, y=cy)
    return NavigationNode(id=node_id, type="area")


def _instruction(
    plan: FloorPlan,
    path: Path,
    node_id: str,
    gate: Gate | None,
    arrival: Room | None,
) -> str:
    label = (gate.name or gate.id) if gate is not None else _area_name(plan, node_id)
    if arrival is not None:
        text = f"Arrive at {arrival.name}"
    elif path.type == "stairs":
        text = f"Take the stairs to {label}"
    elif path.type == "fast-travel":
        text = f"Cut through {label}"
    else:
        text = f"Continue to {label}"
    return text + _restriction_note(path, gate)


def _area_name(plan: FloorPlan, area_id: str) -> str:
    area = next((a for a in plan.special_areas if a.id == area_id), None)
    return area.name if area is not None and area.name else area_id


def _restriction_note(path: Path, gate: Gate | None) -> str:
    for item in (gate, path):
        if item is not None and item.access_rules is not None and item.access_rules.restricted_after:
            return f" (restricted after {item.access_rules.restricted_after})"
    if (gate is not None and has_time_rule(gate)) or has_time_rule(path):
        return " (restricted hours)"
    return ""
