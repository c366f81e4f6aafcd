"""Reference rules: every id a floor plan mentions must resolve."""

from __future__ import annotations

from collections import Counter

from indoornav.models.floorplan import FloorPlan
from indoornav.validation.rules.base import ValidationIssue, ValidationRule


class RoomGatesResolve(ValidationRule):
    name = "references.room_gates"
    description = "Room gate ids must resolve to declared gates."

    def check(self, floor_plan: FloorPlan) -> list[ValidationIssue]:
        gate_ids = {g.id for g in floor_plan.gates}
        return [
            self.issue(
                f"Room {room.id} references unknown gate {gate_id}",
                item_id=room.id,
                suggestion="Declare the gate or fix the room's gate list.",
            )
            for room in floor_plan.rooms
            for gate_id in room.gates
            if gate_id not in gate_ids
        ]


class PathEndpointsResolve(ValidationRule):
    name = "references.path_endpoints"
    description = "Path from/to must resolve to a gate or special area."

    def check(self, floor_plan: FloorPlan) -> list[ValidationIssue]:
        known = {g.id for g in floor_plan.gates} | floor_plan.special_area_ids()
        return [
            self.issue(f"Path {path.id} references unknown node {endpoint}", item_id=path.id)
            for path in floor_plan.paths
            for endpoint in (path.from_, path.to)
            if endpoint not in known
        ]


class UniqueIds(ValidationRule):
    """Lookups return the first declaration, so later duplicates are dead."""

    name = "references.unique_ids"
    description = "Ids must not repeat within rooms, gates or paths."

    def check(self, floor_plan: FloorPlan) -> list[ValidationIssue]:
        tables = (
            ("room", floor_plan.rooms),
            ("gate", floor_plan.gates),
            ("path", floor_plan.paths),
        )
        issues: list[ValidationIssue] = []
        for kind, items in tables:
            counts = Counter(item.id for item in items)
            for item_id in sorted(i for i, n in counts.items() if n > 1):
                issues.append(self.issue(
                    f"Duplicate {kind} id {item_id} ({counts[item_id]} times)",
                    item_id=item_id,
                    suggestion="Only the first declaration is used for lookups.",
                ))
        return issues


REFERENCE_RULES: tuple[type[ValidationRule], ...] = (
    RoomGatesResolve,
    PathEndpointsResolve,
    UniqueIds,
)
