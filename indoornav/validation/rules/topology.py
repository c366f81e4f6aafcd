"""Topology rules: graph shapes that route but are probably mistakes."""

from __future__ import annotations

from collections import defaultdict

from indoornav.models.floorplan import FloorPlan
from indoornav.validation.rules.base import ValidationIssue, ValidationRule


class DuplicateEdges(ValidationRule):
    """Two paths joining the same pair of nodes; routing keeps the later one."""

    name = "topology.duplicate_edges"
    description = "At most one path should join any pair of nodes."
    severity = "warning"

    def check(self, floor_plan: FloorPlan) -> list[ValidationIssue]:
        issues: list[ValidationIssue] = []
        first_seen: dict[frozenset[str], str] = {}
        for path in floor_plan.paths:
            earlier = first_seen.get(path.endpoints)
            if earlier is not None:
                issues.append(self.issue(
                    f"Path {path.id} duplicates {earlier}",
                    item_id=path.id,
                    suggestion=f"Routing uses {path.id}; remove one of the two.",
                ))
            first_seen[path.endpoints] = path.id
        return issues


class SharedGates(ValidationRule):
    name = "topology.shared_gates"
    description = "Gates are usually owned by a single room."
    severity = "warning"

    def check(self, floor_plan: FloorPlan) -> list[ValidationIssue]:
        owners: dict[str, list[str]] = defaultdict(list)
        for room in floor_plan.rooms:
            for gate_id in room.gates:
                owners[gate_id].append(room.id)
        return [
            self.issue(f"Gate {gate_id} is shared by rooms {', '.join(rooms)}", item_id=gate_id)
            for gate_id, rooms in sorted(owners.items())
            if len(rooms) > 1
        ]


class IsolatedGates(ValidationRule):
    name = "topology.isolated_gates"
    description = "Every gate should be the endpoint of at least one path."
    severity = "info"

    def check(self, floor_plan: FloorPlan) -> list[ValidationIssue]:
        touched = {node for path in floor_plan.paths for node in path.endpoints}
        return [
            self.issue(f"Gate {gate.id} has no paths", item_id=gate.id)
            for gate in floor_plan.gates
            if gate.id not in touched
        ]


TOPOLOGY_RULES: tuple[type[ValidationRule], ...] = (
    DuplicateEdges,
    SharedGates,
    IsolatedGates,
)
