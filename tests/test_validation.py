"""Tests for the floor-plan validator and its rules."""

from __future__ import annotations

import json
from typing import Any

import pytest

from indoornav.models.floorplan import FloorPlan
from indoornav.seed_data import sample_floor_plan
from indoornav.validation import FloorPlanValidator, ValidationIssue, ValidationRule
from indoornav.validation.rules.references import PathEndpointsResolve, RoomGatesResolve, UniqueIds
from indoornav.validation.rules.topology import DuplicateEdges, IsolatedGates, SharedGates


def _plan(document: dict[str, Any]) -> FloorPlan:
    return FloorPlan.model_validate(document)


class TestReferenceRules:
    def test_clean_plan_has_no_reference_issues(self, plan: FloorPlan) -> None:
        for rule in (RoomGatesResolve(), PathEndpointsResolve(), UniqueIds()):
            assert rule.check(plan) == []

    def test_unknown_room_gate(self, plan_document: dict[str, Any]) -> None:
        plan_document["rooms"][0]["gates"] = ["gate-ghost"]
        issues = RoomGatesResolve().check(_plan(plan_document))
        assert len(issues) == 1
        assert issues[0].severity == "error"
        assert issues[0].item_id == "room-1"

    def test_unknown_path_endpoint(self, plan_document: dict[str, Any]) -> None:
        plan_document["paths"][0]["to"] = "nowhere"
        issues = PathEndpointsResolve().check(_plan(plan_document))
        assert [i.item_id for i in issues] == ["path-1"]

    def test_special_area_endpoint_is_known(self, plan_document: dict[str, Any]) -> None:
        plan_document["specialAreas"] = {"courtyard": {"name": "Courtyard", "isFastTravel": True}}
        plan_document["paths"][0]["to"] = "courtyard"
        assert PathEndpointsResolve().check(_plan(plan_document)) == []

    def test_duplicate_ids(self, plan_document: dict[str, Any]) -> None:
        plan_document["gates"].append(dict(plan_document["gates"][0]))
        issues = UniqueIds().check(_plan(plan_document))
        assert len(issues) == 1
        assert "gate-1" in issues[0].message


class TestTopologyRules:
    def test_duplicate_edge(self, plan_document: dict[str, Any]) -> None:
        extra = dict(plan_document["paths"][0], id="path-1b", **{"from": "gate-corridor", "to": "gate-1"})
        plan_document["paths"].append(extra)
        issues = DuplicateEdges().check(_plan(plan_document))
        assert len(issues) == 1
        assert issues[0].severity == "warning"
        assert issues[0].item_id == "path-1b"

    def test_shared_gate(self, plan_document: dict[str, Any]) -> None:
        plan_document["rooms"][1]["gates"] = ["gate-1"]
        issues = SharedGates().check(_plan(plan_document))
        assert [i.item_id for i in issues] == ["gate-1"]

    def test_isolated_gate(self, plan_document: dict[str, Any]) -> None:
        plan_document["paths"] = plan_document["paths"][:2]
        issues = IsolatedGates().check(_plan(plan_document))
        assert [i.item_id for i in issues] == ["gate-library"]
        assert issues[0].severity == "info"


class TestValidator:
    def test_clean_plan_passes(self, plan: FloorPlan) -> None:
        report = FloorPlanValidator().validate(plan)
        assert report.status == "passed"
        assert report.issues == []
        assert report.floor_plan_id == "test-building"

    def test_errors_fail(self, plan_document: dict[str, Any]) -> None:
        plan_document["rooms"][0]["gates"] = ["gate-ghost"]
        report = FloorPlanValidator().validate(_plan(plan_document))
        assert report.status == "failed"
        assert len(report.errors) == 1

    def test_warnings_only(self, plan_document: dict[str, Any]) -> None:
        plan_document["rooms"][1]["gates"] = ["gate-1"]
        report = FloorPlanValidator().validate(_plan(plan_document))
        assert report.status == "warnings"
        assert report.errors == []

    def test_seed_plan_has_no_errors(self) -> None:
        report = FloorPlanValidator().validate(sample_floor_plan())
        assert report.errors == []
        # Most classroom gates have no corridor path yet
        assert any(i.item_id == "gate-14" for i in report.issues)

    def test_custom_rule(self, plan: FloorPlan) -> None:
        class NeedsName(ValidationRule):
            name = "custom.needs_name"
            description = "Floor plans must be named."

            def check(self, floor_plan: FloorPlan) -> list[ValidationIssue]:
                return [self.issue("Unnamed floor plan")] if not floor_plan.name else []

        validator = FloorPlanValidator()
        validator.add_rule(NeedsName())
        assert validator.validate(plan).status == "passed"
        assert validator.validate(plan.model_copy(update={"name": ""})).status == "failed"

    def test_unknown_severity_rejected(self) -> None:
        with pytest.raises(ValueError):
            ValidationIssue("custom", "fatal", "nope")


class TestReport:
    def test_markdown_lists_issues(self, plan_document: dict[str, Any]) -> None:
        plan_document["rooms"][0]["gates"] = ["gate-ghost"]
        md = FloorPlanValidator().validate(_plan(plan_document)).to_markdown()
        assert md.startswith("# Floor plan test-building: FAILED")
        assert "## Errors" in md
        assert "- `room-1`: Room room-1 references unknown gate gate-ghost (references.room_gates)" in md
        assert "  - Declare the gate or fix the room's gate list." in md

    def test_markdown_clean(self, plan: FloorPlan) -> None:
        md = FloorPlanValidator().validate(plan).to_markdown()
        assert "No issues found." in md
        assert "##" not in md

    def test_json(self, plan_document: dict[str, Any]) -> None:
        plan_document["paths"] = plan_document["paths"][:2]
        data = json.loads(FloorPlanValidator().validate(_plan(plan_document)).to_json())
        assert data["status"] == "passed"
        assert data["counts"] == {"error": 0, "warning": 0, "info": 1}
        assert data["issues"][0]["rule_name"] == "topology.isolated_gates"
