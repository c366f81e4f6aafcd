"""Tests for floor-plan loading, dumping and the bundled sample."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest
from pydantic import ValidationError

from indoornav.loader import dump_floor_plan, floor_plan_from_dict, floor_plan_to_dict, load_floor_plan
from indoornav.models.floorplan import FloorPlan
from indoornav.routing.engine import RoutingEngine
from indoornav.routing.errors import NoPathFound
from indoornav.seed_data import sample_floor_plan, sample_floor_plan_document


class TestLoader:
    def test_from_dict(self, plan_document: dict[str, Any]) -> None:
        plan = floor_plan_from_dict(plan_document)
        assert plan.id == "test-building"
        assert plan.get_gate("gate-library").access_rules.restricted_after == "22:00"

    def test_file_round_trip(self, plan: FloorPlan, tmp_path: Path) -> None:
        written = dump_floor_plan(plan, tmp_path / "plans" / "test.json")
        assert written.is_file()
        assert load_floor_plan(written).model_dump() == plan.model_dump()

    def test_dump_uses_external_field_names(self, plan: FloorPlan) -> None:
        data = floor_plan_to_dict(plan)
        path = data["paths"][0]
        assert path["from"] == "gate-1"
        assert "isBlocked" in path
        assert "svgViewBox" in data
        assert "connectsTo" in data["gates"][0]

    def test_missing_required_field(self, plan_document: dict[str, Any]) -> None:
        del plan_document["rooms"][0]["gates"]
        with pytest.raises(ValidationError):
            floor_plan_from_dict(plan_document)

    def test_impossible_clock_rejected_at_load(self, plan_document: dict[str, Any]) -> None:
        plan_document["gates"][3]["accessRules"]["restrictedAfter"] = "25:00"
        with pytest.raises(ValidationError):
            floor_plan_from_dict(plan_document)

    def test_bad_json_file(self, tmp_path: Path) -> None:
        bad = tmp_path / "bad.json"
        bad.write_text(json.dumps({"rooms": []}), encoding="utf-8")
        with pytest.raises(ValidationError):
            load_floor_plan(bad)


class TestSampleFloorPlan:
    def test_document_is_fresh_each_call(self) -> None:
        first = sample_floor_plan_document()
        first["rooms"][0]["coordinates"].clear()
        assert sample_floor_plan_document()["rooms"][0]["coordinates"]

    def test_contents(self) -> None:
        plan = sample_floor_plan()
        assert plan.id == "adm-building"
        assert plan.get_room("library").coordinates.kind == "polygon"
        assert plan.get_room("room-1").coordinates.kind == "rect"
        assert plan.special_area_ids() == {"adm-compound"}
        assert len(plan.paths) == 12

    def test_known_labels_kept(self) -> None:
        plan = sample_floor_plan()
        assert plan.get_room("room-25").name == "Room 26"

    def test_room_to_library(self) -> None:
        engine = RoutingEngine(sample_floor_plan())
        steps = engine.find_optimal_path("room-1", "library")
        assert [s.gate_id for s in steps] == ["gate-1", "gate-corridor-main", "gate-library"]
        assert engine.calculate_total_distance(steps) == 7

    def test_room_to_stairs(self) -> None:
        engine = RoutingEngine(sample_floor_plan())
        steps = engine.find_optimal_path("room-3", "stairs-4")
        assert engine.calculate_total_distance(steps) == 4

    def test_unconnected_room(self) -> None:
        engine = RoutingEngine(sample_floor_plan())
        with pytest.raises(NoPathFound):
            engine.find_optimal_path("room-1", "room-14")
