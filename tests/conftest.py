"""Shared fixtures: a small three-room floor plan."""

from __future__ import annotations

from typing import Any

import pytest

from indoornav.models.floorplan import FloorPlan
from indoornav.routing.engine import RoutingEngine


def small_plan_document() -> dict[str, Any]:
    """Two classrooms and a library around one corridor junction."""
    return {
        "id": "test-building",
        "name": "Test Building",
        "svgViewBox": "0 0 400 800",
        "rooms": [
            {
                "id": "room-1",
                "name": "Test Classroom 1",
                "type": "classroom",
                "coordinates": {"x": 0, "y": 60, "width": 50, "height": 60},
                "gates": ["gate-1"],
            },
            {
                "id": "room-2",
                "name": "Test Office 1",
                "type": "office",
                "coordinates": {"x": 50, "y": 60, "width": 50, "height": 60},
                "gates": ["gate-2"],
            },
            {
                "id": "test-library",
                "name": "Test Library",
                "type": "library",
                "coordinates": {"x": 120, "y": 400, "width": 160, "height": 200},
                "gates": ["gate-library"],
            },
        ],
        "gates": [
            {
                "id": "gate-1",
                "name": "Gate 1",
                "type": "room",
                "coordinates": {"x": 25, "y": 120, "radius": 5},
                "isOpen": True,
                "connectsTo": ["gate-corridor"],
                "accessRules": {"timeDependent": False},
            },
            {
                "id": "gate-2",
                "name": "Gate 2",
                "type": "room",
                "coordinates": {"x": 75, "y": 120, "radius": 5},
                "isOpen": True,
                "connectsTo": ["gate-corridor"],
                "accessRules": {"timeDependent": False},
            },
            {
                "id": "gate-corridor",
                "name": "Corridor Gate",
                "type": "corridor",
                "coordinates": {"x": 50, "y": 140, "radius": 5},
                "isOpen": True,
                "connectsTo": ["gate-1", "gate-2", "gate-library"],
            },
            {
                "id": "gate-library",
                "name": "Library Gate",
                "type": "library",
                "coordinates": {"x": 200, "y": 400, "radius": 8},
                "isOpen": True,
                "connectsTo": ["gate-corridor"],
                "accessRules": {"timeDependent": True, "restrictedAfter": "22:00"},
            },
        ],
        "paths": [
            {
                "id": "path-1",
                "from": "gate-1",
                "to": "gate-corridor",
                "distance": 25,
                "type": "corridor",
                "coordinates": [{"x": 25, "y": 120}, {"x": 50, "y": 140}],
                "isBlocked": False,
            },
            {
                "id": "path-2",
                "from": "gate-2",
                "to": "gate-corridor",
                "distance": 30,
                "type": "corridor",
                "coordinates": [{"x": 75, "y": 120}, {"x": 50, "y": 140}],
                "isBlocked": False,
            },
            {
                "id": "path-3",
                "from": "gate-corridor",
                "to": "gate-library",
                "distance": 280,
                "type": "corridor",
                "coordinates": [{"x": 50, "y": 140}, {"x": 100, "y": 300}, {"x": 200, "y": 400}],
                "isBlocked": False,
            },
        ],
    }


def with_path_blocked(plan: FloorPlan, path_id: str) -> FloorPlan:
    """Return a copy of *plan* with one path marked blocked."""
    paths = [
        p.model_copy(update={"is_blocked": True}) if p.id == path_id else p
        for p in plan.paths
    ]
    return plan.model_copy(update={"paths": paths})


@pytest.fixture
def plan_document() -> dict[str, Any]:
    return small_plan_document()


@pytest.fixture
def plan() -> FloorPlan:
    return FloorPlan.model_validate(small_plan_document())


@pytest.fixture
def engine(plan: FloorPlan) -> RoutingEngine:
    return RoutingEngine(plan)


@pytest.fixture
def block_path():
    return with_path_blocked
