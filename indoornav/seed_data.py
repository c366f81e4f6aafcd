"""Seed floor plan — ground floor of the ADM building.

Stored in the external camelCase document format so it round-trips
through :mod:`indoornav.loader`.  The data is kept as surveyed, including
its known inconsistencies (room ``room-25`` is labelled "Room 26",
``room-6`` is labelled "Room 8", and most room gates have no path yet).
"""

from __future__ import annotations

import copy
from typing import Any

from indoornav.models.floorplan import FloorPlan

# (room id, name, type, (x, y, width, height), primary gate)
_RECT_ROOMS: list[tuple[str, str, str, tuple[float, float, float, float], str]] = [
    ("room-1", "Room 1", "classroom", (0, 430, 50, 62), "gate-1"),
    ("room-2", "Room 2", "classroom", (0, 492, 50, 62), "gate-2"),
    ("room-3", "Room 3", "classroom", (0, 554, 50, 62), "gate-3"),
    ("room-4", "Room 4", "classroom", (0, 613, 50, 59), "gate-4"),
    ("room-5", "Room 5", "classroom", (0, 675, 50, 62), "gate-5"),
    ("room-16", "Room 16", "classroom", (60, 425, 50, 21), "gate-16"),
    ("room-17", "Room 17", "classroom", (60, 446, 50, 294), "gate-17"),
    ("room-14", "Room 14", "classroom", (0, 60, 50, 60), "gate-14"),
    ("room-15", "Room 15", "classroom", (0, 120, 50, 251), "gate-15"),
    ("room-22", "Room 22", "classroom", (60, 60, 50, 81.26), "gate-22"),
    ("room-23", "Room 23", "classroom", (60, 141.26, 50, 77.24), "gate-23"),
    ("room-24", "Room 24", "classroom", (60, 218.5, 50, 81.26), "gate-24"),
    ("room-25", "Room 26", "classroom", (60, 295.74, 50, 81.26), "gate-25"),
    ("room-6", "Room 8", "classroom", (111, 750, 117, 50), "gate-6"),
    ("room-7", "Room 7", "classroom", (228, 750, 122, 50), "gate-7"),
    ("room-11", "Room 11", "classroom", (271, 0, 79, 50), "gate-11"),
    ("room-12", "Room 12", "classroom", (187, 0, 84, 50), "gate-12"),
    ("room-13", "Room 13", "classroom", (111, 0, 76, 50), "gate-13"),
    ("room-21", "Room 21", "classroom", (290, 59, 51, 55), "gate-21"),
    ("room-20", "Room 20", "classroom", (289, 114, 51, 53), "gate-20-alt"),
    ("room-19", "Room 19", "classroom", (290, 167, 51, 66), "gate-19"),
    ("room-18", "Room 18", "classroom", (290, 233, 51, 49), "gate-18"),
    ("room-9", "Room 9", "classroom", (350, 265, 50, 106), "gate-9"),
    ("room-10", "Room 10", "classroom", (350, 43, 50, 222), "gate-10"),
    ("stairs-1", "Stairs 1", "stairs", (60, 0, 18, 50), "gate-stairs-1"),
    ("stairs-2", "Stairs 2", "stairs", (290, 282, 50, 18), "gate-stairs-2"),
    ("stairs-3", "Stairs 3", "stairs", (290, 569, 50, 18), "gate-stairs-3"),
    ("stairs-4", "Stairs 4", "stairs", (60, 751, 18, 50), "gate-stairs-4"),
    ("stairs-5", "Stairs 5", "stairs", (60, 377, 50, 20), "gate-stairs-5"),
]

_POLYGON_ROOMS: list[dict[str, Any]] = [
    {
        "id": "main-corridor",
        "name": "Main Corridor",
        "type": "corridor",
        "coordinates": [
            {"x": x, "y": y} for x, y in [
                (350, 740), (350, 750), (50, 750), (50, 50), (350, 50), (350, 587),
                (340, 587), (340, 60), (60, 60), (60, 740), (350, 740),
            ]
        ],
        "gates": ["gate-corridor-main"],
    },
    {
        "id": "library",
        "name": "Library",
        "type": "library",
        "coordinates": [
            {"x": x, "y": y} for x, y in [
                (400, 425), (400, 758), (350, 758), (350, 741),
                (290, 741), (290, 587), (350, 587), (350, 425),
            ]
        ],
        "gates": ["gate-library"],
    },
]

# (gate id, name, type, (x, y, radius))
_GATES: list[tuple[str, str, str, tuple[float, float, float]]] = [
    ("gate-1", "Gate 1", "room", (50, 453, 5)),
    ("gate-2", "Gate 2", "room", (50, 520, 5)),
    ("gate-3", "Gate 3", "room", (50, 577, 5)),
    ("gate-4", "Gate 4", "room", (50, 637, 5)),
    ("gate-5", "Gate 5", "room", (50, 700, 5)),
    ("gate-14", "Gate 14", "room", (50, 90, 5)),
    ("gate-15", "Gate 15", "room", (50, 296, 5)),
    ("gate-16", "Gate 16", "room", (60, 435, 5)),
    ("gate-17", "Gate 17", "room", (60, 674, 5)),
    ("gate-22", "Gate 22", "room", (60, 106, 5)),
    ("gate-23", "Gate 23", "room", (60, 188, 5)),
    ("gate-24", "Gate 24", "room", (60, 264, 5)),
    ("gate-25", "Gate 25", "room", (60, 333, 5)),
    ("gate-11", "Gate 11", "room", (277, 50, 5)),
    ("gate-12", "Gate 12", "room", (251, 50, 5)),
    ("gate-13", "Gate 13", "room", (150, 50, 5)),
    ("gate-6", "Gate 6", "room", (127, 750, 5)),
    ("gate-7", "Gate 7", "room", (239, 750, 5)),
    ("gate-10", "Gate 10", "room", (350, 100, 5)),
    ("gate-9", "Gate 9", "room", (350, 310, 5)),
    ("gate-18", "Gate 18", "room", (341, 251, 5)),
    ("gate-19", "Gate 19", "room", (341, 193, 5)),
    ("gate-20-alt", "Gate 20", "room", (341, 134, 5)),
    ("gate-21", "Gate 21", "room", (341, 79, 5)),
    ("gate-stairs-1", "Stairs 1 Gate", "stairs", (70, 50, 5)),
    ("gate-stairs-2", "Stairs 2 Gate", "stairs", (341, 290, 5)),
    ("gate-stairs-3", "Stairs 3 Gate", "stairs", (341, 578, 5)),
    ("gate-stairs-4", "Stairs 4 Gate", "stairs", (70, 750, 5)),
    ("gate-stairs-5", "Stairs 5 Gate", "stairs", (60, 385, 5)),
]

# (path id, to gate, distance, polyline end point); all start at the corridor hub
_CORRIDOR_PATHS: list[tuple[str, str, float, tuple[float, float]]] = [
    ("path-corridor-to-room1", "gate-1", 3, (50, 461)),
    ("path-corridor-to-room2", "gate-2", 3, (50, 523)),
    ("path-corridor-to-room3", "gate-3", 3, (50, 585)),
    ("path-corridor-to-room4", "gate-4", 3, (50, 642)),
    ("path-corridor-to-room5", "gate-5", 3, (50, 706)),
    ("path-corridor-to-library", "gate-library", 4, (320, 587)),
    ("path-corridor-to-stairs1", "gate-stairs-1", 2, (69, 25)),
    ("path-corridor-to-stairs2", "gate-stairs-2", 2, (299, 307)),
    ("path-corridor-to-stairs3", "gate-stairs-3", 2, (298, 594)),
    ("path-corridor-to-stairs4", "gate-stairs-4", 1, (69, 776)),
    ("path-corridor-to-stairs5", "gate-stairs-5", 1, (72, 402)),
]

_HUB = "gate-corridor-main"
_HUB_XY = {"x": 200, "y": 400}


def _gate_doc(
    gate_id: str,
    name: str,
    gate_type: str,
    position: tuple[float, float, float],
    connects_to: list[str],
    **extra: Any,
) -> dict[str, Any]:
    x, y, radius = position
    return {
        "id": gate_id,
        "name": name,
        "type": gate_type,
        "coordinates": {"x": x, "y": y, "radius": radius},
        "isOpen": True,
        "connectsTo": connects_to,
        **extra,
    }


def sample_floor_plan_document() -> dict[str, Any]:
    """Return the ADM ground floor as a fresh JSON-compatible dict."""
    rooms: list[dict[str, Any]] = [copy.deepcopy(_POLYGON_ROOMS[0])]
    for room_id, name, room_type, (x, y, w, h), gate_id in _RECT_ROOMS:
        rooms.append({
            "id": room_id,
            "name": name,
            "type": room_type,
            "coordinates": {"x": x, "y": y, "width": w, "height": h},
            "gates": [gate_id],
        })
    rooms.append(copy.deepcopy(_POLYGON_ROOMS[1]))

    gates = [
        _gate_doc("gate-main", "Main Entrance", "main", (20, 400, 20), [_HUB]),
        _gate_doc(_HUB, "Main Corridor Access", "corridor", (200, 400, 8), ["gate-main"]),
    ]
    gates.extend(_gate_doc(*entry, [_HUB]) for entry in _GATES)
    gates.append(_gate_doc(
        "gate-library", "Library Gate", "library", (350, 745, 5), [_HUB],
        openingHours={"start": "08:00", "end": "22:00"},
    ))

    paths: list[dict[str, Any]] = [{
        "id": "path-main-to-corridor",
        "from": "gate-main",
        "to": _HUB,
        "distance": 5,
        "type": "corridor",
        "coordinates": [{"x": 200, "y": 800}, dict(_HUB_XY)],
        "isBlocked": False,
    }]
    for path_id, gate_id, distance, (ex, ey) in _CORRIDOR_PATHS:
        paths.append({
            "id": path_id,
            "from": _HUB,
            "to": gate_id,
            "distance": distance,
            "type": "corridor",
            "coordinates": [dict(_HUB_XY), {"x": ex, "y": ey}],
            "isBlocked": False,
        })

    return {
        "id": "adm-building",
        "name": "ADM Building Floor Plan",
        "svgViewBox": "0 0 400 800",
        "rooms": rooms,
        "gates": gates,
        "paths": paths,
        "specialAreas": {
            "adm-compound": {
                "name": "ADM Compound",
                "type": "fast-travel",
                "coordinates": {"x": 50, "y": 50, "width": 300, "height": 700},
                "isFastTravel": True,
            },
        },
    }


def sample_floor_plan() -> FloorPlan:
    """The ADM ground floor as a validated :class:`FloorPlan`."""
    return FloorPlan.model_validate(sample_floor_plan_document())
