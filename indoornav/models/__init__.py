"""Data models for floor plans and routes."""

from indoornav.models.floorplan import (
    BoundingBox,
    FloorPlan,
    Gate,
    GateAccessRules,
    GatePosition,
    OpeningHours,
    Path,
    PathAccessRules,
    Point,
    PolygonGeometry,
    RectGeometry,
    Room,
    SpecialArea,
    TimeRestriction,
    TimeWindow,
)
from indoornav.models.route import NavigationNode, Route, RouteStep, UserQuery

__all__ = [
    "BoundingBox",
    "FloorPlan",
    "Gate",
    "GateAccessRules",
    "GatePosition",
    "NavigationNode",
    "OpeningHours",
    "Path",
    "PathAccessRules",
    "Point",
    "PolygonGeometry",
    "RectGeometry",
    "Room",
    "Route",
    "RouteStep",
    "SpecialArea",
    "TimeRestriction",
    "TimeWindow",
    "UserQuery",
]
