"""Floor plan — rooms, gates and paths of a single building floor.

The floor plan is the declarative description the routing graph is built
from.  Field names are snake_case in Python; the camelCase names used by the
external JSON format (``isOpen``, ``connectsTo``, ``from``/``to`` …) are
accepted as aliases and produced by ``model_dump(by_alias=True)``.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

# HH:MM with hours 0-23 (one or two digits), or 24:00 for end of day
CLOCK_PATTERN = r"^(([01]?\d|2[0-3]):[0-5]\d|24:00)$"


class _FloorPlanModel(BaseModel):
    """Shared config: camelCase aliases, immutable after load."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class Point(_FloorPlanModel):
    x: float
    y: float


class BoundingBox(_FloorPlanModel):
    """Axis-aligned box derived from any room geometry."""

    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0

    @property
    def center(self) -> tuple[float, float]:
        return (self.x + self.width / 2, self.y + self.height / 2)


class RectGeometry(_FloorPlanModel):
    """Axis-aligned rectangular room outline."""

    kind: Literal["rect"] = "rect"
    x: float
    y: float
    width: float = Field(ge=0)
    height: float = Field(ge=0)

    def bounding_box(self) -> BoundingBox:
        return BoundingBox(x=self.x, y=self.y, width=self.width, height=self.height)


class PolygonGeometry(_FloorPlanModel):
    """Closed polygon room outline (ordered vertices)."""

    kind: Literal["polygon"] = "polygon"
    points: list[Point] = Field(min_length=3)

    def bounding_box(self) -> BoundingBox:
        xs = [p.x for p in self.points]
        ys = [p.y for p in self.points]
        return BoundingBox(
            x=min(xs),
            y=min(ys),
            width=max(xs) - min(xs),
            height=max(ys) - min(ys),
        )


RoomGeometry = Annotated[
    Union[RectGeometry, PolygonGeometry],
    Field(discriminator="kind"),
]


class GatePosition(_FloorPlanModel):
    x: float
    y: float
    radius: float = 5.0


class TimeRestriction(_FloorPlanModel):
    """Fixed hour range: open iff ``open_time <= hour < close_time``."""

    open_time: int = Field(ge=0, le=24)
    close_time: int = Field(ge=0, le=24)


class OpeningHours(_FloorPlanModel):
    start: str = Field(pattern=CLOCK_PATTERN)
    end: str = Field(pattern=CLOCK_PATTERN)


class TimeWindow(_FloorPlanModel):
    """A time-of-day window, optionally limited to some days of the week.

    Days are numbered 0 = Sunday ... 6 = Saturday.  An empty list means
    the window applies every day.
    """

    start: str = Field(pattern=CLOCK_PATTERN)
    end: str = Field(pattern=CLOCK_PATTERN)
    days_of_week: list[int] = Field(default_factory=list)

    @field_validator("days_of_week")
    @classmethod
    def _check_days(cls, value: list[int]) -> list[int]:
        for day in value:
            if not 0 <= day <= 6:
                raise ValueError(f"day of week out of range: {day}")
        return value


class GateAccessRules(_FloorPlanModel):
    time_dependent: bool = False
    restricted_after: str | None = Field(default=None, pattern=CLOCK_PATTERN)
    restricted_before: str | None = Field(default=None, pattern=CLOCK_PATTERN)
    allowed_directions: list[Literal["in", "out", "both"]] = Field(default_factory=list)
    windows: list[TimeWindow] = Field(default_factory=list)


class PathAccessRules(_FloorPlanModel):
    time_dependent: bool = False
    restricted_after: str | None = Field(default=None, pattern=CLOCK_PATTERN)
    allowed_times: list[TimeWindow] = Field(default_factory=list)


class Room(_FloorPlanModel):
    """A named destination area reached through one or more gates."""

    id: str
    name: str
    type: str = "classroom"
    """'classroom', 'office', 'library', 'toilet', 'stairs', 'corridor', ..."""

    coordinates: RoomGeometry
    gates: list[str] = Field(min_length=1)
    """Gate ids; the first one is the primary gate used for routing."""

    @field_validator("coordinates", mode="before")
    @classmethod
    def _coerce_geometry(cls, value: Any) -> Any:
        # External data gives either a bare rect dict or a list of points
        if isinstance(value, list):
            return {"kind": "polygon", "points": value}
        if isinstance(value, dict) and "kind" not in value:
            return {"kind": "rect", **value}
        return value

    @property
    def primary_gate(self) -> str:
        return self.gates[0]

    @property
    def bounding_box(self) -> BoundingBox:
        return self.coordinates.bounding_box()


class Gate(_FloorPlanModel):
    """A door, threshold or junction; the nodes of the routing graph."""

    id: str
    name: str = ""
    type: str = "room"
    """'main', 'room', 'library', 'corridor', 'stairs', 'toilet', 'emergency', 'service'."""

    coordinates: GatePosition
    is_open: bool = True
    time_restrictions: TimeRestriction | None = None
    opening_hours: OpeningHours | None = None
    access_rules: GateAccessRules | None = None
    connects_to: list[str] = Field(default_factory=list)


class Path(_FloorPlanModel):
    """A weighted, undirected edge between two gates (or special areas)."""

    id: str
    from_: str = Field(alias="from")
    to: str
    distance: float = Field(gt=0)
    type: str = "corridor"
    """'corridor', 'stairs', 'outdoor', 'fast-travel', 'emergency'."""

    coordinates: list[Point] = Field(default_factory=list)
    """Polyline for rendering only."""

    is_blocked: bool = False
    access_rules: PathAccessRules | None = None

    @property
    def endpoints(self) -> frozenset[str]:
        return frozenset((self.from_, self.to))


class SpecialArea(_FloorPlanModel):
    """A named zone that can terminate a path without being a gate."""

    id: str
    name: str = ""
    type: str = "fast-travel"
    coordinates: RectGeometry | None = None
    is_fast_travel: bool = False


class FloorPlan(_FloorPlanModel):
    """Complete single-floor building description."""

    id: str
    name: str = ""
    svg_view_box: str = ""
    rooms: list[Room] = Field(default_factory=list)
    gates: list[Gate] = Field(default_factory=list)
    paths: list[Path] = Field(default_factory=list)
    special_areas: list[SpecialArea] = Field(default_factory=list)

    @field_validator("special_areas", mode="before")
    @classmethod
    def _coerce_special_areas(cls, value: Any) -> Any:
        # Accept the keyed mapping form: {"admCompound": {...}}
        if isinstance(value, dict):
            return [{"id": key, **area} for key, area in value.items()]
        return value

    def get_room(self, room_id: str) -> Room | None:
        return next((r for r in self.rooms if r.id == room_id), None)

    def get_gate(self, gate_id: str) -> Gate | None:
        return next((g for g in self.gates if g.id == gate_id), None)

    def special_area_ids(self) -> set[str]:
        return {a.id for a in self.special_areas}
