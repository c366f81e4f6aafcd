"""Route models — the output of a routing query."""

from __future__ import annotations

import uuid
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from indoornav.models.floorplan import CLOCK_PATTERN, Path


def _new_id() -> str:
    return f"route-{uuid.uuid4().hex[:12]}"


class _RouteModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class NavigationNode(_RouteModel):
    """A room, gate or area visited along a route."""

    id: str
    type: str = "gate"
    """'gate', 'room' or 'area'."""

    x: float = 0.0
    y: float = 0.0


class RouteStep(_RouteModel):
    """One leg of a route.

    ``distance`` is the length of this leg only; ``cumulative_distance`` is
    the distance walked from the start up to the end of this leg.
    """

    from_node: NavigationNode
    to_node: NavigationNode
    path: Optional[Path] = None
    """The traversed path; None for the departure step."""

    instruction: str = ""
    distance: float = 0.0
    cumulative_distance: float = 0.0
    estimated_time: float = 0.0
    """Minutes."""

    room_id: Optional[str] = None
    gate_id: str = ""


class Route(_RouteModel):
    """An ordered sequence of steps connecting two rooms."""

    id: str = Field(default_factory=_new_id)
    from_room: str
    to_room: str
    steps: list[RouteStep] = Field(default_factory=list)
    total_distance: float = 0.0
    total_time: float = 0.0
    """Minutes."""

    is_valid: bool = False
    warnings: list[str] = Field(default_factory=list)

    @classmethod
    def from_steps(
        cls,
        from_room: str,
        to_room: str,
        steps: list[RouteStep],
        warnings: list[str] | None = None,
    ) -> Route:
        return cls(
            from_room=from_room,
            to_room=to_room,
            steps=steps,
            total_distance=sum(s.distance for s in steps),
            total_time=sum(s.estimated_time for s in steps),
            is_valid=bool(steps),
            warnings=warnings or [],
        )


class UserQuery(_RouteModel):
    """A room-to-room request as issued by the UI."""

    from_room: str
    to_room: str
    current_time: Optional[str] = Field(default=None, pattern=CLOCK_PATTERN)
