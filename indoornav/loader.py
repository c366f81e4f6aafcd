"""Floor-plan hydration from JSON documents.

Persistence lives outside this package; these helpers only turn an
already-fetched document into a :class:`FloorPlan` and back.  Malformed
documents raise :class:`pydantic.ValidationError`.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from indoornav.models.floorplan import FloorPlan

logger = logging.getLogger(__name__)


def floor_plan_from_dict(data: dict[str, Any]) -> FloorPlan:
    """Validate a camelCase (or snake_case) document into a FloorPlan."""
    return FloorPlan.model_validate(data)


def load_floor_plan(path: str | Path) -> FloorPlan:
    """Read a floor plan from a JSON file."""
    source = Path(path)
    plan = FloorPlan.model_validate_json(source.read_text(encoding="utf-8"))
    logger.info(
        "Loaded floor plan %s from %s: %d rooms, %d gates, %d paths",
        plan.id, source, len(plan.rooms), len(plan.gates), len(plan.paths),
    )
    return plan


def floor_plan_to_dict(plan: FloorPlan) -> dict[str, Any]:
    """Serialise to the external camelCase document format."""
    return plan.model_dump(mode="json", by_alias=True, exclude_none=True)


def dump_floor_plan(plan: FloorPlan, path: str | Path) -> Path:
    """Write *plan* as JSON. Returns the written path."""
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(
        json.dumps(floor_plan_to_dict(plan), indent=2), encoding="utf-8",
    )
    return target
