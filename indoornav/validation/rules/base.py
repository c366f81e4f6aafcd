"""Rule interface and the issue record every rule reports."""

from __future__ import annotations

import abc
from dataclasses import asdict, dataclass
from typing import Any

from indoornav.models.floorplan import FloorPlan

SEVERITIES = ("error", "warning", "info")


@dataclass(frozen=True)
class ValidationIssue:
    """One problem found in a floor plan."""

    rule_name: str
    severity: str
    message: str
    item_id: str = ""
    """Id of the room, gate or path at fault."""

    suggestion: str = ""

    def __post_init__(self) -> None:
        if self.severity not in SEVERITIES:
            raise ValueError(f"Unknown severity {self.severity!r}")

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


class ValidationRule(abc.ABC):
    """A single floor-plan check.

    Subclasses set ``name``, ``description`` and ``severity`` and implement
    :meth:`check`, building issues with :meth:`issue`.
    """

    name: str = ""
    description: str = ""
    severity: str = "error"

    @abc.abstractmethod
    def check(self, floor_plan: FloorPlan) -> list[ValidationIssue]:
        """Return the issues found in *floor_plan*; empty if it passes."""

    def issue(self, message: str, item_id: str = "", suggestion: str = "") -> ValidationIssue:
        return ValidationIssue(self.name, self.severity, message, item_id, suggestion)
