"""Route analysis — complexity tier, warnings and a rough time estimate.

Advisory annotation for the display layer; the routing engine never
consults it.
"""

from __future__ import annotations

import math
from datetime import datetime, timezone

from pydantic import BaseModel, Field

from indoornav import config
from indoornav.analysis.formatting import format_distance, format_time
from indoornav.models.route import Route


class RouteAnalysis(BaseModel):
    """Result of :func:`analyze_route`."""

    route_id: str = ""
    complexity: str = "simple"
    """'simple', 'moderate' or 'complex'."""

    warnings: list[str] = Field(default_factory=list)
    estimated_time: int = 0
    """Minutes."""

    accessibility: bool = True
    step_count: int = 0
    total_distance: float = 0.0
    analyzed_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    def to_markdown(self) -> str:
        """Render the analysis as a short Markdown summary."""
        lines: list[str] = []

        lines.append(f"# Route Analysis — {self.route_id or 'Unknown'}")
        lines.append("")
        lines.append(f"**Complexity:** {self.complexity.upper()}")
        lines.append(f"**Steps:** {self.step_count}")
        lines.append(f"**Distance:** {format_distance(self.total_distance)}")
        lines.append(f"**Estimated time:** {format_time(self.estimated_time)}")
        lines.append(f"**Step-free:** {'yes' if self.accessibility else 'no'}")
        lines.append("")

        if self.warnings:
            lines.append("## Warnings")
            lines.append("")
            for warning in self.warnings:
                lines.append(f"- {warning}")
            lines.append("")

        return "\n".join(lines)


def _complexity(step_count: int) -> str:
    if step_count > config.MODERATE_ROUTE_MAX_STEPS:
        return "complex"
    if step_count > config.SIMPLE_ROUTE_MAX_STEPS:
        return "moderate"
    return "simple"


def analyze_route(route: Route) -> RouteAnalysis:
    """Classify a completed route.

    - complexity: simple (<= 5 steps), moderate (6-10), complex (> 10)
    - "stairs" in any instruction marks the route as not step-free
    - "restricted" in any instruction adds a time-restriction warning
    - estimate: ``ceil(steps * 3 + total_distance / 10)`` minutes
    """
    warnings: list[str] = []
    step_count = len(route.steps)
    instructions = [step.instruction.lower() for step in route.steps]

    complexity = _complexity(step_count)
    if complexity == "complex":
        warnings.append("Route has many steps - consider alternative")

    accessibility = True
    if any("stairs" in text for text in instructions):
        warnings.append("Route includes stairs")
        accessibility = False

    if any("restricted" in text for text in instructions):
        warnings.append("Route may have time restrictions")

    estimated = math.ceil(
        step_count * config.ANALYZER_MINUTES_PER_STEP
        + route.total_distance / config.ANALYZER_DISTANCE_DIVISOR
    )

    return RouteAnalysis(
        route_id=route.id,
        complexity=complexity,
        warnings=warnings,
        estimated_time=estimated,
        accessibility=accessibility,
        step_count=step_count,
        total_distance=route.total_distance,
    )
