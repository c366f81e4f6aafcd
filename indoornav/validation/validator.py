"""FloorPlanValidator — check a floor plan's references and topology.

Usage::

    from indoornav.validation import FloorPlanValidator

    report = FloorPlanValidator().validate(floor_plan)

The validator only reports; it never repairs the floor plan, and the
routing engine accepts plans that fail validation.
"""

from __future__ import annotations

import logging

from indoornav.models.floorplan import FloorPlan
from indoornav.validation.report import ValidationReport
from indoornav.validation.rules import DEFAULT_RULES, ValidationRule

logger = logging.getLogger(__name__)


class FloorPlanValidator:
    """Runs every registered rule over a floor plan.

    The built-in reference and topology rules are registered on
    construction; :meth:`add_rule` appends more.
    """

    def __init__(self) -> None:
        self.rules: list[ValidationRule] = [rule() for rule in DEFAULT_RULES]

    def add_rule(self, rule: ValidationRule) -> None:
        self.rules.append(rule)

    def validate(self, floor_plan: FloorPlan) -> ValidationReport:
        report = ValidationReport.from_issues(
            floor_plan.id,
            (issue for rule in self.rules for issue in rule.check(floor_plan)),
        )
        logger.info(
            "Validated floor plan %s: %s (%d issues)",
            floor_plan.id, report.status, len(report.issues),
        )
        return report
