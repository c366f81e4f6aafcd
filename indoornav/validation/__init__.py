"""Floor-plan validation — reference integrity and topology checks."""

from indoornav.validation.report import ValidationReport
from indoornav.validation.rules.base import ValidationIssue, ValidationRule
from indoornav.validation.validator import FloorPlanValidator

__all__ = ["FloorPlanValidator", "ValidationIssue", "ValidationReport", "ValidationRule"]
