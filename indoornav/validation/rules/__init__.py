"""Built-in floor-plan validation rules."""

from indoornav.validation.rules.base import SEVERITIES, ValidationIssue, ValidationRule
from indoornav.validation.rules.references import REFERENCE_RULES
from indoornav.validation.rules.topology import TOPOLOGY_RULES

DEFAULT_RULES = REFERENCE_RULES + TOPOLOGY_RULES

__all__ = [
    "DEFAULT_RULES",
    "REFERENCE_RULES",
    "SEVERITIES",
    "TOPOLOGY_RULES",
    "ValidationIssue",
    "ValidationRule",
]
