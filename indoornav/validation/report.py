"""ValidationReport — outcome of validating one floor plan."""

from __future__ import annotations

import json
from collections import Counter
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Iterable

from indoornav.validation.rules.base import SEVERITIES, ValidationIssue

_HEADINGS = {"error": "Errors", "warning": "Warnings", "info": "Notes"}


@dataclass
class ValidationReport:
    floor_plan_id: str = ""
    status: str = "passed"
    """'passed', 'warnings' or 'failed'."""

    issues: list[ValidationIssue] = field(default_factory=list)
    validated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def from_issues(cls, floor_plan_id: str, issues: Iterable[ValidationIssue]) -> ValidationReport:
        """Build a report, deriving the status from the worst severity."""
        collected = list(issues)
        severities = {i.severity for i in collected}
        if "error" in severities:
            status = "failed"
        elif "warning" in severities:
            status = "warnings"
        else:
            status = "passed"
        return cls(floor_plan_id=floor_plan_id, status=status, issues=collected)

    @property
    def errors(self) -> list[ValidationIssue]:
        return [i for i in self.issues if i.severity == "error"]

    @property
    def warnings(self) -> list[ValidationIssue]:
        return [i for i in self.issues if i.severity == "warning"]

    def counts(self) -> dict[str, int]:
        tally = Counter(i.severity for i in self.issues)
        return {severity: tally[severity] for severity in SEVERITIES}

    def to_markdown(self) -> str:
        counts = self.counts()
        lines = [
            f"# Floor plan {self.floor_plan_id or '(unnamed)'}: {self.status.upper()}",
            "",
            f"Validated {self.validated_at:%Y-%m-%d %H:%M} UTC: "
            f"{counts['error']} errors, {counts['warning']} warnings, {counts['info']} notes.",
            "",
        ]
        if not self.issues:
            lines += ["No issues found.", ""]

        for severity in SEVERITIES:
            group = [i for i in self.issues if i.severity == severity]
            if not group:
                continue
            lines += [f"## {_HEADINGS[severity]}", ""]
            for issue in group:
                subject = f"`{issue.item_id}`: " if issue.item_id else ""
                lines.append(f"- {subject}{issue.message} ({issue.rule_name})")
                if issue.suggestion:
                    lines.append(f"  - {issue.suggestion}")
            lines.append("")

        return "\n".join(lines)

    def to_dict(self) -> dict[str, Any]:
        return {
            "floor_plan_id": self.floor_plan_id,
            "status": self.status,
            "validated_at": self.validated_at.isoformat(),
            "counts": self.counts(),
            "issues": [i.to_dict() for i in self.issues],
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), indent=2)
