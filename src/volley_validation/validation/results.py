"""Validation issue dataclasses.

Provides the issue record emitted by rule checks and the summary used for
reporting.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field, replace
from typing import Any

from volley_validation.validation.constants import (
    SEVERITY_DEFAULT,
    SEVERITY_LABELS,
    SEVERITY_MAJOR,
    SEVERITY_MINOR,
)


@dataclass(frozen=True, slots=True)
class ValidationIssue:
    """A single inconsistency found in a match log.

    Attributes:
        rule_name: Identifier of the check that raised it (e.g.
            "reception_after_serve")
        message: Human-readable description
        severity: 1 (minor), 2 (default) or 3 (major)
        source_line_number: 1-based line in the scouting file, if known
        source_line_text: Text of that line, filled in once the issue is
            reported
    """

    rule_name: str
    message: str
    severity: int = SEVERITY_DEFAULT
    source_line_number: int | None = None
    source_line_text: str | None = None

    @property
    def severity_label(self) -> str:
        return SEVERITY_LABELS.get(self.severity, str(self.severity))

    def with_source_text(self, text: str | None) -> ValidationIssue:
        """Return a copy carrying the resolved source line text."""
        return replace(self, source_line_text=text)

    def to_dict(self) -> dict[str, Any]:
        return {
            "rule_name": self.rule_name,
            "source_line_number": self.source_line_number,
            "message": self.message,
            "source_line_text": self.source_line_text,
            "severity": self.severity,
        }


@dataclass(frozen=True, slots=True)
class ValidationReport:
    """Summary of a validation run on a single match.

    Attributes:
        level: Validation level the run used
        total: Number of reported issues
        major: Issues with severity 3
        default: Issues with severity 2
        minor: Issues with severity 1
        issues: The reported issues, ordered by source line
        match_id: Identifier of the validated match, if known
    """

    level: int
    total: int
    major: int
    default: int
    minor: int
    issues: tuple[ValidationIssue, ...] = field(default_factory=tuple)
    match_id: str | None = None

    @property
    def passed(self) -> bool:
        return self.total == 0

    @classmethod
    def from_issues(
        cls,
        issues: Iterable[ValidationIssue],
        level: int,
        match_id: str | None = None,
    ) -> ValidationReport:
        """Create a report from a list of reported issues.

        Args:
            issues: Issues as returned by the validator
            level: Validation level used
            match_id: Optional match identifier

        Returns:
            ValidationReport with per-severity counts
        """
        issues = tuple(issues)
        return cls(
            level=level,
            total=len(issues),
            major=sum(1 for i in issues if i.severity == SEVERITY_MAJOR),
            default=sum(1 for i in issues if i.severity == SEVERITY_DEFAULT),
            minor=sum(1 for i in issues if i.severity == SEVERITY_MINOR),
            issues=issues,
            match_id=match_id,
        )


def make_issue(
    rule_name: str,
    message: str,
    source_line_number: int | None,
    severity: int = SEVERITY_DEFAULT,
) -> ValidationIssue:
    """Create an issue for a play.

    Args:
        rule_name: Unique rule identifier
        message: Description of the inconsistency
        source_line_number: Source line of the offending play
        severity: Severity level (default 2)

    Returns:
        ValidationIssue without source text
    """
    return ValidationIssue(
        rule_name=rule_name,
        message=message,
        severity=severity,
        source_line_number=source_line_number,
    )
