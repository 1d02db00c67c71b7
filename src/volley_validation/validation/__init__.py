"""Consistency validation for parsed volleyball scouting logs.

This package checks a parsed match for:
- Skill adjacency: receptions follow serves, subtypes propagate between skills
- Rotations: on-court membership, front-row attacks, rotation order, substitutions
- Scoring: point attribution, score sequence, blocker counts, duplicate rows

Example usage:
    from volley_validation.validation import MatchValidator, validate

    issues = validate(match, level=2)

    validator = MatchValidator(level=3, parallel=True)
    report = validator.summarize(match)

    for issue in report.issues:
        print(f"{issue.source_line_number} [{issue.severity_label}] {issue.message}")
"""

from volley_validation.validation.results import (
    ValidationIssue,
    ValidationReport,
    make_issue,
)
from volley_validation.validation.sequence import RosterLookup
from volley_validation.validation.validator import (
    RULE_CHECKS,
    MatchValidator,
    RuleCheck,
    ValidationConfigError,
    check_level,
    filter_by_level,
    validate,
)

__all__ = [
    "MatchValidator",
    "RULE_CHECKS",
    "RosterLookup",
    "RuleCheck",
    "ValidationConfigError",
    "ValidationIssue",
    "ValidationReport",
    "check_level",
    "filter_by_level",
    "make_issue",
    "validate",
]
