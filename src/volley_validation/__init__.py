"""Volleyball scouting log validation.

Checks an already-parsed match (plays, rosters and source lines) for
inconsistencies and reports them with a severity and source line.
"""

from volley_validation.models import ParsedMatch, Play, RosterPlayer, Skill, TeamRoster
from volley_validation.validation import (
    MatchValidator,
    ValidationConfigError,
    ValidationIssue,
    ValidationReport,
    validate,
)

__version__ = "0.1.0"

__all__ = [
    "MatchValidator",
    "ParsedMatch",
    "Play",
    "RosterPlayer",
    "Skill",
    "TeamRoster",
    "ValidationConfigError",
    "ValidationIssue",
    "ValidationReport",
    "validate",
]
