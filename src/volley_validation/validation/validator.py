"""Match validator.

Runs the registered rule checks over a parsed match, merges their issues,
filters them by validation level and orders them by source line.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import TYPE_CHECKING

from volley_validation.models.plays import ParsedMatch, Play
from volley_validation.validation.constants import (
    LEVEL_ALL,
    LEVEL_DEFAULT,
    LEVEL_MAJOR,
    LEVEL_NONE,
    VALID_LEVELS,
)
from volley_validation.validation.results import ValidationIssue, ValidationReport
from volley_validation.validation.rules import (
    validate_attack_type,
    validate_block_type,
    validate_blocker_count,
    validate_dig_type,
    validate_duplicate_rows,
    validate_error_points,
    validate_front_row_attacks,
    validate_on_court,
    validate_reception_after_serve,
    validate_reception_type,
    validate_reception_zones,
    validate_rotations,
    validate_score_sequence,
    validate_substitutions,
    validate_winning_points,
)
from volley_validation.validation.sequence import RosterLookup

if TYPE_CHECKING:
    from volley_validation.config import ValidatorSettings

logger = logging.getLogger(__name__)

CheckFunction = Callable[[Sequence[Play], RosterLookup], list[ValidationIssue]]


class ValidationConfigError(ValueError):
    """Raised when the validator is configured with an invalid level."""


@dataclass(frozen=True, slots=True)
class RuleCheck:
    """A registered rule check.

    Attributes:
        name: Check identifier used in logs
        func: The check function
        min_level: Lowest validation level at which the check runs
    """

    name: str
    func: CheckFunction
    min_level: int = LEVEL_MAJOR


RULE_CHECKS: tuple[RuleCheck, ...] = (
    RuleCheck("reception_after_serve", validate_reception_after_serve),
    RuleCheck("reception_type_match", validate_reception_type),
    RuleCheck("reception_zone_match", validate_reception_zones, LEVEL_ALL),
    RuleCheck("attack_type_match", validate_attack_type, LEVEL_ALL),
    RuleCheck("block_type_match", validate_block_type, LEVEL_ALL),
    RuleCheck("dig_type_match", validate_dig_type, LEVEL_ALL),
    RuleCheck("front_row_attack", validate_front_row_attacks),
    RuleCheck("blocker_count", validate_blocker_count),
    RuleCheck("player_on_court", validate_on_court),
    RuleCheck("duplicate_row", validate_duplicate_rows),
    RuleCheck("error_point_attribution", validate_error_points),
    RuleCheck("winning_point_attribution", validate_winning_points),
    RuleCheck("score_sequence", validate_score_sequence),
    RuleCheck("rotation_continuity", validate_rotations),
    RuleCheck("substitution_lineup", validate_substitutions),
)


def check_level(level: object) -> int:
    """Validate a validation level.

    Args:
        level: Requested level

    Returns:
        The level as an int

    Raises:
        ValidationConfigError: If level is not one of 0, 1, 2, 3
    """
    if isinstance(level, bool) or not isinstance(level, (int, float)):
        raise ValidationConfigError(
            f"Validation level must be one of {VALID_LEVELS}, got {level!r}"
        )
    if level not in VALID_LEVELS:
        raise ValidationConfigError(
            f"Validation level must be one of {VALID_LEVELS}, got {level!r}"
        )
    return int(level)


def filter_by_level(
    issues: Sequence[ValidationIssue], level: int
) -> list[ValidationIssue]:
    """Keep issues with severity of at least ``4 - level``."""
    threshold = LEVEL_ALL + 1 - level
    return [i for i in issues if i.severity >= threshold]


def sort_issues(issues: Sequence[ValidationIssue]) -> list[ValidationIssue]:
    """Order issues by source line (stable); issues without a line go last."""
    return sorted(
        issues,
        key=lambda i: (i.source_line_number is None, i.source_line_number or 0),
    )


def _run_check(
    check: RuleCheck, plays: Sequence[Play], rosters: RosterLookup
) -> list[ValidationIssue]:
    issues = check.func(plays, rosters)
    logger.debug("Check %s found %d issue(s)", check.name, len(issues))
    return issues


class MatchValidator:
    """Validator for a parsed volleyball match.

    Checks are independent and read-only, so they can run concurrently on a
    thread pool. Results are merged in registry order once every check has
    finished, which keeps reports identical to a sequential run. An exception
    raised by a check propagates to the caller; no partial report is built.

    Example:
        validator = MatchValidator(level=3, parallel=True)
        issues = validator.validate(match)

        for issue in issues:
            print(f"line {issue.source_line_number}: {issue.message}")
    """

    def __init__(
        self,
        level: int = LEVEL_DEFAULT,
        parallel: bool = False,
        max_workers: int | None = None,
        checks: Sequence[RuleCheck] = RULE_CHECKS,
    ) -> None:
        self.level = check_level(level)
        self.parallel = parallel
        self.max_workers = max_workers
        self.checks = tuple(checks)

    @classmethod
    def from_settings(cls, settings: ValidatorSettings) -> MatchValidator:
        """Build a validator from application settings."""
        return cls(
            level=settings.level,
            parallel=settings.parallel,
            max_workers=settings.max_workers,
        )

    def active_checks(self) -> tuple[RuleCheck, ...]:
        """Checks that run at this validator's level."""
        if self.level == LEVEL_NONE:
            return ()
        return tuple(c for c in self.checks if c.min_level <= self.level)

    def _collect(
        self, plays: Sequence[Play], rosters: RosterLookup
    ) -> list[ValidationIssue]:
        checks = self.active_checks()
        if self.parallel and len(checks) > 1:
            with ThreadPoolExecutor(max_workers=self.max_workers) as pool:
                futures = [
                    pool.submit(_run_check, check, plays, rosters) for check in checks
                ]
                per_check = [future.result() for future in futures]
        else:
            per_check = [_run_check(check, plays, rosters) for check in checks]
        return [issue for issues in per_check for issue in issues]

    def validate(self, match: ParsedMatch) -> list[ValidationIssue]:
        """Validate a match.

        Args:
            match: Parsed match (not modified)

        Returns:
            Issues at or above this level's severity threshold, ordered by
            source line, with source text resolved
        """
        if self.level == LEVEL_NONE:
            return []

        plays = tuple(match.plays)
        rosters = RosterLookup.from_match(match)
        logger.info(
            "Validating match %s: %d plays at level %d",
            match.match_id or "<unnamed>",
            len(plays),
            self.level,
        )

        issues = sort_issues(filter_by_level(self._collect(plays, rosters), self.level))
        logger.info("Validation finished with %d issue(s)", len(issues))
        return [i.with_source_text(match.source_line(i.source_line_number)) for i in issues]

    def summarize(self, match: ParsedMatch) -> ValidationReport:
        """Validate a match and summarize the issues by severity."""
        return ValidationReport.from_issues(
            self.validate(match), level=self.level, match_id=match.match_id
        )


def validate(
    match: ParsedMatch, level: int = LEVEL_DEFAULT, parallel: bool = False
) -> list[ValidationIssue]:
    """Validate a parsed match.

    Args:
        match: Parsed match
        level: 0 (no checks), 1 (major issues only), 2 (also issues likely to
            lead to misinterpretation) or 3 (everything, including minor ones)
        parallel: Run checks on a thread pool

    Returns:
        Ordered list of issues

    Raises:
        ValidationConfigError: If level is not one of 0, 1, 2, 3
    """
    return MatchValidator(level=level, parallel=parallel).validate(match)
