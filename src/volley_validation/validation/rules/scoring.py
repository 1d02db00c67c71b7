"""Scoring and outcome rules.

Validates that rally outcomes are consistent:
- Blocked attacks record the number of blockers
- Errors give the point to the opponent
- Winning plays give the point to the acting team
- Scores move by at most one point per row
- Rows are not accidentally entered twice
"""

from __future__ import annotations

from collections.abc import Sequence

from volley_validation.models.plays import Play, Skill
from volley_validation.validation.constants import (
    EVAL_BLOCK_INVASION,
    EVAL_ERROR,
    EVAL_WINNING,
    NO_BLOCK,
    POINT_WINNING_SKILLS,
    SEVERITY_MAJOR,
    SEVERITY_MINOR,
)
from volley_validation.validation.results import ValidationIssue, make_issue
from volley_validation.validation.sequence import RosterLookup, previous_play


def validate_blocker_count(
    plays: Sequence[Play], rosters: RosterLookup
) -> list[ValidationIssue]:
    """An attack followed by an opposing block must record its blockers.

    Issues are reported on the attack row.
    """
    issues: list[ValidationIssue] = []
    for i, play in enumerate(plays):
        if play.skill != Skill.BLOCK:
            continue
        attack = previous_play(plays, i)
        if attack is None or attack.skill != Skill.ATTACK:
            continue
        if attack.team is None or play.team is None or attack.team == play.team:
            continue
        if attack.num_players is None:
            issues.append(
                make_issue(
                    rule_name="blocker_count",
                    message=(
                        "Attack (which was blocked) does not have number of "
                        "blockers recorded"
                    ),
                    source_line_number=attack.source_line_number,
                    severity=SEVERITY_MINOR,
                )
            )
        elif attack.num_players == NO_BLOCK:
            issues.append(
                make_issue(
                    rule_name="blocker_count",
                    message=(
                        "Attack (which was followed by a block) has "
                        f'"{NO_BLOCK}" recorded for number of players'
                    ),
                    source_line_number=attack.source_line_number,
                    severity=SEVERITY_MAJOR,
                )
            )
    return issues


def _is_error(play: Play) -> bool:
    if play.evaluation_code == EVAL_ERROR:
        return True
    return play.skill == Skill.BLOCK and play.evaluation_code == EVAL_BLOCK_INVASION


def validate_error_points(
    plays: Sequence[Play], rosters: RosterLookup
) -> list[ValidationIssue]:
    """Errors (and block invasions) must give the point to the opponent."""
    issues: list[ValidationIssue] = []
    for play in plays:
        if not _is_error(play) or play.team is None:
            continue
        if play.point_won_by == play.team:
            issues.append(
                make_issue(
                    rule_name="error_point_attribution",
                    message=(
                        "Point awarded to incorrect team following error "
                        '(or "error" evaluation incorrect)'
                    ),
                    source_line_number=play.source_line_number,
                    severity=SEVERITY_MAJOR,
                )
            )
    return issues


def validate_winning_points(
    plays: Sequence[Play], rosters: RosterLookup
) -> list[ValidationIssue]:
    """Aces, winning attacks and stuff blocks must score for the acting team."""
    issues: list[ValidationIssue] = []
    for play in plays:
        if play.skill not in POINT_WINNING_SKILLS:
            continue
        if play.evaluation_code != EVAL_WINNING:
            continue
        if play.team is None or play.point_won_by is None:
            continue
        if play.point_won_by != play.team:
            label = play.evaluation or play.evaluation_code
            issues.append(
                make_issue(
                    rule_name="winning_point_attribution",
                    message=(
                        f'Point awarded to incorrect team (or "{label}" '
                        "evaluation incorrect)"
                    ),
                    source_line_number=play.source_line_number,
                    severity=SEVERITY_MAJOR,
                )
            )
    return issues


def _diff(prev: int | None, curr: int | None) -> int | None:
    if prev is None or curr is None:
        return None
    return curr - prev


def validate_score_sequence(
    plays: Sequence[Play], rosters: RosterLookup
) -> list[ValidationIssue]:
    """Scores may rise by at most one per row and only fall at a new set.

    A fall is accepted whenever the set number goes up (or is unknown); the
    new set's scores are not required to restart at zero. The issue is
    reported on the earlier of the two rows.
    """
    issues: list[ValidationIssue] = []
    for i in range(1, len(plays)):
        prev, curr = plays[i - 1], plays[i]
        score_diffs = [
            d
            for d in (
                _diff(prev.home_team_score, curr.home_team_score),
                _diff(prev.visiting_team_score, curr.visiting_team_score),
            )
            if d is not None
        ]
        if not score_diffs:
            continue
        set_diff = _diff(prev.set_number, curr.set_number)
        new_set = set_diff is None or set_diff > 0
        jumped = any(d > 1 for d in score_diffs)
        dropped = any(d < 0 for d in score_diffs)
        if jumped or (dropped and not new_set):
            issues.append(
                make_issue(
                    rule_name="score_sequence",
                    message=(
                        "Scores do not follow proper sequence (note that the "
                        "error may be in the point after this one)"
                    ),
                    source_line_number=prev.source_line_number,
                    severity=SEVERITY_MAJOR,
                )
            )
    return issues


def _duplicate_key(play: Play) -> tuple[str, str, str, int] | None:
    if (
        play.skill is None
        or play.evaluation_code is None
        or play.team is None
        or play.player_number is None
    ):
        return None
    return (play.skill, play.evaluation_code, play.team, play.player_number)


def validate_duplicate_rows(
    plays: Sequence[Play], rosters: RosterLookup
) -> list[ValidationIssue]:
    """Flag a row repeating its predecessor's skill, evaluation, team and player."""
    issues: list[ValidationIssue] = []
    for i in range(1, len(plays)):
        key = _duplicate_key(plays[i])
        if key is not None and key == _duplicate_key(plays[i - 1]):
            issues.append(
                make_issue(
                    rule_name="duplicate_row",
                    message=(
                        "Repeated row with same skill and evaluation_code for "
                        "the same player"
                    ),
                    source_line_number=plays[i].source_line_number,
                    severity=SEVERITY_MAJOR,
                )
            )
    return issues
