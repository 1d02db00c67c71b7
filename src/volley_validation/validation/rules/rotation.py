"""Rotation and on-court position rules.

Validates plays against the recorded lineups:
- Front-row attacks are not made by back-row players
- Acting players (other than liberos) are on court
- Lineups only change by a single service rotation between rallies
- Substitutions swap exactly the recorded players
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass

from volley_validation.models.plays import Play, Skill, is_technical_timeout
from volley_validation.validation.constants import (
    BACK_ROW_POSITIONS,
    FRONT_ROW_ZONES,
    HOME_TEAM_MARKER,
    ON_COURT_SKILLS,
    SEVERITY_MAJOR,
    SUBSTITUTION_EDGE_ROWS,
    VISITING_TEAM_MARKER,
)
from volley_validation.validation.results import ValidationIssue, make_issue
from volley_validation.validation.sequence import (
    RosterLookup,
    is_known_lineup,
    nearest_lineup_after,
    nearest_lineup_before,
    rotate_left,
    team_lineup,
)

# e.g. "*c02:07" means home player 2 replaced by player 7
SUBSTITUTION_PATTERN = re.compile(
    r"^(?P<marker>[^c\d])?c(?P<outgoing>\d+):(?P<incoming>\d+)"
)


@dataclass(frozen=True, slots=True)
class SubstitutionCode:
    """Parsed substitution compound code."""

    home: bool | None
    outgoing: int
    incoming: int


def parse_substitution_code(code: str | None) -> SubstitutionCode | None:
    """Parse a ``<team>c<outgoing>:<incoming>`` compound code.

    The team marker is "*" for home and "a" for visiting; it may be absent,
    in which case ``home`` is None.

    Returns:
        SubstitutionCode, or None if the code is not a substitution
    """
    if not code:
        return None
    match = SUBSTITUTION_PATTERN.match(code.strip())
    if not match:
        return None
    marker = match.group("marker")
    if marker == VISITING_TEAM_MARKER:
        home: bool | None = False
    elif marker == HOME_TEAM_MARKER:
        home = True
    else:
        home = None
    return SubstitutionCode(
        home=home,
        outgoing=int(match.group("outgoing")),
        incoming=int(match.group("incoming")),
    )


def validate_front_row_attacks(
    plays: Sequence[Play], rosters: RosterLookup
) -> list[ValidationIssue]:
    """Attacks from zones 2-4 must be made by a front-row player."""
    issues: list[ValidationIssue] = []
    for play in plays:
        if play.skill != Skill.ATTACK or play.start_zone not in FRONT_ROW_ZONES:
            continue
        if play.player_number is None:
            continue
        lineup = rosters.lineup_for(play)
        if lineup is None or len(lineup) < max(BACK_ROW_POSITIONS):
            continue
        back_row = {lineup[pos - 1] for pos in BACK_ROW_POSITIONS}
        if play.player_number in back_row:
            issues.append(
                make_issue(
                    rule_name="front_row_attack",
                    message="Player making a front row attack is in the back row",
                    source_line_number=play.source_line_number,
                    severity=SEVERITY_MAJOR,
                )
            )
    return issues


def validate_on_court(
    plays: Sequence[Play], rosters: RosterLookup
) -> list[ValidationIssue]:
    """The acting player must be in their team's current lineup.

    Liberos are exempt. Plays whose team has no roster are skipped, since
    liberos cannot be identified without one.
    """
    issues: list[ValidationIssue] = []
    for play in plays:
        if play.skill not in ON_COURT_SKILLS or play.player_number is None:
            continue
        liberos = rosters.liberos_for(play)
        if liberos is None or play.player_number in liberos:
            continue
        lineup = rosters.lineup_for(play)
        if not is_known_lineup(lineup):
            continue
        if play.player_number not in lineup:
            issues.append(
                make_issue(
                    rule_name="player_on_court",
                    message="The listed player is not on court in this rotation",
                    source_line_number=play.source_line_number,
                    severity=SEVERITY_MAJOR,
                )
            )
    return issues


def _validate_team_rotation(plays: Sequence[Play], home: bool) -> list[ValidationIssue]:
    label = "Home" if home else "Visiting"
    rallies = [p for p in plays if not is_technical_timeout(p.skill)]
    issues: list[ValidationIssue] = []
    for prev, curr in zip(rallies, rallies[1:]):
        if curr.substitution:
            continue
        prev_lineup = team_lineup(prev, home)
        curr_lineup = team_lineup(curr, home)
        if not (is_known_lineup(prev_lineup) and is_known_lineup(curr_lineup)):
            continue
        if prev_lineup == curr_lineup:
            continue
        if rotate_left(prev_lineup) != curr_lineup:
            issues.append(
                make_issue(
                    rule_name="rotation_continuity",
                    message=f"{label} team rotation has changed incorrectly",
                    source_line_number=curr.source_line_number,
                    severity=SEVERITY_MAJOR,
                )
            )
    return issues


def validate_rotations(
    plays: Sequence[Play], rosters: RosterLookup
) -> list[ValidationIssue]:
    """Lineup changes outside substitutions must be a single left rotation."""
    return _validate_team_rotation(plays, home=True) + _validate_team_rotation(
        plays, home=False
    )


def validate_substitutions(
    plays: Sequence[Play], rosters: RosterLookup
) -> list[ValidationIssue]:
    """Lineups either side of a substitution must reflect the recorded swap."""
    issues: list[ValidationIssue] = []
    last = len(plays) - SUBSTITUTION_EDGE_ROWS
    for k in range(SUBSTITUTION_EDGE_ROWS, last):
        play = plays[k]
        if not play.substitution:
            continue
        code = parse_substitution_code(play.compound_code)
        if code is None:
            continue
        home = code.home
        if home is None:
            home = play.is_home_action is not False

        before = nearest_lineup_before(plays, k, home)
        after = nearest_lineup_after(plays, k, home)
        if before is None or after is None:
            continue

        if before == after:
            issues.append(
                make_issue(
                    rule_name="substitution_lineup",
                    message=(
                        "player lineup did not change after substitution: "
                        "was the sub recorded incorrectly?"
                    ),
                    source_line_number=play.source_line_number,
                    severity=SEVERITY_MAJOR,
                )
            )
            continue

        if (
            code.outgoing not in before
            or code.incoming not in after
            or code.incoming in before
            or code.outgoing in after
        ):
            issues.append(
                make_issue(
                    rule_name="substitution_lineup",
                    message=(
                        "Player lineup conflicts with recorded substitution: "
                        "was the sub recorded incorrectly?"
                    ),
                    source_line_number=play.source_line_number,
                    severity=SEVERITY_MAJOR,
                )
            )
    return issues
