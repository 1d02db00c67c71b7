"""Neighbour access and lineup helpers shared by rule checks.

Checks treat the play log as an immutable sequence and address neighbours
by index. Every helper here is bounds-checked and returns None rather than
raising when a neighbour or lineup is unavailable.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from volley_validation.models.plays import (
    LINEUP_SIZE,
    Lineup,
    ParsedMatch,
    Play,
    TeamRoster,
)


def previous_play(plays: Sequence[Play], index: int, offset: int = 1) -> Play | None:
    """Play ``offset`` records before ``index``, or None at the start of the log."""
    target = index - offset
    if target < 0 or target >= len(plays):
        return None
    return plays[target]


def next_play(plays: Sequence[Play], index: int, offset: int = 1) -> Play | None:
    """Play ``offset`` records after ``index``, or None at the end of the log."""
    target = index + offset
    if target < 0 or target >= len(plays):
        return None
    return plays[target]


def is_known_lineup(lineup: Lineup | None) -> bool:
    """Whether a lineup has all six positions filled."""
    return (
        lineup is not None
        and len(lineup) == LINEUP_SIZE
        and all(p is not None for p in lineup)
    )


def rotate_left(lineup: Lineup) -> Lineup:
    """Advance a lineup by one service rotation.

    The player in position 2 moves to position 1, and position 1 wraps to
    position 6.
    """
    if not lineup:
        return lineup
    return tuple(lineup[1:]) + (lineup[0],)


def team_lineup(play: Play | None, home: bool) -> Lineup | None:
    if play is None:
        return None
    return play.home_lineup if home else play.visiting_lineup


def nearest_lineup_before(
    plays: Sequence[Play], index: int, home: bool, reach: int = 2
) -> Lineup | None:
    """Closest fully known lineup up to ``reach`` records before ``index``."""
    for offset in range(1, reach + 1):
        lineup = team_lineup(previous_play(plays, index, offset), home)
        if is_known_lineup(lineup):
            return lineup
    return None


def nearest_lineup_after(
    plays: Sequence[Play], index: int, home: bool, reach: int = 2
) -> Lineup | None:
    """Closest fully known lineup up to ``reach`` records after ``index``."""
    for offset in range(1, reach + 1):
        lineup = team_lineup(next_play(plays, index, offset), home)
        if is_known_lineup(lineup):
            return lineup
    return None


@dataclass(frozen=True)
class RosterLookup:
    """Roster capability injected into checks.

    Resolves the acting team of a play to its lineup and its libero numbers.
    A missing roster resolves to None so that checks needing it can skip.
    """

    home_roster: TeamRoster | None = None
    visiting_roster: TeamRoster | None = None

    @classmethod
    def from_match(cls, match: ParsedMatch) -> RosterLookup:
        return cls(home_roster=match.home_roster, visiting_roster=match.visiting_roster)

    def roster_for(self, play: Play) -> TeamRoster | None:
        is_home = play.is_home_action
        if is_home is None:
            return None
        return self.home_roster if is_home else self.visiting_roster

    def liberos_for(self, play: Play) -> frozenset[int] | None:
        roster = self.roster_for(play)
        if roster is None:
            return None
        return roster.liberos

    def lineup_for(self, play: Play) -> Lineup | None:
        return play.acting_lineup
