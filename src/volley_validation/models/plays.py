"""Data models for a parsed volleyball scouting log.

This module defines the play records, roster metadata and match container
that the validation engine reads. Instances are produced by the external
scouting-file parser (or loaded from JSON via ``volley_validation.schemas``)
and are never mutated during validation.

Example usage:
    serve = Play(
        sequence_index=0,
        skill=Skill.SERVE,
        skill_type="Jump-float serve",
        evaluation_code="+",
        team="H",
        home_team="H",
        player_number=7,
        home_lineup=(7, 2, 3, 4, 5, 6),
        source_line_number=12,
    )

    match = ParsedMatch(
        plays=(serve, ...),
        home_roster=TeamRoster(team="H", players=(...)),
        visiting_roster=TeamRoster(team="V", players=(...)),
        raw_lines=("...", ...),
    )

    text = match.source_line(12)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

# Lineup of six jersey numbers in rotation position order (position 1 first)
Lineup = tuple[int | None, ...]

LINEUP_SIZE = 6
LIBERO_ROLE = "L"


class Skill(str, Enum):
    """Skill categories recorded in a scouting log."""

    SERVE = "Serve"
    RECEPTION = "Reception"
    SET = "Set"
    ATTACK = "Attack"
    BLOCK = "Block"
    DIG = "Dig"
    FREEBALL = "Freeball"
    TECHNICAL_TIMEOUT = "Technical timeout"
    OTHER = "Other"


def is_technical_timeout(skill: str | None) -> bool:
    """Whether a skill label denotes a technical timeout (case-insensitive)."""
    return skill is not None and skill.lower() == Skill.TECHNICAL_TIMEOUT.value.lower()


@dataclass(frozen=True, slots=True)
class Play:
    """A single recorded action in the rally log.

    Frozen and slotted; a match log holds one of these per scouted action.

    Attributes:
        sequence_index: Position in the ordered log
        skill: Skill label (see ``Skill``), None for non-skill rows
        skill_type: Free-form subtype, e.g. "Jump-float serve"
        evaluation_code: Short outcome code ("#", "=", "/", ...)
        evaluation: Human-readable outcome label for ``evaluation_code``
        team: Acting team identifier
        home_team: Identifier of the home team for this rally
        player_number: Jersey number of the acting player
        start_zone: Court zone 1-9 where the action started
        end_zone: Court zone 1-9 where the action ended
        end_subzone: Finer end position code (e.g. "A", "B")
        num_players: Recorded blocker count for an attack, or "No block"
        home_team_score: Home score at the time of this play
        visiting_team_score: Visiting score at the time of this play
        set_number: Current set
        substitution: True if this row records a substitution
        compound_code: Raw short code for substitutions ("*c02:07")
        point_won_by: Team credited with the point of this rally
        home_lineup: Home players by rotation position 1-6
        visiting_lineup: Visiting players by rotation position 1-6
        source_line_number: 1-based line in the original scouting file
    """

    sequence_index: int
    skill: str | None = None
    skill_type: str | None = None
    evaluation_code: str | None = None
    evaluation: str | None = None
    team: str | None = None
    home_team: str | None = None
    player_number: int | None = None
    start_zone: int | None = None
    end_zone: int | None = None
    end_subzone: str | None = None
    num_players: str | None = None
    home_team_score: int | None = None
    visiting_team_score: int | None = None
    set_number: int | None = None
    substitution: bool = False
    compound_code: str | None = None
    point_won_by: str | None = None
    home_lineup: Lineup | None = None
    visiting_lineup: Lineup | None = None
    source_line_number: int | None = None

    @property
    def is_home_action(self) -> bool | None:
        """True if the home team acted, None if either team field is missing."""
        if self.team is None or self.home_team is None:
            return None
        return self.team == self.home_team

    @property
    def acting_lineup(self) -> Lineup | None:
        """Lineup of the team that made this play."""
        is_home = self.is_home_action
        if is_home is None:
            return None
        return self.home_lineup if is_home else self.visiting_lineup


@dataclass(frozen=True, slots=True)
class RosterPlayer:
    """Player listed on a team sheet.

    Attributes:
        number: Jersey number
        name: Display name
        special_role: Role flags from the team sheet ("L" marks a libero,
            "C" a captain, and so on)
    """

    number: int
    name: str = ""
    special_role: str | None = None

    @property
    def is_libero(self) -> bool:
        return self.special_role is not None and LIBERO_ROLE in self.special_role


@dataclass(frozen=True)
class TeamRoster:
    """Team sheet for one side of the match."""

    team: str
    players: tuple[RosterPlayer, ...] = ()

    @property
    def numbers(self) -> frozenset[int]:
        return frozenset(p.number for p in self.players)

    @property
    def liberos(self) -> frozenset[int]:
        """Jersey numbers of players flagged as liberos."""
        return frozenset(p.number for p in self.players if p.is_libero)


@dataclass(frozen=True)
class ParsedMatch:
    """A parsed match: ordered plays, rosters and the original source text.

    Attributes:
        plays: Plays ordered by ``sequence_index``
        home_roster: Home team sheet, None if the parser found none
        visiting_roster: Visiting team sheet, None if the parser found none
        raw_lines: Lines of the original scouting file, used for diagnostics
        match_id: Optional identifier for logging and reports
    """

    plays: tuple[Play, ...] = ()
    home_roster: TeamRoster | None = None
    visiting_roster: TeamRoster | None = None
    raw_lines: tuple[str, ...] = field(default=(), repr=False)
    match_id: str | None = None

    def source_line(self, line_number: int | None) -> str | None:
        """Return the original text of a 1-based source line, if available."""
        if line_number is None or line_number < 1 or line_number > len(self.raw_lines):
            return None
        return self.raw_lines[line_number - 1]
