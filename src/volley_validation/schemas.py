"""Parsed-match interchange Pydantic schemas.

The scouting-file parser is an external tool. These schemas describe the
JSON document it hands over (plays, team sheets and the raw source lines)
and convert it into the immutable ``ParsedMatch`` model.

Example usage:
    match = load_match_file(Path("match.json"))
"""

from __future__ import annotations

import json
import logging
from dataclasses import replace
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError

from volley_validation.models.plays import (
    ParsedMatch,
    Play,
    RosterPlayer,
    TeamRoster,
)

logger = logging.getLogger(__name__)


class MatchLoadError(Exception):
    """Raised when a parsed-match document cannot be read or validated."""


# =============================================================================
# Rosters
# =============================================================================


class RosterPlayerPayload(BaseModel):
    """Player on a team sheet."""

    number: int = Field(description="Jersey number")
    name: str = Field(default="", description="Player display name")
    special_role: str | None = Field(
        default=None, description="Role flags, 'L' marks a libero"
    )


class TeamRosterPayload(BaseModel):
    """Team sheet for one side."""

    team: str = Field(description="Team identifier as used in plays")
    players: list[RosterPlayerPayload] = Field(default_factory=list)

    def to_model(self) -> TeamRoster:
        return TeamRoster(
            team=self.team,
            players=tuple(
                RosterPlayer(
                    number=p.number, name=p.name, special_role=p.special_role
                )
                for p in self.players
            ),
        )


# =============================================================================
# Plays
# =============================================================================


class PlayPayload(BaseModel):
    """A single play row as produced by the parser."""

    sequence_index: int | None = Field(
        default=None, description="Position in the log (defaults to list order)"
    )
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
    home_lineup: list[int | None] | None = Field(
        default=None, description="Home players by rotation position 1-6"
    )
    visiting_lineup: list[int | None] | None = Field(
        default=None, description="Visiting players by rotation position 1-6"
    )
    source_line_number: int | None = None

    def to_model(self, position: int) -> Play:
        data = self.model_dump()
        data["sequence_index"] = (
            self.sequence_index if self.sequence_index is not None else position
        )
        for key in ("home_lineup", "visiting_lineup"):
            if data[key] is not None:
                data[key] = tuple(data[key])
        return Play(**data)


# =============================================================================
# Match
# =============================================================================


class MatchPayload(BaseModel):
    """Complete parsed match document."""

    match_id: str | None = Field(default=None, description="Match identifier")
    plays: list[PlayPayload] = Field(default_factory=list)
    home_roster: TeamRosterPayload | None = None
    visiting_roster: TeamRosterPayload | None = None
    raw_lines: list[str] = Field(
        default_factory=list, description="Original scouting file lines"
    )

    def to_model(self) -> ParsedMatch:
        plays = [p.to_model(i) for i, p in enumerate(self.plays)]
        plays.sort(key=lambda p: p.sequence_index)
        return ParsedMatch(
            plays=tuple(plays),
            home_roster=self.home_roster.to_model() if self.home_roster else None,
            visiting_roster=(
                self.visiting_roster.to_model() if self.visiting_roster else None
            ),
            raw_lines=tuple(self.raw_lines),
            match_id=self.match_id,
        )


def load_match_file(path: Path) -> ParsedMatch:
    """Load a parsed match from a JSON document.

    Args:
        path: JSON file written by the scouting-file parser

    Returns:
        ParsedMatch

    Raises:
        MatchLoadError: If the file is missing, not JSON, or fails the schema
    """
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise MatchLoadError(f"Cannot read match file {path}: {e}") from e

    try:
        payload = MatchPayload.model_validate(raw)
    except ValidationError as e:
        raise MatchLoadError(f"Invalid match document {path}: {e}") from e

    match = payload.to_model()
    if match.match_id is None:
        match = replace(match, match_id=path.stem)
    logger.debug("Loaded %d plays from %s", len(match.plays), path)
    return match
