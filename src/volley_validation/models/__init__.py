"""Data models for parsed volleyball matches."""

from volley_validation.models.plays import (
    LIBERO_ROLE,
    LINEUP_SIZE,
    Lineup,
    ParsedMatch,
    Play,
    RosterPlayer,
    Skill,
    TeamRoster,
    is_technical_timeout,
)

__all__ = [
    "LIBERO_ROLE",
    "LINEUP_SIZE",
    "Lineup",
    "ParsedMatch",
    "Play",
    "RosterPlayer",
    "Skill",
    "TeamRoster",
    "is_technical_timeout",
]
