"""Shared pytest fixtures for volley_validation tests.

Fixtures are organized into categories:
- Play log builders (plays and matches from row dicts)
- Sample rosters
- Settings isolation

Usage:
    # In any test file, fixtures are automatically available:
    def test_example(build_plays):
        plays = build_plays([{"skill": "Serve"}, {"skill": "Reception"}])
        assert plays[1].source_line_number == 2
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any

import pytest

from volley_validation.config import get_settings
from volley_validation.models.plays import (
    ParsedMatch,
    Play,
    RosterPlayer,
    TeamRoster,
)
from volley_validation.validation.sequence import RosterLookup

HOME = "H"
VISITING = "V"

HOME_LINEUP = (1, 2, 3, 4, 5, 6)
VISITING_LINEUP = (11, 12, 13, 14, 15, 16)


# =============================================================================
# Play Log Builders
# =============================================================================


def _build_plays(rows: list[dict[str, Any]]) -> tuple[Play, ...]:
    """Build plays from row dicts.

    Each row defaults to a home-team play with ``sequence_index`` set to its
    position and ``source_line_number`` to position + 1.
    """
    plays = []
    for i, row in enumerate(rows):
        data: dict[str, Any] = {
            "sequence_index": i,
            "source_line_number": i + 1,
            "team": HOME,
            "home_team": HOME,
        }
        data.update(row)
        plays.append(Play(**data))
    return tuple(plays)


@pytest.fixture
def build_plays() -> Callable[[list[dict[str, Any]]], tuple[Play, ...]]:
    """Factory fixture building a play log from row dicts.

    Usage:
        def test_example(build_plays):
            plays = build_plays([{"skill": "Serve", "player_number": 7}])
    """
    return _build_plays


@pytest.fixture
def build_match(
    home_roster: TeamRoster, visiting_roster: TeamRoster
) -> Callable[..., ParsedMatch]:
    """Factory fixture building a ParsedMatch with sample rosters.

    Raw source lines default to "line <n>" for every play.

    Usage:
        def test_example(build_match):
            match = build_match([{"skill": "Serve"}], with_rosters=False)
    """

    def _build(
        rows: list[dict[str, Any]],
        with_rosters: bool = True,
        raw_lines: tuple[str, ...] | None = None,
        match_id: str | None = "test-match",
    ) -> ParsedMatch:
        plays = _build_plays(rows)
        if raw_lines is None:
            raw_lines = tuple(f"line {i + 1}" for i in range(len(plays)))
        return ParsedMatch(
            plays=plays,
            home_roster=home_roster if with_rosters else None,
            visiting_roster=visiting_roster if with_rosters else None,
            raw_lines=raw_lines,
            match_id=match_id,
        )

    return _build


# =============================================================================
# Roster Fixtures
# =============================================================================


@pytest.fixture
def home_roster() -> TeamRoster:
    """Home team sheet: players 1-12, number 12 is the libero."""
    players = [RosterPlayer(number=n, name=f"Home {n}") for n in range(1, 12)]
    players.append(RosterPlayer(number=12, name="Home Libero", special_role="L"))
    return TeamRoster(team=HOME, players=tuple(players))


@pytest.fixture
def visiting_roster() -> TeamRoster:
    """Visiting team sheet: players 11-22, number 20 is a libero captain."""
    players = [
        RosterPlayer(
            number=n,
            name=f"Visiting {n}",
            special_role="LC" if n == 20 else None,
        )
        for n in range(11, 23)
    ]
    return TeamRoster(team=VISITING, players=tuple(players))


@pytest.fixture
def rosters(home_roster: TeamRoster, visiting_roster: TeamRoster) -> RosterLookup:
    """Roster lookup with both sample team sheets."""
    return RosterLookup(home_roster=home_roster, visiting_roster=visiting_roster)


@pytest.fixture
def no_rosters() -> RosterLookup:
    """Roster lookup with no team sheets."""
    return RosterLookup()


# =============================================================================
# Settings Isolation
# =============================================================================


@pytest.fixture
def clean_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Clear VOLLEY_VALIDATION_* variables and the settings cache."""
    for name in (
        "VOLLEY_VALIDATION_LEVEL",
        "VOLLEY_VALIDATION_PARALLEL",
        "VOLLEY_VALIDATION_MAX_WORKERS",
        "VOLLEY_VALIDATION_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
