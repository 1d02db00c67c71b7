"""Tests for neighbour access and lineup helpers."""

from __future__ import annotations

from volley_validation.models.plays import Play
from volley_validation.validation.sequence import (
    RosterLookup,
    is_known_lineup,
    nearest_lineup_after,
    nearest_lineup_before,
    next_play,
    previous_play,
    rotate_left,
)


class TestNeighbours:
    """Tests for bounds-checked neighbour access."""

    def test_previous_and_next(self, build_plays):
        plays = build_plays([{"skill": "Serve"}, {"skill": "Reception"}, {"skill": "Set"}])
        assert previous_play(plays, 1).skill == "Serve"
        assert next_play(plays, 1).skill == "Set"
        assert previous_play(plays, 2, offset=2).skill == "Serve"

    def test_out_of_bounds(self, build_plays):
        plays = build_plays([{"skill": "Serve"}])
        assert previous_play(plays, 0) is None
        assert next_play(plays, 0) is None
        assert previous_play((), 0) is None


class TestLineups:
    """Tests for lineup helpers."""

    def test_rotate_left(self):
        assert rotate_left((1, 2, 3, 4, 5, 6)) == (2, 3, 4, 5, 6, 1)

    def test_rotate_left_six_times_is_identity(self):
        lineup = (1, 2, 3, 4, 5, 6)
        rotated = lineup
        for _ in range(6):
            rotated = rotate_left(rotated)
        assert rotated == lineup

    def test_known_lineup(self):
        assert is_known_lineup((1, 2, 3, 4, 5, 6)) is True
        assert is_known_lineup((1, 2, None, 4, 5, 6)) is False
        assert is_known_lineup((1, 2, 3)) is False
        assert is_known_lineup(None) is False

    def test_nearest_lineup_before(self, build_plays):
        plays = build_plays(
            [{"home_lineup": (1, 2, 3, 4, 5, 6)}, {"home_lineup": None}, {}]
        )
        assert nearest_lineup_before(plays, 2, home=True) == (1, 2, 3, 4, 5, 6)
        assert nearest_lineup_before(plays, 2, home=True, reach=1) is None
        assert nearest_lineup_before(plays, 2, home=False) is None

    def test_nearest_lineup_after(self, build_plays):
        plays = build_plays(
            [{}, {"visiting_lineup": None}, {"visiting_lineup": (7, 8, 9, 10, 11, 12)}]
        )
        assert nearest_lineup_after(plays, 0, home=False) == (7, 8, 9, 10, 11, 12)
        assert nearest_lineup_after(plays, 2, home=False) is None


class TestRosterLookup:
    """Tests for acting-team roster resolution."""

    def test_home_play(self, rosters, home_roster):
        play = Play(sequence_index=0, team="H", home_team="H", home_lineup=(1, 2, 3, 4, 5, 6))
        assert rosters.roster_for(play) is home_roster
        assert rosters.liberos_for(play) == frozenset({12})
        assert rosters.lineup_for(play) == (1, 2, 3, 4, 5, 6)

    def test_visiting_play(self, rosters):
        play = Play(sequence_index=0, team="V", home_team="H", visiting_lineup=(11, 12, 13, 14, 15, 16))
        assert rosters.liberos_for(play) == frozenset({20})
        assert rosters.lineup_for(play) == (11, 12, 13, 14, 15, 16)

    def test_unknown_team(self, rosters):
        play = Play(sequence_index=0, team=None, home_team="H")
        assert rosters.roster_for(play) is None
        assert rosters.lineup_for(play) is None

    def test_missing_roster(self):
        play = Play(sequence_index=0, team="H", home_team="H")
        assert RosterLookup().liberos_for(play) is None
