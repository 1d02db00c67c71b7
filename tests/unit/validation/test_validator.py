"""Tests for the MatchValidator orchestrator."""

from __future__ import annotations

import pytest

from volley_validation.config import ValidatorSettings
from volley_validation.validation import (
    RULE_CHECKS,
    MatchValidator,
    RuleCheck,
    ValidationConfigError,
    ValidationReport,
    check_level,
    filter_by_level,
    make_issue,
    validate,
)
from volley_validation.validation.validator import sort_issues

# Line 2 raises a severity-2 type mismatch and a severity-1 zone mismatch,
# line 4 repeats line 3 (severity 3).
MIXED_ROWS = [
    {
        "skill": "Serve",
        "player_number": 7,
        "skill_type": "Float serve",
        "evaluation_code": "+",
        "start_zone": 1,
        "end_zone": 6,
    },
    {
        "skill": "Reception",
        "team": "V",
        "player_number": 11,
        "skill_type": "Jump serve reception",
        "evaluation_code": "#",
        "start_zone": 1,
        "end_zone": 5,
    },
    {"skill": "Attack", "team": "V", "player_number": 12, "evaluation_code": "-"},
    {"skill": "Attack", "team": "V", "player_number": 12, "evaluation_code": "-"},
]


class TestCheckLevel:
    """Tests for validation level checking."""

    @pytest.mark.parametrize("level", [0, 1, 2, 3])
    def test_valid_levels(self, level):
        assert check_level(level) == level

    def test_integral_float_accepted(self):
        assert check_level(2.0) == 2

    @pytest.mark.parametrize("level", [-1, 4, 2.5, "2", None, True, False])
    def test_invalid_levels(self, level):
        with pytest.raises(ValidationConfigError):
            check_level(level)

    def test_validate_rejects_invalid_level(self, build_match):
        with pytest.raises(ValidationConfigError):
            validate(build_match(MIXED_ROWS), level=5)

    def test_config_error_is_value_error(self):
        with pytest.raises(ValueError):
            MatchValidator(level=9)


class TestLevels:
    """Tests for severity filtering by level."""

    def test_level_zero_returns_nothing(self, build_match):
        assert validate(build_match(MIXED_ROWS), level=0) == []

    def test_level_zero_runs_no_checks(self, build_match):
        calls = []

        def recording_check(plays, rosters):
            calls.append(len(plays))
            return []

        validator = MatchValidator(
            level=0, checks=[RuleCheck("recording", recording_check)]
        )
        assert validator.validate(build_match(MIXED_ROWS)) == []
        assert calls == []

    def test_level_three_keeps_everything(self, build_match):
        issues = validate(build_match(MIXED_ROWS), level=3)
        assert [i.severity for i in issues] == [2, 1, 3]

    def test_level_two_drops_minor(self, build_match):
        issues = validate(build_match(MIXED_ROWS), level=2)
        assert [i.severity for i in issues] == [2, 3]

    def test_level_one_keeps_major_only(self, build_match):
        issues = validate(build_match(MIXED_ROWS), level=1)
        assert [i.severity for i in issues] == [3]
        assert issues[0].rule_name == "duplicate_row"

    def test_reports_shrink_with_level(self, build_match):
        match = build_match(MIXED_ROWS)
        full = validate(match, level=3)
        for level in (1, 2):
            report = validate(match, level=level)
            assert all(i in full for i in report)
            assert report == [i for i in full if i.severity >= 4 - level]

    def test_type_propagation_only_at_level_three(self, build_match):
        match = build_match(
            [
                {"skill": "Set", "skill_type": "High ball set"},
                {"skill": "Attack", "skill_type": "Head ball attack"},
            ]
        )
        assert validate(match, level=2) == []
        issues = validate(match, level=3)
        assert [i.rule_name for i in issues] == ["attack_type_match"]

    def test_filter_by_level(self):
        issues = [make_issue("r", "m", 1, severity=s) for s in (1, 2, 3)]
        assert [i.severity for i in filter_by_level(issues, 2)] == [2, 3]
        assert filter_by_level(issues, 0) == []


class TestOrdering:
    """Tests for report ordering and determinism."""

    def test_sorted_by_source_line(self, build_match):
        match = build_match(
            [
                {"skill": "Set"},
                {"skill": "Reception"},
                {"skill": "Attack", "evaluation_code": "#", "player_number": 4},
                {"skill": "Attack", "evaluation_code": "#", "player_number": 4},
                {"skill": "Reception"},
            ]
        )
        lines = [i.source_line_number for i in validate(match, level=3)]
        assert lines == sorted(lines)
        assert lines == [2, 4, 5]

    def test_missing_line_numbers_last(self):
        issues = [
            make_issue("a", "m", None),
            make_issue("b", "m", 5),
            make_issue("c", "m", 2),
        ]
        assert [i.rule_name for i in sort_issues(issues)] == ["c", "b", "a"]

    def test_idempotent(self, build_match):
        match = build_match(MIXED_ROWS)
        assert validate(match, level=3) == validate(match, level=3)

    def test_parallel_matches_sequential(self, build_match):
        match = build_match(MIXED_ROWS)
        sequential = MatchValidator(level=3, parallel=False).validate(match)
        parallel = MatchValidator(level=3, parallel=True, max_workers=4).validate(match)
        assert parallel == sequential

    def test_input_not_modified(self, build_match):
        match = build_match(MIXED_ROWS)
        before = match.plays
        validate(match, level=3)
        assert match.plays == before


class TestIssueResolution:
    """Tests for source line text and check isolation."""

    def test_source_line_text_resolved(self, build_match):
        raw = ("*P01", "a02RM+", "a11RQ#", "a12AH-", "a12AH-")
        match = build_match(
            [{"skill": "Set"}, {"skill": "Reception"}],
            raw_lines=raw,
        )
        issues = validate(match, level=3)
        assert len(issues) == 1
        assert issues[0].source_line_number == 2
        assert issues[0].source_line_text == "a02RM+"

    def test_line_outside_source_has_no_text(self, build_match):
        match = build_match([{"skill": "Reception"}], raw_lines=())
        issues = validate(match, level=3)
        assert issues[0].source_line_text is None

    @pytest.mark.parametrize("parallel", [False, True])
    def test_failing_check_aborts_run(self, build_match, parallel):
        def broken_check(plays, rosters):
            raise RuntimeError("boom")

        checks = [*RULE_CHECKS, RuleCheck("broken", broken_check)]
        validator = MatchValidator(level=3, parallel=parallel, checks=checks)
        with pytest.raises(RuntimeError, match="boom"):
            validator.validate(build_match([{"skill": "Reception"}]))

    def test_empty_match(self, build_match):
        assert validate(build_match([]), level=3) == []


class TestMatchValidator:
    """Tests for validator construction and summaries."""

    def test_active_checks_by_level(self):
        level_two = {c.name for c in MatchValidator(level=2).active_checks()}
        level_three = {c.name for c in MatchValidator(level=3).active_checks()}
        assert "reception_zone_match" not in level_two
        assert "reception_zone_match" in level_three
        assert level_two < level_three
        assert MatchValidator(level=0).active_checks() == ()

    def test_summarize(self, build_match):
        report = MatchValidator(level=3).summarize(build_match(MIXED_ROWS))
        assert isinstance(report, ValidationReport)
        assert report.total == 3
        assert (report.major, report.default, report.minor) == (1, 1, 1)
        assert report.match_id == "test-match"
        assert report.passed is False

    def test_from_settings(self):
        settings = ValidatorSettings(level=1, parallel=False, max_workers=2)
        validator = MatchValidator.from_settings(settings)
        assert validator.level == 1
        assert validator.parallel is False
        assert validator.max_workers == 2
