"""Skill-to-skill adjacency rules.

Compares each play with its immediate predecessor in the full log:
- Receptions follow a serve
- Reception subtype matches the serve subtype
- Reception zones match the serve zones
- Attack/block/dig subtypes follow the upstream set or attack subtype
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence

from volley_validation.models.plays import Play, Skill
from volley_validation.validation.constants import (
    SEVERITY_DEFAULT,
    SEVERITY_MAJOR,
    RECEPTION_TYPE_SUFFIX,
    SEVERITY_MINOR,
    SKILL_TYPE_SUFFIXES,
    UNKNOWN_TYPE_PREFIX,
)
from volley_validation.validation.results import ValidationIssue, make_issue
from volley_validation.validation.sequence import RosterLookup, previous_play

# (attribute, label) pairs compared between a serve and its reception
ZONE_ATTRIBUTES = (
    ("start_zone", "start zone"),
    ("end_zone", "end zone"),
    ("end_subzone", "end sub-zone"),
)


def expected_skill_type(
    upstream: Skill, downstream: Skill, upstream_type: str
) -> str | None:
    """Subtype the downstream skill should carry given the upstream subtype.

    Example:
        >>> expected_skill_type(Skill.SET, Skill.ATTACK, "High ball set")
        'High ball attack'

    Returns:
        Expected subtype, or None if the skill pair has no mapping
    """
    if (upstream, downstream) == (Skill.SERVE, Skill.RECEPTION):
        return upstream_type + RECEPTION_TYPE_SUFFIX
    words = SKILL_TYPE_SUFFIXES.get((upstream, downstream))
    if words is None:
        return None
    word, replacement = words
    return upstream_type.replace(word, replacement)


def _is_unknown_type(skill_type: str) -> bool:
    return skill_type.startswith(UNKNOWN_TYPE_PREFIX)


def _serve_reception_pairs(plays: Sequence[Play]) -> Iterator[tuple[Play, Play]]:
    """Yield (serve, reception) for every reception directly after a serve."""
    for i, play in enumerate(plays):
        if play.skill != Skill.RECEPTION:
            continue
        prev = previous_play(plays, i)
        if prev is not None and prev.skill == Skill.SERVE:
            yield prev, play


def validate_reception_after_serve(
    plays: Sequence[Play], rosters: RosterLookup
) -> list[ValidationIssue]:
    """Every reception must be immediately preceded by a serve."""
    issues: list[ValidationIssue] = []
    for i, play in enumerate(plays):
        if play.skill != Skill.RECEPTION:
            continue
        prev = previous_play(plays, i)
        if prev is None or prev.skill != Skill.SERVE:
            issues.append(
                make_issue(
                    rule_name="reception_after_serve",
                    message="Reception was not preceded by a serve",
                    source_line_number=play.source_line_number,
                    severity=SEVERITY_MAJOR,
                )
            )
    return issues


def validate_reception_type(
    plays: Sequence[Play], rosters: RosterLookup
) -> list[ValidationIssue]:
    """Reception subtype must be the serve subtype's reception counterpart.

    "Unknown ..." placeholders on either side are not compared.
    """
    issues: list[ValidationIssue] = []
    for serve, reception in _serve_reception_pairs(plays):
        if serve.skill_type is None or reception.skill_type is None:
            continue
        if _is_unknown_type(serve.skill_type) or _is_unknown_type(
            reception.skill_type
        ):
            continue
        expected = expected_skill_type(
            Skill.SERVE, Skill.RECEPTION, serve.skill_type
        )
        if reception.skill_type != expected:
            issues.append(
                make_issue(
                    rule_name="reception_type_match",
                    message=(
                        f"Reception type ({reception.skill_type}) does not match "
                        f"serve type ({serve.skill_type})"
                    ),
                    source_line_number=reception.source_line_number,
                    severity=SEVERITY_DEFAULT,
                )
            )
    return issues


def validate_reception_zones(
    plays: Sequence[Play], rosters: RosterLookup
) -> list[ValidationIssue]:
    """Reception start/end zones and end sub-zone must match the serve.

    Each attribute is compared only when both plays carry a value.
    """
    issues: list[ValidationIssue] = []
    for serve, reception in _serve_reception_pairs(plays):
        for attr, label in ZONE_ATTRIBUTES:
            serve_value = getattr(serve, attr)
            reception_value = getattr(reception, attr)
            if serve_value is None or reception_value is None:
                continue
            if serve_value != reception_value:
                issues.append(
                    make_issue(
                        rule_name="reception_zone_match",
                        message=(
                            f"Reception {label} ({reception_value}) does not match "
                            f"serve {label} ({serve_value})"
                        ),
                        source_line_number=reception.source_line_number,
                        severity=SEVERITY_MINOR,
                    )
                )
    return issues


def _validate_type_propagation(
    plays: Sequence[Play], upstream: Skill, downstream: Skill
) -> list[ValidationIssue]:
    rule_name = f"{downstream.value.lower()}_type_match"
    issues: list[ValidationIssue] = []
    for i, play in enumerate(plays):
        if play.skill != downstream or play.skill_type is None:
            continue
        prev = previous_play(plays, i)
        if prev is None or prev.skill != upstream or prev.skill_type is None:
            continue
        expected = expected_skill_type(upstream, downstream, prev.skill_type)
        if play.skill_type != expected:
            issues.append(
                make_issue(
                    rule_name=rule_name,
                    message=(
                        f"{downstream.value} type ({play.skill_type}) does not match "
                        f"{upstream.value.lower()} type ({prev.skill_type})"
                    ),
                    source_line_number=play.source_line_number,
                    severity=SEVERITY_DEFAULT,
                )
            )
    return issues


def validate_attack_type(
    plays: Sequence[Play], rosters: RosterLookup
) -> list[ValidationIssue]:
    """Attack subtype must follow the set subtype directly before it."""
    return _validate_type_propagation(plays, Skill.SET, Skill.ATTACK)


def validate_block_type(
    plays: Sequence[Play], rosters: RosterLookup
) -> list[ValidationIssue]:
    """Block subtype must follow the attack subtype directly before it."""
    return _validate_type_propagation(plays, Skill.ATTACK, Skill.BLOCK)


def validate_dig_type(
    plays: Sequence[Play], rosters: RosterLookup
) -> list[ValidationIssue]:
    """Dig subtype must follow the attack subtype directly before it."""
    return _validate_type_propagation(plays, Skill.ATTACK, Skill.DIG)
