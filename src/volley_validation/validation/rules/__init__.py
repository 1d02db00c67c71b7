"""Validation rules by concern.

Each module contains rule checks over the play log:
- adjacency: skill-to-skill transitions between neighbouring plays
- rotation: lineups, on-court membership and substitutions
- scoring: point attribution, score sequence and duplicate rows

Every check has the signature ``(plays, rosters) -> list[ValidationIssue]``.
"""

from volley_validation.validation.rules.adjacency import (
    expected_skill_type,
    validate_attack_type,
    validate_block_type,
    validate_dig_type,
    validate_reception_after_serve,
    validate_reception_type,
    validate_reception_zones,
)
from volley_validation.validation.rules.rotation import (
    SubstitutionCode,
    parse_substitution_code,
    validate_front_row_attacks,
    validate_on_court,
    validate_rotations,
    validate_substitutions,
)
from volley_validation.validation.rules.scoring import (
    validate_blocker_count,
    validate_duplicate_rows,
    validate_error_points,
    validate_score_sequence,
    validate_winning_points,
)

__all__ = [
    # Adjacency rules
    "expected_skill_type",
    "validate_reception_after_serve",
    "validate_reception_type",
    "validate_reception_zones",
    "validate_attack_type",
    "validate_block_type",
    "validate_dig_type",
    # Rotation rules
    "SubstitutionCode",
    "parse_substitution_code",
    "validate_front_row_attacks",
    "validate_on_court",
    "validate_rotations",
    "validate_substitutions",
    # Scoring rules
    "validate_blocker_count",
    "validate_error_points",
    "validate_winning_points",
    "validate_score_sequence",
    "validate_duplicate_rows",
]
