"""Validation constants.

Defines severities, evaluation codes, zone groupings and the skill subtype
mapping used by validation rules.
"""

from volley_validation.models.plays import Skill

# Severity levels
SEVERITY_MINOR = 1  # Cosmetic, e.g. post-processed compound codes
SEVERITY_DEFAULT = 2  # Likely to lead to misinterpretation of data
SEVERITY_MAJOR = 3  # Data error

SEVERITY_LABELS = {
    SEVERITY_MINOR: "minor",
    SEVERITY_DEFAULT: "default",
    SEVERITY_MAJOR: "major",
}

# Validation levels
LEVEL_NONE = 0
LEVEL_MAJOR = 1
LEVEL_DEFAULT = 2
LEVEL_ALL = 3
VALID_LEVELS = (LEVEL_NONE, LEVEL_MAJOR, LEVEL_DEFAULT, LEVEL_ALL)

# Evaluation codes
EVAL_ERROR = "="
EVAL_WINNING = "#"
EVAL_BLOCK_INVASION = "/"

NO_BLOCK = "No block"

# Court zones
FRONT_ROW_ZONES = frozenset({2, 3, 4})
# Rotation positions (1-based) occupied by back-row players
BACK_ROW_POSITIONS = (1, 5, 6)

# Skills whose acting player must be on court
ON_COURT_SKILLS = frozenset(
    {
        Skill.SERVE,
        Skill.ATTACK,
        Skill.BLOCK,
        Skill.DIG,
        Skill.FREEBALL,
        Skill.RECEPTION,
        Skill.SET,
    }
)

# Skills that can win a point directly
POINT_WINNING_SKILLS = frozenset({Skill.SERVE, Skill.ATTACK, Skill.BLOCK})

# A reception subtype is the serve subtype with this appended
RECEPTION_TYPE_SUFFIX = " reception"

# Expected subtype of a downstream skill given the upstream subtype:
# (upstream, downstream) -> (upstream word, downstream word), replaced throughout
SKILL_TYPE_SUFFIXES: dict[tuple[Skill, Skill], tuple[str, str]] = {
    (Skill.SET, Skill.ATTACK): (" set", " attack"),
    (Skill.ATTACK, Skill.BLOCK): (" attack", " block"),
    (Skill.ATTACK, Skill.DIG): (" attack", " dig"),
}

UNKNOWN_TYPE_PREFIX = "Unknown"

# Substitution compound code team markers
HOME_TEAM_MARKER = "*"
VISITING_TEAM_MARKER = "a"

# Records at each end of the log skipped by the substitution check
SUBSTITUTION_EDGE_ROWS = 2
