"""Enumerations and programming constants for the prescription engine.

Periodization constants follow the classic GPP → SPP → SSP block model
used for youth and collegiate strength & conditioning programs.
"""

from enum import IntEnum, auto


class Phase(IntEnum):
    """Training phases of one periodization cycle, in chronological order."""

    GPP = auto()  # General Physical Preparation
    SPP = auto()  # Sport-specific Preparation
    SSP = auto()  # Sport-Specific Peaking


class SkillLevel(IntEnum):
    """Athlete skill level assigned at intake."""

    NOVICE = auto()
    MODERATE = auto()
    ADVANCED = auto()


class ComplexityTier(IntEnum):
    """Exercise-pool bucket selected by skill level."""

    BASIC = auto()
    MODERATE = auto()
    ADVANCED = auto()


class DayType(IntEnum):
    """Semantic training-day types within a weekly block."""

    LOWER_A = auto()    # Squat dominant
    UPPER_A = auto()    # Push emphasis
    POWER = auto()      # Power / conditioning
    LOWER_B = auto()    # Hinge dominant
    UPPER_B = auto()    # Pull emphasis
    FULL_BODY = auto()  # Full body / athletic
    RECOVERY = auto()   # Active recovery / mobility

    @property
    def is_lower_body(self) -> bool:
        return self in (DayType.LOWER_A, DayType.LOWER_B)


class WarmupPhase(IntEnum):
    """Stages of the warmup protocol, in execution order."""

    FOAM_ROLLING = 1
    MOBILITY = 2
    CORE_ISOMETRIC = 3
    CORE_DYNAMIC = 4
    WALKING_DRILLS = 5
    MOVEMENT_PREP = 6
    POWER_PRIMER = 7


class ExerciseSection(IntEnum):
    """Section of a workout an exercise belongs to."""

    WARMUP = auto()
    MAIN = auto()
    CIRCUIT = auto()
    FINISHER = auto()


class Intensity(IntEnum):
    """Serve-time difficulty requested by the athlete, lowest first."""

    LOW = auto()
    MODERATE = auto()
    HIGH = auto()


class AgeGroup(IntEnum):
    """Athlete age bands used for intensity safety caps."""

    YOUTH = auto()  # 10-13
    TEEN = auto()   # 14-17
    ADULT = auto()  # 18+


class ExperienceBucket(IntEnum):
    """Years of structured training, bucketed."""

    ZERO_TO_ONE = auto()  # 0-1
    TWO_TO_FIVE = auto()  # 2-5
    SIX_PLUS = auto()     # 6+


class ExerciseFocus(IntEnum):
    """Which column of a category's parameter table an exercise reads."""

    STRENGTH = auto()
    POWER = auto()
    BODYWEIGHT = auto()


class RangePosition(IntEnum):
    """Where in a min-max parameter range a value is taken from."""

    LOWEST = auto()
    LOWEST_PLUS_1 = auto()
    LOWEST_PLUS_2 = auto()
    SECOND_LOWEST = auto()
    MIDDLE = auto()
    MAX_MINUS_2 = auto()
    MAX_MINUS_1 = auto()
    MAX = auto()


class VariantChoice(IntEnum):
    """Bodyweight progression to serve."""

    EASIER = auto()
    BASE = auto()
    HARDER = auto()


class ScheduleMode(IntEnum):
    """Days-per-week model. The value is the number of training days."""

    THREE_DAY = 3  # legacy: lower / upper / power
    SEVEN_DAY = 7


# ---------------------------------------------------------------------------
# Coordinate space
# ---------------------------------------------------------------------------
CATEGORIES: tuple[int, ...] = (1, 2, 3, 4)
WEEKS: tuple[int, ...] = (1, 2, 3, 4)

# Sport categories
CATEGORY_NAMES: dict[int, str] = {
    1: "Endurance",   # continuous / directional: soccer, hockey, lacrosse
    2: "Power",       # explosive / vertical: basketball, volleyball
    3: "Rotation",    # rotational / unilateral: baseball, tennis, golf
    4: "Strength",    # general strength: football, wrestling
}

# ---------------------------------------------------------------------------
# Prescription assembly
# ---------------------------------------------------------------------------
# Main-exercise count per skill level (standard days / full-body day)
MAIN_EXERCISE_COUNT: dict[SkillLevel, int] = {
    SkillLevel.NOVICE: 3,
    SkillLevel.MODERATE: 4,
    SkillLevel.ADVANCED: 5,
}
FULL_BODY_MAIN_EXERCISE_COUNT: dict[SkillLevel, int] = {
    SkillLevel.NOVICE: 4,
    SkillLevel.MODERATE: 5,
    SkillLevel.ADVANCED: 5,
}

# Core exercises appended on non-full-body days
CORE_EXERCISE_COUNT: dict[SkillLevel, int] = {
    SkillLevel.NOVICE: 1,
    SkillLevel.MODERATE: 2,
    SkillLevel.ADVANCED: 2,
}

MIN_SETS = 2
COMPOUND_REST_BONUS_S = 15
CORE_REST_S = 30
PLANK_HOLD_REPS = "30s"

RECOVERY_EXERCISE_COUNT = 5
RECOVERY_SETS = 2
RECOVERY_REPS = "30s each side"
RECOVERY_REST_S = 30

COOLDOWN_SETS = 1
COOLDOWN_REPS = "30s each side"

# ---------------------------------------------------------------------------
# Duration estimation
# ---------------------------------------------------------------------------
SECONDS_PER_REP = 3
DEFAULT_REP_COUNT = 10
TRANSITION_BUFFER_MIN = 5

# ---------------------------------------------------------------------------
# Intensity scaling
# ---------------------------------------------------------------------------
MIN_SCALED_REST_S = 15
MIN_SCALED_SETS = 1
MIN_SCALED_REPS = 1
DEFAULT_LOADED_REPS = 8

# Plate increment for rounded target weights (lb)
WEIGHT_INCREMENT = 2.5
