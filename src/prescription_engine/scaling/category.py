"""Category-specific scaling — prescriptions from an athlete's profile.

Where intensity scaling multiplies the stored prescription, this path
replaces it: sets, reps, rest, tempo, RPE and load come from a table
keyed by sport category and phase, and the athlete's age group and years
of experience pick the position inside each range.

    | Age   | 0-1 yrs         | 2-5 yrs             | 6+ yrs                |
    |-------|-----------------|---------------------|-----------------------|
    | 10-13 | lowest / lowest | lowest+1 / lowest+2 | second lowest / max-1 |
    | 14-17 | middle / middle | max / max-1         | max / max             |
    | 18+   | max / max-2     | max / max-1         | max / max             |

(sets position / reps position). Athletes aged 10-13 are further capped
at 3 sets and 65% of 1RM.

Tempo is eccentric.isometric.concentric seconds; ``x`` means as fast as
possible.

References:
    Bompa & Haff (2009), Periodization: Theory and Methodology of Training.
    Lloyd et al. (2014), Position statement on youth resistance training.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Mapping, Sequence

from prescription_engine.exceptions import ValidationError
from prescription_engine.math.periodization import round_half_up
from prescription_engine.models.enums import (
    AgeGroup,
    ExerciseFocus,
    ExerciseSection,
    ExperienceBucket,
    Intensity,
    Phase,
    RangePosition,
    VariantChoice,
)
from prescription_engine.models.exercise import ExerciseRecord, Progressions
from prescription_engine.models.prescription import ExercisePrescription
from prescription_engine.models.profile import ScalingProfile, experience_bucket
from prescription_engine.models.scaled import ScaledExercise, ScaledPrescription
from prescription_engine.scaling.intensity import parse_reps

logger = logging.getLogger(__name__)

POWER_TAGS = frozenset({"power", "explosive", "plyometric", "reactive"})


@dataclass(frozen=True)
class ParameterRange:
    low: float
    high: float

    @property
    def midpoint(self) -> float:
        return (self.low + self.high) / 2


@dataclass(frozen=True)
class Tempo:
    """Seconds per phase of a rep; None is an explosive (``x``) phase."""

    eccentric: int | None
    isometric: int | None
    concentric: int | None


@dataclass(frozen=True)
class FocusParameters:
    """Load, reps and rest for one exercise focus."""

    one_rep_max_percent: ParameterRange
    reps: ParameterRange
    rest_seconds: int


@dataclass(frozen=True)
class CategoryPhaseConfig:
    strength: FocusParameters
    power: FocusParameters
    sets: ParameterRange
    tempo: Tempo
    rpe: ParameterRange

    def for_focus(self, focus: ExerciseFocus) -> FocusParameters:
        """Power work reads the power column; everything else reads strength."""
        return self.power if focus == ExerciseFocus.POWER else self.strength


@dataclass(frozen=True)
class AgeExperienceModifier:
    sets_position: RangePosition
    reps_position: RangePosition


@dataclass(frozen=True)
class AgeSafetyConstraints:
    max_sets: int | None
    one_rep_max_ceiling: float


@dataclass(frozen=True)
class CategoryParameters:
    """Resolved parameters for one exercise under one profile."""

    one_rep_max_percent: ParameterRange
    sets: int
    reps: int
    rest_seconds: int
    tempo: Tempo
    rpe: ParameterRange


_EXPLOSIVE = Tempo(None, None, None)


def _config(
    percent: tuple[tuple[float, float], tuple[float, float]],
    reps: tuple[tuple[int, int], tuple[int, int]],
    sets: tuple[int, int],
    rest: tuple[int, int],
    tempo: Tempo,
    rpe: tuple[int, int],
) -> CategoryPhaseConfig:
    """Build a config from (strength, power) pairs."""
    return CategoryPhaseConfig(
        strength=FocusParameters(ParameterRange(*percent[0]), ParameterRange(*reps[0]), rest[0]),
        power=FocusParameters(ParameterRange(*percent[1]), ParameterRange(*reps[1]), rest[1]),
        sets=ParameterRange(*sets),
        tempo=tempo,
        rpe=ParameterRange(*rpe),
    )


CATEGORY_PHASE_CONFIG: dict[int, dict[Phase, CategoryPhaseConfig]] = {
    # Endurance: soccer, hockey, lacrosse
    1: {
        Phase.GPP: _config(
            ((0.50, 0.65), (0.30, 0.30)), ((10, 14), (6, 8)), (4, 6), (30, 60),
            Tempo(2, 1, 2), (6, 7),
        ),
        Phase.SPP: _config(
            ((0.65, 0.75), (0.40, 0.40)), ((6, 8), (4, 6)), (4, 6), (60, 60),
            Tempo(2, 0, 2), (7, 8),
        ),
        Phase.SSP: _config(
            ((0.75, 0.80), (0.55, 0.55)), ((4, 6), (4, 6)), (3, 5), (60, 60),
            _EXPLOSIVE, (8, 9),
        ),
    },
    # Power: basketball, volleyball
    2: {
        Phase.GPP: _config(
            ((0.55, 0.65), (0.35, 0.35)), ((10, 14), (6, 8)), (4, 6), (30, 60),
            Tempo(1, 1, 1), (6, 7),
        ),
        Phase.SPP: _config(
            ((0.65, 0.80), (0.45, 0.45)), ((8, 12), (4, 6)), (4, 6), (60, 60),
            Tempo(2, 0, 2), (7, 8),
        ),
        Phase.SSP: _config(
            ((0.80, 0.90), (0.50, 0.60)), ((4, 6), (3, 6)), (4, 6), (120, 120),
            _EXPLOSIVE, (9, 9),
        ),
    },
    # Rotation: baseball, tennis, golf
    3: {
        Phase.GPP: _config(
            ((0.50, 0.60), (0.30, 0.30)), ((10, 14), (8, 10)), (2, 4), (40, 60),
            Tempo(2, 0, 2), (6, 7),
        ),
        Phase.SPP: _config(
            ((0.60, 0.70), (0.35, 0.40)), ((8, 12), (6, 8)), (3, 5), (90, 60),
            Tempo(2, 0, 2), (7, 8),
        ),
        Phase.SSP: _config(
            ((0.70, 0.85), (0.50, 0.50)), ((4, 6), (3, 6)), (4, 6), (120, 120),
            _EXPLOSIVE, (8, 9),
        ),
    },
    # Strength: football, wrestling
    4: {
        Phase.GPP: _config(
            ((0.60, 0.70), (0.35, 0.40)), ((10, 12), (6, 8)), (3, 5), (30, 60),
            Tempo(2, 1, 2), (7, 7),
        ),
        Phase.SPP: _config(
            ((0.70, 0.85), (0.45, 0.50)), ((8, 12), (4, 6)), (4, 5), (90, 60),
            Tempo(2, 0, 2), (7, 9),
        ),
        Phase.SSP: _config(
            ((0.85, 0.90), (0.55, 0.55)), ((3, 5), (3, 6)), (4, 6), (120, 120),
            _EXPLOSIVE, (8, 9),
        ),
    },
}

_P = RangePosition
AGE_EXPERIENCE_MATRIX: dict[AgeGroup, dict[ExperienceBucket, AgeExperienceModifier]] = {
    AgeGroup.YOUTH: {
        ExperienceBucket.ZERO_TO_ONE: AgeExperienceModifier(_P.LOWEST, _P.LOWEST),
        ExperienceBucket.TWO_TO_FIVE: AgeExperienceModifier(_P.LOWEST_PLUS_1, _P.LOWEST_PLUS_2),
        ExperienceBucket.SIX_PLUS: AgeExperienceModifier(_P.SECOND_LOWEST, _P.MAX_MINUS_1),
    },
    AgeGroup.TEEN: {
        ExperienceBucket.ZERO_TO_ONE: AgeExperienceModifier(_P.MIDDLE, _P.MIDDLE),
        ExperienceBucket.TWO_TO_FIVE: AgeExperienceModifier(_P.MAX, _P.MAX_MINUS_1),
        ExperienceBucket.SIX_PLUS: AgeExperienceModifier(_P.MAX, _P.MAX),
    },
    AgeGroup.ADULT: {
        ExperienceBucket.ZERO_TO_ONE: AgeExperienceModifier(_P.MAX, _P.MAX_MINUS_2),
        ExperienceBucket.TWO_TO_FIVE: AgeExperienceModifier(_P.MAX, _P.MAX_MINUS_1),
        ExperienceBucket.SIX_PLUS: AgeExperienceModifier(_P.MAX, _P.MAX),
    },
}

AGE_SAFETY_CONSTRAINTS: dict[AgeGroup, AgeSafetyConstraints] = {
    AgeGroup.YOUTH: AgeSafetyConstraints(max_sets=3, one_rep_max_ceiling=0.65),
    AgeGroup.TEEN: AgeSafetyConstraints(max_sets=None, one_rep_max_ceiling=0.85),
    AgeGroup.ADULT: AgeSafetyConstraints(max_sets=None, one_rep_max_ceiling=0.90),
}

BODYWEIGHT_VARIANT_MATRIX: dict[Phase, dict[ExperienceBucket, VariantChoice]] = {
    Phase.GPP: {
        ExperienceBucket.ZERO_TO_ONE: VariantChoice.EASIER,
        ExperienceBucket.TWO_TO_FIVE: VariantChoice.BASE,
        ExperienceBucket.SIX_PLUS: VariantChoice.BASE,
    },
    Phase.SPP: {
        ExperienceBucket.ZERO_TO_ONE: VariantChoice.BASE,
        ExperienceBucket.TWO_TO_FIVE: VariantChoice.BASE,
        ExperienceBucket.SIX_PLUS: VariantChoice.BASE,
    },
    Phase.SSP: {
        ExperienceBucket.ZERO_TO_ONE: VariantChoice.BASE,
        ExperienceBucket.TWO_TO_FIVE: VariantChoice.BASE,
        ExperienceBucket.SIX_PLUS: VariantChoice.HARDER,
    },
}


# ---------------------------------------------------------------------------
# Lookups
# ---------------------------------------------------------------------------

def category_phase_config(category: int, phase: Phase) -> CategoryPhaseConfig:
    """Raises ValidationError for an unknown category."""
    try:
        return CATEGORY_PHASE_CONFIG[category][phase]
    except KeyError:
        raise ValidationError(f"No scaling table for category {category!r}") from None


def value_from_position(value_range: ParameterRange, position: RangePosition) -> int:
    """Pick a whole value from ``value_range``; never leaves the range."""
    low, high = int(value_range.low), int(value_range.high)
    if position == RangePosition.LOWEST:
        value = low
    elif position in (RangePosition.LOWEST_PLUS_1, RangePosition.SECOND_LOWEST):
        value = low + 1
    elif position == RangePosition.LOWEST_PLUS_2:
        value = low + 2
    elif position == RangePosition.MAX_MINUS_2:
        value = high - 2
    elif position == RangePosition.MAX_MINUS_1:
        value = high - 1
    elif position == RangePosition.MAX:
        value = high
    else:
        value = round_half_up((low + high) / 2)
    return min(high, max(low, value))


def exercise_focus(record: ExerciseRecord | None) -> ExerciseFocus:
    """Bodyweight by equipment, power by tag, otherwise strength.

    An exercise with no registry record counts as bodyweight.
    """
    if record is None or record.is_bodyweight:
        return ExerciseFocus.BODYWEIGHT
    if any(tag.lower() in POWER_TAGS for tag in record.tags):
        return ExerciseFocus.POWER
    return ExerciseFocus.STRENGTH


def apply_age_safety_constraints(
    params: CategoryParameters, age_group: AgeGroup
) -> CategoryParameters:
    """Cap sets and clip the 1RM range to the age group's ceiling."""
    constraints = AGE_SAFETY_CONSTRAINTS[age_group]
    sets = params.sets
    if constraints.max_sets is not None:
        sets = min(sets, constraints.max_sets)
    ceiling = constraints.one_rep_max_ceiling
    return replace(
        params,
        sets=sets,
        one_rep_max_percent=ParameterRange(
            min(params.one_rep_max_percent.low, ceiling),
            min(params.one_rep_max_percent.high, ceiling),
        ),
    )


def category_exercise_parameters(
    category: int,
    phase: Phase,
    age_group: AgeGroup,
    years_of_experience: float,
    focus: ExerciseFocus,
) -> CategoryParameters:
    """Sets, reps, rest, tempo, RPE and 1RM range for one exercise."""
    config = category_phase_config(category, phase)
    modifier = AGE_EXPERIENCE_MATRIX[age_group][experience_bucket(years_of_experience)]
    column = config.for_focus(focus)
    params = CategoryParameters(
        one_rep_max_percent=column.one_rep_max_percent,
        sets=value_from_position(config.sets, modifier.sets_position),
        reps=value_from_position(column.reps, modifier.reps_position),
        rest_seconds=column.rest_seconds,
        tempo=config.tempo,
        rpe=config.rpe,
    )
    return apply_age_safety_constraints(params, age_group)


def bodyweight_variant(
    slug: str,
    phase: Phase,
    bucket: ExperienceBucket,
    progressions: Progressions | None = None,
) -> tuple[str, bool]:
    """The slug to perform and whether it replaces ``slug``.

    Falls back to the base exercise when the wanted progression is not
    registered.
    """
    choice = BODYWEIGHT_VARIANT_MATRIX[phase][bucket]
    if progressions is not None:
        if choice == VariantChoice.EASIER and progressions.easier:
            return progressions.easier, True
        if choice == VariantChoice.HARDER and progressions.harder:
            return progressions.harder, True
    return slug, False


def format_tempo(tempo: Tempo) -> str:
    """``"2.1.2"``, or ``"x.x.x"`` for explosive phases."""
    return ".".join(
        "x" if part is None else str(part)
        for part in (tempo.eccentric, tempo.isometric, tempo.concentric)
    )


# ---------------------------------------------------------------------------
# Scaling
# ---------------------------------------------------------------------------

def _table_reps(stored: str, reps: int) -> str:
    """Table reps, keeping a stored hold time or per-side suffix."""
    parsed = parse_reps(stored)
    if parsed is None or parsed.unit == "seconds":
        return stored
    return f"{reps}{parsed.suffix}"


def _carry_warmup(exercise: ExercisePrescription, record: ExerciseRecord | None) -> ScaledExercise:
    return ScaledExercise(
        source=exercise,
        exercise_slug=exercise.exercise_slug,
        sets=exercise.sets,
        reps=exercise.reps,
        rest_seconds=exercise.rest_seconds,
        rpe_target=(0, 0),
        is_bodyweight=record is None or record.is_bodyweight,
        exercise_id=exercise.exercise_id,
    )


def scale_for_profile_exercise(
    exercise: ExercisePrescription,
    profile: ScalingProfile,
    record: ExerciseRecord | None = None,
    one_rep_max: float | None = None,
) -> ScaledExercise:
    """Rewrite one main-section exercise from the category tables."""
    focus = exercise_focus(record)
    params = category_exercise_parameters(
        profile.category, profile.phase, profile.age_group,
        profile.years_of_experience, focus,
    )
    rpe = (int(params.rpe.low), int(params.rpe.high))
    tempo = format_tempo(params.tempo)
    reps = _table_reps(exercise.reps, params.reps)

    if focus == ExerciseFocus.BODYWEIGHT:
        slug, substituted = bodyweight_variant(
            exercise.exercise_slug, profile.phase, profile.experience_bucket,
            record.progressions if record is not None else None,
        )
        return ScaledExercise(
            source=exercise,
            exercise_slug=slug,
            sets=params.sets,
            reps=reps,
            rest_seconds=params.rest_seconds,
            rpe_target=rpe,
            is_bodyweight=True,
            is_substituted=substituted,
            exercise_id=None if substituted else exercise.exercise_id,
            tempo=tempo,
            focus=focus,
        )

    percent = params.one_rep_max_percent.midpoint
    has_max = bool(one_rep_max)
    if not has_max:
        logger.debug("No one-rep max for %s, omitting target weight", exercise.exercise_slug)
    return ScaledExercise(
        source=exercise,
        exercise_slug=exercise.exercise_slug,
        sets=params.sets,
        reps=reps,
        rest_seconds=params.rest_seconds,
        rpe_target=rpe,
        is_bodyweight=False,
        exercise_id=exercise.exercise_id,
        percent_of_1rm=round_half_up(percent * 100),
        target_weight=round_half_up(one_rep_max * percent) if has_max else None,
        has_one_rep_max=has_max,
        tempo=tempo,
        focus=focus,
    )


def scale_for_profile(
    exercises: Sequence[ExercisePrescription],
    profile: ScalingProfile,
    intensity: Intensity = Intensity.MODERATE,
    maxes_by_exercise: Mapping[str, float] | None = None,
    exercise_metadata: Mapping[str, ExerciseRecord] | None = None,
    template_id: str | None = None,
) -> ScaledPrescription:
    """Scale a prescription from an athlete profile instead of multipliers.

    Warmup exercises are carried unchanged. ``intensity`` is recorded on
    the result as the requested level; it does not alter the values.
    """
    maxes = maxes_by_exercise or {}
    metadata = exercise_metadata or {}
    scaled: list[ScaledExercise] = []
    for exercise in exercises:
        record = metadata.get(exercise.exercise_slug)
        if exercise.section == ExerciseSection.WARMUP:
            scaled.append(_carry_warmup(exercise, record))
            continue
        key = exercise.exercise_id or exercise.exercise_slug
        scaled.append(scale_for_profile_exercise(exercise, profile, record, maxes.get(key)))

    headline = category_exercise_parameters(
        profile.category, profile.phase, profile.age_group,
        profile.years_of_experience, ExerciseFocus.STRENGTH,
    )
    logger.debug(
        "Category %d %s scaling for %s with %s years",
        profile.category, profile.phase.name, profile.age_group.name,
        profile.years_of_experience,
    )
    return ScaledPrescription(
        intensity=intensity,
        requested_intensity=intensity,
        exercises=tuple(scaled),
        template_id=template_id,
        percent_of_1rm=round_half_up(headline.one_rep_max_percent.midpoint * 100),
        rpe_target=(int(headline.rpe.low), int(headline.rpe.high)),
        profile=profile,
    )
