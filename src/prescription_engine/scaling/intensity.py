"""Intensity scaling — adapts a stored prescription to Low / Moderate / High.

Intensity matrix for loaded exercises:

    | Variable          | Low     | Moderate | High    |
    |-------------------|---------|----------|---------|
    | Weight (% of 1RM) | 60-70%  | 75-80%   | 85-90%  |
    | Sets              | 0.75x   | 1x       | 1.25x   |
    | Reps              | 1x      | 1x       | 0.85x   |
    | Rest              | 1.25x   | 1x       | 0.75x   |
    | RPE target        | 5-6     | 6-7      | 8-9     |

Bodyweight exercises keep their set count, scale reps or hold time by
0.67x / 1x / 1.33x, and swap to the registered easier (Low) or harder
(High) progression when one exists. Rest never drops below 15 s.

References:
    Epley (1985), Poundage Chart. Boyd Epley Workout.
    Faigenbaum et al. (2009), Youth resistance training: updated position
        statement paper from the NSCA.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Mapping, Sequence

from prescription_engine.exceptions import ValidationError
from prescription_engine.math.periodization import round_half_up
from prescription_engine.models.coordinate import coerce_enum
from prescription_engine.models.enums import (
    DEFAULT_LOADED_REPS,
    MIN_SCALED_REPS,
    MIN_SCALED_REST_S,
    MIN_SCALED_SETS,
    WEIGHT_INCREMENT,
    AgeGroup,
    Intensity,
    Phase,
)
from prescription_engine.models.exercise import ExerciseRecord
from prescription_engine.models.prescription import ExercisePrescription
from prescription_engine.models.scaled import ScaledExercise, ScaledPrescription

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class IntensityConfig:
    """Multipliers and targets for one intensity level."""

    one_rep_max_percent: tuple[float, float]
    sets_multiplier: float
    reps_multiplier: float
    rest_multiplier: float
    rpe_target: tuple[int, int]

    @property
    def avg_percent(self) -> float:
        low, high = self.one_rep_max_percent
        return (low + high) / 2


@dataclass(frozen=True)
class AgeIntensityRules:
    """Safety limits for an age group.

    Attributes:
        max_intensity: Highest intensity the group may be served.
        one_rep_max_ceiling: Highest fraction of 1RM ever prescribed.
        max_sets: Cap on sets per exercise.
        reps_multiplier: Rep adjustment (younger athletes: more reps, less load).
    """

    max_intensity: Intensity
    one_rep_max_ceiling: float
    max_sets: int
    reps_multiplier: float


@dataclass(frozen=True)
class ParsedReps:
    """Numeric view of a reps string: a count or a duration in seconds."""

    value: float
    unit: str  # "reps" | "seconds"
    suffix: str = ""


INTENSITY_CONFIG: dict[Intensity, IntensityConfig] = {
    Intensity.LOW: IntensityConfig(
        one_rep_max_percent=(0.60, 0.70),
        sets_multiplier=0.75,
        reps_multiplier=1.0,
        rest_multiplier=1.25,
        rpe_target=(5, 6),
    ),
    Intensity.MODERATE: IntensityConfig(
        one_rep_max_percent=(0.75, 0.80),
        sets_multiplier=1.0,
        reps_multiplier=1.0,
        rest_multiplier=1.0,
        rpe_target=(6, 7),
    ),
    Intensity.HIGH: IntensityConfig(
        one_rep_max_percent=(0.85, 0.90),
        sets_multiplier=1.25,
        reps_multiplier=0.85,
        rest_multiplier=0.75,
        rpe_target=(8, 9),
    ),
}

# Reps and hold-duration multiplier for bodyweight movements
BODYWEIGHT_MULTIPLIER: dict[Intensity, float] = {
    Intensity.LOW: 0.67,
    Intensity.MODERATE: 1.0,
    Intensity.HIGH: 1.33,
}

AGE_INTENSITY_RULES: dict[AgeGroup, AgeIntensityRules] = {
    AgeGroup.YOUTH: AgeIntensityRules(Intensity.MODERATE, 0.65, 3, 1.2),
    AgeGroup.TEEN: AgeIntensityRules(Intensity.HIGH, 0.85, 5, 1.0),
    AgeGroup.ADULT: AgeIntensityRules(Intensity.HIGH, 0.90, 6, 1.0),
}

AGE_GROUP_LABELS: dict[str, AgeGroup] = {
    "10-13": AgeGroup.YOUTH,
    "14-17": AgeGroup.TEEN,
    "18+": AgeGroup.ADULT,
}

# Loading range appropriate to each phase (fraction of 1RM)
PHASE_INTENSITY_RANGES: dict[Phase, tuple[float, float]] = {
    Phase.GPP: (0.60, 0.75),
    Phase.SPP: (0.75, 0.85),
    Phase.SSP: (0.85, 0.90),
}

_SIDE = re.compile(r"^([\d\s\-]+?)\s*((?:each|per)\s+(?:side|leg|arm).*)$", re.IGNORECASE)
_MINUTES = re.compile(r"^(\d+(?:\.\d+)?)\s*min(?:ute)?s?$", re.IGNORECASE)
_SECONDS = re.compile(r"^(\d+(?:\.\d+)?)\s*s(?:ec(?:ond)?s?)?$", re.IGNORECASE)
_RANGE = re.compile(r"^(\d+)\s*-\s*(\d+)$")
_PLAIN = re.compile(r"^(\d+)$")
_LEADING_INT = re.compile(r"^(\d+)")


# ---------------------------------------------------------------------------
# Lookups
# ---------------------------------------------------------------------------

def intensity_config(intensity: Intensity) -> IntensityConfig:
    """Look up the multipliers for an intensity level.

    Raises:
        ValidationError: If the intensity is unknown.
    """
    try:
        return INTENSITY_CONFIG[intensity]
    except KeyError:
        raise ValidationError(f"Unknown intensity {intensity!r}") from None


def parse_intensity(value: Intensity | str) -> Intensity:
    """Accept an Intensity or its name (``"high"``, ``"Low"``)."""
    return coerce_enum(Intensity, value, "intensity")


def parse_age_group(value: AgeGroup | str) -> AgeGroup:
    """Accept an AgeGroup, its name, or a label such as ``"14-17"``."""
    return coerce_enum(AgeGroup, value, "age group", labels=AGE_GROUP_LABELS)


def percent_of_one_rep_max(intensity: Intensity) -> int:
    """Midpoint of the intensity's 1RM range as a whole percentage."""
    return round_half_up(intensity_config(intensity).avg_percent * 100)


# ---------------------------------------------------------------------------
# Reps / duration strings
# ---------------------------------------------------------------------------

def parse_reps(reps: str) -> ParsedReps | None:
    """Parse a reps string into a scalable value.

    - ``"10"`` → 10 reps
    - ``"10-12"`` → 11 reps (midpoint)
    - ``"8 each side"`` → 8 reps, suffix ``" each side"``
    - ``"30s"`` → 30 seconds; ``"2 min"`` → 120 seconds
    - ``"AMRAP"`` → None (not scalable)
    """
    text = reps.strip()
    if text.lower() == "amrap":
        return None

    side = _SIDE.match(text)
    if side:
        number = side.group(1).strip()
        suffix = text[len(number):]
        if "-" in number:
            low, _, high = number.partition("-")
            try:
                return ParsedReps(round_half_up((int(low) + int(high)) / 2), "reps", suffix)
            except ValueError:
                return None
        try:
            return ParsedReps(int(number), "reps", suffix)
        except ValueError:
            return None

    match = _MINUTES.match(text)
    if match:
        return ParsedReps(float(match.group(1)) * 60, "seconds")
    match = _SECONDS.match(text)
    if match:
        return ParsedReps(float(match.group(1)), "seconds")
    match = _RANGE.match(text)
    if match:
        low, high = int(match.group(1)), int(match.group(2))
        return ParsedReps(round_half_up((low + high) / 2), "reps")
    match = _PLAIN.match(text)
    if match:
        return ParsedReps(int(match.group(1)), "reps")
    return None


def format_scaled_value(value: float, unit: str, suffix: str = "") -> str:
    """Render a scaled value back to a reps string.

    Seconds round to the nearest 5 (minimum 5); whole minutes render as
    ``"N min"``. Reps round to a whole number (minimum 1).
    """
    if unit == "seconds":
        seconds = max(5, round_half_up(value / 5) * 5)
        if seconds >= 60 and seconds % 60 == 0:
            return f"{seconds // 60} min"
        return f"{seconds}s"
    count = max(MIN_SCALED_REPS, round_half_up(value))
    return f"{count}{suffix}"


def scale_reps_or_duration(reps: str, multiplier: float) -> str:
    """Scale a reps string by ``multiplier``; unparseable strings pass through."""
    parsed = parse_reps(reps)
    if parsed is None:
        return reps
    return format_scaled_value(parsed.value * multiplier, parsed.unit, parsed.suffix)


def leading_rep_count(reps: str, default: int = DEFAULT_LOADED_REPS) -> int:
    """Leading integer of a reps string (``"8-10"`` → 8), else ``default``."""
    match = _LEADING_INT.match(reps.strip())
    return int(match.group(1)) if match else default


# ---------------------------------------------------------------------------
# Load arithmetic
# ---------------------------------------------------------------------------

def estimate_one_rep_max(weight: float, reps: int) -> float:
    """Epley estimate: ``weight × (1 + reps / 30)``, rounded to a whole number.

    A single rep is the 1RM itself; non-positive inputs give 0.
    """
    if reps <= 0 or weight <= 0:
        return 0
    if reps == 1:
        return weight
    return round_half_up(weight * (1 + reps / 30))


def calculate_target_weight(one_rep_max: float, percent: float) -> float:
    """Load for a fraction of 1RM, rounded to the nearest 2.5 plate increment."""
    return round_half_up(one_rep_max * percent / WEIGHT_INCREMENT) * WEIGHT_INCREMENT


# ---------------------------------------------------------------------------
# Age rules
# ---------------------------------------------------------------------------

def cap_intensity_for_age(intensity: Intensity, age_group: AgeGroup) -> Intensity:
    """Lower the requested intensity to the age group's maximum."""
    return min(intensity, AGE_INTENSITY_RULES[age_group].max_intensity)


def one_rep_max_range(age_group: AgeGroup, phase: Phase) -> tuple[float, float]:
    """Phase loading range with its top clipped to the age ceiling."""
    low, high = PHASE_INTENSITY_RANGES[phase]
    return low, min(AGE_INTENSITY_RULES[age_group].one_rep_max_ceiling, high)


# ---------------------------------------------------------------------------
# Scaling
# ---------------------------------------------------------------------------

def _scaled_rest(rest_seconds: int, config: IntensityConfig) -> int:
    return max(MIN_SCALED_REST_S, round_half_up(rest_seconds * config.rest_multiplier))


def scale_loaded(
    exercise: ExercisePrescription,
    intensity: Intensity,
    one_rep_max: float | None = None,
    age_rules: AgeIntensityRules | None = None,
) -> ScaledExercise:
    """Scale an externally loaded exercise.

    Sets, reps and rest follow the intensity multipliers; a target weight
    is emitted only when a one-rep max is known.
    Timed and per-side reps keep their unit.
    """
    config = intensity_config(intensity)
    percent = config.avg_percent
    sets = max(MIN_SCALED_SETS, round_half_up(exercise.sets * config.sets_multiplier))
    parsed = parse_reps(exercise.reps)
    if parsed is not None and (parsed.unit == "seconds" or parsed.suffix):
        reps = scale_reps_or_duration(exercise.reps, config.reps_multiplier)
    else:
        reps = str(max(
            MIN_SCALED_REPS,
            round_half_up(leading_rep_count(exercise.reps) * config.reps_multiplier),
        ))
    if age_rules is not None:
        percent = min(percent, age_rules.one_rep_max_ceiling)
        sets = min(sets, age_rules.max_sets)
        if age_rules.reps_multiplier != 1.0:
            reps = scale_reps_or_duration(reps, age_rules.reps_multiplier)

    has_max = bool(one_rep_max)
    if not has_max:
        logger.debug("No one-rep max for %s, omitting target weight", exercise.exercise_slug)
    return ScaledExercise(
        source=exercise,
        exercise_slug=exercise.exercise_slug,
        sets=sets,
        reps=reps,
        rest_seconds=_scaled_rest(exercise.rest_seconds, config),
        rpe_target=config.rpe_target,
        is_bodyweight=False,
        exercise_id=exercise.exercise_id,
        percent_of_1rm=round_half_up(percent * 100),
        target_weight=round_half_up(one_rep_max * percent) if has_max else None,
        has_one_rep_max=has_max,
    )


def scale_bodyweight(
    exercise: ExercisePrescription,
    intensity: Intensity,
    record: ExerciseRecord | None = None,
    age_rules: AgeIntensityRules | None = None,
) -> ScaledExercise:
    """Scale a bodyweight exercise, substituting a progression if registered.

    A substituted variant carries no registry id; callers holding a
    registry resolve it.
    """
    config = intensity_config(intensity)
    reps = scale_reps_or_duration(exercise.reps, BODYWEIGHT_MULTIPLIER[intensity])
    sets = exercise.sets
    if age_rules is not None:
        sets = min(sets, age_rules.max_sets)
        if age_rules.reps_multiplier != 1.0:
            reps = scale_reps_or_duration(reps, age_rules.reps_multiplier)

    slug = exercise.exercise_slug
    exercise_id = exercise.exercise_id
    if record is not None:
        if intensity == Intensity.LOW and record.progressions.easier:
            slug = record.progressions.easier
        elif intensity == Intensity.HIGH and record.progressions.harder:
            slug = record.progressions.harder
    substituted = slug != exercise.exercise_slug
    if substituted:
        exercise_id = None

    return ScaledExercise(
        source=exercise,
        exercise_slug=slug,
        sets=sets,
        reps=reps,
        rest_seconds=_scaled_rest(exercise.rest_seconds, config),
        rpe_target=config.rpe_target,
        is_bodyweight=True,
        is_substituted=substituted,
        exercise_id=exercise_id,
    )


def scale(
    exercises: Sequence[ExercisePrescription],
    intensity: Intensity | str,
    maxes_by_exercise: Mapping[str, float] | None = None,
    exercise_metadata: Mapping[str, ExerciseRecord] | None = None,
    age_group: AgeGroup | str | None = None,
    template_id: str | None = None,
) -> ScaledPrescription:
    """Scale every exercise of a prescription to ``intensity``.

    Args:
        exercises: Stored prescriptions; never modified.
        intensity: Requested level (member or name).
        maxes_by_exercise: One-rep maxes keyed by exercise id (or slug
            when the prescription carries no id).
        exercise_metadata: Registry records keyed by slug. An exercise with
            no record is treated as bodyweight with no progressions.
        age_group: Optional athlete age group; caps intensity, sets and load.
        template_id: Carried through to the result.

    Returns:
        A new ScaledPrescription view.
    """
    requested = parse_intensity(intensity)
    applied = requested
    age_rules = None
    if age_group is not None:
        group = parse_age_group(age_group)
        applied = cap_intensity_for_age(requested, group)
        age_rules = AGE_INTENSITY_RULES[group]
        if applied != requested:
            logger.info(
                "Capped intensity %s → %s for age group %s",
                requested.name, applied.name, group.name,
            )

    maxes = maxes_by_exercise or {}
    metadata = exercise_metadata or {}
    scaled: list[ScaledExercise] = []
    for exercise in exercises:
        record = metadata.get(exercise.exercise_slug)
        if record is None or record.is_bodyweight:
            scaled.append(scale_bodyweight(exercise, applied, record, age_rules))
        else:
            key = exercise.exercise_id or exercise.exercise_slug
            scaled.append(scale_loaded(exercise, applied, maxes.get(key), age_rules))

    config = intensity_config(applied)
    percent = config.avg_percent
    if age_rules is not None:
        percent = min(percent, age_rules.one_rep_max_ceiling)
    return ScaledPrescription(
        intensity=applied,
        requested_intensity=requested,
        exercises=tuple(scaled),
        template_id=template_id,
        percent_of_1rm=round_half_up(percent * 100),
        rpe_target=config.rpe_target,
    )
