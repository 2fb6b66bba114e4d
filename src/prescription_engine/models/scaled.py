"""Scaled prescriptions — transient serve-time views, never persisted."""

from __future__ import annotations

from dataclasses import dataclass, field

from prescription_engine.models.enums import ExerciseFocus, Intensity
from prescription_engine.models.prescription import ExercisePrescription
from prescription_engine.models.profile import ScalingProfile


@dataclass(frozen=True)
class ScaledExercise:
    """One exercise rewritten for a requested intensity.

    ``exercise_slug`` is the movement to perform, which differs from
    ``source.exercise_slug`` only when a bodyweight progression was
    substituted. Weight fields are populated for loaded exercises only.
    ``tempo`` and ``focus`` are set only by category-specific scaling.
    """

    source: ExercisePrescription
    exercise_slug: str
    sets: int
    reps: str
    rest_seconds: int
    rpe_target: tuple[int, int]
    is_bodyweight: bool
    is_substituted: bool = False
    exercise_id: str | None = None
    percent_of_1rm: int | None = None
    target_weight: int | None = None
    has_one_rep_max: bool = False
    tempo: str | None = None
    focus: ExerciseFocus | None = None


@dataclass(frozen=True)
class ScaledPrescription:
    """A full template's exercises scaled to one intensity level."""

    intensity: Intensity
    requested_intensity: Intensity
    exercises: tuple[ScaledExercise, ...] = field(default_factory=tuple)
    template_id: str | None = None
    percent_of_1rm: int = 0
    rpe_target: tuple[int, int] = (0, 0)
    profile: ScalingProfile | None = None

    @property
    def substitution_count(self) -> int:
        return sum(1 for e in self.exercises if e.is_substituted)
