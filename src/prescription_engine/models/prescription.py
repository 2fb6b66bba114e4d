"""Exercise prescriptions and program templates — the engine's stored output."""

from __future__ import annotations

from dataclasses import dataclass, field

from prescription_engine.models.coordinate import TrainingCoordinate
from prescription_engine.models.enums import ExerciseSection, WarmupPhase


@dataclass(frozen=True)
class ExercisePrescription:
    """One exercise slot within a template.

    ``reps`` is a display string: ``"10-12"``, ``"AMRAP"``, ``"30s"``,
    ``"8 each side"``. ``exercise_id`` is filled in once the slug has been
    resolved against the exercise registry.
    """

    exercise_slug: str
    sets: int
    reps: str
    rest_seconds: int
    order_index: int
    section: ExerciseSection = ExerciseSection.MAIN
    tempo: str | None = None
    warmup_phase: WarmupPhase | None = None
    notes: str | None = None
    superset: str | None = None
    exercise_id: str | None = None


@dataclass(frozen=True)
class ProgramTemplate:
    """A complete, ordered workout for one training coordinate."""

    coordinate: TrainingCoordinate
    name: str
    description: str
    estimated_duration_minutes: int
    exercises: tuple[ExercisePrescription, ...] = field(default_factory=tuple)

    @property
    def warmup(self) -> tuple[ExercisePrescription, ...]:
        return tuple(e for e in self.exercises if e.section == ExerciseSection.WARMUP)

    @property
    def main(self) -> tuple[ExercisePrescription, ...]:
        return tuple(e for e in self.exercises if e.section != ExerciseSection.WARMUP)
