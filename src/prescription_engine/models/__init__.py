"""Data models for the prescription engine."""

from prescription_engine.models.batch import (
    BatchError,
    BatchResult,
    GenerationStatus,
    Outcome,
)
from prescription_engine.models.coordinate import TrainingCoordinate
from prescription_engine.models.enums import (
    AgeGroup,
    ComplexityTier,
    DayType,
    ExerciseFocus,
    ExerciseSection,
    ExperienceBucket,
    Intensity,
    Phase,
    ScheduleMode,
    SkillLevel,
    WarmupPhase,
)
from prescription_engine.models.exercise import ExerciseRecord, Progressions
from prescription_engine.models.prescription import ExercisePrescription, ProgramTemplate
from prescription_engine.models.profile import ScalingProfile
from prescription_engine.models.scaled import ScaledExercise, ScaledPrescription

__all__ = [
    "AgeGroup",
    "BatchError",
    "BatchResult",
    "ComplexityTier",
    "DayType",
    "ExercisePrescription",
    "ExerciseFocus",
    "ExerciseRecord",
    "ExerciseSection",
    "ExperienceBucket",
    "GenerationStatus",
    "Intensity",
    "Outcome",
    "Phase",
    "ProgramTemplate",
    "Progressions",
    "ScaledExercise",
    "ScaledPrescription",
    "ScalingProfile",
    "ScheduleMode",
    "SkillLevel",
    "TrainingCoordinate",
    "WarmupPhase",
]
