"""JSON serialization for program templates and scaled prescriptions.

Field names follow the stored document format (camelCase); enums are
written as their lowercase names except phase, which keeps its acronym.
Optional fields are omitted when unset.

All functions are pure (no I/O).
"""

from __future__ import annotations

import json
from typing import Any

from prescription_engine.exceptions import ValidationError
from prescription_engine.models.coordinate import TrainingCoordinate, coerce_enum
from prescription_engine.models.enums import ExerciseSection, Phase, SkillLevel, WarmupPhase
from prescription_engine.models.prescription import ExercisePrescription, ProgramTemplate
from prescription_engine.models.profile import EXPERIENCE_BUCKET_LABELS, ScalingProfile
from prescription_engine.models.scaled import ScaledExercise, ScaledPrescription
from prescription_engine.scaling.intensity import AGE_GROUP_LABELS

_OPTIONAL_FIELDS = (
    ("tempo", "tempo"),
    ("notes", "notes"),
    ("superset", "superset"),
    ("exercise_id", "exerciseId"),
)

_AGE_GROUP_LABEL = {group: label for label, group in AGE_GROUP_LABELS.items()}


def coordinate_to_dict(coordinate: TrainingCoordinate) -> dict:
    return {
        "categoryId": coordinate.category,
        "phase": coordinate.phase.name,
        "skillLevel": coordinate.skill_level.name.title(),
        "week": coordinate.week,
        "day": coordinate.day,
    }


def coordinate_from_dict(data: dict[str, Any]) -> TrainingCoordinate:
    try:
        return TrainingCoordinate(
            category=data["categoryId"],
            phase=coerce_enum(Phase, data["phase"], "phase"),
            skill_level=coerce_enum(SkillLevel, data["skillLevel"], "skill level"),
            week=data["week"],
            day=data["day"],
        )
    except KeyError as exc:
        raise ValidationError(f"Coordinate is missing field {exc.args[0]!r}") from None


def exercise_to_dict(exercise: ExercisePrescription) -> dict:
    result: dict[str, Any] = {
        "exerciseSlug": exercise.exercise_slug,
        "sets": exercise.sets,
        "reps": exercise.reps,
        "restSeconds": exercise.rest_seconds,
        "orderIndex": exercise.order_index,
        "section": exercise.section.name.lower(),
    }
    if exercise.warmup_phase is not None:
        result["warmupPhase"] = exercise.warmup_phase.name.lower()
    for attr, key in _OPTIONAL_FIELDS:
        value = getattr(exercise, attr)
        if value is not None:
            result[key] = value
    return result


def exercise_from_dict(data: dict[str, Any]) -> ExercisePrescription:
    warmup_phase = data.get("warmupPhase")
    try:
        return ExercisePrescription(
            exercise_slug=data["exerciseSlug"],
            sets=data["sets"],
            reps=data["reps"],
            rest_seconds=data["restSeconds"],
            order_index=data["orderIndex"],
            section=coerce_enum(ExerciseSection, data.get("section", "main"), "section"),
            tempo=data.get("tempo"),
            warmup_phase=(
                coerce_enum(WarmupPhase, warmup_phase, "warmup phase")
                if warmup_phase is not None
                else None
            ),
            notes=data.get("notes"),
            superset=data.get("superset"),
            exercise_id=data.get("exerciseId"),
        )
    except KeyError as exc:
        raise ValidationError(f"Exercise is missing field {exc.args[0]!r}") from None


def template_to_dict(template: ProgramTemplate) -> dict:
    """Convert a ProgramTemplate to a JSON-compatible dict."""
    result = coordinate_to_dict(template.coordinate)
    result.update({
        "name": template.name,
        "description": template.description,
        "estimatedDurationMinutes": template.estimated_duration_minutes,
        "exercises": [exercise_to_dict(ex) for ex in template.exercises],
    })
    return result


def template_from_dict(data: dict[str, Any]) -> ProgramTemplate:
    """Rebuild a ProgramTemplate from :func:`template_to_dict` output.

    Raises:
        ValidationError: If a field is missing or out of range.
    """
    try:
        return ProgramTemplate(
            coordinate=coordinate_from_dict(data),
            name=data["name"],
            description=data["description"],
            estimated_duration_minutes=data["estimatedDurationMinutes"],
            exercises=tuple(exercise_from_dict(ex) for ex in data["exercises"]),
        )
    except KeyError as exc:
        raise ValidationError(f"Template is missing field {exc.args[0]!r}") from None


def template_to_json_string(template: ProgramTemplate, indent: int = 2) -> str:
    return json.dumps(template_to_dict(template), indent=indent)


def template_from_json_string(text: str) -> ProgramTemplate:
    return template_from_dict(json.loads(text))


def scaled_exercise_to_dict(exercise: ScaledExercise) -> dict:
    result: dict[str, Any] = {
        "exerciseSlug": exercise.exercise_slug,
        "orderIndex": exercise.source.order_index,
        "section": exercise.source.section.name.lower(),
        "scaledSets": exercise.sets,
        "scaledReps": exercise.reps,
        "scaledRestSeconds": exercise.rest_seconds,
        "rpeTarget": {"min": exercise.rpe_target[0], "max": exercise.rpe_target[1]},
        "isBodyweight": exercise.is_bodyweight,
        "isSubstituted": exercise.is_substituted,
    }
    if exercise.is_substituted:
        result["originalExerciseSlug"] = exercise.source.exercise_slug
    if exercise.exercise_id is not None:
        result["exerciseId"] = exercise.exercise_id
    if not exercise.is_bodyweight:
        result["percentOf1RM"] = exercise.percent_of_1rm
        result["hasOneRepMax"] = exercise.has_one_rep_max
        if exercise.target_weight is not None:
            result["targetWeight"] = exercise.target_weight
    if exercise.tempo is not None:
        result["tempo"] = exercise.tempo
    if exercise.focus is not None:
        result["exerciseFocus"] = exercise.focus.name.lower()
    return result


def scaling_context_to_dict(profile: ScalingProfile) -> dict:
    return {
        "categoryId": profile.category,
        "phase": profile.phase.name,
        "ageGroup": _AGE_GROUP_LABEL[profile.age_group],
        "yearsOfExperience": profile.years_of_experience,
        "experienceBucket": EXPERIENCE_BUCKET_LABELS[profile.experience_bucket],
    }


def scaled_to_dict(scaled: ScaledPrescription) -> dict:
    """Convert a ScaledPrescription to a JSON-compatible dict."""
    result: dict[str, Any] = {
        "appliedIntensity": scaled.intensity.name.title(),
        "requestedIntensity": scaled.requested_intensity.name.title(),
        "intensityConfig": {
            "percentOf1RM": scaled.percent_of_1rm,
            "rpeTarget": {"min": scaled.rpe_target[0], "max": scaled.rpe_target[1]},
        },
        "exercises": [scaled_exercise_to_dict(ex) for ex in scaled.exercises],
    }
    if scaled.template_id is not None:
        result["templateId"] = scaled.template_id
    if scaled.profile is not None:
        result["scalingContext"] = scaling_context_to_dict(scaled.profile)
    return result


def scaled_to_json_string(scaled: ScaledPrescription, indent: int = 2) -> str:
    return json.dumps(scaled_to_dict(scaled), indent=indent)
