"""PrescriptionAssembler — builds the ordered exercise list for one coordinate.

Session layout:
    warmup (non-optional stages) → main lifts → core → cooldown
Recovery days replace everything after the warmup with mobility work.
"""

from __future__ import annotations

import dataclasses
import logging

from prescription_engine.collaborators import ExerciseRegistry
from prescription_engine.exceptions import ExerciseReferenceError
from prescription_engine.math.duration import estimate_duration_minutes
from prescription_engine.math.periodization import (
    AdjustedVolume,
    adjusted_volume,
    phase_config,
    skill_config,
)
from prescription_engine.models.coordinate import TrainingCoordinate
from prescription_engine.models.enums import (
    COMPOUND_REST_BONUS_S,
    COOLDOWN_REPS,
    COOLDOWN_SETS,
    CORE_EXERCISE_COUNT,
    CORE_REST_S,
    FULL_BODY_MAIN_EXERCISE_COUNT,
    MAIN_EXERCISE_COUNT,
    MIN_SETS,
    PLANK_HOLD_REPS,
    RECOVERY_EXERCISE_COUNT,
    RECOVERY_REPS,
    RECOVERY_REST_S,
    RECOVERY_SETS,
    ComplexityTier,
    DayType,
    ExerciseSection,
    ScheduleMode,
)
from prescription_engine.models.prescription import ExercisePrescription, ProgramTemplate
from prescription_engine.program_builder import exercise_pools
from prescription_engine.program_builder.day_types import classify
from prescription_engine.program_builder.description_builder import (
    build_template_description,
    build_template_name,
)
from prescription_engine.program_builder.warmup import sequence_warmup

logger = logging.getLogger(__name__)


class PrescriptionAssembler:
    """Assembles exercise prescriptions and full templates for coordinates.

    When a registry is supplied every selected slug is bulk-resolved and
    the registry id attached; an unknown slug fails the whole coordinate
    with ExerciseReferenceError and nothing is emitted.

    Usage::

        assembler = PrescriptionAssembler(registry)
        template = assembler.build_template(coordinate)
    """

    def __init__(
        self,
        registry: ExerciseRegistry | None = None,
        mode: ScheduleMode = ScheduleMode.SEVEN_DAY,
    ) -> None:
        self._registry = registry
        self._mode = mode

    @property
    def mode(self) -> ScheduleMode:
        return self._mode

    def assemble(self, coordinate: TrainingCoordinate) -> tuple[ExercisePrescription, ...]:
        """Build the ordered prescription list for one coordinate.

        Algorithm:
        1. Adjust base volume for phase, skill level and week
        2. Warmup from the non-optional stages, starting at index 0
        3. Recovery day: up to 5 mobility exercises, then stop
        4. Main lifts from the day-type pool (count by skill level)
        5. Core work, except on full-body days
        6. One cooldown stretch
        7. Renumber ``order_index`` contiguously

        Raises:
            ValidationError: If the day does not exist in the schedule mode.
            ExerciseReferenceError: If a slug does not resolve.
        """
        day_type = classify(coordinate.day, self._mode)
        volume = adjusted_volume(coordinate.phase, coordinate.skill_level, coordinate.week)
        tier = skill_config(coordinate.skill_level).complexity_tier

        exercises: list[ExercisePrescription] = list(sequence_warmup(day_type))

        if day_type == DayType.RECOVERY:
            exercises.extend(self._recovery(coordinate, tier))
        else:
            exercises.extend(self._main(coordinate, day_type, tier, volume))
            if day_type != DayType.FULL_BODY:
                exercises.extend(self._core(coordinate, tier, volume))
            exercises.append(self._cooldown(day_type))

        ordered = [
            dataclasses.replace(ex, order_index=i) for i, ex in enumerate(exercises)
        ]
        if self._registry is not None:
            ordered = self._attach_ids(self._registry, coordinate, ordered)
        logger.debug("Assembled %d exercises for %s", len(ordered), coordinate.key)
        return tuple(ordered)

    def build_template(self, coordinate: TrainingCoordinate) -> ProgramTemplate:
        """Assemble, estimate duration and name a complete template."""
        exercises = self.assemble(coordinate)
        return ProgramTemplate(
            coordinate=coordinate,
            name=build_template_name(coordinate, self._mode),
            description=build_template_description(coordinate),
            estimated_duration_minutes=estimate_duration_minutes(exercises),
            exercises=exercises,
        )

    # ------------------------------------------------------------------
    # Sections
    # ------------------------------------------------------------------

    def _recovery(
        self, coordinate: TrainingCoordinate, tier: ComplexityTier
    ) -> list[ExercisePrescription]:
        pool = exercise_pools.recovery_pool_for(coordinate.category, tier)
        selected = exercise_pools.select(
            pool, RECOVERY_EXERCISE_COUNT, label=f"recovery pool ({coordinate.key})"
        )
        return [
            ExercisePrescription(
                exercise_slug=slug,
                sets=RECOVERY_SETS,
                reps=RECOVERY_REPS,
                rest_seconds=RECOVERY_REST_S,
                order_index=0,
                section=ExerciseSection.MAIN,
                notes="Mobility",
            )
            for slug in selected
        ]

    def _main(
        self,
        coordinate: TrainingCoordinate,
        day_type: DayType,
        tier: ComplexityTier,
        volume: AdjustedVolume,
    ) -> list[ExercisePrescription]:
        if day_type == DayType.FULL_BODY:
            count = FULL_BODY_MAIN_EXERCISE_COUNT[coordinate.skill_level]
        else:
            count = MAIN_EXERCISE_COUNT[coordinate.skill_level]
        pool = exercise_pools.pool_for(coordinate.category, coordinate.phase, day_type, tier)
        selected = exercise_pools.select(
            pool, count, label=f"{day_type.name} pool ({coordinate.key})"
        )
        tempo = phase_config(coordinate.phase).tempo

        prescriptions = []
        for slug in selected:
            compound = exercise_pools.is_compound(slug)
            prescriptions.append(
                ExercisePrescription(
                    exercise_slug=slug,
                    sets=volume.sets if compound else max(MIN_SETS, volume.sets - 1),
                    reps=f"{volume.reps - 2}-{volume.reps}",
                    rest_seconds=(
                        volume.rest_seconds + COMPOUND_REST_BONUS_S
                        if compound
                        else volume.rest_seconds
                    ),
                    order_index=0,
                    section=ExerciseSection.MAIN,
                    tempo=tempo,
                )
            )
        return prescriptions

    def _core(
        self,
        coordinate: TrainingCoordinate,
        tier: ComplexityTier,
        volume: AdjustedVolume,
    ) -> list[ExercisePrescription]:
        pool = exercise_pools.core_pool_for(coordinate.category, coordinate.phase, tier)
        selected = exercise_pools.select(
            pool,
            CORE_EXERCISE_COUNT[coordinate.skill_level],
            label=f"core pool ({coordinate.key})",
        )
        return [
            ExercisePrescription(
                exercise_slug=slug,
                sets=max(MIN_SETS, volume.sets - 1),
                # Plank-family holds are timed
                reps=PLANK_HOLD_REPS if "plank" in slug else str(volume.reps),
                rest_seconds=CORE_REST_S,
                order_index=0,
                section=ExerciseSection.MAIN,
            )
            for slug in selected
        ]

    def _cooldown(self, day_type: DayType) -> ExercisePrescription:
        return ExercisePrescription(
            exercise_slug=exercise_pools.cooldown_for(day_type),
            sets=COOLDOWN_SETS,
            reps=COOLDOWN_REPS,
            rest_seconds=0,
            order_index=0,
            section=ExerciseSection.MAIN,
            notes="Cooldown",
        )

    @staticmethod
    def _attach_ids(
        registry: ExerciseRegistry,
        coordinate: TrainingCoordinate,
        exercises: list[ExercisePrescription],
    ) -> list[ExercisePrescription]:
        slugs = {ex.exercise_slug for ex in exercises}
        resolved = registry.resolve_many(slugs)
        missing = slugs - resolved.keys()
        if missing:
            raise ExerciseReferenceError(missing, coordinate)
        return [
            dataclasses.replace(ex, exercise_id=resolved[ex.exercise_slug].id)
            for ex in exercises
        ]
