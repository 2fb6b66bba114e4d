"""Warmup sequencer — the fixed 7-stage protocol with per-day-type pools.

Stage order:
    Foam Rolling → Mobility → Core Isometric → Core Dynamic →
    Walking Drills → Movement Prep → Power Primer

A day type defines pools for a subset of stages (recovery days only roll
and mobilise). Foam rolling is the single optional stage.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from prescription_engine.models.enums import DayType, ExerciseSection, WarmupPhase
from prescription_engine.models.prescription import ExercisePrescription


@dataclass(frozen=True)
class WarmupStage:
    """One stage of the warmup protocol.

    Attributes:
        phase: Stage tag, also its position in the sequence.
        label: Display label.
        duration_minutes: Minutes allotted to the stage.
        optional: Skipped unless the caller asks for optional stages.
        exercise_count: Maximum exercises drawn from the stage pool.
        default_sets: Sets assigned to each drawn exercise.
        default_reps: Reps string assigned to each drawn exercise.
        default_rest_seconds: Rest assigned to each drawn exercise.
    """

    phase: WarmupPhase
    label: str
    duration_minutes: float
    optional: bool
    exercise_count: int
    default_sets: int
    default_reps: str
    default_rest_seconds: int


WARMUP_PHASES: tuple[WarmupStage, ...] = (
    WarmupStage(WarmupPhase.FOAM_ROLLING, "Foam Rolling", 2, True, 3, 1, "30s", 0),
    WarmupStage(WarmupPhase.MOBILITY, "Mobility", 2, False, 3, 1, "8 each side", 0),
    WarmupStage(WarmupPhase.CORE_ISOMETRIC, "Core Isometric", 1.5, False, 2, 1, "20s", 0),
    WarmupStage(WarmupPhase.CORE_DYNAMIC, "Core Dynamic", 1, False, 2, 1, "8 each side", 0),
    WarmupStage(WarmupPhase.WALKING_DRILLS, "Walking Drills", 2, False, 3, 1, "20 yards", 0),
    WarmupStage(WarmupPhase.MOVEMENT_PREP, "Movement Prep", 2, False, 3, 1, "20 yards", 0),
    WarmupStage(WarmupPhase.POWER_PRIMER, "Power Primer", 1.5, False, 2, 3, "3-5", 15),
)

WARMUP_POOLS: dict[DayType, dict[WarmupPhase, tuple[str, ...]]] = {
    # Squat dominant
    DayType.LOWER_A: {
        WarmupPhase.FOAM_ROLLING: (
            "foam_roll_quads", "foam_roll_adductors", "foam_roll_glutes", "foam_roll_calves",
        ),
        WarmupPhase.MOBILITY: (
            "worlds_greatest_stretch", "90_90_hip_stretch", "hip_circles", "ankle_circles",
            "hip_flexor_stretch",
        ),
        WarmupPhase.CORE_ISOMETRIC: (
            "hollow_body_hold", "bear_crawl_hold", "dead_bug", "quadruped_belly_lift",
        ),
        WarmupPhase.CORE_DYNAMIC: ("glute_bridge_march", "dead_bug_with_reach", "bird_dog_crunch"),
        WarmupPhase.WALKING_DRILLS: (
            "walking_knee_hug", "walking_quad_stretch", "walking_rdl_reach",
            "walking_cradle_stretch",
        ),
        WarmupPhase.MOVEMENT_PREP: ("jog", "a_skip", "high_knees_drill", "butt_kicks"),
        WarmupPhase.POWER_PRIMER: (
            "broad_jump_warmup", "vertical_jump_warmup", "box_jump_warmup",
        ),
    },
    # Hinge dominant
    DayType.LOWER_B: {
        WarmupPhase.FOAM_ROLLING: (
            "foam_roll_hamstrings", "foam_roll_glutes", "foam_roll_it_band", "foam_roll_calves",
        ),
        WarmupPhase.MOBILITY: (
            "hip_flexor_stretch", "90_90_hip_stretch", "hip_circles", "ankle_circles",
            "scorpion_stretch",
        ),
        WarmupPhase.CORE_ISOMETRIC: (
            "bear_crawl_hold", "hollow_body_hold", "bird_dog", "quadruped_belly_lift",
        ),
        WarmupPhase.CORE_DYNAMIC: ("glute_bridge_march", "bird_dog_crunch", "dead_bug_with_reach"),
        WarmupPhase.WALKING_DRILLS: (
            "walking_rdl_reach", "walking_knee_hug", "walking_cradle_stretch", "heel_toe_walk",
        ),
        WarmupPhase.MOVEMENT_PREP: ("jog", "b_skip", "butt_kicks", "high_knees_drill"),
        WarmupPhase.POWER_PRIMER: (
            "broad_jump_warmup", "box_jump_warmup", "vertical_jump_warmup",
        ),
    },
    # Push emphasis
    DayType.UPPER_A: {
        WarmupPhase.FOAM_ROLLING: (
            "foam_roll_thoracic", "foam_roll_lats", "foam_roll_quads", "foam_roll_glutes",
        ),
        WarmupPhase.MOBILITY: (
            "thoracic_rotation", "shoulder_pass_through", "arm_cross_body_stretch", "cat_cow",
            "inchworm",
        ),
        WarmupPhase.CORE_ISOMETRIC: (
            "hollow_body_hold", "tall_kneeling_pallof_hold", "dead_bug", "plank",
        ),
        WarmupPhase.CORE_DYNAMIC: ("dead_bug_with_reach", "core_bicycle", "bird_dog_crunch"),
        WarmupPhase.WALKING_DRILLS: (
            "walking_spiderman", "walking_lunge_rotation", "lateral_shuffle", "heel_toe_walk",
        ),
        WarmupPhase.MOVEMENT_PREP: ("jog", "skip", "carioca", "a_skip"),
        WarmupPhase.POWER_PRIMER: (
            "med_ball_chest_pass_warmup", "explosive_pushup_warmup",
            "med_ball_overhead_throw_warmup",
        ),
    },
    # Pull emphasis
    DayType.UPPER_B: {
        WarmupPhase.FOAM_ROLLING: (
            "foam_roll_lats", "foam_roll_thoracic", "foam_roll_glutes", "foam_roll_hamstrings",
        ),
        WarmupPhase.MOBILITY: (
            "thoracic_rotation", "arm_cross_body_stretch", "shoulder_pass_through", "cat_cow",
            "scorpion_stretch",
        ),
        WarmupPhase.CORE_ISOMETRIC: (
            "tall_kneeling_pallof_hold", "hollow_body_hold", "bird_dog", "plank",
        ),
        WarmupPhase.CORE_DYNAMIC: ("core_bicycle", "dead_bug_with_reach", "bird_dog_crunch"),
        WarmupPhase.WALKING_DRILLS: (
            "walking_spiderman", "walking_lunge_rotation", "lateral_shuffle", "walking_knee_hug",
        ),
        WarmupPhase.MOVEMENT_PREP: ("jog", "carioca", "skip", "high_knees_drill"),
        WarmupPhase.POWER_PRIMER: (
            "med_ball_overhead_throw_warmup", "med_ball_chest_pass_warmup",
            "explosive_pushup_warmup",
        ),
    },
    DayType.POWER: {
        WarmupPhase.FOAM_ROLLING: (
            "foam_roll_quads", "foam_roll_hamstrings", "foam_roll_thoracic", "foam_roll_glutes",
        ),
        WarmupPhase.MOBILITY: (
            "worlds_greatest_stretch", "hip_circles", "thoracic_rotation", "ankle_circles",
            "inchworm",
        ),
        WarmupPhase.CORE_ISOMETRIC: ("hollow_body_hold", "bear_crawl_hold", "dead_bug", "plank"),
        WarmupPhase.CORE_DYNAMIC: ("glute_bridge_march", "bird_dog_crunch", "core_bicycle"),
        WarmupPhase.WALKING_DRILLS: (
            "walking_spiderman", "walking_rdl_reach", "lateral_shuffle", "walking_lunge_rotation",
        ),
        WarmupPhase.MOVEMENT_PREP: ("a_skip", "power_skip", "carioca", "high_knees_drill"),
        WarmupPhase.POWER_PRIMER: (
            "vertical_jump_warmup", "broad_jump_warmup", "box_jump_warmup",
        ),
    },
    DayType.FULL_BODY: {
        WarmupPhase.FOAM_ROLLING: (
            "foam_roll_quads", "foam_roll_thoracic", "foam_roll_glutes", "foam_roll_lats",
        ),
        WarmupPhase.MOBILITY: (
            "worlds_greatest_stretch", "thoracic_rotation", "hip_circles",
            "shoulder_pass_through", "cat_cow",
        ),
        WarmupPhase.CORE_ISOMETRIC: (
            "hollow_body_hold", "bear_crawl_hold", "tall_kneeling_pallof_hold", "dead_bug",
        ),
        WarmupPhase.CORE_DYNAMIC: ("glute_bridge_march", "dead_bug_with_reach", "core_bicycle"),
        WarmupPhase.WALKING_DRILLS: (
            "walking_knee_hug", "walking_spiderman", "lateral_shuffle", "walking_lunge_rotation",
        ),
        WarmupPhase.MOVEMENT_PREP: ("jog", "skip", "a_skip", "carioca"),
        WarmupPhase.POWER_PRIMER: (
            "med_ball_chest_pass_warmup", "broad_jump_warmup", "med_ball_rotational_pass",
        ),
    },
    # Foam rolling and mobility only
    DayType.RECOVERY: {
        WarmupPhase.FOAM_ROLLING: (
            "foam_roll_quads", "foam_roll_hamstrings", "foam_roll_thoracic", "foam_roll_glutes",
            "foam_roll_lats", "foam_roll_it_band",
        ),
        WarmupPhase.MOBILITY: (
            "worlds_greatest_stretch", "90_90_hip_stretch", "cat_cow", "hip_flexor_stretch",
            "thoracic_rotation", "scorpion_stretch",
        ),
    },
}


def active_phases_for_day_type(day_type: DayType) -> tuple[WarmupPhase, ...]:
    """Warmup stages that have a pool for this day type, in protocol order."""
    pools = WARMUP_POOLS.get(day_type, {})
    return tuple(stage.phase for stage in WARMUP_PHASES if stage.phase in pools)


def warmup_duration(day_type: DayType, include_optional: bool = False) -> float:
    """Total warmup time in minutes for a day type.

    Optional stages (foam rolling) are excluded unless requested.
    """
    active = active_phases_for_day_type(day_type)
    return sum(
        stage.duration_minutes
        for stage in WARMUP_PHASES
        if stage.phase in active and (include_optional or not stage.optional)
    )


def sequence_warmup(
    day_type: DayType,
    include_optional: bool = False,
    start_index: int = 0,
) -> list[ExercisePrescription]:
    """Build the ordered warmup for a day type.

    Walks the protocol stages in order, drawing up to ``exercise_count``
    exercises from each stage pool. An exercise already drawn by an
    earlier stage is skipped, so the warmup never repeats a movement.

    Args:
        day_type: Semantic training day.
        include_optional: Include foam rolling.
        start_index: ``order_index`` of the first emitted exercise.

    Returns:
        Warmup prescriptions tagged with their stage, ``order_index``
        strictly increasing from ``start_index``.
    """
    pools = WARMUP_POOLS.get(day_type, {})
    used: set[str] = set()
    prescriptions: list[ExercisePrescription] = []
    order_index = start_index

    for stage in WARMUP_PHASES:
        pool = pools.get(stage.phase)
        if pool is None:
            continue
        if stage.optional and not include_optional:
            continue

        drawn = 0
        for slug in pool:
            if drawn >= stage.exercise_count:
                break
            if slug in used:
                continue
            used.add(slug)
            prescriptions.append(
                ExercisePrescription(
                    exercise_slug=slug,
                    sets=stage.default_sets,
                    reps=stage.default_reps,
                    rest_seconds=stage.default_rest_seconds,
                    order_index=order_index,
                    section=ExerciseSection.WARMUP,
                    warmup_phase=stage.phase,
                )
            )
            order_index += 1
            drawn += 1

    return prescriptions


def group_by_warmup_phase(
    exercises: list[ExercisePrescription] | tuple[ExercisePrescription, ...],
) -> dict[WarmupPhase, list[ExercisePrescription]]:
    """Group prescriptions by warmup stage, preserving order.

    Exercises without a warmup stage are ignored.
    """
    groups: dict[WarmupPhase, list[ExercisePrescription]] = {}
    for ex in exercises:
        if ex.warmup_phase is None:
            continue
        groups.setdefault(ex.warmup_phase, []).append(ex)
    return groups


def iter_warmup_slugs() -> Iterator[str]:
    """Every slug referenced by a warmup pool (may repeat)."""
    for by_phase in WARMUP_POOLS.values():
        for pool in by_phase.values():
            yield from pool
