"""Exercise pool registry — category × phase × day type × complexity tier lookups.

Pools are ordered: selection always takes a prefix, so the first entries
are the primary lifts for that slot. A pool may be shorter than the
requested count; callers receive what exists.

Category emphases:
    1 Continuous/Directional (soccer, hockey, lacrosse)
    2 Explosive/Vertical (basketball, volleyball)
    3 Rotational/Unilateral (baseball, tennis, golf)
    4 General Strength (football, wrestling)
"""

from __future__ import annotations

import logging
from typing import Iterator, Sequence

from prescription_engine.exceptions import ValidationError
from prescription_engine.models.enums import ComplexityTier, DayType, Phase

logger = logging.getLogger(__name__)

TieredPool = dict[ComplexityTier, tuple[str, ...]]


def _tiers(
    basic: tuple[str, ...],
    moderate: tuple[str, ...],
    advanced: tuple[str, ...],
) -> TieredPool:
    return {
        ComplexityTier.BASIC: basic,
        ComplexityTier.MODERATE: moderate,
        ComplexityTier.ADVANCED: advanced,
    }


# Cooldown: index 0 after lower-body days, index 1 otherwise
COOLDOWN_EXERCISES: tuple[str, str] = ("90_90_hip_stretch", "hip_flexor_stretch")

# Heavy bilateral lifts that keep full set count and get extra rest
COMPOUND_LIFTS: frozenset[str] = frozenset({
    "back_squat",
    "trap_bar_deadlift",
    "front_squat",
    "db_bench_press",
    "overhead_press",
})

# ---------------------------------------------------------------------------
# GPP: foundation movements, movement quality, work capacity
# ---------------------------------------------------------------------------

_GPP_POOLS: dict[int, dict[DayType, TieredPool]] = {
    # Category 1: Continuous/Directional (Soccer, etc.)
    # Emphasis: Single-leg stability, rotational core, conditioning
    1: {
        DayType.LOWER_A: _tiers(
            ("goblet_squat", "romanian_deadlift", "reverse_lunge", "glute_bridge"),
            ("back_squat", "romanian_deadlift", "bulgarian_split_squat", "single_leg_rdl"),
            ("back_squat", "trap_bar_deadlift", "bulgarian_split_squat", "single_leg_deadlift"),
        ),
        DayType.LOWER_B: _tiers(
            ("romanian_deadlift", "goblet_squat", "lateral_lunge", "hip_thrust"),
            ("trap_bar_deadlift", "back_squat", "single_leg_rdl", "hip_thrust"),
            ("trap_bar_deadlift", "front_squat", "single_leg_rdl", "hip_thrust", "lateral_lunge"),
        ),
        DayType.UPPER_A: _tiers(
            ("push_up", "elevated_inverted_row", "db_shoulder_press", "face_pull"),
            ("db_bench_press", "inverted_row", "overhead_press", "pull_up", "face_pull"),
            (
                "db_bench_press", "feet_elevated_inverted_row", "overhead_press",
                "weighted_pull_up", "incline_db_press",
            ),
        ),
        DayType.UPPER_B: _tiers(
            ("inverted_row", "push_up", "face_pull", "db_shoulder_press"),
            ("pull_up", "db_bench_press", "face_pull", "db_row", "overhead_press"),
            ("weighted_pull_up", "incline_db_press", "db_row", "overhead_press", "face_pull"),
        ),
        DayType.POWER: _tiers(
            (
                "pogo_hops", "med_ball_slam", "kettlebell_swing", "ascending_skater_jumps",
                "goblet_carry",
            ),
            ("broad_jump", "med_ball_rotational_throw", "deceleration_skater_jump", "farmers_carry"),
            ("consecutive_broad_jumps", "box_jump", "lateral_single_leg_bounds", "suitcase_carry"),
        ),
        DayType.FULL_BODY: _tiers(
            ("goblet_squat", "push_up", "romanian_deadlift", "inverted_row", "kettlebell_swing"),
            ("back_squat", "db_bench_press", "romanian_deadlift", "db_row", "box_jump"),
            ("back_squat", "db_bench_press", "trap_bar_deadlift", "pull_up", "broad_jump"),
        ),
    },

    # Category 2: Explosive/Vertical (Basketball, etc.)
    # Emphasis: Vertical power, landing mechanics, reactive strength
    2: {
        DayType.LOWER_A: _tiers(
            ("goblet_squat", "hip_thrust", "reverse_lunge", "glute_bridge"),
            ("back_squat", "hip_thrust", "bulgarian_split_squat", "single_leg_rdl"),
            ("front_squat", "trap_bar_deadlift", "assisted_pistol_squat", "single_leg_hip_thrust"),
        ),
        DayType.LOWER_B: _tiers(
            ("hip_thrust", "goblet_squat", "walking_lunge", "glute_bridge"),
            ("romanian_deadlift", "back_squat", "hip_thrust", "reverse_lunge"),
            ("trap_bar_deadlift", "front_squat", "hip_thrust", "single_leg_rdl", "reverse_lunge"),
        ),
        DayType.UPPER_A: _tiers(
            ("push_up", "elevated_inverted_row", "db_shoulder_press", "face_pull"),
            ("db_bench_press", "lat_pulldown", "overhead_press", "inverted_row"),
            ("db_bench_press", "pull_up", "push_press", "weighted_pull_up", "incline_db_press"),
        ),
        DayType.UPPER_B: _tiers(
            ("inverted_row", "push_up", "face_pull", "db_row"),
            ("lat_pulldown", "db_bench_press", "db_row", "overhead_press", "face_pull"),
            ("pull_up", "incline_db_press", "db_row", "overhead_press", "weighted_pull_up"),
        ),
        DayType.POWER: _tiers(
            ("jump_squat", "pogo_hops", "med_ball_slam", "ascending_skater_jumps"),
            ("box_jump", "broad_jump", "med_ball_slam", "deceleration_skater_jump"),
            ("depth_jump", "drop_jump", "consecutive_broad_jumps", "lateral_single_leg_bounds"),
        ),
        DayType.FULL_BODY: _tiers(
            ("goblet_squat", "push_up", "hip_thrust", "inverted_row", "box_jump"),
            ("back_squat", "db_bench_press", "romanian_deadlift", "pull_up", "med_ball_slam"),
            ("front_squat", "db_bench_press", "trap_bar_deadlift", "weighted_pull_up", "depth_jump"),
        ),
    },

    # Category 3: Rotational/Unilateral (Baseball, Tennis, Golf, etc.)
    # Emphasis: Anti-rotation, thoracic mobility, hip power
    3: {
        DayType.LOWER_A: _tiers(
            ("goblet_squat", "kickstand_rdl", "lateral_lunge", "glute_bridge"),
            ("back_squat", "single_leg_rdl", "cossack_squat", "bulgarian_split_squat"),
            ("back_squat", "single_leg_deadlift", "assisted_pistol_squat", "deficit_reverse_lunge"),
        ),
        DayType.LOWER_B: _tiers(
            ("romanian_deadlift", "goblet_squat", "reverse_lunge", "hip_thrust"),
            ("single_leg_rdl", "back_squat", "lateral_lunge", "hip_thrust"),
            ("trap_bar_deadlift", "back_squat", "lateral_lunge", "single_leg_rdl", "hip_thrust"),
        ),
        DayType.UPPER_A: _tiers(
            ("push_up", "db_row", "sa_db_floor_press", "face_pull"),
            ("sa_db_bench_press", "db_row", "overhead_press", "inverted_row"),
            ("sa_rotational_bench_press", "kroc_row", "push_press", "pull_up"),
        ),
        DayType.UPPER_B: _tiers(
            ("db_row", "push_up", "face_pull", "inverted_row"),
            ("db_row", "db_bench_press", "inverted_row", "overhead_press", "face_pull"),
            ("db_row", "incline_db_press", "pull_up", "overhead_press", "face_pull"),
        ),
        DayType.POWER: _tiers(
            ("kneeling_med_ball_rotation", "med_ball_slam", "kettlebell_swing", "pogo_hops"),
            ("med_ball_rotational_throw", "cable_woodchop", "broad_jump", "deceleration_skater_jump"),
            ("rotational_med_ball_slam", "low_high_woodchop", "box_jump", "lateral_single_leg_bounds"),
        ),
        DayType.FULL_BODY: _tiers(
            ("goblet_squat", "push_up", "romanian_deadlift", "db_row", "med_ball_slam"),
            ("back_squat", "db_bench_press", "single_leg_rdl", "db_row", "med_ball_rotational_throw"),
            ("back_squat", "incline_db_press", "trap_bar_deadlift", "pull_up", "cable_woodchop"),
        ),
    },

    # Category 4: General Strength (Football, Wrestling, etc.)
    # Emphasis: Bilateral strength, work capacity, grip endurance
    4: {
        DayType.LOWER_A: _tiers(
            ("goblet_squat", "romanian_deadlift", "walking_lunge", "hip_thrust"),
            ("back_squat", "trap_bar_deadlift", "walking_lunge", "single_leg_rdl"),
            ("back_squat", "conventional_deadlift", "front_squat", "nordic_curl"),
        ),
        DayType.LOWER_B: _tiers(
            ("romanian_deadlift", "goblet_squat", "hip_thrust", "reverse_lunge"),
            ("trap_bar_deadlift", "back_squat", "hip_thrust", "walking_lunge"),
            (
                "trap_bar_deadlift", "front_squat", "hip_thrust", "bulgarian_split_squat",
                "single_leg_rdl",
            ),
        ),
        DayType.UPPER_A: _tiers(
            ("push_up", "elevated_inverted_row", "db_shoulder_press", "db_bench_press"),
            ("db_bench_press", "inverted_row", "overhead_press", "pull_up"),
            ("bench_press", "weighted_pull_up", "push_press", "kroc_row"),
        ),
        DayType.UPPER_B: _tiers(
            ("inverted_row", "push_up", "db_row", "face_pull"),
            ("db_row", "db_bench_press", "pull_up", "overhead_press", "face_pull"),
            ("weighted_pull_up", "incline_db_press", "db_row", "overhead_press", "face_pull"),
        ),
        DayType.POWER: _tiers(
            ("kettlebell_swing", "med_ball_slam", "goblet_carry", "farmers_carry"),
            ("kettlebell_swing", "sled_push", "farmers_carry", "suitcase_carry"),
            ("sled_push", "sled_pull", "trap_bar_carry", "zercher_carry"),
        ),
        DayType.FULL_BODY: _tiers(
            ("goblet_squat", "push_up", "romanian_deadlift", "inverted_row", "kettlebell_swing"),
            ("back_squat", "db_bench_press", "trap_bar_deadlift", "db_row", "sled_push"),
            ("back_squat", "db_bench_press", "trap_bar_deadlift", "weighted_pull_up", "sled_push"),
        ),
    },
}

# ---------------------------------------------------------------------------
# SPP: sport-specific power, skill transfer, moderate intensity
# ---------------------------------------------------------------------------

_SPP_POOLS: dict[int, dict[DayType, TieredPool]] = {
    # Category 1: Continuous/Directional (Soccer, etc.)
    # SPP Focus: Directional speed, reactive agility, endurance under fatigue
    1: {
        DayType.LOWER_A: _tiers(
            ("goblet_squat", "single_leg_rdl", "lateral_lunge", "single_leg_glute_bridge"),
            ("back_squat", "single_leg_rdl", "lateral_step_up", "bulgarian_split_squat"),
            ("back_squat", "single_leg_deadlift", "cossack_squat", "deficit_reverse_lunge"),
        ),
        DayType.LOWER_B: _tiers(
            ("single_leg_rdl", "goblet_squat", "hip_thrust", "lateral_lunge"),
            ("single_leg_rdl", "back_squat", "hip_thrust", "lateral_step_up"),
            ("single_leg_deadlift", "back_squat", "hip_thrust", "cossack_squat"),
        ),
        DayType.UPPER_A: _tiers(
            ("push_up", "inverted_row", "db_shoulder_press", "face_pull"),
            ("db_bench_press", "pull_up", "push_press", "db_row"),
            ("db_bench_press", "weighted_pull_up", "push_press", "kroc_row"),
        ),
        DayType.UPPER_B: _tiers(
            ("inverted_row", "push_up", "face_pull", "db_row"),
            ("pull_up", "db_bench_press", "db_row", "push_press", "face_pull"),
            ("weighted_pull_up", "db_bench_press", "kroc_row", "push_press", "face_pull"),
        ),
        DayType.POWER: _tiers(
            ("broad_jump", "deceleration_skater_jump", "kettlebell_swing", "farmers_carry"),
            ("box_jump", "lateral_single_leg_bounds", "med_ball_rotational_throw", "suitcase_carry"),
            ("depth_jump", "consecutive_broad_jumps", "shuttle_sprint", "trap_bar_carry"),
        ),
        DayType.FULL_BODY: _tiers(
            ("goblet_squat", "push_up", "single_leg_rdl", "inverted_row", "broad_jump"),
            ("back_squat", "db_bench_press", "single_leg_rdl", "pull_up", "box_jump"),
            ("back_squat", "db_bench_press", "single_leg_deadlift", "weighted_pull_up", "depth_jump"),
        ),
    },

    # Category 2: Explosive/Vertical (Basketball, etc.)
    # SPP Focus: Vertical power, reactive jumping, landing mechanics
    2: {
        DayType.LOWER_A: _tiers(
            ("back_squat", "hip_thrust", "step_up", "single_leg_glute_bridge"),
            ("front_squat", "single_leg_hip_thrust", "bulgarian_split_squat", "lateral_step_up"),
            ("front_squat", "trap_bar_deadlift", "assisted_pistol_squat", "nordic_curl"),
        ),
        DayType.LOWER_B: _tiers(
            ("hip_thrust", "back_squat", "reverse_lunge", "glute_bridge"),
            ("single_leg_hip_thrust", "front_squat", "step_up", "bulgarian_split_squat"),
            ("trap_bar_deadlift", "front_squat", "assisted_pistol_squat", "single_leg_hip_thrust"),
        ),
        DayType.UPPER_A: _tiers(
            ("push_up", "pull_up", "db_shoulder_press", "inverted_row"),
            ("db_bench_press", "weighted_pull_up", "push_press", "lat_pulldown"),
            ("bench_press", "weighted_pull_up", "push_press", "pull_up"),
        ),
        DayType.UPPER_B: _tiers(
            ("pull_up", "push_up", "inverted_row", "db_row"),
            ("weighted_pull_up", "db_bench_press", "lat_pulldown", "push_press", "face_pull"),
            ("weighted_pull_up", "bench_press", "pull_up", "push_press", "db_row"),
        ),
        DayType.POWER: _tiers(
            ("box_jump", "broad_jump", "med_ball_slam", "jump_squat"),
            ("depth_jump", "consecutive_broad_jumps", "med_ball_chest_pass", "split_squat_jump"),
            ("drop_jump", "depth_jump", "alternating_lunge_jump", "lateral_single_leg_bounds"),
        ),
        DayType.FULL_BODY: _tiers(
            ("back_squat", "push_up", "hip_thrust", "pull_up", "box_jump"),
            (
                "front_squat", "db_bench_press", "single_leg_hip_thrust", "weighted_pull_up",
                "depth_jump",
            ),
            ("front_squat", "bench_press", "trap_bar_deadlift", "weighted_pull_up", "drop_jump"),
        ),
    },

    # Category 3: Rotational/Unilateral (Baseball, Tennis, Golf, etc.)
    # SPP Focus: Rotational power transfer, hip-shoulder separation, anti-rotation
    3: {
        DayType.LOWER_A: _tiers(
            ("back_squat", "single_leg_rdl", "cossack_squat", "lateral_lunge"),
            ("back_squat", "single_leg_deadlift", "lateral_step_up", "deficit_reverse_lunge"),
            ("front_squat", "single_leg_deadlift", "assisted_pistol_squat", "cossack_squat"),
        ),
        DayType.LOWER_B: _tiers(
            ("single_leg_rdl", "back_squat", "hip_thrust", "lateral_lunge"),
            ("single_leg_deadlift", "back_squat", "cossack_squat", "hip_thrust"),
            ("single_leg_deadlift", "front_squat", "cossack_squat", "hip_thrust", "lateral_step_up"),
        ),
        DayType.UPPER_A: _tiers(
            ("sa_db_bench_press", "db_row", "landmine_press", "face_pull"),
            ("sa_rotational_bench_press", "kroc_row", "push_press", "pull_up"),
            ("sa_rotational_bench_press", "kroc_row", "push_press", "weighted_pull_up"),
        ),
        DayType.UPPER_B: _tiers(
            ("db_row", "sa_db_bench_press", "face_pull", "inverted_row"),
            ("kroc_row", "sa_rotational_bench_press", "pull_up", "push_press", "face_pull"),
            ("kroc_row", "sa_rotational_bench_press", "weighted_pull_up", "push_press", "face_pull"),
        ),
        DayType.POWER: _tiers(
            (
                "med_ball_rotational_throw", "kneeling_med_ball_rotation", "broad_jump",
                "kettlebell_swing",
            ),
            (
                "rotational_med_ball_slam", "med_ball_rotational_throw", "box_jump",
                "lateral_single_leg_bounds",
            ),
            ("rotational_med_ball_slam", "low_high_woodchop", "depth_jump", "deceleration_skater_jump"),
        ),
        DayType.FULL_BODY: _tiers(
            (
                "back_squat", "sa_db_bench_press", "single_leg_rdl", "db_row",
                "med_ball_rotational_throw",
            ),
            (
                "back_squat", "sa_rotational_bench_press", "single_leg_deadlift", "kroc_row",
                "rotational_med_ball_slam",
            ),
            (
                "front_squat", "sa_rotational_bench_press", "single_leg_deadlift",
                "weighted_pull_up", "low_high_woodchop",
            ),
        ),
    },

    # Category 4: General Strength (Football, Wrestling, etc.)
    # SPP Focus: Maximal strength, power under load, grip strength
    4: {
        DayType.LOWER_A: _tiers(
            ("back_squat", "romanian_deadlift", "walking_lunge", "hip_thrust"),
            ("back_squat", "trap_bar_deadlift", "front_squat", "bulgarian_split_squat"),
            ("back_squat", "conventional_deadlift", "front_squat", "nordic_curl"),
        ),
        DayType.LOWER_B: _tiers(
            ("romanian_deadlift", "back_squat", "hip_thrust", "walking_lunge"),
            ("trap_bar_deadlift", "back_squat", "hip_thrust", "front_squat"),
            ("conventional_deadlift", "back_squat", "hip_thrust", "nordic_curl", "front_squat"),
        ),
        DayType.UPPER_A: _tiers(
            ("db_bench_press", "pull_up", "overhead_press", "inverted_row"),
            ("bench_press", "weighted_pull_up", "push_press", "kroc_row"),
            ("bench_press", "weighted_pull_up", "push_press", "chest_supported_row"),
        ),
        DayType.UPPER_B: _tiers(
            ("pull_up", "db_bench_press", "inverted_row", "overhead_press", "face_pull"),
            ("weighted_pull_up", "bench_press", "kroc_row", "push_press", "face_pull"),
            ("weighted_pull_up", "bench_press", "chest_supported_row", "push_press", "face_pull"),
        ),
        DayType.POWER: _tiers(
            ("kettlebell_swing", "sled_push", "farmers_carry", "med_ball_slam"),
            ("sled_push", "sled_pull", "trap_bar_carry", "med_ball_chest_pass"),
            ("sled_push", "sled_pull", "zercher_carry", "front_rack_carry"),
        ),
        DayType.FULL_BODY: _tiers(
            ("back_squat", "db_bench_press", "romanian_deadlift", "pull_up", "kettlebell_swing"),
            ("back_squat", "bench_press", "trap_bar_deadlift", "weighted_pull_up", "sled_push"),
            ("back_squat", "bench_press", "conventional_deadlift", "weighted_pull_up", "sled_push"),
        ),
    },
}

# ---------------------------------------------------------------------------
# SSP: peak power expression, competition prep, strength maintenance
# ---------------------------------------------------------------------------

_SSP_POOLS: dict[int, dict[DayType, TieredPool]] = {
    # Category 1: Continuous/Directional (Soccer, etc.)
    # SSP Focus: Game-speed movements, reactive power, minimal fatigue
    1: {
        DayType.LOWER_A: _tiers(
            ("back_squat", "single_leg_rdl", "bulgarian_split_squat", "hip_thrust"),
            ("back_squat", "single_leg_deadlift", "lateral_step_up", "single_leg_hip_thrust"),
            ("back_squat", "trap_bar_deadlift", "deficit_reverse_lunge", "single_leg_deadlift"),
        ),
        DayType.LOWER_B: _tiers(
            ("single_leg_rdl", "back_squat", "hip_thrust", "bulgarian_split_squat"),
            ("single_leg_deadlift", "back_squat", "single_leg_hip_thrust", "lateral_step_up"),
            ("trap_bar_deadlift", "back_squat", "single_leg_deadlift", "deficit_reverse_lunge"),
        ),
        DayType.UPPER_A: _tiers(
            ("db_bench_press", "pull_up", "push_press", "db_row"),
            ("db_bench_press", "weighted_pull_up", "push_press", "kroc_row"),
            ("bench_press", "weighted_pull_up", "push_press", "kroc_row"),
        ),
        DayType.UPPER_B: _tiers(
            ("pull_up", "db_bench_press", "db_row", "push_press", "face_pull"),
            ("weighted_pull_up", "db_bench_press", "kroc_row", "push_press", "face_pull"),
            ("weighted_pull_up", "bench_press", "kroc_row", "push_press", "face_pull"),
        ),
        DayType.POWER: _tiers(
            ("box_jump", "lateral_single_leg_bounds", "shuttle_sprint", "suitcase_carry"),
            ("depth_jump", "consecutive_broad_jumps", "sprint", "trap_bar_carry"),
            ("drop_jump", "lateral_single_leg_bounds", "sprint", "trap_bar_carry"),
        ),
        DayType.FULL_BODY: _tiers(
            ("back_squat", "db_bench_press", "single_leg_rdl", "pull_up", "box_jump"),
            ("back_squat", "db_bench_press", "single_leg_deadlift", "weighted_pull_up", "depth_jump"),
            ("back_squat", "bench_press", "trap_bar_deadlift", "weighted_pull_up", "drop_jump"),
        ),
    },

    # Category 2: Explosive/Vertical (Basketball, etc.)
    # SSP Focus: Maximal vertical power, reactive strength, game-ready explosiveness
    2: {
        DayType.LOWER_A: _tiers(
            ("front_squat", "hip_thrust", "bulgarian_split_squat", "single_leg_hip_thrust"),
            ("front_squat", "trap_bar_deadlift", "assisted_pistol_squat", "nordic_curl"),
            ("front_squat", "trap_bar_deadlift", "assisted_pistol_squat", "single_leg_hip_thrust"),
        ),
        DayType.LOWER_B: _tiers(
            ("hip_thrust", "front_squat", "single_leg_hip_thrust", "bulgarian_split_squat"),
            ("trap_bar_deadlift", "front_squat", "nordic_curl", "assisted_pistol_squat"),
            ("trap_bar_deadlift", "front_squat", "single_leg_hip_thrust", "assisted_pistol_squat"),
        ),
        DayType.UPPER_A: _tiers(
            ("db_bench_press", "weighted_pull_up", "push_press", "pull_up"),
            ("bench_press", "weighted_pull_up", "push_press", "explosive_pushup"),
            ("bench_press", "weighted_pull_up", "push_press", "plyo_push_up"),
        ),
        DayType.UPPER_B: _tiers(
            ("weighted_pull_up", "db_bench_press", "pull_up", "push_press", "face_pull"),
            ("weighted_pull_up", "bench_press", "explosive_pushup", "push_press", "db_row"),
            ("weighted_pull_up", "bench_press", "plyo_push_up", "push_press", "db_row"),
        ),
        DayType.POWER: _tiers(
            ("depth_jump", "box_jump", "med_ball_chest_pass", "split_squat_jump"),
            ("drop_jump", "depth_jump", "alternating_lunge_jump", "consecutive_broad_jumps"),
            ("drop_jump", "depth_jump", "lateral_single_leg_bounds", "standing_long_jump"),
        ),
        DayType.FULL_BODY: _tiers(
            ("front_squat", "db_bench_press", "hip_thrust", "weighted_pull_up", "depth_jump"),
            ("front_squat", "bench_press", "trap_bar_deadlift", "weighted_pull_up", "drop_jump"),
            ("front_squat", "bench_press", "trap_bar_deadlift", "weighted_pull_up", "drop_jump"),
        ),
    },

    # Category 3: Rotational/Unilateral (Baseball, Tennis, Golf, etc.)
    # SSP Focus: Peak rotational power, explosive hip rotation, competition-ready
    3: {
        DayType.LOWER_A: _tiers(
            ("back_squat", "single_leg_deadlift", "cossack_squat", "lateral_step_up"),
            ("front_squat", "single_leg_deadlift", "assisted_pistol_squat", "deficit_reverse_lunge"),
            ("front_squat", "single_leg_deadlift", "assisted_pistol_squat", "cossack_squat"),
        ),
        DayType.LOWER_B: _tiers(
            ("single_leg_deadlift", "back_squat", "lateral_step_up", "cossack_squat"),
            ("single_leg_deadlift", "front_squat", "deficit_reverse_lunge", "assisted_pistol_squat"),
            ("single_leg_deadlift", "front_squat", "cossack_squat", "assisted_pistol_squat"),
        ),
        DayType.UPPER_A: _tiers(
            ("sa_rotational_bench_press", "kroc_row", "push_press", "pull_up"),
            ("sa_rotational_bench_press", "kroc_row", "push_press", "weighted_pull_up"),
            ("sa_rotational_bench_press", "kroc_row", "push_press", "weighted_pull_up"),
        ),
        DayType.UPPER_B: _tiers(
            ("kroc_row", "sa_rotational_bench_press", "pull_up", "push_press", "face_pull"),
            ("kroc_row", "sa_rotational_bench_press", "weighted_pull_up", "push_press", "face_pull"),
            ("kroc_row", "sa_rotational_bench_press", "weighted_pull_up", "push_press", "face_pull"),
        ),
        DayType.POWER: _tiers(
            (
                "rotational_med_ball_slam", "med_ball_rotational_throw", "box_jump",
                "deceleration_skater_jump",
            ),
            (
                "rotational_med_ball_slam", "low_high_woodchop", "depth_jump",
                "lateral_single_leg_bounds",
            ),
            ("rotational_med_ball_slam", "low_high_woodchop", "drop_jump", "lateral_single_leg_bounds"),
        ),
        DayType.FULL_BODY: _tiers(
            (
                "back_squat", "sa_rotational_bench_press", "single_leg_deadlift", "kroc_row",
                "rotational_med_ball_slam",
            ),
            (
                "front_squat", "sa_rotational_bench_press", "single_leg_deadlift",
                "weighted_pull_up", "low_high_woodchop",
            ),
            (
                "front_squat", "sa_rotational_bench_press", "single_leg_deadlift",
                "weighted_pull_up", "low_high_woodchop",
            ),
        ),
    },

    # Category 4: General Strength (Football, Wrestling, etc.)
    # SSP Focus: Peak strength expression, power maintenance, competition prep
    4: {
        DayType.LOWER_A: _tiers(
            ("back_squat", "trap_bar_deadlift", "front_squat", "hip_thrust"),
            ("back_squat", "conventional_deadlift", "front_squat", "nordic_curl"),
            ("back_squat", "conventional_deadlift", "front_squat", "nordic_curl"),
        ),
        DayType.LOWER_B: _tiers(
            ("trap_bar_deadlift", "back_squat", "hip_thrust", "front_squat"),
            ("conventional_deadlift", "back_squat", "nordic_curl", "front_squat"),
            ("conventional_deadlift", "back_squat", "nordic_curl", "front_squat"),
        ),
        DayType.UPPER_A: _tiers(
            ("bench_press", "weighted_pull_up", "push_press", "kroc_row"),
            ("bench_press", "weighted_pull_up", "push_press", "chest_supported_row"),
            ("bench_press", "weighted_pull_up", "push_press", "kroc_row"),
        ),
        DayType.UPPER_B: _tiers(
            ("weighted_pull_up", "bench_press", "kroc_row", "push_press", "face_pull"),
            ("weighted_pull_up", "bench_press", "chest_supported_row", "push_press", "face_pull"),
            ("weighted_pull_up", "bench_press", "kroc_row", "push_press", "face_pull"),
        ),
        DayType.POWER: _tiers(
            ("sled_push", "sled_pull", "trap_bar_carry", "med_ball_chest_pass"),
            ("sled_push", "sled_pull", "zercher_carry", "front_rack_carry"),
            ("sled_push", "sled_pull", "zercher_carry", "front_rack_carry"),
        ),
        DayType.FULL_BODY: _tiers(
            ("back_squat", "bench_press", "trap_bar_deadlift", "weighted_pull_up", "sled_push"),
            ("back_squat", "bench_press", "conventional_deadlift", "weighted_pull_up", "sled_push"),
            ("back_squat", "bench_press", "conventional_deadlift", "weighted_pull_up", "sled_push"),
        ),
    },
}

_MAIN_POOLS: dict[Phase, dict[int, dict[DayType, TieredPool]]] = {
    Phase.GPP: _GPP_POOLS,
    Phase.SPP: _SPP_POOLS,
    Phase.SSP: _SSP_POOLS,
}

# Core / finisher work appended after the main lifts
_CORE_POOLS: dict[Phase, dict[int, TieredPool]] = {
    Phase.GPP: {
        1: _tiers(
            ("plank", "dead_bug", "bird_dog", "knee_side_plank"),
            ("pallof_press", "plank_shoulder_taps", "side_plank", "band_woodchop"),
            ("pallof_press_march", "hanging_leg_raise", "side_plank_hip_dip", "cable_woodchop"),
        ),
        2: _tiers(
            ("plank", "dead_bug", "glute_bridge", "knee_side_plank"),
            ("pallof_press", "plank_shoulder_taps", "hanging_leg_raise", "side_plank"),
            ("toes_to_bar", "pallof_press_march", "side_plank_hip_dip", "cable_woodchop"),
        ),
        3: _tiers(
            ("dead_bug", "bird_dog", "knee_side_plank", "lying_leg_raise"),
            ("pallof_press", "band_woodchop", "side_plank", "plank_shoulder_taps"),
            ("pallof_press_march", "cable_woodchop", "side_plank_hip_dip", "toes_to_bar"),
        ),
        4: _tiers(
            ("plank", "dead_bug", "glute_bridge", "knee_side_plank"),
            ("pallof_press", "plank_shoulder_taps", "side_plank", "hanging_leg_raise"),
            ("toes_to_bar", "pallof_press_march", "side_plank_hip_dip", "front_rack_carry"),
        ),
    },
    Phase.SPP: {
        1: _tiers(
            ("pallof_press", "side_plank", "plank_shoulder_taps", "dead_bug"),
            ("pallof_press_march", "side_plank_hip_dip", "cable_woodchop", "hanging_leg_raise"),
            ("cable_woodchop", "toes_to_bar", "side_plank_hip_dip", "pallof_press_march"),
        ),
        2: _tiers(
            ("pallof_press", "hanging_leg_raise", "plank_shoulder_taps", "side_plank"),
            ("toes_to_bar", "pallof_press_march", "cable_woodchop", "side_plank_hip_dip"),
            ("toes_to_bar", "pallof_press_march", "cable_woodchop", "hanging_leg_raise"),
        ),
        3: _tiers(
            ("pallof_press", "cable_woodchop", "side_plank", "band_woodchop"),
            ("pallof_press_march", "low_high_woodchop", "side_plank_hip_dip", "cable_woodchop"),
            ("pallof_press_march", "low_high_woodchop", "toes_to_bar", "side_plank_hip_dip"),
        ),
        4: _tiers(
            ("pallof_press", "plank_shoulder_taps", "side_plank", "hanging_leg_raise"),
            ("toes_to_bar", "pallof_press_march", "side_plank_hip_dip", "cable_woodchop"),
            ("toes_to_bar", "front_rack_carry", "pallof_press_march", "cable_woodchop"),
        ),
    },
    Phase.SSP: {
        1: _tiers(
            ("pallof_press_march", "side_plank_hip_dip", "hanging_leg_raise", "cable_woodchop"),
            ("pallof_press_march", "toes_to_bar", "cable_woodchop", "side_plank_hip_dip"),
            ("toes_to_bar", "pallof_press_march", "cable_woodchop", "side_plank_hip_dip"),
        ),
        2: _tiers(
            ("toes_to_bar", "pallof_press_march", "hanging_leg_raise", "side_plank_hip_dip"),
            ("toes_to_bar", "pallof_press_march", "cable_woodchop", "side_plank_hip_dip"),
            ("toes_to_bar", "pallof_press_march", "cable_woodchop", "hanging_leg_raise"),
        ),
        3: _tiers(
            ("pallof_press_march", "low_high_woodchop", "side_plank_hip_dip", "toes_to_bar"),
            ("pallof_press_march", "low_high_woodchop", "toes_to_bar", "cable_woodchop"),
            ("pallof_press_march", "low_high_woodchop", "toes_to_bar", "cable_woodchop"),
        ),
        4: _tiers(
            ("toes_to_bar", "pallof_press_march", "front_rack_carry", "side_plank_hip_dip"),
            ("toes_to_bar", "front_rack_carry", "pallof_press_march", "cable_woodchop"),
            ("toes_to_bar", "front_rack_carry", "pallof_press_march", "cable_woodchop"),
        ),
    },
}

# Active recovery day: mobility and stretching only
_RECOVERY_POOL: TieredPool = _tiers(
    ("cat_cow", "worlds_greatest_stretch", "90_90_hip_stretch", "hip_flexor_stretch"),
    ("cat_cow", "worlds_greatest_stretch", "90_90_hip_stretch", "thoracic_rotation", "dead_bug"),
    ("cat_cow", "worlds_greatest_stretch", "90_90_hip_stretch", "thoracic_rotation", "bird_dog"),
)
# Rotational sports trade the hip flexor stretch for thoracic rotation
_RECOVERY_POOL_OVERRIDES: dict[int, TieredPool] = {
    3: {
        **_RECOVERY_POOL,
        ComplexityTier.BASIC: (
            "cat_cow", "worlds_greatest_stretch", "90_90_hip_stretch", "thoracic_rotation",
        ),
    },
}


def _category_pools(phase: Phase, category: int) -> dict[DayType, TieredPool]:
    try:
        return _MAIN_POOLS[phase][category]
    except KeyError:
        raise ValidationError(
            f"No exercise pools for category {category!r} in phase {phase!r}"
        ) from None


def pool_for(
    category: int,
    phase: Phase,
    day_type: DayType,
    tier: ComplexityTier,
) -> tuple[str, ...]:
    """Ordered main-exercise pool for one slot.

    The recovery day type resolves to the dedicated mobility pool.

    Raises:
        ValidationError: If any key has no pool.
    """
    if day_type == DayType.RECOVERY:
        return recovery_pool_for(category, tier)
    pools = _category_pools(phase, category)
    try:
        return pools[day_type][tier]
    except KeyError:
        raise ValidationError(
            f"No {tier.name.lower()} pool for {day_type.name} "
            f"(category {category}, {phase.name})"
        ) from None


def core_pool_for(category: int, phase: Phase, tier: ComplexityTier) -> tuple[str, ...]:
    """Ordered core/finisher pool for a category, phase and tier."""
    try:
        return _CORE_POOLS[phase][category][tier]
    except KeyError:
        raise ValidationError(
            f"No core pool for category {category!r}, {phase!r}, {tier!r}"
        ) from None


def recovery_pool_for(category: int, tier: ComplexityTier) -> tuple[str, ...]:
    """Mobility/stretch pool used on active recovery days."""
    pool = _RECOVERY_POOL_OVERRIDES.get(category, _RECOVERY_POOL)
    try:
        return pool[tier]
    except KeyError:
        raise ValidationError(f"No recovery pool for tier {tier!r}") from None


def cooldown_for(day_type: DayType) -> str:
    """The single cooldown stretch appended to a non-recovery session."""
    return COOLDOWN_EXERCISES[0 if day_type.is_lower_body else 1]


def is_compound(slug: str) -> bool:
    return slug in COMPOUND_LIFTS


def select(pool: Sequence[str], count: int, label: str = "pool") -> tuple[str, ...]:
    """Take the first ``count`` entries of ``pool``.

    A short pool yields fewer items rather than failing or padding.
    """
    selected = tuple(pool[:max(count, 0)])
    if len(selected) < count:
        logger.debug(
            "%s has %d exercises, %d requested", label, len(selected), count
        )
    return selected


def iter_pool_slugs() -> Iterator[str]:
    """Every slug referenced by a main, core, recovery or cooldown pool.

    May repeat slugs; used to validate the pools against a registry.
    """
    for by_category in _MAIN_POOLS.values():
        for by_day in by_category.values():
            for tiered in by_day.values():
                for pool in tiered.values():
                    yield from pool
    for by_category in _CORE_POOLS.values():
        for tiered in by_category.values():
            for pool in tiered.values():
                yield from pool
    for tiered in (_RECOVERY_POOL, *_RECOVERY_POOL_OVERRIDES.values()):
        for pool in tiered.values():
            yield from pool
    yield from COOLDOWN_EXERCISES
