"""Seeded exercise catalog.

Each row is ``(slug, display name, equipment, easier slug, harder slug)``.
Exercises listed in ``_POWER_SLUGS`` are tagged as explosive work.
A progression may name a variant that is not itself catalogued; scaling
still substitutes it, without a registry id.
"""

from __future__ import annotations

from prescription_engine.models.exercise import ExerciseRecord, Progressions

CatalogRow = tuple[str, str, tuple[str, ...], str | None, str | None]

# ---------------------------------------------------------------------------
# Strength, power, core and mobility exercises
# ---------------------------------------------------------------------------
_EXERCISES: tuple[CatalogRow, ...] = (
    ("goblet_squat", "Goblet Squat", ("dumbbell", "kettlebell"), None, "back_squat"),
    ("back_squat", "Back Squat", ("barbell", "rack"), "goblet_squat", "front_squat"),
    ("front_squat", "Front Squat", ("barbell", "rack"), "back_squat", None),
    (
        "bulgarian_split_squat", "Bulgarian Split Squat", ("dumbbell", "bench"),
        "single_leg_squat_box", "assisted_pistol_squat",
    ),
    (
        "single_leg_squat_box", "Single Leg Squat to Box", ("box", "bench"),
        None, "bulgarian_split_squat",
    ),
    ("romanian_deadlift", "Romanian Deadlift", ("barbell", "dumbbell"), None, "kickstand_rdl"),
    (
        "single_leg_rdl", "Single Leg RDL", ("dumbbell", "kettlebell"),
        "kickstand_rdl", "single_leg_deadlift",
    ),
    ("trap_bar_deadlift", "Trap Bar Deadlift", ("trap_bar",), None, None),
    ("hip_thrust", "Hip Thrust", ("barbell", "bench"), "glute_bridge", "single_leg_hip_thrust"),
    ("kettlebell_swing", "Kettlebell Swing", ("kettlebell",), None, None),
    ("bodyweight_squat", "Bodyweight Squat", ("bodyweight",), "assisted_squat", "jump_squat"),
    ("assisted_squat", "Assisted Squat", ("bodyweight",), None, "bodyweight_squat"),
    ("jump_squat", "Jump Squat", ("bodyweight",), "bodyweight_squat", "box_jump"),
    ("reverse_lunge", "Reverse Lunge", ("dumbbell", "bodyweight"), None, "walking_lunge"),
    (
        "walking_lunge", "Walking Lunge", ("dumbbell", "bodyweight"),
        "reverse_lunge", "deficit_reverse_lunge",
    ),
    (
        "lateral_lunge", "Lateral Lunge", ("dumbbell", "bodyweight"),
        "lateral_step_up", "cossack_squat",
    ),
    ("incline_push_up", "Incline Push-Up", ("bodyweight", "bench"), "wall_push_up", "push_up"),
    ("push_up", "Push-Up", ("bodyweight",), "incline_push_up", "decline_push_up"),
    ("decline_push_up", "Decline Push-Up", ("bodyweight", "bench"), "push_up", None),
    ("db_bench_press", "Dumbbell Bench Press", ("dumbbell", "bench"), None, "bench_press"),
    (
        "bench_press", "Bench Press", ("barbell", "bench", "rack"),
        "db_bench_press", "incline_bench_press",
    ),
    ("incline_db_press", "Incline Dumbbell Press", ("dumbbell", "incline_bench"), None, None),
    ("overhead_press", "Overhead Press", ("barbell", "dumbbell"), "db_shoulder_press", None),
    (
        "db_shoulder_press", "Dumbbell Shoulder Press", ("dumbbell",),
        "pike_pushup", "overhead_press",
    ),
    (
        "assisted_pull_up", "Assisted Pull-Up", ("pull_up_bar", "band"),
        "negative_pull_up", "pull_up",
    ),
    ("pull_up", "Pull-Up", ("pull_up_bar",), "assisted_pull_up", "weighted_pull_up"),
    ("weighted_pull_up", "Weighted Pull-Up", ("pull_up_bar", "dumbbell"), "pull_up", None),
    (
        "inverted_row", "Inverted Row", ("barbell", "rack", "rings"),
        "elevated_inverted_row", "feet_elevated_inverted_row",
    ),
    ("db_row", "Dumbbell Row", ("dumbbell", "bench"), None, None),
    ("lat_pulldown", "Lat Pulldown", ("cable_machine",), None, None),
    ("face_pull", "Face Pull", ("cable_machine", "band"), None, None),
    ("knee_plank", "Knee Plank", ("bodyweight",), None, "plank"),
    ("plank", "Plank", ("bodyweight",), "knee_plank", "plank_shoulder_taps"),
    ("plank_shoulder_taps", "Plank with Shoulder Taps", ("bodyweight",), "plank", None),
    ("dead_bug", "Dead Bug", ("bodyweight",), None, "pallof_press"),
    ("pallof_press", "Pallof Press", ("cable_machine", "band"), "dead_bug", "pallof_press_march"),
    ("bird_dog", "Bird Dog", ("bodyweight",), None, "bird_dog_band"),
    ("cable_woodchop", "Cable Woodchop", ("cable_machine",), "band_woodchop", "low_high_woodchop"),
    ("hanging_leg_raise", "Hanging Leg Raise", ("pull_up_bar",), "lying_leg_raise", "toes_to_bar"),
    ("side_plank", "Side Plank", ("bodyweight",), "knee_side_plank", "side_plank_hip_dip"),
    ("box_jump", "Box Jump", ("plyo_box",), "jump_squat", "depth_jump"),
    ("broad_jump", "Broad Jump", ("bodyweight",), "pogo_hops", "consecutive_broad_jumps"),
    ("depth_jump", "Depth Jump", ("plyo_box",), "box_jump", "drop_jump"),
    ("skater_jump", "Skater Jump", ("bodyweight",), "lateral_lunge", "skater_hops"),
    ("med_ball_slam", "Medicine Ball Slam", ("medicine_ball",), None, None),
    (
        "med_ball_rotational_throw", "Medicine Ball Rotational Throw", ("medicine_ball", "wall"),
        "kneeling_med_ball_rotation", "rotational_med_ball_slam",
    ),
    ("worlds_greatest_stretch", "World's Greatest Stretch", ("bodyweight",), None, None),
    ("90_90_hip_stretch", "90/90 Hip Stretch", ("bodyweight",), None, None),
    ("cat_cow", "Cat-Cow", ("bodyweight",), None, None),
    ("hip_flexor_stretch", "Hip Flexor Stretch", ("bodyweight",), None, None),
    ("thoracic_rotation", "Thoracic Rotation", ("bodyweight",), None, None),
    ("lateral_lean", "Lateral Lean", ("bodyweight",), None, None),
    ("lateral_skip", "Lateral Skip", ("bodyweight",), None, None),
    ("jumping_jacks", "Jumping Jacks", ("bodyweight",), None, None),
    ("skater_hops", "Skater Hops", ("bodyweight",), "skater_jump", None),
    ("sprint", "Sprint", ("bodyweight",), None, None),
    ("sled_push", "Sled Push", ("sled",), "bear_crawl", None),
    ("sled_pull", "Sled Pull", ("sled",), "reverse_bear_crawl", None),
    ("tank_push", "Tank Push", ("tank",), "bear_crawl", None),
    ("tank_pull", "Tank Pull", ("tank",), "reverse_bear_crawl", None),
    (
        "med_ball_chest_pass", "Medicine Ball Chest Pass", ("medicine_ball",),
        "explosive_pushup", None,
    ),
    ("med_ball_overhead_pass", "Medicine Ball Overhead Pass", ("medicine_ball",), "burpee", None),
    ("ez_curl_skullcrusher", "EZ Curl Skullcrusher", ("ez_bar",), "diamond_pushup", None),
    ("db_lateral_raise", "Dumbbell Lateral Raise", ("dumbbell",), "arm_circles", None),
    ("pike_pushup", "Pike Push-Up", ("bodyweight",), "push_up", "db_shoulder_press"),
    ("trx_row", "TRX Row", ("trx",), "inverted_row", None),
    ("bar_row", "Inverted Bar Row", ("bar",), "inverted_row", None),
    ("reverse_plank", "Reverse Plank", ("bodyweight",), None, None),
    ("elbow_side_plank", "Elbow Side Plank", ("bodyweight",), "side_plank", None),
    ("mountain_climbers", "Mountain Climbers", ("bodyweight",), None, None),
    ("ab_bicycle", "Ab Bicycle", ("bodyweight",), None, None),
    ("aggressive_dribble", "Aggressive Dribble", ("basketball",), "high_knees", None),
    ("bear_crawl", "Bear Crawl", ("bodyweight",), None, None),
    ("reverse_bear_crawl", "Reverse Bear Crawl", ("bodyweight",), None, None),
    ("explosive_pushup", "Explosive Push-Up", ("bodyweight",), "push_up", None),
    ("burpee", "Burpee", ("bodyweight",), "squat_thrust", None),
    ("diamond_pushup", "Diamond Push-Up", ("bodyweight",), "push_up", None),
    ("arm_circles", "Arm Circles", ("bodyweight",), None, None),
    ("high_knees", "High Knees", ("bodyweight",), None, None),
    ("glute_bridge", "Glute Bridge", ("bodyweight",), None, "hip_thrust"),
    ("bicycle_crunch", "Bicycle Crunch", ("bodyweight",), None, None),
    ("hamstring_curl", "Hamstring Curl", ("cable_machine",), None, None),
    ("single_arm_plank", "Single Arm Plank", ("bodyweight",), "plank", None),
    ("shuttle_sprint", "Shuttle Sprint", ("bodyweight",), None, None),
    ("stability_ball_plank", "Stability Ball Plank", ("stability_ball",), "plank", None),
    ("band_woodchop", "Band Woodchop", ("band",), None, "cable_woodchop"),
    ("plyo_push_up", "Plyometric Push-Up", ("bodyweight",), "push_up", None),
    ("goblet_carry", "Goblet Carry", ("dumbbell", "kettlebell"), None, "farmers_carry"),
    (
        "farmers_carry", "Farmer's Carry", ("dumbbell", "kettlebell"),
        "goblet_carry", "trap_bar_carry",
    ),
    ("trap_bar_carry", "Trap Bar Carry", ("trap_bar",), "farmers_carry", None),
    (
        "suitcase_carry", "Suitcase Carry", ("dumbbell", "kettlebell"),
        None, "single_arm_overhead_carry",
    ),
    (
        "single_arm_overhead_carry", "Single Arm Overhead Carry", ("dumbbell", "kettlebell"),
        "suitcase_carry", None,
    ),
    ("waiter_carry", "Waiter Carry", ("dumbbell", "kettlebell"), None, "double_overhead_carry"),
    (
        "double_overhead_carry", "Double Overhead Carry", ("dumbbell", "kettlebell"),
        "waiter_carry", None,
    ),
    ("overhead_plate_carry", "Overhead Plate Carry", ("dumbbell",), None, None),
    ("front_rack_carry", "Front Rack Carry", ("kettlebell", "barbell"), None, "zercher_carry"),
    ("zercher_carry", "Zercher Carry", ("barbell",), "front_rack_carry", None),
    ("sa_db_floor_press", "Single Arm DB Floor Press", ("dumbbell",), None, "sa_db_bench_press"),
    (
        "sa_db_bench_press", "Single Arm DB Bench Press", ("dumbbell", "bench"),
        "sa_db_floor_press", "sa_rotational_bench_press",
    ),
    (
        "sa_rotational_bench_press", "Single Arm Rotational Bench Press", ("dumbbell", "bench"),
        "sa_db_bench_press", None,
    ),
    ("wall_push_up", "Wall Push-Up", ("bodyweight", "wall"), None, "incline_push_up"),
    (
        "wall_handstand_push_up", "Wall Handstand Push-Up", ("bodyweight", "wall"),
        "pike_pushup", None,
    ),
    (
        "half_kneeling_press", "Half-Kneeling Press", ("dumbbell", "kettlebell"),
        None, "db_shoulder_press",
    ),
    ("landmine_press", "Landmine Press", ("barbell",), None, None),
    ("push_press", "Push Press", ("barbell", "dumbbell"), "overhead_press", None),
    ("close_grip_bench_press", "Close-Grip Bench Press", ("barbell", "bench", "rack"), None, None),
    (
        "incline_bench_press", "Incline Barbell Press", ("barbell", "incline_bench", "rack"),
        "bench_press", None,
    ),
    ("straight_arm_pulldown", "Straight Arm Pulldown", ("cable_machine",), None, None),
    ("close_grip_lat_pulldown", "Close-Grip Lat Pulldown", ("cable_machine",), None, None),
    ("scapular_pull_up", "Scapular Pull-Up", ("pull_up_bar",), None, "negative_pull_up"),
    (
        "negative_pull_up", "Negative Pull-Up", ("pull_up_bar",),
        "scapular_pull_up", "assisted_pull_up",
    ),
    ("chest_supported_row", "Chest-Supported Row", ("dumbbell", "incline_bench"), None, None),
    ("kroc_row", "Kroc Row", ("dumbbell",), None, None),
    ("elevated_inverted_row", "Elevated Inverted Row", ("barbell", "rack"), None, "inverted_row"),
    (
        "feet_elevated_inverted_row", "Feet-Elevated Inverted Row", ("barbell", "rack", "box"),
        "inverted_row", None,
    ),
    ("cable_row", "Seated Cable Row", ("cable_machine",), None, None),
    ("single_arm_cable_row", "Single Arm Cable Row", ("cable_machine",), None, None),
    ("band_row", "Band Row", ("band",), None, None),
    (
        "assisted_pistol_squat", "Assisted Pistol Squat", ("trx", "bodyweight"),
        "bulgarian_split_squat", None,
    ),
    ("conventional_deadlift", "Conventional Deadlift", ("barbell",), None, None),
    (
        "kickstand_rdl", "Kickstand RDL", ("dumbbell", "kettlebell"),
        "romanian_deadlift", "single_leg_rdl",
    ),
    (
        "single_leg_deadlift", "Single Leg Deadlift", ("dumbbell", "kettlebell"),
        "single_leg_rdl", None,
    ),
    (
        "single_leg_glute_bridge", "Single Leg Glute Bridge", ("bodyweight",),
        "glute_bridge", "hip_thrust",
    ),
    (
        "single_leg_hip_thrust", "Single Leg Hip Thrust", ("bench", "bodyweight"),
        "hip_thrust", None,
    ),
    ("nordic_curl", "Nordic Curl", ("bodyweight",), None, None),
    (
        "kneeling_med_ball_rotation", "Kneeling Med Ball Rotation", ("medicine_ball",),
        None, "med_ball_rotational_throw",
    ),
    (
        "rotational_med_ball_slam", "Rotational Med Ball Slam", ("medicine_ball",),
        "med_ball_rotational_throw", None,
    ),
    ("low_high_woodchop", "Low-to-High Woodchop", ("cable_machine",), "cable_woodchop", None),
    ("standing_rotation_reach", "Standing Rotation Reach", ("bodyweight",), None, None),
    ("knee_side_plank", "Knee Side Plank", ("bodyweight",), None, "side_plank"),
    ("side_plank_hip_dip", "Side Plank Hip Dip", ("bodyweight",), "side_plank", None),
    ("pallof_press_march", "Pallof Press March", ("cable_machine", "band"), "pallof_press", None),
    ("bird_dog_band", "Bird Dog with Band", ("band", "bodyweight"), "bird_dog", None),
    ("lying_leg_raise", "Lying Leg Raise", ("bodyweight",), None, "hanging_leg_raise"),
    ("toes_to_bar", "Toes to Bar", ("pull_up_bar",), "hanging_leg_raise", None),
    ("deficit_reverse_lunge", "Deficit Reverse Lunge", ("dumbbell", "box"), "walking_lunge", None),
    ("lateral_step_up", "Lateral Step-Up", ("box", "dumbbell"), None, "lateral_lunge"),
    ("cossack_squat", "Cossack Squat", ("bodyweight", "dumbbell"), "lateral_lunge", None),
    ("split_squat_jump", "Split Squat Jump", ("bodyweight",), None, "alternating_lunge_jump"),
    (
        "alternating_lunge_jump", "Alternating Lunge Jump", ("bodyweight",),
        "split_squat_jump", None,
    ),
    ("low_box_step_up", "Low Box Step-Up", ("box",), None, "step_up"),
    ("step_up", "Step-Up", ("box", "dumbbell"), "low_box_step_up", None),
    ("pogo_hops", "Pogo Hops", ("bodyweight",), None, "broad_jump"),
    ("consecutive_broad_jumps", "Consecutive Broad Jumps", ("bodyweight",), "broad_jump", None),
    (
        "ascending_skater_jumps", "Ascending Skater Jumps", ("bodyweight",),
        None, "deceleration_skater_jump",
    ),
    (
        "deceleration_skater_jump", "Deceleration Skater Jump", ("bodyweight",),
        "ascending_skater_jumps", "lateral_single_leg_bounds",
    ),
    (
        "lateral_single_leg_bounds", "Lateral Single Leg Bounds", ("bodyweight",),
        "deceleration_skater_jump", None,
    ),
    ("drop_jump", "Drop Jump", ("plyo_box",), "depth_jump", None),
    ("standing_long_jump", "Standing Long Jump", ("bodyweight",), None, None),
    ("squat_thrust", "Squat Thrust", ("bodyweight",), None, "burpee"),
)

# ---------------------------------------------------------------------------
# Warmup-only movements (foam rolling, drills, primers)
# ---------------------------------------------------------------------------
_WARMUP_EXERCISES: tuple[CatalogRow, ...] = (
    ("foam_roll_quads", "Foam Roll Quads", ("foam_roller",), None, None),
    ("foam_roll_hamstrings", "Foam Roll Hamstrings", ("foam_roller",), None, None),
    ("foam_roll_glutes", "Foam Roll Glutes", ("foam_roller",), None, None),
    ("foam_roll_calves", "Foam Roll Calves", ("foam_roller",), None, None),
    ("foam_roll_adductors", "Foam Roll Adductors", ("foam_roller",), None, None),
    ("foam_roll_it_band", "Foam Roll IT Band", ("foam_roller",), None, None),
    ("foam_roll_thoracic", "Foam Roll Thoracic Spine", ("foam_roller",), None, None),
    ("foam_roll_lats", "Foam Roll Lats", ("foam_roller",), None, None),
    ("ankle_circles", "Ankle Circles", ("bodyweight",), None, None),
    ("hip_circles", "Hip Circles", ("bodyweight",), None, None),
    ("arm_cross_body_stretch", "Cross-Body Arm Stretch", ("bodyweight",), None, None),
    ("shoulder_pass_through", "Shoulder Pass-Through", ("band",), None, None),
    ("scorpion_stretch", "Scorpion Stretch", ("bodyweight",), None, None),
    ("inchworm", "Inchworm", ("bodyweight",), None, None),
    ("hollow_body_hold", "Hollow Body Hold", ("bodyweight",), None, None),
    ("bear_crawl_hold", "Bear Crawl Hold", ("bodyweight",), None, None),
    ("quadruped_belly_lift", "Quadruped Belly Lift", ("bodyweight",), None, "bear_crawl_hold"),
    ("tall_kneeling_pallof_hold", "Tall-Kneeling Pallof Hold", ("band",), None, "pallof_press"),
    ("dead_bug_with_reach", "Dead Bug with Reach", ("bodyweight",), "dead_bug", None),
    ("bird_dog_crunch", "Bird Dog Crunch", ("bodyweight",), "bird_dog", None),
    ("core_bicycle", "Bicycle Crunch", ("bodyweight",), None, None),
    ("glute_bridge_march", "Glute Bridge March", ("bodyweight",), "glute_bridge", None),
    ("walking_knee_hug", "Walking Knee Hug", ("bodyweight",), None, None),
    ("walking_quad_stretch", "Walking Quad Stretch", ("bodyweight",), None, None),
    ("walking_cradle_stretch", "Walking Cradle Stretch", ("bodyweight",), None, None),
    ("walking_rdl_reach", "Walking RDL Reach", ("bodyweight",), None, None),
    ("walking_spiderman", "Walking Spiderman", ("bodyweight",), None, None),
    ("walking_lunge_rotation", "Walking Lunge with Rotation", ("bodyweight",), None, None),
    ("heel_toe_walk", "Heel-to-Toe Walk", ("bodyweight",), None, None),
    ("jog", "Jog", ("bodyweight",), None, None),
    ("skip", "Skip", ("bodyweight",), None, "a_skip"),
    ("power_skip", "Power Skip", ("bodyweight",), "skip", None),
    ("a_skip", "A-Skip", ("bodyweight",), "skip", "b_skip"),
    ("b_skip", "B-Skip", ("bodyweight",), "a_skip", None),
    ("butt_kicks", "Butt Kicks", ("bodyweight",), None, None),
    ("high_knees_drill", "High Knees", ("bodyweight",), None, None),
    ("carioca", "Carioca", ("bodyweight",), None, None),
    ("lateral_shuffle", "Lateral Shuffle", ("bodyweight",), None, None),
    ("box_jump_warmup", "Box Jump (Warmup)", ("plyo_box",), None, "box_jump"),
    ("broad_jump_warmup", "Broad Jump (Warmup)", ("bodyweight",), None, "broad_jump"),
    ("vertical_jump_warmup", "Vertical Jump (Warmup)", ("bodyweight",), None, None),
    ("explosive_pushup_warmup", "Explosive Push-Up (Warmup)", ("bodyweight",), None, None),
    (
        "med_ball_chest_pass_warmup", "Medicine Ball Chest Pass (Warmup)",
        ("medicine_ball",), None, None,
    ),
    (
        "med_ball_overhead_throw_warmup", "Medicine Ball Overhead Throw (Warmup)",
        ("medicine_ball",), None, None,
    ),
    ("med_ball_rotational_pass", "Medicine Ball Rotational Pass", ("medicine_ball",), None, None),
)


# Plyometric, ballistic and sprint movements
_POWER_SLUGS: frozenset[str] = frozenset({
    "alternating_lunge_jump", "ascending_skater_jumps", "band_woodchop", "box_jump",
    "broad_jump", "burpee", "cable_woodchop", "consecutive_broad_jumps",
    "deceleration_skater_jump", "depth_jump", "drop_jump", "explosive_pushup",
    "jump_squat", "kettlebell_swing", "kneeling_med_ball_rotation", "kroc_row",
    "lateral_single_leg_bounds", "low_high_woodchop", "med_ball_chest_pass",
    "med_ball_overhead_pass", "med_ball_rotational_throw", "med_ball_slam",
    "plyo_push_up", "pogo_hops", "push_press", "rotational_med_ball_slam",
    "sa_rotational_bench_press", "shuttle_sprint", "skater_hops", "skater_jump",
    "split_squat_jump", "sprint", "standing_long_jump", "trap_bar_deadlift",
})
POWER_TAGS: tuple[str, ...] = ("power", "explosive")


def _record(row: CatalogRow) -> ExerciseRecord:
    slug, name, equipment, easier, harder = row
    return ExerciseRecord(
        id=slug,
        slug=slug,
        name=name,
        equipment=equipment,
        progressions=Progressions(easier=easier, harder=harder),
        tags=POWER_TAGS if slug in _POWER_SLUGS else (),
    )


def seed_records() -> list[ExerciseRecord]:
    """Every catalogued exercise, registry id equal to its slug."""
    return [_record(row) for row in _EXERCISES + _WARMUP_EXERCISES]
