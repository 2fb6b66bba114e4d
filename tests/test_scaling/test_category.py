"""Tests for category-specific scaling from an athlete profile."""

from __future__ import annotations

import pytest

from exercise_registry import InMemoryExerciseRegistry
from prescription_engine.exceptions import ValidationError
from prescription_engine.models.enums import (
    AgeGroup,
    ExerciseFocus,
    ExerciseSection,
    ExperienceBucket,
    Intensity,
    Phase,
    RangePosition,
)
from prescription_engine.models.exercise import Progressions
from prescription_engine.models.prescription import ExercisePrescription
from prescription_engine.models.profile import ScalingProfile, experience_bucket
from prescription_engine.scaling.category import (
    CATEGORY_PHASE_CONFIG,
    ParameterRange,
    Tempo,
    bodyweight_variant,
    category_exercise_parameters,
    category_phase_config,
    exercise_focus,
    format_tempo,
    scale_for_profile,
    value_from_position,
)


def _rx(
    slug: str,
    reps: str = "10",
    section: ExerciseSection = ExerciseSection.MAIN,
) -> ExercisePrescription:
    return ExercisePrescription(
        exercise_slug=slug,
        sets=3,
        reps=reps,
        rest_seconds=60,
        order_index=0,
        section=section,
        exercise_id=slug,
    )


class TestValueFromPosition:
    @pytest.mark.parametrize(
        "position, expected",
        [
            (RangePosition.LOWEST, 4),
            (RangePosition.LOWEST_PLUS_1, 5),
            (RangePosition.SECOND_LOWEST, 5),
            (RangePosition.LOWEST_PLUS_2, 6),
            (RangePosition.MIDDLE, 5),
            (RangePosition.MAX_MINUS_2, 4),
            (RangePosition.MAX_MINUS_1, 5),
            (RangePosition.MAX, 6),
        ],
    )
    def test_positions_in_four_to_six(self, position: RangePosition, expected: int) -> None:
        assert value_from_position(ParameterRange(4, 6), position) == expected

    def test_middle_rounds_half_up(self) -> None:
        assert value_from_position(ParameterRange(3, 6), RangePosition.MIDDLE) == 5
        assert value_from_position(ParameterRange(10, 14), RangePosition.MIDDLE) == 12

    def test_never_leaves_range(self) -> None:
        narrow = ParameterRange(2, 3)
        assert value_from_position(narrow, RangePosition.LOWEST_PLUS_2) == 3
        assert value_from_position(narrow, RangePosition.MAX_MINUS_2) == 2


class TestLookups:
    @pytest.mark.parametrize(
        "years, bucket",
        [
            (0, ExperienceBucket.ZERO_TO_ONE),
            (1, ExperienceBucket.ZERO_TO_ONE),
            (1.5, ExperienceBucket.TWO_TO_FIVE),
            (5, ExperienceBucket.TWO_TO_FIVE),
            (6, ExperienceBucket.SIX_PLUS),
        ],
    )
    def test_experience_bucket(self, years: float, bucket: ExperienceBucket) -> None:
        assert experience_bucket(years) == bucket

    def test_every_category_has_every_phase(self) -> None:
        for category in (1, 2, 3, 4):
            assert set(CATEGORY_PHASE_CONFIG[category]) == set(Phase)

    def test_unknown_category(self) -> None:
        with pytest.raises(ValidationError):
            category_phase_config(9, Phase.GPP)

    def test_format_tempo(self) -> None:
        assert format_tempo(Tempo(2, 1, 2)) == "2.1.2"
        assert format_tempo(Tempo(None, None, None)) == "x.x.x"
        assert format_tempo(category_phase_config(2, Phase.GPP).tempo) == "1.1.1"

    def test_exercise_focus(self, catalog_registry: InMemoryExerciseRegistry) -> None:
        assert exercise_focus(catalog_registry.resolve("back_squat")) == ExerciseFocus.STRENGTH
        assert exercise_focus(catalog_registry.resolve("box_jump")) == ExerciseFocus.POWER
        assert exercise_focus(catalog_registry.resolve("push_up")) == ExerciseFocus.BODYWEIGHT
        assert exercise_focus(None) == ExerciseFocus.BODYWEIGHT


class TestCategoryParameters:
    def test_teen_novice_takes_middle_of_ranges(self) -> None:
        params = category_exercise_parameters(
            1, Phase.GPP, AgeGroup.TEEN, 0, ExerciseFocus.STRENGTH
        )
        assert (params.sets, params.reps, params.rest_seconds) == (5, 12, 30)
        assert params.one_rep_max_percent == ParameterRange(0.50, 0.65)
        assert params.rpe == ParameterRange(6, 7)

    def test_power_column(self) -> None:
        params = category_exercise_parameters(
            2, Phase.SSP, AgeGroup.ADULT, 8, ExerciseFocus.POWER
        )
        assert (params.sets, params.reps, params.rest_seconds) == (6, 6, 120)
        assert params.one_rep_max_percent == ParameterRange(0.50, 0.60)

    def test_youth_sets_capped_at_three(self) -> None:
        params = category_exercise_parameters(
            2, Phase.GPP, AgeGroup.YOUTH, 8, ExerciseFocus.STRENGTH
        )
        assert params.sets == 3
        assert params.reps == 13

    def test_youth_one_rep_max_ceiling(self) -> None:
        params = category_exercise_parameters(
            4, Phase.SSP, AgeGroup.YOUTH, 0, ExerciseFocus.STRENGTH
        )
        assert params.one_rep_max_percent == ParameterRange(0.65, 0.65)

    def test_teen_ceiling_clips_only_the_top(self) -> None:
        params = category_exercise_parameters(
            2, Phase.SSP, AgeGroup.TEEN, 3, ExerciseFocus.STRENGTH
        )
        assert params.one_rep_max_percent == ParameterRange(0.80, 0.85)


class TestBodyweightVariant:
    progressions = Progressions(easier="incline_push_up", harder="decline_push_up")

    def test_gpp_beginner_gets_easier(self) -> None:
        assert bodyweight_variant(
            "push_up", Phase.GPP, ExperienceBucket.ZERO_TO_ONE, self.progressions
        ) == ("incline_push_up", True)

    def test_ssp_veteran_gets_harder(self) -> None:
        assert bodyweight_variant(
            "push_up", Phase.SSP, ExperienceBucket.SIX_PLUS, self.progressions
        ) == ("decline_push_up", True)

    @pytest.mark.parametrize(
        "phase, bucket",
        [
            (Phase.GPP, ExperienceBucket.TWO_TO_FIVE),
            (Phase.SPP, ExperienceBucket.ZERO_TO_ONE),
            (Phase.SPP, ExperienceBucket.SIX_PLUS),
            (Phase.SSP, ExperienceBucket.TWO_TO_FIVE),
        ],
    )
    def test_base_otherwise(self, phase: Phase, bucket: ExperienceBucket) -> None:
        assert bodyweight_variant("push_up", phase, bucket, self.progressions) == (
            "push_up", False,
        )

    def test_missing_progression_keeps_base(self) -> None:
        assert bodyweight_variant(
            "plank", Phase.GPP, ExperienceBucket.ZERO_TO_ONE, Progressions(harder="rkc_plank")
        ) == ("plank", False)
        assert bodyweight_variant("plank", Phase.SSP, ExperienceBucket.SIX_PLUS) == (
            "plank", False,
        )


class TestScaleForProfile:
    @pytest.fixture
    def metadata(self, catalog_registry: InMemoryExerciseRegistry) -> dict:
        return catalog_registry.resolve_many(
            ["back_squat", "box_jump", "push_up", "plank", "single_leg_rdl"]
        )

    def test_adult_veteran_peaking(self, metadata: dict) -> None:
        profile = ScalingProfile(2, Phase.SSP, AgeGroup.ADULT, 8)
        result = scale_for_profile(
            [_rx("back_squat", reps="10-12"), _rx("box_jump", reps="5"), _rx("push_up")],
            profile,
            maxes_by_exercise={"back_squat": 200},
            exercise_metadata=metadata,
        )
        squat, jump, push_up = result.exercises
        assert (squat.sets, squat.reps, squat.rest_seconds) == (6, "6", 120)
        assert (squat.percent_of_1rm, squat.target_weight) == (85, 170)
        assert squat.tempo == "x.x.x"
        assert squat.rpe_target == (9, 9)
        assert squat.focus == ExerciseFocus.STRENGTH
        assert jump.focus == ExerciseFocus.POWER
        assert jump.percent_of_1rm == 55
        assert not jump.has_one_rep_max
        assert push_up.is_bodyweight
        assert push_up.exercise_slug == "decline_push_up"
        assert push_up.is_substituted
        assert push_up.target_weight is None
        assert result.profile == profile
        assert result.percent_of_1rm == 85

    def test_youth_caps_sets_and_load(self, metadata: dict) -> None:
        result = scale_for_profile(
            [_rx("back_squat")],
            ScalingProfile(2, Phase.SSP, AgeGroup.YOUTH, 0),
            maxes_by_exercise={"back_squat": 200},
            exercise_metadata=metadata,
        )
        squat = result.exercises[0]
        assert (squat.sets, squat.reps) == (3, "4")
        assert (squat.percent_of_1rm, squat.target_weight) == (65, 130)

    def test_gpp_beginner_bodyweight_regresses(self, metadata: dict) -> None:
        result = scale_for_profile(
            [_rx("push_up")],
            ScalingProfile(1, Phase.GPP, AgeGroup.ADULT, 0),
            exercise_metadata=metadata,
        )
        assert result.exercises[0].exercise_slug == "incline_push_up"
        assert result.exercises[0].exercise_id is None

    def test_holds_and_sides_keep_their_units(self, metadata: dict) -> None:
        result = scale_for_profile(
            [_rx("plank", reps="30s"), _rx("single_leg_rdl", reps="8 each side")],
            ScalingProfile(1, Phase.GPP, AgeGroup.TEEN, 0),
            exercise_metadata=metadata,
        )
        plank, rdl = result.exercises
        assert plank.reps == "30s"
        assert rdl.reps == "12 each side"

    def test_warmup_carried_unchanged(self, metadata: dict) -> None:
        warmup = _rx("push_up", reps="5", section=ExerciseSection.WARMUP)
        result = scale_for_profile(
            [warmup],
            ScalingProfile(4, Phase.SSP, AgeGroup.ADULT, 10),
            exercise_metadata=metadata,
        )
        carried = result.exercises[0]
        assert (carried.exercise_slug, carried.sets, carried.reps) == ("push_up", 3, "5")
        assert carried.tempo is None
        assert not carried.is_substituted

    def test_intensity_is_recorded_not_applied(self, metadata: dict) -> None:
        profile = ScalingProfile(3, Phase.SPP, AgeGroup.TEEN, 3)
        low = scale_for_profile(
            [_rx("back_squat")], profile, Intensity.LOW, exercise_metadata=metadata
        )
        high = scale_for_profile(
            [_rx("back_squat")], profile, Intensity.HIGH, exercise_metadata=metadata
        )
        assert low.intensity == Intensity.LOW
        assert low.exercises[0].sets == high.exercises[0].sets


class TestScalingProfile:
    def test_rejects_unknown_category(self) -> None:
        with pytest.raises(ValidationError):
            ScalingProfile(5, Phase.GPP, AgeGroup.ADULT, 1)

    def test_rejects_negative_experience(self) -> None:
        with pytest.raises(ValidationError):
            ScalingProfile(1, Phase.GPP, AgeGroup.ADULT, -1)

    def test_coerces_names(self) -> None:
        profile = ScalingProfile(1, "spp", "teen", 3)  # type: ignore[arg-type]
        assert (profile.phase, profile.age_group) == (Phase.SPP, AgeGroup.TEEN)
        assert profile.experience_bucket == ExperienceBucket.TWO_TO_FIVE
