"""Tests for intensity scaling of stored prescriptions."""

from __future__ import annotations

import pytest

from exercise_registry import InMemoryExerciseRegistry
from prescription_engine.exceptions import ValidationError
from prescription_engine.models.enums import AgeGroup, Intensity, Phase
from prescription_engine.models.exercise import ExerciseRecord, Progressions
from prescription_engine.models.prescription import ExercisePrescription
from prescription_engine.scaling.intensity import (
    calculate_target_weight,
    estimate_one_rep_max,
    one_rep_max_range,
    parse_age_group,
    parse_intensity,
    parse_reps,
    percent_of_one_rep_max,
    scale,
    scale_reps_or_duration,
)


def _rx(slug: str, sets: int = 3, reps: str = "10-12", rest: int = 75) -> ExercisePrescription:
    return ExercisePrescription(
        exercise_slug=slug,
        sets=sets,
        reps=reps,
        rest_seconds=rest,
        order_index=0,
        exercise_id=slug,
    )


def _metadata(registry: InMemoryExerciseRegistry, *slugs: str) -> dict[str, ExerciseRecord]:
    return registry.resolve_many(slugs)


class TestParseReps:
    def test_range_uses_midpoint(self) -> None:
        parsed = parse_reps("10-12")
        assert (parsed.value, parsed.unit) == (11, "reps")

    def test_each_side_suffix_preserved(self) -> None:
        parsed = parse_reps("8 each side")
        assert (parsed.value, parsed.unit, parsed.suffix) == (8, "reps", " each side")

    def test_seconds_and_minutes(self) -> None:
        assert parse_reps("30s").value == 30
        assert parse_reps("45 sec").unit == "seconds"
        assert parse_reps("2 min").value == 120

    @pytest.mark.parametrize("reps", ["AMRAP", "amrap", "20 yards", ""])
    def test_unscalable(self, reps: str) -> None:
        assert parse_reps(reps) is None


class TestScaleRepsOrDuration:
    @pytest.mark.parametrize(
        "reps, multiplier, expected",
        [
            ("30s", 1.33, "40s"),
            ("30s", 0.67, "20s"),
            ("45s", 1.33, "1 min"),
            ("5s", 0.5, "5s"),
            ("10", 0.67, "7"),
            ("8 each side", 1.33, "11 each side"),
            ("AMRAP", 1.33, "AMRAP"),
        ],
    )
    def test_values(self, reps: str, multiplier: float, expected: str) -> None:
        assert scale_reps_or_duration(reps, multiplier) == expected


class TestLookups:
    def test_percent_midpoints(self) -> None:
        assert percent_of_one_rep_max(Intensity.LOW) == 65
        assert percent_of_one_rep_max(Intensity.MODERATE) == 78
        assert percent_of_one_rep_max(Intensity.HIGH) == 88

    def test_parse_intensity_by_name(self) -> None:
        assert parse_intensity("high") == Intensity.HIGH
        with pytest.raises(ValidationError):
            parse_intensity("extreme")

    def test_parse_age_group_labels(self) -> None:
        assert parse_age_group("14-17") == AgeGroup.TEEN
        assert parse_age_group("adult") == AgeGroup.ADULT

    def test_bodyweight_detection(self) -> None:
        def record(*equipment: str) -> ExerciseRecord:
            return ExerciseRecord(id="x", slug="x", name="X", equipment=equipment)

        assert record().is_bodyweight
        assert record("bodyweight").is_bodyweight
        assert not record("bodyweight", "bench").is_bodyweight
        assert not record("barbell").is_bodyweight


class TestLoadArithmetic:
    def test_epley(self) -> None:
        assert estimate_one_rep_max(100, 10) == 133
        assert estimate_one_rep_max(100, 1) == 100
        assert estimate_one_rep_max(100, 0) == 0

    def test_target_weight_plate_increments(self) -> None:
        assert calculate_target_weight(200, 0.775) == 155.0
        assert calculate_target_weight(101, 0.7) == 70.0

    def test_age_ceiling_clips_phase_range(self) -> None:
        assert one_rep_max_range(AgeGroup.YOUTH, Phase.SSP) == (0.85, 0.65)
        assert one_rep_max_range(AgeGroup.ADULT, Phase.GPP) == (0.60, 0.75)


class TestScaleLoaded:
    def test_high_intensity_with_known_max(
        self, catalog_registry: InMemoryExerciseRegistry
    ) -> None:
        result = scale(
            [_rx("back_squat")],
            Intensity.HIGH,
            maxes_by_exercise={"back_squat": 200},
            exercise_metadata=_metadata(catalog_registry, "back_squat"),
        )
        squat = result.exercises[0]
        assert not squat.is_bodyweight
        assert (squat.sets, squat.reps, squat.rest_seconds) == (4, "9", 56)
        assert squat.percent_of_1rm == 88
        assert squat.target_weight == 175
        assert squat.has_one_rep_max
        assert squat.rpe_target == (8, 9)

    def test_low_intensity(self, catalog_registry: InMemoryExerciseRegistry) -> None:
        result = scale(
            [_rx("back_squat")],
            "Low",
            maxes_by_exercise={"back_squat": 200},
            exercise_metadata=_metadata(catalog_registry, "back_squat"),
        )
        squat = result.exercises[0]
        assert (squat.sets, squat.reps, squat.rest_seconds) == (2, "10", 94)
        assert squat.target_weight == 130

    def test_missing_max_omits_weight(self, catalog_registry: InMemoryExerciseRegistry) -> None:
        result = scale(
            [_rx("back_squat")],
            Intensity.MODERATE,
            exercise_metadata=_metadata(catalog_registry, "back_squat"),
        )
        squat = result.exercises[0]
        assert squat.target_weight is None
        assert not squat.has_one_rep_max
        assert squat.percent_of_1rm == 78

    def test_rest_floor(self, catalog_registry: InMemoryExerciseRegistry) -> None:
        result = scale(
            [_rx("db_row", rest=10)],
            Intensity.HIGH,
            exercise_metadata=_metadata(catalog_registry, "db_row"),
        )
        assert result.exercises[0].rest_seconds == 15

    def test_sets_never_below_one(self, catalog_registry: InMemoryExerciseRegistry) -> None:
        result = scale(
            [_rx("db_row", sets=1)],
            Intensity.LOW,
            exercise_metadata=_metadata(catalog_registry, "db_row"),
        )
        assert result.exercises[0].sets == 1

    def test_timed_reps_keep_seconds(self, catalog_registry: InMemoryExerciseRegistry) -> None:
        result = scale(
            [_rx("pallof_press", reps="20s")],
            Intensity.HIGH,
            exercise_metadata=_metadata(catalog_registry, "pallof_press"),
        )
        assert result.exercises[0].reps == "15s"

    def test_per_side_reps_keep_suffix(self, catalog_registry: InMemoryExerciseRegistry) -> None:
        result = scale(
            [_rx("single_leg_rdl", reps="8 each side")],
            Intensity.HIGH,
            exercise_metadata=_metadata(catalog_registry, "single_leg_rdl"),
        )
        assert result.exercises[0].reps == "7 each side"

    def test_range_reps_use_leading_count(
        self, catalog_registry: InMemoryExerciseRegistry
    ) -> None:
        result = scale(
            [_rx("back_squat", reps="8-10")],
            Intensity.MODERATE,
            exercise_metadata=_metadata(catalog_registry, "back_squat"),
        )
        assert result.exercises[0].reps == "8"


class TestScaleBodyweight:
    def test_low_substitutes_easier_variant(
        self, catalog_registry: InMemoryExerciseRegistry
    ) -> None:
        result = scale(
            [_rx("push_up", reps="10", rest=60)],
            Intensity.LOW,
            exercise_metadata=_metadata(catalog_registry, "push_up"),
        )
        push_up = result.exercises[0]
        assert push_up.is_bodyweight
        assert push_up.is_substituted
        assert push_up.exercise_slug == "incline_push_up"
        assert push_up.exercise_id is None
        assert push_up.source.exercise_slug == "push_up"
        assert (push_up.sets, push_up.reps, push_up.rest_seconds) == (3, "7", 75)
        assert result.substitution_count == 1

    def test_high_substitutes_harder_variant(
        self, catalog_registry: InMemoryExerciseRegistry
    ) -> None:
        result = scale(
            [_rx("push_up", reps="10")],
            Intensity.HIGH,
            exercise_metadata=_metadata(catalog_registry, "push_up"),
        )
        assert result.exercises[0].exercise_slug == "decline_push_up"
        assert result.exercises[0].reps == "13"

    def test_moderate_keeps_base_movement(
        self, catalog_registry: InMemoryExerciseRegistry
    ) -> None:
        result = scale(
            [_rx("plank", reps="30s")],
            Intensity.MODERATE,
            exercise_metadata=_metadata(catalog_registry, "plank"),
        )
        plank = result.exercises[0]
        assert not plank.is_substituted
        assert plank.exercise_id == "plank"
        assert plank.reps == "30s"

    def test_no_progression_keeps_movement(
        self, catalog_registry: InMemoryExerciseRegistry
    ) -> None:
        result = scale(
            [_rx("front_squat")],
            Intensity.HIGH,
            exercise_metadata=_metadata(catalog_registry, "front_squat"),
        )
        assert not result.exercises[0].is_substituted

    def test_unknown_exercise_treated_as_bodyweight(self) -> None:
        result = scale([_rx("mystery_move", reps="10")], Intensity.HIGH)
        assert result.exercises[0].is_bodyweight
        assert not result.exercises[0].is_substituted

    def test_record_equipment_decides_path(self) -> None:
        loaded = ExerciseRecord(
            id="sled_push", slug="sled_push", name="Sled Push", equipment=("sled",)
        )
        bare = ExerciseRecord(
            id="bear_crawl", slug="bear_crawl", name="Bear Crawl",
            progressions=Progressions(harder="bear_crawl_push_up"),
        )
        result = scale(
            [_rx("sled_push", reps="10"), _rx("bear_crawl", reps="10")],
            Intensity.HIGH,
            exercise_metadata={"sled_push": loaded, "bear_crawl": bare},
        )
        sled, crawl = result.exercises
        assert not sled.is_bodyweight
        assert crawl.is_bodyweight
        assert crawl.exercise_slug == "bear_crawl_push_up"


class TestScaleWhole:
    def test_stored_prescription_unchanged(
        self, catalog_registry: InMemoryExerciseRegistry
    ) -> None:
        original = (_rx("back_squat"), _rx("push_up", reps="10"))
        snapshot = tuple(original)
        scale(
            original,
            Intensity.HIGH,
            exercise_metadata=_metadata(catalog_registry, "back_squat", "push_up"),
        )
        assert original == snapshot

    def test_youth_caps_intensity_sets_and_load(
        self, catalog_registry: InMemoryExerciseRegistry
    ) -> None:
        result = scale(
            [_rx("back_squat", sets=5)],
            Intensity.HIGH,
            maxes_by_exercise={"back_squat": 100},
            exercise_metadata=_metadata(catalog_registry, "back_squat"),
            age_group="10-13",
        )
        assert result.requested_intensity == Intensity.HIGH
        assert result.intensity == Intensity.MODERATE
        assert result.percent_of_1rm == 65
        squat = result.exercises[0]
        assert squat.sets == 3
        assert squat.target_weight == 65

    def test_invalid_intensity(self) -> None:
        with pytest.raises(ValidationError):
            scale([], "Maximum")
