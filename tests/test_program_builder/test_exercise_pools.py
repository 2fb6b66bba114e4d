"""Tests for the exercise pool registry."""

from __future__ import annotations

import pytest

from exercise_registry import InMemoryExerciseRegistry
from prescription_engine.exceptions import ValidationError
from prescription_engine.models.enums import CATEGORIES, ComplexityTier, DayType, Phase
from prescription_engine.program_builder import exercise_pools
from prescription_engine.program_builder.warmup import iter_warmup_slugs


class TestPoolLookup:
    def test_gpp_category_one_lower_a_basic(self) -> None:
        pool = exercise_pools.pool_for(1, Phase.GPP, DayType.LOWER_A, ComplexityTier.BASIC)
        assert pool[:3] == ("goblet_squat", "romanian_deadlift", "reverse_lunge")

    @pytest.mark.parametrize("category", CATEGORIES)
    @pytest.mark.parametrize("phase", list(Phase))
    def test_every_training_day_has_every_tier(self, category: int, phase: Phase) -> None:
        for day_type in DayType:
            for tier in ComplexityTier:
                assert exercise_pools.pool_for(category, phase, day_type, tier)
            assert exercise_pools.core_pool_for(category, phase, ComplexityTier.BASIC)

    def test_recovery_day_uses_mobility_pool(self) -> None:
        pool = exercise_pools.pool_for(2, Phase.SPP, DayType.RECOVERY, ComplexityTier.BASIC)
        assert pool == exercise_pools.recovery_pool_for(2, ComplexityTier.BASIC)
        assert "cat_cow" in pool

    def test_rotational_category_recovery_override(self) -> None:
        default = exercise_pools.recovery_pool_for(1, ComplexityTier.BASIC)
        rotational = exercise_pools.recovery_pool_for(3, ComplexityTier.BASIC)
        assert "hip_flexor_stretch" in default
        assert "hip_flexor_stretch" not in rotational
        assert "thoracic_rotation" in rotational

    def test_unknown_category_raises(self) -> None:
        with pytest.raises(ValidationError):
            exercise_pools.pool_for(5, Phase.GPP, DayType.LOWER_A, ComplexityTier.BASIC)

    def test_cooldown_depends_on_lower_body(self) -> None:
        assert exercise_pools.cooldown_for(DayType.LOWER_B) == "90_90_hip_stretch"
        assert exercise_pools.cooldown_for(DayType.UPPER_A) == "hip_flexor_stretch"

    def test_compound_lifts(self) -> None:
        assert exercise_pools.is_compound("back_squat")
        assert not exercise_pools.is_compound("goblet_squat")


class TestSelect:
    def test_takes_prefix(self) -> None:
        assert exercise_pools.select(("a", "b", "c"), 2) == ("a", "b")

    def test_short_pool_returns_what_exists(self) -> None:
        assert exercise_pools.select(("a", "b"), 5) == ("a", "b")

    def test_zero_count(self) -> None:
        assert exercise_pools.select(("a",), 0) == ()


class TestCatalogCoverage:
    def test_every_pool_slug_is_registered(
        self, catalog_registry: InMemoryExerciseRegistry
    ) -> None:
        missing = {s for s in exercise_pools.iter_pool_slugs() if s not in catalog_registry}
        assert missing == set()

    def test_every_warmup_slug_is_registered(
        self, catalog_registry: InMemoryExerciseRegistry
    ) -> None:
        missing = {s for s in iter_warmup_slugs() if s not in catalog_registry}
        assert missing == set()
