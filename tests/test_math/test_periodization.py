"""Tests for periodization tables and volume adjustment."""

from __future__ import annotations

import pytest

from prescription_engine.exceptions import ValidationError
from prescription_engine.math.periodization import (
    WEEK_DESCRIPTORS,
    adjusted_volume,
    category_name,
    phase_config,
    round_half_up,
    skill_config,
    week_multiplier,
)
from prescription_engine.models.enums import ComplexityTier, Phase, SkillLevel


class TestRoundHalfUp:
    @pytest.mark.parametrize(
        "value, expected",
        [(40.5, 41), (2.5, 3), (2.4, 2), (14.4, 14), (0.0, 0), (87.5, 88)],
    )
    def test_halves_round_up(self, value: float, expected: int) -> None:
        assert round_half_up(value) == expected


class TestConfigTables:
    def test_phase_tempos(self) -> None:
        assert phase_config(Phase.GPP).tempo == "3010"
        assert phase_config(Phase.SPP).tempo == "2010"
        assert phase_config(Phase.SSP).tempo == "X010"

    def test_skill_tiers(self) -> None:
        assert skill_config(SkillLevel.NOVICE).complexity_tier == ComplexityTier.BASIC
        assert skill_config(SkillLevel.MODERATE).complexity_tier == ComplexityTier.MODERATE
        assert skill_config(SkillLevel.ADVANCED).complexity_tier == ComplexityTier.ADVANCED

    def test_week_curve_peaks_in_week_three(self) -> None:
        multipliers = [week_multiplier(w) for w in (1, 2, 3, 4)]
        assert multipliers == [0.70, 0.85, 1.00, 0.60]
        assert max(multipliers) == week_multiplier(3)

    def test_week_out_of_range_raises(self) -> None:
        with pytest.raises(ValidationError):
            week_multiplier(5)

    def test_unmapped_phase_raises(self) -> None:
        with pytest.raises(ValidationError):
            phase_config("GPP")  # type: ignore[arg-type]

    def test_week_descriptors(self) -> None:
        assert WEEK_DESCRIPTORS == {1: "Foundation", 2: "Build", 3: "Peak", 4: "Deload"}

    def test_category_names(self) -> None:
        assert category_name(3) == "Rotation"
        with pytest.raises(ValidationError):
            category_name(9)


class TestAdjustedVolume:
    def test_novice_gpp_week_one(self) -> None:
        volume = adjusted_volume(Phase.GPP, SkillLevel.NOVICE, 1)
        assert (volume.sets, volume.reps, volume.rest_seconds) == (2, 14, 60)

    def test_advanced_spp_rest_rounds_half_up(self) -> None:
        volume = adjusted_volume(Phase.SPP, SkillLevel.ADVANCED, 3)
        assert (volume.sets, volume.reps, volume.rest_seconds) == (5, 8, 41)

    def test_moderate_ssp_week_two(self) -> None:
        volume = adjusted_volume(Phase.SSP, SkillLevel.MODERATE, 2)
        assert (volume.sets, volume.reps, volume.rest_seconds) == (3, 8, 66)

    def test_deload_never_below_two_sets(self) -> None:
        for level in SkillLevel:
            for phase in Phase:
                assert adjusted_volume(phase, level, 4).sets >= 2

    @pytest.mark.parametrize("level", list(SkillLevel))
    def test_sets_follow_week_curve(self, level: SkillLevel) -> None:
        sets = [adjusted_volume(Phase.GPP, level, w).sets for w in (1, 2, 3, 4)]
        assert sets[2] == max(sets)
        assert sets[3] <= sets[0]
