"""Periodization math: phase, skill and week tables and the volume adjustments.

Implements a three-block strength & conditioning cycle:
- GPP: foundation work at 60-75% 1RM, slow 3010 tempo, higher reps
- SPP: sport-specific strength at 75-85% 1RM, 2010 tempo, moderate reps
- SSP: peaking at 85-90% 1RM, explosive X010 tempo, lower reps

Each phase runs four weeks on an introduction → build → peak → deload
volume curve.

References:
    Bompa & Buzzichelli (2019), Periodization: Theory and Methodology of
        Training, 6th ed.
    Issurin (2010), New horizons for the methodology and physiology of
        training periodization.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from prescription_engine.exceptions import ValidationError
from prescription_engine.models.enums import (
    CATEGORY_NAMES,
    MIN_SETS,
    ComplexityTier,
    Phase,
    SkillLevel,
)


@dataclass(frozen=True)
class PhaseConfig:
    """Per-phase tempo and rep/rest modifiers."""

    tempo: str
    reps_modifier: float
    rest_modifier: float
    focus_description: str


@dataclass(frozen=True)
class SkillConfig:
    """Per-skill-level base volume and exercise complexity."""

    base_sets: int
    base_reps: int
    base_rest_seconds: int
    complexity_tier: ComplexityTier


@dataclass(frozen=True)
class AdjustedVolume:
    """Sets / reps / rest for one coordinate after all modifiers."""

    sets: int
    reps: int
    rest_seconds: int


_PHASE_CONFIG: dict[Phase, PhaseConfig] = {
    Phase.GPP: PhaseConfig(
        tempo="3010",
        reps_modifier=1.2,   # higher reps
        rest_modifier=1.0,
        focus_description="Foundation, movement quality, work capacity",
    ),
    Phase.SPP: PhaseConfig(
        tempo="2010",
        reps_modifier=1.0,
        rest_modifier=0.9,
        focus_description="Sport-specific strength, power development",
    ),
    Phase.SSP: PhaseConfig(
        tempo="X010",
        reps_modifier=0.8,   # lower reps, heavier loads
        rest_modifier=1.1,   # more rest for heavier loads
        focus_description="Peaking, maintain gains, competition prep",
    ),
}

_SKILL_CONFIG: dict[SkillLevel, SkillConfig] = {
    SkillLevel.NOVICE: SkillConfig(
        base_sets=3, base_reps=12, base_rest_seconds=60,
        complexity_tier=ComplexityTier.BASIC,
    ),
    SkillLevel.MODERATE: SkillConfig(
        base_sets=4, base_reps=10, base_rest_seconds=60,
        complexity_tier=ComplexityTier.MODERATE,
    ),
    SkillLevel.ADVANCED: SkillConfig(
        base_sets=5, base_reps=8, base_rest_seconds=45,
        complexity_tier=ComplexityTier.ADVANCED,
    ),
}

# Volume relative to the peak week (week 3 = 100%)
_WEEK_VOLUME_MULTIPLIER: dict[int, float] = {
    1: 0.70,  # introduction
    2: 0.85,  # build
    3: 1.00,  # peak
    4: 0.60,  # deload
}

WEEK_DESCRIPTORS: dict[int, str] = {
    1: "Foundation",
    2: "Build",
    3: "Peak",
    4: "Deload",
}

WEEK_DESCRIPTIONS: dict[int, str] = {
    1: "Introduction week focusing on movement quality and establishing baseline.",
    2: "Building week with increased volume to drive adaptations.",
    3: "Peak week with highest training load of the phase.",
    4: "Deload week to recover and prepare for the next phase.",
}


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero for positives.

    Python's built-in ``round`` uses banker's rounding (``round(40.5) == 40``),
    which would shave a second off 45 s × 0.9 rest.
    """
    return int(math.floor(value + 0.5))


def phase_config(phase: Phase) -> PhaseConfig:
    """Look up the tempo and modifiers for a training phase.

    Raises:
        ValidationError: If the phase has no configuration.
    """
    try:
        return _PHASE_CONFIG[phase]
    except KeyError:
        raise ValidationError(f"No configuration for phase {phase!r}") from None


def skill_config(level: SkillLevel) -> SkillConfig:
    """Look up base volume and complexity tier for a skill level.

    Raises:
        ValidationError: If the level has no configuration.
    """
    try:
        return _SKILL_CONFIG[level]
    except KeyError:
        raise ValidationError(f"No configuration for skill level {level!r}") from None


def week_multiplier(week: int) -> float:
    """Volume multiplier for a 1-indexed week of the block.

    Raises:
        ValidationError: If the week is outside 1-4.
    """
    try:
        return _WEEK_VOLUME_MULTIPLIER[week]
    except (KeyError, TypeError):
        raise ValidationError(f"No volume multiplier for week {week!r}") from None


def adjusted_volume(phase: Phase, level: SkillLevel, week: int) -> AdjustedVolume:
    """Apply the week curve and phase modifiers to a skill level's base volume.

    - sets = max(2, round(base_sets × week multiplier))
    - reps = round(base_reps × phase reps modifier)
    - rest = round(base_rest × phase rest modifier)

    Args:
        phase: Training phase.
        level: Athlete skill level.
        week: 1-indexed week of the block.

    Returns:
        AdjustedVolume with integer sets, reps and rest seconds.
    """
    pc = phase_config(phase)
    sc = skill_config(level)
    return AdjustedVolume(
        sets=max(MIN_SETS, round_half_up(sc.base_sets * week_multiplier(week))),
        reps=round_half_up(sc.base_reps * pc.reps_modifier),
        rest_seconds=round_half_up(sc.base_rest_seconds * pc.rest_modifier),
    )


def category_name(category: int) -> str:
    """Display name for a sport category (1-4).

    Raises:
        ValidationError: If the category is unknown.
    """
    try:
        return CATEGORY_NAMES[category]
    except (KeyError, TypeError):
        raise ValidationError(f"Unknown category {category!r}") from None
