"""Athlete scaling profile for category-specific prescriptions."""

from __future__ import annotations

from dataclasses import dataclass

from prescription_engine.exceptions import ValidationError
from prescription_engine.models.coordinate import coerce_enum
from prescription_engine.models.enums import (
    CATEGORIES,
    AgeGroup,
    ExperienceBucket,
    Phase,
)

EXPERIENCE_BUCKET_LABELS: dict[ExperienceBucket, str] = {
    ExperienceBucket.ZERO_TO_ONE: "0-1",
    ExperienceBucket.TWO_TO_FIVE: "2-5",
    ExperienceBucket.SIX_PLUS: "6+",
}


def experience_bucket(years_of_experience: float) -> ExperienceBucket:
    """0-1 years, 2-5 years, or 6+ years."""
    if years_of_experience <= 1:
        return ExperienceBucket.ZERO_TO_ONE
    if years_of_experience <= 5:
        return ExperienceBucket.TWO_TO_FIVE
    return ExperienceBucket.SIX_PLUS


@dataclass(frozen=True)
class ScalingProfile:
    """Sport category, phase, age group and training age of one athlete.

    When a request carries a profile, sets, reps, rest, tempo and load
    come from the category tables instead of the intensity multipliers.
    """

    category: int
    phase: Phase
    age_group: AgeGroup
    years_of_experience: float

    def __post_init__(self) -> None:
        if isinstance(self.category, bool) or self.category not in CATEGORIES:
            raise ValidationError(f"Unknown category: {self.category!r}")
        if isinstance(self.years_of_experience, bool) or not isinstance(
            self.years_of_experience, (int, float)
        ):
            raise ValidationError(
                f"years of experience must be a number, got {self.years_of_experience!r}"
            )
        if self.years_of_experience < 0:
            raise ValidationError(
                f"years of experience cannot be negative, got {self.years_of_experience}"
            )
        object.__setattr__(self, "phase", coerce_enum(Phase, self.phase, "phase"))
        object.__setattr__(
            self, "age_group", coerce_enum(AgeGroup, self.age_group, "age group")
        )

    @property
    def experience_bucket(self) -> ExperienceBucket:
        return experience_bucket(self.years_of_experience)
