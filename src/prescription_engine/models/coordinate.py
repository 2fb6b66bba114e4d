"""Training coordinate — the immutable key identifying one workout slot."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Mapping, TypeVar

from prescription_engine.exceptions import ValidationError
from prescription_engine.models.enums import CATEGORIES, WEEKS, Phase, SkillLevel

E = TypeVar("E", bound=IntEnum)

MAX_DAY = 7


def coerce_enum(
    enum_cls: type[E],
    value: Any,
    field_name: str,
    labels: Mapping[str, E] | None = None,
) -> E:
    """Convert a member or its (case-insensitive) name to ``enum_cls``.

    ``labels`` supplies extra accepted spellings, e.g. ``"18+"`` for
    ``AgeGroup.ADULT``. Anything else raises ValidationError.
    """
    if isinstance(value, enum_cls):
        return value
    if isinstance(value, str):
        if labels and value in labels:
            return labels[value]
        key = value.strip().upper().replace("-", "_").replace(" ", "_")
        if key in enum_cls.__members__:
            return enum_cls[key]
    raise ValidationError(f"Unknown {field_name}: {value!r}")


def _require_int(value: Any, field_name: str, allowed: range | tuple[int, ...]) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f"{field_name} must be an integer, got {value!r}")
    if value not in allowed:
        raise ValidationError(
            f"{field_name} must be between {min(allowed)} and {max(allowed)}, got {value}"
        )
    return value


@dataclass(frozen=True)
class TrainingCoordinate:
    """(category, phase, skill level, week, day) — identifies exactly one template.

    Validated on construction: invalid values raise ValidationError and are
    never clamped.
    """

    category: int
    phase: Phase
    skill_level: SkillLevel
    week: int
    day: int

    def __post_init__(self) -> None:
        _require_int(self.category, "category", CATEGORIES)
        _require_int(self.week, "week", WEEKS)
        _require_int(self.day, "day", range(1, MAX_DAY + 1))
        object.__setattr__(self, "phase", coerce_enum(Phase, self.phase, "phase"))
        object.__setattr__(
            self, "skill_level", coerce_enum(SkillLevel, self.skill_level, "skill level")
        )

    @property
    def key(self) -> str:
        """Stable string key, e.g. ``"1-GPP-NOVICE-w1-d1"``."""
        return (
            f"{self.category}-{self.phase.name}-{self.skill_level.name}"
            f"-w{self.week}-d{self.day}"
        )

    @classmethod
    def from_key(cls, key: str) -> TrainingCoordinate:
        """Inverse of :attr:`key`."""
        try:
            category, phase, skill, week, day = key.split("-")
            return cls(
                category=int(category),
                phase=phase,  # type: ignore[arg-type]
                skill_level=skill,  # type: ignore[arg-type]
                week=int(week.lstrip("w")),
                day=int(day.lstrip("d")),
            )
        except ValueError as exc:
            if isinstance(exc, ValidationError):
                raise
            raise ValidationError(f"Malformed coordinate key: {key!r}") from exc

    def describe(self) -> str:
        return (
            f"Category {self.category}, {self.phase.name}, "
            f"{self.skill_level.name.title()}, Week {self.week}, Day {self.day}"
        )
