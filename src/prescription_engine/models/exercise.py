"""Exercise metadata supplied by the exercise registry collaborator."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Progressions:
    """Registered easier / harder variants, by slug."""

    easier: str | None = None
    harder: str | None = None


@dataclass(frozen=True)
class ExerciseRecord:
    """Resolved exercise: registry id, slug, equipment, progressions and tags.

    ``tags`` are movement descriptors such as ``"power"`` or ``"plyometric"``.
    """

    id: str
    slug: str
    name: str
    equipment: tuple[str, ...] = field(default_factory=tuple)
    progressions: Progressions = field(default_factory=Progressions)
    tags: tuple[str, ...] = field(default_factory=tuple)

    @property
    def is_bodyweight(self) -> bool:
        """No equipment at all, or bodyweight as the only tag."""
        return not self.equipment or self.equipment == ("bodyweight",)

