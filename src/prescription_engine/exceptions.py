"""Custom exception hierarchy for the prescription engine."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable

if TYPE_CHECKING:
    from prescription_engine.models.coordinate import TrainingCoordinate


class EngineError(Exception):
    """Base exception for all prescription_engine errors."""


class ValidationError(EngineError, ValueError):
    """Malformed coordinate, out-of-range value, or unknown enum member."""


class ExerciseReferenceError(EngineError, LookupError):
    """One or more exercise slugs did not resolve against the registry."""

    def __init__(
        self,
        slugs: Iterable[str],
        coordinate: TrainingCoordinate | None = None,
    ) -> None:
        self.slugs = tuple(sorted(set(slugs)))
        self.coordinate = coordinate
        super().__init__(f"Exercise not found: {', '.join(self.slugs)}")


class TemplateNotFoundError(EngineError, KeyError):
    """No stored template exists for the requested id."""

    def __init__(self, template_id: str) -> None:
        super().__init__(template_id)
        self.template_id = template_id

    def __str__(self) -> str:
        return f"Template not found: {self.template_id}"
