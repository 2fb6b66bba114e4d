"""Abstract interfaces for the engine's external collaborators.

The engine never talks to a database or an exercise catalog directly.
It is handed implementations of these interfaces:

    ExerciseRegistry   slug → exercise metadata (bulk-resolvable)
    TemplateStore      template persistence keyed by training coordinate
    OneRepMaxProvider  per-athlete one-rep-max values
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable

from prescription_engine.models.coordinate import TrainingCoordinate
from prescription_engine.models.exercise import ExerciseRecord
from prescription_engine.models.prescription import ProgramTemplate


class ExerciseRegistry(ABC):
    """Resolves exercise slugs to registry metadata."""

    @abstractmethod
    def resolve(self, slug: str) -> ExerciseRecord | None:
        """Look up one exercise by slug, or None if it is not registered."""
        ...

    def resolve_many(self, slugs: Iterable[str]) -> dict[str, ExerciseRecord]:
        """Resolve a batch of slugs in one call.

        Unknown slugs are absent from the returned mapping. The default
        implementation loops over :meth:`resolve`; registries backed by a
        remote catalog should override it with a single query.
        """
        resolved: dict[str, ExerciseRecord] = {}
        for slug in slugs:
            if slug in resolved:
                continue
            record = self.resolve(slug)
            if record is not None:
                resolved[slug] = record
        return resolved

    def get_by_id(self, exercise_id: str) -> ExerciseRecord | None:
        """Look up one exercise by registry id. Defaults to no id index."""
        return None


class TemplateStore(ABC):
    """Persistence for generated program templates, one per coordinate.

    Implementations must make :meth:`insert_if_absent` atomic per
    coordinate so concurrent generators never insert a duplicate.
    """

    @abstractmethod
    def exists_by_coordinate(self, coordinate: TrainingCoordinate) -> bool:
        ...

    @abstractmethod
    def insert_if_absent(self, template: ProgramTemplate) -> str | None:
        """Store ``template`` unless its coordinate is taken.

        Returns:
            The new template id, or None if one already existed.
        """
        ...

    @abstractmethod
    def upsert(self, template: ProgramTemplate) -> str:
        """Insert or replace the template for its coordinate and return its id."""
        ...

    @abstractmethod
    def get(self, template_id: str) -> ProgramTemplate | None:
        ...

    @abstractmethod
    def get_by_coordinate(self, coordinate: TrainingCoordinate) -> ProgramTemplate | None:
        ...

    @abstractmethod
    def delete(self, coordinate: TrainingCoordinate) -> bool:
        """Remove the template for a coordinate. Returns whether one existed."""
        ...

    @abstractmethod
    def coordinates(self) -> list[TrainingCoordinate]:
        """All coordinates that currently have a stored template."""
        ...

    @abstractmethod
    def clear(self) -> int:
        """Delete every stored template and return how many were removed."""
        ...


class OneRepMaxProvider(ABC):
    """Supplies an athlete's known one-rep-max values."""

    @abstractmethod
    def get_maxes(self, athlete_id: str) -> dict[str, float]:
        """Map of exercise id → one-rep max. Empty when none are recorded."""
        ...
