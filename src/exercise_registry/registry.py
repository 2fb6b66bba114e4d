"""In-memory exercise registry backed by the seeded catalog."""

from __future__ import annotations

import logging
from typing import Iterable

from prescription_engine.collaborators import ExerciseRegistry
from prescription_engine.models.exercise import ExerciseRecord

from exercise_registry.catalog import seed_records

logger = logging.getLogger(__name__)


class InMemoryExerciseRegistry(ExerciseRegistry):
    """Registry of exercises indexed by slug and by id.

    Usage::

        registry = InMemoryExerciseRegistry.default()
        record = registry.resolve("goblet_squat")
    """

    def __init__(self, records: Iterable[ExerciseRecord] = ()) -> None:
        self._by_slug: dict[str, ExerciseRecord] = {}
        self._by_id: dict[str, ExerciseRecord] = {}
        for record in records:
            self.register(record)

    @classmethod
    def default(cls) -> InMemoryExerciseRegistry:
        """A registry seeded with the full exercise catalog."""
        registry = cls(seed_records())
        logger.debug("Loaded %d exercises into registry", len(registry))
        return registry

    def __len__(self) -> int:
        return len(self._by_slug)

    def __contains__(self, slug: object) -> bool:
        return slug in self._by_slug

    def register(self, record: ExerciseRecord) -> None:
        """Add or replace a record, keyed by both slug and id."""
        previous = self._by_slug.get(record.slug)
        if previous is not None:
            self._by_id.pop(previous.id, None)
        self._by_slug[record.slug] = record
        self._by_id[record.id] = record

    def unregister(self, slug: str) -> bool:
        """Remove a record by slug. Returns whether it was registered."""
        record = self._by_slug.pop(slug, None)
        if record is None:
            return False
        self._by_id.pop(record.id, None)
        return True

    def resolve(self, slug: str) -> ExerciseRecord | None:
        return self._by_slug.get(slug)

    def resolve_many(self, slugs: Iterable[str]) -> dict[str, ExerciseRecord]:
        return {slug: self._by_slug[slug] for slug in slugs if slug in self._by_slug}

    def get_by_id(self, exercise_id: str) -> ExerciseRecord | None:
        return self._by_id.get(exercise_id)

    @property
    def slugs(self) -> list[str]:
        return sorted(self._by_slug)
