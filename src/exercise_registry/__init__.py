"""Exercise registry — seeded catalog and slug resolution."""

from exercise_registry.catalog import seed_records
from exercise_registry.registry import InMemoryExerciseRegistry

__all__ = ["InMemoryExerciseRegistry", "seed_records"]
