"""Shared test fixtures: registries, stores, assemblers and coordinates."""

from __future__ import annotations

from typing import Callable

import pytest

from exercise_registry import InMemoryExerciseRegistry
from prescription_engine.generator import TemplateGenerator
from prescription_engine.models.coordinate import TrainingCoordinate
from prescription_engine.models.enums import Phase, ScheduleMode, SkillLevel
from prescription_engine.program_builder.assembler import PrescriptionAssembler
from prescription_engine.storage import InMemoryTemplateStore


@pytest.fixture(scope="session")
def catalog_registry() -> InMemoryExerciseRegistry:
    """The full seeded catalog. Shared, so tests must not mutate it."""
    return InMemoryExerciseRegistry.default()


@pytest.fixture
def registry() -> InMemoryExerciseRegistry:
    """A fresh seeded registry that a test may modify."""
    return InMemoryExerciseRegistry.default()


@pytest.fixture
def make_coordinate() -> Callable[..., TrainingCoordinate]:
    """Factory for coordinates; defaults to Category 1, GPP, Novice, Week 1, Day 1."""

    def _make(**overrides) -> TrainingCoordinate:
        defaults = dict(
            category=1,
            phase=Phase.GPP,
            skill_level=SkillLevel.NOVICE,
            week=1,
            day=1,
        )
        defaults.update(overrides)
        return TrainingCoordinate(**defaults)

    return _make


@pytest.fixture
def assembler(catalog_registry: InMemoryExerciseRegistry) -> PrescriptionAssembler:
    return PrescriptionAssembler(catalog_registry)


@pytest.fixture
def store() -> InMemoryTemplateStore:
    return InMemoryTemplateStore()


@pytest.fixture
def generator(
    assembler: PrescriptionAssembler, store: InMemoryTemplateStore
) -> TemplateGenerator:
    return TemplateGenerator(assembler, store)


@pytest.fixture
def three_day_generator(
    catalog_registry: InMemoryExerciseRegistry, store: InMemoryTemplateStore
) -> TemplateGenerator:
    return TemplateGenerator(
        PrescriptionAssembler(catalog_registry, mode=ScheduleMode.THREE_DAY), store
    )
