"""Tests for the batch template generator."""

from __future__ import annotations

from typing import Callable

import pytest

from exercise_registry import InMemoryExerciseRegistry
from prescription_engine.exceptions import ValidationError
from prescription_engine.generator import TemplateGenerator, iter_coordinates
from prescription_engine.models.coordinate import TrainingCoordinate
from prescription_engine.models.enums import ScheduleMode
from prescription_engine.models.prescription import ProgramTemplate
from prescription_engine.program_builder.assembler import PrescriptionAssembler
from prescription_engine.storage import InMemoryTemplateStore

MakeCoordinate = Callable[..., TrainingCoordinate]


class _RacingStore(InMemoryTemplateStore):
    """Reports every coordinate as free but never wins the insert."""

    def exists_by_coordinate(self, coordinate: TrainingCoordinate) -> bool:
        return False

    def insert_if_absent(self, template: ProgramTemplate) -> str | None:
        return None


class _BrokenStore(InMemoryTemplateStore):
    def exists_by_coordinate(self, coordinate: TrainingCoordinate) -> bool:
        raise RuntimeError("connection lost")


class TestCoordinateSpace:
    def test_seven_day_space(self) -> None:
        coords = list(iter_coordinates())
        assert len(coords) == 1008
        assert len({c.key for c in coords}) == 1008

    def test_three_day_space(self) -> None:
        coords = list(iter_coordinates(ScheduleMode.THREE_DAY))
        assert len(coords) == 432
        assert {c.day for c in coords} == {1, 2, 3}

    def test_single_category(self) -> None:
        coords = list(iter_coordinates(categories=(4,)))
        assert len(coords) == 252
        assert {c.category for c in coords} == {4}


class TestGenerateAll:
    def test_dry_run_reports_full_space_without_writing(
        self, generator: TemplateGenerator, store: InMemoryTemplateStore
    ) -> None:
        result = generator.generate_all(dry_run=True)
        assert result.dry_run
        assert (result.total, result.created, result.skipped, result.failed) == (1008, 1008, 0, 0)
        assert len(store) == 0

    def test_three_day_dry_run(self, three_day_generator: TemplateGenerator) -> None:
        assert three_day_generator.generate_all(dry_run=True).total == 432

    def test_idempotent(self, generator: TemplateGenerator, store: InMemoryTemplateStore) -> None:
        first = generator.generate_all()
        assert (first.created, first.skipped, first.failed) == (1008, 0, 0)
        second = generator.generate_all()
        assert (second.created, second.skipped, second.failed) == (0, 1008, 0)
        assert len(store) == 1008

    def test_resumes_partial_batch(
        self, generator: TemplateGenerator, store: InMemoryTemplateStore
    ) -> None:
        generator.generate_for_category(1)
        result = generator.generate_all(dry_run=True)
        assert (result.created, result.skipped) == (756, 252)

    def test_threaded_fan_out(
        self, catalog_registry: InMemoryExerciseRegistry, store: InMemoryTemplateStore
    ) -> None:
        generator = TemplateGenerator(
            PrescriptionAssembler(catalog_registry), store, max_workers=4
        )
        result = generator.generate_for_category(3)
        assert (result.total, result.created) == (252, 252)
        assert len(store) == 252

    def test_concurrent_insert_counts_as_skipped(
        self, assembler: PrescriptionAssembler, make_coordinate: MakeCoordinate
    ) -> None:
        generator = TemplateGenerator(assembler, _RacingStore())
        result = generator.generate_for_category(1)
        assert (result.created, result.skipped) == (0, 252)


class TestErrorIsolation:
    def test_missing_exercise_fails_only_its_coordinates(
        self, registry: InMemoryExerciseRegistry, store: InMemoryTemplateStore
    ) -> None:
        registry.unregister("goblet_squat")
        generator = TemplateGenerator(PrescriptionAssembler(registry), store)
        result = generator.generate_all()

        assert result.failed > 0
        assert result.created > 0
        assert result.created + result.failed == 1008
        assert len(store) == result.created
        for error in result.errors:
            assert "goblet_squat" in error.message
            assert not store.exists_by_coordinate(error.coordinate)

    def test_errors_frame(
        self, registry: InMemoryExerciseRegistry, store: InMemoryTemplateStore
    ) -> None:
        registry.unregister("plank")
        generator = TemplateGenerator(PrescriptionAssembler(registry), store)
        result = generator.generate_for_category(1)
        frame = result.errors_frame()
        assert len(frame) == result.failed > 0
        assert list(frame.columns) == ["category", "phase", "skill_level", "week", "day", "message"]
        assert set(frame["category"]) == {1}

    def test_unexpected_errors_propagate(self, assembler: PrescriptionAssembler) -> None:
        generator = TemplateGenerator(assembler, _BrokenStore())
        with pytest.raises(RuntimeError):
            generator.generate_for_category(1)


class TestSingleCoordinate:
    def test_preview_does_not_persist(
        self,
        generator: TemplateGenerator,
        store: InMemoryTemplateStore,
        make_coordinate: MakeCoordinate,
    ) -> None:
        template = generator.preview_one(make_coordinate())
        assert template.name == "Lower Body A - Foundation"
        assert len(store) == 0

    def test_regenerate_overwrites(
        self,
        generator: TemplateGenerator,
        store: InMemoryTemplateStore,
        make_coordinate: MakeCoordinate,
    ) -> None:
        coordinate = make_coordinate(day=3)
        generator.regenerate(coordinate)
        template_id = generator.regenerate(coordinate)
        assert template_id == coordinate.key
        assert len(store) == 1
        assert store.get(template_id) == generator.preview_one(coordinate)

    def test_invalid_category(self, generator: TemplateGenerator) -> None:
        with pytest.raises(ValidationError):
            generator.generate_for_category(5)


class TestStatusAndClear:
    def test_status_counts(self, generator: TemplateGenerator) -> None:
        generator.generate_for_category(2)
        status = generator.status()
        assert (status.expected, status.existing, status.remaining) == (1008, 252, 756)
        assert status.percent_complete == 25
        assert status.by_category == {1: 0, 2: 252, 3: 0, 4: 0}
        assert status.by_phase == {"GPP": 84, "SPP": 84, "SSP": 84}

    def test_status_of_empty_store(self, generator: TemplateGenerator) -> None:
        status = generator.status()
        assert status.existing == 0
        assert status.by_category == {1: 0, 2: 0, 3: 0, 4: 0}
        assert status.by_phase == {"GPP": 0, "SPP": 0, "SSP": 0}

    def test_status_reports_empty_buckets(self, generator: TemplateGenerator) -> None:
        generator.generate_for_category(3)
        status = generator.status()
        assert status.by_category[1] == 0
        assert status.by_category[3] == 252
        assert list(status.by_category) == [1, 2, 3, 4]
        assert list(status.by_phase) == ["GPP", "SPP", "SSP"]

    def test_three_day_status_ignores_other_days(
        self,
        generator: TemplateGenerator,
        three_day_generator: TemplateGenerator,
    ) -> None:
        # Both fixtures share one store
        generator.generate_for_category(1)
        status = three_day_generator.status()
        assert (status.expected, status.existing) == (432, 108)

    def test_clear_requires_confirmation(
        self, generator: TemplateGenerator, store: InMemoryTemplateStore
    ) -> None:
        generator.generate_for_category(4)
        with pytest.raises(ValidationError):
            generator.clear_all()
        assert len(store) == 252
        assert generator.clear_all(confirm=True) == 252
        assert len(store) == 0
