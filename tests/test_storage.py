"""Tests for template stores and the one-rep-max provider."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Callable

import pytest

from prescription_engine.collaborators import TemplateStore
from prescription_engine.exceptions import ValidationError
from prescription_engine.models.coordinate import TrainingCoordinate
from prescription_engine.program_builder.assembler import PrescriptionAssembler
from prescription_engine.storage import (
    InMemoryOneRepMaxProvider,
    InMemoryTemplateStore,
    JsonTemplateStore,
)

MakeCoordinate = Callable[..., TrainingCoordinate]


@pytest.fixture(params=["memory", "json"])
def any_store(request: pytest.FixtureRequest, tmp_path: Path) -> TemplateStore:
    if request.param == "memory":
        return InMemoryTemplateStore()
    return JsonTemplateStore(tmp_path / "templates")


class TestTemplateStore:
    def test_insert_if_absent_is_idempotent(
        self,
        any_store: TemplateStore,
        assembler: PrescriptionAssembler,
        make_coordinate: MakeCoordinate,
    ) -> None:
        template = assembler.build_template(make_coordinate())
        assert any_store.insert_if_absent(template) == "1-GPP-NOVICE-w1-d1"
        assert any_store.insert_if_absent(template) is None
        assert any_store.coordinates() == [template.coordinate]

    def test_round_trip(
        self,
        any_store: TemplateStore,
        assembler: PrescriptionAssembler,
        make_coordinate: MakeCoordinate,
    ) -> None:
        template = assembler.build_template(make_coordinate(day=6))
        template_id = any_store.upsert(template)
        assert any_store.get(template_id) == template
        assert any_store.get_by_coordinate(template.coordinate) == template
        assert any_store.exists_by_coordinate(template.coordinate)

    def test_missing(self, any_store: TemplateStore, make_coordinate: MakeCoordinate) -> None:
        assert any_store.get("1-GPP-NOVICE-w1-d2") is None
        assert any_store.get("not-a-key") is None
        assert any_store.get_by_coordinate(make_coordinate()) is None
        assert not any_store.delete(make_coordinate())

    def test_delete_and_clear(
        self,
        any_store: TemplateStore,
        assembler: PrescriptionAssembler,
        make_coordinate: MakeCoordinate,
    ) -> None:
        for day in (1, 2, 3):
            any_store.upsert(assembler.build_template(make_coordinate(day=day)))
        assert any_store.delete(make_coordinate(day=2))
        assert not any_store.exists_by_coordinate(make_coordinate(day=2))
        assert any_store.clear() == 2
        assert any_store.coordinates() == []


class TestJsonTemplateStore:
    def test_one_file_per_coordinate(
        self,
        tmp_path: Path,
        assembler: PrescriptionAssembler,
        make_coordinate: MakeCoordinate,
    ) -> None:
        store = JsonTemplateStore(tmp_path)
        store.upsert(assembler.build_template(make_coordinate()))
        path = tmp_path / "1-GPP-NOVICE-w1-d1.json"
        assert path.exists()
        data = json.loads(path.read_text())
        assert data["skillLevel"] == "Novice"
        assert list(tmp_path.glob("*.tmp")) == []

    def test_ignores_foreign_files(self, tmp_path: Path) -> None:
        (tmp_path / "notes.json").write_text("{}")
        assert JsonTemplateStore(tmp_path).coordinates() == []


class TestOneRepMaxProvider:
    def test_get_and_set(self) -> None:
        provider = InMemoryOneRepMaxProvider({"a": {"back_squat": 140}})
        provider.set_max("a", "front_squat", 120)
        assert provider.get_maxes("a") == {"back_squat": 140, "front_squat": 120}
        assert provider.get_maxes("b") == {}

    def test_returns_a_copy(self) -> None:
        provider = InMemoryOneRepMaxProvider({"a": {"back_squat": 140}})
        provider.get_maxes("a")["back_squat"] = 0
        assert provider.get_maxes("a") == {"back_squat": 140}

    def test_from_json_file(self, tmp_path: Path) -> None:
        path = tmp_path / "maxes.json"
        path.write_text(json.dumps({"a": {"back_squat": 140, "bench_press": 95.5}}))
        provider = InMemoryOneRepMaxProvider.from_json_file(path)
        assert provider.get_maxes("a") == {"back_squat": 140, "bench_press": 95.5}

    @pytest.mark.parametrize(
        "content",
        ['["a"]', '{"a": 140}', '{"a": {"back_squat": "heavy"}}', "{not json"],
    )
    def test_from_json_file_rejects_bad_shapes(self, tmp_path: Path, content: str) -> None:
        path = tmp_path / "maxes.json"
        path.write_text(content)
        with pytest.raises(ValidationError):
            InMemoryOneRepMaxProvider.from_json_file(path)

    def test_from_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ValidationError):
            InMemoryOneRepMaxProvider.from_json_file(tmp_path / "absent.json")
