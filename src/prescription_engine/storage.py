"""Template store and one-rep-max provider implementations.

InMemoryTemplateStore    dict-backed, for tests and previews
JsonTemplateStore        one JSON document per coordinate on disk
InMemoryOneRepMaxProvider  static athlete → {exercise id: 1RM} mapping

Template ids are the coordinate keys, so an id can always be turned back
into its coordinate with :meth:`TrainingCoordinate.from_key`.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
import threading
from pathlib import Path
from typing import Mapping

from prescription_engine.collaborators import OneRepMaxProvider, TemplateStore
from prescription_engine.exceptions import ValidationError
from prescription_engine.models.coordinate import TrainingCoordinate
from prescription_engine.models.prescription import ProgramTemplate
from prescription_engine.serialization.json_codec import (
    template_from_dict,
    template_to_dict,
)

logger = logging.getLogger(__name__)


def _coordinate_from_id(template_id: str) -> TrainingCoordinate | None:
    try:
        return TrainingCoordinate.from_key(template_id)
    except ValidationError:
        return None


class InMemoryTemplateStore(TemplateStore):
    """Thread-safe dict of coordinate key → template."""

    def __init__(self) -> None:
        self._templates: dict[str, ProgramTemplate] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._templates)

    def exists_by_coordinate(self, coordinate: TrainingCoordinate) -> bool:
        return coordinate.key in self._templates

    def insert_if_absent(self, template: ProgramTemplate) -> str | None:
        key = template.coordinate.key
        with self._lock:
            if key in self._templates:
                return None
            self._templates[key] = template
        return key

    def upsert(self, template: ProgramTemplate) -> str:
        key = template.coordinate.key
        with self._lock:
            self._templates[key] = template
        return key

    def get(self, template_id: str) -> ProgramTemplate | None:
        return self._templates.get(template_id)

    def get_by_coordinate(self, coordinate: TrainingCoordinate) -> ProgramTemplate | None:
        return self._templates.get(coordinate.key)

    def delete(self, coordinate: TrainingCoordinate) -> bool:
        with self._lock:
            return self._templates.pop(coordinate.key, None) is not None

    def coordinates(self) -> list[TrainingCoordinate]:
        with self._lock:
            return [t.coordinate for t in self._templates.values()]

    def clear(self) -> int:
        with self._lock:
            count = len(self._templates)
            self._templates.clear()
        return count


class JsonTemplateStore(TemplateStore):
    """Stores each template as ``<coordinate key>.json`` under a directory.

    Writes go to a temporary file in the same directory and are moved
    into place, so readers never observe a half-written document.
    """

    SUFFIX = ".json"

    def __init__(self, directory: str | Path) -> None:
        self._directory = Path(directory).expanduser()
        self._directory.mkdir(parents=True, exist_ok=True)
        self._lock = threading.Lock()

    @property
    def directory(self) -> Path:
        return self._directory

    def _path(self, template_id: str) -> Path:
        return self._directory / f"{template_id}{self.SUFFIX}"

    def _write(self, template: ProgramTemplate) -> str:
        key = template.coordinate.key
        fd, tmp_name = tempfile.mkstemp(dir=self._directory, suffix=".tmp")
        try:
            with os.fdopen(fd, "w") as f:
                json.dump(template_to_dict(template), f, indent=2)
            os.replace(tmp_name, self._path(key))
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
        return key

    def _read(self, path: Path) -> ProgramTemplate | None:
        try:
            with open(path) as f:
                return template_from_dict(json.load(f))
        except FileNotFoundError:
            return None

    def exists_by_coordinate(self, coordinate: TrainingCoordinate) -> bool:
        return self._path(coordinate.key).exists()

    def insert_if_absent(self, template: ProgramTemplate) -> str | None:
        with self._lock:
            if self._path(template.coordinate.key).exists():
                return None
            return self._write(template)

    def upsert(self, template: ProgramTemplate) -> str:
        with self._lock:
            return self._write(template)

    def get(self, template_id: str) -> ProgramTemplate | None:
        if _coordinate_from_id(template_id) is None:
            return None
        return self._read(self._path(template_id))

    def get_by_coordinate(self, coordinate: TrainingCoordinate) -> ProgramTemplate | None:
        return self._read(self._path(coordinate.key))

    def delete(self, coordinate: TrainingCoordinate) -> bool:
        with self._lock:
            try:
                self._path(coordinate.key).unlink()
            except FileNotFoundError:
                return False
        return True

    def coordinates(self) -> list[TrainingCoordinate]:
        coords = []
        for path in sorted(self._directory.glob(f"*{self.SUFFIX}")):
            coordinate = _coordinate_from_id(path.stem)
            if coordinate is None:
                logger.warning("Ignoring unrecognised file in template store: %s", path.name)
                continue
            coords.append(coordinate)
        return coords

    def clear(self) -> int:
        with self._lock:
            removed = 0
            for coordinate in self.coordinates():
                self._path(coordinate.key).unlink(missing_ok=True)
                removed += 1
        logger.info("Removed %d templates from %s", removed, self._directory)
        return removed


class InMemoryOneRepMaxProvider(OneRepMaxProvider):
    """One-rep maxes supplied up front, keyed by athlete then exercise id."""

    def __init__(self, maxes: Mapping[str, Mapping[str, float]] | None = None) -> None:
        self._maxes = {athlete: dict(values) for athlete, values in (maxes or {}).items()}

    @classmethod
    def from_json_file(cls, path: Path | str) -> InMemoryOneRepMaxProvider:
        """Load ``{"athlete id": {"exercise id": weight}}`` from a JSON file.

        Raises:
            ValidationError: If the file is missing or not that shape.
        """
        try:
            with open(path) as f:
                data = json.load(f)
        except FileNotFoundError:
            raise ValidationError(f"One-rep-max file not found: {path}") from None
        except json.JSONDecodeError as exc:
            raise ValidationError(f"Malformed one-rep-max file {path}: {exc}") from None
        if not isinstance(data, dict) or not all(
            isinstance(values, dict) for values in data.values()
        ):
            raise ValidationError(f"One-rep-max file {path} must map athlete ids to objects")
        provider = cls()
        for athlete_id, values in data.items():
            for exercise_id, weight in values.items():
                if isinstance(weight, bool) or not isinstance(weight, (int, float)):
                    raise ValidationError(
                        f"One-rep max for {athlete_id}/{exercise_id} must be a number"
                    )
                provider.set_max(athlete_id, exercise_id, weight)
        logger.debug("Loaded one-rep maxes for %d athletes from %s", len(data), path)
        return provider

    def set_max(self, athlete_id: str, exercise_id: str, weight: float) -> None:
        self._maxes.setdefault(athlete_id, {})[exercise_id] = weight

    def get_maxes(self, athlete_id: str) -> dict[str, float]:
        return dict(self._maxes.get(athlete_id, {}))
