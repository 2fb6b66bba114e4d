"""TemplateGenerator — batch driver over the training-coordinate space.

For each coordinate (category × phase × skill level × week × day):
    1. Skip it if the store already holds a template (idempotent)
    2. Otherwise assemble, estimate, name and describe a template
    3. Insert it unless a concurrent writer got there first

Failures are isolated per coordinate: an EngineError is recorded in the
result's ``errors`` and the batch moves on.
"""

from __future__ import annotations

import itertools
import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Iterable, Iterator

import pandas as pd

from prescription_engine.collaborators import TemplateStore
from prescription_engine.exceptions import EngineError, ValidationError
from prescription_engine.models.batch import (
    BatchError,
    BatchResult,
    GenerationStatus,
    Outcome,
)
from prescription_engine.models.coordinate import TrainingCoordinate
from prescription_engine.models.enums import (
    CATEGORIES,
    WEEKS,
    Phase,
    ScheduleMode,
    SkillLevel,
)
from prescription_engine.models.prescription import ProgramTemplate
from prescription_engine.program_builder.assembler import PrescriptionAssembler
from prescription_engine.program_builder.day_types import days_for_mode

logger = logging.getLogger(__name__)


def iter_coordinates(
    mode: ScheduleMode = ScheduleMode.SEVEN_DAY,
    categories: Iterable[int] = CATEGORIES,
) -> Iterator[TrainingCoordinate]:
    """Every coordinate for the given categories, in a stable order."""
    for category, phase, skill, week, day in itertools.product(
        categories, Phase, SkillLevel, WEEKS, days_for_mode(mode)
    ):
        yield TrainingCoordinate(
            category=category, phase=phase, skill_level=skill, week=week, day=day
        )


class TemplateGenerator:
    """Generates and persists one ProgramTemplate per training coordinate.

    Usage::

        generator = TemplateGenerator(PrescriptionAssembler(registry), store)
        result = generator.generate_all()
        print(result.created, result.skipped, result.failed)

    Args:
        assembler: Builds templates; its schedule mode defines the day range.
        store: Persistence collaborator. Its ``insert_if_absent`` must be
            atomic per coordinate when ``max_workers`` > 1.
        max_workers: Thread fan-out for batch runs. ``None`` or 1 runs the
            batch sequentially.
    """

    def __init__(
        self,
        assembler: PrescriptionAssembler,
        store: TemplateStore,
        max_workers: int | None = None,
    ) -> None:
        self._assembler = assembler
        self._store = store
        self._max_workers = max_workers

    @property
    def mode(self) -> ScheduleMode:
        return self._assembler.mode

    def generate_all(self, dry_run: bool = False) -> BatchResult:
        """Generate templates for every coordinate that does not have one yet."""
        logger.info(
            "Generating all templates (%s mode%s)",
            self.mode.name,
            ", dry run" if dry_run else "",
        )
        return self._run(iter_coordinates(self.mode), dry_run)

    def generate_for_category(self, category: int, dry_run: bool = False) -> BatchResult:
        """Generate templates for a single sport category.

        Raises:
            ValidationError: If ``category`` is not 1-4.
        """
        if isinstance(category, bool) or category not in CATEGORIES:
            raise ValidationError(f"category must be between 1 and 4, got {category!r}")
        logger.info("Generating templates for category %d", category)
        return self._run(iter_coordinates(self.mode, categories=(category,)), dry_run)

    def preview_one(self, coordinate: TrainingCoordinate) -> ProgramTemplate:
        """Build the template for one coordinate without persisting it."""
        return self._assembler.build_template(coordinate)

    def regenerate(self, coordinate: TrainingCoordinate) -> str:
        """Rebuild one coordinate and replace any stored template. Returns its id."""
        template = self._assembler.build_template(coordinate)
        template_id = self._store.upsert(template)
        logger.info("Regenerated %s", coordinate.describe())
        return template_id

    def clear_all(self, confirm: bool = False) -> int:
        """Delete every stored template. Refuses unless ``confirm`` is True.

        Raises:
            ValidationError: If ``confirm`` is not True.
        """
        if confirm is not True:
            raise ValidationError("clear_all requires confirm=True")
        removed = self._store.clear()
        logger.warning("Cleared %d templates", removed)
        return removed

    def status(self) -> GenerationStatus:
        """Count stored templates against the full coordinate space."""
        expected = {c.key for c in iter_coordinates(self.mode)}
        stored = [c for c in self._store.coordinates() if c.key in expected]
        frame = pd.DataFrame(
            [{"category": c.category, "phase": c.phase.name} for c in stored],
            columns=["category", "phase"],
        )
        category_counts = frame.groupby("category").size().reindex(CATEGORIES, fill_value=0)
        phases = [p.name for p in Phase]
        phase_counts = frame.groupby("phase").size().reindex(phases, fill_value=0)
        by_category = {int(k): int(v) for k, v in category_counts.items()}
        by_phase = {str(k): int(v) for k, v in phase_counts.items()}
        return GenerationStatus(
            expected=len(expected),
            existing=len(stored),
            by_category=by_category,
            by_phase=by_phase,
        )

    # ------------------------------------------------------------------
    # Batch internals
    # ------------------------------------------------------------------

    def _run(self, coordinates: Iterable[TrainingCoordinate], dry_run: bool) -> BatchResult:
        coords = list(coordinates)

        def process(coordinate: TrainingCoordinate) -> tuple[Outcome, BatchError | None]:
            return self._process(coordinate, dry_run)

        if self._max_workers and self._max_workers > 1:
            with ThreadPoolExecutor(max_workers=self._max_workers) as executor:
                outcomes = list(executor.map(process, coords))
        else:
            outcomes = [process(c) for c in coords]

        result = BatchResult(dry_run=dry_run)
        for outcome, error in outcomes:
            result = result.record(outcome, error)

        logger.info(
            "%s: %d total, %d created, %d skipped, %d failed",
            "Dry run" if dry_run else "Generation",
            result.total,
            result.created,
            result.skipped,
            result.failed,
        )
        return result

    def _process(
        self, coordinate: TrainingCoordinate, dry_run: bool
    ) -> tuple[Outcome, BatchError | None]:
        try:
            if self._store.exists_by_coordinate(coordinate):
                return Outcome.SKIPPED, None
            if dry_run:
                return Outcome.CREATED, None
            template = self._assembler.build_template(coordinate)
            if self._store.insert_if_absent(template) is None:
                logger.debug("%s was inserted concurrently; skipping", coordinate.key)
                return Outcome.SKIPPED, None
        except EngineError as exc:
            logger.warning("Failed to generate %s: %s", coordinate.describe(), exc)
            return Outcome.FAILED, BatchError(coordinate, str(exc))
        return Outcome.CREATED, None
