"""Batch generation results and store status snapshots."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from enum import Enum, auto

import pandas as pd

from prescription_engine.models.coordinate import TrainingCoordinate


class Outcome(Enum):
    """What happened to a single coordinate during a batch run."""

    CREATED = auto()
    SKIPPED = auto()
    FAILED = auto()


@dataclass(frozen=True)
class BatchError:
    """A per-coordinate failure, kept for diagnosis."""

    coordinate: TrainingCoordinate
    message: str

    def __str__(self) -> str:
        return f"{self.coordinate.describe()}: {self.message}"


@dataclass(frozen=True)
class BatchResult:
    """Aggregate counts from one pass over (part of) the coordinate space.

    In dry-run mode ``created`` counts the coordinates that *would* be
    created.
    """

    total: int = 0
    created: int = 0
    skipped: int = 0
    errors: tuple[BatchError, ...] = field(default_factory=tuple)
    dry_run: bool = False

    def record(self, outcome: Outcome, error: BatchError | None = None) -> BatchResult:
        """Fold one coordinate outcome into a new result."""
        if outcome is Outcome.CREATED:
            return dataclasses.replace(self, total=self.total + 1, created=self.created + 1)
        if outcome is Outcome.SKIPPED:
            return dataclasses.replace(self, total=self.total + 1, skipped=self.skipped + 1)
        if error is None:
            raise ValueError("A FAILED outcome requires a BatchError")
        return dataclasses.replace(
            self, total=self.total + 1, errors=self.errors + (error,)
        )

    @property
    def failed(self) -> int:
        return len(self.errors)

    def errors_frame(self) -> pd.DataFrame:
        """Per-coordinate failures as a DataFrame, one row per error."""
        rows = [
            {
                "category": e.coordinate.category,
                "phase": e.coordinate.phase.name,
                "skill_level": e.coordinate.skill_level.name,
                "week": e.coordinate.week,
                "day": e.coordinate.day,
                "message": e.message,
            }
            for e in self.errors
        ]
        return pd.DataFrame(
            rows,
            columns=["category", "phase", "skill_level", "week", "day", "message"],
        )


@dataclass(frozen=True)
class GenerationStatus:
    """How many templates exist in the store versus the full space."""

    expected: int
    existing: int
    by_category: dict[int, int] = field(default_factory=dict)
    by_phase: dict[str, int] = field(default_factory=dict)

    @property
    def remaining(self) -> int:
        return max(0, self.expected - self.existing)

    @property
    def percent_complete(self) -> int:
        if self.expected == 0:
            return 0
        return int(self.existing * 100 / self.expected + 0.5)
