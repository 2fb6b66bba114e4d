"""Session duration estimate from an assembled prescription."""

from __future__ import annotations

import re
from typing import Iterable

from prescription_engine.math.periodization import round_half_up
from prescription_engine.models.enums import (
    DEFAULT_REP_COUNT,
    SECONDS_PER_REP,
    TRANSITION_BUFFER_MIN,
)
from prescription_engine.models.prescription import ExercisePrescription

_TIMED = re.compile(
    r"^\s*(\d+(?:\.\d+)?)\s*"
    r"(seconds|second|secs|sec|s|minutes|minute|mins|min)\b",
    re.IGNORECASE,
)
_FIRST_INT = re.compile(r"(\d+)")


def parse_hold_seconds(reps: str) -> float | None:
    """Seconds encoded by a time-based reps string, else None.

    ``"30s"`` → 30, ``"30s each side"`` → 30, ``"2 min"`` → 120,
    ``"20 yards"`` → None.
    """
    match = _TIMED.match(reps)
    if match is None:
        return None
    value = float(match.group(1))
    if match.group(2).lower().startswith("m"):
        value *= 60
    return value


def parse_rep_count(reps: str) -> int:
    """First integer in a reps string (``"10-12"`` → 10), 10 when absent."""
    match = _FIRST_INT.search(reps)
    return int(match.group(1)) if match else DEFAULT_REP_COUNT


def exercise_seconds(exercise: ExercisePrescription) -> float:
    """Work plus rest time for every set of one exercise."""
    hold = parse_hold_seconds(exercise.reps)
    if hold is None:
        work = parse_rep_count(exercise.reps) * SECONDS_PER_REP
    else:
        work = hold
    return (work + exercise.rest_seconds) * exercise.sets


def estimate_duration_minutes(exercises: Iterable[ExercisePrescription]) -> int:
    """Estimated session length in whole minutes.

    Sums per-exercise time (timed holds at face value, ~3 s per rep
    otherwise), converts to minutes and adds a 5-minute transition buffer.
    """
    total_seconds = sum(exercise_seconds(ex) for ex in exercises)
    return round_half_up(total_seconds / 60) + TRANSITION_BUFFER_MIN
