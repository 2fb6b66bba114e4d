"""Description builder — template titles and descriptions.

Titles read ``"<Day name> - <Week descriptor>"`` (e.g. ``"Lower Body A -
Foundation"``); descriptions pair the week's purpose with the phase focus.
"""

from __future__ import annotations

from prescription_engine.math.periodization import (
    WEEK_DESCRIPTIONS,
    WEEK_DESCRIPTORS,
    phase_config,
)
from prescription_engine.models.coordinate import TrainingCoordinate
from prescription_engine.models.enums import ScheduleMode
from prescription_engine.program_builder.day_types import classify, day_name


def build_template_name(
    coordinate: TrainingCoordinate,
    mode: ScheduleMode = ScheduleMode.SEVEN_DAY,
) -> str:
    """Short title for a template, e.g. ``"Upper Body B - Peak"``."""
    day_type = classify(coordinate.day, mode)
    return f"{day_name(day_type)} - {WEEK_DESCRIPTORS[coordinate.week]}"


def build_template_description(coordinate: TrainingCoordinate) -> str:
    """Week purpose followed by the phase's training focus."""
    focus = phase_config(coordinate.phase).focus_description
    return f"{WEEK_DESCRIPTIONS[coordinate.week]} {focus}"
