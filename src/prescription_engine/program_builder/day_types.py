"""Day-type classifier — maps a day-in-block to its semantic training day.

The canonical model is a 7-slot week reused across every sport category:

    1 Lower Body A (squat dominant)   5 Upper Body B (pull emphasis)
    2 Upper Body A (push emphasis)    6 Full Body Athletic
    3 Power & Conditioning            7 Active Recovery
    4 Lower Body B (hinge dominant)

The legacy 3-day schedule keeps only the first three slots.
"""

from __future__ import annotations

from prescription_engine.exceptions import ValidationError
from prescription_engine.models.enums import DayType, ScheduleMode

_SEVEN_DAY: dict[int, DayType] = {
    1: DayType.LOWER_A,
    2: DayType.UPPER_A,
    3: DayType.POWER,
    4: DayType.LOWER_B,
    5: DayType.UPPER_B,
    6: DayType.FULL_BODY,
    7: DayType.RECOVERY,
}

_THREE_DAY: dict[int, DayType] = {
    1: DayType.LOWER_A,
    2: DayType.UPPER_A,
    3: DayType.POWER,
}

_DAY_MAPS: dict[ScheduleMode, dict[int, DayType]] = {
    ScheduleMode.SEVEN_DAY: _SEVEN_DAY,
    ScheduleMode.THREE_DAY: _THREE_DAY,
}

DAY_NAMES: dict[DayType, str] = {
    DayType.LOWER_A: "Lower Body A",
    DayType.UPPER_A: "Upper Body A",
    DayType.POWER: "Power & Conditioning",
    DayType.LOWER_B: "Lower Body B",
    DayType.UPPER_B: "Upper Body B",
    DayType.FULL_BODY: "Full Body Athletic",
    DayType.RECOVERY: "Active Recovery",
}


def days_for_mode(mode: ScheduleMode = ScheduleMode.SEVEN_DAY) -> tuple[int, ...]:
    """Day numbers that exist under a schedule mode, in order."""
    return tuple(sorted(_DAY_MAPS[mode]))


def classify(day: int, mode: ScheduleMode = ScheduleMode.SEVEN_DAY) -> DayType:
    """Return the day type for a 1-indexed day within the weekly block.

    Args:
        day: Day number (1-7, or 1-3 in the legacy 3-day mode).
        mode: Days-per-week schedule model.

    Raises:
        ValidationError: If ``day`` is not a day of the schedule.
    """
    if isinstance(day, bool) or not isinstance(day, int):
        raise ValidationError(f"day must be an integer, got {day!r}")
    day_map = _DAY_MAPS[mode]
    if day not in day_map:
        raise ValidationError(
            f"day must be between 1 and {len(day_map)} for a "
            f"{mode.value}-day schedule, got {day}"
        )
    return day_map[day]


def day_name(day_type: DayType) -> str:
    """Display name for a day type, e.g. ``"Lower Body A"``."""
    return DAY_NAMES[day_type]
