"""Worked-hours calculation from timesheet entries."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from decimal import Decimal

from payrun_engine.calculators.money import round2
from payrun_engine.calculators.types import CalculatedHours, TimesheetEntry

logger = logging.getLogger(__name__)

# Applies to whatever period the timesheet covers (normally one week)
OVERTIME_THRESHOLD_HOURS = Decimal("38.00")


class MalformedTimeError(ValueError):
    """Raised when a clock time is not in HH:MM form."""

    def __init__(self, value: str):
        self.value = value
        super().__init__(f"Malformed time '{value}', expected HH:MM")


def parse_time_to_minutes(time: str) -> int:
    """Parse an "HH:MM" clock time into minutes since midnight.

    Hour and minute ranges are not checked; callers validate input first.

    Raises:
        MalformedTimeError: If the string is not two colon-separated integers
    """
    try:
        hours, minutes = (int(part) for part in time.split(":"))
    except (AttributeError, ValueError):
        raise MalformedTimeError(time) from None
    return hours * 60 + minutes


def calculate_worked_minutes(entry: TimesheetEntry) -> int:
    """Worked minutes for one shift, net of the unpaid break.

    Shifts do not wrap past midnight: an end before the start (or a break
    longer than the shift) yields 0.
    """
    start = parse_time_to_minutes(entry.start)
    end = parse_time_to_minutes(entry.end)
    worked = (end - start) - entry.unpaid_break_minutes

    if end < start:
        logger.warning(
            "Shift on %s ends before it starts (%s-%s); counted as 0 minutes",
            entry.date,
            entry.start,
            entry.end,
        )
    return max(0, worked)


def minutes_to_hours(minutes: int) -> Decimal:
    """Convert minutes to hours rounded to 2 decimal places."""
    return round2(Decimal(minutes) / 60)


def calculate_hours(
    entries: Iterable[TimesheetEntry],
    threshold: Decimal = OVERTIME_THRESHOLD_HOURS,
) -> CalculatedHours:
    """Total the entries and split into normal and overtime hours.

    Overtime is assessed on the period total only; there are no daily rules.
    """
    total_minutes = sum(calculate_worked_minutes(entry) for entry in entries)
    total_hours = minutes_to_hours(total_minutes)

    if total_hours <= threshold:
        return CalculatedHours(normal_hours=total_hours, overtime_hours=Decimal("0"))

    return CalculatedHours(
        normal_hours=threshold,
        overtime_hours=round2(total_hours - threshold),
    )
