"""Demo data for a freshly started service.

Loads two hourly employees and their timesheets for the week of
2025-08-11 so a payrun can be generated straight away. Enabled with
``SEED_DEMO_DATA=true``.
"""

from __future__ import annotations

import logging
from datetime import date
from decimal import Decimal

from payrun_engine.calculators.types import BankDetails, Employee, Timesheet, TimesheetEntry
from payrun_engine.services.store import PayrollStore

logger = logging.getLogger(__name__)

DEMO_PERIOD_START = date(2025, 8, 11)
DEMO_PERIOD_END = date(2025, 8, 17)


def _shift(day: int, start: str, end: str, break_minutes: int) -> TimesheetEntry:
    return TimesheetEntry(
        date=date(2025, 8, day),
        start=start,
        end=end,
        unpaid_break_minutes=break_minutes,
    )


def demo_employees() -> list[Employee]:
    """Alice Chen and Bob Singh, both hourly at the default super rate."""
    return [
        Employee(
            id="e-alice",
            first_name="Alice",
            last_name="Chen",
            base_hourly_rate=Decimal("35.00"),
            bank=BankDetails(bsb="083-123", account="12345678"),
        ),
        Employee(
            id="e-bob",
            first_name="Bob",
            last_name="Singh",
            base_hourly_rate=Decimal("48.00"),
            bank=BankDetails(bsb="062-000", account="98765432"),
        ),
    ]


def demo_timesheets() -> list[Timesheet]:
    """37 hours plus allowances for Alice, 45 hours for Bob."""
    return [
        Timesheet(
            employee_id="e-alice",
            period_start=DEMO_PERIOD_START,
            period_end=DEMO_PERIOD_END,
            entries=(
                _shift(11, "09:00", "17:30", 30),
                _shift(12, "09:00", "17:30", 30),
                _shift(13, "09:00", "17:30", 30),
                _shift(14, "09:00", "15:00", 30),
                _shift(15, "10:00", "18:00", 30),
            ),
            allowances=Decimal("30.00"),
        ),
        Timesheet(
            employee_id="e-bob",
            period_start=DEMO_PERIOD_START,
            period_end=DEMO_PERIOD_END,
            entries=tuple(_shift(day, "08:00", "18:00", 60) for day in range(11, 16)),
        ),
    ]


def seed_demo_data(store: PayrollStore) -> None:
    """Load the demo employees and timesheets, replacing any with the same keys."""
    for employee in demo_employees():
        store.save_employee(employee)
        logger.info("Seeded employee %s (%s)", employee.id, employee.full_name)

    for timesheet in demo_timesheets():
        store.save_timesheet(timesheet)
        logger.info(
            "Seeded timesheet for %s (%s to %s)",
            timesheet.employee_id,
            timesheet.period_start,
            timesheet.period_end,
        )
