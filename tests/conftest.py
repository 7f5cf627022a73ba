"""Pytest fixtures for payrun engine tests."""

from __future__ import annotations

from datetime import date, datetime, timezone
from decimal import Decimal
from uuid import UUID

import pytest

from payrun_engine.calculators.engine import PayrollEngine
from payrun_engine.calculators.types import Employee, Timesheet, TimesheetEntry
from payrun_engine.services.store import PayrollStore

PERIOD_START = date(2025, 8, 11)
PERIOD_END = date(2025, 8, 17)
FIXED_NOW = datetime(2025, 8, 18, 9, 0, tzinfo=timezone.utc)


def make_entry(day: int, start: str, end: str, break_minutes: int) -> TimesheetEntry:
    return TimesheetEntry(
        date=date(2025, 8, day),
        start=start,
        end=end,
        unpaid_break_minutes=break_minutes,
    )


@pytest.fixture
def alice() -> Employee:
    return Employee(
        id="e-alice",
        first_name="Alice",
        last_name="Chen",
        base_hourly_rate=Decimal("35.00"),
        super_rate=Decimal("0.115"),
    )


@pytest.fixture
def bob() -> Employee:
    return Employee(
        id="e-bob",
        first_name="Bob",
        last_name="Singh",
        base_hourly_rate=Decimal("48.00"),
        super_rate=Decimal("0.115"),
    )


@pytest.fixture
def carol() -> Employee:
    """An employee who never submits a timesheet."""
    return Employee(
        id="e-carol",
        first_name="Carol",
        last_name="Ng",
        base_hourly_rate=Decimal("30.00"),
    )


@pytest.fixture
def alice_entries() -> tuple[TimesheetEntry, ...]:
    """37 worked hours."""
    return (
        make_entry(11, "09:00", "17:30", 30),  # 8 hours
        make_entry(12, "09:00", "17:30", 30),  # 8 hours
        make_entry(13, "09:00", "17:30", 30),  # 8 hours
        make_entry(14, "09:00", "15:00", 30),  # 5.5 hours
        make_entry(15, "10:00", "18:00", 30),  # 7.5 hours
    )


@pytest.fixture
def bob_entries() -> tuple[TimesheetEntry, ...]:
    """45 worked hours."""
    return tuple(make_entry(day, "08:00", "18:00", 60) for day in range(11, 16))


@pytest.fixture
def alice_timesheet(alice: Employee, alice_entries) -> Timesheet:
    return Timesheet(
        employee_id=alice.id,
        period_start=PERIOD_START,
        period_end=PERIOD_END,
        entries=alice_entries,
        allowances=Decimal("30.00"),
    )


@pytest.fixture
def bob_timesheet(bob: Employee, bob_entries) -> Timesheet:
    return Timesheet(
        employee_id=bob.id,
        period_start=PERIOD_START,
        period_end=PERIOD_END,
        entries=bob_entries,
        allowances=Decimal("0"),
    )


@pytest.fixture
def engine() -> PayrollEngine:
    """Engine with a pinned clock and id factory."""
    return PayrollEngine(
        clock=lambda: FIXED_NOW,
        id_factory=lambda: UUID(int=1),
        engine_version="test",
    )


@pytest.fixture
def store(alice, bob, carol, alice_timesheet, bob_timesheet) -> PayrollStore:
    """Store seeded with three employees and two timesheets."""
    store = PayrollStore()
    for employee in (alice, bob, carol):
        store.save_employee(employee)
    store.save_timesheet(alice_timesheet)
    store.save_timesheet(bob_timesheet)
    return store
