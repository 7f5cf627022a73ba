"""Type definitions for calculation pipeline."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Any
from uuid import UUID

ZERO = Decimal("0")

# Employer superannuation guarantee rate
DEFAULT_SUPER_RATE = Decimal("0.115")


class EmploymentType(str, Enum):
    """Employment types supported by the calculators."""

    HOURLY = "hourly"


@dataclass(frozen=True)
class BankDetails:
    """Payment details carried through to payslips untouched."""

    bsb: str
    account: str


@dataclass(frozen=True)
class Employee:
    """An hourly employee."""

    id: str
    first_name: str
    last_name: str
    base_hourly_rate: Decimal
    super_rate: Decimal = DEFAULT_SUPER_RATE
    employment_type: EmploymentType = EmploymentType.HOURLY
    bank: BankDetails | None = None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


@dataclass(frozen=True)
class TimesheetEntry:
    """One shift. Times are "HH:MM" on the same calendar day."""

    date: date
    start: str
    end: str
    unpaid_break_minutes: int = 0


@dataclass(frozen=True)
class Timesheet:
    """An employee's entries for one pay period (inclusive range)."""

    employee_id: str
    period_start: date
    period_end: date
    entries: tuple[TimesheetEntry, ...] = ()
    allowances: Decimal = ZERO

    @property
    def key(self) -> tuple[str, date, date]:
        """Identity of the timesheet: (employee_id, period_start, period_end)."""
        return (self.employee_id, self.period_start, self.period_end)


@dataclass(frozen=True)
class CalculatedHours:
    """Hours split against the overtime threshold."""

    normal_hours: Decimal
    overtime_hours: Decimal

    @property
    def total_hours(self) -> Decimal:
        return self.normal_hours + self.overtime_hours


@dataclass(frozen=True)
class TaxBracket:
    """Tax bracket for progressive taxation.

    Bounds are inclusive on both ends. ``base`` is the tax owed on all income
    below ``min_amount``.
    """

    min_amount: Decimal
    max_amount: Decimal | None  # None = no upper limit
    rate: Decimal  # As decimal, e.g., 0.19 for 19%
    base: Decimal = ZERO

    def contains(self, amount: Decimal) -> bool:
        if amount < self.min_amount:
            return False
        return self.max_amount is None or amount <= self.max_amount


@dataclass(frozen=True)
class Payslip:
    """Calculated pay for one employee for one period."""

    employee_id: str
    normal_hours: Decimal
    overtime_hours: Decimal
    gross: Decimal
    tax: Decimal
    super: Decimal
    net: Decimal

    @classmethod
    def zero(cls, employee_id: str) -> Payslip:
        """Payslip for an employee with no timesheet in the period."""
        return cls(
            employee_id=employee_id,
            normal_hours=ZERO,
            overtime_hours=ZERO,
            gross=ZERO,
            tax=ZERO,
            super=ZERO,
            net=ZERO,
        )

    def to_canonical_dict(self) -> dict[str, Any]:
        """Return canonical dict for hashing (deterministic ordering)."""
        return {
            "employee_id": self.employee_id,
            "normal_hours": str(self.normal_hours),
            "overtime_hours": str(self.overtime_hours),
            "gross": str(self.gross),
            "tax": str(self.tax),
            "super": str(self.super),
            "net": str(self.net),
        }


@dataclass(frozen=True)
class PayrunTotals:
    """Field-wise sums over a payrun's payslips."""

    gross: Decimal = ZERO
    tax: Decimal = ZERO
    super: Decimal = ZERO
    net: Decimal = ZERO


@dataclass(frozen=True)
class Payrun:
    """A batch of payslips for one period plus aggregate totals."""

    id: UUID
    period_start: date
    period_end: date
    totals: PayrunTotals
    payslips: tuple[Payslip, ...]
    created_at: datetime
    fingerprint: str = ""

    def payslip_for(self, employee_id: str) -> Payslip | None:
        return next((p for p in self.payslips if p.employee_id == employee_id), None)


@dataclass
class PayrunRequest:
    """Request to generate a payrun.

    ``employee_ids`` of None (or empty) selects every known employee.
    """

    period_start: date
    period_end: date
    employee_ids: list[str] | None = None
