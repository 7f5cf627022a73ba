"""Service-layer errors."""

from __future__ import annotations

from datetime import date
from uuid import UUID


class InvalidPeriodError(Exception):
    """Raised when a period starts after it ends."""

    def __init__(self, period_start: date, period_end: date):
        self.period_start = period_start
        self.period_end = period_end
        super().__init__(
            f"Period start {period_start} must be before or equal to period end {period_end}"
        )


class EntryOutsidePeriodError(Exception):
    """Raised when a timesheet entry is dated outside its period."""

    def __init__(self, entry_date: date, period_start: date, period_end: date):
        self.entry_date = entry_date
        self.period_start = period_start
        self.period_end = period_end
        super().__init__(
            f"Entry date {entry_date} is outside the period {period_start} to {period_end}"
        )


class EmployeeNotFoundError(Exception):
    """Raised when one or more employee ids are unknown."""

    def __init__(self, employee_ids: list[str]):
        self.employee_ids = employee_ids
        super().__init__(f"Employees not found: {', '.join(employee_ids)}")


class NoEmployeesError(Exception):
    """Raised when a payrun would contain no employees."""

    def __init__(self) -> None:
        super().__init__("No employees found for payrun generation")


class TimesheetNotFoundError(Exception):
    """Raised when a timesheet does not exist."""

    def __init__(self, employee_id: str, period_start: date, period_end: date):
        self.employee_id = employee_id
        self.period_start = period_start
        self.period_end = period_end
        super().__init__(
            f"Timesheet for employee {employee_id} ({period_start} to {period_end}) not found"
        )


class PayrunNotFoundError(Exception):
    """Raised when a payrun id is unknown."""

    def __init__(self, payrun_id: UUID):
        self.payrun_id = payrun_id
        super().__init__(f"Payrun {payrun_id} not found")


class PayslipNotFoundError(Exception):
    """Raised when a payrun has no payslip for an employee."""

    def __init__(self, employee_id: str, payrun_id: UUID):
        self.employee_id = employee_id
        self.payrun_id = payrun_id
        super().__init__(f"Payslip for employee {employee_id} in payrun {payrun_id} not found")
