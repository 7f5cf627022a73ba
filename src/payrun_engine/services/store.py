"""In-memory record store for employees, timesheets and payruns.

Records live for the lifetime of the process. Callers run on a single event
loop, so no locking is done here.
"""

from __future__ import annotations

from datetime import date
from uuid import UUID

from payrun_engine.calculators.types import Employee, Payrun, Timesheet


class PayrollStore:
    """Keyed storage for the records the payrun service works with."""

    def __init__(self) -> None:
        self._employees: dict[str, Employee] = {}
        self._timesheets: dict[tuple[str, date, date], Timesheet] = {}
        self._payruns: dict[UUID, Payrun] = {}

    # === Employees ===

    def save_employee(self, employee: Employee) -> bool:
        """Insert or replace an employee. Returns True if it was new."""
        created = employee.id not in self._employees
        self._employees[employee.id] = employee
        return created

    def get_employee(self, employee_id: str) -> Employee | None:
        return self._employees.get(employee_id)

    def list_employees(self) -> list[Employee]:
        """All employees ordered by first name."""
        return sorted(self._employees.values(), key=lambda e: e.first_name)

    def delete_employee(self, employee_id: str) -> bool:
        """Remove an employee and their timesheets. Returns False if unknown."""
        if self._employees.pop(employee_id, None) is None:
            return False
        for key in [k for k in self._timesheets if k[0] == employee_id]:
            del self._timesheets[key]
        return True

    # === Timesheets ===

    def save_timesheet(self, timesheet: Timesheet) -> None:
        """Insert or replace the timesheet for its (employee, period)."""
        self._timesheets[timesheet.key] = timesheet

    def get_timesheet(
        self, employee_id: str, period_start: date, period_end: date
    ) -> Timesheet | None:
        return self._timesheets.get((employee_id, period_start, period_end))

    def list_timesheets(
        self,
        employee_id: str | None = None,
        period_start: date | None = None,
        period_end: date | None = None,
    ) -> list[Timesheet]:
        """Timesheets matching every filter given, newest period first."""
        result = [
            ts
            for ts in self._timesheets.values()
            if (employee_id is None or ts.employee_id == employee_id)
            and (period_start is None or ts.period_start == period_start)
            and (period_end is None or ts.period_end == period_end)
        ]
        return sorted(result, key=lambda ts: ts.period_start, reverse=True)

    def delete_timesheet(self, employee_id: str, period_start: date, period_end: date) -> bool:
        return self._timesheets.pop((employee_id, period_start, period_end), None) is not None

    # === Payruns ===

    def save_payrun(self, payrun: Payrun) -> None:
        self._payruns[payrun.id] = payrun

    def get_payrun(self, payrun_id: UUID) -> Payrun | None:
        return self._payruns.get(payrun_id)

    def list_payruns(self) -> list[Payrun]:
        """All payruns, newest first."""
        return sorted(self._payruns.values(), key=lambda p: p.created_at, reverse=True)
