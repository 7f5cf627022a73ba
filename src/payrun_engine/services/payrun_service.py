"""Payrun service - request handling around the payroll engine."""

from __future__ import annotations

import logging
from uuid import UUID

from payrun_engine.calculators.engine import PayrollEngine
from payrun_engine.calculators.types import Employee, Payrun, PayrunRequest, Payslip
from payrun_engine.services.errors import (
    EmployeeNotFoundError,
    InvalidPeriodError,
    NoEmployeesError,
    PayrunNotFoundError,
    PayslipNotFoundError,
)
from payrun_engine.services.store import PayrollStore

logger = logging.getLogger(__name__)


class PayrunService:
    """Service for generating and retrieving payruns.

    Operations:
    - generate_payrun: Validate the request, calculate and store a payrun
    - get_payrun / list_payruns: Retrieve stored payruns
    - get_payslip: One employee's payslip from a payrun

    Requests are validated here so the engine only ever sees well-formed
    input: ordered periods and known employees.
    """

    def __init__(self, store: PayrollStore, engine: PayrollEngine | None = None):
        self.store = store
        self.engine = engine or PayrollEngine()

    def generate_payrun(self, request: PayrunRequest) -> Payrun:
        """Generate and store a payrun for the requested period.

        Raises:
            InvalidPeriodError: If the period starts after it ends
            EmployeeNotFoundError: If any requested employee id is unknown
            NoEmployeesError: If there are no employees to pay
        """
        if request.period_start > request.period_end:
            logger.warning(
                "Payrun rejected: invalid period %s to %s",
                request.period_start,
                request.period_end,
            )
            raise InvalidPeriodError(request.period_start, request.period_end)

        employees = self.store.list_employees()

        if request.employee_ids:
            employees = [e for e in employees if e.id in request.employee_ids]
            found = {e.id for e in employees}
            missing = [eid for eid in request.employee_ids if eid not in found]
            if missing:
                logger.warning("Payrun rejected: employees not found %s", missing)
                raise EmployeeNotFoundError(missing)

        if not employees:
            logger.warning("Payrun rejected: no employees")
            raise NoEmployeesError()

        timesheets = self.store.list_timesheets(
            period_start=request.period_start,
            period_end=request.period_end,
        )
        payrun = self.engine.generate_payrun(
            request.period_start,
            request.period_end,
            employees,
            timesheets,
        )
        self.store.save_payrun(payrun)

        logger.info(
            "Payrun %s generated: %d employees, gross %s, net %s",
            payrun.id,
            len(payrun.payslips),
            payrun.totals.gross,
            payrun.totals.net,
        )
        return payrun

    def get_payrun(self, payrun_id: UUID) -> Payrun:
        """Load a payrun or raise PayrunNotFoundError."""
        payrun = self.store.get_payrun(payrun_id)
        if payrun is None:
            raise PayrunNotFoundError(payrun_id)
        return payrun

    def list_payruns(self) -> list[Payrun]:
        return self.store.list_payruns()

    def get_payslip(
        self, employee_id: str, payrun_id: UUID
    ) -> tuple[Payrun, Payslip, Employee | None]:
        """Return the payrun, the employee's payslip within it and the employee.

        The employee is None if they were deleted after the payrun was generated.
        """
        payrun = self.get_payrun(payrun_id)
        payslip = payrun.payslip_for(employee_id)
        if payslip is None:
            raise PayslipNotFoundError(employee_id, payrun_id)
        return payrun, payslip, self.store.get_employee(employee_id)
