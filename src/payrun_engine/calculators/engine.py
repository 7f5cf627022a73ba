"""Payroll calculation engine - main orchestrator."""

from __future__ import annotations

import hashlib
import json
from collections.abc import Callable, Iterable, Sequence
from datetime import date, datetime, timezone
from decimal import Decimal
from uuid import UUID, uuid4

from payrun_engine.calculators.hours import calculate_hours
from payrun_engine.calculators.money import round2
from payrun_engine.calculators.pay_calculator import calculate_gross_pay, calculate_net
from payrun_engine.calculators.superannuation import calculate_super
from payrun_engine.calculators.tax_calculator import TaxCalculator
from payrun_engine.calculators.types import (
    Employee,
    Payrun,
    PayrunTotals,
    Payslip,
    Timesheet,
)
from payrun_engine.config import get_settings


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class PayrollEngine:
    """Main payroll calculation engine.

    Calculation pipeline (stable order per employee):
    1) Worked hours from timesheet entries, split at the overtime threshold
    2) Gross pay (base rate, overtime premium, allowances)
    3) Income tax from gross
    4) Superannuation from gross
    5) Net = gross - tax

    Payslips are then summed into payrun totals. The engine holds no state
    between calls; the clock and id factory are injectable so that a payrun
    can be reproduced exactly.
    """

    def __init__(
        self,
        tax_calculator: TaxCalculator | None = None,
        clock: Callable[[], datetime] | None = None,
        id_factory: Callable[[], UUID] | None = None,
        engine_version: str | None = None,
    ):
        self.tax_calculator = tax_calculator or TaxCalculator()
        self.clock = clock or _utcnow
        self.id_factory = id_factory or uuid4
        self.engine_version = engine_version or get_settings().engine_version

    def calculate_payslip(self, employee: Employee, timesheet: Timesheet) -> Payslip:
        """Calculate pay for a single employee."""
        hours = calculate_hours(timesheet.entries)

        gross = calculate_gross_pay(
            hours.normal_hours,
            hours.overtime_hours,
            employee.base_hourly_rate,
            timesheet.allowances,
        )
        tax = self.tax_calculator.calculate_tax(gross)
        super_ = calculate_super(gross, employee.super_rate)
        net = calculate_net(gross, tax)

        return Payslip(
            employee_id=employee.id,
            normal_hours=hours.normal_hours,
            overtime_hours=hours.overtime_hours,
            gross=gross,
            tax=tax,
            super=super_,
            net=net,
        )

    def generate_payrun(
        self,
        period_start: date,
        period_end: date,
        employees: Sequence[Employee],
        timesheets: Iterable[Timesheet],
    ) -> Payrun:
        """Calculate a payrun with one payslip per employee, in input order.

        A timesheet belongs to the payrun only if its period matches exactly;
        entries are not checked for range containment. Employees without one
        get an all-zero payslip.
        """
        by_key = {}
        for ts in timesheets:
            # First timesheet wins on duplicate keys
            by_key.setdefault(ts.key, ts)

        payslips: list[Payslip] = []
        for employee in employees:
            timesheet = by_key.get((employee.id, period_start, period_end))
            if timesheet is None:
                payslips.append(Payslip.zero(employee.id))
                continue
            payslips.append(self.calculate_payslip(employee, timesheet))

        return Payrun(
            id=self.id_factory(),
            period_start=period_start,
            period_end=period_end,
            totals=self.calculate_totals(payslips),
            payslips=tuple(payslips),
            created_at=self.clock(),
            fingerprint=self._compute_payrun_fingerprint(period_start, period_end, payslips),
        )

    @staticmethod
    def calculate_totals(payslips: Iterable[Payslip]) -> PayrunTotals:
        """Sum payslip fields, rounding each total once at the end."""
        gross = tax = super_ = net = Decimal("0")
        for payslip in payslips:
            gross += payslip.gross
            tax += payslip.tax
            super_ += payslip.super
            net += payslip.net

        return PayrunTotals(
            gross=round2(gross),
            tax=round2(tax),
            super=round2(super_),
            net=round2(net),
        )

    def _compute_payrun_fingerprint(
        self,
        period_start: date,
        period_end: date,
        payslips: Sequence[Payslip],
    ) -> str:
        """Fingerprint of everything a payrun's figures depend on.

        Identical inputs give identical fingerprints even though payrun ids
        and timestamps differ.
        """
        data = {
            "period_start": period_start.isoformat(),
            "period_end": period_end.isoformat(),
            "engine_version": self.engine_version,
            "payslips": [p.to_canonical_dict() for p in payslips],
        }
        json_str = json.dumps(data, sort_keys=True)
        return hashlib.sha256(json_str.encode()).hexdigest()[:32]
