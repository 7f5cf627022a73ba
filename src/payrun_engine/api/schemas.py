"""Pydantic schemas for API request/response models."""

import datetime as dt
from decimal import Decimal
from typing import Literal
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from payrun_engine.calculators.types import (
    DEFAULT_SUPER_RATE,
    BankDetails,
    Employee,
    EmploymentType,
    Payrun,
    PayrunRequest,
    Payslip,
    Timesheet,
    TimesheetEntry,
)


class ErrorResponse(BaseModel):
    """Schema for error responses."""

    detail: str


# ============================================================================
# Employee schemas
# ============================================================================


class BankDetailsSchema(BaseModel):
    """Bank account for payment."""

    model_config = ConfigDict(from_attributes=True)

    bsb: str = Field(pattern=r"^\d{3}-\d{3}$")
    account: str = Field(min_length=6)


class EmployeeBase(BaseModel):
    """Shared employee fields."""

    model_config = ConfigDict(from_attributes=True)

    id: str = Field(min_length=1)
    first_name: str = Field(min_length=1)
    last_name: str = Field(min_length=1)
    employment_type: Literal["hourly"] = "hourly"
    base_hourly_rate: Decimal = Field(gt=0)
    super_rate: Decimal = Field(default=DEFAULT_SUPER_RATE, ge=0, le=1)
    bank: BankDetailsSchema | None = None


class EmployeeCreate(EmployeeBase):
    """Schema for creating or updating an employee."""

    def to_domain(self) -> Employee:
        return Employee(
            id=self.id,
            first_name=self.first_name,
            last_name=self.last_name,
            employment_type=EmploymentType(self.employment_type),
            base_hourly_rate=self.base_hourly_rate,
            super_rate=self.super_rate,
            bank=BankDetails(bsb=self.bank.bsb, account=self.bank.account) if self.bank else None,
        )


class EmployeeResponse(EmployeeBase):
    """Schema for employee response."""

    @classmethod
    def from_domain(cls, employee: Employee) -> "EmployeeResponse":
        return cls(
            id=employee.id,
            first_name=employee.first_name,
            last_name=employee.last_name,
            employment_type=employee.employment_type.value,
            base_hourly_rate=employee.base_hourly_rate,
            super_rate=employee.super_rate,
            bank=BankDetailsSchema.model_validate(employee.bank) if employee.bank else None,
        )


# ============================================================================
# Timesheet schemas
# ============================================================================


class TimesheetEntrySchema(BaseModel):
    """One shift."""

    model_config = ConfigDict(from_attributes=True)

    date: dt.date
    start: str = Field(pattern=r"^\d{2}:\d{2}$")
    end: str = Field(pattern=r"^\d{2}:\d{2}$")
    unpaid_break_minutes: int = Field(default=0, ge=0)


class TimesheetBase(BaseModel):
    """Shared timesheet fields."""

    model_config = ConfigDict(from_attributes=True)

    employee_id: str = Field(min_length=1)
    period_start: dt.date
    period_end: dt.date
    entries: list[TimesheetEntrySchema] = Field(default_factory=list)
    allowances: Decimal = Field(default=Decimal("0"), ge=0)


class TimesheetCreate(TimesheetBase):
    """Schema for creating or replacing a timesheet."""

    def to_domain(self) -> Timesheet:
        return Timesheet(
            employee_id=self.employee_id,
            period_start=self.period_start,
            period_end=self.period_end,
            entries=tuple(
                TimesheetEntry(
                    date=e.date,
                    start=e.start,
                    end=e.end,
                    unpaid_break_minutes=e.unpaid_break_minutes,
                )
                for e in self.entries
            ),
            allowances=self.allowances,
        )


class TimesheetResponse(TimesheetBase):
    """Schema for timesheet response."""


# ============================================================================
# Payrun schemas
# ============================================================================


class PayrunCreate(BaseModel):
    """Schema for generating a payrun.

    Omit ``employee_ids`` (or send an empty list) to pay every employee.
    """

    period_start: dt.date
    period_end: dt.date
    employee_ids: list[str] | None = None

    def to_domain(self) -> PayrunRequest:
        return PayrunRequest(
            period_start=self.period_start,
            period_end=self.period_end,
            employee_ids=self.employee_ids,
        )


class PayslipResponse(BaseModel):
    """Schema for one payslip within a payrun."""

    model_config = ConfigDict(from_attributes=True)

    employee_id: str
    normal_hours: Decimal
    overtime_hours: Decimal
    gross: Decimal
    tax: Decimal
    super: Decimal
    net: Decimal


class PayrunTotalsResponse(BaseModel):
    """Schema for payrun totals."""

    model_config = ConfigDict(from_attributes=True)

    gross: Decimal
    tax: Decimal
    super: Decimal
    net: Decimal


class PayrunResponse(BaseModel):
    """Schema for payrun response."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    period_start: dt.date
    period_end: dt.date
    totals: PayrunTotalsResponse
    payslips: list[PayslipResponse]
    created_at: dt.datetime
    fingerprint: str

    @classmethod
    def from_domain(cls, payrun: Payrun) -> "PayrunResponse":
        return cls.model_validate(payrun)


class PayslipEmployeeResponse(BaseModel):
    """Name of the employee a payslip belongs to."""

    model_config = ConfigDict(from_attributes=True)

    first_name: str
    last_name: str


class PayslipDetailResponse(PayslipResponse):
    """Schema for a single payslip looked up by employee and payrun.

    ``employee`` is null once the employee has been deleted.
    """

    payrun_id: UUID
    period_start: dt.date
    period_end: dt.date
    employee: PayslipEmployeeResponse | None = None

    @classmethod
    def from_domain(
        cls, payrun: Payrun, payslip: Payslip, employee: Employee | None = None
    ) -> "PayslipDetailResponse":
        return cls(
            employee=PayslipEmployeeResponse.model_validate(employee) if employee else None,
            payrun_id=payrun.id,
            period_start=payrun.period_start,
            period_end=payrun.period_end,
            **PayslipResponse.model_validate(payslip).model_dump(),
        )
