"""Payroll calculation engine."""

from payrun_engine.calculators.engine import PayrollEngine
from payrun_engine.calculators.hours import (
    MalformedTimeError,
    calculate_hours,
    calculate_worked_minutes,
    minutes_to_hours,
    parse_time_to_minutes,
)
from payrun_engine.calculators.pay_calculator import calculate_gross_pay, calculate_net
from payrun_engine.calculators.superannuation import calculate_super
from payrun_engine.calculators.tax_calculator import (
    DEFAULT_TAX_BRACKETS,
    InvalidTaxTableError,
    TaxBracketTable,
    TaxCalculator,
    calculate_tax,
)

__all__ = [
    "PayrollEngine",
    "MalformedTimeError",
    "calculate_hours",
    "calculate_worked_minutes",
    "minutes_to_hours",
    "parse_time_to_minutes",
    "calculate_gross_pay",
    "calculate_net",
    "calculate_super",
    "DEFAULT_TAX_BRACKETS",
    "InvalidTaxTableError",
    "TaxBracketTable",
    "TaxCalculator",
    "calculate_tax",
]
