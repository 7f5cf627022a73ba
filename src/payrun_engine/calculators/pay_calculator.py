"""Gross and net pay for hourly employees."""

from __future__ import annotations

from decimal import Decimal

from payrun_engine.calculators.money import round2

OVERTIME_MULTIPLIER = Decimal("1.5")


def calculate_gross_pay(
    normal_hours: Decimal,
    overtime_hours: Decimal,
    base_rate: Decimal,
    allowances: Decimal = Decimal("0"),
) -> Decimal:
    """Calculate gross pay.

    GROSS = normal * rate + overtime * rate * 1.5 + allowances

    Allowances are flat amounts added after the overtime premium.
    """
    normal_pay = normal_hours * base_rate
    overtime_pay = overtime_hours * base_rate * OVERTIME_MULTIPLIER
    return round2(normal_pay + overtime_pay + allowances)


def calculate_net(gross: Decimal, tax: Decimal) -> Decimal:
    """Net pay is gross less income tax. Super is employer-paid and excluded."""
    return round2(gross - tax)
