"""Superannuation contributions."""

from __future__ import annotations

from decimal import Decimal

from payrun_engine.calculators.money import round2
from payrun_engine.calculators.types import DEFAULT_SUPER_RATE


def calculate_super(gross: Decimal, super_rate: Decimal = DEFAULT_SUPER_RATE) -> Decimal:
    """Employer super contribution as a fraction of gross pay."""
    if gross <= 0:
        return Decimal("0")
    return round2(gross * super_rate)
