"""Rounding helpers shared by the calculators.

All amounts are rounded half-up to two decimal places: currency to cents,
hours to hundredths of an hour.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

OUTPUT_PRECISION = Decimal("0.01")


def round2(value: Decimal | int) -> Decimal:
    """Round to 2 decimal places (half-up)."""
    return Decimal(value).quantize(OUTPUT_PRECISION, rounding=ROUND_HALF_UP)

