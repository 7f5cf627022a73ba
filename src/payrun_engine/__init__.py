"""Payrun engine: hourly payroll calculation."""

__version__ = "0.1.0"
