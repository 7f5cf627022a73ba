"""Timesheet service - validated writes to the store."""

from __future__ import annotations

import logging
from datetime import date

from payrun_engine.calculators.types import Timesheet
from payrun_engine.services.errors import (
    EmployeeNotFoundError,
    EntryOutsidePeriodError,
    InvalidPeriodError,
    TimesheetNotFoundError,
)
from payrun_engine.services.store import PayrollStore

logger = logging.getLogger(__name__)


class TimesheetService:
    """Creates, replaces and deletes timesheets."""

    def __init__(self, store: PayrollStore):
        self.store = store

    def save_timesheet(self, timesheet: Timesheet) -> Timesheet:
        """Insert or replace a timesheet after cross-field validation.

        Raises:
            EmployeeNotFoundError: If the employee is unknown
            InvalidPeriodError: If the period starts after it ends
            EntryOutsidePeriodError: If any entry falls outside the period
        """
        if self.store.get_employee(timesheet.employee_id) is None:
            logger.warning("Timesheet rejected: employee %s not found", timesheet.employee_id)
            raise EmployeeNotFoundError([timesheet.employee_id])

        if timesheet.period_start > timesheet.period_end:
            logger.warning(
                "Timesheet rejected: invalid period %s to %s",
                timesheet.period_start,
                timesheet.period_end,
            )
            raise InvalidPeriodError(timesheet.period_start, timesheet.period_end)

        for entry in timesheet.entries:
            if not timesheet.period_start <= entry.date <= timesheet.period_end:
                logger.warning("Timesheet rejected: entry %s outside period", entry.date)
                raise EntryOutsidePeriodError(
                    entry.date, timesheet.period_start, timesheet.period_end
                )

        self.store.save_timesheet(timesheet)
        logger.info(
            "Timesheet saved for employee %s (%s to %s), %d entries",
            timesheet.employee_id,
            timesheet.period_start,
            timesheet.period_end,
            len(timesheet.entries),
        )
        return timesheet

    def delete_timesheet(self, employee_id: str, period_start: date, period_end: date) -> None:
        if not self.store.delete_timesheet(employee_id, period_start, period_end):
            raise TimesheetNotFoundError(employee_id, period_start, period_end)
        logger.info(
            "Timesheet deleted for employee %s (%s to %s)", employee_id, period_start, period_end
        )
