"""Business services for payroll operations."""

from payrun_engine.services.payrun_service import PayrunService
from payrun_engine.services.store import PayrollStore
from payrun_engine.services.timesheet_service import TimesheetService

__all__ = [
    "PayrunService",
    "PayrollStore",
    "TimesheetService",
]
