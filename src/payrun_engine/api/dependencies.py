"""FastAPI dependencies for dependency injection."""

from typing import Annotated

from fastapi import Depends, Request

from payrun_engine.calculators.engine import PayrollEngine
from payrun_engine.services.payrun_service import PayrunService
from payrun_engine.services.store import PayrollStore
from payrun_engine.services.timesheet_service import TimesheetService


def get_store(request: Request) -> PayrollStore:
    """Get the application's record store."""
    return request.app.state.store


def get_engine(request: Request) -> PayrollEngine:
    """Get the application's payroll engine."""
    return request.app.state.engine


def get_payrun_service(
    store: Annotated[PayrollStore, Depends(get_store)],
    engine: Annotated[PayrollEngine, Depends(get_engine)],
) -> PayrunService:
    return PayrunService(store, engine)


def get_timesheet_service(
    store: Annotated[PayrollStore, Depends(get_store)],
) -> TimesheetService:
    return TimesheetService(store)


# Type aliases for cleaner dependency injection
Store = Annotated[PayrollStore, Depends(get_store)]
Payruns = Annotated[PayrunService, Depends(get_payrun_service)]
Timesheets = Annotated[TimesheetService, Depends(get_timesheet_service)]
