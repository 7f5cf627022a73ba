"""Timesheet API endpoints."""

import logging
from datetime import date

from fastapi import APIRouter, HTTPException, status

from payrun_engine.api.dependencies import Store, Timesheets
from payrun_engine.api.schemas import ErrorResponse, TimesheetCreate, TimesheetResponse
from payrun_engine.services.errors import (
    EmployeeNotFoundError,
    EntryOutsidePeriodError,
    InvalidPeriodError,
    TimesheetNotFoundError,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/timesheets", tags=["timesheets"])


@router.get("", response_model=list[TimesheetResponse])
async def list_timesheets(
    store: Store,
    employee_id: str | None = None,
    period_start: date | None = None,
    period_end: date | None = None,
) -> list[TimesheetResponse]:
    """List timesheets, optionally filtered by employee and period."""
    timesheets = store.list_timesheets(employee_id, period_start, period_end)
    return [TimesheetResponse.model_validate(ts) for ts in timesheets]


@router.post(
    "",
    response_model=TimesheetResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def save_timesheet(service: Timesheets, payload: TimesheetCreate) -> TimesheetResponse:
    """Create or replace the timesheet for an employee and period."""
    try:
        timesheet = service.save_timesheet(payload.to_domain())
    except EmployeeNotFoundError as e:
        logger.warning("Timesheet rejected: %s", e)
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except (InvalidPeriodError, EntryOutsidePeriodError) as e:
        logger.warning("Timesheet rejected: %s", e)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return TimesheetResponse.model_validate(timesheet)


@router.delete(
    "/{employee_id}/{period_start}/{period_end}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={404: {"model": ErrorResponse}},
)
async def delete_timesheet(
    service: Timesheets,
    employee_id: str,
    period_start: date,
    period_end: date,
) -> None:
    """Delete a timesheet."""
    try:
        service.delete_timesheet(employee_id, period_start, period_end)
    except TimesheetNotFoundError as e:
        logger.warning("Timesheet delete failed: %s", e)
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
