"""Employee API endpoints."""

import logging

from fastapi import APIRouter, HTTPException, status

from payrun_engine.api.dependencies import Store
from payrun_engine.api.schemas import EmployeeCreate, EmployeeResponse, ErrorResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/employees", tags=["employees"])


@router.get("", response_model=list[EmployeeResponse])
async def list_employees(store: Store) -> list[EmployeeResponse]:
    """List all employees ordered by first name."""
    return [EmployeeResponse.from_domain(e) for e in store.list_employees()]


@router.get(
    "/{employee_id}",
    response_model=EmployeeResponse,
    responses={404: {"model": ErrorResponse}},
)
async def get_employee(store: Store, employee_id: str) -> EmployeeResponse:
    """Get an employee by id."""
    employee = store.get_employee(employee_id)
    if employee is None:
        logger.warning("Employee %s not found", employee_id)
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Employee {employee_id} not found",
        )
    return EmployeeResponse.from_domain(employee)


@router.post(
    "",
    response_model=EmployeeResponse,
    status_code=status.HTTP_201_CREATED,
)
async def save_employee(store: Store, payload: EmployeeCreate) -> EmployeeResponse:
    """Create an employee, or replace the one with the same id."""
    employee = payload.to_domain()
    created = store.save_employee(employee)
    logger.info("Employee %s %s", employee.id, "created" if created else "updated")
    return EmployeeResponse.from_domain(employee)


@router.delete(
    "/{employee_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={404: {"model": ErrorResponse}},
)
async def delete_employee(store: Store, employee_id: str) -> None:
    """Delete an employee and their timesheets."""
    if not store.delete_employee(employee_id):
        logger.warning("Employee %s not found for delete", employee_id)
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Employee {employee_id} not found",
        )
    logger.info("Employee %s deleted", employee_id)
