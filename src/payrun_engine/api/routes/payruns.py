"""Payrun API endpoints."""

import logging
from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, HTTPException, Path, status

from payrun_engine.api.dependencies import Payruns
from payrun_engine.api.schemas import ErrorResponse, PayrunCreate, PayrunResponse
from payrun_engine.services.errors import (
    EmployeeNotFoundError,
    InvalidPeriodError,
    NoEmployeesError,
    PayrunNotFoundError,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/payruns", tags=["payruns"])


@router.post(
    "",
    response_model=PayrunResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def generate_payrun(service: Payruns, payload: PayrunCreate) -> PayrunResponse:
    """Generate a payrun for a period."""
    try:
        payrun = service.generate_payrun(payload.to_domain())
    except EmployeeNotFoundError as e:
        logger.warning("Payrun rejected: %s", e)
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except (InvalidPeriodError, NoEmployeesError) as e:
        logger.warning("Payrun rejected: %s", e)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return PayrunResponse.from_domain(payrun)


@router.get("", response_model=list[PayrunResponse])
async def list_payruns(service: Payruns) -> list[PayrunResponse]:
    """List payruns, newest first."""
    return [PayrunResponse.from_domain(p) for p in service.list_payruns()]


@router.get(
    "/{payrun_id}",
    response_model=PayrunResponse,
    responses={404: {"model": ErrorResponse}},
)
async def get_payrun(
    service: Payruns,
    payrun_id: Annotated[UUID, Path()],
) -> PayrunResponse:
    """Get a payrun by id."""
    try:
        payrun = service.get_payrun(payrun_id)
    except PayrunNotFoundError as e:
        logger.warning("Payrun lookup failed: %s", e)
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return PayrunResponse.from_domain(payrun)
