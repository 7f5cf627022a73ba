"""Payslip API endpoints."""

import logging
from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, HTTPException, Path, status

from payrun_engine.api.dependencies import Payruns
from payrun_engine.api.schemas import ErrorResponse, PayslipDetailResponse
from payrun_engine.services.errors import PayrunNotFoundError, PayslipNotFoundError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/payslips", tags=["payslips"])


@router.get(
    "/{employee_id}/{payrun_id}",
    response_model=PayslipDetailResponse,
    responses={404: {"model": ErrorResponse}},
)
async def get_payslip(
    service: Payruns,
    employee_id: str,
    payrun_id: Annotated[UUID, Path()],
) -> PayslipDetailResponse:
    """Get one employee's payslip from a payrun, with the employee's name."""
    try:
        payrun, payslip, employee = service.get_payslip(employee_id, payrun_id)
    except (PayrunNotFoundError, PayslipNotFoundError) as e:
        logger.warning("Payslip lookup failed: %s", e)
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return PayslipDetailResponse.from_domain(payrun, payslip, employee)
