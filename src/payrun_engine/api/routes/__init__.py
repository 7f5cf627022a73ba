"""API routes."""

from payrun_engine.api.routes.employees import router as employees_router
from payrun_engine.api.routes.health import router as health_router
from payrun_engine.api.routes.payruns import router as payruns_router
from payrun_engine.api.routes.payslips import router as payslips_router
from payrun_engine.api.routes.timesheets import router as timesheets_router

__all__ = [
    "employees_router",
    "health_router",
    "payruns_router",
    "payslips_router",
    "timesheets_router",
]
