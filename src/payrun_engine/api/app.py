"""FastAPI application factory."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from payrun_engine.api.routes import (
    employees_router,
    health_router,
    payruns_router,
    payslips_router,
    timesheets_router,
)
from payrun_engine.calculators.engine import PayrollEngine
from payrun_engine.calculators.tax_calculator import (
    DEFAULT_TAX_BRACKETS,
    TaxBracketTable,
    TaxCalculator,
)
from payrun_engine.config import get_settings
from payrun_engine.services.seed import seed_demo_data
from payrun_engine.services.store import PayrollStore

logger = logging.getLogger(__name__)


def build_engine() -> PayrollEngine:
    """Create the payroll engine, using a custom tax table if configured."""
    settings = get_settings()
    table = DEFAULT_TAX_BRACKETS
    if settings.tax_table_path:
        table = TaxBracketTable.from_json_file(settings.tax_table_path)
        logger.info(
            "Loaded %d tax brackets from %s", len(table), settings.tax_table_path
        )
    return PayrollEngine(
        tax_calculator=TaxCalculator(table),
        engine_version=settings.engine_version,
    )


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler."""
    logger.info("Payrun engine %s starting", app.state.engine.engine_version)
    yield
    logger.info("Payrun engine shutting down")


def create_app(
    store: PayrollStore | None = None,
    engine: PayrollEngine | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="Payrun Engine API",
        description="Hourly payroll: timesheets to payslips and payruns",
        version="0.1.0",
        lifespan=lifespan,
    )
    if store is None:
        store = PayrollStore()
        if get_settings().seed_demo_data:
            seed_demo_data(store)
    app.state.store = store
    app.state.engine = engine or build_engine()

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],  # Configure appropriately for production
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Exception handlers
    @app.exception_handler(Exception)
    async def general_exception_handler(
        request: Request, exc: Exception
    ) -> JSONResponse:
        """Handle unexpected exceptions."""
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "detail": "An unexpected error occurred",
                "code": "INTERNAL_ERROR",
            },
        )

    # Include routers
    app.include_router(health_router)
    app.include_router(employees_router, prefix="/api/v1")
    app.include_router(timesheets_router, prefix="/api/v1")
    app.include_router(payruns_router, prefix="/api/v1")
    app.include_router(payslips_router, prefix="/api/v1")

    return app
