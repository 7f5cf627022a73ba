"""Integration test fixtures running the API in-process."""

from collections.abc import AsyncGenerator

import pytest
import pytest_asyncio
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from payrun_engine.api.app import create_app
from payrun_engine.calculators.engine import PayrollEngine
from payrun_engine.services.store import PayrollStore


@pytest.fixture
def app(store: PayrollStore) -> FastAPI:
    """Application over the seeded store."""
    return create_app(store=store, engine=PayrollEngine(engine_version="test"))


@pytest_asyncio.fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """Get async HTTP client for API tests."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest_asyncio.fixture
async def empty_client() -> AsyncGenerator[AsyncClient, None]:
    """Client for an application with no employees."""
    app = create_app(store=PayrollStore(), engine=PayrollEngine(engine_version="test"))
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
