"""
Shared test fixtures.

These replace the app's startup wiring with lightweight per-test instances:
- SchedulingEngine → a fresh engine per test (no shared clock between tests)
- SimulationTicker → a real ticker with a tiny interval, always stopped on teardown
- HTTP server → httpx.AsyncClient with ASGI transport (no network)

This means tests:
- Run in milliseconds (no real-time pacing unless a test starts the ticker)
- Are fully isolated (each test gets a fresh engine)
"""

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from api.dependencies import get_engine, get_ticker
from api.main import create_app
from driver.ticker import SimulationTicker
from models.enums import SchedulingPolicy, TieBreak
from scheduler.engine import SchedulingEngine


@pytest.fixture
def engine():
    """A fresh SJF engine with the default tie-break."""
    return SchedulingEngine(policy=SchedulingPolicy.SJF, tie_break=TieBreak.HEAP)


@pytest.fixture
def ticker(engine):
    t = SimulationTicker(engine, interval=0.01)
    yield t
    t.stop(timeout=1.0)


@pytest_asyncio.fixture
async def client(engine, ticker):
    """
    Create a test HTTP client that talks directly to the FastAPI app.

    dependency_overrides tells FastAPI: "instead of using the engine built in
    the lifespan, use these test versions." ASGITransport means requests go
    directly to the app in-process, no HTTP server or network involved.
    """
    app = create_app()

    async def override_get_engine():
        return engine

    async def override_get_ticker():
        return ticker

    app.dependency_overrides[get_engine] = override_get_engine
    app.dependency_overrides[get_ticker] = override_get_ticker

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
