"""
FastAPI dependency injection.

How this works:
- An endpoint declares `engine: SchedulingEngine = Depends(get_engine)`
- FastAPI calls get_engine() before your endpoint runs
- Your endpoint receives the engine built during startup (see api/main.py)

Tests swap these out with app.dependency_overrides to hand each test a fresh
engine and a ticker that never touches a real clock.
"""

from fastapi import Request

from driver.ticker import SimulationTicker
from scheduler.engine import SchedulingEngine


async def get_engine(request: Request) -> SchedulingEngine:
    """Returns the SchedulingEngine stored on the app during startup."""
    return request.app.state.engine


async def get_ticker(request: Request) -> SimulationTicker:
    """Returns the real-time SimulationTicker stored on the app during startup."""
    return request.app.state.ticker
