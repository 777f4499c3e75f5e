"""
Health check endpoint.

This is the first thing you hit to verify the service is up. It also reports
the simulated clock so you can tell a frozen engine from a live one.
"""

from fastapi import APIRouter, Depends

from api.dependencies import get_engine
from scheduler.engine import SchedulingEngine

router = APIRouter(tags=["health"])


@router.get("/health")
async def health_check(
    engine: SchedulingEngine = Depends(get_engine),
) -> dict:
    """Check that the engine is reachable."""
    return {
        "status": "healthy",
        "policy": engine.policy.value,
        "current_time": engine.current_time,
    }
