"""
FastAPI application factory.

This file:
1. Creates the FastAPI app
2. Runs startup logic (build the SchedulingEngine and its real-time ticker)
3. Registers all routers (tasks, scheduler, health)
4. Runs shutdown logic (stop the ticker thread)

The `lifespan` context manager is FastAPI's way of handling startup/shutdown.

To run:  uvicorn api.main:app --host 0.0.0.0 --port 8000 --reload
   or:  python -m api.main      (binds to API_HOST / API_PORT from settings)
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from config.settings import settings
from driver.ticker import SimulationTicker
from scheduler.engine import SchedulingEngine
from api.routers import tasks, scheduler, health

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Runs on startup (before yield) and shutdown (after yield).

    Startup:
    - Creates one in-process SchedulingEngine with the configured default policy
    - Creates the SimulationTicker (stopped; POST /scheduler/start runs it)

    Shutdown:
    - Stops the ticker so no tick runs against a half-torn-down app
    """
    # ── Startup ─────────────────────────────────────────────────
    app.state.engine = SchedulingEngine()
    app.state.ticker = SimulationTicker(app.state.engine)
    logger.info(
        f"API ready — policy: {app.state.engine.policy.value}, "
        f"tie-break: {app.state.engine.tie_break.value}"
    )

    yield  # app is running and serving requests between startup and shutdown

    # ── Shutdown ────────────────────────────────────────────────
    app.state.ticker.stop(timeout=5.0)
    logger.info("API shut down")


def create_app() -> FastAPI:
    """Factory function that builds and configures the FastAPI application."""
    app = FastAPI(
        title="CPU Scheduling Simulator",
        description="Tick-driven CPU scheduling simulation (SJF, Priority, FCFS)",
        version="1.0.0",
        lifespan=lifespan,
    )

    # Register routers: each one adds its endpoints to the app
    app.include_router(health.router)
    app.include_router(tasks.router)
    app.include_router(scheduler.router)

    return app


# This is what uvicorn imports: `uvicorn api.main:app`
app = create_app()


def main() -> None:
    """Serve the API on the configured host and port."""
    logger.info(f"Starting API on {settings.API_HOST}:{settings.API_PORT}")
    uvicorn.run(app, host=settings.API_HOST, port=settings.API_PORT)


if __name__ == "__main__":
    main()
